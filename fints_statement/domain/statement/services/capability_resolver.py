"""
Capability Resolver Service - picks the statement request version to use.
"""
from typing import Iterable, Optional

from fints_statement.core.exceptions import UnsupportedVersion
from fints_statement.shared.utils.logging_config import get_logger

from ..models.capability import CapabilitySet

logger = get_logger(__name__)

KNOWN_VERSIONS = (4, 5, 6, 7)


class CapabilityResolver:
    """Returns the highest version both the bank and this client support."""

    def __init__(self, known_versions: Optional[Iterable[int]] = None):
        self.known_versions = frozenset(KNOWN_VERSIONS if known_versions is None else known_versions)

    def resolve(self, capabilities: Optional[CapabilitySet]) -> int:
        """
        Args:
            capabilities: Bank parameters for the statement operation, or None
                when the bank sent none

        Returns:
            The version to encode the request with

        Raises:
            UnsupportedVersion: If no advertised version is known to this client
        """
        if capabilities is None:
            raise UnsupportedVersion("The bank does not advertise the statement operation")

        candidates = [v for v in capabilities.advertised_versions if v in self.known_versions]
        if not candidates:
            raise UnsupportedVersion(
                f"Unsupported statement request version(s): {capabilities.advertised_versions}",
                advertised=list(capabilities.advertised_versions)
            )

        version = max(candidates)
        logger.debug(f"Resolved statement request version {version} from {capabilities.advertised_versions}")
        return version
