"""
In-memory bank parameter data.

Holds the parameters a dialog layer extracted from the bank's BPD, or fixed
values for tests and offline use.
"""
from typing import Dict, Iterable, Optional

from fints_statement.domain.statement.models import CapabilitySet, STATEMENT_PARAMETERS
from fints_statement.shared.utils.logging_config import get_logger

logger = get_logger(__name__)


class StaticBankParameterData:
    """Bank parameter data backed by a dict of parameter segment -> CapabilitySet."""

    def __init__(self, bank_name: Optional[str], capabilities: Optional[Dict[str, CapabilitySet]] = None):
        self._bank_name = bank_name
        self._capabilities: Dict[str, CapabilitySet] = dict(capabilities or {})

    @classmethod
    def for_statements(
        cls,
        bank_name: Optional[str],
        versions: Iterable[int],
        all_accounts_permitted: bool = False
    ) -> "StaticBankParameterData":
        """Shortcut for a bank that only advertises the statement operation."""
        return cls(bank_name, {
            STATEMENT_PARAMETERS: CapabilitySet(
                advertised_versions=list(versions),
                all_accounts_permitted=all_accounts_permitted
            )
        })

    @property
    def bank_name(self) -> Optional[str]:
        return self._bank_name

    def get_capabilities(self, parameter_segment: str) -> Optional[CapabilitySet]:
        capabilities = self._capabilities.get(parameter_segment)
        if capabilities is None:
            logger.warning(f"No bank parameters for {parameter_segment} from '{self._bank_name}'")
        return capabilities
