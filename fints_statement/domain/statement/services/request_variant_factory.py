"""
Request Variant Factory - builds the wire-format statement request.
"""
from typing import Callable, Dict

from fints_statement.core.exceptions import PolicyViolation, UnsupportedVersion
from fints_statement.shared.utils.logging_config import get_logger

from ..models.account import OperationRequest
from ..models.capability import CapabilitySet
from ..models.request_variant import (
    ExtendedAccount,
    InternationalAccount,
    SimpleAccount,
    StatementRequest,
    StatementRequestV4,
    StatementRequestV5,
    StatementRequestV6,
    StatementRequestV7,
)

logger = get_logger(__name__)


def _build_v4(request: OperationRequest) -> StatementRequestV4:
    # V4 has no all-accounts field; the flag is dropped
    return StatementRequestV4(
        account=SimpleAccount.from_account(request.account),
        from_date=request.range.from_date,
        to_date=request.range.to_date,
    )


def _build_v5(request: OperationRequest) -> StatementRequestV5:
    return StatementRequestV5(
        account=ExtendedAccount.from_account(request.account),
        all_accounts=request.include_all_accounts,
        from_date=request.range.from_date,
        to_date=request.range.to_date,
    )


def _build_v6(request: OperationRequest) -> StatementRequestV6:
    return StatementRequestV6(
        account=ExtendedAccount.from_account(request.account),
        all_accounts=request.include_all_accounts,
        from_date=request.range.from_date,
        to_date=request.range.to_date,
    )


def _build_v7(request: OperationRequest) -> StatementRequestV7:
    return StatementRequestV7(
        account=InternationalAccount.from_account(request.account),
        all_accounts=request.include_all_accounts,
        from_date=request.range.from_date,
        to_date=request.range.to_date,
    )


class RequestVariantFactory:
    """Maps a resolved version to exactly one request variant. No fallback between versions."""

    _builders: Dict[int, Callable[[OperationRequest], StatementRequest]] = {
        4: _build_v4,
        5: _build_v5,
        6: _build_v6,
        7: _build_v7,
    }

    @classmethod
    def supported_versions(cls):
        return sorted(cls._builders)

    @classmethod
    def check_policy(cls, request: OperationRequest, capabilities: CapabilitySet) -> None:
        """Raise PolicyViolation when the request asks for more than the bank permits."""
        if request.include_all_accounts and not capabilities.all_accounts_permitted:
            raise PolicyViolation(
                "The bank does not permit the use of all_accounts=True",
                details=f"operation {capabilities.operation}"
            )

    @classmethod
    def build(
        cls,
        version: int,
        request: OperationRequest,
        capabilities: CapabilitySet
    ) -> StatementRequest:
        """
        Build the request for the given version.

        Args:
            version: Version returned by the CapabilityResolver
            request: The caller's account and date selection (not modified)
            capabilities: Bank parameters, used for the policy check

        Returns:
            The request variant tagged with ``version``

        Raises:
            PolicyViolation: all accounts requested but not permitted
            UnsupportedVersion: version has no encoding
        """
        cls.check_policy(request, capabilities)

        builder = cls._builders.get(version)
        if builder is None:
            raise UnsupportedVersion(f"Unsupported statement request version: {version}", advertised=[version])

        variant = builder(request)
        logger.info(
            f"Built statement request v{variant.version}",
            extra={"version": variant.version, "type": type(variant.account).__name__}
        )
        return variant
