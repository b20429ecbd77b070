"""Selects the statement-text dialect from the responding institution's name."""

from typing import List, Optional, Tuple, Type

from fints_statement.core.config import get_config
from fints_statement.shared.utils.logging_config import get_logger

from .base_dialect import BaseStatementDialect
from .mt940_dialect import MT940Dialect
from .postbank_dialect import PostbankMT940Dialect
from .sparda_dialect import SpardaMT940Dialect

logger = get_logger(__name__)


class DialectSelector:
    """Maps an institution name to exactly one dialect."""

    # (marker, dialect) pairs, matched case-insensitively as substrings of the
    # institution name. First match wins; add new dialects here.
    _dialects: List[Tuple[str, Type[BaseStatementDialect]]] = [
        ("sparda", SpardaMT940Dialect),
        ("postbank", PostbankMT940Dialect),
    ]
    _default: Type[BaseStatementDialect] = MT940Dialect

    @classmethod
    def get_dialect_class(cls, bank_name: Optional[str]) -> Type[BaseStatementDialect]:
        """
        Args:
            bank_name: Display name of the responding institution (may be None)

        Returns:
            The dialect class for the first matching marker, or the generic MT940 dialect
        """
        name = (bank_name or "").lower()
        for marker, dialect in cls._dialects:
            if marker in name:
                return dialect
        return cls._default

    @classmethod
    def get_dialect(cls, bank_name: Optional[str]) -> BaseStatementDialect:
        """Instantiate the dialect for ``bank_name`` with the configured parsing settings."""
        parsing = get_config().parsing
        dialect = cls.get_dialect_class(bank_name)(
            default_currency=parsing.default_currency,
            compute_running_balance=parsing.compute_running_balance
        )
        logger.debug(f"Selected {dialect.dialect_name} dialect for '{bank_name}'")
        return dialect

    @classmethod
    def get_supported_dialects(cls) -> List[str]:
        """Get the markers with a dedicated dialect."""
        return [marker for marker, _ in cls._dialects]
