"""Institution-specific statement-text dialects."""

from .base_dialect import BaseStatementDialect
from .mt940_dialect import MT940Dialect
from .sparda_dialect import SpardaMT940Dialect
from .postbank_dialect import PostbankMT940Dialect
from .dialect_selector import DialectSelector

__all__ = ["BaseStatementDialect", "MT940Dialect", "SpardaMT940Dialect", "PostbankMT940Dialect", "DialectSelector"]
