"""Base class for all statement-text dialects."""

from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Optional

from fints_statement.core.exceptions import MT940ParseError
from fints_statement.domain.statement.services import ParsedFragment


class BaseStatementDialect(ABC):
    """Abstract base class for institution-specific statement grammars."""

    def __init__(self, default_currency: str = "EUR", compute_running_balance: bool = True):
        """
        Args:
            default_currency: Currency for records without an opening balance
            compute_running_balance: Derive balance-after-booking from the opening balance
        """
        self.default_currency = default_currency
        self.compute_running_balance = compute_running_balance

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Return the dialect name (e.g., 'MT940', 'Sparda')."""
        pass

    @abstractmethod
    def parse(self, text: str) -> ParsedFragment:
        """
        Parse the statement text of one response fragment.

        Args:
            text: Raw statement text

        Returns:
            Bookings of the fragment in statement order, plus reported balances

        Raises:
            MT940ParseError: If the text does not follow the dialect's grammar
        """
        pass

    # Helper methods available to all dialects

    @staticmethod
    def parse_amount(raw: str, tag: str = None) -> Decimal:
        """Convert a SWIFT amount ('1234,56') to Decimal."""
        txt = raw.strip()
        if not txt or txt.count(",") != 1:
            raise MT940ParseError(f"Invalid amount '{raw}'", tag=tag)
        try:
            return Decimal(txt.replace(",", "."))
        except InvalidOperation:
            raise MT940ParseError(f"Invalid amount '{raw}'", tag=tag)

    @staticmethod
    def parse_short_date(raw: str, tag: str = None) -> date:
        """Convert YYMMDD to a date. Two-digit years below 70 are in the 2000s."""
        try:
            yy, mm, dd = int(raw[0:2]), int(raw[2:4]), int(raw[4:6])
            year = 2000 + yy if yy < 70 else 1900 + yy
            return date(year, mm, dd)
        except (ValueError, IndexError):
            raise MT940ParseError(f"Invalid date '{raw}'", tag=tag)

    @staticmethod
    def parse_entry_date(raw: Optional[str], value_date: date, tag: str = None) -> date:
        """
        Convert an MMDD entry date, taking the year from the value date.

        Entry and value date may straddle a year boundary, e.g. a booking on
        Dec 31st valued on Jan 2nd.
        """
        if not raw:
            return value_date
        try:
            month, day = int(raw[0:2]), int(raw[2:4])
            year = value_date.year
            if value_date.month == 1 and month == 12:
                year -= 1
            elif value_date.month == 12 and month == 1:
                year += 1
            return date(year, month, day)
        except (ValueError, IndexError):
            raise MT940ParseError(f"Invalid entry date '{raw}'", tag=tag)
