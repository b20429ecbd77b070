"""
Statement Assembler Service - merges parsed fragments into one statement.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from fints_statement.shared.utils.logging_config import get_logger

from ..models.statement import Balance, Booking, StatementOfAccount

logger = get_logger(__name__)


@dataclass
class ParsedFragment:
    """Bookings and reported balances parsed from one response fragment."""
    bookings: List[Booking] = field(default_factory=list)
    opening_balance: Optional[Balance] = None
    closing_balance: Optional[Balance] = None


class StatementAssembler:
    """
    Concatenates fragments in arrival order.

    The bank sends non-overlapping windows already in presentation order,
    so there is no global re-sort and no de-duplication.
    """

    def assemble(self, fragments: Sequence[ParsedFragment]) -> StatementOfAccount:
        """
        Args:
            fragments: Parsed fragments in the order the bank sent them

        Returns:
            StatementOfAccount whose length is the sum of the fragment lengths
        """
        bookings: List[Booking] = []
        opening: Optional[Balance] = None
        closing: Optional[Balance] = None

        for fragment in fragments:
            bookings.extend(fragment.bookings)
            if opening is None and fragment.opening_balance is not None:
                opening = fragment.opening_balance
            if fragment.closing_balance is not None:
                closing = fragment.closing_balance

        logger.info(f"Assembled statement with {len(bookings)} bookings from {len(fragments)} fragments")
        return StatementOfAccount(
            bookings=tuple(bookings),
            opening_balance=opening,
            closing_balance=closing
        )
