"""
Response Validator Service - decides whether a bank response can be parsed.
"""
from enum import Enum
from typing import Iterable, Optional, Sequence

from fints_statement.core.exceptions import IncompleteResponse
from fints_statement.shared.utils.logging_config import get_logger

from ..models.response import ResponseFragment, StatusCode, StatusSignal

logger = get_logger(__name__)


class ResponseVerdict(str, Enum):
    """Outcome of validating one response."""
    EMPTY = "empty"          # Bank signalled that no data exists
    COMPLETE = "complete"    # Every request segment was answered


class ResponseValidator:
    """
    Tells a legitimately empty answer apart from a truncated one.

    Both look like a short fragment list; the "no data available" status
    signal is the only discriminator.
    """

    def __init__(self, no_data_codes: Optional[Iterable[int]] = None):
        if no_data_codes is None:
            no_data_codes = (StatusCode.NOT_AVAILABLE,)
        self.no_data_codes = frozenset(no_data_codes)

    def validate(
        self,
        fragments: Sequence[ResponseFragment],
        requested_segments: int,
        status_signals: Sequence[StatusSignal] = ()
    ) -> ResponseVerdict:
        """
        Args:
            fragments: Statement segments found in the response
            requested_segments: Number of segments sent in the request
            status_signals: Status codes from the response envelope

        Returns:
            ResponseVerdict.EMPTY or ResponseVerdict.COMPLETE

        Raises:
            IncompleteResponse: Fewer fragments than request segments and no
                no-data signal
        """
        if any(signal.code in self.no_data_codes for signal in status_signals):
            logger.info("Bank reports no statement data for the requested range")
            return ResponseVerdict.EMPTY

        if len(fragments) < requested_segments:
            raise IncompleteResponse(
                f"Only got {len(fragments)} statement response segments!",
                expected=requested_segments,
                received=len(fragments)
            )

        return ResponseVerdict.COMPLETE
