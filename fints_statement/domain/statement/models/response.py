"""Domain models for what the bank sends back."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class StatusCode:
    """Well-known status (Rueckmeldung) codes."""

    NOT_AVAILABLE = 3010  # No entries for the requested range
    TOUCHDOWN = 3040  # More data available, continuation required


class StatusSignal(BaseModel):
    """Out-of-band status code from the response envelope."""

    model_config = ConfigDict(frozen=True)

    code: int = Field(..., description="Four-digit status code")
    text: str = Field("", description="Human-readable status text")
    reference_segment: Optional[int] = Field(None, description="Request segment the code refers to")
    parameters: List[str] = Field(default_factory=list)


class ResponseFragment(BaseModel):
    """One returned statement segment (HIKAZ) with its position."""

    model_config = ConfigDict(frozen=True)

    segment_number: int = Field(..., ge=1, description="Position of the segment in the response")
    reference_segment: Optional[int] = Field(None, description="Request segment this answers")
    booked: str = Field("", description="Booked transactions as statement text")
    pending: Optional[str] = Field(None, description="Not yet booked transactions, if sent")


class ActionResponse(BaseModel):
    """The part of a bank response that belongs to one operation."""

    model_config = ConfigDict(frozen=True)

    fragments: List[ResponseFragment] = Field(default_factory=list)
    status_signals: List[StatusSignal] = Field(default_factory=list)

    def find_status(self, code: int) -> Optional[StatusSignal]:
        for signal in self.status_signals:
            if signal.code == code:
                return signal
        return None
