"""Pydantic schemas for the statement API."""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from fints_statement.domain.statement.models import (
    AccountRef,
    ActionResponse,
    CapabilitySet,
    StatementOfAccount,
    StatementRequest,
)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    timestamp: datetime = Field(default_factory=datetime.now, description="Health check timestamp")


class BuildRequestBody(BaseModel):
    """Input for building a statement request."""

    bank_name: Optional[str] = Field(None, description="Display name of the institution from the BPD")
    capabilities: CapabilitySet = Field(..., description="Statement parameters advertised by the bank")
    account: AccountRef
    from_date: Optional[date] = None
    to_date: Optional[date] = None
    all_accounts: bool = False


class BuildRequestResponse(BaseModel):
    """The built request plus the suspended operation needed to process the answer."""

    request: StatementRequest
    operation: str = Field(..., description="Serialized operation, pass back to /process")


class ProcessResponseBody(BaseModel):
    """A bank response to interpret for a previously built operation."""

    operation: str = Field(..., description="Serialized operation from /request")
    response: ActionResponse
    request_segment_numbers: Optional[List[int]] = Field(
        None,
        description="Segment numbers assigned by the transport, if the request was split"
    )


class StatementResponse(BaseModel):
    """Result of processing a response."""

    success: bool = True
    bank_name: Optional[str] = None
    dialect: str
    booking_count: int = Field(0, description="Number of bookings in the statement")
    statement: StatementOfAccount


class SupportedDialectsResponse(BaseModel):
    markers: List[str]
    default: str
