from .models import (
    AccountRef,
    ActionResponse,
    Booking,
    CapabilitySet,
    DateRange,
    OperationRequest,
    ResponseFragment,
    StatementOfAccount,
    StatementRequest,
    StatusSignal,
)

from .services import (
    CapabilityResolver,
    ParsedFragment,
    RequestVariantFactory,
    ResponseValidator,
    StatementAssembler,
)

__all__ = [
    # Models
    "AccountRef",
    "ActionResponse",
    "Booking",
    "CapabilitySet",
    "DateRange",
    "OperationRequest",
    "ResponseFragment",
    "StatementOfAccount",
    "StatementRequest",
    "StatusSignal",
    # Services
    "CapabilityResolver",
    "ParsedFragment",
    "RequestVariantFactory",
    "ResponseValidator",
    "StatementAssembler",
]
