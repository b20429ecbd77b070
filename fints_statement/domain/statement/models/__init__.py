"""Domain models for statement retrieval."""

from .account import AccountRef, BankIdentifier, DateRange, OperationRequest
from .capability import CapabilitySet, STATEMENT_OPERATION, STATEMENT_PARAMETERS
from .request_variant import (
    SimpleAccount,
    ExtendedAccount,
    InternationalAccount,
    StatementRequest,
    StatementRequestV4,
    StatementRequestV5,
    StatementRequestV6,
    StatementRequestV7,
)
from .response import ActionResponse, ResponseFragment, StatusCode, StatusSignal
from .statement import Balance, Booking, CounterParty, CreditDebit, StatementOfAccount

__all__ = [
    "AccountRef",
    "BankIdentifier",
    "DateRange",
    "OperationRequest",
    "CapabilitySet",
    "STATEMENT_OPERATION",
    "STATEMENT_PARAMETERS",
    "SimpleAccount",
    "ExtendedAccount",
    "InternationalAccount",
    "StatementRequest",
    "StatementRequestV4",
    "StatementRequestV5",
    "StatementRequestV6",
    "StatementRequestV7",
    "ActionResponse",
    "ResponseFragment",
    "StatusCode",
    "StatusSignal",
    "Balance",
    "Booking",
    "CounterParty",
    "CreditDebit",
    "StatementOfAccount",
]
