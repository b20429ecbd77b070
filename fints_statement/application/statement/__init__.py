"""Statement of account retrieval (application layer)."""

from .get_statement_of_account import GetStatementOfAccount, OperationSnapshot, OperationState
from .interfaces import IBankParameterData, IStatementTransport
from .statement_service import StatementService

__all__ = [
    "GetStatementOfAccount",
    "OperationSnapshot",
    "OperationState",
    "IBankParameterData",
    "IStatementTransport",
    "StatementService",
]
