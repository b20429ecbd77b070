# fints_statement/application/statement/interfaces.py
"""
Contracts for the collaborators the statement operation talks to.

The segment codec, the dialog/session layer and the bank parameter store
live outside this package; these protocols are all the operation needs
from them.
"""

from typing import Optional, Protocol

from fints_statement.domain.statement.models import ActionResponse, CapabilitySet, StatementRequest


class IBankParameterData(Protocol):
    """Read-only view of the bank parameter data (BPD)."""

    @property
    def bank_name(self) -> Optional[str]:
        """Display name of the institution."""
        ...

    def get_capabilities(self, parameter_segment: str) -> Optional[CapabilitySet]:
        """Parameters for one operation kind, or None when the bank sent none."""
        ...


class IStatementTransport(Protocol):
    """Sends one request and returns the operation's part of the response."""

    def send(self, request: StatementRequest) -> ActionResponse:
        """Transport-level failures are raised as-is and not interpreted."""
        ...
