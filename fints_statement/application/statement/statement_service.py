"""Use case for fetching a statement of account in one synchronous round trip."""

from fints_statement.domain.statement.models import StatementOfAccount
from fints_statement.shared.utils.logging_config import get_logger

from .get_statement_of_account import GetStatementOfAccount
from .interfaces import IBankParameterData, IStatementTransport

logger = get_logger(__name__)


class StatementService:
    """
    Drives one operation through build, send and process.

    Handles no retries and no timeouts; both belong to the transport.
    """

    def __init__(self, bank_parameters: IBankParameterData, transport: IStatementTransport):
        self.bank_parameters = bank_parameters
        self.transport = transport

    def execute(self, operation: GetStatementOfAccount) -> GetStatementOfAccount:
        """
        Run ``operation`` to a terminal state.

        Build-phase errors (UnsupportedVersion, PolicyViolation) and transport
        errors propagate; processing errors are recorded on the operation.
        """
        request = operation.create_request(self.bank_parameters)
        logger.info(f"Sending statement request v{request.version} to '{self.bank_parameters.bank_name}'")
        response = self.transport.send(request)
        operation.process_response(response)
        return operation

    def fetch(self, operation: GetStatementOfAccount) -> StatementOfAccount:
        """Run ``operation`` and return its statement, raising the recorded failure if any."""
        return self.execute(operation).get_statement()
