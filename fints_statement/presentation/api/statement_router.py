"""API router for statement request building and response processing."""

from fastapi import APIRouter

from fints_statement.application.statement import GetStatementOfAccount
from fints_statement.application.statement.dialects import DialectSelector
from fints_statement.domain.statement.models import STATEMENT_PARAMETERS
from fints_statement.infrastructure.bank_parameters import StaticBankParameterData
from fints_statement.presentation.schemas.statement_schemas import (
    BuildRequestBody,
    BuildRequestResponse,
    ProcessResponseBody,
    StatementResponse,
    SupportedDialectsResponse,
)
from fints_statement.shared.utils.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/statements", tags=["Statement of Account"])


@router.post("/request", response_model=BuildRequestResponse, summary="Build a statement request")
def build_request(body: BuildRequestBody):
    """
    Pick the request version from the bank's capabilities and build the request.

    The returned ``operation`` carries only what is needed to interpret the
    bank's answer; send it back to ``/process`` together with the response.
    """
    operation = GetStatementOfAccount.create(
        body.account,
        from_date=body.from_date,
        to_date=body.to_date,
        all_accounts=body.all_accounts
    )
    bank_parameters = StaticBankParameterData(body.bank_name, {STATEMENT_PARAMETERS: body.capabilities})
    request = operation.create_request(bank_parameters)

    return BuildRequestResponse(request=request, operation=operation.serialize())


@router.post("/process", response_model=StatementResponse, summary="Process a statement response")
def process_response(body: ProcessResponseBody):
    """Validate the bank response, parse it with the institution's dialect and assemble the statement."""
    operation = GetStatementOfAccount.deserialize(body.operation)
    if body.request_segment_numbers:
        operation.mark_sent(body.request_segment_numbers)

    operation.process_response(body.response)
    statement = operation.get_statement()

    return StatementResponse(
        bank_name=operation.bank_name,
        dialect=DialectSelector.get_dialect(operation.bank_name).dialect_name,
        booking_count=len(statement),
        statement=statement
    )


@router.get("/dialects", response_model=SupportedDialectsResponse, summary="List statement dialects")
def get_dialects():
    return SupportedDialectsResponse(
        markers=DialectSelector.get_supported_dialects(),
        default=DialectSelector.get_dialect(None).dialect_name
    )
