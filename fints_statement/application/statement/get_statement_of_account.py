"""
Retrieves the statement for one account, or for all accounts the user has
access to. A statement is a series of bookings that pertain to the account,
grouped by day.

Lifecycle::

    CREATED --create_request--> BUILT --(send/receive)--> PROCESSING --> SUCCEEDED | FAILED

Between BUILT and PROCESSING the operation may be persisted with
``serialize()`` and restored with ``deserialize()``.
"""

from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from fints_statement.core.config import get_config
from fints_statement.core.exceptions import (
    InvalidInput,
    MalformedPayload,
    MT940ParseError,
    OperationStateError,
    StatementClientError,
)
from fints_statement.domain.statement.models import (
    AccountRef,
    ActionResponse,
    DateRange,
    OperationRequest,
    STATEMENT_PARAMETERS,
    StatementOfAccount,
    StatementRequest,
    StatusCode,
)
from fints_statement.domain.statement.services import (
    CapabilityResolver,
    RequestVariantFactory,
    ResponseValidator,
    ResponseVerdict,
    StatementAssembler,
)
from fints_statement.shared.utils.logging_config import get_logger

from .dialects import DialectSelector
from .interfaces import IBankParameterData

logger = get_logger(__name__)


class OperationState(str, Enum):
    CREATED = "created"
    BUILT = "built"
    PROCESSING = "processing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class OperationSnapshot(BaseModel):
    """
    Durable form of a sent operation.

    Only what is needed to interpret the response is kept. The account,
    date range and all-accounts flag are dropped on purpose: once the
    request is sent, nothing in the response depends on them.
    """

    model_config = ConfigDict(frozen=True)

    bank_name: Optional[str] = Field(None, description="Display name of the responding institution")
    state: OperationState = OperationState.BUILT
    request_segment_numbers: List[int] = Field(default_factory=lambda: [1], min_length=1)


class GetStatementOfAccount:
    """One statement retrieval. Not safe for concurrent use; it carries exactly one request."""

    def __init__(self):
        # Request (not available after deserialization, i.e. not in process_response())
        self._request: Optional[OperationRequest] = None

        # Information from the BPD needed to interpret the response
        self._bank_name: Optional[str] = None

        # Base bookkeeping
        self._state = OperationState.CREATED
        self._request_segment_numbers: List[int] = []
        self._error: Optional[StatementClientError] = None

        # Response
        self._statement: Optional[StatementOfAccount] = None

    @classmethod
    def create(
        cls,
        account: AccountRef,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
        all_accounts: bool = False
    ) -> "GetStatementOfAccount":
        """
        Args:
            account: The account to get the statement for
            from_date: If set, only bookings on or after this date are returned
            to_date: If set, only bookings on or before this date are returned
            all_accounts: If True, return statements for all accounts of the
                user. ``account`` is still required.

        Raises:
            InvalidInput: If from_date is after to_date
        """
        result = cls()
        result._request = OperationRequest(
            account=account,
            range=DateRange(from_date=from_date, to_date=to_date),
            include_all_accounts=all_accounts
        )
        return result

    # ========== State ==========

    @property
    def state(self) -> OperationState:
        return self._state

    @property
    def error(self) -> Optional[StatementClientError]:
        return self._error

    @property
    def bank_name(self) -> Optional[str]:
        return self._bank_name

    @property
    def is_done(self) -> bool:
        return self._state in (OperationState.SUCCEEDED, OperationState.FAILED)

    @property
    def request_segment_numbers(self) -> List[int]:
        return list(self._request_segment_numbers)

    def ensure_success(self) -> None:
        """
        Raises:
            StatementClientError: The failure recorded on the operation
            OperationStateError: If the operation has not finished yet
        """
        if self._state == OperationState.FAILED:
            raise self._error
        if self._state != OperationState.SUCCEEDED:
            raise OperationStateError(
                f"Statement not available, operation is {self._state.value}",
                details="process_response() has not completed"
            )

    def get_statement(self) -> StatementOfAccount:
        """The assembled statement. See ensure_success() for failures."""
        self.ensure_success()
        return self._statement

    def _fail(self, error: StatementClientError) -> None:
        self._state = OperationState.FAILED
        self._error = error
        self._statement = None
        logger.error(f"Statement operation failed: {error.message}", extra={
            "error_code": error.error_code,
            "details": error.details,
            "bank_name": self._bank_name
        })

    # ========== Build phase ==========

    def create_request(self, bank_parameters: IBankParameterData) -> StatementRequest:
        """
        Build the request from the bank parameter data.

        Raises:
            UnsupportedVersion: No usable statement request version
            PolicyViolation: all_accounts requested but not permitted
            OperationStateError: Called more than once
        """
        if self._state != OperationState.CREATED or self._request is None:
            raise OperationStateError(f"create_request() not allowed in state {self._state.value}")

        self._bank_name = bank_parameters.bank_name
        protocol = get_config().protocol

        try:
            capabilities = bank_parameters.get_capabilities(STATEMENT_PARAMETERS)
            version = CapabilityResolver(protocol.known_versions).resolve(capabilities)
            variant = RequestVariantFactory.build(version, self._request, capabilities)
        except StatementClientError as e:
            self._fail(e)
            raise

        self._request = None
        self._request_segment_numbers = [1]
        self._state = OperationState.BUILT
        return variant

    def mark_sent(self, segment_numbers: List[int]) -> None:
        """Record the segment numbers the transport assigned to the request."""
        if self._state != OperationState.BUILT:
            raise OperationStateError(f"mark_sent() not allowed in state {self._state.value}")
        if not segment_numbers:
            raise OperationStateError("A sent request has at least one segment")
        self._request_segment_numbers = list(segment_numbers)

    # ========== Suspension ==========

    def snapshot(self) -> OperationSnapshot:
        if self._state != OperationState.BUILT:
            raise OperationStateError(f"Only a built operation can be suspended, state is {self._state.value}")
        return OperationSnapshot(
            bank_name=self._bank_name,
            state=self._state,
            request_segment_numbers=self._request_segment_numbers
        )

    @classmethod
    def from_snapshot(cls, snapshot: OperationSnapshot) -> "GetStatementOfAccount":
        """
        Raises:
            OperationStateError: If the snapshot was not taken from a built operation
        """
        if snapshot.state != OperationState.BUILT:
            raise OperationStateError(
                f"Only a built operation can be resumed, snapshot state is {snapshot.state.value}"
            )
        result = cls()
        result._bank_name = snapshot.bank_name
        result._state = OperationState.BUILT
        result._request_segment_numbers = list(snapshot.request_segment_numbers)
        return result

    def serialize(self) -> str:
        return self.snapshot().model_dump_json()

    @classmethod
    def deserialize(cls, serialized: str) -> "GetStatementOfAccount":
        """
        Raises:
            InvalidInput: If ``serialized`` is not a serialized operation
            OperationStateError: See from_snapshot()
        """
        try:
            snapshot = OperationSnapshot.model_validate_json(serialized)
        except ValidationError as e:
            raise InvalidInput(
                "Not a serialized statement operation",
                field="operation",
                value=serialized[:80],
                suggestions=["Pass back the operation string returned when the request was built"]
            ) from e
        return cls.from_snapshot(snapshot)

    # ========== Processing phase ==========

    def process_response(self, response: ActionResponse) -> None:
        """
        Validate and parse the response. Failures are recorded on the
        operation and surface through get_statement().

        Raises:
            OperationStateError: If no request was built
        """
        if self._state != OperationState.BUILT:
            raise OperationStateError(f"process_response() not allowed in state {self._state.value}")
        self._state = OperationState.PROCESSING

        try:
            self._statement = self._process(response)
        except StatementClientError as e:
            self._fail(e)
            return

        self._state = OperationState.SUCCEEDED

    def _process(self, response: ActionResponse) -> StatementOfAccount:
        validator = ResponseValidator(get_config().protocol.no_data_status_codes)
        verdict = validator.validate(
            response.fragments,
            len(self._request_segment_numbers),
            response.status_signals
        )
        if verdict == ResponseVerdict.EMPTY:
            return StatementOfAccount.empty()

        if response.find_status(StatusCode.TOUCHDOWN) is not None:
            # TODO: Follow the continuation reference once pagination is supported
            logger.warning("Bank has more statement data than fit in one response; only the first part is returned")

        dialect = DialectSelector.get_dialect(self._bank_name)
        logger.info(f"Parsing {len(response.fragments)} fragment(s) with the {dialect.dialect_name} dialect")

        parsed = []
        for fragment in response.fragments:
            try:
                parsed.append(dialect.parse(fragment.booked))
            except MT940ParseError as e:
                raise MalformedPayload("Invalid MT940 data", cause=e, dialect=dialect.dialect_name) from e

        return StatementAssembler().assemble(parsed)
