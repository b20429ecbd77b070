# fints_statement/core/exceptions.py
"""Error taxonomy of the statement client and its HTTP error handler."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse

from fints_statement.shared.utils.logging_config import get_logger

logger = get_logger(__name__)


class StatementClientError(Exception):
    """Base class for every failure the statement client reports."""

    def __init__(
        self,
        message: str,
        details: str = None,
        error_code: str = None,
        suggestions: list = None
    ):
        self.message = message
        self.details = details
        self.error_code = error_code or self._default_error_code()
        self.suggestions = suggestions or []
        self.timestamp = datetime.now().isoformat()
        super().__init__(self.message)

    @classmethod
    def _default_error_code(cls) -> str:
        code = []
        for i, char in enumerate(cls.__name__):
            if char.isupper() and i > 0:
                code.append("_")
            code.append(char.upper())
        return "".join(code)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "suggestions": self.suggestions,
            "timestamp": self.timestamp,
            "type": self.__class__.__name__,
        }


class InvalidInput(StatementClientError):
    """Caller-supplied input is inconsistent (e.g. from-date after to-date)."""

    def __init__(self, message: str, field: str = None, value: Any = None, suggestions: list = None):
        details = None
        if field:
            details = f"field '{field}'" + (f" (value: {value})" if value is not None else "")
        super().__init__(
            message=message,
            details=details,
            suggestions=suggestions or ["Check that the from-date is not after the to-date"]
        )
        self.field = field
        self.value = value


class UnsupportedVersion(StatementClientError):
    """The bank advertises no statement request version this client can encode."""

    def __init__(self, message: str, advertised: Optional[List[int]] = None):
        super().__init__(
            message=message,
            details=f"advertised versions: {advertised}" if advertised is not None else None,
            suggestions=["The bank needs to support one of the statement request versions 4, 5, 6 or 7"]
        )
        self.advertised = advertised or []


class PolicyViolation(StatementClientError):
    """The request asks for something the bank's parameters forbid."""

    def __init__(self, message: str, details: str = None):
        super().__init__(
            message=message,
            details=details,
            suggestions=["Request the statement for a single account instead"]
        )


class IncompleteResponse(StatementClientError):
    """The bank answered fewer request segments than were sent."""

    def __init__(self, message: str, expected: int = None, received: int = None):
        super().__init__(
            message=message,
            details=f"expected {expected} response segment(s), received {received}"
            if expected is not None else None
        )
        self.expected = expected
        self.received = received


class MalformedPayload(StatementClientError):
    """A statement fragment could not be parsed by the selected dialect."""

    def __init__(self, message: str, cause: Exception = None, dialect: str = None):
        super().__init__(
            message=message,
            details=f"{dialect}: {cause}" if dialect else (str(cause) if cause else None)
        )
        self.cause = cause
        self.dialect = dialect


class OperationStateError(StatementClientError):
    """An operation was used outside the lifecycle state that allows it."""


class MT940ParseError(ValueError):
    """Statement text does not follow the grammar of the dialect parsing it."""

    def __init__(self, message: str, tag: str = None, line: str = None):
        self.tag = tag
        self.line = line
        if tag:
            message = f"{message} (field :{tag}:)"
        super().__init__(message)


_STATUS_BY_ERROR = {
    InvalidInput: status.HTTP_400_BAD_REQUEST,
    PolicyViolation: status.HTTP_400_BAD_REQUEST,
    UnsupportedVersion: status.HTTP_422_UNPROCESSABLE_ENTITY,
    IncompleteResponse: status.HTTP_502_BAD_GATEWAY,
    MalformedPayload: status.HTTP_502_BAD_GATEWAY,
    OperationStateError: status.HTTP_409_CONFLICT,
}


def status_code_for(exc: StatementClientError) -> int:
    for error_type, status_code in _STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def statement_error_handler(request: Request, exc: StatementClientError) -> JSONResponse:
    """Handle statement client errors with a consistent JSON body."""
    logger.warning(f"Statement error: {exc.message}", extra={
        "error_code": exc.error_code,
        "details": exc.details,
        "request_url": str(request.url)
    })

    return JSONResponse(
        status_code=status_code_for(exc),
        content={"success": False, **exc.to_dict()}
    )
