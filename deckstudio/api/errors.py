"""
API error handling and exception mapping.

Use cases report failures as ``OperationResult`` values; ``raise_for_result``
turns a failed result back into a ``DomainError`` so the handlers below
render every failure as the same ``ErrorResponse`` shape.
"""

from datetime import datetime, UTC

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from deckstudio.api.schemas.base import ErrorResponse
from deckstudio.application.results import OperationResult
from deckstudio.domain.exceptions import DomainError
from deckstudio.infra.config.logging_config import get_logger

log = get_logger("api.errors")

STATUS_BY_CODE = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ACCESS_DENIED": status.HTTP_403_FORBIDDEN,
    "EXTERNAL_SERVICE_ERROR": status.HTTP_502_BAD_GATEWAY,
    "PERSISTENCE_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for_code(code: str) -> int:
    return STATUS_BY_CODE.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)


def raise_for_result(result: OperationResult) -> OperationResult:
    """Return successful results unchanged; raise for failed ones."""
    if not result.success:
        raise DomainError(result.error or "Operation failed", result.error_code)
    return result


def _error_response(status_code: int, error: str, detail: str) -> JSONResponse:
    body = ErrorResponse(error=error, detail=detail, timestamp=datetime.now(UTC))
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    log.warning("api.domain_error", code=exc.code, error=exc.message)
    return _error_response(status_for_code(exc.code), exc.code, exc.message)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    formatted = [
        f"{' -> '.join(str(loc) for loc in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    log.warning("api.request_invalid", errors=formatted)
    return _error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "VALIDATION_ERROR",
        "Validation failed: " + "; ".join(formatted),
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    log.warning("api.http_error", status_code=exc.status_code, detail=str(exc.detail))
    return _error_response(exc.status_code, f"HTTP_{exc.status_code}", str(exc.detail))


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    log.exception("api.unexpected_error", error_type=type(exc).__name__)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_SERVER_ERROR",
        "An unexpected error occurred. Please try again later.",
    )


def setup_error_handlers(app) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
