"""
Uniform operation results.

Use cases never let an exception reach the caller: domain and persistence
failures are converted at the use-case boundary into an
``OperationResult`` carrying a human-readable message and a stable error
code.
"""

import functools
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError

from deckstudio.domain.exceptions import DomainError, PersistenceError
from deckstudio.infra.config.logging_config import get_logger

log = get_logger("usecase.boundary")

UNPREFIXED_CODES = ("NOT_FOUND", "VALIDATION_ERROR", "ACCESS_DENIED")


@dataclass
class OperationResult:
    success: bool
    message: Optional[str] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, message: Optional[str] = None, **data: Any) -> "OperationResult":
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(
        cls, error: str, error_code: str, message: Optional[str] = None, **data: Any
    ) -> "OperationResult":
        return cls(
            success=False,
            message=message or error,
            error=error,
            error_code=error_code,
            data=data,
        )

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"success": self.success}
        if self.message is not None:
            payload["message"] = self.message
        if self.error is not None:
            payload["error"] = self.error
            payload["error_code"] = self.error_code
        payload.update(self.data)
        return payload


def operation_boundary(
    failure_prefix: str,
    unprefixed_codes: Tuple[str, ...] = UNPREFIXED_CODES,
) -> Callable[[Callable[..., Awaitable[OperationResult]]], Callable[..., Awaitable[OperationResult]]]:
    """
    Convert failures raised inside a use case into failed results.

    ``failure_prefix`` is prepended to the reason for failures whose code is
    not in ``unprefixed_codes``, e.g. "Failed to export presentation".
    """

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> OperationResult:
            try:
                return await func(*args, **kwargs)
            except DomainError as exc:
                log.warning("usecase.failed", code=exc.code, error=exc.message)
                if exc.code in unprefixed_codes:
                    return OperationResult.fail(exc.message, exc.code)
                return OperationResult.fail(f"{failure_prefix}: {exc.message}", exc.code)
            except SQLAlchemyError as exc:
                log.exception("usecase.persistence_error", error=str(exc))
                return OperationResult.fail(
                    f"{failure_prefix}: {exc.__class__.__name__}",
                    PersistenceError.code,
                )
            except Exception as exc:
                log.exception("usecase.unexpected_error", error=str(exc))
                return OperationResult.fail(
                    f"{failure_prefix}: {exc}", "INTERNAL_ERROR"
                )

        return wrapper

    return decorator
