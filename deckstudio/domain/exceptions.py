"""
Domain error taxonomy.

Every error carries a stable ``code`` so callers can branch on the failure
kind without parsing messages.
"""


class DomainError(Exception):
    """Base class for domain-specific errors."""

    code = "DOMAIN_ERROR"

    def __init__(self, message: str, code: str = None):
        self.message = message
        if code:
            self.code = code
        super().__init__(self.message)


class ValidationError(DomainError):
    """Bad input shape, size or type. Raised before any side effect."""

    code = "VALIDATION_ERROR"


class NotFoundError(DomainError):
    """An entity looked up by id does not exist."""

    code = "NOT_FOUND"


class PresentationNotFoundError(NotFoundError):
    def __init__(self, presentation_id: str, message: str = "Presentation not found"):
        self.presentation_id = presentation_id
        super().__init__(message)


class MasterNotFoundError(NotFoundError):
    def __init__(self, master_name: str):
        self.master_name = master_name
        super().__init__(f"Master template '{master_name}' not found")


class ExternalServiceError(DomainError):
    """A downstream API, network or file-system call failed."""

    code = "EXTERNAL_SERVICE_ERROR"


class PersistenceError(DomainError):
    """A relational store read or write failed."""

    code = "PERSISTENCE_ERROR"


class AccessDeniedError(DomainError):
    """The access policy refused the requester."""

    code = "ACCESS_DENIED"
