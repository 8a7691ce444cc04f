class DomainError(Exception):
    """Base exception for business rule violations."""

    kind = "domain-error"


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    kind = "validation-error"


class ConflictError(DomainError):
    """Raised when a second leave period would be opened while one is active."""

    kind = "conflict"


class NotFoundError(DomainError):
    """Raised when a person or an active leave record does not exist."""

    kind = "not-found"


class PersistenceError(DomainError):
    """Raised when the underlying key-value store cannot be read or written."""

    kind = "persistence-error"
