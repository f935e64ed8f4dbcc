class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when submitted data is invalid or violates a record rule."""


class NotFoundError(DomainError):
    """Raised when a requested record does not exist."""
