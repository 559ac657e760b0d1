class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data or settings are invalid."""


class AuthorizationError(DomainError):
    """Raised when a caller is not allowed to trigger a job."""


class StoreLoadError(DomainError):
    """Raised when the list of eligible stores cannot be loaded at all."""
