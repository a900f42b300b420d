class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when an incoming payload is invalid or violates domain rules."""


class ConfigurationError(DomainError):
    """Raised when a settings module holds an unusable value."""
