class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing, malformed or violates domain rules."""


class DuplicateRecordError(DomainError):
    """Raised when a salary record already exists for the same staff and period."""


class ConfigurationError(DomainError):
    """Raised when schedule or salary policy settings are inconsistent."""


class StorageError(Exception):
    """Raised by persistence backends when a read or write fails."""
