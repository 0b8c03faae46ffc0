class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DataIntegrityError(DomainError):
    """Raised when a stored punch record is malformed (e.g. punch-out before punch-in).

    Fatal to the classification of that single record only.
    """


class ConfigurationError(DomainError):
    """Raised when shift or payroll configuration is unusable (e.g. zero working days)."""
