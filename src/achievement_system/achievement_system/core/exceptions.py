class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ParseError(ValidationError):
    """Raised when a wall-clock or colon-format duration string is malformed."""


class NotFound(DomainError):
    """Raised internally when a target config or profile does not exist.

    Never escapes the engine: callers resolve it to defaults.
    """


class SourceUnavailable(DomainError):
    """Raised when the underlying record/target store query failed.

    Retryable. This is the only error the engine lets reach its caller.
    """
