from prscope.core.exceptions.errors import (
    ConfigurationError,
    DateRangeOrderError,
    EmptyValueError,
    IdentifierTypeError,
    InvalidDateError,
    OwnerNotFoundError,
    PRScopeError,
    RepoNotFoundError,
    SourceNotFoundError,
    ValidationError,
)

__all__ = [
    "PRScopeError",
    "ConfigurationError",
    "ValidationError",
    "IdentifierTypeError",
    "EmptyValueError",
    "InvalidDateError",
    "DateRangeOrderError",
    "SourceNotFoundError",
    "OwnerNotFoundError",
    "RepoNotFoundError",
]
