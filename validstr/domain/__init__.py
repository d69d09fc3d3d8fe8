"""Domain models and DTOs."""

from validstr.domain.validation import (
    CharMatrix,
    FailureKind,
    ValidationContext,
    ValidationFailure,
    ValidationRequest,
)


__all__ = [
    "CharMatrix",
    "FailureKind",
    "ValidationContext",
    "ValidationFailure",
    "ValidationRequest",
]
