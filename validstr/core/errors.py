"""Validation exceptions and error classification utilities."""

from collections.abc import Sequence
from enum import Enum

from pydantic import BaseModel

from validstr.domain.validation import FailureKind, ValidationFailure


class ErrorSeverity(Enum):
    """Severity levels for errors."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCode:
    """Error codes for specific error conditions."""

    # Call shape errors
    ERR_USAGE = "ERR_USAGE"
    ERR_INVALID_ARGUMENT = "ERR_INVALID_ARGUMENT"

    # Matching errors
    ERR_NO_MATCH = "ERR_NO_MATCH"
    ERR_AMBIGUOUS_MATCH = "ERR_AMBIGUOUS_MATCH"

    # Generic errors
    ERR_UNKNOWN = "ERR_UNKNOWN"


class ErrorResponse(BaseModel):
    """Structured error response with user-friendly messaging."""

    code: str
    message: str
    suggestion: str
    severity: ErrorSeverity


class StringValidationError(ValueError):
    """Base class for every failure raised by a validation call."""

    kind: FailureKind = FailureKind.INVALID_ARGUMENT

    def __init__(self, message: str, *, entries: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.entries = tuple(entries)


class InvalidArgumentError(StringValidationError):
    """The call itself is malformed (types, shapes, argument count)."""

    kind = FailureKind.INVALID_ARGUMENT


class UsageError(InvalidArgumentError):
    """Wrong number of arguments; the message is the usage text."""


class NoMatchError(StringValidationError):
    """The candidate does not prefix any valid entry."""

    kind = FailureKind.NO_MATCH


class AmbiguousMatchError(StringValidationError):
    """The candidate prefixes several entries that do not nest."""

    kind = FailureKind.AMBIGUOUS_MATCH


_ERROR_TYPES: dict[FailureKind, type[StringValidationError]] = {
    FailureKind.INVALID_ARGUMENT: InvalidArgumentError,
    FailureKind.NO_MATCH: NoMatchError,
    FailureKind.AMBIGUOUS_MATCH: AmbiguousMatchError,
}


def error_from_failure(failure: ValidationFailure, *, identifier: str | None = None) -> StringValidationError:
    """Convert a validation failure into the exception for its kind.

    Args:
        failure: Failure returned by the validator
        identifier: Optional name prepended as "<identifier>: " to the message

    Returns:
        Exception instance ready to be raised
    """
    message = f"{identifier}: {failure.message}" if identifier else failure.message
    return _ERROR_TYPES[failure.kind](message, entries=failure.entries)


def classify_error_with_response(exception: Exception) -> ErrorResponse:
    """Classify an error and return a structured response with recovery suggestions.

    Args:
        exception: The exception raised during validation

    Returns:
        ErrorResponse with code, message, suggestion, and severity
    """
    if isinstance(exception, UsageError):
        return ErrorResponse(
            code=ErrorCode.ERR_USAGE,
            message=str(exception),
            suggestion="Call validatestring with between 2 and 5 arguments.",
            severity=ErrorSeverity.MEDIUM,
        )

    if isinstance(exception, NoMatchError):
        return ErrorResponse(
            code=ErrorCode.ERR_NO_MATCH,
            message=str(exception),
            suggestion="Use one of the listed values or an abbreviation of one.",
            severity=ErrorSeverity.LOW,
        )

    if isinstance(exception, AmbiguousMatchError):
        return ErrorResponse(
            code=ErrorCode.ERR_AMBIGUOUS_MATCH,
            message=str(exception),
            suggestion="Type more characters so that only one of the listed values matches.",
            severity=ErrorSeverity.LOW,
        )

    if isinstance(exception, InvalidArgumentError):
        return ErrorResponse(
            code=ErrorCode.ERR_INVALID_ARGUMENT,
            message=str(exception),
            suggestion="Check the types and order of the arguments.",
            severity=ErrorSeverity.MEDIUM,
        )

    return ErrorResponse(
        code=ErrorCode.ERR_UNKNOWN,
        message="An unexpected error occurred.",
        suggestion="Please try again later. If the problem persists, contact support.",
        severity=ErrorSeverity.HIGH,
    )
