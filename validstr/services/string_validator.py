"""String validator: expand a candidate to the one entry of a whitelist it abbreviates.

Matching is a case-insensitive prefix test. A candidate that prefixes several
entries still resolves when the shortest of them is itself a prefix of all the
others (e.g. "oct" against "Oct", "octave" and "octopus" gives "Oct").
"""

import logging
import string
from collections.abc import Sequence

from validstr.core.config import constants
from validstr.core.errors import error_from_failure
from validstr.core.logging import span
from validstr.domain.validation import (
    CharMatrix,
    FailureKind,
    ValidationContext,
    ValidationFailure,
    ValidationRequest,
    char_text,
    is_cellstr,
    is_char_value,
    is_single_row,
)


logger = logging.getLogger(__name__)

# ASCII-only folding, no locale rules
_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _fold(text: str) -> str:
    return text.translate(_ASCII_FOLD)


def _is_empty(value: object) -> bool:
    try:
        return len(value) == 0  # type: ignore[arg-type]
    except TypeError:
        return False


def _invalid(message: str) -> ValidationFailure:
    return ValidationFailure(kind=FailureKind.INVALID_ARGUMENT, message=message)


def check_preconditions(
    candidate: object,
    valid_set: object,
    context: ValidationContext,
) -> ValidationFailure | None:
    """Check the shape of a validation call.

    Checks run in a fixed order and only the first violation is reported.

    Returns:
        An INVALID_ARGUMENT failure, or None when the call is well formed
    """
    if not is_char_value(candidate):
        return _invalid("STR must be a character string")
    if not is_single_row(candidate):
        return _invalid("STR must be a single row vector")
    if _is_empty(valid_set):
        return _invalid("STRARRAY must be non-empty")
    if not is_cellstr(valid_set):
        return _invalid("STRARRAY must be a cellstr")
    if context.has_function_name and not is_single_row(context.function_name):
        return _invalid("FUNCNAME must be a single row vector")
    if context.has_variable_name and not is_single_row(context.variable_name):
        return _invalid("VARNAME must be a single row vector")
    if context.position < 0:
        return _invalid("POSITION must be >= 0")
    return None


def find_matches(candidate: str, valid_set: Sequence[str]) -> list[int]:
    """Return the indices of entries that case-insensitively start with ``candidate``.

    An empty candidate matches every entry.
    """
    prefix = _fold(candidate)
    return [index for index, entry in enumerate(valid_set) if _fold(entry).startswith(prefix)]


def build_error_prefix(candidate: str, context: ValidationContext) -> str:
    """Build the leading part of a matching error message.

    Examples:
        "'xyz' "
        "DUMMY_TEST: DUMMY_VAR (argument #5) "
    """
    prefix = ""
    if context.has_function_name:
        prefix = f"{char_text(context.function_name)}: "  # type: ignore[arg-type]

    if context.has_variable_name:
        prefix += f"{char_text(context.variable_name)} "  # type: ignore[arg-type]
    else:
        prefix += f"'{candidate}' "

    if context.position > 0:
        prefix += f"(argument #{context.position}) "
    return prefix


def _shortest_match(valid_set: Sequence[str], matches: list[int]) -> int:
    # min() keeps the first index on ties
    return min(matches, key=lambda index: len(valid_set[index]))


def _is_nested(valid_set: Sequence[str], matches: list[int], shortest: int) -> bool:
    """Return True if the shortest match is a case-insensitive prefix of every match."""
    probe = _fold(valid_set[shortest])
    return all(_fold(valid_set[index])[: len(probe)] == probe for index in matches if index != shortest)


def validate(
    candidate: str | CharMatrix,
    valid_set: Sequence[str],
    context: ValidationContext | None = None,
) -> str | ValidationFailure:
    """Validate ``candidate`` against ``valid_set`` and expand it to the matched entry.

    Args:
        candidate: String to validate, possibly an abbreviation
        valid_set: Ordered, non-empty sequence of accepted strings (never mutated)
        context: Optional function name, variable name and argument position
            used to make error messages more specific

    Returns:
        The matched entry of ``valid_set`` verbatim, or a ValidationFailure
        describing why the candidate was rejected
    """
    context = context or ValidationContext()

    with span("string_validator.validate"):
        failure = check_preconditions(candidate, valid_set, context)
        if failure is not None:
            logger.debug("validation_invalid_argument", extra={"reason": failure.message})
            return failure

        text = char_text(candidate)
        matches = find_matches(text, valid_set)

        if not matches:
            entries = tuple(valid_set)
            logger.debug("validation_no_match", extra={"candidate": text, "entries": len(entries)})
            return ValidationFailure(
                kind=FailureKind.NO_MATCH,
                message=(
                    f"{build_error_prefix(text, context)}does not match any of\n"
                    f"{constants.ENTRY_SEPARATOR.join(entries)}"
                ),
                entries=entries,
            )

        if len(matches) == 1:
            return valid_set[matches[0]]

        shortest = _shortest_match(valid_set, matches)
        if _is_nested(valid_set, matches, shortest):
            logger.debug(
                "validation_nested_matches",
                extra={"candidate": text, "matches": len(matches), "value": valid_set[shortest]},
            )
            return valid_set[shortest]

        entries = tuple(valid_set[index] for index in matches)
        logger.debug("validation_ambiguous", extra={"candidate": text, "matches": len(entries)})
        return ValidationFailure(
            kind=FailureKind.AMBIGUOUS_MATCH,
            message=(
                f"{build_error_prefix(text, context)}allows multiple unique matches:\n"
                f"{constants.ENTRY_SEPARATOR.join(entries)}"
            ),
            entries=entries,
        )


def validate_request(request: ValidationRequest) -> str | ValidationFailure:
    """Run :func:`validate` on a bound request."""
    return validate(request.candidate, request.valid_set, request.context)


def validate_or_raise(
    candidate: str | CharMatrix,
    valid_set: Sequence[str],
    context: ValidationContext | None = None,
    *,
    identifier: str | None = None,
) -> str:
    """Validate like :func:`validate` but raise on failure.

    Args:
        candidate: String to validate
        valid_set: Accepted strings
        context: Optional error message context
        identifier: Optional name prepended as "<identifier>: " to error messages

    Returns:
        The matched entry of ``valid_set``

    Raises:
        InvalidArgumentError: If the call is malformed
        NoMatchError: If the candidate matches no entry
        AmbiguousMatchError: If the candidate matches several entries that do not nest
    """
    result = validate(candidate, valid_set, context)
    if isinstance(result, ValidationFailure):
        raise error_from_failure(result, identifier=identifier)
    return result
