"""Host builtins: variadic calling convention for the string validator."""

import logging
import math

from validstr.core.builtin_registry import Builtin, get_builtin, register_builtin
from validstr.core.config import constants
from validstr.core.errors import InvalidArgumentError, UsageError
from validstr.domain.validation import ValidationContext, ValidationRequest, is_char_value
from validstr.services.string_validator import validate_or_raise


logger = logging.getLogger(__name__)

VALIDATESTRING_HELP = """\
validstr = validatestring (str, strarray)
validstr = validatestring (str, strarray, funcname)
validstr = validatestring (str, strarray, funcname, varname)
validstr = validatestring (..., position)

Verify that STR is an element, or substring of an element, in STRARRAY.

When STR is a character string to be tested, and STRARRAY is a cellstr of
valid values, then VALIDSTR will be the validated form of STR where
validation is defined as STR being a member or substring of VALIDSTR.  This
is useful for both verifying and expanding short options, such as "r", to
their longer forms, such as "red".  If STR is a substring of VALIDSTR, and
there are multiple matches, the shortest match will be returned if all
matches are substrings of each other.  Otherwise, an error will be raised
because the expansion of STR is ambiguous.  All comparisons are case
insensitive.

The additional inputs FUNCNAME, VARNAME, and POSITION are optional and will
make any generated validation error message more specific.

Examples:

  validatestring ("r", {"red", "green", "blue"})
  => "red"

  validatestring ("b", {"red", "green", "blue", "black"})
  => error: validatestring: 'b' allows multiple unique matches:
     blue, black
"""


def usage_text(name: str) -> str:
    """Build the "print usage" message for a registered builtin."""
    builtin = get_builtin(name)
    signatures = builtin.help_text.split("\n\n", 1)[0] if builtin else name
    return f"Invalid call to {name}.  Correct usage is:\n\n{signatures}"


def _is_numeric(value: object) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _position_value(value: int | float) -> int:
    """Truncate a numeric position toward zero."""
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidArgumentError(f"{constants.BUILTIN_NAME}: POSITION must be a finite number")
    return math.trunc(value)


def bind_arguments(args: tuple[object, ...]) -> ValidationRequest:
    """Bind positional validatestring arguments to a ValidationRequest.

    Trailing string-typed arguments bind to FUNCNAME then VARNAME. A numeric
    last argument is the POSITION. Numeric arguments elsewhere are ignored.

    Raises:
        UsageError: If fewer than 2 or more than 5 arguments are given
        InvalidArgumentError: If more than two trailing string arguments are given
    """
    nargin = len(args)
    if nargin < constants.MIN_NARGIN or nargin > constants.MAX_NARGIN:
        raise UsageError(usage_text(constants.BUILTIN_NAME))

    char_inputs: list[object] = []
    for arg in args[constants.FIRST_OPTIONAL_ARG_INDEX :]:
        if not is_char_value(arg):
            continue
        if len(char_inputs) == constants.MAX_CHARACTER_INPUTS:
            raise InvalidArgumentError(
                f"{constants.BUILTIN_NAME}: invalid number of character inputs ({len(char_inputs) + 1})"
            )
        char_inputs.append(arg)

    position = 0
    if nargin > constants.FIRST_OPTIONAL_ARG_INDEX and _is_numeric(args[-1]):
        position = _position_value(args[-1])  # type: ignore[arg-type]

    context = ValidationContext(
        function_name=char_inputs[0] if len(char_inputs) > 0 else None,
        variable_name=char_inputs[1] if len(char_inputs) > 1 else None,
        position=position,
    )
    return ValidationRequest(candidate=args[0], valid_set=args[1], context=context)


def validatestring(*args: object) -> str:
    """Validate and expand a string against a list of valid strings.

    See VALIDATESTRING_HELP for the calling forms.

    Raises:
        UsageError: On a wrong number of arguments
        InvalidArgumentError: On malformed arguments
        NoMatchError: If STR matches no element of STRARRAY
        AmbiguousMatchError: If STR matches several elements that are not nested
    """
    request = bind_arguments(args)
    try:
        return validate_or_raise(
            request.candidate,
            request.valid_set,
            request.context,
            identifier=constants.BUILTIN_NAME,
        )
    except InvalidArgumentError as e:
        logger.info("validatestring_invalid_call", extra={"error": str(e)})
        raise


register_builtin(Builtin(name=constants.BUILTIN_NAME, func=validatestring, help_text=VALIDATESTRING_HELP))
