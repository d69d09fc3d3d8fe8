"""String validation domain models and enums."""

from collections.abc import Sequence
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FailureKind(StrEnum):
    """Why a validation call failed."""

    INVALID_ARGUMENT = "invalid_argument"
    NO_MATCH = "no_match"
    AMBIGUOUS_MATCH = "ambiguous_match"


class CharMatrix(BaseModel):
    """A rectangular block of characters with one string per row.

    A plain ``str`` is always a single row. ``CharMatrix`` stands in for the
    multi-row character arrays a host runtime can hand over, e.g. the column
    vector produced by transposing ``"xyz"``.
    """

    model_config = ConfigDict(frozen=True)

    rows: tuple[str, ...] = Field(default=(), description="Matrix rows, top to bottom")

    @model_validator(mode="after")
    def validate_rectangular(self) -> "CharMatrix":
        """All rows of a character matrix have the same width."""
        if len({len(row) for row in self.rows}) > 1:
            raise ValueError("Rows of a character matrix must have equal length")
        return self

    @classmethod
    def column(cls, text: str) -> "CharMatrix":
        """Build the transposed (one character per row) form of ``text``."""
        return cls(rows=tuple(text))

    @property
    def is_single_row(self) -> bool:
        return len(self.rows) == 1

    @property
    def is_empty(self) -> bool:
        return not any(self.rows)

    def __str__(self) -> str:
        return "\n".join(self.rows)


def is_char_value(value: object) -> bool:
    """Return True for string-typed values (``str`` or ``CharMatrix``)."""
    return isinstance(value, str | CharMatrix)


def is_single_row(value: object) -> bool:
    """Return True if a string-typed value holds exactly one row."""
    if isinstance(value, str):
        return True
    return isinstance(value, CharMatrix) and value.is_single_row


def is_empty_char(value: object) -> bool:
    """Return True for ``None`` and for string-typed values without characters."""
    if value is None:
        return True
    if isinstance(value, CharMatrix):
        return value.is_empty
    return isinstance(value, str) and not value


def char_text(value: str | CharMatrix) -> str:
    """Return the text of a single-row string-typed value."""
    if isinstance(value, CharMatrix):
        return value.rows[0] if value.rows else ""
    return value


def is_cellstr(value: object) -> bool:
    """Return True for an ordered collection whose elements are all ``str``."""
    if isinstance(value, str) or not isinstance(value, Sequence):
        return False
    return all(isinstance(entry, str) for entry in value)


class ValidationContext(BaseModel):
    """Optional details that make a validation error message more specific."""

    model_config = ConfigDict(frozen=True)

    function_name: str | CharMatrix | None = Field(default=None, description="Name of the calling function")
    variable_name: str | CharMatrix | None = Field(default=None, description="Name of the validated variable")
    position: int = Field(default=0, description="1-based argument position, 0 when unspecified")

    @property
    def has_function_name(self) -> bool:
        return not is_empty_char(self.function_name)

    @property
    def has_variable_name(self) -> bool:
        return not is_empty_char(self.variable_name)


class ValidationRequest(BaseModel):
    """A single validation call: the candidate, the whitelist, and the error context.

    ``candidate`` and ``valid_set`` are kept untyped so that malformed values
    reach the validator's precondition checks instead of failing model
    validation.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    candidate: Any = Field(..., description="String to validate or expand")
    valid_set: Any = Field(..., description="Ordered, non-empty sequence of accepted strings")
    context: ValidationContext = Field(default_factory=ValidationContext)


class ValidationFailure(BaseModel):
    """Structured result of a rejected candidate."""

    model_config = ConfigDict(frozen=True)

    kind: FailureKind
    message: str
    entries: tuple[str, ...] = Field(default=(), description="Entries listed in the message")
