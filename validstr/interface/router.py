"""HTTP interface for the string validator."""

import logging

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from validstr.core.builtin_registry import get_builtin
from validstr.core.config import constants
from validstr.core.errors import ErrorResponse, StringValidationError, classify_error_with_response
from validstr.domain.validation import ValidationContext
from validstr.services.string_validator import validate_or_raise


logger = logging.getLogger(__name__)

router = APIRouter(prefix=f"/{constants.BUILTIN_NAME}", tags=["validatestring"])


class ValidateStringRequest(BaseModel):
    """Request body for validating a single candidate."""

    candidate: str = Field(..., description="String to validate, possibly abbreviated")
    valid_set: list[str] = Field(..., description="Accepted strings, in display order")
    function_name: str | None = Field(default=None, description="Function name for error messages")
    variable_name: str | None = Field(default=None, description="Variable name for error messages")
    position: int = Field(default=0, description="1-based argument position for error messages")


class ValidateStringResponse(BaseModel):
    """Validated (expanded) string."""

    value: str


class BuiltinHelpResponse(BaseModel):
    """Help text of a builtin."""

    name: str
    help: str


@router.post(
    "",
    response_model=ValidateStringResponse,
    responses={constants.HTTP_UNPROCESSABLE_ENTITY: {"model": ErrorResponse}},
)
def validate_string(body: ValidateStringRequest) -> ValidateStringResponse | JSONResponse:
    """Validate a candidate string and return the matched entry."""
    context = ValidationContext(
        function_name=body.function_name,
        variable_name=body.variable_name,
        position=body.position,
    )
    try:
        value = validate_or_raise(body.candidate, body.valid_set, context, identifier=constants.BUILTIN_NAME)
    except StringValidationError as e:
        logger.info("validatestring_rejected", extra={"kind": str(e.kind), "error": str(e)})
        error_response = classify_error_with_response(e)
        return JSONResponse(
            content=error_response.model_dump(mode="json"),
            status_code=constants.HTTP_UNPROCESSABLE_ENTITY,
        )

    return ValidateStringResponse(value=value)


@router.get("/help", response_model=BuiltinHelpResponse)
def validatestring_help() -> BuiltinHelpResponse:
    """Return the help text of the validatestring builtin."""
    builtin = get_builtin(constants.BUILTIN_NAME)
    if builtin is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Builtin not registered")
    return BuiltinHelpResponse(name=builtin.name, help=builtin.help_text)
