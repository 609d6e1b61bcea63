from typing import Any, Callable, ClassVar

from pydantic import BaseModel, ModelWrapValidatorHandler, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

INVALID_BODY = "invalid_body"


def reject_as(message: str, value: Any, handler: Callable[[Any], Any]) -> Any:
    """Run ``handler`` and replace any validation failure with ``message``."""
    try:
        return handler(value)
    except PydanticValidationError as exc:
        raise PydanticCustomError(INVALID_BODY, message) from exc


class SingleErrorBody(BaseModel):
    """Request body whose missing or mistyped fields are reported as ``body_error``."""

    body_error: ClassVar[str]

    @model_validator(mode="wrap")
    @classmethod
    def collapse_field_errors(cls, data: Any, handler: ModelWrapValidatorHandler[Any]) -> Any:
        return reject_as(cls.body_error, data, handler)


class ErrorRead(BaseModel):
    error: str


class MessageRead(BaseModel):
    message: str
