from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidatorFunctionWrapHandler, field_validator

from app.domain.fields import INVALID_NAME, NAME_REQUIRED
from app.schemas.common import reject_as


class ThemeCreate(BaseModel):
    name: str | None = Field(None, examples=["Backend"])
    description: str | None = Field(None, examples=["API & Server"])

    @field_validator("name", mode="wrap")
    @classmethod
    def name_must_be_text(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        return reject_as(NAME_REQUIRED, value, handler)


class ThemeUpdate(BaseModel):
    name: str | None = None
    description: str | None = None

    @field_validator("name", mode="wrap")
    @classmethod
    def name_must_be_text(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        return reject_as(INVALID_NAME, value, handler)


class ThemeRead(BaseModel):
    id: int
    name: str
    description: str | None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ThemeDeleted(BaseModel):
    message: str
    theme: ThemeRead
