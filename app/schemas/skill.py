from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidatorFunctionWrapHandler, field_validator

from app.domain.fields import INVALID_NAME, NAME_REQUIRED
from app.schemas.common import reject_as


class SkillCreate(BaseModel):
    # Left optional so a missing name is rejected with the same message as a blank one.
    name: str | None = Field(None, examples=["Node.js"])

    @field_validator("name", mode="wrap")
    @classmethod
    def name_must_be_text(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        return reject_as(NAME_REQUIRED, value, handler)


class SkillUpdate(BaseModel):
    name: str | None = Field(None, examples=["TypeScript"])

    @field_validator("name", mode="wrap")
    @classmethod
    def name_must_be_text(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        return reject_as(INVALID_NAME, value, handler)


class SkillRead(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class SkillDeleted(BaseModel):
    message: str
    skill: SkillRead
