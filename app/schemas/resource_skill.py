from pydantic import BaseModel, ConfigDict, Field

from app.schemas.common import SingleErrorBody

LINK_IDS_ERROR = "resource_id and skill_id must be numbers"


class ResourceSkillCreate(SingleErrorBody):
    body_error = LINK_IDS_ERROR

    resource_id: int = Field(..., examples=[1])
    skill_id: int = Field(..., examples=[5])


class ResourceSkillRead(BaseModel):
    resource_id: int
    skill_id: int

    model_config = ConfigDict(from_attributes=True)


class ResourceSkillDeleted(BaseModel):
    message: str
    link: ResourceSkillRead
