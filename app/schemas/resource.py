from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictBool

from app.domain.resource import RESOURCE_BODY_HINT
from app.models.enums import ResourceType
from app.schemas.common import SingleErrorBody


class ResourceCreate(SingleErrorBody):
    # Any missing or mistyped field is reported as the expected body shape.
    body_error = RESOURCE_BODY_HINT

    title: str = Field(..., examples=["Guide Express"])
    url: str = Field(..., examples=["https://expressjs.com"])
    description: str | None = None
    theme_id: int = Field(..., examples=[2])
    type: str = Field(..., examples=[ResourceType.GUIDE.value])
    is_ada: StrictBool


class ResourceUpdate(BaseModel):
    """Partial update: only the fields present in the body are applied."""

    title: str | None = None
    url: str | None = None
    description: str | None = None
    theme_id: int | None = None
    type: str | None = None
    is_ada: StrictBool | None = None


class ResourceRead(BaseModel):
    id: int
    title: str
    url: str
    description: str | None
    theme_id: int
    type: ResourceType
    is_ada: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ResourceDeleted(BaseModel):
    message: str
    resource: ResourceRead
