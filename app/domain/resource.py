from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from app.domain.fields import FieldChanges, clean_text
from app.exceptions.exceptions import ValidationError
from app.models.enums import ResourceType

RESOURCE_TYPES = frozenset(member.value for member in ResourceType)
RESOURCE_BODY_HINT = "Expected body: { title, url, description?, theme_id, type, is_ada }"
RESOURCE_NULLABLE_FIELDS = ("description",)


def check_resource_type(value: Any) -> str:
    if not isinstance(value, str) or value not in RESOURCE_TYPES:
        raise ValidationError(f"Invalid type. Allowed: {', '.join(sorted(RESOURCE_TYPES))}")
    return value


@dataclass(frozen=True)
class ResourceDraft:
    title: str
    url: str
    theme_id: int
    type: str
    is_ada: bool
    description: str | None = None

    def validate(self) -> None:
        clean_text(self.title, RESOURCE_BODY_HINT)
        clean_text(self.url, RESOURCE_BODY_HINT)
        if self.theme_id is None or not isinstance(self.is_ada, bool):
            raise ValidationError(RESOURCE_BODY_HINT)
        check_resource_type(self.type)

    def to_values(self) -> dict[str, Any]:
        self.validate()
        return {
            "title": self.title.strip(),
            "url": self.url.strip(),
            "description": self.description,
            "theme_id": int(self.theme_id),
            "type": self.type,
            "is_ada": self.is_ada,
        }


def validate_resource_changes(changes: FieldChanges) -> FieldChanges:
    cleaned = {}
    if "title" in changes:
        cleaned["title"] = clean_text(changes["title"], "Invalid title")
    if "url" in changes:
        cleaned["url"] = clean_text(changes["url"], "Invalid url")
    if "type" in changes:
        cleaned["type"] = check_resource_type(changes["type"])
    if "is_ada" in changes and not isinstance(changes["is_ada"], bool):
        raise ValidationError("Invalid is_ada")
    return changes.replace(**cleaned)
