from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from app.domain.fields import INVALID_NAME, NAME_REQUIRED, FieldChanges, clean_text


@dataclass(frozen=True)
class SkillDraft:
    name: str | None

    def to_values(self) -> dict[str, Any]:
        return {"name": clean_text(self.name, NAME_REQUIRED)}


def validate_skill_changes(changes: FieldChanges) -> FieldChanges:
    if "name" in changes:
        return changes.replace(name=clean_text(changes["name"], INVALID_NAME))
    return changes
