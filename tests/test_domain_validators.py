"""Domain validators and the partial-update structure."""

import pytest

from app.domain.fields import FieldChanges, clean_text
from app.domain.resource import (
    RESOURCE_BODY_HINT,
    ResourceDraft,
    check_resource_type,
    validate_resource_changes,
)
from app.domain.skill import SkillDraft, validate_skill_changes
from app.domain.theme import ThemeDraft, validate_theme_changes
from app.exceptions.exceptions import ValidationError
from app.schemas.resource import ResourceUpdate
from app.schemas.theme import ThemeUpdate


def _draft(**overrides):
    values = {
        "title": "Guide Express",
        "url": "https://expressjs.com",
        "theme_id": 2,
        "type": "guide",
        "is_ada": True,
    }
    values.update(overrides)
    return ResourceDraft(**values)


def test_clean_text_trims():
    assert clean_text("  Node.js ", "bad") == "Node.js"


@pytest.mark.parametrize("value", ["", "   ", None, 3])
def test_clean_text_rejects_blank_or_non_string(value):
    with pytest.raises(ValidationError, match="bad"):
        clean_text(value, "bad")


@pytest.mark.parametrize("value", ["guide", "video", "exercise", "project"])
def test_resource_types_accepted(value):
    assert check_resource_type(value) == value


@pytest.mark.parametrize("value", ["tutorial", "", "Guide", None])
def test_resource_types_rejected(value):
    with pytest.raises(ValidationError, match="Invalid type"):
        check_resource_type(value)


def test_resource_draft_normalises_values():
    values = _draft(title=" Guide ", url=" https://x.dev ").to_values()
    assert values == {
        "title": "Guide",
        "url": "https://x.dev",
        "description": None,
        "theme_id": 2,
        "type": "guide",
        "is_ada": True,
    }


@pytest.mark.parametrize("overrides", [{"title": " "}, {"url": ""}, {"is_ada": "yes"}, {"theme_id": None}])
def test_resource_draft_reports_body_shape(overrides):
    with pytest.raises(ValidationError) as exc_info:
        _draft(**overrides).validate()
    assert str(exc_info.value) == RESOURCE_BODY_HINT


def test_field_changes_distinguish_absent_from_null():
    payload = ResourceUpdate.model_validate({"description": None, "title": None})

    changes = FieldChanges.from_payload(payload, nullable=("description",))

    assert dict(changes) == {"description": None}
    assert "title" not in changes
    assert "url" not in changes


def test_field_changes_from_missing_payload_is_empty():
    assert len(FieldChanges.from_payload(None)) == 0


def test_resource_changes_validate_only_present_fields():
    changes = validate_resource_changes(FieldChanges({"title": "  New  "}))
    assert dict(changes) == {"title": "New"}


def test_resource_changes_check_type():
    with pytest.raises(ValidationError, match="Invalid type"):
        validate_resource_changes(FieldChanges({"type": "tutorial"}))


def test_theme_draft_requires_name():
    with pytest.raises(ValidationError, match="name is required"):
        ThemeDraft(name=" ").to_values()
    assert ThemeDraft(name=" Backend ", description=None).to_values() == {"name": "Backend", "description": None}


def test_theme_changes_keep_nullable_description():
    payload = ThemeUpdate.model_validate({"description": None})
    changes = validate_theme_changes(FieldChanges.from_payload(payload, nullable=("description",)))
    assert dict(changes) == {"description": None}


def test_skill_validators():
    assert SkillDraft(name=" SQL ").to_values() == {"name": "SQL"}
    with pytest.raises(ValidationError, match="Invalid name"):
        validate_skill_changes(FieldChanges({"name": ""}))
    assert dict(validate_skill_changes(FieldChanges())) == {}
