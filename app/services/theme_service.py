from app.domain.fields import FieldChanges
from app.domain.theme import THEME_NULLABLE_FIELDS, ThemeDraft, validate_theme_changes
from app.models.theme import Theme
from app.schemas.theme import ThemeCreate, ThemeUpdate
from app.services.crud_service import CrudService


class ThemeService(CrudService[Theme]):
    entity_name = "Theme"
    repo_name = "theme_repo"

    def create_theme(self, payload: ThemeCreate) -> Theme:
        draft = ThemeDraft(name=payload.name, description=payload.description)
        return self.create(draft.to_values())

    def update_theme(self, theme_id: int, payload: ThemeUpdate | None) -> Theme:
        changes = FieldChanges.from_payload(payload, nullable=THEME_NULLABLE_FIELDS)
        return self.update(theme_id, validate_theme_changes(changes))
