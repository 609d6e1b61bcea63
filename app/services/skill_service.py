from app.domain.fields import FieldChanges
from app.domain.skill import SkillDraft, validate_skill_changes
from app.models.skill import Skill
from app.schemas.skill import SkillCreate, SkillUpdate
from app.services.crud_service import CrudService


class SkillService(CrudService[Skill]):
    entity_name = "Skill"
    repo_name = "skill_repo"

    def create_skill(self, payload: SkillCreate) -> Skill:
        return self.create(SkillDraft(name=payload.name).to_values())

    def update_skill(self, skill_id: int, payload: SkillUpdate | None) -> Skill:
        changes = FieldChanges.from_payload(payload)
        return self.update(skill_id, validate_skill_changes(changes))
