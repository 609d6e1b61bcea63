from app.models.skill import Skill
from app.repositories.base import CrudRepo


class SkillRepo(CrudRepo[Skill]):
    model = Skill
