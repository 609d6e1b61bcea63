from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from app.models.resource_skill import ResourceSkill

_UPSERT_DIALECTS = {"postgresql": postgresql.insert, "sqlite": sqlite.insert}


class ResourceSkillRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> list[ResourceSkill]:
        stmt = select(ResourceSkill).order_by(ResourceSkill.resource_id, ResourceSkill.skill_id)
        return list(self.db.execute(stmt).scalars().all())

    def get(self, resource_id: int, skill_id: int) -> Optional[ResourceSkill]:
        return self.db.get(ResourceSkill, (resource_id, skill_id))

    def add_if_absent(self, resource_id: int, skill_id: int) -> Optional[ResourceSkill]:
        """Insert the pair, or return None when it already exists."""
        insert = _UPSERT_DIALECTS.get(self.db.get_bind().dialect.name)
        if insert is None:
            if self.get(resource_id, skill_id) is not None:
                return None
            link = ResourceSkill(resource_id=resource_id, skill_id=skill_id)
            self.db.add(link)
            self.db.flush()
            return link

        stmt = (
            insert(ResourceSkill)
            .values(resource_id=resource_id, skill_id=skill_id)
            .on_conflict_do_nothing(index_elements=["resource_id", "skill_id"])
            .returning(ResourceSkill)
        )
        return self.db.scalars(stmt).one_or_none()

    def delete(self, link: ResourceSkill) -> None:
        self.db.delete(link)
        self.db.flush()

    def delete_for_resource(self, resource_id: int) -> int:
        stmt = delete(ResourceSkill).where(ResourceSkill.resource_id == resource_id)
        return self.db.execute(stmt).rowcount
