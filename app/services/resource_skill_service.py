from __future__ import annotations

import logging

from app.core.unit_of_work import UnitOfWork
from app.exceptions.exceptions import NotFoundError
from app.models.resource_skill import ResourceSkill

logger = logging.getLogger(__name__)


class ResourceSkillService:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def list_links(self) -> list[ResourceSkill]:
        with self.uow.read_only():
            return self.uow.resource_skill_repo.list_all()

    def get_link(self, *, resource_id: int, skill_id: int) -> ResourceSkill:
        with self.uow.read_only():
            link = self.uow.resource_skill_repo.get(resource_id, skill_id)
            if link is None:
                raise NotFoundError("Link not found")
            return link

    def create_link(self, *, resource_id: int, skill_id: int) -> ResourceSkill | None:
        """Link a resource to a skill; returns None if the pair was already linked."""
        with self.uow:
            link = self.uow.resource_skill_repo.add_if_absent(resource_id, skill_id)
        if link is None:
            logger.debug("Link already exists", extra={"resource_id": resource_id, "skill_id": skill_id})
        else:
            logger.info("Link created", extra={"resource_id": resource_id, "skill_id": skill_id})
        return link

    def delete_link(self, *, resource_id: int, skill_id: int) -> ResourceSkill:
        with self.uow:
            link = self.uow.resource_skill_repo.get(resource_id, skill_id)
            if link is None:
                raise NotFoundError("Link not found")
            self.uow.resource_skill_repo.delete(link)
        logger.info("Link deleted", extra={"resource_id": resource_id, "skill_id": skill_id})
        return link
