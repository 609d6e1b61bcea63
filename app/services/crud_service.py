from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from app.core.unit_of_work import UnitOfWork
from app.domain.fields import FieldChanges
from app.exceptions.exceptions import NotFoundError
from app.repositories.base import CrudRepo

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class CrudService(Generic[ModelT]):
    """List/get/create/update/delete for one single-key entity.

    Subclasses name the entity (used in messages) and the unit-of-work
    repository they operate on. Validation happens in the subclasses before
    any of these methods touch the store.
    """

    entity_name: str = "Entity"
    repo_name: str

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @property
    def repo(self) -> CrudRepo[ModelT]:
        return getattr(self.uow, self.repo_name)

    def not_found(self) -> NotFoundError:
        return NotFoundError(f"{self.entity_name} not found")

    def list_all(self) -> list[ModelT]:
        with self.uow.read_only():
            entities = self.repo.list_all()
            logger.debug("Fetched %s rows", self.entity_name, extra={"count": len(entities)})
            return entities

    def get(self, entity_id: int) -> ModelT:
        with self.uow.read_only():
            entity = self.repo.get_by_id(entity_id)
            if entity is None:
                raise self.not_found()
            return entity

    def create(self, values: dict[str, Any]) -> ModelT:
        with self.uow:
            entity = self.repo.add(self.repo.model(**values))
        logger.info("%s created", self.entity_name, extra={"entity_id": entity.id})
        return entity

    def update(self, entity_id: int, changes: FieldChanges) -> ModelT:
        with self.uow:
            entity = self.repo.get_by_id(entity_id)
            if entity is None:
                raise self.not_found()
            return self.repo.update_fields(entity, dict(changes))

    def delete(self, entity_id: int) -> ModelT:
        with self.uow:
            entity = self.repo.get_by_id(entity_id)
            if entity is None:
                raise self.not_found()
            self.repo.delete(entity)
        logger.info("%s deleted", self.entity_name, extra={"entity_id": entity_id})
        return entity

    def deleted_message(self, entity_id: int) -> str:
        return f"{self.entity_name} {entity_id} deleted"
