from typing import Any, Generic, Optional, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

ModelT = TypeVar("ModelT")


class CrudRepo(Generic[ModelT]):
    """Single-key table access shared by every entity repository.

    Subclasses set ``model``; tables with an ``updated_at`` style column set
    ``touch_column`` so every update refreshes it server-side.
    """

    model: type[ModelT]
    touch_column: str | None = None

    def __init__(self, db: Session):
        self.db = db

    def add(self, entity: ModelT) -> ModelT:
        self.db.add(entity)
        self.db.flush()
        self.db.refresh(entity)
        return entity

    def get_by_id(self, entity_id: int) -> Optional[ModelT]:
        return self.db.get(self.model, entity_id)

    def list_all(self) -> list[ModelT]:
        stmt = select(self.model).order_by(self.model.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def update_fields(self, entity: ModelT, values: dict[str, Any]) -> ModelT:
        for field, value in values.items():
            setattr(entity, field, value)
        if self.touch_column:
            setattr(entity, self.touch_column, func.now())
        self.db.flush()
        self.db.refresh(entity)
        return entity

    def delete(self, entity: ModelT) -> None:
        self.db.delete(entity)
        self.db.flush()
