from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, CheckConstraint, DateTime, ForeignKey, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.database.db_setup import Base
from app.models.enums import ResourceType

_TYPE_VALUES = ", ".join(f"'{member.value}'" for member in ResourceType)


class Resource(Base):
    __tablename__ = "resources"
    __table_args__ = (
        CheckConstraint(f"type IN ({_TYPE_VALUES})", name="ck_resources_type"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    url: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    theme_id: Mapped[int] = mapped_column(ForeignKey("themes.id"), nullable=False, index=True)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    is_ada: Mapped[bool] = mapped_column(Boolean, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
