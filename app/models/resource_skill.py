from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from app.database.db_setup import Base


class ResourceSkill(Base):
    __tablename__ = "resources_skills"

    resource_id: Mapped[int] = mapped_column(ForeignKey("resources.id"), primary_key=True)
    skill_id: Mapped[int] = mapped_column(ForeignKey("skills.id"), primary_key=True, index=True)
