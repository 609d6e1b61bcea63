from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.database.db_setup import Base


class Skill(Base):
    __tablename__ = "skills"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True, index=True)
    name: Mapped[str] = mapped_column(String(150), nullable=False)
