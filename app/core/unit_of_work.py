from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session

from app.repositories.resource import ResourceRepo
from app.repositories.resource_skill import ResourceSkillRepo
from app.repositories.skill import SkillRepo
from app.repositories.theme import ThemeRepo


class UnitOfWork:
    """One database transaction shared by the entity repositories.

    Repositories are built lazily on first access and all use the same
    session, so work done through several of them commits or rolls back as a
    single unit. Use it as a context manager for writes and ``read_only()``
    for queries.
    """

    def __init__(self, session: Session):
        self.session = session
        self._resource_repo = None
        self._theme_repo = None
        self._skill_repo = None
        self._resource_skill_repo = None

    @property
    def resource_repo(self) -> ResourceRepo:
        if self._resource_repo is None:
            self._resource_repo = ResourceRepo(self.session)
        return self._resource_repo

    @property
    def theme_repo(self) -> ThemeRepo:
        if self._theme_repo is None:
            self._theme_repo = ThemeRepo(self.session)
        return self._theme_repo

    @property
    def skill_repo(self) -> SkillRepo:
        if self._skill_repo is None:
            self._skill_repo = SkillRepo(self.session)
        return self._skill_repo

    @property
    def resource_skill_repo(self) -> ResourceSkillRepo:
        if self._resource_skill_repo is None:
            self._resource_skill_repo = ResourceSkillRepo(self.session)
        return self._resource_skill_repo

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()

    def __enter__(self) -> "UnitOfWork":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Commit when the block succeeds, roll back when it raises.

        The exception itself is never swallowed.
        """
        if exc_type:
            self.rollback()
        else:
            self.commit()

    @contextmanager
    def read_only(self) -> Iterator["UnitOfWork"]:
        """Run queries without committing; roll back if a read fails."""
        try:
            yield self
        except Exception:
            self.rollback()
            raise
