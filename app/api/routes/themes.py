from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.unit_of_work import UnitOfWork
from app.database.db_setup import get_db
from app.schemas.common import ErrorRead
from app.schemas.theme import ThemeCreate, ThemeDeleted, ThemeRead, ThemeUpdate
from app.services.theme_service import ThemeService

router = APIRouter(prefix="/themes", tags=["Themes"])

_ERRORS = {400: {"model": ErrorRead}, 404: {"model": ErrorRead}, 500: {"model": ErrorRead}}


def get_service(db: Session = Depends(get_db)) -> ThemeService:
    return ThemeService(UnitOfWork(session=db))


@router.get("", response_model=list[ThemeRead], status_code=200)
def list_themes(service: ThemeService = Depends(get_service)):
    return service.list_all()


@router.get("/{theme_id}", response_model=ThemeRead, status_code=200, responses=_ERRORS)
def get_theme(theme_id: int, service: ThemeService = Depends(get_service)):
    return service.get(theme_id)


@router.post("", response_model=ThemeRead, status_code=201, responses=_ERRORS)
def create_theme(payload: ThemeCreate, service: ThemeService = Depends(get_service)):
    return service.create_theme(payload)


@router.put("/{theme_id}", response_model=ThemeRead, status_code=200, responses=_ERRORS)
def update_theme(
    theme_id: int,
    payload: ThemeUpdate | None = None,
    service: ThemeService = Depends(get_service),
):
    return service.update_theme(theme_id, payload)


@router.delete("/{theme_id}", response_model=ThemeDeleted, status_code=200, responses=_ERRORS)
def delete_theme(theme_id: int, service: ThemeService = Depends(get_service)):
    theme = service.delete(theme_id)
    return ThemeDeleted(
        message=service.deleted_message(theme_id),
        theme=ThemeRead.model_validate(theme),
    )
