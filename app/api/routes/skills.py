from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.unit_of_work import UnitOfWork
from app.database.db_setup import get_db
from app.schemas.common import ErrorRead
from app.schemas.skill import SkillCreate, SkillDeleted, SkillRead, SkillUpdate
from app.services.skill_service import SkillService

router = APIRouter(prefix="/skills", tags=["Skills"])

_ERRORS = {400: {"model": ErrorRead}, 404: {"model": ErrorRead}, 500: {"model": ErrorRead}}


def get_service(db: Session = Depends(get_db)) -> SkillService:
    return SkillService(UnitOfWork(session=db))


@router.get("", response_model=list[SkillRead], status_code=200)
def list_skills(service: SkillService = Depends(get_service)):
    return service.list_all()


@router.get("/{skill_id}", response_model=SkillRead, status_code=200, responses=_ERRORS)
def get_skill(skill_id: int, service: SkillService = Depends(get_service)):
    return service.get(skill_id)


@router.post("", response_model=SkillRead, status_code=201, responses=_ERRORS)
def create_skill(payload: SkillCreate, service: SkillService = Depends(get_service)):
    return service.create_skill(payload)


@router.put("/{skill_id}", response_model=SkillRead, status_code=200, responses=_ERRORS)
def update_skill(
    skill_id: int,
    payload: SkillUpdate | None = None,
    service: SkillService = Depends(get_service),
):
    return service.update_skill(skill_id, payload)


@router.delete("/{skill_id}", response_model=SkillDeleted, status_code=200, responses=_ERRORS)
def delete_skill(skill_id: int, service: SkillService = Depends(get_service)):
    skill = service.delete(skill_id)
    return SkillDeleted(
        message=service.deleted_message(skill_id),
        skill=SkillRead.model_validate(skill),
    )
