from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.core.unit_of_work import UnitOfWork
from app.database.db_setup import get_db
from app.schemas.common import ErrorRead, MessageRead
from app.schemas.resource_skill import ResourceSkillCreate, ResourceSkillDeleted, ResourceSkillRead
from app.services.resource_skill_service import ResourceSkillService

router = APIRouter(prefix="/resources-skills", tags=["Resources-Skills"])

_ERRORS = {400: {"model": ErrorRead}, 404: {"model": ErrorRead}, 500: {"model": ErrorRead}}


def get_service(db: Session = Depends(get_db)) -> ResourceSkillService:
    return ResourceSkillService(UnitOfWork(session=db))


@router.get("", response_model=list[ResourceSkillRead], status_code=200)
def list_links(service: ResourceSkillService = Depends(get_service)):
    return service.list_links()


@router.get("/{resource_id}/{skill_id}", response_model=ResourceSkillRead, status_code=200, responses=_ERRORS)
def get_link(resource_id: int, skill_id: int, service: ResourceSkillService = Depends(get_service)):
    return service.get_link(resource_id=resource_id, skill_id=skill_id)


@router.post(
    "",
    response_model=ResourceSkillRead | MessageRead,
    status_code=201,
    responses={200: {"model": MessageRead, "description": "Link already exists"}, **_ERRORS},
)
def create_link(
    payload: ResourceSkillCreate,
    response: Response,
    service: ResourceSkillService = Depends(get_service),
):
    link = service.create_link(resource_id=payload.resource_id, skill_id=payload.skill_id)
    if link is None:
        response.status_code = status.HTTP_200_OK
        return MessageRead(message="Link already exists")
    return ResourceSkillRead.model_validate(link)


@router.delete(
    "/{resource_id}/{skill_id}", response_model=ResourceSkillDeleted, status_code=200, responses=_ERRORS
)
def delete_link(resource_id: int, skill_id: int, service: ResourceSkillService = Depends(get_service)):
    link = service.delete_link(resource_id=resource_id, skill_id=skill_id)
    return ResourceSkillDeleted(message="Link deleted", link=ResourceSkillRead.model_validate(link))
