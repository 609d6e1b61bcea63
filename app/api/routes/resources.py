from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.unit_of_work import UnitOfWork
from app.database.db_setup import get_db
from app.schemas.common import ErrorRead
from app.schemas.resource import ResourceCreate, ResourceDeleted, ResourceRead, ResourceUpdate
from app.services.resource_service import ResourceService

router = APIRouter(prefix="/resources", tags=["Resources"])

_ERRORS = {400: {"model": ErrorRead}, 404: {"model": ErrorRead}, 500: {"model": ErrorRead}}


def get_service(db: Session = Depends(get_db)) -> ResourceService:
    return ResourceService(UnitOfWork(session=db))


@router.get("", response_model=list[ResourceRead], status_code=200)
def list_resources(service: ResourceService = Depends(get_service)):
    return service.list_all()


@router.get("/{resource_id}", response_model=ResourceRead, status_code=200, responses=_ERRORS)
def get_resource(resource_id: int, service: ResourceService = Depends(get_service)):
    return service.get(resource_id)


@router.post("", response_model=ResourceRead, status_code=201, responses=_ERRORS)
def create_resource(payload: ResourceCreate, service: ResourceService = Depends(get_service)):
    return service.create_resource(payload)


@router.put("/{resource_id}", response_model=ResourceRead, status_code=200, responses=_ERRORS)
def update_resource(
    resource_id: int,
    payload: ResourceUpdate | None = None,
    service: ResourceService = Depends(get_service),
):
    return service.update_resource(resource_id, payload)


@router.delete("/{resource_id}", response_model=ResourceDeleted, status_code=200, responses=_ERRORS)
def delete_resource(resource_id: int, service: ResourceService = Depends(get_service)):
    resource = service.delete(resource_id)
    return ResourceDeleted(
        message=service.deleted_message(resource_id),
        resource=ResourceRead.model_validate(resource),
    )
