import logging

from app.domain.fields import FieldChanges
from app.domain.resource import RESOURCE_NULLABLE_FIELDS, ResourceDraft, validate_resource_changes
from app.models.resource import Resource
from app.schemas.resource import ResourceCreate, ResourceUpdate
from app.services.crud_service import CrudService

logger = logging.getLogger(__name__)


class ResourceService(CrudService[Resource]):
    entity_name = "Resource"
    repo_name = "resource_repo"

    def create_resource(self, payload: ResourceCreate) -> Resource:
        draft = ResourceDraft(**payload.model_dump())
        return self.create(draft.to_values())

    def update_resource(self, resource_id: int, payload: ResourceUpdate | None) -> Resource:
        changes = FieldChanges.from_payload(payload, nullable=RESOURCE_NULLABLE_FIELDS)
        return self.update(resource_id, validate_resource_changes(changes))

    def delete(self, entity_id: int) -> Resource:
        """Delete a resource together with every skill link pointing at it.

        Both deletions run in one transaction: if either fails nothing is removed.
        """
        with self.uow:
            resource = self.repo.get_by_id(entity_id)
            if resource is None:
                raise self.not_found()
            removed_links = self.uow.resource_skill_repo.delete_for_resource(entity_id)
            self.repo.delete(resource)
        logger.info("Resource deleted", extra={"entity_id": entity_id, "removed_links": removed_links})
        return resource
