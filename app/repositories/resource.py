from app.models.resource import Resource
from app.repositories.base import CrudRepo


class ResourceRepo(CrudRepo[Resource]):
    model = Resource
    touch_column = "updated_at"
