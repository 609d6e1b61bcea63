from app.models.theme import Theme
from app.repositories.base import CrudRepo


class ThemeRepo(CrudRepo[Theme]):
    model = Theme
    touch_column = "updated_at"
