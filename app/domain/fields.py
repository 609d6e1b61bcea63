from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from pydantic import BaseModel

from app.exceptions.exceptions import ValidationError

NAME_REQUIRED = "name is required"
INVALID_NAME = "Invalid name"


def clean_text(value: Any, message: str) -> str:
    """Return ``value`` trimmed, or raise ``ValidationError(message)`` if it is blank."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message)
    return value.strip()


class FieldChanges(Mapping[str, Any]):
    """The fields a client explicitly sent in a partial update.

    A key that is missing means "keep the stored value". A key mapped to
    ``None`` means "store NULL" and only survives for nullable columns;
    ``None`` on any other field is dropped as if it had not been sent.
    """

    def __init__(self, values: Mapping[str, Any] | None = None):
        self._values = dict(values or {})

    @classmethod
    def from_payload(cls, payload: BaseModel | None, nullable: Iterable[str] = ()) -> "FieldChanges":
        if payload is None:
            return cls()
        allowed_nulls = set(nullable)
        sent = payload.model_dump(exclude_unset=True)
        return cls({key: value for key, value in sent.items() if value is not None or key in allowed_nulls})

    def replace(self, **values: Any) -> "FieldChanges":
        return FieldChanges({**self._values, **values})

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"FieldChanges({self._values!r})"
