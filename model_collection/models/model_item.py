"""Model Item: pydantic reference implementation of the CollectionItem contract.

Invariants:
    - from_raw_data returns an instance of cls or raises ItemConstructionError
    - has_key is true for declared fields and for extra keys kept from raw data
    - get_by_key never raises: absent keys read as None
    - serialize() output is accepted back by from_raw_data

Design Decisions:
    - extra="allow": raw records often carry more keys than a model declares,
      and key-based queries should still see them
    - pydantic ValidationError wrapped in ItemConstructionError so callers catch
      one hierarchy; the pydantic error stays chained as __cause__
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from model_collection.core.domain_types import JSONValue
from model_collection.core.errors import ItemConstructionError
from model_collection.core.loose_equality import loose_equals


class ModelItem(BaseModel):
    """Base class for collectable models; subclass and declare fields."""

    model_config = ConfigDict(extra="allow")

    @classmethod
    def from_raw_data(cls, data: Any) -> "ModelItem":
        """Build an item from a mapping of raw values."""
        if isinstance(data, cls):
            return data
        if not isinstance(data, Mapping):
            raise ItemConstructionError(
                cls.__name__, f"expected a mapping, got {type(data).__name__}",
            )
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            raise ItemConstructionError(
                cls.__name__,
                f"{exc.error_count()} validation error(s)",
                errors=exc.errors(include_url=False),
            ) from exc

    def has_key(self, key: str) -> bool:
        return key in type(self).model_fields or key in (self.model_extra or {})

    def get_by_key(self, key: str) -> Any:
        if key in type(self).model_fields:
            return getattr(self, key)
        return (self.model_extra or {}).get(key)

    def assert_by_key(self, key: str, value: Any) -> bool:
        """Loose comparison of the stored value with value."""
        return loose_equals(self.get_by_key(key), value)

    def value_keys(self) -> list[str]:
        """Declared field names followed by extra keys, in definition order."""
        return [*type(self).model_fields, *(self.model_extra or {})]

    def serialize(self) -> JSONValue:
        return self.model_dump(mode="json")
