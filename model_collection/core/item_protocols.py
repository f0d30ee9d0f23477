"""Item Protocols: the capability contract a collection calls into.

Invariants:
    - The collection reads items only through CollectionItem methods
    - The collection builds items only through item_type.from_raw_data(data),
      a classmethod every collectable class provides
    - The protocol exposes no way for the collection to mutate an item's internals

Design Decisions:
    - Protocol, not ABC: any class with these methods
      can be collected without inheriting from models.ModelItem
    - from_raw_data is a classmethod, not __init__(data), so constructors
      stay free for the item's own signature
"""

from typing import Any, Protocol, TypeVar, runtime_checkable

from model_collection.core.domain_types import JSONValue


@runtime_checkable
class CollectionItem(Protocol):
    """Keyed read access plus a serialized form."""
    def has_key(self, key: str) -> bool: ...
    def get_by_key(self, key: str) -> Any: ...
    def assert_by_key(self, key: str, value: Any) -> bool: ...
    def serialize(self) -> JSONValue: ...


ItemT = TypeVar("ItemT", bound=CollectionItem)
