"""Model Collection: typed, identity-based, insertion-ordered set of model items.

Invariants:
    - Every member is an instance of the declared item type
    - Membership is by object identity: the same instance is stored once,
      equal-but-distinct instances are all kept
    - Iteration order is insertion order; removal never reorders the rest
    - Derived collections (filter, filter_by_key) are new, independent objects
      sharing item references with the source
    - Lookup misses return None, they never raise

Design Decisions:
    - Members stored in a dict keyed by id(item); item __eq__/__hash__ are
      never consulted (pydantic models compare by value and are unhashable)
    - append() of a foreign type is a silent no-op, logged at DEBUG only
    - column()/unique() overwrite on repeated keys (last write wins) while the
      key keeps the slot of its first insertion
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from itertools import islice
from typing import Any, Generic

from model_collection.core.domain_types import IdentityToken, JSONValue, identity_token
from model_collection.core.errors import InvalidItemTypeError
from model_collection.core.item_protocols import ItemT
from model_collection.core.loose_equality import loose_equals

logger = logging.getLogger(__name__)


class ModelCollection(Generic[ItemT]):
    """Deduplicated, typed collection of model items with query helpers."""

    def __init__(self, items: Iterable[Any], item_type: type[ItemT]):
        if not isinstance(item_type, type) or not callable(
            getattr(item_type, "from_raw_data", None),
        ):
            raise InvalidItemTypeError(item_type)

        self.item_type: type[ItemT] = item_type
        self._items: dict[IdentityToken, ItemT] = {}
        for item in items:
            if isinstance(item, item_type):
                self._attach(item)
                continue
            self._attach(item_type.from_raw_data(item))

    # --- Mutation --------------------------------------------------------------

    def append(self, item: Any) -> None:
        """Attach an item of the declared type; anything else is ignored."""
        if isinstance(item, self.item_type):
            self._attach(item)
            return
        logger.debug(
            "Dropped %s on append to %s collection",
            type(item).__name__, self.item_type.__name__,
            extra={"item_type": self.item_type.__name__, "operation": "append"},
        )

    def remove(self, item: Any) -> None:
        """Detach an item if it is a member; no-op otherwise."""
        if item in self:
            del self._items[identity_token(item)]

    def add(self, raw_data: Any) -> ItemT:
        """Build a new item from raw data and append it."""
        item = self.item_type.from_raw_data(raw_data)
        self.append(item)
        return item

    def _attach(self, item: ItemT) -> None:
        self._items.setdefault(identity_token(item), item)

    # --- Container protocol ----------------------------------------------------

    def __iter__(self) -> Iterator[ItemT]:
        """Iterate members in insertion order.

        Walks a tuple snapshot taken when iteration starts, so remove() or
        append() inside a loop is safe; members appended mid-loop are not
        visited. The snapshot costs one reference per member.
        """
        return iter(tuple(self._items.values()))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return self._items.get(identity_token(item)) is item

    def __repr__(self) -> str:
        return f"{type(self).__name__}[{self.item_type.__name__}](count={len(self)})"

    def count(self) -> int:
        """Number of distinct members."""
        return len(self._items)

    def first(self) -> ItemT | None:
        """First item in iteration order, None when empty."""
        return next(iter(self._items.values()), None)

    def get_by_index(self, index: int) -> ItemT | None:
        """Item at a 0-based position in iteration order, None if out of range."""
        if index < 0:
            return None
        return next(islice(self._items.values(), index, None), None)

    # --- Projection ------------------------------------------------------------

    def column(
        self,
        key: str,
        index_key: str | None = None,
        mapper: Callable[[Any], Any] | None = None,
    ) -> list | dict:
        """Project one key from every item.

        Without index_key (None or empty) the result is a list aligned with
        iteration order.
        With index_key the result is a dict keyed by each item's index_key
        value; items with a missing or blank index value take the next free
        integer slot. Repeated index values overwrite earlier ones.
        """
        if not index_key:
            return [self._project(item, key, mapper) for item in self]

        result: dict = {}
        next_index = 0
        for item in self:
            value = self._project(item, key, mapper)
            item_key = item.get_by_key(index_key) if item.has_key(index_key) else None
            if not item_key:
                result[next_index] = value
                next_index += 1
                continue
            result[item_key] = value
            if type(item_key) is int and item_key >= next_index:
                next_index = item_key + 1
        return result

    def unique(self, key: str, mapper: Callable[[Any], Any] | None = None) -> list:
        """Distinct values of a key, ordered by first occurrence, last write wins."""
        result: dict = {}
        for item in self:
            raw = item.get_by_key(key) if item.has_key(key) else None
            result[raw] = mapper(raw) if mapper is not None else raw
        return list(result.values())

    def map(self, fn: Callable[[ItemT], Any]) -> list:
        """Apply fn to every member, in iteration order."""
        return [fn(item) for item in self]

    @staticmethod
    def _project(item: ItemT, key: str, mapper: Callable[[Any], Any] | None) -> Any:
        value = item.get_by_key(key) if item.has_key(key) else None
        return mapper(value) if mapper is not None else value

    # --- Filtering -------------------------------------------------------------

    def filter_by_key(self, key: str, value: Any) -> "ModelCollection[ItemT]":
        """New collection of items whose key loosely equals value."""
        filtered = self._derive(())
        for item in self:
            if item.has_key(key) and item.assert_by_key(key, value):
                filtered.append(item)
        return filtered

    def filter(self, predicate: Callable[[ItemT], Any]) -> "ModelCollection[ItemT]":
        """New collection of items for which predicate is truthy."""
        return self._derive(item for item in self if predicate(item))

    def _derive(self, items: Iterable[ItemT]) -> "ModelCollection[ItemT]":
        # type(self) keeps subclasses closed under filtering.
        return type(self)(items, self.item_type)

    # --- Lookup ----------------------------------------------------------------

    def find_by_key(self, key: str, value: Any) -> ItemT | None:
        """First item whose key loosely equals value."""
        for item in self:
            if item.has_key(key) and item.assert_by_key(key, value):
                return item
        return None

    def find_by_column(self, key: str, value: Any) -> ItemT | None:
        """First item with a non-None value at key loosely equal to value."""
        def matches(item: ItemT) -> bool:
            if not item.has_key(key):
                return False
            current = item.get_by_key(key)
            return current is not None and loose_equals(current, value)

        return self.find(matches)

    def find(self, predicate: Callable[[ItemT], Any]) -> ItemT | None:
        """First item for which predicate is truthy."""
        for item in self:
            if predicate(item):
                return item
        return None

    # --- Serialization ---------------------------------------------------------

    def to_serializable(self) -> list[JSONValue]:
        """Serialized form of every member, in iteration order."""
        return [item.serialize() for item in self]
