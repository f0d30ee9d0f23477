"""Collection Snapshot: serialization / restoration for ModelCollection.

Invariants:
    - collection_to_snapshot produces a JSON-safe dict
    - collection_from_snapshot rebuilds items through the raw-data constructor,
      so restored items are new instances
    - Missing keys fall back to an empty collection (forward-compatible)
    - A snapshot of one item type never restores as another

Design Decisions:
    - Item type recorded by qualified name, never pickled; snapshots are
      plain JSON
    - collection_class parameter lets subclasses restore as themselves
"""

from typing import Any

from model_collection.core.errors import SnapshotMismatchError
from model_collection.core.item_protocols import ItemT
from model_collection.core.model_collection import ModelCollection


def qualified_type_name(item_type: type) -> str:
    """Dotted module path plus qualname, used as the snapshot type tag."""
    return f"{item_type.__module__}.{item_type.__qualname__}"


def collection_to_snapshot(collection: ModelCollection) -> dict:
    """Serialize a collection to a JSON-safe dict."""
    items = collection.to_serializable()
    return {
        "item_type": qualified_type_name(collection.item_type),
        "count": len(items),
        "items": items,
    }


def collection_from_snapshot(
    snapshot: dict[str, Any],
    item_type: type[ItemT],
    collection_class: type[ModelCollection] = ModelCollection,
) -> ModelCollection[ItemT]:
    """Rebuild a collection of item_type from a snapshot dict."""
    expected = qualified_type_name(item_type)
    recorded = snapshot.get("item_type")
    if recorded is not None and recorded != expected:
        raise SnapshotMismatchError(expected, recorded)
    return collection_class(snapshot.get("items") or [], item_type)
