"""Collection Snapshot: tests for collection_to_snapshot / collection_from_snapshot.

Invariants:
    - to_snapshot produces a JSON-safe dict tagged with the item type
    - from_snapshot rebuilds equal items as new instances
    - Missing keys fall back to an empty collection
    - A snapshot of another item type is refused
"""

import json

import pytest

from model_collection.core.collection_snapshot import (
    collection_from_snapshot, collection_to_snapshot, qualified_type_name,
)
from model_collection.core.errors import SnapshotMismatchError
from model_collection.core.model_collection import ModelCollection
from tests.core.sample_items import Note, Task, Ticket


class TaskCollection(ModelCollection):
    pass


# -- to_snapshot ---------------------------------------------------------------

def test_snapshot_shape(tasks):
    snapshot = collection_to_snapshot(tasks)
    assert snapshot["item_type"] == "tests.core.sample_items.Task"
    assert snapshot["count"] == 3
    assert snapshot["items"] == tasks.to_serializable()


def test_snapshot_is_json_safe(tasks):
    snapshot = collection_to_snapshot(tasks)
    assert json.loads(json.dumps(snapshot)) == snapshot


def test_snapshot_of_empty_collection():
    snapshot = collection_to_snapshot(ModelCollection([], Task))
    assert snapshot["count"] == 0
    assert snapshot["items"] == []


# -- from_snapshot -------------------------------------------------------------

def test_roundtrip_preserves_serialized_form(tasks):
    restored = collection_from_snapshot(collection_to_snapshot(tasks), Task)
    assert restored.to_serializable() == tasks.to_serializable()
    assert restored.item_type is Task


def test_roundtrip_builds_new_instances(tasks):
    restored = collection_from_snapshot(collection_to_snapshot(tasks), Task)
    assert restored.first() == tasks.first()
    assert restored.first() is not tasks.first()
    assert restored.first() not in tasks


def test_roundtrip_keeps_extra_keys():
    collection = ModelCollection([{"id": 1, "title": "a", "owner": "ana"}], Task)
    restored = collection_from_snapshot(collection_to_snapshot(collection), Task)
    assert restored.first().get_by_key("owner") == "ana"


def test_roundtrip_with_plain_class_items():
    tickets = ModelCollection([{"ref": "T-1"}, {"ref": "T-2"}], Ticket)
    restored = collection_from_snapshot(collection_to_snapshot(tickets), Ticket)
    assert restored.column("ref") == ["T-1", "T-2"]


def test_missing_keys_restore_empty():
    restored = collection_from_snapshot({}, Task)
    assert restored.count() == 0


def test_untagged_snapshot_is_accepted():
    restored = collection_from_snapshot({"items": [{"id": 1, "title": "a"}]}, Task)
    assert restored.first().id == 1


def test_mismatched_item_type_rejected(tasks):
    snapshot = collection_to_snapshot(tasks)
    with pytest.raises(SnapshotMismatchError) as exc_info:
        collection_from_snapshot(snapshot, Note)
    assert exc_info.value.found == qualified_type_name(Task)
    assert exc_info.value.expected == qualified_type_name(Note)
    assert exc_info.value.code == "SNAPSHOT_MISMATCH"


def test_restore_as_collection_subclass(tasks):
    restored = collection_from_snapshot(
        collection_to_snapshot(tasks), Task, collection_class=TaskCollection,
    )
    assert type(restored) is TaskCollection
    assert restored.count() == 3
