"""Core test fixtures: raw records and prebuilt collections."""

import pytest

from model_collection.core.model_collection import ModelCollection
from tests.core.sample_items import Task


@pytest.fixture
def task_records():
    return [
        {"id": 1, "title": "Write report", "status": "active"},
        {"id": 2, "title": "Review PR", "status": "inactive"},
        {"id": 3, "title": "Deploy", "status": "active"},
    ]


@pytest.fixture
def tasks(task_records):
    return ModelCollection(task_records, Task)
