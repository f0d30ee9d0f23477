"""Root conftest: shared test configuration."""

import os

import pytest

from model_collection.config import get_settings

# Known logging defaults when the environment sets nothing
os.environ.setdefault("MODEL_COLLECTION_LOG_LEVEL", "INFO")
os.environ.setdefault("MODEL_COLLECTION_LOG_FORMAT", "json")


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
