from flask import current_app

from .base import (
    CategoryDetail,
    CategoryRecord,
    ComponentRecord,
    DuplicateRecordError,
    PromptRecord,
    PromptView,
    Storage,
)
from .database import DatabaseStorage
from .memory import InMemoryStorage

EXTENSION_KEY = "prompt_catalog.storage"


def init_storage(app, storage: Storage) -> Storage:
    app.extensions[EXTENSION_KEY] = storage
    return storage


def get_storage() -> Storage:
    """Storage attached to the current app by create_app."""
    return current_app.extensions[EXTENSION_KEY]


__all__ = [
    "CategoryDetail",
    "CategoryRecord",
    "ComponentRecord",
    "DatabaseStorage",
    "DuplicateRecordError",
    "InMemoryStorage",
    "PromptRecord",
    "PromptView",
    "Storage",
    "get_storage",
    "init_storage",
]
