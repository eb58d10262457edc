"""
Entity store package. ``build_storage`` picks the backend from settings.
"""
from marketplace.core.config import Settings
from .base import Storage
from .memory import MemStorage
from .sql import SqlStorage


def build_storage(config: Settings) -> Storage:
    backend = config.STORAGE_BACKEND.lower()
    if backend == "memory":
        return MemStorage()
    if backend == "sql":
        return SqlStorage(config.DATABASE_URL)
    raise ValueError(f"Unknown storage backend: {config.STORAGE_BACKEND}")


__all__ = ["Storage", "MemStorage", "SqlStorage", "build_storage"]
