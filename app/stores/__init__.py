"""Record store adapters serving library records."""

from .base import RecordStore, build_library
from .database_store import DatabaseRecordStore
from .json_store import JsonRecordStore
from .memory import InMemoryRecordStore

__all__ = [
    "RecordStore",
    "build_library",
    "DatabaseRecordStore",
    "JsonRecordStore",
    "InMemoryRecordStore",
]
