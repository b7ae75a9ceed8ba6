"""FastAPI dependencies."""

from functools import lru_cache

from app.core.config import settings
from app.models.database_manager import DatabaseManager
from app.services.request_handler import LibraryRequestHandler
from app.services.resolver import ResourceResolver
from app.stores.base import RecordStore
from app.stores.database_store import DatabaseRecordStore
from app.stores.json_store import JsonRecordStore


@lru_cache
def get_database_manager() -> DatabaseManager:
    return DatabaseManager(settings.database_url)


@lru_cache
def get_record_store() -> RecordStore:
    if settings.record_store == "database":
        return DatabaseRecordStore(get_database_manager())
    return JsonRecordStore(settings.data_file)


@lru_cache
def get_resource_resolver() -> ResourceResolver:
    return ResourceResolver(get_record_store())


@lru_cache
def get_request_handler() -> LibraryRequestHandler:
    return LibraryRequestHandler(get_resource_resolver())


def reset_dependency_caches() -> None:
    """Utility for tests to clear cached singletons."""

    get_database_manager.cache_clear()
    get_record_store.cache_clear()
    get_resource_resolver.cache_clear()
    get_request_handler.cache_clear()
