"""Shared pytest fixtures for the library metadata API."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pytest
from fastapi.testclient import TestClient

from app.api import dependencies as dependency_cache
from app.api.dependencies import get_record_store, get_request_handler
from app.main import app
from app.models.database_manager import Base, DatabaseManager
from app.services.request_handler import LibraryRequestHandler
from app.services.resolver import ResourceResolver
from app.stores.database_store import DatabaseRecordStore
from app.stores.json_store import JsonRecordStore

FIXTURE_FILE = Path(__file__).parent / "fixtures" / "libraries.json"
CDN_BASE_URL = "https://cdnjs.cloudflare.com/ajax/libs"


@pytest.fixture(autouse=True)
def reset_dependency_singletons():
    """Ensure global dependency caches do not leak between tests."""

    dependency_cache.reset_dependency_caches()
    yield
    dependency_cache.reset_dependency_caches()


@pytest.fixture()
def fixture_file() -> Path:
    return FIXTURE_FILE


@pytest.fixture()
def json_store() -> JsonRecordStore:
    return JsonRecordStore(FIXTURE_FILE, cdn_base_url=CDN_BASE_URL)


@pytest.fixture()
def backbone(json_store: JsonRecordStore):
    return json_store.get_library("backbone.js")


@pytest.fixture()
def resolver(json_store: JsonRecordStore) -> ResourceResolver:
    return ResourceResolver(json_store)


@pytest.fixture()
def request_handler(resolver: ResourceResolver) -> LibraryRequestHandler:
    return LibraryRequestHandler(resolver)


@pytest.fixture()
def db_manager(tmp_path: Path) -> Iterable[DatabaseManager]:
    manager = DatabaseManager(f"sqlite:///{tmp_path / 'libraries.db'}")
    Base.metadata.drop_all(bind=manager.engine)
    Base.metadata.create_all(bind=manager.engine)
    try:
        yield manager
    finally:
        manager.close()


@pytest.fixture()
def database_store(
    db_manager: DatabaseManager, json_store: JsonRecordStore
) -> DatabaseRecordStore:
    store = DatabaseRecordStore(db_manager, cdn_base_url=CDN_BASE_URL)
    for library in json_store.libraries():
        store.save_library(library)
    return store


@pytest.fixture()
def test_client(
    json_store: JsonRecordStore,
    request_handler: LibraryRequestHandler,
):
    overrides = {
        get_record_store: lambda: json_store,
        get_request_handler: lambda: request_handler,
    }

    app.dependency_overrides.update(overrides)
    client = TestClient(app, raise_server_exceptions=False)

    try:
        yield client
    finally:
        app.dependency_overrides.clear()
