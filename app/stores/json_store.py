"""Record store backed by a JSON catalogue file."""

import json
import threading
from pathlib import Path
from typing import Any, List, Optional, Union

from app.core.config import settings
from app.core.logging import get_logger
from app.models.schemas import Library
from app.services.exceptions import StoreError
from app.stores.base import RecordStore, build_library
from app.stores.memory import InMemoryRecordStore

logger = get_logger(__name__)


class JsonRecordStore(RecordStore):
    """Loads every library from a JSON file on first use.

    The file holds either a list of library objects or an object with a
    ``libraries`` list. Records are immutable once loaded, so the index is
    shared by all requests; ``reload`` swaps in a freshly parsed index.
    """

    def __init__(
        self,
        data_file: Union[str, Path] = None,
        cdn_base_url: Optional[str] = None,
    ) -> None:
        self.data_file = Path(data_file or settings.data_file)
        self.cdn_base_url = cdn_base_url or settings.cdn_base_url
        self._lock = threading.Lock()
        self._index: Optional[InMemoryRecordStore] = None

    def get_library(self, name: str) -> Optional[Library]:
        return self._get_index().get_library(name)

    def libraries(self) -> List[Library]:
        return self._get_index().libraries()

    def health_check(self) -> bool:
        try:
            self._get_index()
            return True
        except StoreError:
            return False

    def reload(self) -> None:
        """Re-read the catalogue file."""
        index = self._load()
        with self._lock:
            self._index = index

    def _get_index(self) -> InMemoryRecordStore:
        if self._index is not None:
            return self._index

        with self._lock:
            if self._index is None:
                self._index = self._load()
            return self._index

    def _load(self) -> InMemoryRecordStore:
        try:
            with self.data_file.open("r", encoding="utf-8") as handle:
                raw = json.load(handle)
        except (OSError, json.JSONDecodeError) as exc:
            logger.error(f"Failed to read library catalogue {self.data_file}: {exc}")
            raise StoreError(
                "Library catalogue unavailable", detail=str(exc)
            ) from exc

        entries = self._entries(raw)
        libraries = [build_library(entry, self.cdn_base_url) for entry in entries]
        logger.info(f"Loaded {len(libraries)} libraries from {self.data_file}")
        return InMemoryRecordStore(libraries)

    def _entries(self, raw: Any) -> List[dict]:
        if isinstance(raw, dict):
            raw = raw.get("libraries")
        if not isinstance(raw, list) or not all(isinstance(e, dict) for e in raw):
            raise StoreError(
                "Library catalogue unavailable",
                detail=f"{self.data_file} does not contain a list of libraries",
            )
        return raw
