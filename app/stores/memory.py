"""In-memory record store."""

from typing import Dict, Iterable, List, Optional

from app.models.schemas import Library
from app.stores.base import RecordStore


class InMemoryRecordStore(RecordStore):
    """Serves libraries from a dict keyed by exact library name."""

    def __init__(self, libraries: Iterable[Library] = ()):
        self._libraries: Dict[str, Library] = {
            library.name: library for library in libraries
        }

    def get_library(self, name: str) -> Optional[Library]:
        return self._libraries.get(name)

    def libraries(self) -> List[Library]:
        """Return every library in insertion order."""
        return list(self._libraries.values())

    def health_check(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self._libraries)
