"""Resolve request paths against the library resource hierarchy."""

from typing import Optional, Sequence

from app.core.logging import get_logger
from app.models.outcomes import (
    LibraryFound,
    NotFound,
    Outcome,
    TutorialFound,
    TutorialListFound,
    VersionFound,
)
from app.models.schemas import Library
from app.stores.base import RecordStore

logger = get_logger(__name__)

TUTORIALS_SEGMENT = "tutorials"


class ResourceResolver:
    """Walks ``library[/version | /tutorials[/tutorial]]`` left to right.

    The first segment that fails to resolve decides the outcome, so a missing
    library always masks whatever deeper segment was requested. Identifiers
    are matched exactly.
    """

    def __init__(self, store: RecordStore):
        self.store = store

    def resolve(self, segments: Sequence[str]) -> Outcome:
        """Resolve decoded path segments following ``/libraries``."""
        segments = list(segments)
        if not segments or len(segments) > 3:
            raise ValueError(f"Unsupported library path: {'/'.join(segments)!r}")

        name = segments[0]
        if len(segments) == 1:
            return self.resolve_library(name)
        if segments[1] != TUTORIALS_SEGMENT:
            if len(segments) == 3:
                raise ValueError(
                    f"Unsupported library path: {'/'.join(segments)!r}"
                )
            return self.resolve_version(name, segments[1])
        if len(segments) == 2:
            return self.resolve_tutorials(name)
        return self.resolve_tutorial(name, segments[2])

    def resolve_library(self, name: str) -> Outcome:
        library = self._lookup(name)
        if library is None:
            return NotFound.library()
        return LibraryFound(library)

    def resolve_version(self, name: str, version: str) -> Outcome:
        library = self._lookup(name)
        if library is None:
            return NotFound.library()

        asset = library.get_version(version)
        if asset is None:
            logger.debug(f"Version '{version}' of '{name}' not found")
            return NotFound.version()
        return VersionFound(library, asset)

    def resolve_tutorials(self, name: str) -> Outcome:
        library = self._lookup(name)
        if library is None:
            return NotFound.library()
        return TutorialListFound(library, tuple(library.tutorials))

    def resolve_tutorial(self, name: str, tutorial_id: str) -> Outcome:
        library = self._lookup(name)
        if library is None:
            return NotFound.library()

        tutorial = library.get_tutorial(tutorial_id)
        if tutorial is None:
            logger.debug(f"Tutorial '{tutorial_id}' of '{name}' not found")
            return NotFound.tutorial()
        return TutorialFound(library, tutorial)

    def _lookup(self, name: str) -> Optional[Library]:
        library = self.store.get_library(name)
        if library is None:
            logger.debug(f"Library '{name}' not found")
        return library
