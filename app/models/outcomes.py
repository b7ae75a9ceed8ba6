"""Resolution outcomes produced by the resource resolver.

Every request path resolves to exactly one of the variants below. Misses are
values rather than exceptions so the request handler can branch on them
without relying on control flow.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Tuple, Union

from .enums import ResourceKind
from .schemas import Library, Tutorial, Version


@dataclass(frozen=True)
class LibraryFound:
    library: Library

    kind: ClassVar[ResourceKind] = ResourceKind.LIBRARY


@dataclass(frozen=True)
class VersionFound:
    library: Library
    version: Version

    kind: ClassVar[ResourceKind] = ResourceKind.VERSION


@dataclass(frozen=True)
class TutorialListFound:
    library: Library
    tutorials: Tuple[Tutorial, ...]

    kind: ClassVar[ResourceKind] = ResourceKind.TUTORIAL_LIST


@dataclass(frozen=True)
class TutorialFound:
    library: Library
    tutorial: Tutorial

    kind: ClassVar[ResourceKind] = ResourceKind.TUTORIAL


@dataclass(frozen=True)
class NotFound:
    """A path segment failed to resolve."""

    kind: ResourceKind
    reason: str

    @classmethod
    def library(cls) -> "NotFound":
        return cls(ResourceKind.LIBRARY, "Library not found")

    @classmethod
    def version(cls) -> "NotFound":
        return cls(ResourceKind.VERSION, "Version not found")

    @classmethod
    def tutorial(cls) -> "NotFound":
        return cls(ResourceKind.TUTORIAL, "Tutorial not found")


Found = Union[LibraryFound, VersionFound, TutorialListFound, TutorialFound]
Outcome = Union[Found, NotFound]
