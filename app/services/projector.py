"""Field projection for resolved records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Union

from app.models.enums import FieldMode
from app.models.outcomes import (
    Found,
    LibraryFound,
    TutorialFound,
    TutorialListFound,
    VersionFound,
)

Payload = Union[Dict[str, Any], List[Dict[str, Any]]]

WILDCARD = "*"


@dataclass(frozen=True)
class FieldDirective:
    """Parsed form of the ``fields`` query parameter."""

    mode: FieldMode = FieldMode.DEFAULT
    names: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def parse(cls, raw: Optional[str]) -> "FieldDirective":
        """Parse ``a,b,c`` or ``*``; a missing or empty value means default.

        Names are case-sensitive. Surrounding whitespace and empty entries are
        dropped, and a ``*`` anywhere selects every field.
        """
        if not raw:
            return cls()

        names = frozenset(chunk.strip() for chunk in raw.split(",") if chunk.strip())
        if not names:
            return cls()
        if WILDCARD in names:
            return cls(FieldMode.WILDCARD)
        return cls(FieldMode.EXPLICIT, names)

    @property
    def is_explicit(self) -> bool:
        return self.mode is FieldMode.EXPLICIT


def select_fields(
    payload: Dict[str, Any],
    directive: FieldDirective,
    always: Iterable[str] = (),
) -> Dict[str, Any]:
    """Keep the requested keys of ``payload``; unknown names are ignored."""
    if not directive.is_explicit:
        return payload

    wanted = directive.names.union(always)
    return {key: value for key, value in payload.items() if key in wanted}


class FieldProjector:
    """Builds the response body for a resolved outcome.

    Default and wildcard directives both yield the full representation. An
    explicit directive is applied per object; for the tutorial collection it
    is applied to every element and ``id`` is always kept.
    """

    tutorial_list_always: FrozenSet[str] = frozenset({"id"})

    def project(self, outcome: Found, directive: FieldDirective) -> Payload:
        if isinstance(outcome, TutorialListFound):
            return [
                select_fields(
                    tutorial.to_payload(), directive, self.tutorial_list_always
                )
                for tutorial in outcome.tutorials
            ]
        return select_fields(self.full_representation(outcome), directive)

    @staticmethod
    def full_representation(outcome: Found) -> Dict[str, Any]:
        if isinstance(outcome, LibraryFound):
            return outcome.library.to_payload()
        if isinstance(outcome, VersionFound):
            return {"name": outcome.library.name, **outcome.version.to_payload()}
        if isinstance(outcome, TutorialFound):
            return outcome.tutorial.to_payload()
        raise TypeError(f"No single representation for {type(outcome).__name__}")
