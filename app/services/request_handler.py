"""Compose resolution, projection and response policy per request."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence

from fastapi import status

from app.models.outcomes import NotFound
from app.models.schemas import ErrorResponse
from app.services.policy import policy_for
from app.services.projector import FieldDirective, FieldProjector
from app.services.resolver import ResourceResolver


@dataclass(frozen=True)
class HandlerResponse:
    """Status, JSON body and headers ready to be sent."""

    status_code: int
    body: Any
    headers: Dict[str, str] = field(default_factory=dict)


class LibraryRequestHandler:
    """Stateless request pipeline shared by every ``/libraries`` endpoint."""

    def __init__(
        self,
        resolver: ResourceResolver,
        projector: Optional[FieldProjector] = None,
    ):
        self.resolver = resolver
        self.projector = projector or FieldProjector()

    def handle(self, segments: Sequence[str], fields: Optional[str] = None) -> HandlerResponse:
        outcome = self.resolver.resolve(segments)

        if isinstance(outcome, NotFound):
            body = ErrorResponse(
                status=status.HTTP_404_NOT_FOUND, message=outcome.reason
            ).model_dump(exclude_none=True)
            return HandlerResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                body=body,
                headers=policy_for(outcome.kind, is_error=True).headers,
            )

        directive = FieldDirective.parse(fields)
        return HandlerResponse(
            status_code=status.HTTP_200_OK,
            body=self.projector.project(outcome, directive),
            headers=policy_for(outcome.kind).headers,
        )
