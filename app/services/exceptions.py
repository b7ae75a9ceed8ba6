"""Domain-level service exceptions.

Resolution misses are reported as ``NotFound`` outcomes, not raised. The
errors below cover faults in the collaborators the service depends on.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ServiceError(Exception):
    """Base error raised by service-layer code."""

    message: str
    status_code: int = 500
    detail: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - repr helper
        return self.message


@dataclass(eq=False)
class StoreError(ServiceError):
    """Raised when a record store cannot read its backing data."""

    status_code: int = 503
