"""Cache-control and CORS headers per resource kind and outcome."""

from dataclasses import dataclass
from typing import Dict, Optional

from app.models.enums import ResourceKind

CORS_HEADERS: Dict[str, str] = {"Access-Control-Allow-Origin": "*"}


@dataclass(frozen=True)
class ResponsePolicy:
    """Headers attached to a response."""

    cache_control: str
    max_age: Optional[int] = None

    @classmethod
    def public(cls, max_age: int, immutable: bool = False) -> "ResponsePolicy":
        value = f"public, max-age={max_age}"
        if immutable:
            value += ", immutable"
        return cls(value, max_age)

    @property
    def headers(self) -> Dict[str, str]:
        return {"Cache-Control": self.cache_control, **CORS_HEADERS}


# Longer lifetimes for resources that change less often
SUCCESS_POLICIES: Dict[ResourceKind, ResponsePolicy] = {
    ResourceKind.VERSION: ResponsePolicy.public(30672000, immutable=True),  # 355 days
    ResourceKind.TUTORIAL: ResponsePolicy.public(1209600),  # 2 weeks
    ResourceKind.TUTORIAL_LIST: ResponsePolicy.public(86400),  # 24 hours
    ResourceKind.LIBRARY: ResponsePolicy.public(21600),  # 6 hours
}

NOT_FOUND_POLICY = ResponsePolicy.public(3600)  # 1 hour

# Faults and diagnostics must not be cached
FAULT_POLICY = ResponsePolicy("no-store")
HEALTH_POLICY = ResponsePolicy("no-cache")


def policy_for(kind: ResourceKind, is_error: bool = False) -> ResponsePolicy:
    """Return the policy for an outcome; projection never affects it."""
    if is_error:
        return NOT_FOUND_POLICY
    return SUCCESS_POLICIES[kind]
