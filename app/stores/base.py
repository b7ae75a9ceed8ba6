"""Record store interface and shared record-building helpers."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from app.models.schemas import Library
from app.services.exceptions import StoreError


class RecordStore(ABC):
    """Read-only source of library records.

    Implementations return a fully populated ``Library`` (assets and tutorials
    included) or ``None`` on a miss. Transient faults must surface as
    ``StoreError``, never as a miss.
    """

    @abstractmethod
    def get_library(self, name: str) -> Optional[Library]:
        """Return the library called ``name`` or ``None`` when it does not exist."""
        raise NotImplementedError

    @abstractmethod
    def health_check(self) -> bool:
        """Report whether the backing data is reachable."""
        raise NotImplementedError


def _current_asset_sri(record: Mapping[str, Any]) -> Optional[str]:
    for asset in record.get("assets") or []:
        if asset.get("version") == record.get("version"):
            return (asset.get("sri") or {}).get(record.get("filename"))
    return None


def build_library(data: Mapping[str, Any], cdn_base_url: str) -> Library:
    """Validate a raw library mapping into a ``Library`` record.

    ``latest`` and ``sri`` are derived from the current version's asset when
    the raw record does not carry them. Model validators reject records whose
    current version has no asset or whose SRI digests do not cover their files.
    """

    record: Dict[str, Any] = dict(data)
    name, version, filename = (
        record.get("name"),
        record.get("version"),
        record.get("filename"),
    )
    if not record.get("latest") and name and version and filename:
        base = cdn_base_url.rstrip("/")
        record["latest"] = f"{base}/{name}/{version}/{filename}"
    if not record.get("sri"):
        digest = _current_asset_sri(record)
        if digest:
            record["sri"] = digest

    try:
        return Library.model_validate(record)
    except ValidationError as exc:
        raise StoreError(
            f"Invalid library record '{name}'", detail=str(exc)
        ) from exc
