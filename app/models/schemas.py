"""Pydantic models for library records and API response schemas."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Repository(BaseModel):
    """Source repository of a library."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(..., description="Repository kind, e.g. 'git'")
    url: str = Field(..., description="Repository URL")


class Autoupdate(BaseModel):
    """Where new versions of a library are picked up from."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(..., description="Update source, e.g. 'npm' or 'git'")
    target: str = Field(..., description="Package or repository followed")


class Version(BaseModel):
    """One published version of a library (an entry of ``assets``)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    version: str = Field(..., description="Version identifier")
    files: List[str] = Field(..., description="Relative file paths")
    raw_files: List[str] = Field(
        ..., alias="rawFiles", description="File paths as stored"
    )
    sri: Dict[str, str] = Field(..., description="SRI digest per file")

    @model_validator(mode="after")
    def _sri_matches_files(self):
        if set(self.sri) != set(self.files):
            raise ValueError(
                f"sri keys of version '{self.version}' do not match its files"
            )
        return self

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class Tutorial(BaseModel):
    """Tutorial attached to a library.

    Any author-supplied metadata beyond ``id``, ``name`` and ``content`` is kept
    as extra fields and serialized alongside them.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    id: str = Field(..., description="URL-safe slug")
    name: str = Field(..., description="Display title")
    content: str = Field(..., description="Rendered tutorial body")

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump()


class Library(BaseModel):
    """Library record as returned by a record store."""

    model_config = ConfigDict(frozen=True)

    name: str
    latest: str
    sri: Optional[str] = None
    filename: str
    version: str
    description: Optional[str] = None
    homepage: Optional[str] = None
    keywords: Optional[List[str]] = None
    repository: Optional[Repository] = None
    license: Optional[str] = None
    author: Optional[str] = None
    autoupdate: Optional[Autoupdate] = None
    assets: List[Version] = Field(..., min_length=1)
    tutorials: List[Tutorial] = Field(default_factory=list)

    @model_validator(mode="after")
    def _current_version_published(self):
        if self.get_version(self.version) is None:
            raise ValueError(f"current version '{self.version}' has no asset")
        return self

    def get_version(self, version: str) -> Optional[Version]:
        for asset in self.assets:
            if asset.version == version:
                return asset
        return None

    def get_tutorial(self, tutorial_id: str) -> Optional[Tutorial]:
        for tutorial in self.tutorials:
            if tutorial.id == tutorial_id:
                return tutorial
        return None

    def to_payload(self) -> Dict[str, Any]:
        """Full representation; optional fields the record lacks are omitted."""
        payload = self.model_dump(by_alias=True, exclude={"assets", "tutorials"})
        payload = {key: value for key, value in payload.items() if value is not None}
        payload["assets"] = [asset.to_payload() for asset in self.assets]
        payload["tutorials"] = [tutorial.to_payload() for tutorial in self.tutorials]
        return payload


class ErrorResponse(BaseModel):
    """Response model for API errors."""

    error: bool = Field(True, description="Always true for error bodies")
    status: int = Field(..., description="HTTP status code")
    message: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Additional error details")


class HealthCheckResponse(BaseModel):
    """Response model for the health check endpoint."""

    status: str = Field(..., description="Overall health status")
    checks: Dict[str, Any] = Field(..., description="Individual health checks")
