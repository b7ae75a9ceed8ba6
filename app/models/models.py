"""SQLAlchemy database models."""

import json
from typing import Any, Optional

from sqlalchemy import (
    Column,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

# Import Base from database_manager to avoid circular imports
from .database_manager import Base


def load_json(raw: Optional[str], default: Any = None) -> Any:
    if not raw:
        return default
    return json.loads(raw)


def dump_json(value: Any) -> Optional[str]:
    return json.dumps(value) if value is not None else None


class LibraryRow(Base):
    """SQLAlchemy model for libraries."""

    __tablename__ = "libraries"

    name = Column(String, primary_key=True)
    latest = Column(Text)
    sri = Column(String)
    filename = Column(String, nullable=False)
    version = Column(String, nullable=False)
    description = Column(Text)
    homepage = Column(Text)
    keywords_json = Column(Text)  # JSON array of strings
    repository_json = Column(Text)  # JSON object {type, url}
    license = Column(String)
    author = Column(String)
    autoupdate_json = Column(Text)  # JSON object {type, target}

    # Relationships
    assets = relationship(
        "AssetRow",
        back_populates="library",
        cascade="all, delete-orphan",
        order_by="AssetRow.position",
    )
    tutorials = relationship(
        "TutorialRow",
        back_populates="library",
        cascade="all, delete-orphan",
        order_by="TutorialRow.position",
    )

    @property
    def keywords(self) -> Optional[list[str]]:
        return load_json(self.keywords_json)

    @property
    def repository(self) -> Optional[dict]:
        return load_json(self.repository_json)

    @property
    def autoupdate(self) -> Optional[dict]:
        return load_json(self.autoupdate_json)


class AssetRow(Base):
    """SQLAlchemy model for one published version of a library."""

    __tablename__ = "library_assets"
    __table_args__ = (UniqueConstraint("library_name", "version"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    library_name = Column(
        String,
        ForeignKey("libraries.name", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    version = Column(String, nullable=False)
    position = Column(Integer, nullable=False, default=0)
    files_json = Column(Text, nullable=False)  # JSON array of strings
    raw_files_json = Column(Text, nullable=False)  # JSON array of strings
    sri_json = Column(Text, nullable=False)  # JSON object file -> digest

    library = relationship("LibraryRow", back_populates="assets")

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "files": load_json(self.files_json, []),
            "rawFiles": load_json(self.raw_files_json, []),
            "sri": load_json(self.sri_json, {}),
        }


class TutorialRow(Base):
    """SQLAlchemy model for library tutorials."""

    __tablename__ = "library_tutorials"
    __table_args__ = (UniqueConstraint("library_name", "slug"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    library_name = Column(
        String,
        ForeignKey("libraries.name", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    slug = Column(String, nullable=False)
    position = Column(Integer, nullable=False, default=0)
    name = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    metadata_json = Column(Text)  # JSON object of extra tutorial fields

    library = relationship("LibraryRow", back_populates="tutorials")

    def to_dict(self) -> dict:
        extra = load_json(self.metadata_json, {})
        return {**extra, "id": self.slug, "name": self.name, "content": self.content}
