"""Record store backed by SQL tables through SQLAlchemy."""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload

from app.core.config import settings
from app.core.logging import get_logger
from app.models.database_manager import DatabaseManager
from app.models.models import AssetRow, LibraryRow, TutorialRow, dump_json
from app.models.schemas import Library
from app.services.exceptions import StoreError
from app.stores.base import RecordStore, build_library

logger = get_logger(__name__)

_CORE_TUTORIAL_FIELDS = {"id", "name", "content"}


class DatabaseRecordStore(RecordStore):
    """Reads libraries together with their assets and tutorials."""

    def __init__(self, db_manager: DatabaseManager, cdn_base_url: Optional[str] = None):
        self.db_manager = db_manager
        self.cdn_base_url = cdn_base_url or settings.cdn_base_url

    def get_library(self, name: str) -> Optional[Library]:
        try:
            with self.db_manager.get_session() as session:
                row = session.get(
                    LibraryRow,
                    name,
                    options=[
                        selectinload(LibraryRow.assets),
                        selectinload(LibraryRow.tutorials),
                    ],
                )
                if row is None:
                    return None
                data = self._row_to_dict(row)
        except SQLAlchemyError as exc:
            logger.error(f"Failed to load library '{name}': {exc}")
            raise StoreError("Library store unavailable", detail=str(exc)) from exc

        return build_library(data, self.cdn_base_url)

    def health_check(self) -> bool:
        return self.db_manager.health_check()

    def save_library(self, library: Library) -> None:
        """Insert or replace a library record with its assets and tutorials."""
        try:
            with self.db_manager.get_session() as session:
                existing = session.get(LibraryRow, library.name)
                if existing is not None:
                    session.delete(existing)
                    session.flush()

                session.add(self._library_to_row(library))
                session.commit()
        except SQLAlchemyError as exc:
            logger.error(f"Failed to save library '{library.name}': {exc}")
            raise StoreError("Library store unavailable", detail=str(exc)) from exc

    @staticmethod
    def _row_to_dict(row: LibraryRow) -> dict:
        data = {
            "name": row.name,
            "latest": row.latest,
            "sri": row.sri,
            "filename": row.filename,
            "version": row.version,
            "description": row.description,
            "homepage": row.homepage,
            "keywords": row.keywords,
            "repository": row.repository,
            "license": row.license,
            "author": row.author,
            "autoupdate": row.autoupdate,
        }
        data = {key: value for key, value in data.items() if value is not None}
        data["assets"] = [asset.to_dict() for asset in row.assets]
        data["tutorials"] = [tutorial.to_dict() for tutorial in row.tutorials]
        return data

    @staticmethod
    def _library_to_row(library: Library) -> LibraryRow:
        row = LibraryRow(
            name=library.name,
            latest=library.latest,
            sri=library.sri,
            filename=library.filename,
            version=library.version,
            description=library.description,
            homepage=library.homepage,
            keywords_json=dump_json(library.keywords),
            repository_json=dump_json(
                library.repository.model_dump() if library.repository else None
            ),
            license=library.license,
            author=library.author,
            autoupdate_json=dump_json(
                library.autoupdate.model_dump() if library.autoupdate else None
            ),
        )
        row.assets = [
            AssetRow(
                version=asset.version,
                position=position,
                files_json=dump_json(asset.files),
                raw_files_json=dump_json(asset.raw_files),
                sri_json=dump_json(asset.sri),
            )
            for position, asset in enumerate(library.assets)
        ]
        row.tutorials = []
        for position, tutorial in enumerate(library.tutorials):
            extra = {
                key: value
                for key, value in tutorial.to_payload().items()
                if key not in _CORE_TUTORIAL_FIELDS
            }
            row.tutorials.append(
                TutorialRow(
                    slug=tutorial.id,
                    position=position,
                    name=tutorial.name,
                    content=tutorial.content,
                    metadata_json=dump_json(extra) if extra else None,
                )
            )
        return row
