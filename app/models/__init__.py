"""Models package for record schemas, resolution outcomes and SQL tables."""

# Import database manager
from .database_manager import DatabaseManager, Base

# Import SQLAlchemy models
from .models import LibraryRow, AssetRow, TutorialRow

# Import enums
from .enums import ResourceKind, FieldMode

# Import Pydantic schemas
from .schemas import (
    # Record schemas
    Library,
    Version,
    Tutorial,
    Repository,
    Autoupdate,
    # Health and error schemas
    ErrorResponse,
    HealthCheckResponse,
)

# Import resolution outcomes
from .outcomes import (
    Outcome,
    LibraryFound,
    VersionFound,
    TutorialListFound,
    TutorialFound,
    NotFound,
)

__all__ = [
    # SQLAlchemy models
    "LibraryRow",
    "AssetRow",
    "TutorialRow",
    # Database manager
    "DatabaseManager",
    "Base",
    # Enums
    "ResourceKind",
    "FieldMode",
    # Record schemas
    "Library",
    "Version",
    "Tutorial",
    "Repository",
    "Autoupdate",
    # Health and error schemas
    "ErrorResponse",
    "HealthCheckResponse",
    # Outcomes
    "Outcome",
    "LibraryFound",
    "VersionFound",
    "TutorialListFound",
    "TutorialFound",
    "NotFound",
]
