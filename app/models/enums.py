"""Centralized enum definitions for resource resolution."""

from enum import Enum


class ResourceKind(str, Enum):
    """Kind of resource addressed by a request path."""

    LIBRARY = "library"
    VERSION = "version"
    TUTORIAL_LIST = "tutorials"
    TUTORIAL = "tutorial"


class FieldMode(str, Enum):
    """How the ``fields`` query parameter selects output properties."""

    DEFAULT = "default"
    WILDCARD = "wildcard"
    EXPLICIT = "explicit"
