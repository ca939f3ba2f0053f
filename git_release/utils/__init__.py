"""Utility modules for shared functionality."""

from .constants import (
    DEFAULT_CHANGELOG_PATH,
    IGNORE_CHANGELOG_VALUE,
    VERSION_TOKEN_PATTERN,
)
from .filesystem import FileSystem, LocalFileSystem
from .retry import retry_on_rate_limit

__all__ = [
    "DEFAULT_CHANGELOG_PATH",
    "IGNORE_CHANGELOG_VALUE",
    "VERSION_TOKEN_PATTERN",
    "FileSystem",
    "LocalFileSystem",
    "retry_on_rate_limit",
]
