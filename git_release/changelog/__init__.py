"""Changelog parsing module."""

from .exceptions import ParseError
from .matcher import VersionMatcher, extract_version
from .models import ChangelogDocument, VersionSection
from .parser import ChangelogParser, parse_changelog
from .reader import is_changelog_ignored, read_release_notes

__all__ = [
    "ChangelogDocument",
    "VersionSection",
    "ChangelogParser",
    "VersionMatcher",
    "ParseError",
    "extract_version",
    "parse_changelog",
    "is_changelog_ignored",
    "read_release_notes",
]
