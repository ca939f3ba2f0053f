"""Reads release notes for a version from the changelog file."""

import structlog

from git_release.utils.constants import IGNORE_CHANGELOG_VALUE
from git_release.utils.filesystem import FileSystem

from .exceptions import ParseError
from .matcher import VersionMatcher
from .parser import ChangelogParser

logger = structlog.get_logger(__name__)


def is_changelog_ignored(changelog_file: str) -> bool:
    """Check if the configured changelog path disables changelog processing."""
    return changelog_file.strip().lower() == IGNORE_CHANGELOG_VALUE


def read_release_notes(fs: FileSystem, changelog_file: str, version: str, allow_prefix: bool = False) -> str:
    """Return the changelog body documenting ``version``.

    Args:
        fs: File system the changelog path is resolved against
        changelog_file: Path to the changelog, or "none" to skip it
        version: Normalized version to look up (e.g. 1.2.3)
        allow_prefix: Also accept headings extending the version (e.g. 1.2.3-rc.1)

    Returns:
        The section body, or an empty string when the changelog is ignored
        or does not document the version

    Raises:
        ParseError: If the changelog is missing or has no version headings
    """
    if is_changelog_ignored(changelog_file):
        logger.info("Changelog processing disabled")
        return ""

    if not fs.is_file(changelog_file):
        raise ParseError(changelog_file, reason="does not exist or is not a file")

    logger.info("Reading changelog", changelog_file=changelog_file, version=version)
    document = ChangelogParser().parse(fs.read_text(changelog_file), source=changelog_file)
    body = VersionMatcher().find(document, version, allow_prefix=allow_prefix)
    logger.debug("Extracted release notes", version=version, length=len(body))
    return body
