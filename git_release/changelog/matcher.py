"""Version lookup inside parsed changelogs and tag normalization."""

import structlog

from git_release.configuration.exceptions import ConfigurationError
from git_release.utils.constants import PREFIXED_TAG_PATTERN, TAG_PATTERN

from .models import ChangelogDocument, VersionSection

logger = structlog.get_logger(__name__)


class VersionMatcher:
    """Finds the section of a changelog that documents a given version."""

    def find_section(self, doc: ChangelogDocument, version: str, allow_prefix: bool = False) -> VersionSection | None:
        """Return the matching versioned section, or None.

        An exact match always wins. With ``allow_prefix`` a section whose
        version continues the requested one past a non-digit boundary also
        matches, so "1.2.3" finds "1.2.3-rc.1" but never "1.2.30".
        """
        candidates = [section for section in doc.sections if section.versioned]

        for section in candidates:
            if section.version == version:
                return section

        if allow_prefix:
            for section in candidates:
                if self._has_version_prefix(section.version, version):
                    logger.debug("Matched changelog section by prefix", requested=version, found=section.version)
                    return section

        return None

    def find(self, doc: ChangelogDocument, version: str, allow_prefix: bool = False) -> str:
        """Return the body for a version, or an empty string when it is not documented."""
        section = self.find_section(doc, version, allow_prefix=allow_prefix)
        if section is None:
            logger.info("Version not found in changelog", version=version, available=doc.versions)
            return ""
        return section.body

    @staticmethod
    def _has_version_prefix(candidate: str, version: str) -> bool:
        if not version or not candidate.startswith(version) or len(candidate) == len(version):
            return False
        return not candidate[len(version)].isdigit()


def extract_version(tag: str, allow_tag_prefix: bool = False) -> str:
    """Extract the semantic version encoded in a tag.

    Args:
        tag: Tag name without the ``refs/tags/`` prefix (e.g. v1.2.3)
        allow_tag_prefix: Accept any text in front of the version (e.g. release-1.2.3)

    Returns:
        The version without any prefix (e.g. 1.2.3)

    Raises:
        ConfigurationError: If the tag does not encode a version
    """
    pattern = PREFIXED_TAG_PATTERN if allow_tag_prefix else TAG_PATTERN
    match = pattern.match(tag)
    if match is None:
        raise ConfigurationError(f"malformed tag '{tag}': expected to match regex '{pattern.pattern}'")
    return match.group("version")
