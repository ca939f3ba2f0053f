"""Parses markdown changelogs into ordered version sections."""

import re
from typing import Iterator

import structlog

from git_release.utils.constants import (
    DEFAULT_CHANGELOG_PATH,
    FENCE_PATTERN,
    HEADING_PATTERN,
    LINK_REFERENCE_PATTERN,
    RELEASE_DATE_PATTERN,
    UNRELEASED_HEADING,
    VERSION_TOKEN_PATTERN,
)

from .exceptions import ParseError
from .models import ChangelogDocument, VersionSection

logger = structlog.get_logger(__name__)


class ChangelogParser:
    """Splits a changelog into sections keyed by the version in each heading.

    The shallowest heading level carrying a version token decides which
    headings delimit sections. Deeper headings ("### Added", "### Deprecated
    since 1.2.0") stay part of the body, shallower ones end the current section.
    """

    def __init__(self, version_pattern: str = VERSION_TOKEN_PATTERN) -> None:
        """Initialize with version token pattern."""
        self.pattern = re.compile(version_pattern)

    def parse(self, raw_text: str, source: str = DEFAULT_CHANGELOG_PATH) -> ChangelogDocument:
        """Parse raw changelog text.

        Args:
            raw_text: Full content of the changelog
            source: Name of the changelog, used in error messages

        Returns:
            Immutable document holding the sections in document order

        Raises:
            ParseError: If no heading carries a version token
        """
        lines = raw_text.removeprefix("\ufeff").splitlines()
        headings = list(self._iter_headings(lines))

        section_level = min((level for _, level, text in headings if self.pattern.search(text)), default=None)
        if section_level is None:
            raise ParseError(source)

        boundaries = [(index, level, text) for index, level, text in headings if level <= section_level]
        sections: list[VersionSection] = []
        seen: set[str] = set()
        has_versions = False

        for position, (index, level, text) in enumerate(boundaries):
            if level < section_level:
                continue
            end = boundaries[position + 1][0] if position + 1 < len(boundaries) else len(lines)
            section = self._build_section(text, lines[index + 1 : end])

            if section.version in seen:
                logger.warning("Ignoring duplicate changelog heading", heading=section.heading, source=source)
                continue

            if not section.versioned:
                is_unreleased = section.version.lower() == UNRELEASED_HEADING
                if is_unreleased and sections:
                    logger.warning("Ignoring misplaced unreleased section", heading=section.heading, source=source)
                    continue
                if not is_unreleased and not has_versions:
                    logger.debug("Skipping changelog preamble heading", heading=section.heading)
                    continue
            else:
                has_versions = True

            seen.add(section.version)
            sections.append(section)

        document = ChangelogDocument(sections=tuple(sections))
        logger.debug("Parsed changelog", source=source, sections=len(document), versions=document.versions)
        return document

    def _iter_headings(self, lines: list[str]) -> Iterator[tuple[int, int, str]]:
        """Yield (line index, level, text) for every heading outside fenced code blocks."""
        fence: str | None = None
        for index, line in enumerate(lines):
            in_code = fence is not None
            fence = self._advance_fence(line, fence)
            if in_code or fence is not None:
                continue

            heading_match = HEADING_PATTERN.match(line)
            if heading_match:
                yield index, len(heading_match.group("marks")), heading_match.group("text").strip()

    def _build_section(self, heading: str, body_lines: list[str]) -> VersionSection:
        """Build a section from its heading text and the lines below it."""
        body = self._clean_body(body_lines)
        token = self.pattern.search(heading)
        if token is None:
            return VersionSection(
                version=heading.strip("[]() \t"),
                body=body,
                heading=heading,
                versioned=False,
            )

        date_match = RELEASE_DATE_PATTERN.search(heading, token.end())
        return VersionSection(
            version=token.group("version"),
            body=body,
            heading=heading,
            release_date=date_match.group(1) if date_match else None,
        )

    def _clean_body(self, lines: list[str]) -> str:
        """Drop version link references and surrounding blank lines."""
        kept: list[str] = []
        fence: str | None = None
        for line in lines:
            in_code = fence is not None
            fence = self._advance_fence(line, fence)
            if not in_code and fence is None and self._is_version_reference(line):
                continue
            kept.append(line)

        while kept and not kept[0].strip():
            kept.pop(0)
        while kept and not kept[-1].strip():
            kept.pop()
        return "\n".join(kept)

    @staticmethod
    def _advance_fence(line: str, fence: str | None) -> str | None:
        """Return the fence marker that is open after ``line``, or None outside code.

        A fence closes only on the same character, at least as long as the
        opening marker and with nothing after it.
        """
        match = FENCE_PATTERN.match(line)
        if match is None:
            return fence
        marker = match.group("fence")
        if fence is None:
            return marker
        if marker[0] == fence[0] and len(marker) >= len(fence) and not line[match.end() :].strip():
            return None
        return fence

    def _is_version_reference(self, line: str) -> bool:
        """Check if a line defines a link target for a version or unreleased label."""
        reference = LINK_REFERENCE_PATTERN.match(line)
        if reference is None:
            return False
        label = reference.group("label").strip()
        return label.lower() == UNRELEASED_HEADING or self.pattern.fullmatch(label) is not None


def parse_changelog(raw_text: str, source: str = DEFAULT_CHANGELOG_PATH) -> ChangelogDocument:
    """Parse changelog text with the default version token pattern."""
    return ChangelogParser().parse(raw_text, source=source)
