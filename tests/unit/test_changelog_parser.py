"""Unit tests for the changelog parser."""

import pytest

from git_release.changelog.exceptions import ParseError
from git_release.changelog.parser import ChangelogParser, parse_changelog


def test_parse_keep_a_changelog(keep_a_changelog: str) -> None:
    """Test that sections are produced in document order with trimmed bodies."""
    document = parse_changelog(keep_a_changelog)

    assert [section.version for section in document.sections] == ["Unreleased", "1.1.0", "1.0.0"]
    assert document.versions == ["1.1.0", "1.0.0"]
    assert document.sections[1].body == "### Added\n- Support for draft releases.\n\n### Fixed\n- Crash on empty asset list."
    assert document.sections[1].release_date == "2024-03-02"
    assert document.sections[1].heading == "[1.1.0] - 2024-03-02"


def test_parse_unreleased_section_is_first_and_unversioned(keep_a_changelog: str) -> None:
    """Test that the unreleased section is kept but excluded from versions."""
    document = parse_changelog(keep_a_changelog)

    assert document.unreleased is not None
    assert document.unreleased.versioned is False
    assert document.unreleased.body == "### Added\n- Upcoming feature."


def test_parse_drops_version_link_references(keep_a_changelog: str) -> None:
    """Test that link reference definitions for versions do not leak into the last body."""
    document = parse_changelog(keep_a_changelog)

    assert document.sections[-1].body == "Initial release."


def test_parse_simple_headings() -> None:
    """Test the minimal bracketed heading format."""
    document = parse_changelog("## [1.0.0]\nFoo\n## [0.9.0]\nBar")

    assert [(section.version, section.body) for section in document.sections] == [("1.0.0", "Foo"), ("0.9.0", "Bar")]


@pytest.mark.parametrize(
    "heading, expected_version, expected_date",
    [
        pytest.param("## 1.2.3", "1.2.3", None, id="bare version"),
        pytest.param("## v1.2.3", "1.2.3", None, id="v prefix is not part of the key"),
        pytest.param("## [v1.2.3] - 2023-05-01", "1.2.3", "2023-05-01", id="bracketed with date"),
        pytest.param("## (1.2.3) 2023-05-01", "1.2.3", "2023-05-01", id="parenthesized with date"),
        pytest.param("## Release 1.2.3 (May 2023)", "1.2.3", None, id="surrounding text"),
        pytest.param("## [1.2.3-rc.1+build.5]", "1.2.3-rc.1+build.5", None, id="pre-release and build metadata"),
    ],
)
def test_parse_heading_formats(heading: str, expected_version: str, expected_date: str | None) -> None:
    """Test that only the version token becomes the section key."""
    document = parse_changelog(f"{heading}\n\nBody")

    section = document.sections[0]
    assert section.version == expected_version
    assert section.release_date == expected_date
    assert section.body == "Body"


def test_parse_n_headings_produce_n_sections() -> None:
    """Test that N distinct version headings produce N sections without blank-line artifacts."""
    versions = [f"{major}.0.0" for major in range(10, 0, -1)]
    text = "# Changelog\n\n" + "\n".join(f"## {version}\n\n\n- change {version}\n\n" for version in versions)

    document = parse_changelog(text)

    assert document.versions == versions
    for section in document.sections:
        assert section.body == f"- change {section.version}"


def test_parse_is_idempotent(keep_a_changelog: str) -> None:
    """Test that parsing the same text twice yields equal documents."""
    assert parse_changelog(keep_a_changelog) == parse_changelog(keep_a_changelog)


def test_parse_duplicate_version_keeps_first_occurrence() -> None:
    """Test that a duplicated version heading does not overwrite the first section."""
    document = parse_changelog("## 1.0.0\nFirst\n## 0.9.0\nOlder\n## 1.0.0\nAppended by mistake")

    assert document.versions == ["1.0.0", "0.9.0"]
    assert document.sections[0].body == "First"


def test_parse_misplaced_unreleased_section_is_ignored() -> None:
    """Test that an unreleased heading after a version does not create a section."""
    document = parse_changelog("## 1.0.0\nFirst\n## Unreleased\nLate\n## 0.9.0\nOlder")

    assert [section.version for section in document.sections] == ["1.0.0", "0.9.0"]
    assert document.unreleased is None


def test_parse_unversioned_heading_after_versions_ends_section() -> None:
    """Test that a same-level heading without a version ends the previous body."""
    document = parse_changelog("## 1.0.0\nFirst\n## Contributors\nEveryone")

    assert document.sections[0].body == "First"
    assert document.sections[1].version == "Contributors"
    assert document.sections[1].versioned is False


def test_parse_preamble_headings_are_skipped() -> None:
    """Test that same-level headings before the first version are not sections."""
    document = parse_changelog("## About\nThis project...\n## 1.0.0\nFirst")

    assert [section.version for section in document.sections] == ["1.0.0"]


def test_parse_shallower_heading_ends_section() -> None:
    """Test that a shallower heading closes the current section without starting one."""
    document = parse_changelog("# Changelog\n## 1.0.0\nFirst\n# Appendix\nNot release notes\n## 0.9.0\nOlder")

    assert document.sections[0].body == "First"
    assert document.sections[1].body == "Older"


def test_parse_ignores_headings_in_code_fences() -> None:
    """Test that headings inside fenced code blocks are part of the body."""
    text = "## 1.0.0\n\nExample:\n\n```markdown\n## 9.9.9\n```\n\n## 0.9.0\nOlder"

    document = parse_changelog(text)

    assert document.versions == ["1.0.0", "0.9.0"]
    assert document.sections[0].body == "Example:\n\n```markdown\n## 9.9.9\n```"


def test_parse_section_level_follows_shallowest_version_heading() -> None:
    """Test that level-three version headings work and deeper headings stay in the body."""
    document = parse_changelog("### 2.0.0\n#### Breaking\n- Removed x\n### 1.0.0\n- First")

    assert document.versions == ["2.0.0", "1.0.0"]
    assert document.sections[0].body == "#### Breaking\n- Removed x"


def test_parse_without_version_heading_raises() -> None:
    """Test that a changelog without any version heading is rejected."""
    with pytest.raises(ParseError) as exc_info:
        ChangelogParser().parse("# Changelog\n\n## Unreleased\n- Nothing yet", source="docs/CHANGELOG.md")

    assert "docs/CHANGELOG.md" in str(exc_info.value)


def test_parse_empty_body() -> None:
    """Test that a version with no text has an empty body."""
    document = parse_changelog("## 1.0.1\n\n## 1.0.0\nFirst")

    assert document.sections[0].body == ""


def test_parse_version_in_deeper_heading_does_not_change_section_level() -> None:
    """Test that a version mentioned in a subsection heading keeps the release headings as sections."""
    text = (
        "# Changelog\n\n"
        "## [Unreleased]\n\n"
        "### Deprecated since 1.2.0\n- old flag\n\n"
        "## [1.3.0] - 2024-05-01\n- New feature\n\n"
        "## [1.2.0] - 2024-04-01\n- Older\n"
    )

    document = parse_changelog(text)

    assert document.versions == ["1.3.0", "1.2.0"]
    assert document.unreleased is not None
    assert document.unreleased.body == "### Deprecated since 1.2.0\n- old flag"
    assert document.sections[1].body == "- New feature"


def test_parse_ignores_byte_order_mark() -> None:
    """Test that a leading UTF-8 byte order mark does not hide the first heading."""
    document = parse_changelog("\ufeff## 1.0.0\nFirst\n## 0.9.0\nOld")

    assert document.versions == ["1.0.0", "0.9.0"]
    assert document.sections[0].body == "First"


def test_parse_keeps_link_references_inside_nested_fences() -> None:
    """Test that a shorter fence inside a longer one does not close the code block."""
    text = (
        "## 1.0.0\n\n"
        "````markdown\n"
        "```\n"
        "[1.0.0]: https://example.com/inside\n"
        "```\n"
        "````\n\n"
        "[1.0.0]: https://example.com/outside\n"
        "## 0.9.0\nOld"
    )

    document = parse_changelog(text)

    assert document.sections[0].body == "````markdown\n```\n[1.0.0]: https://example.com/inside\n```\n````"


def test_parse_heading_inside_nested_fences_is_body() -> None:
    """Test that headings stay in the body until the outer fence closes."""
    text = "## 1.0.0\n~~~~\n~~~\n## 9.9.9\n~~~\n## 8.8.8\n~~~~\n## 0.9.0\nOld"

    document = parse_changelog(text)

    assert document.versions == ["1.0.0", "0.9.0"]
