"""Shared constants used across the application."""

import re

# Changelog Constants
# -------------------

# Regex Patterns
VERSION_TOKEN_PATTERN = (
    r"(?<![\w.])v?"
    r"(?P<version>\d+\.\d+\.\d+"
    r"(?:-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
    r"(?:\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?)"
    r"(?![\w.])"
)
"""Regex pattern to match a version token in a heading (e.g. 1.2.3, v1.2.3, 1.2.3-rc.1+build.5)."""

HEADING_PATTERN = re.compile(r"^(?P<marks>#{1,6})[ \t]+(?P<text>.*?)[ \t#]*$")
"""Pattern to match ATX markdown headings (e.g. ## [1.2.3] - 2024-01-31)."""

FENCE_PATTERN = re.compile(r"^[ \t]{0,3}(?P<fence>`{3,}|~{3,})")
"""Pattern to match the opening or closing line of a fenced code block."""

RELEASE_DATE_PATTERN = re.compile(r"\b(\d{4}-\d{2}-\d{2})\b")
"""Pattern to match an ISO release date trailing a version heading."""

LINK_REFERENCE_PATTERN = re.compile(r"^[ \t]{0,3}\[(?P<label>[^\]]+)\]:[ \t]*\S+")
"""Pattern to match markdown link reference definitions (e.g. [1.0.0]: https://...)."""

UNRELEASED_HEADING = "unreleased"
"""Case-insensitive heading text of the section collecting unreleased changes."""

DEFAULT_CHANGELOG_PATH = "CHANGELOG.md"
"""Default path to the changelog file, relative to the workspace."""

IGNORE_CHANGELOG_VALUE = "none"
"""Changelog path value that disables changelog processing entirely."""

# Tag Constants
# -------------

TAG_REF_PREFIX = "refs/tags/"
"""Prefix of the git ref that CI provides for tag pushes."""

TAG_PATTERN = re.compile(r"^v?(?P<version>\d+\.\d+\.\d+(?:[-+][0-9A-Za-z.+-]*)?)$")
"""Pattern a tag must match when tag prefixes are not allowed (e.g. v1.2.3, 1.2.3-rc.1)."""

PREFIXED_TAG_PATTERN = re.compile(r"^.*?(?P<version>\d+\.\d+\.\d+(?:[-+][0-9A-Za-z.+-]*)?)$")
"""Pattern a tag must match when any prefix is allowed (e.g. release-1.2.3, app/v1.2.3)."""

# Asset Constants
# ---------------

GLOB_CHARACTERS_PATTERN = re.compile(r"[*?\[]")
"""Pattern detecting whether an asset argument is a glob rather than a literal path."""

DEFAULT_ASSET_CONTENT_TYPE = "application/octet-stream"
"""Content type used when an asset's type cannot be guessed from its name."""
