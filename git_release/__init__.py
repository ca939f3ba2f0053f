"""Publish GitHub releases from tags, changelogs and build artifacts."""

__version__ = "1.0.0"
