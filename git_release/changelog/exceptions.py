"""Contains exceptions raised while reading and parsing changelogs."""

from git_release.exceptions import GitReleaseError


class ParseError(GitReleaseError):
    """Raised when a changelog is missing or contains no recognizable version heading."""

    def __init__(self, source: str, reason: str = "does not contain any version heading") -> None:
        """Initializes the exception with the name of the offending changelog."""
        super().__init__(f"changelog '{source}' {reason}")
        self.source = source
        self.reason = reason
