"""Contains exceptions raised while resolving release assets."""

from git_release.exceptions import GitReleaseError


class AssetError(GitReleaseError):
    """Raised when an explicitly named asset path does not exist."""

    def __init__(self, path: str) -> None:
        """Initializes the exception with the missing asset path."""
        super().__init__(f"asset '{path}' does not exist or is not a file")
        self.path = path
