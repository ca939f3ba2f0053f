"""Contains exceptions raised while publishing a release."""

from git_release.exceptions import GitReleaseError


class EmptyChangelogError(GitReleaseError):
    """Raised when the release body is empty and empty changelogs are not allowed."""

    def __init__(self, tag: str) -> None:
        """Initializes the exception with the tag being released."""
        super().__init__(f"changelog does not contain changes for requested project version (tag '{tag}')")
        self.tag = tag


class DuplicateReleaseError(GitReleaseError):
    """Raised when the remote already holds a release for the tag."""

    def __init__(self, tag: str) -> None:
        """Initializes the exception with the conflicting tag."""
        super().__init__(f"a release for tag '{tag}' already exists")
        self.tag = tag


class UploadError(GitReleaseError):
    """Raised when a single asset fails to upload."""

    def __init__(self, asset_name: str, reason: str) -> None:
        """Initializes the exception with the asset name and failure reason."""
        super().__init__(f"failed to upload asset '{asset_name}': {reason}")
        self.asset_name = asset_name
        self.reason = reason


class ReleaseRequestError(GitReleaseError):
    """Raised when GitHub rejects a release request as unprocessable."""

    def __init__(self, operation: str, message: str, errors: list[dict] | None = None) -> None:
        """Initializes the exception with the rejected operation and GitHub's explanation."""
        super().__init__(f"GitHub rejected {operation}: {message}" + (f" ({errors})" if errors else ""))
        self.operation = operation
        self.message = message
        self.errors = errors or []
