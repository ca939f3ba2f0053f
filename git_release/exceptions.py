"""Root of the exception hierarchy shared by every git-release subpackage."""


class GitReleaseError(Exception):
    """Base class for errors that abort or degrade a release run."""

    pass
