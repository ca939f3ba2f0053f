"""Contains utility functions for GitHub interactions."""

from git_release.configuration.exceptions import ConfigurationError


async def split_repository_in_configuration(repo: str | None) -> tuple[str, str]:
    """Splits the repository in the configuration into owner and repository."""
    if not repo:
        raise ConfigurationError("env.var 'GITHUB_REPOSITORY' is empty or not defined")
    parts = repo.strip("/").split("/")
    if len(parts) != 2 or not all(parts):
        raise ConfigurationError(f"malformed env.var 'GITHUB_REPOSITORY': expected 'owner/name', got '{repo}'")
    owner, repository = parts
    return owner, repository
