# This file is intended to hold the setup for the authenticated githubkit client.

"""Sets up the authenticated githubkit client."""

from typing import TypeAlias

from githubkit import GitHub
from githubkit.auth import TokenAuthStrategy

from git_release.configuration.exceptions import RequiredConfigurationElementError

GitHubClient: TypeAlias = GitHub[TokenAuthStrategy]


async def get_github_client(github_token: str, github_api_url: str) -> GitHubClient:
    """Returns a GitHub client authenticated with the workflow token.

    Supports custom base URL for GitHub Enterprise Server (GHES).
    """
    if not github_token:
        raise RequiredConfigurationElementError(name="GitHub token", cli_name="github_token", env_name="GITHUB_TOKEN")
    # Disable HTTP caching to always get fresh data
    return GitHub(auth=TokenAuthStrategy(github_token), base_url=github_api_url, http_cache=False)
