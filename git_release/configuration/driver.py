"""Synchronous driver for configuration reconciliation for the CLI entry point."""

import asyncio
from pathlib import Path

from git_release.configuration import reconcile
from git_release.configuration.env import Settings
from git_release.configuration.models import ReleaseConfig


def get_release_config(
    settings: Settings,
    debug: bool = False,
    github_api_url: str | None = None,
    github_token: str | None = None,
    workspace: Path | None = None,
    changelog_file: str | None = None,
    allow_empty_changelog: bool = False,
    allow_tag_prefix: bool = False,
    draft_release: bool = False,
    pre_release: bool = False,
    release_name: str | None = None,
    release_name_prefix: str | None = None,
    release_name_suffix: str | None = None,
    assets: list[str] | None = None,
) -> ReleaseConfig:
    """Synchronously get the reconciled release configuration."""
    return asyncio.run(
        reconcile.reconcile_release_configuration(
            settings=settings,
            cli_debug=debug,
            cli_github_api_url=github_api_url,
            cli_github_token=github_token,
            cli_workspace=workspace,
            cli_changelog_file=changelog_file,
            cli_allow_empty_changelog=allow_empty_changelog,
            cli_allow_tag_prefix=allow_tag_prefix,
            cli_draft_release=draft_release,
            cli_pre_release=pre_release,
            cli_release_name=release_name,
            cli_release_name_prefix=release_name_prefix,
            cli_release_name_suffix=release_name_suffix,
            cli_assets=assets,
        )
    )
