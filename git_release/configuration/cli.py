"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
from pathlib import Path

import typer
from dotenv import load_dotenv
from githubkit.exception import GitHubException
from typer import Argument, Option
from typing_extensions import Annotated

from git_release.changelog.matcher import extract_version
from git_release.changelog.reader import read_release_notes
from git_release.configuration.driver import get_release_config
from git_release.configuration.env import Settings
from git_release.exceptions import GitReleaseError
from git_release.release.driver import run_release_workflow
from git_release.utils.constants import DEFAULT_CHANGELOG_PATH
from git_release.utils.filesystem import LocalFileSystem
from git_release.utils.logging import configure_logging

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False, help="Publish GitHub releases from tags, changelogs and build artifacts.")


@typer_app.command(name="publish")
def publish_cli(
    assets: Annotated[list[str] | None, Argument(help="Asset paths or glob patterns to attach to the release.")] = None,
    changelog_file: Annotated[
        str, Option(envvar="CHANGELOG_FILE", help="Path to the changelog relative to the workspace, or 'none' to skip it.")
    ] = DEFAULT_CHANGELOG_PATH,
    allow_empty_changelog: Annotated[
        bool, Option(envvar="ALLOW_EMPTY_CHANGELOG", help="Publish even if the changelog does not document the version.")
    ] = False,
    allow_tag_prefix: Annotated[bool, Option(envvar="ALLOW_TAG_PREFIX", help="Accept any prefix in front of the version in the tag.")] = False,
    draft_release: Annotated[bool, Option(envvar="DRAFT_RELEASE", help="Publish the release as a draft.")] = False,
    pre_release: Annotated[bool, Option(envvar="PRE_RELEASE", help="Mark the release as a pre-release.")] = False,
    release_name: Annotated[str | None, Option(envvar="RELEASE_NAME", help="Release name, overriding the tag.")] = None,
    release_name_prefix: Annotated[str | None, Option(envvar="RELEASE_NAME_PREFIX", help="Text prepended to the tag in the release name.")] = None,
    release_name_suffix: Annotated[str | None, Option(envvar="RELEASE_NAME_SUFFIX", help="Text appended to the tag in the release name.")] = None,
    workspace: Annotated[Path | None, Option(help="Directory changelog and asset paths are relative to. Defaults to GITHUB_WORKSPACE.")] = None,
    github_api_url: Annotated[str | None, Option(help="GitHub API URL. Defaults to GITHUB_API_URL.")] = None,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
) -> None:
    """Create a release for the current tag and upload its assets."""
    configure_logging(debug)

    try:
        config = get_release_config(
            settings=Settings(),
            debug=debug,
            github_api_url=github_api_url,
            workspace=workspace,
            changelog_file=changelog_file,
            allow_empty_changelog=allow_empty_changelog,
            allow_tag_prefix=allow_tag_prefix,
            draft_release=draft_release,
            pre_release=pre_release,
            release_name=release_name,
            release_name_prefix=release_name_prefix,
            release_name_suffix=release_name_suffix,
            assets=assets,
        )
        outcome = asyncio.run(run_release_workflow(config))
    except (GitReleaseError, GitHubException) as exc:
        typer.echo(f"Release failed: {exc}", err=True)
        raise typer.Exit(1) from exc

    for line in outcome.summary():
        typer.echo(line, err=not outcome.succeeded)
    if not outcome.succeeded:
        raise typer.Exit(1)


@typer_app.command(name="notes")
def notes_cli(
    version: Annotated[str, Argument(help="Version or tag to print the release notes for (e.g. 1.2.3 or v1.2.3).")],
    changelog_file: Annotated[str, Option(envvar="CHANGELOG_FILE", help="Path to the changelog relative to the workspace.")] = DEFAULT_CHANGELOG_PATH,
    allow_tag_prefix: Annotated[bool, Option(envvar="ALLOW_TAG_PREFIX", help="Accept any prefix in front of the version.")] = False,
    workspace: Annotated[Path, Option(help="Directory the changelog path is relative to.")] = Path("."),
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
) -> None:
    """Print the changelog section that would become the release body."""
    configure_logging(debug)

    try:
        normalized = extract_version(version, allow_tag_prefix=allow_tag_prefix)
        body = read_release_notes(LocalFileSystem(workspace), changelog_file, normalized, allow_prefix=allow_tag_prefix)
    except GitReleaseError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc

    if not body:
        typer.echo(f"Changelog does not contain changes for version {normalized}", err=True)
        raise typer.Exit(1)
    typer.echo(body)


if __name__ == "__main__":
    typer_app()
