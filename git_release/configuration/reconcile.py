"""Reconciles configuration between CLI arguments and environment variables."""

from pathlib import Path

import structlog

from git_release.changelog.matcher import extract_version
from git_release.changelog.reader import is_changelog_ignored
from git_release.configuration.env import Settings
from git_release.configuration.exceptions import ConfigurationError, RequiredConfigurationElementError
from git_release.configuration.models import ReleaseConfig, RepositoryMetadata
from git_release.utils.constants import DEFAULT_CHANGELOG_PATH, TAG_REF_PREFIX
from git_release.utils.github import split_repository_in_configuration

logger = structlog.get_logger(__name__)


def _require_env(value: str | None, env_name: str) -> str:
    """Return a CI-provided value or fail naming the environment variable."""
    if value is None or not value.strip():
        raise ConfigurationError(f"env.var '{env_name}' is empty or not defined")
    return value.strip()


async def read_tag(github_ref: str | None, allow_tag_prefix: bool) -> tuple[str, str]:
    """Read the tag and its version from the ref that triggered the run.

    Args:
        github_ref: Value of GITHUB_REF (e.g. refs/tags/v1.2.3)
        allow_tag_prefix: Accept any text in front of the version in the tag

    Returns:
        Tuple of (tag, version), e.g. ("v1.2.3", "1.2.3")

    Raises:
        ConfigurationError: If the ref is missing, not a tag, or the tag does not encode a version
    """
    ref = _require_env(github_ref, "GITHUB_REF")
    if not ref.startswith(TAG_REF_PREFIX):
        raise ConfigurationError(f"malformed env.var 'GITHUB_REF': expected a '{TAG_REF_PREFIX}' ref, got '{ref}'")

    tag = ref[len(TAG_REF_PREFIX) :]
    try:
        version = extract_version(tag, allow_tag_prefix=allow_tag_prefix)
    except ConfigurationError as exc:
        raise ConfigurationError(f"malformed env.var 'GITHUB_REF': {exc}") from exc
    return tag, version


async def read_repository_metadata(settings: Settings, allow_tag_prefix: bool = False) -> RepositoryMetadata:
    """Build the repository metadata from the CI environment."""
    owner, project = await split_repository_in_configuration(settings.GITHUB_REPOSITORY)
    tag, version = await read_tag(settings.GITHUB_REF, allow_tag_prefix)
    commit_hash = _require_env(settings.GITHUB_SHA, "GITHUB_SHA")
    metadata = RepositoryMetadata(owner=owner, project=project, tag=tag, version=version, commit_hash=commit_hash)
    logger.debug("Read repository metadata", repo=metadata.repo, tag=tag, version=version, commit_hash=commit_hash)
    return metadata


async def resolve_release_name(tag: str, release_name: str | None, prefix: str | None, suffix: str | None) -> str:
    """Resolve the display name of the release.

    An explicit release name wins; otherwise the tag is decorated with the
    optional prefix and suffix.
    """
    if release_name:
        return release_name
    return f"{prefix or ''}{tag}{suffix or ''}"


async def reconcile_release_configuration(
    settings: Settings,
    cli_debug: bool = False,
    cli_github_api_url: str | None = None,
    cli_github_token: str | None = None,
    cli_workspace: Path | None = None,
    cli_changelog_file: str | None = None,
    cli_allow_empty_changelog: bool = False,
    cli_allow_tag_prefix: bool = False,
    cli_draft_release: bool = False,
    cli_pre_release: bool = False,
    cli_release_name: str | None = None,
    cli_release_name_prefix: str | None = None,
    cli_release_name_suffix: str | None = None,
    cli_assets: list[str] | None = None,
) -> ReleaseConfig:
    """Reconciles the release configuration from CLI arguments and environment settings.

    CLI values take precedence over the CI environment.

    Raises:
        RequiredConfigurationElementError: If no GitHub token is available
        ConfigurationError: If the repository context is missing or malformed
    """
    github_token = cli_github_token or settings.GITHUB_TOKEN
    if not github_token:
        raise RequiredConfigurationElementError(name="GitHub token", cli_name="github_token", env_name="GITHUB_TOKEN")

    github_api_url = cli_github_api_url or settings.GITHUB_API_URL
    workspace = cli_workspace or Path(settings.GITHUB_WORKSPACE or ".")
    changelog_file = cli_changelog_file or DEFAULT_CHANGELOG_PATH

    repository = await read_repository_metadata(settings, allow_tag_prefix=cli_allow_tag_prefix)
    release_name = await resolve_release_name(repository.tag, cli_release_name, cli_release_name_prefix, cli_release_name_suffix)

    config = ReleaseConfig(
        debug=cli_debug,
        github_api_url=github_api_url,
        github_token=github_token,
        workspace=workspace,
        repository=repository,
        changelog_file=changelog_file,
        ignore_changelog=is_changelog_ignored(changelog_file),
        allow_empty_changelog=cli_allow_empty_changelog,
        allow_tag_prefix=cli_allow_tag_prefix,
        draft_release=cli_draft_release,
        pre_release=cli_pre_release,
        release_name=release_name,
        release_name_prefix=cli_release_name_prefix or "",
        release_name_suffix=cli_release_name_suffix or "",
        assets=tuple(cli_assets or ()),
    )
    logger.info(
        "Reconciled release configuration",
        repo=repository.repo,
        tag=repository.tag,
        release_name=release_name,
        changelog_file=changelog_file,
        draft=cli_draft_release,
        prerelease=cli_pre_release,
        assets=len(config.assets),
    )
    return config
