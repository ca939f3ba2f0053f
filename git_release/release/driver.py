"""Orchestrates a release run from configuration to published release."""

import time

import structlog

from git_release.assets.resolver import resolve_assets
from git_release.changelog.reader import read_release_notes
from git_release.configuration.models import ReleaseConfig
from git_release.github.abc import RemoteReleaseClient
from git_release.github.adapter import GitHubKitAdapter
from git_release.release.models import ReleaseRecord
from git_release.release.publisher import ReleasePublisher
from git_release.release.results import PublishOutcome
from git_release.utils.filesystem import FileSystem, LocalFileSystem

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def build_release_record(config: ReleaseConfig, fs: FileSystem) -> ReleaseRecord:
    """Build the desired release from the changelog and the local assets.

    Everything here is local; a missing changelog or asset fails the run
    before the hosting service is contacted.
    """
    repository = config.repository
    body = read_release_notes(
        fs,
        config.changelog_file,
        repository.version,
        allow_prefix=config.allow_tag_prefix,
    )
    assets = resolve_assets(config.assets, fs)
    return ReleaseRecord(
        tag=repository.tag,
        name=config.release_name,
        body=body,
        draft=config.draft_release,
        pre_release=config.pre_release,
        assets=list(assets),
        target_commitish=repository.commit_hash,
    )


async def run_release_workflow(
    config: ReleaseConfig,
    client: RemoteReleaseClient | None = None,
    fs: FileSystem | None = None,
) -> PublishOutcome:
    """Run the release workflow: read notes, resolve assets, create the release and upload."""
    fs = fs or LocalFileSystem(config.workspace)
    record = await build_release_record(config, fs)

    # An ignored changelog always yields an empty body, which is accepted.
    publisher = ReleasePublisher(allow_empty_changelog=config.allow_empty_changelog or config.ignore_changelog)
    if client is None:
        client = await GitHubKitAdapter.create(
            repo=config.repository.repo,
            github_token=config.github_token,
            github_api_url=config.github_api_url,
        )

    start_time = time.time()
    logger.info("Publishing release", tag=record.tag, assets=len(record.assets))
    outcome = await publisher.publish(record, client)
    logger.info(
        "Published release",
        tag=record.tag,
        state=outcome.state.value,
        duration=round(time.time() - start_time, 2),
        uploaded=len(outcome.uploaded),
        failed=len(outcome.failed),
    )
    return outcome
