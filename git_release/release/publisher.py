"""Main release publish orchestration."""

import time

import structlog

from git_release.assets.models import Asset, UploadState
from git_release.github.abc import RemoteReleaseClient

from .exceptions import EmptyChangelogError, UploadError
from .models import PublishState, ReleaseRecord
from .results import AssetUploadResult, PublishOutcome

logger = structlog.get_logger(__name__)


class ReleasePublisher:
    """Creates a release and uploads its assets one after another.

    A failing asset does not stop the run: the release already exists on the
    remote side, so the remaining assets are still uploaded and the failure is
    reported in the outcome. Nothing is rolled back.
    """

    def __init__(self, allow_empty_changelog: bool = False) -> None:
        """Initialize with the policy for empty release bodies."""
        self.allow_empty_changelog = allow_empty_changelog

    async def publish(self, record: ReleaseRecord, client: RemoteReleaseClient) -> PublishOutcome:
        """Publish a release.

        Args:
            record: Desired release, including the assets to upload
            client: Client of the release hosting service

        Returns:
            Outcome with one result per asset in upload order

        Raises:
            EmptyChangelogError: If the body is empty and empty changelogs are not allowed
            DuplicateReleaseError: If the remote already has a release for the tag
        """
        if not record.body and not self.allow_empty_changelog:
            raise EmptyChangelogError(record.tag)

        state = PublishState.NOT_CREATED
        logger.info("Creating release", tag=record.tag, name=record.name, draft=record.draft, prerelease=record.pre_release)
        release = await client.create_release(
            tag=record.tag,
            name=record.name,
            body=record.body,
            draft=record.draft,
            pre_release=record.pre_release,
            target_commitish=record.target_commitish,
        )
        state = PublishState.CREATED
        release_id = release.id
        release_url = getattr(release, "html_url", None)
        logger.info("Release created", tag=record.tag, release_id=release_id, state=state.value)

        results: list[AssetUploadResult] = []
        if record.assets:
            state = PublishState.UPLOADING
            start_time = time.time()
            logger.info("Uploading assets", release_id=release_id, count=len(record.assets), state=state.value)
            for asset in record.assets:
                results.append(await self._upload(client, release_id, asset))
            logger.info(
                "Uploaded assets",
                release_id=release_id,
                duration=round(time.time() - start_time, 2),
                uploaded=sum(1 for result in results if result.succeeded),
                failed=sum(1 for result in results if not result.succeeded),
            )

        state = PublishState.PARTIALLY_FAILED if any(result.error for result in results) else PublishState.DONE
        logger.info("Publish finished", tag=record.tag, release_id=release_id, state=state.value)
        return PublishOutcome(
            release_created=True,
            state=state,
            results=results,
            release_id=release_id,
            release_url=release_url,
        )

    async def _upload(self, client: RemoteReleaseClient, release_id: int, asset: Asset) -> AssetUploadResult:
        """Upload one asset, recording rather than raising an upload failure."""
        logger.info("Uploading asset", asset=asset.name, path=asset.path, size=asset.size_bytes)
        try:
            await client.upload_asset(release_id, asset.path, asset.name)
        except UploadError as exc:
            asset.upload_state = UploadState.FAILED
            logger.warning("Asset upload failed, continuing with remaining assets", asset=asset.name, reason=exc.reason)
            return AssetUploadResult(asset, exc)
        asset.upload_state = UploadState.UPLOADED
        return AssetUploadResult(asset)
