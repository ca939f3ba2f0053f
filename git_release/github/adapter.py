"""GitHub release client adapter for the githubkit library."""

import mimetypes
from functools import wraps
from pathlib import Path
from typing import Any, Awaitable, Callable, Self, TypeVar

import structlog
from githubkit import Response
from githubkit.exception import GitHubException, RequestFailed
from githubkit.versions.latest.models import Release, ReleaseAsset
from pydantic import ValidationError

from git_release.release.exceptions import DuplicateReleaseError, ReleaseRequestError, UploadError
from git_release.utils.constants import DEFAULT_ASSET_CONTENT_TYPE
from git_release.utils.github import split_repository_in_configuration
from git_release.utils.retry import retry_on_rate_limit

from .abc import RemoteReleaseClient
from .client import GitHubClient, get_github_client

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def _github_error_data(exc: RequestFailed) -> dict[str, Any]:
    """Return the JSON error document of a failed request, or an empty dict."""
    try:
        error_data = exc.response.json()
    except Exception:
        return {}
    return error_data if isinstance(error_data, dict) else {}


def _is_already_exists(exc: RequestFailed) -> bool:
    """Check if a 422 response reports a resource that already exists."""
    if exc.response.status_code != 422:
        return False
    errors = _github_error_data(exc).get("errors", [])
    return any(isinstance(error, dict) and error.get("code") == "already_exists" for error in errors)


def handle_github_422(func: F) -> F:
    """Decorator to turn GitHub 422 Unprocessable Entity errors into ReleaseRequestError, logging the details."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except RequestFailed as exc:
            if exc.response.status_code == 422:
                error_data = _github_error_data(exc)
                message = error_data.get("message", "Unprocessable Entity")
                errors = error_data.get("errors", [])
                logger.error(
                    "GitHub 422 Unprocessable Entity",
                    function=func.__name__,
                    message=message,
                    errors=errors,
                    url=getattr(exc.response, "url", None),
                    status_code=422,
                )
                raise ReleaseRequestError(func.__name__, message, errors) from exc
            raise

    return wrapper  # type: ignore


class GitHubKitAdapter(RemoteReleaseClient):
    """GitHub release client adapter for the githubkit library."""

    def __init__(self, client: GitHubClient, owner: str, repo_name: str) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client
        self.owner = owner
        self.repo_name = repo_name
        self._upload_urls: dict[int, str] = {}

    def _omit_null_parameters(self, **kwargs: Any) -> dict[str, Any]:
        """Omit parameters that are None."""
        return {k: v for k, v in kwargs.items() if v is not None}

    @classmethod
    async def create(cls, repo: str, github_token: str, github_api_url: str = "https://api.github.com") -> Self:
        """Create a new GitHub client adapter.

        Args:
            repo: Repository in 'owner/repo' format
            github_token: Token of the workflow run
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured GitHubKitAdapter instance
        """
        owner, repo_name = await split_repository_in_configuration(repo=repo)
        logger.info(
            "Creating client for GitHub instance and repository",
            github_api_url=github_api_url,
            owner=owner,
            repo_name=repo_name,
        )
        client = await get_github_client(github_token=github_token, github_api_url=github_api_url)
        return cls(client, owner, repo_name)

    # Release CRUD
    @handle_github_422
    @retry_on_rate_limit()
    async def create_release(
        self,
        tag: str,
        name: str,
        body: str,
        draft: bool,
        pre_release: bool,
        target_commitish: str | None = None,
    ) -> Release:
        """Create a release for a tag, failing if the tag already has one."""
        params = self._omit_null_parameters(
            tag_name=tag,
            name=name,
            body=body,
            draft=draft,
            prerelease=pre_release,
            target_commitish=target_commitish,
        )
        try:
            response: Response[Release] = await self.client.rest.repos.async_create_release(
                owner=self.owner,
                repo=self.repo_name,
                **params,
            )
        except RequestFailed as exc:
            if _is_already_exists(exc):
                logger.error("Release already exists", tag=tag, owner=self.owner, repo=self.repo_name)
                raise DuplicateReleaseError(tag) from exc
            raise
        release = response.parsed_data
        self._upload_urls[release.id] = release.upload_url
        logger.info("Created release", tag=tag, release_id=release.id, url=release.html_url, draft=draft, prerelease=pre_release)
        return release

    @retry_on_rate_limit()
    async def get_release(self, release_id: int) -> Release:
        """Get a specific release by ID."""
        response: Response[Release] = await self.client.rest.repos.async_get_release(
            owner=self.owner,
            repo=self.repo_name,
            release_id=release_id,
        )
        return response.parsed_data

    # Release Asset CRUD
    async def upload_asset(self, release_id: int, local_path: str, asset_name: str) -> ReleaseAsset:
        """Upload a local file as a release asset.

        A failed upload can leave a broken asset entry behind on GitHub, which
        would block a later upload under the same name. Such leftovers are
        removed before the failure is reported.
        A response that cannot be parsed also counts as a failed upload.
        """
        try:
            asset = await self._upload_release_asset(release_id, local_path, asset_name)
        except (GitHubException, OSError, ValidationError) as exc:
            reason = self._describe_failure(exc)
            logger.error("Failed to upload release asset", asset=asset_name, release_id=release_id, reason=reason)
            await self._remove_partial_asset(release_id, asset_name)
            raise UploadError(asset_name, reason) from exc
        logger.info("Uploaded release asset", asset=asset_name, release_id=release_id, size=asset.size)
        return asset

    @retry_on_rate_limit()
    async def _upload_release_asset(self, release_id: int, local_path: str, asset_name: str) -> ReleaseAsset:
        """Post the file content to the release's upload URL."""
        content = Path(local_path).read_bytes()
        content_type = mimetypes.guess_type(asset_name)[0] or DEFAULT_ASSET_CONTENT_TYPE
        upload_url = await self._get_upload_url(release_id)
        logger.debug("Uploading release asset", asset=asset_name, size=len(content), content_type=content_type)
        response: Response[ReleaseAsset] = await self.client.arequest(
            "POST",
            upload_url,
            params={"name": asset_name},
            content=content,
            headers={"Content-Type": content_type},
            response_model=ReleaseAsset,
        )
        return response.parsed_data

    async def _get_upload_url(self, release_id: int) -> str:
        """Return the upload endpoint of a release without its URI template suffix."""
        if release_id not in self._upload_urls:
            release = await self.get_release(release_id)
            self._upload_urls[release_id] = release.upload_url
        # e.g. https://uploads.github.com/repos/o/r/releases/1/assets{?name,label}
        return self._upload_urls[release_id].split("{", 1)[0]

    async def _remove_partial_asset(self, release_id: int, asset_name: str) -> None:
        """Delete assets named ``asset_name`` that never finished uploading."""
        try:
            assets = await self.list_release_assets(release_id)
            for asset in assets:
                if asset.name == asset_name and asset.state != "uploaded":
                    logger.warning("Deleting partially uploaded release asset", asset=asset_name, asset_id=asset.id, state=asset.state)
                    await self.delete_release_asset(asset.id)
        except GitHubException as exc:
            logger.warning("Could not clean up partially uploaded release asset", asset=asset_name, error=str(exc))

    @staticmethod
    def _describe_failure(exc: Exception) -> str:
        """Return a one-line reason for a failed request."""
        if isinstance(exc, RequestFailed):
            message = _github_error_data(exc).get("message") or "request failed"
            return f"HTTP {exc.response.status_code}: {message}"
        if isinstance(exc, ValidationError):
            return f"unexpected upload response ({exc.error_count()} validation error(s))"
        return str(exc) or type(exc).__name__

    @retry_on_rate_limit()
    async def list_release_assets(self, release_id: int, per_page: int = 100) -> list[ReleaseAsset]:
        """List all assets of a release, handling pagination."""
        all_assets: list[ReleaseAsset] = []
        page: int = 1
        while True:
            response: Response[list[ReleaseAsset]] = await self.client.rest.repos.async_list_release_assets(
                owner=self.owner,
                repo=self.repo_name,
                release_id=release_id,
                per_page=per_page,
                page=page,
            )
            assets: list[ReleaseAsset] = response.parsed_data
            if not assets:
                break
            all_assets.extend(assets)
            if len(assets) < per_page:
                break
            page += 1
        logger.debug("Listed release assets", release_id=release_id, count=len(all_assets))
        return all_assets

    @retry_on_rate_limit()
    async def delete_release_asset(self, asset_id: int) -> None:
        """Delete a release asset."""
        await self.client.rest.repos.async_delete_release_asset(
            owner=self.owner,
            repo=self.repo_name,
            asset_id=asset_id,
        )
