"""Base ABC for remote release clients."""

from abc import ABC, abstractmethod
from typing import Any


class RemoteReleaseClient(ABC):
    """Base ABC for clients of a release hosting service."""

    # Release CRUD
    @abstractmethod
    async def create_release(
        self,
        tag: str,
        name: str,
        body: str,
        draft: bool,
        pre_release: bool,
        target_commitish: str | None = None,
    ) -> Any:
        """Create a release and return the remote release object.

        Implementations raise DuplicateReleaseError when a release for the tag
        already exists.
        """
        pass

    # Release Asset CRUD
    @abstractmethod
    async def upload_asset(self, release_id: int, local_path: str, asset_name: str) -> Any:
        """Upload a local file as a release asset.

        Implementations raise UploadError when the upload fails.
        """
        pass

    @abstractmethod
    async def list_release_assets(self, release_id: int) -> list[Any]:
        """List the assets attached to a release."""
        pass

    @abstractmethod
    async def delete_release_asset(self, asset_id: int) -> None:
        """Delete a release asset."""
        pass
