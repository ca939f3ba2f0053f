"""Contains results of a publish run."""

from git_release.assets.models import Asset, UploadState

from .exceptions import UploadError
from .models import PublishState


class AssetUploadResult:
    """Outcome of uploading a single asset."""

    def __init__(self, asset: Asset, error: UploadError | None = None) -> None:
        """Initialize the result with the asset and the error that failed it, if any."""
        self.asset = asset
        self.error = error

    @property
    def succeeded(self) -> bool:
        """Check if the asset was uploaded."""
        return self.error is None and self.asset.upload_state == UploadState.UPLOADED


class PublishOutcome:
    """Contains results of the publish workflow, one entry per asset in upload order."""

    def __init__(
        self,
        release_created: bool,
        state: PublishState,
        results: list[AssetUploadResult] | None = None,
        release_id: int | None = None,
        release_url: str | None = None,
    ) -> None:
        """Initialize the outcome with the release and the per-asset results."""
        self.release_created = release_created
        self.state = state
        self.results = results or []
        self.release_id = release_id
        self.release_url = release_url

    @property
    def uploaded(self) -> list[Asset]:
        """Return the uploaded assets in upload order."""
        return [result.asset for result in self.results if result.succeeded]

    @property
    def failed(self) -> dict[str, UploadError]:
        """Return the upload error of every failed asset, keyed by asset name."""
        return {result.asset.name: result.error for result in self.results if result.error is not None}

    @property
    def succeeded(self) -> bool:
        """Check if the release was created and every asset uploaded."""
        return self.release_created and not self.failed

    def summary(self) -> list[str]:
        """Render a one-line summary followed by the per-asset list on failure."""
        if self.succeeded:
            return [f"Release published with {len(self.uploaded)} asset(s): {self.release_url or self.release_id}"]

        lines = [f"Release published with {len(self.failed)} of {len(self.results)} asset upload(s) failing: {self.release_url or self.release_id}"]
        for number, result in enumerate(self.results, start=1):
            if result.error is None:
                lines.append(f"  {number}. {result.asset.name}: uploaded")
            else:
                lines.append(f"  {number}. {result.asset.name}: FAILED ({result.error.reason})")
        return lines
