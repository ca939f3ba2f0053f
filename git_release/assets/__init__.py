"""Release asset resolution module."""

from .exceptions import AssetError
from .models import Asset, UploadState
from .resolver import AssetSet, resolve_assets

__all__ = [
    "Asset",
    "AssetError",
    "AssetSet",
    "UploadState",
    "resolve_assets",
]
