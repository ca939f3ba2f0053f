"""Resolves asset arguments (literal paths and globs) into release assets."""

from pathlib import PurePath
from typing import Iterable, Iterator, Self

import structlog

from git_release.utils.constants import GLOB_CHARACTERS_PATTERN
from git_release.utils.filesystem import FileSystem

from .exceptions import AssetError
from .models import Asset

logger = structlog.get_logger(__name__)


def is_glob(pattern: str) -> bool:
    """Check if an asset argument contains glob characters."""
    return GLOB_CHARACTERS_PATTERN.search(pattern) is not None


class AssetSet:
    """Assets to upload, unique by final file name, in input order."""

    def __init__(self, assets: Iterable[Asset] = ()) -> None:
        """Initialize with already resolved assets."""
        self.assets: list[Asset] = list(assets)

    def __iter__(self) -> Iterator[Asset]:
        """Iterate over the assets in upload order."""
        return iter(self.assets)

    def __len__(self) -> int:
        """Return the number of assets."""
        return len(self.assets)

    @property
    def names(self) -> list[str]:
        """Return the asset names in upload order."""
        return [asset.name for asset in self.assets]

    @classmethod
    def resolve(cls, patterns: Iterable[str], fs: FileSystem) -> Self:
        """Resolve asset arguments against a file system.

        Glob patterns that match nothing are skipped. Literal paths must name
        existing files. When two paths share a file name the later argument
        wins, since release asset names must be unique.

        Args:
            patterns: Literal paths and glob patterns, in the order given
            fs: File system the patterns are resolved against

        Returns:
            The deduplicated asset set

        Raises:
            AssetError: If a literal path does not name an existing file
        """
        by_name: dict[str, Asset] = {}
        for pattern in patterns:
            if is_glob(pattern):
                paths = fs.glob(pattern)
                if not paths:
                    logger.debug("Glob pattern matched no files", pattern=pattern)
                    continue
            else:
                if not fs.is_file(pattern):
                    raise AssetError(pattern)
                paths = [fs.resolve(pattern)]

            for path in paths:
                asset = Asset(path=path, name=PurePath(path).name, size_bytes=fs.size(path))
                previous = by_name.pop(asset.name, None)
                if previous is not None and previous.path != asset.path:
                    logger.warning(
                        "Duplicate asset name, keeping the later file",
                        name=asset.name,
                        dropped=previous.path,
                        kept=asset.path,
                    )
                by_name[asset.name] = asset

        assets = cls(by_name.values())
        logger.info("Resolved release assets", count=len(assets), names=assets.names)
        return assets


def resolve_assets(patterns: Iterable[str], fs: FileSystem) -> AssetSet:
    """Resolve asset arguments into a deduplicated asset set."""
    return AssetSet.resolve(patterns, fs)
