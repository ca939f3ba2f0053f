"""File system access used to read changelogs and resolve release assets."""

import glob
import os
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for the read-only file system views the release workflow needs."""

    def resolve(self, path: str) -> str:
        """Return the path the rest of the workflow should use to access ``path``."""
        ...

    def glob(self, pattern: str) -> list[str]:
        """Return the resolved paths of all files matching ``pattern``, sorted."""
        ...

    def is_file(self, path: str) -> bool:
        """Check if ``path`` names an existing regular file."""
        ...

    def size(self, path: str) -> int:
        """Return the size of the file at ``path`` in bytes."""
        ...

    def read_text(self, path: str) -> str:
        """Return the UTF-8 decoded content of the file at ``path``."""
        ...


class LocalFileSystem:
    """File system rooted at a directory (usually the CI workspace)."""

    def __init__(self, root: Path | str = ".") -> None:
        """Initialize with the directory relative paths are resolved against."""
        self.root = Path(root).absolute()

    def resolve(self, path: str) -> str:
        """Join relative paths onto the root; absolute paths are kept."""
        return str(self.root / path)

    def glob(self, pattern: str) -> list[str]:
        """Return matching files (recursively for ``**``) joined onto the root."""
        if os.path.isabs(pattern):
            matches = glob.glob(pattern, recursive=True)
        else:
            matches = [str(self.root / match) for match in glob.glob(pattern, root_dir=self.root, recursive=True)]
        return sorted(match for match in matches if os.path.isfile(match))

    def is_file(self, path: str) -> bool:
        """Check if the resolved path is an existing regular file."""
        return Path(self.resolve(path)).is_file()

    def size(self, path: str) -> int:
        """Return the size in bytes of the resolved path."""
        return Path(self.resolve(path)).stat().st_size

    def read_text(self, path: str) -> str:
        """Read the resolved path as UTF-8 text, dropping a leading byte order mark."""
        return Path(self.resolve(path)).read_text(encoding="utf-8-sig")
