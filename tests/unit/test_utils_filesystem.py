"""Unit tests for the local file system."""

from pathlib import Path

from git_release.utils.filesystem import FileSystem, LocalFileSystem


def test_local_file_system_satisfies_protocol(tmp_path: Path) -> None:
    """Test that the local file system implements the protocol."""
    assert isinstance(LocalFileSystem(tmp_path), FileSystem)


def test_resolve_relative_and_absolute(tmp_path: Path) -> None:
    """Test that relative paths are joined onto the root and absolute paths kept."""
    fs = LocalFileSystem(tmp_path)

    assert fs.resolve("CHANGELOG.md") == str(tmp_path / "CHANGELOG.md")
    assert fs.resolve(str(tmp_path / "other.md")) == str(tmp_path / "other.md")


def test_file_access(tmp_path: Path) -> None:
    """Test reading files relative to the root."""
    (tmp_path / "CHANGELOG.md").write_text("## 1.0.0\nÉtat\n", encoding="utf-8")
    (tmp_path / "build").mkdir()
    fs = LocalFileSystem(tmp_path)

    assert fs.is_file("CHANGELOG.md")
    assert not fs.is_file("build")
    assert not fs.is_file("missing.md")
    assert fs.read_text("CHANGELOG.md") == "## 1.0.0\nÉtat\n"
    assert fs.size("CHANGELOG.md") == len("## 1.0.0\nÉtat\n".encode("utf-8"))


def test_glob_returns_sorted_files_only(tmp_path: Path) -> None:
    """Test that globbing skips directories and returns resolved sorted paths."""
    dist = tmp_path / "dist"
    (dist / "nested").mkdir(parents=True)
    (dist / "b.zip").write_bytes(b"b")
    (dist / "a.zip").write_bytes(b"a")
    (dist / "nested" / "c.zip").write_bytes(b"c")
    (dist / "dir.zip").mkdir()
    fs = LocalFileSystem(tmp_path)

    assert fs.glob("dist/*.zip") == [str(dist / "a.zip"), str(dist / "b.zip")]
    assert fs.glob("dist/**/*.zip") == [str(dist / "a.zip"), str(dist / "b.zip"), str(dist / "nested" / "c.zip")]
    assert fs.glob(str(dist / "*.zip")) == [str(dist / "a.zip"), str(dist / "b.zip")]
    assert fs.glob("dist/*.tar.gz") == []


def test_read_text_drops_byte_order_mark(tmp_path: Path) -> None:
    """Test that a changelog saved with a byte order mark reads like one without."""
    (tmp_path / "CHANGELOG.md").write_bytes("\ufeff## 1.0.0\nFirst\n".encode("utf-8"))

    assert LocalFileSystem(tmp_path).read_text("CHANGELOG.md") == "## 1.0.0\nFirst\n"
