"""Fixtures for unit tests."""

from typing import Callable, Generator

import pytest
import structlog

from tests.unit.fakes import FakeReleaseClient, InMemoryFileSystem


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def fake_client() -> FakeReleaseClient:
    """Provide a fresh in-memory release client."""
    return FakeReleaseClient()


@pytest.fixture
def memory_fs() -> Callable[[dict[str, str]], InMemoryFileSystem]:
    """Provide a factory for in-memory file systems."""
    return InMemoryFileSystem


KEEP_A_CHANGELOG = """# Changelog

All notable changes to this project will be documented in this file.

## [Unreleased]

### Added
- Upcoming feature.

## [1.1.0] - 2024-03-02

### Added
- Support for draft releases.

### Fixed
- Crash on empty asset list.

## [1.0.0] - 2024-01-15

Initial release.

[Unreleased]: https://github.com/owner/project/compare/v1.1.0...HEAD
[1.1.0]: https://github.com/owner/project/compare/v1.0.0...v1.1.0
[1.0.0]: https://github.com/owner/project/releases/tag/v1.0.0
"""


@pytest.fixture
def keep_a_changelog() -> str:
    """Provide a changelog in the Keep a Changelog format."""
    return KEEP_A_CHANGELOG
