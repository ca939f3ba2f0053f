"""Data models for release assets."""

from dataclasses import dataclass
from enum import Enum


class UploadState(str, Enum):
    """Upload state of a release asset."""

    PENDING = "pending"
    UPLOADED = "uploaded"
    FAILED = "failed"


@dataclass
class Asset:
    """A local file to attach to a release under ``name``."""

    path: str
    name: str
    size_bytes: int
    upload_state: UploadState = UploadState.PENDING
