"""Data models for the desired remote release."""

from dataclasses import dataclass, field
from enum import Enum

from git_release.assets.models import Asset


class PublishState(str, Enum):
    """Progress of a publish run."""

    NOT_CREATED = "not_created"
    CREATED = "created"
    UPLOADING = "uploading"
    DONE = "done"
    PARTIALLY_FAILED = "partially_failed"


@dataclass
class ReleaseRecord:
    """Desired state of the release to publish for a tag."""

    tag: str
    name: str
    body: str
    draft: bool = False
    pre_release: bool = False
    assets: list[Asset] = field(default_factory=list)
    target_commitish: str | None = None
