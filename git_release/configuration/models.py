"""Configuration models for a release run."""

from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class RepositoryMetadata(BaseModel):
    """Repository context of the tag being released."""

    model_config = ConfigDict(frozen=True)

    owner: str
    project: str
    tag: str
    version: str
    commit_hash: str

    @property
    def repo(self) -> str:
        """Return the repository in 'owner/name' format."""
        return f"{self.owner}/{self.project}"


@dataclass(frozen=True)
class ReleaseConfig:
    """Immutable configuration of a single release run."""

    debug: bool
    github_api_url: str
    github_token: str
    workspace: Path
    repository: RepositoryMetadata
    changelog_file: str
    ignore_changelog: bool
    allow_empty_changelog: bool
    allow_tag_prefix: bool
    draft_release: bool
    pre_release: bool
    release_name: str
    release_name_prefix: str
    release_name_suffix: str
    assets: tuple[str, ...]
