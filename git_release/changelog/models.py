"""Data models for parsed changelogs."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class VersionSection:
    """A single heading of a changelog and the text that belongs to it.

    Sections whose heading carries no version token (such as "Unreleased")
    have ``versioned`` set to False and use the heading text as ``version``.
    """

    version: str
    body: str
    heading: str
    release_date: str | None = None
    versioned: bool = True


@dataclass(frozen=True)
class ChangelogDocument:
    """Ordered, immutable sequence of changelog sections."""

    sections: tuple[VersionSection, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        """Return the number of sections."""
        return len(self.sections)

    @property
    def versions(self) -> list[str]:
        """Return the versions of all versioned sections in document order."""
        return [section.version for section in self.sections if section.versioned]

    @property
    def unreleased(self) -> VersionSection | None:
        """Return the leading unversioned section, if the changelog has one."""
        if self.sections and not self.sections[0].versioned:
            return self.sections[0]
        return None
