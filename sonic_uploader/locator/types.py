"""Types for the locator module."""

from dataclasses import dataclass
from pathlib import Path

# Matched against the final suffix, case-sensitive.
PACKAGE_EXTENSIONS: frozenset[str] = frozenset({"ipa", "apk"})


@dataclass(frozen=True)
class ArtifactFile:
    """A candidate package on disk.

    mtime is the filesystem last-modified time in seconds since the epoch.
    """

    path: Path
    mtime: float

    @property
    def name(self) -> str:
        return self.path.name
