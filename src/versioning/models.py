"""Data models for installed-version resolution."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple


class SpecifierKind(Enum):
    """Category of a version specifier, in classification priority order."""
    SYSTEM = "system"
    LATEST = "latest"
    SHORTHAND = "shorthand"  # bare major or minor, qualified by each supported major
    MINOR = "minor"  # major.minor or major.minorrcN
    FULL = "full"  # major.minor.patch
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class Specifier:
    """Trimmed user input and its classification."""
    raw: str
    kind: SpecifierKind


@dataclass(frozen=True)
class InstalledSnapshot:
    """Version-sorted (ascending), read-only copy of the installed versions.

    Built once per resolution and passed to every stage so the lister is
    queried a single time.
    """
    versions: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.versions)

    def __contains__(self, version: object) -> bool:
        return version in self.versions

    def latest(self) -> Optional[str]:
        """Greatest installed version, or None when nothing is installed."""
        return self.versions[-1] if self.versions else None

    def latest_matching(self, predicate: Callable[[str], bool]) -> Optional[str]:
        """Greatest installed version accepted by ``predicate``."""
        for version in reversed(self.versions):
            if predicate(version):
                return version
        return None


@dataclass
class ResolutionResult:
    """Resolution outcome to feed DEBUG traces and callers wanting detail."""
    specifier: str
    kind: SpecifierKind
    resolved_version: str
    stage: str  # "system" | "latest" | "latest-major" | "latest-minor" | "exact"
    candidate_count: int
