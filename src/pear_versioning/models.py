"""Data models for versions, stability levels and constraint sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple


class StabilityTag(Enum):
    """Pre-release tag attached to a version; the value is its spelling."""
    ALPHA = "alpha"
    BETA = "beta"
    RELEASE_CANDIDATE = "RC"
    DEV = "dev"


class StabilityLevel(Enum):
    """Declared release/api stability of a package."""
    STABLE = "stable"
    ALPHA = "alpha"
    BETA = "beta"
    DEVEL = "devel"


@dataclass(frozen=True)
class Version:
    """Normalized version: numeric triplet plus optional stability tag.

    ``git_suffix`` records that the raw input carried the development
    snapshot marker; it takes no part in equality since normalization
    erases it.
    """
    major: int
    minor: int
    patch: int
    tag: Optional[StabilityTag] = None
    subrevision: Optional[int] = None
    git_suffix: bool = field(default=False, compare=False)

    @property
    def release(self) -> Tuple[int, int, int]:
        """Return the (major, minor, patch) tuple."""
        return (self.major, self.minor, self.patch)

    @property
    def is_stable(self) -> bool:
        """True when no stability tag is present."""
        return self.tag is None

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.tag is not None:
            text += self.tag.value
            if self.subrevision is not None:
                text += str(self.subrevision)
        return text


@dataclass(frozen=True)
class VersionDescription:
    """Descriptive breakdown of a PEAR version, e.g. 1.1.0 / Release Candidate / 2."""
    version: str
    description: str = ""
    subrevision: Optional[str] = None


@dataclass(frozen=True)
class ConstraintSet:
    """PEAR style dependency bounds; ``exclude`` repeats an exclusive ``max``."""
    min: Optional[str] = None
    max: Optional[str] = None
    exclude: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        """True for the wildcard constraint."""
        return self.min is None and self.max is None and self.exclude is None

    def to_dict(self) -> Dict[str, str]:
        """Return only the bounds that are set."""
        result = {}
        for key in ("min", "max", "exclude"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        return result
