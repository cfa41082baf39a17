"""Canonical tokenizer for PEAR style version strings.

Two tolerance modes share the same release triplet fragment:

* ``STRICT``: ``1.2.3``, ``1.2.3-git``, ``1.2.3alpha``, ``1.2.3beta4``,
  ``1.2.3RC1``. ``RC`` must carry a number and ``dev`` is not accepted.
* ``LOOSE``: triplet, optional ``alpha|beta|RC|dev`` and any trailing digits.
  Used by the stability checks and by the next-version computations, whose
  grammars accept exactly this language.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .constants import Constants
from .models import StabilityTag, Version


class GrammarMode(Enum):
    """Tolerance level of the tokenizer."""
    STRICT = "strict"
    LOOSE = "loose"


@dataclass(frozen=True)
class VersionTokens:
    """Captured pieces of a version string, kept in their original spelling."""
    raw: str
    major: str
    minor: str
    patch: str
    tag: str = ""
    digits: str = ""
    git: bool = False

    @property
    def release(self) -> str:
        """The ``major.minor.patch`` text."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def prefix(self) -> str:
        """The ``major.minor.`` text preceding the patch number."""
        return f"{self.major}.{self.minor}."

    def to_version(self) -> Version:
        """Build the normalized Version value; ``-git`` is erased."""
        tag = StabilityTag(self.tag) if self.tag else None
        subrevision = int(self.digits) if tag is not None and self.digits else None
        return Version(
            major=int(self.major),
            minor=int(self.minor),
            patch=int(self.patch),
            tag=tag,
            subrevision=subrevision,
            git_suffix=self.git,
        )


_PATTERNS = {
    GrammarMode.STRICT: re.compile(
        Constants.RELEASE_PATTERN + Constants.STRICT_SUFFIX_PATTERN, re.ASCII
    ),
    GrammarMode.LOOSE: re.compile(
        Constants.RELEASE_PATTERN + Constants.LOOSE_SUFFIX_PATTERN, re.ASCII
    ),
}

# Generic "leading numeric run + remainder" split used for descriptions
_LEADING_RUN = re.compile(r"([.0-9]+)(.*)")


def tokenize(raw: str, mode: GrammarMode = GrammarMode.STRICT) -> Optional[VersionTokens]:
    """Split ``raw`` into version tokens, or return None if it does not match.

    Args:
        raw: Version string.
        mode: Grammar tolerance to apply.

    Returns:
        VersionTokens on a full match, otherwise None.
    """
    if not isinstance(raw, str):
        return None
    match = _PATTERNS[mode].fullmatch(raw)
    if match is None:
        return None
    tag = match.group("tag") or ""
    digits = match.group("digits") or ""
    if mode is GrammarMode.STRICT and tag in Constants.STRICT_NUMBERED_TAGS and not digits:
        return None
    return VersionTokens(
        raw=raw,
        major=match.group("major"),
        minor=match.group("minor"),
        patch=match.group("patch"),
        tag=tag,
        digits=digits,
        git=bool(match.groupdict().get("git")),
    )


def split_leading_run(raw: str) -> Optional[Tuple[str, str]]:
    """Return the first run of digits and dots and everything after it."""
    if not isinstance(raw, str):
        return None
    match = _LEADING_RUN.search(raw)
    if match is None:
        return None
    return match.group(1), match.group(2)
