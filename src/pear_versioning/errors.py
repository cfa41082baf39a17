"""Exception taxonomy for version parsing, validation and translation.

Every error derives from :class:`VersionError` (itself a ``ValueError``) and
keeps the offending raw input on ``raw`` so callers can report it.
"""

from __future__ import annotations

from typing import Any


class VersionError(ValueError):
    """Base class for every failure raised by this package."""

    def __init__(self, message: str, raw: Any = None):
        super().__init__(message)
        self.raw = raw


class ParseError(VersionError):
    """Raised when a version string cannot be parsed."""


class InvalidVersionFormat(ParseError):
    """Raised when a version string does not match the expected grammar."""

    def __init__(self, raw: Any):
        super().__init__(f"Invalid version number {raw}", raw)


class MalformedTuple(ParseError):
    """Raised when the numeric part of a version does not have 3 parts."""

    def __init__(self, raw: Any):
        super().__init__("A version number must have 3 parts.", raw)


class ValidationError(VersionError):
    """Raised when a well-formed version is inconsistent with its metadata."""


class StabilityMismatch(ValidationError):
    """Raised when a stability tag and a declared stability level disagree."""

    def __init__(self, version: str, expected: str, actual: str, kind: str = "release"):
        if expected == "stable":
            label = "Stable"
        else:
            label = expected
        super().__init__(
            f'{label} version "{version}" marked with invalid {kind} stability "{actual}"!',
            version,
        )
        self.version = version
        self.expected = expected
        self.actual = actual
        self.kind = kind


class TranslationError(VersionError):
    """Raised when a constraint term cannot be translated."""


class UnsupportedConstraintFormat(TranslationError):
    """Raised when a constraint expression is outside the supported subset."""

    def __init__(self, raw: Any):
        super().__init__(f"Unsupported Composer version format: {raw}", raw)
