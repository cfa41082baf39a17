"""Version parsing and stability validation."""

from __future__ import annotations

import logging
import re
from typing import Union

from .constants import Constants
from .errors import InvalidVersionFormat, MalformedTuple, StabilityMismatch
from .grammar import GrammarMode, split_leading_run, tokenize
from .logging_utils import extra_context, is_debug_enabled
from .models import StabilityLevel, Version, VersionDescription

logger = logging.getLogger(__name__)

_PATCH_LEVEL = re.compile(Constants.PATCH_LEVEL_PATTERN)

LevelLike = Union[StabilityLevel, str]
VersionLike = Union[Version, str]


def parse(raw: str) -> Version:
    """Parse a version string with the strict grammar.

    A ``-git`` suffix is accepted and normalized away.

    Raises:
        InvalidVersionFormat: if ``raw`` does not match the strict grammar.
    """
    tokens = tokenize(raw, GrammarMode.STRICT)
    if tokens is None:
        raise InvalidVersionFormat(raw)
    version = tokens.to_version()
    if is_debug_enabled(logger):
        logger.debug(
            "Parsed version",
            extra=extra_context(
                event="parse", component="parser", action="parse",
                target=raw, outcome=str(version),
            ),
        )
    return version


def normalize(raw: str) -> str:
    """Validate ``raw`` and return it without a ``-git`` suffix.

    The digits keep their original spelling, so ``01.2.3`` stays ``01.2.3``.
    """
    tokens = tokenize(raw, GrammarMode.STRICT)
    if tokens is None:
        raise InvalidVersionFormat(raw)
    return tokens.release + tokens.tag + tokens.digits


def _version_text(version: VersionLike) -> str:
    if isinstance(version, Version):
        return str(version)
    if not isinstance(version, str):
        raise InvalidVersionFormat(version)
    return version


def _loose_tag(text: str) -> str:
    # Versions outside the loose grammar are treated as untagged.
    tokens = tokenize(text, GrammarMode.LOOSE)
    return tokens.tag if tokens is not None else ""


def _level_value(level: LevelLike) -> str:
    if isinstance(level, StabilityLevel):
        return level.value
    return str(level)


def validate_release_stability(version: VersionLike, stability: LevelLike) -> None:
    """Check that the version's tag agrees with the declared release stability.

    Untagged versions must be ``stable``; ``alpha`` requires ``alpha``,
    ``beta`` and ``RC`` require ``beta`` and ``dev`` requires ``devel``.

    Raises:
        InvalidVersionFormat: if ``version`` is neither a string nor a Version.
        StabilityMismatch: on the first rule the pair violates.
    """
    text = _version_text(version)
    tag = _loose_tag(text)
    actual = _level_value(stability)
    if not tag:
        if actual != StabilityLevel.STABLE.value:
            raise StabilityMismatch(text, StabilityLevel.STABLE.value, actual, "release")
        return
    for rule_tag, required in Constants.RELEASE_STABILITY_REQUIREMENTS.items():
        if tag == rule_tag and actual != required:
            raise StabilityMismatch(text, required, actual, "release")


def validate_api_stability(version: VersionLike, stability: LevelLike) -> None:
    """Check that an untagged version declares ``stable`` api stability.

    Tagged versions are accepted with any api stability.

    Raises:
        InvalidVersionFormat: if ``version`` is neither a string nor a Version.
        StabilityMismatch: if an untagged version is not declared stable.
    """
    text = _version_text(version)
    actual = _level_value(stability)
    if not _loose_tag(text) and actual != StabilityLevel.STABLE.value:
        raise StabilityMismatch(text, StabilityLevel.STABLE.value, actual, "api")


def parse_pear_version(raw: VersionLike) -> VersionDescription:
    """Break a PEAR version into base version, description and subrevision.

    ``1.1.0RC2`` becomes ``VersionDescription("1.1.0", "Release Candidate", "2")``.
    A missing remainder or a patch level (``pl1``) is described as ``Final``;
    an unrecognized remainder leaves the description empty.

    Raises:
        MalformedTuple: if the leading numeric run does not have 3 parts.
    """
    text = str(raw) if isinstance(raw, Version) else raw
    split = split_leading_run(text)
    if split is None:
        raise MalformedTuple(raw)
    version, remainder = split

    description = ""
    subrevision = None
    if remainder and not _PATCH_LEVEL.match(remainder):
        for prefix, label in Constants.TICKET_DESCRIPTIONS:
            match = re.match(re.escape(prefix) + r"([0-9]+)", remainder)
            if match:
                description = label
                subrevision = match.group(1)
                break
    else:
        description = Constants.FINAL_DESCRIPTION

    if len(version.split(".")) != 3:
        raise MalformedTuple(raw)
    return VersionDescription(version=version, description=description, subrevision=subrevision)
