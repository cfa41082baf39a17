"""Derived forms of PEAR versions: descriptions, branch labels, next versions."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from .constants import Constants
from .errors import InvalidVersionFormat
from .grammar import GrammarMode, tokenize
from .logging_utils import extra_context, is_debug_enabled
from .parser import VersionLike, parse_pear_version

logger = logging.getLogger(__name__)


def _is_blank_number(digits: Optional[str]) -> bool:
    # A lone "0" counts as no number at all.
    return not digits or digits == "0"


def to_ticket_description(version: VersionLike) -> str:
    """Convert a PEAR version to the description used on the bug tracker.

    ``1.1.0RC2`` becomes ``1.1.0 Release Candidate 2``.
    """
    info = parse_pear_version(version)
    text = info.version
    if info.description:
        text += " " + info.description
        if not _is_blank_number(info.subrevision):
            text += " " + info.subrevision
    return text


def to_branch_qualified(version: VersionLike, branch: Optional[str]) -> str:
    """Return ``"{branch} ({version})"``, or the version alone without a branch."""
    if not branch:
        return str(version)
    return f"{branch} ({version})"


def _tokens_or_raise(raw: str):
    tokens = tokenize(raw, GrammarMode.LOOSE)
    if tokens is None:
        raise InvalidVersionFormat(raw)
    return tokens


def next_version(raw: str) -> str:
    """Return the development version following ``raw``.

    Stable versions get their patch number incremented; tagged versions keep
    it. The tag is dropped and ``-git`` is always appended, so ``1.2.3``
    becomes ``1.2.4-git`` and ``1.2.3RC1`` becomes ``1.2.3-git``.

    Raises:
        InvalidVersionFormat: if ``raw`` is not a version.
    """
    tokens = _tokens_or_raise(raw)
    patch = tokens.patch if tokens.tag else str(int(tokens.patch) + 1)
    result = tokens.prefix + patch + Constants.DEV_SUFFIX
    if is_debug_enabled(logger):
        logger.debug(
            "Computed next version",
            extra=extra_context(
                event="transform", component="transform", action="next_version",
                target=raw, outcome=result,
            ),
        )
    return result


def next_pear_version(raw: str) -> str:
    """Return the PEAR release following ``raw``.

    Stable versions increment the patch number, tagged versions increment
    their trailing number if they have one other than ``0``: ``1.2.3`` -> ``1.2.4``,
    ``1.2.3beta`` -> ``1.2.3beta``, ``1.2.3beta2`` -> ``1.2.3beta3``.

    Raises:
        InvalidVersionFormat: if ``raw`` is not a version.
    """
    tokens = _tokens_or_raise(raw)
    patch, tag, digits = tokens.patch, tokens.tag, tokens.digits
    if not tag:
        patch = str(int(patch) + 1)
        digits = ""
    elif _is_blank_number(digits):
        digits = ""
    else:
        digits = str(int(digits) + 1)
    result = tokens.prefix + patch + tag + digits
    if is_debug_enabled(logger):
        logger.debug(
            "Computed next PEAR version",
            extra=extra_context(
                event="transform", component="transform", action="next_pear_version",
                target=raw, outcome=result,
            ),
        )
    return result


def snapshot_version(version: VersionLike, when: Optional[datetime] = None) -> str:
    """Return the version stamped for a distribution snapshot, e.g. ``1.2.3dev202610191230``."""
    when = when or datetime.now()
    return f"{version}{Constants.SNAPSHOT_MARKER}{when.strftime(Constants.SNAPSHOT_TIMESTAMP_FORMAT)}"
