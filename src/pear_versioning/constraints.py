"""Translation of Composer version constraints to PEAR dependency bounds.

Only a small subset is supported: the wildcard ``*``, a single exact
``x.y.z`` version, and ``||`` unions of caret terms (``^x``, ``^x.y``,
``^x.y.z``).
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, List

import semantic_version

from .constants import Constants
from .errors import TranslationError, UnsupportedConstraintFormat
from .logging_utils import extra_context, is_debug_enabled
from .models import ConstraintSet

logger = logging.getLogger(__name__)

_EXACT_VERSION = re.compile(Constants.EXACT_VERSION_PATTERN, re.ASCII)
_CARET_TERM = re.compile(Constants.CARET_TERM_PATTERN, re.ASCII)
_ORDERABLE_TERM = re.compile(Constants.ORDERABLE_TERM_PATTERN, re.ASCII)


def _components(term: str) -> List[str]:
    """Return the dotted components of a term without its caret, padded to 3."""
    parts = term[len(Constants.CARET):].split(".") if term.startswith(Constants.CARET) else term.split(".")
    return parts + ["0"] * (3 - len(parts))


def version_key(term: str) -> semantic_version.Version:
    """Sort key for a constraint term; missing components count as 0.

    Raises:
        TranslationError: if the term is not ``[^]int[.int[.int]]``.
    """
    if not isinstance(term, str) or not _ORDERABLE_TERM.fullmatch(term):
        raise TranslationError(f"Invalid version in constraint term {term}", term)
    major, minor, patch = (int(part) for part in _components(term)[:3])
    return semantic_version.Version(major=major, minor=minor, patch=patch)


def compare_versions(left: str, right: str) -> int:
    """Compare two terms component-wise, returning -1, 0 or 1."""
    left_key, right_key = version_key(left), version_key(right)
    if left_key < right_key:
        return -1
    if left_key > right_key:
        return 1
    return 0


def sort_terms(terms: Iterable[str]) -> List[str]:
    """Return the terms ordered from lowest to highest version."""
    return sorted(terms, key=version_key)


def _validate_terms(expression: str, terms: List[str]) -> None:
    for term in terms:
        if not term.startswith(Constants.CARET):
            if len(terms) > 1 or not _EXACT_VERSION.fullmatch(expression):
                raise UnsupportedConstraintFormat(expression)
        elif not _CARET_TERM.fullmatch(term):
            raise TranslationError(f"Invalid version in constraint term {term}", expression)


def composer_to_pear(expression: str) -> ConstraintSet:
    """Convert a Composer constraint to PEAR ``min``/``max``/``exclude`` bounds.

    ``*`` yields an empty set, ``1.2.3`` pins ``min`` and ``max``, and a caret
    union spans from its lowest term to the next major version above its
    highest term, e.g. ``^1.2 || ^2.0`` -> min ``1.2.0``, max and exclude
    ``3.0.0alpha1``.

    Raises:
        UnsupportedConstraintFormat: if the expression is outside the subset.
        TranslationError: if a caret term is not numeric.
    """
    if not isinstance(expression, str):
        raise UnsupportedConstraintFormat(expression)
    if expression == Constants.WILDCARD_CONSTRAINT:
        return ConstraintSet()

    terms = [term.strip() for term in expression.split(Constants.CONSTRAINT_UNION)]
    _validate_terms(expression, terms)
    ordered = sort_terms(terms)

    lowest = ordered[0]
    if not lowest.startswith(Constants.CARET):
        return ConstraintSet(min=lowest, max=lowest)

    highest = ordered[-1]
    ceiling_major = int(_components(highest)[0]) + 1
    ceiling = f"{ceiling_major}.0.0{Constants.PRERELEASE_FLOOR}"
    result = ConstraintSet(
        min=".".join(_components(lowest)[:3]),
        max=ceiling,
        exclude=ceiling,
    )
    if is_debug_enabled(logger):
        logger.debug(
            "Translated constraint",
            extra=extra_context(
                event="translate", component="constraints", action="composer_to_pear",
                target=expression, outcome=result.to_dict(),
            ),
        )
    return result
