"""PEAR version normalization, validation and Composer constraint translation."""

from .constraints import compare_versions, composer_to_pear, sort_terms
from .errors import (
    InvalidVersionFormat,
    MalformedTuple,
    ParseError,
    StabilityMismatch,
    TranslationError,
    UnsupportedConstraintFormat,
    ValidationError,
    VersionError,
)
from .models import ConstraintSet, StabilityLevel, StabilityTag, Version, VersionDescription
from .parser import (
    normalize,
    parse,
    parse_pear_version,
    validate_api_stability,
    validate_release_stability,
)
from .transform import (
    next_pear_version,
    next_version,
    snapshot_version,
    to_branch_qualified,
    to_ticket_description,
)

__all__ = [
    "ConstraintSet",
    "InvalidVersionFormat",
    "MalformedTuple",
    "ParseError",
    "StabilityLevel",
    "StabilityMismatch",
    "StabilityTag",
    "TranslationError",
    "UnsupportedConstraintFormat",
    "ValidationError",
    "Version",
    "VersionDescription",
    "VersionError",
    "compare_versions",
    "composer_to_pear",
    "next_pear_version",
    "next_version",
    "normalize",
    "parse",
    "parse_pear_version",
    "snapshot_version",
    "sort_terms",
    "to_branch_qualified",
    "to_ticket_description",
    "validate_api_stability",
    "validate_release_stability",
]
