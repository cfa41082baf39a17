"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the command-line wrapper.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    INVALID_INPUT = 1


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    # Grammar fragments shared by every version pattern
    RELEASE_PATTERN = r"(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)"
    STRICT_SUFFIX_PATTERN = r"(?:(?P<git>-git)|(?P<tag>alpha|beta|RC)(?P<digits>\d*))?"
    LOOSE_SUFFIX_PATTERN = r"(?P<tag>alpha|beta|RC|dev)?(?P<digits>\d*)"
    EXACT_VERSION_PATTERN = r"\d+\.\d+\.\d+"
    CARET_TERM_PATTERN = r"\^\d+(?:\.\d+){0,2}"
    ORDERABLE_TERM_PATTERN = r"\^?\d+(?:\.\d+){0,2}"

    # Tags that must carry a number in the strict grammar
    STRICT_NUMBERED_TAGS = ("RC",)

    # Release stability each tag requires; order only affects which rule reports
    RELEASE_STABILITY_REQUIREMENTS = {
        "alpha": "alpha",
        "beta": "beta",
        "RC": "beta",
        "dev": "devel",
    }

    # Ticket descriptions keyed by remainder prefix, tried in order
    TICKET_DESCRIPTIONS = (
        ("RC", "Release Candidate"),
        ("alpha", "Alpha"),
        ("beta", "Beta"),
    )
    FINAL_DESCRIPTION = "Final"
    PATCH_LEVEL_PATTERN = r"pl\d"

    DEV_SUFFIX = "-git"
    SNAPSHOT_MARKER = "dev"
    SNAPSHOT_TIMESTAMP_FORMAT = "%Y%m%d%H%M"

    WILDCARD_CONSTRAINT = "*"
    CONSTRAINT_UNION = "||"
    CARET = "^"
    PRERELEASE_FLOOR = "alpha1"

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    ENV_LOG_LEVEL = "PEAR_VERSIONING_LOG_LEVEL"
    DEFAULT_LOG_LEVEL = "INFO"
