"""Tests for Composer to PEAR constraint translation."""

import pytest

from pear_versioning.constraints import compare_versions, composer_to_pear, sort_terms
from pear_versioning.errors import TranslationError, UnsupportedConstraintFormat
from pear_versioning.models import ConstraintSet


class TestComposerToPear:
    """Tests for composer_to_pear()."""

    def test_wildcard(self):
        result = composer_to_pear("*")
        assert result == ConstraintSet()
        assert result.to_dict() == {}

    def test_exact_version(self):
        """A single exact version pins min and max without exclude."""
        assert composer_to_pear("1.2.3").to_dict() == {"min": "1.2.3", "max": "1.2.3"}

    @pytest.mark.parametrize("expression,expected", [
        ("^1.2.3", {"min": "1.2.3", "max": "2.0.0alpha1", "exclude": "2.0.0alpha1"}),
        ("^1.2 || ^2.0", {"min": "1.2.0", "max": "3.0.0alpha1", "exclude": "3.0.0alpha1"}),
        ("^2", {"min": "2.0.0", "max": "3.0.0alpha1", "exclude": "3.0.0alpha1"}),
        ("^2.0 || ^1.2", {"min": "1.2.0", "max": "3.0.0alpha1", "exclude": "3.0.0alpha1"}),
        ("^10.1 || ^9", {"min": "9.0.0", "max": "11.0.0alpha1", "exclude": "11.0.0alpha1"}),
        ("^1||^1.5", {"min": "1.0.0", "max": "2.0.0alpha1", "exclude": "2.0.0alpha1"}),
        ("^0.3", {"min": "0.3.0", "max": "1.0.0alpha1", "exclude": "1.0.0alpha1"}),
    ])
    def test_caret_ranges(self, expression, expected):
        assert composer_to_pear(expression).to_dict() == expected

    @pytest.mark.parametrize("expression", [
        "1.2 || ^2.0",
        "1.2.3 || ^2.0",
        "^1.0 || 2.0.0",
        "1.2",
        "1.2.3.4",
        " 1.2.3",
        "~1.2",
        ">=1.0",
        "^1 ||",
        "",
    ])
    def test_unsupported(self, expression):
        with pytest.raises(UnsupportedConstraintFormat) as excinfo:
            composer_to_pear(expression)
        assert excinfo.value.raw == expression

    @pytest.mark.parametrize("expression", ["^", "^x", "^1.x", "^1.2.3.4", "^1.2.3-beta", "^1 || ^two"])
    def test_non_numeric_caret_term(self, expression):
        with pytest.raises(TranslationError) as excinfo:
            composer_to_pear(expression)
        assert not isinstance(excinfo.value, UnsupportedConstraintFormat)

    def test_non_string(self):
        with pytest.raises(TranslationError):
            composer_to_pear(None)


class TestOrdering:
    """Tests for constraint term ordering."""

    def test_sort_terms(self):
        assert sort_terms(["^2.0", "^1.10", "^1.9.5", "^1"]) == ["^1", "^1.9.5", "^1.10", "^2.0"]

    def test_sort_returns_new_list(self):
        terms = ["^2", "^1"]
        ordered = sort_terms(terms)
        assert ordered == ["^1", "^2"]
        assert terms == ["^2", "^1"]

    @pytest.mark.parametrize("left,right,expected", [
        ("1.2", "1.2.0", 0),
        ("^1.10", "1.9", 1),
        ("1", "^2", -1),
    ])
    def test_compare(self, left, right, expected):
        assert compare_versions(left, right) == expected

    @pytest.mark.parametrize("left,right", [("^x", "1"), ("1", "abc"), ("^1.2.3.4", "1"), (None, "1")])
    def test_compare_rejects_non_numeric_terms(self, left, right):
        with pytest.raises(TranslationError):
            compare_versions(left, right)

    def test_sort_rejects_non_numeric_terms(self):
        with pytest.raises(TranslationError) as excinfo:
            sort_terms(["^1", "abc"])
        assert excinfo.value.raw == "abc"
