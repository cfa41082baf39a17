"""Tests for the command-line wrapper."""

import json
import logging

import pytest

from pear_versioning import cli
from pear_versioning.constants import ExitCodes


def _run(capsys, *argv):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(list(argv))
    return excinfo.value.code, capsys.readouterr().out.strip()


def test_normalize(capsys):
    assert _run(capsys, "normalize", "1.2.3-git") == (ExitCodes.SUCCESS.value, "1.2.3")


def test_describe_with_branch(capsys):
    code, out = _run(capsys, "describe", "1.1.0RC2", "--branch", "H5")
    assert code == ExitCodes.SUCCESS.value
    assert out == "H5 (1.1.0 Release Candidate 2)"


def test_next_variants(capsys):
    assert _run(capsys, "next", "1.2.3")[1] == "1.2.4-git"
    assert _run(capsys, "next", "--pear", "1.2.3beta2")[1] == "1.2.3beta3"


def test_constraint_json(capsys):
    code, out = _run(capsys, "constraint", "^1.2 || ^2.0")
    assert code == ExitCodes.SUCCESS.value
    assert json.loads(out) == {"min": "1.2.0", "max": "3.0.0alpha1", "exclude": "3.0.0alpha1"}


def test_check_stability_ok(capsys):
    assert _run(capsys, "check-stability", "1.0.0beta1", "--release", "beta", "--api", "stable") == \
        (ExitCodes.SUCCESS.value, "OK")


def test_snapshot(capsys):
    code, out = _run(capsys, "snapshot", "1.2.3-git")
    assert code == ExitCodes.SUCCESS.value
    assert out.startswith("1.2.3dev")


def test_failure_is_logged(capsys, caplog):
    """Invalid input exits with INVALID_INPUT and logs the error."""
    with caplog.at_level(logging.ERROR):
        code, out = _run(capsys, "check-stability", "1.0.0", "--release", "alpha")
    assert code == ExitCodes.INVALID_INPUT.value
    assert out == ""
    assert 'Stable version "1.0.0" marked with invalid release stability "alpha"!' in caplog.text


def test_invalid_version_exit_code(capsys):
    assert _run(capsys, "next", "1.2")[0] == ExitCodes.INVALID_INPUT.value


def test_check_stability_requires_a_level(capsys):
    """Without --release or --api nothing would be checked, so the call is rejected."""
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["check-stability", "garbage"])
    captured = capsys.readouterr()
    assert excinfo.value.code == 2
    assert captured.out == ""
    assert "--release" in captured.err
