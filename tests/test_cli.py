"""Tests for command-line argument parsing."""

import sys
from pathlib import Path

import pytest

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from git_lead_time.cli import parse_args


def test_parse_args_with_positional_arguments(monkeypatch):
    """Verify CLI parsing succeeds with org, team and repo and applies defaults."""
    monkeypatch.setattr(sys, "argv", ["git-lead-time", "acme", "platform", "widgets"])

    args = parse_args()

    assert args.org == "acme"
    assert args.team == "platform"
    assert args.repo == "widgets"
    assert args.owner is None
    assert args.page_size == 10
    assert args.unit == "minutes"
    assert args.progress is False
    assert args.verbose is False


def test_parse_args_with_options():
    """Verify optional flags are parsed from an explicit argv."""
    args = parse_args(
        [
            "acme",
            "platform",
            "other/widgets",
            "--page-size",
            "50",
            "--unit",
            "seconds",
            "--progress",
            "-v",
        ]
    )

    assert args.repo == "other/widgets"
    assert args.page_size == 50
    assert args.unit == "seconds"
    assert args.progress is True
    assert args.verbose is True


def test_parse_args_missing_repo_fails():
    """Verify CLI parsing exits when a positional argument is missing."""
    with pytest.raises(SystemExit):
        parse_args(["acme", "platform"])


@pytest.mark.parametrize("page_size", ["0", "101", "ten"])
def test_parse_args_with_invalid_page_size_fails_validation(page_size):
    """Verify CLI parsing exits with an error for out-of-range page sizes."""
    with pytest.raises(SystemExit):
        parse_args(["acme", "platform", "widgets", "--page-size", page_size])


def test_parse_args_with_invalid_unit_fails_validation():
    """Verify only supported output units are accepted."""
    with pytest.raises(SystemExit):
        parse_args(["acme", "platform", "widgets", "--unit", "hours"])
