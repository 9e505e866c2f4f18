"""Command-line argument parsing for the git lead-time calculator."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE


def _page_size(value: str) -> int:
    """Parse and validate a GraphQL page size.

    Args:
        value: Raw command-line argument value.

    Returns:
        The validated page size.

    Raises:
        argparse.ArgumentTypeError: If value is not an integer in ``1..MAX_PAGE_SIZE``.
    """
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("must be an integer") from exc

    if not 0 < parsed <= MAX_PAGE_SIZE:
        raise argparse.ArgumentTypeError(f"must be between 1 and {MAX_PAGE_SIZE}")

    return parsed


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments for lead-time calculation.

    Returns:
        Parsed CLI arguments containing organization, team, repository and
        output options.
    """
    parser = argparse.ArgumentParser(
        prog="git-lead-time",
        description=(
            "Compute lead time from commit authorship to CI completion for "
            "merged pull requests authored by members of a GitHub team."
        ),
    )

    parser.add_argument("org", help="GitHub organization that owns the team.")
    parser.add_argument("team", help="Team slug within the organization.")
    parser.add_argument(
        "repo",
        help="Repository to analyze, as 'name' or 'owner/name'.",
    )
    parser.add_argument(
        "--owner",
        default=None,
        help="Owner of a bare repository name (default: the organization).",
    )
    parser.add_argument(
        "--page-size",
        type=_page_size,
        default=DEFAULT_PAGE_SIZE,
        help=f"Pull requests fetched per request (default: {DEFAULT_PAGE_SIZE}).",
    )
    parser.add_argument(
        "--unit",
        choices=("seconds", "minutes"),
        default="minutes",
        help="Unit used to print lead times (default: minutes).",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Fetch the pull request total up front and log progress while paging.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    return parser.parse_args(argv)
