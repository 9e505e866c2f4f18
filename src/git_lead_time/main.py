"""Entry point for the git lead-time calculator."""

from __future__ import annotations

import logging
import sys
from typing import Iterable, Iterator, Optional, Sequence

from .cli import parse_args
from .config import load_config
from .errors import (
    ApiError,
    AuthenticationError,
    ConfigurationError,
    DataValidationError,
    LeadTimeError,
)
from .graphql_client import GraphQLClient
from .lead_time import collect_lead_time_samples
from .models import PullRequest
from .pull_requests import fetch_total_count, iter_pull_requests
from .stats import compute_statistics, generate_report
from .team import fetch_team_members

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_UNEXPECTED = 1
EXIT_CONFIGURATION = 2
EXIT_AUTHENTICATION = 3
EXIT_API = 4
EXIT_DATA_VALIDATION = 5

PROGRESS_INTERVAL = 50


def _with_progress(prs: Iterable[PullRequest], total: int) -> Iterator[PullRequest]:
    """Pass pull requests through unchanged, reporting progress to stderr."""
    processed = 0
    for pr in prs:
        processed += 1
        if processed % PROGRESS_INTERVAL == 0 or processed == total:
            print(f"Processed {processed}/{total} pull requests", file=sys.stderr)
        yield pr


def orchestrate_lead_time_report(argv: Optional[Sequence[str]] = None) -> int:
    """Run the full fetch, aggregate and report flow.

    Returns:
        Process exit code. No statistics are printed when a fatal error occurs.
    """
    try:
        args = parse_args(argv)
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

        config = load_config(
            organization=args.org,
            team=args.team,
            repo=args.repo,
            owner=args.owner,
            page_size=args.page_size,
        )
        client = GraphQLClient(token=config.token)

        members = fetch_team_members(client, config.organization, config.team)
        print(
            f"Fetched {len(members)} members of team '{config.organization}/{config.team}'.",
            file=sys.stderr,
        )

        prs: Iterable[PullRequest] = iter_pull_requests(
            client,
            config.repo_owner,
            config.repo_name,
            page_size=config.page_size,
        )
        if args.progress:
            total = fetch_total_count(client, config.repo_owner, config.repo_name)
            print(
                f"Fetching {total} merged PRs for repository "
                f"'{config.repo_owner}/{config.repo_name}'...",
                file=sys.stderr,
            )
            prs = _with_progress(prs, total)

        samples = collect_lead_time_samples(prs, members)
        stats = compute_statistics(samples)

        print(
            generate_report(
                repo=f"{config.repo_owner}/{config.repo_name}",
                team=f"{config.organization}/{config.team}",
                stats=stats,
                unit=args.unit,
            )
        )
        return EXIT_OK
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIGURATION
    except AuthenticationError as exc:
        print(f"Authentication error: {exc}", file=sys.stderr)
        return EXIT_AUTHENTICATION
    except ApiError as exc:
        print(f"GitHub API error: {exc}", file=sys.stderr)
        return EXIT_API
    except DataValidationError as exc:
        print(f"Data validation error: {exc}", file=sys.stderr)
        return EXIT_DATA_VALIDATION
    except LeadTimeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_UNEXPECTED
    except Exception:
        logger.exception("Unexpected error while computing lead times")
        return EXIT_UNEXPECTED


def main() -> None:
    """Console script entry point."""
    sys.exit(orchestrate_lead_time_report())


if __name__ == "__main__":
    main()
