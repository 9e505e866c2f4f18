"""Lead-time extraction logic for merged pull requests.

This module turns the pull request stream into per-commit lead-time samples in
whole seconds. A pull request contributes samples only when:
- its author is a member of the team roster, and
- every check suite on its merge commit has completed.

The deploy time of such a pull request is the latest ``updated_at`` among its
merge commit's check suites; each commit's lead time is measured against it.
"""

from __future__ import annotations

import logging
from collections import Counter
from datetime import datetime
from typing import AbstractSet, Iterable, Iterator, List, Optional

from .models import CheckStatus, PullRequest

logger = logging.getLogger(__name__)


def is_team_member(pr: PullRequest, members: AbstractSet[str]) -> bool:
    """Return whether the pull request author belongs to the roster.

    Pull requests without an author, or authored by a non-user actor, never match.
    """
    if pr.author is None:
        return False
    login = pr.author.login
    return login is not None and login in members


def compute_deploy_time(pr: PullRequest) -> Optional[datetime]:
    """Derive when a pull request finished deploying from its CI signal.

    Business logic:
    - The merge commit and its check-suite list must be present and non-empty.
    - Every check suite must have status ``COMPLETED``; the conclusion is not
      inspected, so failed suites still count as finished.
    - The deploy time is the latest ``updated_at`` across all suites.

    Returns ``None`` when no deploy time can be derived.
    """
    if pr.merge_commit is None or not pr.merge_commit.check_suites:
        return None

    check_suites = pr.merge_commit.check_suites
    if any(suite.status is not CheckStatus.COMPLETED for suite in check_suites):
        return None

    return max(suite.updated_at for suite in check_suites)


def compute_commit_lead_times(pr: PullRequest, deploy_time: datetime) -> List[int]:
    """Compute one lead-time sample per commit, in whole seconds.

    Fractional seconds are truncated. Commits authored after ``deploy_time``
    would yield a negative duration; they are skipped.
    """
    samples: List[int] = []

    for commit in pr.commits:
        duration_seconds = int((deploy_time - commit.authored_date).total_seconds())
        if duration_seconds < 0:
            logger.debug(
                "Skipping lead time sample due to negative duration",
                extra={
                    "commit": commit.message_headline,
                    "duration_seconds": duration_seconds,
                },
            )
            continue
        samples.append(duration_seconds)

    return samples


def iter_lead_time_samples(
    prs: Iterable[PullRequest],
    members: AbstractSet[str],
    skipped: Optional[Counter] = None,
) -> Iterator[int]:
    """Lazily yield lead-time samples for team pull requests in stream order.

    When ``skipped`` is given, it is incremented per skip reason
    (``not_team_member``, ``not_deployed``).
    """
    for pr in prs:
        if not is_team_member(pr, members):
            if skipped is not None:
                skipped["not_team_member"] += 1
            continue

        deploy_time = compute_deploy_time(pr)
        if deploy_time is None:
            if skipped is not None:
                skipped["not_deployed"] += 1
            continue

        yield from compute_commit_lead_times(pr, deploy_time)


def collect_lead_time_samples(prs: Iterable[PullRequest], members: AbstractSet[str]) -> List[int]:
    """Collect all lead-time samples, in seconds, for team pull requests.

    Samples are ordered by pull request stream order, then commit order.
    """
    skipped: Counter = Counter()
    samples = list(iter_lead_time_samples(prs, members, skipped=skipped))

    logger.info(
        "Collected lead time samples",
        extra={
            "samples": len(samples),
            "prs_not_team_member": skipped["not_team_member"],
            "prs_not_deployed": skipped["not_deployed"],
        },
    )

    return samples
