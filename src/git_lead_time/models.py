"""Domain models for GitHub pull request lead-time processing.

These dataclasses intentionally model only the subset of GraphQL payload fields
that are required for lead-time computation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional, Union


class CheckStatus(Enum):
    """Lifecycle status of a CI check suite."""

    QUEUED = "QUEUED"
    REQUESTED = "REQUESTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    WAITING = "WAITING"
    PENDING = "PENDING"


class CheckConclusion(Enum):
    """Outcome of a completed check suite."""

    ACTION_REQUIRED = "ACTION_REQUIRED"
    CANCELLED = "CANCELLED"
    FAILURE = "FAILURE"
    NEUTRAL = "NEUTRAL"
    SKIPPED = "SKIPPED"
    STALE = "STALE"
    STARTUP_FAILURE = "STARTUP_FAILURE"
    SUCCESS = "SUCCESS"
    TIMED_OUT = "TIMED_OUT"


@dataclass(slots=True)
class Commit:
    """A commit belonging to a pull request."""

    authored_date: datetime
    message_headline: str


@dataclass(slots=True)
class CheckSuite:
    """Summary of one CI run against a commit."""

    status: CheckStatus
    conclusion: Optional[CheckConclusion]
    updated_at: datetime


@dataclass(slots=True)
class MergeCommit:
    """The commit that closed a pull request, with its CI check suites.

    ``check_suites`` is ``None`` when the API returned no connection at all.
    """

    authored_date: datetime
    message_headline: str
    check_suites: Optional[List[CheckSuite]] = None


@dataclass(frozen=True, slots=True)
class KnownAuthor:
    """A pull request author that resolved to a GitHub user."""

    login: str


@dataclass(frozen=True, slots=True)
class UnknownAuthor:
    """Any other actor (bot, mannequin, ...); never a team member."""

    @property
    def login(self) -> Optional[str]:
        return None


Author = Union[KnownAuthor, UnknownAuthor]


@dataclass(slots=True)
class PullRequest:
    """Represents the minimal merged pull request data required for lead times."""

    commits: List[Commit] = field(default_factory=list)
    merge_commit: Optional[MergeCommit] = None
    author: Optional[Author] = None


@dataclass(slots=True)
class PageInfo:
    """Continuation state of a GraphQL connection."""

    end_cursor: Optional[str]
    has_next_page: bool


@dataclass(slots=True)
class Page:
    """One batch of pull requests plus its continuation state."""

    pull_requests: List[PullRequest]
    page_info: PageInfo
    total_count: Optional[int] = None


@dataclass(frozen=True, slots=True)
class PullRequestQueryArguments:
    """Variables for a single pull request page query."""

    repo_owner: str
    repo_name: str
    page_size: int
    cursor: Optional[str] = None

    def to_variables(self) -> dict:
        return {
            "repoOwner": self.repo_owner,
            "repoName": self.repo_name,
            "pageSize": self.page_size,
            "cursor": self.cursor,
        }


@dataclass(slots=True)
class LeadTimeStats:
    """Summary statistics over lead-time samples, in seconds."""

    count: int
    mean: float
    median: int
    maximum: int
