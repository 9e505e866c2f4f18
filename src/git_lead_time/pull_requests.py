"""Cursor-paginated retrieval of merged pull requests.

Pages are fetched one at a time and only on demand. ``PullRequestPages`` holds
the sole piece of mutable state, the arguments for the next query; once the
API reports no further pages it becomes exhausted and never issues another
request. A new instance is required to read the repository again.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional

from .config import DEFAULT_PAGE_SIZE
from .errors import DataValidationError, NotFoundError
from .graphql_client import GraphQLClient, parse_datetime
from .models import (
    Author,
    CheckConclusion,
    CheckStatus,
    CheckSuite,
    Commit,
    KnownAuthor,
    MergeCommit,
    Page,
    PageInfo,
    PullRequest,
    PullRequestQueryArguments,
    UnknownAuthor,
)
from .queries import PULL_REQUEST_COUNT_QUERY, PULL_REQUESTS_QUERY

logger = logging.getLogger(__name__)


def _require_datetime(value: Optional[str], field_name: str) -> datetime:
    parsed = parse_datetime(value)
    if parsed is None:
        raise DataValidationError(f"GitHub payload is missing required field '{field_name}'.")
    return parsed


def _nodes(connection: Optional[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Return the non-null nodes of a connection, or an empty list."""
    if not connection:
        return []
    return [node for node in connection.get("nodes") or [] if node is not None]


def _parse_check_suite(item: Dict[str, Any]) -> CheckSuite:
    try:
        status = CheckStatus(item.get("status"))
        conclusion = CheckConclusion(item["conclusion"]) if item.get("conclusion") else None
    except ValueError as exc:
        raise DataValidationError(f"Unexpected check suite state in GitHub payload: {item}") from exc

    return CheckSuite(
        status=status,
        conclusion=conclusion,
        updated_at=_require_datetime(item.get("updatedAt"), "updatedAt"),
    )


def _parse_merge_commit(item: Optional[Dict[str, Any]]) -> Optional[MergeCommit]:
    if item is None:
        return None

    check_suites_connection = item.get("checkSuites")
    check_suites: Optional[List[CheckSuite]] = None
    if check_suites_connection is not None:
        check_suites = [_parse_check_suite(node) for node in _nodes(check_suites_connection)]

    return MergeCommit(
        authored_date=_require_datetime(item.get("authoredDate"), "authoredDate"),
        message_headline=item.get("messageHeadline") or "",
        check_suites=check_suites,
    )


def _parse_author(item: Optional[Dict[str, Any]]) -> Optional[Author]:
    if item is None:
        return None

    login = item.get("login")
    if item.get("__typename", "User") == "User" and login:
        return KnownAuthor(login=str(login))
    return UnknownAuthor()


def parse_pull_request(item: Dict[str, Any]) -> PullRequest:
    """Convert one ``PullRequest`` GraphQL node into a domain model.

    Raises:
        DataValidationError: If a required timestamp or enum value is malformed.
    """
    commits: List[Commit] = []
    for node in _nodes(item.get("commits")):
        commit = node.get("commit")
        if commit is None:
            continue
        commits.append(
            Commit(
                authored_date=_require_datetime(commit.get("authoredDate"), "authoredDate"),
                message_headline=commit.get("messageHeadline") or "",
            )
        )

    return PullRequest(
        commits=commits,
        merge_commit=_parse_merge_commit(item.get("mergeCommit")),
        author=_parse_author(item.get("author")),
    )


def _pull_request_connection(data: Dict[str, Any], repo_owner: str, repo_name: str) -> Dict[str, Any]:
    """Walk ``repository -> pullRequests``, failing at the first absent link."""
    repository = data.get("repository")
    if repository is None:
        raise NotFoundError(f"Repository '{repo_owner}/{repo_name}' was not found.")

    connection = repository.get("pullRequests")
    if connection is None:
        raise DataValidationError(
            f"GitHub payload for '{repo_owner}/{repo_name}' is missing 'pullRequests'."
        )
    return connection


def parse_page(data: Dict[str, Any], repo_owner: str, repo_name: str) -> Page:
    """Convert a ``PullRequests`` query result into a ``Page``.

    Raises:
        NotFoundError: If the repository is absent.
        DataValidationError: If the connection or its page info is malformed.
    """
    connection = _pull_request_connection(data, repo_owner, repo_name)

    page_info = connection.get("pageInfo")
    if page_info is None or not isinstance(page_info.get("hasNextPage"), bool):
        raise DataValidationError(
            f"GitHub payload for '{repo_owner}/{repo_name}' is missing 'pageInfo'."
        )

    return Page(
        pull_requests=[parse_pull_request(node) for node in _nodes(connection)],
        page_info=PageInfo(
            end_cursor=page_info.get("endCursor"),
            has_next_page=page_info["hasNextPage"],
        ),
        total_count=connection.get("totalCount"),
    )


class PullRequestPages:
    """Pull-based pager over the merged pull requests of one repository.

    The pager is either active, holding the arguments for the next query, or
    exhausted (``_next_arguments is None``). Iterating it yields ``Page``
    objects until exhaustion.
    """

    def __init__(
        self,
        client: GraphQLClient,
        repo_owner: str,
        repo_name: str,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self._client = client
        self._next_arguments: Optional[PullRequestQueryArguments] = PullRequestQueryArguments(
            repo_owner=repo_owner,
            repo_name=repo_name,
            page_size=page_size,
        )
        self.pages_fetched = 0

    @property
    def exhausted(self) -> bool:
        return self._next_arguments is None

    def fetch_next(self) -> Optional[Page]:
        """Fetch the next page, or return ``None`` once pagination is exhausted.

        Raises:
            ApiError: If the request fails or returns errors or no data.
            NotFoundError: If the repository does not exist.
            DataValidationError: If the response is malformed, including a
                ``hasNextPage`` flag without an ``endCursor``.
        """
        arguments = self._next_arguments
        if arguments is None:
            return None

        response = self._client.execute(PULL_REQUESTS_QUERY, arguments.to_variables())
        data = response.require_data("PullRequests")
        page = parse_page(data, arguments.repo_owner, arguments.repo_name)
        self.pages_fetched += 1

        if page.page_info.has_next_page:
            if not page.page_info.end_cursor:
                raise DataValidationError(
                    f"GitHub reported more pull requests for '{arguments.repo_owner}/"
                    f"{arguments.repo_name}' without an end cursor."
                )
            self._next_arguments = PullRequestQueryArguments(
                repo_owner=arguments.repo_owner,
                repo_name=arguments.repo_name,
                page_size=arguments.page_size,
                cursor=page.page_info.end_cursor,
            )
        else:
            self._next_arguments = None

        logger.debug(
            "Fetched pull request page",
            extra={
                "page": self.pages_fetched,
                "pull_requests": len(page.pull_requests),
                "has_next_page": page.page_info.has_next_page,
            },
        )
        return page

    def __iter__(self) -> Iterator[Page]:
        while True:
            page = self.fetch_next()
            if page is None:
                return
            yield page


def iter_pull_requests(
    client: GraphQLClient,
    repo_owner: str,
    repo_name: str,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> Iterator[PullRequest]:
    """Lazily stream merged pull requests, fetching each page on demand."""
    for page in PullRequestPages(client, repo_owner, repo_name, page_size=page_size):
        yield from page.pull_requests


def fetch_total_count(client: GraphQLClient, repo_owner: str, repo_name: str) -> int:
    """Return the number of merged pull requests in a repository.

    Used only for progress reporting; it does not affect later pagination.
    """
    response = client.execute(
        PULL_REQUEST_COUNT_QUERY,
        {"repoOwner": repo_owner, "repoName": repo_name},
    )
    data = response.require_data("PullRequestCount")
    connection = _pull_request_connection(data, repo_owner, repo_name)

    total_count = connection.get("totalCount")
    if not isinstance(total_count, int):
        raise DataValidationError(
            f"GitHub payload for '{repo_owner}/{repo_name}' is missing 'totalCount'."
        )
    return total_count
