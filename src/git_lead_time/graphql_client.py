"""GitHub GraphQL API client for lead-time data retrieval."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import requests

from .errors import ApiError, DataValidationError

logger = logging.getLogger(__name__)

GITHUB_GRAPHQL_ENDPOINT = "https://api.github.com/graphql"


def parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse GitHub ISO8601 timestamps into timezone-aware UTC datetimes.

    Raises:
        DataValidationError: If ``value`` is not a valid ISO8601 string.
    """
    if not value:
        return None

    normalized = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        parsed = datetime.fromisoformat(normalized)
    except (TypeError, ValueError) as exc:
        raise DataValidationError(f"Invalid timestamp in GitHub payload: {value!r}") from exc

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


@dataclass(slots=True)
class GraphQLResponse:
    """Decoded GraphQL response body."""

    data: Optional[Dict[str, Any]] = None
    errors: List[Dict[str, Any]] = field(default_factory=list)

    def require_data(self, operation: str) -> Dict[str, Any]:
        """Return ``data`` or raise when the response cannot be used.

        A non-empty ``errors`` list is fatal even if partial ``data`` is present.

        Raises:
            ApiError: If the response carries errors or no data.
        """
        if self.errors:
            messages = "; ".join(
                str(error.get("message", error)) if isinstance(error, dict) else str(error)
                for error in self.errors
            )
            raise ApiError(f"GitHub GraphQL {operation} query returned errors: {messages}")

        if self.data is None:
            raise ApiError(f"GitHub GraphQL {operation} query returned no data.")

        return self.data


class GraphQLClient:
    """Small client that posts GraphQL documents to a single endpoint.

    Each call is a single attempt; failures are reported as ``ApiError``.
    """

    def __init__(
        self,
        token: str,
        endpoint: str = GITHUB_GRAPHQL_ENDPOINT,
        timeout_seconds: int = 30,
    ) -> None:
        """Initialize an authenticated GraphQL client.

        Args:
            token: GitHub token sent as a bearer credential.
            endpoint: GraphQL endpoint URL.
            timeout_seconds: Per-request timeout in seconds.
        """
        self._endpoint = endpoint
        self._timeout_seconds = timeout_seconds

        self._session = requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": "application/json",
                "User-Agent": "git-lead-time",
            }
        )

    def execute(self, query: str, variables: Optional[Dict[str, Any]] = None) -> GraphQLResponse:
        """Execute a GraphQL query and decode the response envelope.

        Raises:
            ApiError: If the request fails, returns HTTP >= 400,
                or does not return a valid JSON object.
        """
        payload: Dict[str, Any] = {"query": query, "variables": dict(variables or {})}

        logger.debug("Executing GraphQL query", extra={"variables": payload["variables"]})

        try:
            response = self._session.post(
                self._endpoint,
                json=payload,
                timeout=self._timeout_seconds,
            )
        except requests.RequestException as exc:
            raise ApiError(f"GitHub GraphQL request failed: POST {self._endpoint}") from exc

        if response.status_code >= 400:
            raise ApiError(
                "GitHub GraphQL request failed: "
                f"POST {self._endpoint} returned {response.status_code} - {response.text}"
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise ApiError(f"GitHub GraphQL API returned invalid JSON: POST {self._endpoint}") from exc

        if not isinstance(body, dict):
            raise ApiError(f"GitHub GraphQL API returned unexpected payload shape: POST {self._endpoint}")

        return GraphQLResponse(data=body.get("data"), errors=body.get("errors") or [])
