"""Tests for GraphQL client behavior with mocked HTTP."""

import sys
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import Mock

import pytest
import requests

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from git_lead_time.errors import ApiError, DataValidationError
from git_lead_time.graphql_client import GraphQLClient, GraphQLResponse, parse_datetime


def _response(status_code: int, payload=None, text: str = "", json_error: bool = False):
    response = Mock()
    response.status_code = status_code
    response.text = text
    if json_error:
        response.json.side_effect = ValueError("not json")
    else:
        response.json.return_value = payload if payload is not None else {}
    return response


def test_client_sets_bearer_authorization_header():
    """Verify the session authenticates every request with the bearer token."""
    client = GraphQLClient(token="secret-token")

    assert client._session.headers["Authorization"] == "Bearer secret-token"


def test_execute_posts_query_and_variables_once():
    """Verify execute issues a single POST carrying the query and variables."""
    client = GraphQLClient(token="t", endpoint="https://example.test/graphql", timeout_seconds=5)
    client._session.post = Mock(return_value=_response(200, {"data": {"viewer": {"login": "a"}}}))

    result = client.execute("query { viewer { login } }", {"x": 1})

    assert result.data == {"viewer": {"login": "a"}}
    assert result.errors == []
    client._session.post.assert_called_once_with(
        "https://example.test/graphql",
        json={"query": "query { viewer { login } }", "variables": {"x": 1}},
        timeout=5,
    )


def test_execute_returns_errors_from_body():
    """Verify GraphQL-level errors are surfaced on the response object."""
    client = GraphQLClient(token="t")
    client._session.post = Mock(
        return_value=_response(200, {"data": None, "errors": [{"message": "Bad credentials"}]})
    )

    result = client.execute("query { x }")

    assert result.data is None
    assert result.errors == [{"message": "Bad credentials"}]


def test_execute_network_failure_raises_api_error_without_retry():
    """Verify transport failures are fatal and not retried."""
    client = GraphQLClient(token="t")
    client._session.post = Mock(side_effect=requests.ConnectionError("down"))

    with pytest.raises(ApiError):
        client.execute("query { x }")

    assert client._session.post.call_count == 1


def test_execute_http_error_status_raises_api_error():
    """Verify HTTP status codes >= 400 raise ApiError including the status."""
    client = GraphQLClient(token="t")
    client._session.post = Mock(return_value=_response(401, text="Bad credentials"))

    with pytest.raises(ApiError, match="401"):
        client.execute("query { x }")


def test_execute_invalid_json_raises_api_error():
    """Verify non-JSON bodies raise ApiError."""
    client = GraphQLClient(token="t")
    client._session.post = Mock(return_value=_response(200, json_error=True))

    with pytest.raises(ApiError):
        client.execute("query { x }")


def test_execute_non_object_payload_raises_api_error():
    """Verify JSON bodies that are not objects raise ApiError."""
    client = GraphQLClient(token="t")
    client._session.post = Mock(return_value=_response(200, [1, 2, 3]))

    with pytest.raises(ApiError):
        client.execute("query { x }")


def test_require_data_with_errors_raises_even_when_data_present():
    """Verify a non-empty error list is fatal regardless of partial data."""
    response = GraphQLResponse(data={"repository": {}}, errors=[{"message": "partial failure"}])

    with pytest.raises(ApiError, match="partial failure"):
        response.require_data("PullRequests")


def test_require_data_without_data_raises_api_error():
    """Verify absent data is reported as an API error."""
    with pytest.raises(ApiError, match="no data"):
        GraphQLResponse(data=None).require_data("TeamMembers")


def test_require_data_returns_data():
    """Verify usable responses return their data mapping."""
    assert GraphQLResponse(data={"a": 1}).require_data("Q") == {"a": 1}


def test_parse_datetime_handles_zulu_offset_and_missing_values():
    """Verify GitHub timestamps parse to UTC-aware datetimes."""
    assert parse_datetime("2026-01-01T10:00:00Z") == datetime(2026, 1, 1, 10, tzinfo=timezone.utc)
    assert parse_datetime("2026-01-01T12:00:00+02:00") == datetime(2026, 1, 1, 10, tzinfo=timezone.utc)
    assert parse_datetime("2026-01-01T10:00:00") == datetime(2026, 1, 1, 10, tzinfo=timezone.utc)
    assert parse_datetime(None) is None
    assert parse_datetime("") is None


def test_parse_datetime_invalid_value_raises_data_validation_error():
    """Verify malformed timestamps raise DataValidationError."""
    with pytest.raises(DataValidationError):
        parse_datetime("yesterday")
