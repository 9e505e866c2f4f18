"""Team roster lookup."""

from __future__ import annotations

import logging
from typing import FrozenSet

from .errors import NotFoundError
from .graphql_client import GraphQLClient
from .queries import TEAM_MEMBERS_QUERY

logger = logging.getLogger(__name__)


def fetch_team_members(client: GraphQLClient, org: str, team: str) -> FrozenSet[str]:
    """Resolve an organization team to the logins of its first 100 members.

    Raises:
        ApiError: If the request fails or the response carries errors or no data.
        NotFoundError: If the organization or team does not exist.
    """
    response = client.execute(TEAM_MEMBERS_QUERY, {"org": org, "team": team})
    data = response.require_data("TeamMembers")

    organization = data.get("organization")
    if organization is None:
        raise NotFoundError(f"Organization '{org}' was not found.")

    team_node = organization.get("team")
    if team_node is None:
        raise NotFoundError(f"Team '{team}' was not found in organization '{org}'.")

    nodes = (team_node.get("members") or {}).get("nodes") or []
    members = frozenset(node["login"] for node in nodes if node and node.get("login"))

    logger.info("Fetched team roster", extra={"org": org, "team": team, "members": len(members)})
    return members
