"""Configuration parsing and validation for the git lead-time calculator."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import AuthenticationError, ConfigurationError

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class Config:
    """Validated runtime settings used by the lead-time calculator."""

    organization: str
    team: str
    repo_owner: str
    repo_name: str
    page_size: int
    token: str


def split_repository(repo: str, default_owner: str) -> Tuple[str, str]:
    """Split ``owner/name`` into its parts, falling back to ``default_owner``.

    Raises:
        ConfigurationError: If the repository spec is empty or has too many parts.
    """
    parts = [part.strip() for part in repo.strip().split("/")]
    if len(parts) == 1 and parts[0]:
        return default_owner, parts[0]
    if len(parts) == 2 and all(parts):
        return parts[0], parts[1]

    raise ConfigurationError(
        f"Invalid repository '{repo}': expected 'name' or 'owner/name'."
    )


def load_config(
    organization: str,
    team: str,
    repo: str,
    owner: Optional[str] = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> Config:
    """Build and validate application configuration.

    Args:
        organization: GitHub organization login that owns the team.
        team: Team slug within the organization.
        repo: Repository as ``name`` or ``owner/name``.
        owner: Repository owner for a bare ``repo`` name; defaults to
            ``organization``.
        page_size: Pull requests fetched per GraphQL page.

    Returns:
        A validated ``Config`` instance.

    Raises:
        ConfigurationError: If ``repo`` or ``page_size`` is invalid.
        AuthenticationError: If ``GITHUB_TOKEN`` is not configured.
    """
    if not 0 < page_size <= MAX_PAGE_SIZE:
        raise ConfigurationError(
            f"Invalid value for 'page_size': expected an integer between 1 and {MAX_PAGE_SIZE}."
        )

    repo_owner, repo_name = split_repository(repo, owner or organization)

    token: str = os.getenv("GITHUB_TOKEN", "").strip()
    if not token:
        raise AuthenticationError(
            "Missing required GitHub token. "
            "Set the 'GITHUB_TOKEN' environment variable before running the lead-time calculator."
        )

    return Config(
        organization=organization,
        team=team,
        repo_owner=repo_owner,
        repo_name=repo_name,
        page_size=page_size,
        token=token,
    )
