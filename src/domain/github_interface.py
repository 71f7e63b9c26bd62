"""GitHub API interface (port) for fetching a user's repositories.

This is the anti-corruption layer that shields the domain from GitHub API specifics.
"""
from abc import ABC, abstractmethod
from typing import List
from src.domain.models import Repository


class IGitHubClient(ABC):
    """Abstract interface for GitHub API operations."""

    @abstractmethod
    async def fetch_user_repositories(self, username: str) -> List[Repository]:
        """Fetch the first page of repositories owned by a user.

        Args:
            username: GitHub login, used verbatim in the request path

        Returns:
            Repository entities in the order GitHub returned them

        Raises:
            TransportError: When the request fails before a body is read
            DecodeError: When the body is not a JSON array of repositories
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections."""
        pass
