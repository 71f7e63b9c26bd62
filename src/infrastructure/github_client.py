"""GitHub REST API client for listing a user's repositories."""
import asyncio
import logging
from typing import List, Optional
import aiohttp
from src.domain.errors import TransportError
from src.domain.github_interface import IGitHubClient
from src.domain.models import Repository
from src.infrastructure.config import DEFAULT_API_URL, DEFAULT_USER_AGENT
from src.infrastructure.decoder import decode_repositories


logger = logging.getLogger(__name__)


class GitHubRestClient(IGitHubClient):
    """GitHub REST API client for the user repositories endpoint.

    Implements the IGitHubClient port. Only the API's default first page is
    requested: no credentials, no pagination, no retries.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[aiohttp.ClientSession] = None
    ):
        """Initialize GitHub client.

        Args:
            base_url: API root, without trailing slash
            user_agent: Value sent in the User-Agent header
            session: Externally owned session; left open by close()
        """
        self._base_url = base_url.rstrip("/")
        self._user_agent = user_agent
        self._session = session
        self._owns_session = session is None

    def repositories_url(self, username: str) -> str:
        """URL of the repositories listing for a user."""
        return f"{self._base_url}/users/{username}/repos"

    async def _init_session(self) -> aiohttp.ClientSession:
        """Initialize the HTTP session (lazy initialization)."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def fetch_user_repositories(self, username: str) -> List[Repository]:
        """Fetch and decode the repositories owned by a user.

        Any status code is accepted; an error body such as GitHub's
        ``{"message": "Not Found"}`` surfaces as a DecodeError.
        """
        session = await self._init_session()
        url = self.repositories_url(username)
        headers = {"User-Agent": self._user_agent}

        try:
            async with session.get(url, headers=headers) as response:
                logger.debug(f"GET {url} returned HTTP {response.status}")
                body = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"Request to {url} failed: {e!r}") from e

        repositories = decode_repositories(body)
        logger.info(f"Received {len(repositories)} repositories for '{username}'")
        return repositories

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._session and self._owns_session:
            await self._session.close()
        self._session = None
