"""Fetcher service driving the fetch-decode-filter-sort pipeline."""
import logging
import time
from typing import Iterable, List, Tuple
from src.domain.errors import FetchError, FetchInProgressError
from src.domain.github_interface import IGitHubClient
from src.domain.models import (
    Failed,
    FetchMetrics,
    FetchState,
    InProgress,
    NotStarted,
    Repository,
    Succeeded,
)


logger = logging.getLogger(__name__)


def rank_repositories(repositories: Iterable[Repository]) -> List[Repository]:
    """Drop forks and order the rest by star count, most-starred first.

    The sort is stable, so repositories with equal star counts keep the
    order GitHub returned them in.
    """
    owned = [repo for repo in repositories if not repo.is_fork]
    return sorted(owned, key=lambda repo: repo.star_count, reverse=True)


class RepositoryFetcher:
    """Application service owning the result list for one username input.

    Presentation code may call fetch() and read is_loading, repositories and
    state; it never mutates them.
    """

    def __init__(self, github_client: IGitHubClient):
        """Initialize fetcher.

        Args:
            github_client: GitHub API client implementation
        """
        self._github_client = github_client
        self._repositories: Tuple[Repository, ...] = ()
        self._state: FetchState = NotStarted()
        self._is_loading = False

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def repositories(self) -> Tuple[Repository, ...]:
        return self._repositories

    @property
    def state(self) -> FetchState:
        return self._state

    async def fetch(self, username: str) -> FetchState:
        """Fetch, filter and sort the repositories of a user.

        A blank username is a no-op. Transport and decode failures are logged
        and recorded in ``state``; the previous result list is kept.

        Args:
            username: GitHub login as typed; sent untrimmed

        Returns:
            The state after the fetch completes

        Raises:
            FetchInProgressError: If another fetch has not finished yet
        """
        if not username.strip():
            logger.debug("Ignoring fetch for blank username")
            return self._state

        if self._is_loading:
            raise FetchInProgressError(username)

        previous_state = self._state
        self._is_loading = True
        self._state = InProgress(username=username)
        start_time = time.monotonic()
        logger.info(f"Fetching repositories for '{username}'")

        try:
            received = await self._github_client.fetch_user_repositories(username)
        except FetchError as e:
            logger.error(f"Error fetching repositories for '{username}': {e}")
            self._state = Failed(username=username, error=e)
            return self._state
        except BaseException:
            # cancellation and programming errors leave no outcome to record
            self._state = previous_state
            raise
        finally:
            self._is_loading = False

        ranked = tuple(rank_repositories(received))
        metrics = FetchMetrics(
            repositories_received=len(received),
            forks_dropped=len(received) - len(ranked),
            duration_seconds=time.monotonic() - start_time
        )
        self._repositories = ranked
        self._state = Succeeded(repositories=ranked, metrics=metrics)

        logger.info(
            f"Fetch completed: {metrics.repositories_kept} repositories kept, "
            f"{metrics.forks_dropped} forks dropped in {metrics.duration_seconds:.2f} seconds"
        )
        return self._state

    async def close(self) -> None:
        """Close connections."""
        await self._github_client.close()
