"""Payload builders and fakes shared by the fetcher tests."""
import asyncio
from typing import Any, Dict, List, Optional, Union

from src.domain.github_interface import IGitHubClient
from src.domain.models import Repository


def repo_payload(
    repo_id: int,
    name: str,
    stars: int,
    fork: bool = False,
    language: Optional[str] = "Python",
) -> Dict[str, Any]:
    """Build one element of the GitHub REST repositories array."""
    return {
        "id": repo_id,
        "name": name,
        "stargazers_count": stars,
        "language": language,
        "html_url": f"https://github.com/octocat/{name}",
        "fork": fork,
    }


def make_repo(repo_id: int, name: str, stars: int, fork: bool = False) -> Repository:
    return Repository(
        id=repo_id,
        name=name,
        star_count=stars,
        url=f"https://github.com/octocat/{name}",
        is_fork=fork,
        language="Python",
    )


class FakeGitHubClient(IGitHubClient):
    """In-memory client returning a canned result or raising a canned error.

    Set ``release`` to an unset event to hold the call open until the test
    sets it.
    """

    def __init__(self, result: Union[List[Repository], Exception, None] = None):
        self.result = result if result is not None else []
        self.calls: List[str] = []
        self.closed = False
        self.started = asyncio.Event()
        self.release: Optional[asyncio.Event] = None

    async def fetch_user_repositories(self, username: str) -> List[Repository]:
        self.calls.append(username)
        self.started.set()
        if self.release is not None:
            await self.release.wait()
        if isinstance(self.result, Exception):
            raise self.result
        return list(self.result)

    async def close(self) -> None:
        self.closed = True
