"""Main entry point for the repository fetcher.

Fetches one user's repositories and prints them, most-starred first.
"""
import asyncio
import sys
import logging
from dotenv import load_dotenv
from src.application.fetcher_service import RepositoryFetcher
from src.domain.models import Failed
from src.infrastructure.config import FetcherConfig
from src.infrastructure.github_client import GitHubRestClient
from src.presentation.list_view import render_repository_list

# Load environment variables from .env or env file
load_dotenv('.env') or load_dotenv('env')


logger = logging.getLogger(__name__)


async def main(username: str, config: FetcherConfig) -> int:
    """Execute one fetch and print the result.

    Returns:
        Process exit status
    """
    github_client = GitHubRestClient(
        base_url=config.api_base_url,
        user_agent=config.user_agent
    )
    fetcher = RepositoryFetcher(github_client)

    try:
        state = await fetcher.fetch(username)
    finally:
        await fetcher.close()

    print(render_repository_list(fetcher.repositories))

    if isinstance(state, Failed):
        logger.error(f"Fetch failed: {state.reason}")
        return 1
    return 0


if __name__ == "__main__":
    config = FetcherConfig.from_env()
    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if len(sys.argv) != 2:
        logger.error("Usage: python fetch_repos.py <github-username>")
        sys.exit(1)

    sys.exit(asyncio.run(main(sys.argv[1], config)))
