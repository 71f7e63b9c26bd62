"""Runtime configuration read from environment variables."""
import os
from dataclasses import dataclass
from typing import Mapping, Optional


DEFAULT_API_URL = "https://api.github.com"
DEFAULT_USER_AGENT = "swiftui-app"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class FetcherConfig:
    """Settings for the GitHub REST client and the console entry point."""
    api_base_url: str = DEFAULT_API_URL
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "FetcherConfig":
        """Build configuration from environment variables.

        Expects ``load_dotenv`` to have run already if a ``.env`` file is used.

        Args:
            environ: Mapping to read from, defaults to ``os.environ``
        """
        if environ is None:
            environ = os.environ
        return cls(
            api_base_url=environ.get("GITHUB_API_URL", DEFAULT_API_URL).rstrip("/"),
            user_agent=environ.get("GITHUB_USER_AGENT", DEFAULT_USER_AGENT),
            log_level=environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
