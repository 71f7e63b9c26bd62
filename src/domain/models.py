"""Domain models representing core business entities."""
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from src.domain.errors import FetchError


@dataclass(frozen=True)
class Repository:
    """Immutable domain entity representing a GitHub repository.

    Instances are only built by decoding the API response and are replaced
    wholesale by the next successful fetch.
    """
    id: int
    name: str
    star_count: int
    url: str
    is_fork: bool
    language: Optional[str] = None

    @property
    def has_language(self) -> bool:
        """True when GitHub reports a primary language."""
        return self.language is not None


@dataclass(frozen=True)
class FetchMetrics:
    """Metrics for a single fetch operation."""
    repositories_received: int
    forks_dropped: int
    duration_seconds: float

    @property
    def repositories_kept(self) -> int:
        return self.repositories_received - self.forks_dropped


@dataclass(frozen=True)
class NotStarted:
    """No fetch has been triggered yet."""


@dataclass(frozen=True)
class InProgress:
    username: str


@dataclass(frozen=True)
class Succeeded:
    repositories: Tuple[Repository, ...]
    metrics: FetchMetrics


@dataclass(frozen=True)
class Failed:
    username: str
    error: FetchError

    @property
    def reason(self) -> str:
        return str(self.error)


FetchState = Union[NotStarted, InProgress, Succeeded, Failed]
