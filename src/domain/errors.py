"""Errors raised while fetching repositories from GitHub."""


class FetchError(Exception):
    """Base class for repository fetch failures."""
    pass


class TransportError(FetchError):
    """Raised when the request never produced a response body.

    Covers DNS failures, refused connections and timeouts.
    """
    pass


class DecodeError(FetchError):
    """Raised when the response body does not describe a list of repositories."""
    pass


class FetchInProgressError(FetchError):
    """Raised when a fetch is triggered while another one is still running."""

    def __init__(self, username: str):
        super().__init__(f"A fetch for '{username}' is already in progress")
        self.username = username
