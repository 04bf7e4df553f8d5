"""Exceptions raised inside the lookup transport.

These never leave the lookup package: adapters convert them to "not found".
"""


class LookupSourceError(Exception):
    """A knowledge source could not be queried."""


class MaxRetriesExceededError(LookupSourceError):
    """Every attempt at a request was answered with HTTP 429."""

    def __init__(self, url: str, attempts: int) -> None:
        self.url = url
        self.attempts = attempts
        super().__init__(f"Max retries exceeded ({attempts} attempts) for {url}")
