"""HTTP transport with backoff on rate-limit responses.

Only HTTP 429 is retried here. Every other status, error statuses included,
is handed straight back to the caller.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from birdlog import __version__
from birdlog.lookup.exceptions import MaxRetriesExceededError

logger = logging.getLogger(__name__)

DEFAULT_MAX_RETRIES = 3
DEFAULT_BACKOFF_BASE = 1.0  # seconds, doubled per attempt
DEFAULT_BACKOFF_CAP = 8.0  # seconds
DEFAULT_TIMEOUT = 10.0  # seconds
DEFAULT_USER_AGENT = f"birdlog/{__version__} (species lookup)"

TOO_MANY_REQUESTS = 429


def create_http_client(
    user_agent: str = DEFAULT_USER_AGENT,
    timeout: float = DEFAULT_TIMEOUT,
) -> httpx.AsyncClient:
    """Build the shared async client used for every knowledge-source request.

    Args:
        user_agent: User-Agent header sent to the Wikimedia APIs
        timeout: Per-request timeout in seconds
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        limits=httpx.Limits(max_keepalive_connections=5, max_connections=10),
        headers={"User-Agent": user_agent},
        follow_redirects=True,
    )


def backoff_delay(
    attempt: int, base: float = DEFAULT_BACKOFF_BASE, cap: float = DEFAULT_BACKOFF_CAP
) -> float:
    """Seconds to wait after the ``attempt``-th (zero-based) rate-limited response."""
    return min(base * 2**attempt, cap)


class RetryingFetcher:
    """Issue GET requests, backing off exponentially while rate limited."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        max_retries: int = DEFAULT_MAX_RETRIES,
        backoff_base: float = DEFAULT_BACKOFF_BASE,
        backoff_cap: float = DEFAULT_BACKOFF_CAP,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """Initialize the fetcher.

        Args:
            client: Shared async HTTP client
            max_retries: Total number of requests allowed per fetch
            backoff_base: First backoff delay in seconds
            backoff_cap: Upper bound for a single backoff delay
            sleep: Coroutine used for backoff waits
        """
        if max_retries < 1:
            raise ValueError(f"max_retries must be at least 1: {max_retries}")
        self.client = client
        self.max_retries = max_retries
        self.backoff_base = backoff_base
        self.backoff_cap = backoff_cap
        self._sleep = sleep

    async def fetch_with_retry(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        max_retries: int | None = None,
    ) -> httpx.Response:
        """GET ``url``, retrying only while the server answers 429.

        Args:
            url: Endpoint URL
            params: Query-string parameters
            max_retries: Override for the configured number of attempts

        Returns:
            The first response whose status is not 429

        Raises:
            MaxRetriesExceededError: If every attempt was rate limited
            httpx.RequestError: If the request itself fails
        """
        attempts = max_retries if max_retries is not None else self.max_retries

        for attempt in range(attempts):
            response = await self.client.get(url, params=params)

            if response.status_code != TOO_MANY_REQUESTS:
                return response

            delay = backoff_delay(attempt, self.backoff_base, self.backoff_cap)
            logger.warning(
                "Rate limited by %s (attempt %d/%d), retrying in %.1fs",
                url,
                attempt + 1,
                attempts,
                delay,
            )
            await self._sleep(delay)

        raise MaxRetriesExceededError(url, attempts)
