"""Gated JSON transport shared by the MediaWiki-family adapters.

Wikipedia, Wikidata and Commons all speak the MediaWiki action API: GET
requests with query-string parameters, ``format=json`` and the CORS-open
``origin=*``.
"""

import logging
from typing import Any

import httpx

from birdlog.lookup.exceptions import LookupSourceError
from birdlog.lookup.http import RetryingFetcher
from birdlog.lookup.rate_gate import RateGate

logger = logging.getLogger(__name__)

BASE_PARAMS = {"format": "json", "origin": "*"}

# Failures an adapter converts to "not found". ValueError covers undecodable JSON,
# TypeError and AttributeError cover payloads with an unexpected shape.
SOURCE_ERRORS = (httpx.HTTPError, LookupSourceError, ValueError, TypeError, AttributeError)


class MediaWikiApi:
    """One MediaWiki action API endpoint behind a rate gate and retry wrapper."""

    source_name = "mediawiki"

    def __init__(self, endpoint: str, fetcher: RetryingFetcher, gate: RateGate) -> None:
        """Initialize the endpoint client.

        Args:
            endpoint: Full URL of the ``api.php`` endpoint
            fetcher: Retrying fetcher wrapping the shared HTTP client
            gate: Rate gate for this endpoint's API family
        """
        self.endpoint = endpoint
        self.fetcher = fetcher
        self.gate = gate

    async def get_json(self, params: dict[str, Any]) -> dict[str, Any]:
        """Run one query against the endpoint and decode the JSON body.

        Raises:
            httpx.HTTPStatusError: On any non-2xx status other than 429
            httpx.RequestError: On network failure
            ValueError: If the body is not JSON
            MaxRetriesExceededError: If rate limiting never lifted
        """
        await self.gate.throttle()
        logger.debug("Querying %s: %s", self.source_name, params)
        response = await self.fetcher.fetch_with_retry(self.endpoint, {**params, **BASE_PARAMS})
        response.raise_for_status()
        data: dict[str, Any] = response.json()
        return data

    async def query_page(self, title: str, **params: Any) -> dict[str, Any] | None:
        """Run ``action=query`` for one title and return its page object.

        Returns:
            The single page dict, or None if the response carries no pages
        """
        data = await self.get_json({"action": "query", "titles": title, **params})
        pages = (data.get("query") or {}).get("pages")
        if not pages:
            return None
        # Results are keyed by page id; a single title yields a single page
        page: dict[str, Any] = next(iter(pages.values()))
        return page
