"""Wikimedia Commons adapter: resolve image file names to thumbnail URLs."""

import logging

from birdlog.lookup.api import SOURCE_ERRORS, MediaWikiApi
from birdlog.lookup.http import RetryingFetcher
from birdlog.lookup.rate_gate import RateGate

logger = logging.getLogger(__name__)

COMMONS_API = "https://commons.wikimedia.org/w/api.php"


class CommonsAdapter(MediaWikiApi):
    """Image metadata lookups against Wikimedia Commons."""

    source_name = "commons"

    def __init__(self, fetcher: RetryingFetcher, gate: RateGate, endpoint: str = COMMONS_API):
        super().__init__(endpoint, fetcher, gate)

    async def thumbnail_url(self, file_name: str, width: int) -> str | None:
        """Return the URL of ``file_name`` scaled to ``width`` pixels.

        Args:
            file_name: File name as stored in a Wikidata image claim, without
                the ``File:`` prefix
            width: Thumbnail width in pixels

        Returns:
            Thumbnail URL, or None if the file is unknown or the request failed
        """
        try:
            page = await self.query_page(
                f"File:{file_name}", prop="imageinfo", iiprop="url", iiurlwidth=str(width)
            )
            if not page:
                return None
            image_info = page.get("imageinfo") or []
            return (image_info[0].get("thumburl") if image_info else None) or None
        except SOURCE_ERRORS as e:
            logger.warning("Commons thumbnail lookup failed for '%s': %s", file_name, e)
            return None
