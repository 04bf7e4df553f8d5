"""Photo and article lookup for a species.

A species is located on Wikidata by name; its image claim (P18) is resolved
to Commons thumbnails and its sitelinks give the Wikipedia article, Swedish
edition preferred.
"""

import asyncio
import logging
from collections.abc import Iterable
from typing import Any

from birdlog.lookup.cache import MediaCache
from birdlog.lookup.commons import CommonsAdapter
from birdlog.lookup.models import MediaInfo
from birdlog.lookup.wikidata import IMAGE, TAXON_NAME, WikidataAdapter, claim_value

logger = logging.getLogger(__name__)

DEFAULT_THUMBNAIL_WIDTH = 100  # pixels
DEFAULT_FULL_IMAGE_WIDTH = 800  # pixels

# Sitelink keys in order of preference
WIKI_SITES = (("svwiki", "sv"), ("enwiki", "en"))


def wiki_url(entity: dict[str, Any]) -> str | None:
    """Build the article URL from an entity's sitelinks, preferring Swedish."""
    sitelinks = entity.get("sitelinks") or {}
    for site, lang in WIKI_SITES:
        title = (sitelinks.get(site) or {}).get("title")
        if title:
            return f"https://{lang}.wikipedia.org/wiki/{title.replace(' ', '_')}"
    return None


class MediaResolver:
    """Resolve and memoize MediaInfo for species names."""

    def __init__(
        self,
        wikidata: WikidataAdapter,
        commons: CommonsAdapter,
        cache: MediaCache,
        thumbnail_width: int = DEFAULT_THUMBNAIL_WIDTH,
        full_image_width: int = DEFAULT_FULL_IMAGE_WIDTH,
    ) -> None:
        """Initialize the resolver.

        Args:
            wikidata: Adapter used to find the species item
            commons: Adapter used to resolve image thumbnails
            cache: Memoization of successful lookups
            thumbnail_width: Width of ``MediaInfo.image_url`` in pixels
            full_image_width: Width of ``MediaInfo.full_image_url`` in pixels
        """
        self.wikidata = wikidata
        self.commons = commons
        self.cache = cache
        self.thumbnail_width = thumbnail_width
        self.full_image_width = full_image_width

    async def fetch_media_info(self, name: str) -> MediaInfo:
        """Look up media for one name, bypassing the cache.

        Candidates whose taxon name differs from ``name`` are skipped; a
        candidate without a taxon name is given the benefit of the doubt. The
        first candidate that yields an image or an article link wins.
        """
        wanted = name.strip().lower()
        for entity_id in await self.wikidata.search_entities(name, language="en"):
            entity = await self.wikidata.fetch_media_entity(entity_id)
            if entity is None:
                continue

            taxon_name = claim_value(entity, TAXON_NAME)
            if taxon_name and taxon_name.lower() != wanted:
                continue

            info = await self._media_from_entity(entity)
            if info.found:
                return info

        return MediaInfo()

    async def _media_from_entity(self, entity: dict[str, Any]) -> MediaInfo:
        info = MediaInfo(wiki_url=wiki_url(entity))
        file_name = claim_value(entity, IMAGE)
        if file_name:
            info.image_url = await self.commons.thumbnail_url(file_name, self.thumbnail_width)
            info.full_image_url = await self.commons.thumbnail_url(
                file_name, self.full_image_width
            )
        return info

    async def resolve(self, latin_name: str | None, swedish_name: str | None = None) -> MediaInfo:
        """Return media for a species, trying the Latin name before the Swedish one.

        Args:
            latin_name: Latin name of the species
            swedish_name: Swedish name, used when the Latin name finds nothing

        Returns:
            MediaInfo; empty when nothing was found or a lookup failed
        """
        latin = (latin_name or "").strip() or None
        swedish = (swedish_name or "").strip() or None
        key = latin or swedish
        if not key:
            return MediaInfo()

        cached = self.cache.get(key)
        if cached is not None:
            return cached

        try:
            info = MediaInfo()
            if latin:
                info = await self.fetch_media_info(latin)
            if not info.found and swedish:
                info = await self.fetch_media_info(swedish)
        except Exception:
            logger.exception("Media lookup failed for '%s'", key)
            return MediaInfo()

        self.cache.set(key, info)
        return info

    async def resolve_many(
        self, species: Iterable[tuple[str | None, str | None]]
    ) -> list[MediaInfo]:
        """Resolve media for several ``(latin_name, swedish_name)`` pairs concurrently.

        Requests still pass through the rate gates, so this bounds latency
        rather than request rate.
        """
        return list(
            await asyncio.gather(*(self.resolve(latin, swedish) for latin, swedish in species))
        )
