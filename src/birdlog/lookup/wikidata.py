"""Wikidata adapter: structured taxon names and Swedish labels.

Wikidata is the most reliable source for the Latin name, since the taxon
name property (P225) is structured data rather than prose.
"""

import logging
from typing import Any

from birdlog.lookup.api import SOURCE_ERRORS, MediaWikiApi
from birdlog.lookup.http import RetryingFetcher
from birdlog.lookup.models import ResolvedName
from birdlog.lookup.rate_gate import RateGate
from birdlog.lookup.validation import is_valid_latin_name

logger = logging.getLogger(__name__)

WIKIDATA_API = "https://www.wikidata.org/w/api.php"

TAXON_NAME = "P225"
IMAGE = "P18"


def claim_value(entity: dict[str, Any], prop: str) -> str | None:
    """Return the first string value of a claim, or None if the entity lacks it."""
    claims = (entity.get("claims") or {}).get(prop) or []
    if not claims:
        return None
    datavalue = (claims[0].get("mainsnak") or {}).get("datavalue") or {}
    value = datavalue.get("value")
    return value if isinstance(value, str) and value else None


def label(entity: dict[str, Any], language: str) -> str | None:
    """Return the entity's label in ``language``, if any."""
    value = ((entity.get("labels") or {}).get(language) or {}).get("value")
    return value or None


class WikidataAdapter(MediaWikiApi):
    """Entity search and claim lookup against the Wikidata API."""

    source_name = "wikidata"

    def __init__(
        self,
        fetcher: RetryingFetcher,
        gate: RateGate,
        search_limit: int = 5,
        latin_search_limit: int = 10,
        endpoint: str = WIKIDATA_API,
    ) -> None:
        """Initialize the adapter.

        Args:
            fetcher: Retrying fetcher wrapping the shared HTTP client
            gate: Rate gate for Wikidata requests
            search_limit: Candidates requested for free-text searches
            latin_search_limit: Candidates requested when searching by Latin name
            endpoint: Wikidata API URL
        """
        super().__init__(endpoint, fetcher, gate)
        self.search_limit = search_limit
        self.latin_search_limit = latin_search_limit

    async def search_entities(
        self, term: str, language: str = "sv", limit: int | None = None
    ) -> list[str]:
        """Search items by label and alias.

        Args:
            term: Free-text search term
            language: Language of the labels to match
            limit: Maximum candidates, defaults to ``search_limit``

        Returns:
            Entity IDs in ranked order; empty when nothing matched or on failure
        """
        params = {
            "action": "wbsearchentities",
            "search": term,
            "language": language,
            "uselang": language,
            "type": "item",
            "limit": str(limit or self.search_limit),
        }
        try:
            data = await self.get_json(params)
            hits = data.get("search") or []
            return [hit["id"] for hit in hits if hit.get("id")]
        except SOURCE_ERRORS as e:
            logger.warning("Wikidata search failed for '%s': %s", term, e)
            return []

    async def _get_entity(
        self, entity_id: str, props: str, languages: str | None = None
    ) -> dict[str, Any] | None:
        params = {"action": "wbgetentities", "ids": entity_id, "props": props}
        if languages:
            params["languages"] = languages
        data = await self.get_json(params)
        entity = (data.get("entities") or {}).get(entity_id)
        if not entity or "missing" in entity:
            return None
        return entity

    async def fetch_entity(self, entity_id: str) -> ResolvedName | None:
        """Fetch the Latin name and Swedish label of an entity.

        The taxon name is only used when it is a valid binomial, so genus or
        subspecies entities contribute at most their Swedish label.

        Returns:
            ResolvedName with at least one field, or None
        """
        try:
            entity = await self._get_entity(entity_id, "claims|labels", "sv")
            if entity is None:
                return None

            result = ResolvedName()
            taxon_name = claim_value(entity, TAXON_NAME)
            if taxon_name and is_valid_latin_name(taxon_name):
                result.latin_name = taxon_name.lower()
            swedish_label = label(entity, "sv")
            if swedish_label:
                result.swedish_name = swedish_label.lower()

            return None if result.is_empty else result
        except SOURCE_ERRORS as e:
            logger.warning("Wikidata entity fetch failed for %s: %s", entity_id, e)
            return None

    async def fetch_entity_with_latin_check(
        self, entity_id: str, expected_latin: str
    ) -> ResolvedName | None:
        """Fetch an entity's Swedish label, provided its taxon name is ``expected_latin``.

        Returns:
            ResolvedName carrying the Swedish label, or None on mismatch,
            missing taxon name or missing Swedish label
        """
        try:
            entity = await self._get_entity(entity_id, "claims|labels", "sv|en")
            if entity is None:
                return None

            taxon_name = claim_value(entity, TAXON_NAME)
            if not taxon_name:
                return None
            if taxon_name.strip().lower() != expected_latin.strip().lower():
                logger.debug(
                    "Skipping %s: taxon name '%s' is not '%s'",
                    entity_id,
                    taxon_name,
                    expected_latin,
                )
                return None

            swedish_label = label(entity, "sv")
            if not swedish_label:
                return None

            latin = taxon_name.lower() if is_valid_latin_name(taxon_name) else None
            return ResolvedName(swedish_name=swedish_label.lower(), latin_name=latin)
        except SOURCE_ERRORS as e:
            logger.warning("Wikidata entity check failed for %s: %s", entity_id, e)
            return None

    async def fetch_media_entity(self, entity_id: str) -> dict[str, Any] | None:
        """Fetch an entity's claims and sitelinks for the media lookup."""
        try:
            return await self._get_entity(entity_id, "claims|sitelinks")
        except SOURCE_ERRORS as e:
            logger.warning("Wikidata media fetch failed for %s: %s", entity_id, e)
            return None

    async def search_and_fetch(self, term: str) -> ResolvedName | None:
        """Resolve a free-text term through the top-ranked Wikidata item."""
        entity_ids = await self.search_entities(term)
        if not entity_ids:
            return None
        return await self.fetch_entity(entity_ids[0])

    async def resolve_swedish_by_latin(self, latin_name: str) -> ResolvedName | None:
        """Find the Swedish name of the item whose taxon name is ``latin_name``.

        Candidates are tried in ranked order; the first whose taxon name
        matches and which has a Swedish label wins.
        """
        entity_ids = await self.search_entities(
            latin_name, language="en", limit=self.latin_search_limit
        )
        for entity_id in entity_ids:
            result = await self.fetch_entity_with_latin_check(entity_id, latin_name)
            if result and result.swedish_name:
                return result
        return None
