"""Wikipedia adapter: article search, Latin-name extraction, interlanguage links."""

import logging
from typing import Any

from birdlog.lookup.api import SOURCE_ERRORS, MediaWikiApi
from birdlog.lookup.extraction import extract_latin_name
from birdlog.lookup.http import RetryingFetcher
from birdlog.lookup.models import ResolvedName
from birdlog.lookup.rate_gate import RateGate
from birdlog.lookup.validation import is_valid_latin_name
from birdlog.lookup.wikidata import WikidataAdapter

logger = logging.getLogger(__name__)

WIKIPEDIA_API = "https://{lang}.wikipedia.org/w/api.php"


def _validated(latin_name: str) -> str | None:
    return latin_name if is_valid_latin_name(latin_name) else None


class WikipediaAdapter(MediaWikiApi):
    """One language edition of Wikipedia."""

    def __init__(
        self,
        lang: str,
        fetcher: RetryingFetcher,
        gate: RateGate,
        wikidata: WikidataAdapter,
        search_limit: int = 5,
    ) -> None:
        """Initialize the adapter.

        Args:
            lang: Language edition, e.g. "sv" or "en"
            fetcher: Retrying fetcher wrapping the shared HTTP client
            gate: Rate gate shared by all Wikipedia editions
            wikidata: Adapter used to read the structured data of linked items
            search_limit: Search hits requested per query
        """
        super().__init__(WIKIPEDIA_API.format(lang=lang), fetcher, gate)
        self.lang = lang
        self.wikidata = wikidata
        self.search_limit = search_limit
        self.source_name = f"{lang}.wikipedia"

    async def search_titles(self, term: str, limit: int | None = None) -> list[str]:
        """Full-text search returning page titles in ranked order.

        Raises the transport errors; public lookups catch them.
        """
        data = await self.get_json(
            {
                "action": "query",
                "list": "search",
                "srsearch": term,
                "srlimit": str(limit or self.search_limit),
            }
        )
        hits: list[dict[str, Any]] = (data.get("query") or {}).get("search") or []
        return [hit["title"] for hit in hits if hit.get("title")]

    async def fetch_extract(self, title: str) -> str | None:
        """Return the plain-text introduction of a page."""
        page = await self.query_page(title, prop="extracts", exintro="true", explaintext="true")
        if not page:
            return None
        return page.get("extract") or None

    async def fetch_wikidata_id(self, title: str) -> str | None:
        """Return the Wikidata item linked to a page."""
        page = await self.query_page(title, prop="pageprops", ppprop="wikibase_item")
        if not page:
            return None
        return (page.get("pageprops") or {}).get("wikibase_item") or None

    @staticmethod
    def best_title(titles: list[str], term: str) -> str:
        """Prefer an exact case-insensitive title match over the top-ranked hit."""
        wanted = term.strip().lower()
        for title in titles:
            if title.lower() == wanted:
                return title
        return titles[0]

    async def search_and_extract_latin_name(self, term: str) -> ResolvedName | None:
        """Resolve a term through the best-matching article.

        The article's Wikidata item is consulted first. Only when it yields no
        Latin name is the introduction scanned with the extraction rules.

        Returns:
            ResolvedName, or None when no article or Latin name was found
        """
        try:
            titles = await self.search_titles(term)
            if not titles:
                return None
            title = self.best_title(titles, term)

            entity_id = await self.fetch_wikidata_id(title)
            if entity_id:
                result = await self.wikidata.fetch_entity(entity_id)
                if result and result.latin_name:
                    return result

            extract = await self.fetch_extract(title)
            if not extract:
                return None
            latin_name = extract_latin_name(extract)
            if latin_name:
                return ResolvedName(latin_name=latin_name)
            return None
        except SOURCE_ERRORS as e:
            logger.warning("%s lookup failed for '%s': %s", self.source_name, term, e)
            return None

    async def search_by_latin_name_for_swedish_label(self, latin_name: str) -> ResolvedName | None:
        """Find the article whose introduction mentions ``latin_name``.

        The article title is taken as the common name. Checking that the
        extract contains the Latin name is enough to reject unrelated hits.
        """
        wanted = latin_name.strip().lower()
        try:
            for title in await self.search_titles(latin_name):
                extract = await self.fetch_extract(title)
                if extract and wanted in extract.lower():
                    return ResolvedName(swedish_name=title.lower(), latin_name=_validated(wanted))
            return None
        except SOURCE_ERRORS as e:
            logger.warning("%s Latin search failed for '%s': %s", self.source_name, latin_name, e)
            return None

    async def search_then_follow_langlink(
        self, latin_name: str, target_lang: str = "sv"
    ) -> ResolvedName | None:
        """Take the top search hit and return the title of its ``target_lang`` article.

        No content check is made on the linked article.
        """
        try:
            titles = await self.search_titles(latin_name, limit=3)
            if not titles:
                return None
            page = await self.query_page(titles[0], prop="langlinks", lllang=target_lang)
            if not page:
                return None
            links: list[dict[str, Any]] = page.get("langlinks") or []
            linked_title = links[0].get("*") if links else None
            if not linked_title:
                return None
            return ResolvedName(
                swedish_name=linked_title.lower(), latin_name=_validated(latin_name.strip().lower())
            )
        except SOURCE_ERRORS as e:
            logger.warning(
                "%s langlink lookup failed for '%s': %s", self.source_name, latin_name, e
            )
            return None
