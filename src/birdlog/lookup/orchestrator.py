"""Resolution of free-text bird names to Swedish and Latin names.

The precedence between knowledge sources is the ordered ``strategies``
tuple. Each strategy maps the search term to an optional result and decides
whether that result is good enough to stop; the first accepted result wins.
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from birdlog.lookup.models import ResolvedName
from birdlog.lookup.validation import is_valid_latin_name, looks_like_latin_name
from birdlog.lookup.wikidata import WikidataAdapter
from birdlog.lookup.wikipedia import WikipediaAdapter

logger = logging.getLogger(__name__)


def has_swedish_name(result: ResolvedName) -> bool:
    return bool(result.swedish_name)


def has_latin_name(result: ResolvedName) -> bool:
    return bool(result.latin_name)


def has_any_name(result: ResolvedName) -> bool:
    return not result.is_empty


@dataclass(frozen=True)
class LookupStrategy:
    """One step of the lookup precedence."""

    name: str
    run: Callable[[str], Awaitable[ResolvedName | None]]
    accept: Callable[[ResolvedName], bool]
    latin_input_only: bool = False  # Only tried when the term is shaped like a Latin name


class BirdLookupService:
    """Public entry point for species name resolution.

    Every call performs a fresh resolution; lookups are triggered
    interactively and rarely repeat.
    """

    def __init__(
        self,
        wikidata: WikidataAdapter,
        swedish_wikipedia: WikipediaAdapter,
        english_wikipedia: WikipediaAdapter,
    ) -> None:
        """Initialize the service and its strategy order.

        Args:
            wikidata: Wikidata adapter
            swedish_wikipedia: Swedish Wikipedia adapter
            english_wikipedia: English Wikipedia adapter
        """
        self.wikidata = wikidata
        self.swedish_wikipedia = swedish_wikipedia
        self.english_wikipedia = english_wikipedia
        self.strategies: tuple[LookupStrategy, ...] = (
            LookupStrategy(
                "wikidata_by_latin",
                wikidata.resolve_swedish_by_latin,
                has_swedish_name,
                latin_input_only=True,
            ),
            LookupStrategy(
                "swedish_wikipedia",
                swedish_wikipedia.search_and_extract_latin_name,
                has_any_name,
            ),
            LookupStrategy(
                "english_wikipedia",
                english_wikipedia.search_and_extract_latin_name,
                has_latin_name,
            ),
            LookupStrategy("wikidata_search", wikidata.search_and_fetch, has_any_name),
            LookupStrategy(
                "swedish_wikipedia_by_latin",
                swedish_wikipedia.search_by_latin_name_for_swedish_label,
                has_any_name,
                latin_input_only=True,
            ),
            LookupStrategy(
                "english_langlink",
                english_wikipedia.search_then_follow_langlink,
                has_any_name,
                latin_input_only=True,
            ),
        )

    async def lookup_bird(self, search_term: str) -> ResolvedName | None:
        """Resolve a Swedish or Latin bird name.

        A strategy that raises is logged and treated as having found nothing;
        the remaining strategies are still tried.

        Args:
            search_term: Name as typed by the user

        Returns:
            The first accepted ResolvedName, or None if no source resolved it
        """
        term = search_term.strip()
        if not term:
            return None

        latin_input = looks_like_latin_name(term)
        for strategy in self.strategies:
            if strategy.latin_input_only and not latin_input:
                continue
            try:
                result = await strategy.run(term)
            except Exception:
                logger.exception("Lookup strategy %s failed for '%s'", strategy.name, term)
                continue
            if result is not None and strategy.accept(result):
                logger.info("Resolved '%s' via %s: %s", term, strategy.name, result)
                return result

        logger.info("Could not resolve '%s'", term)
        return None

    async def lookup_latin_name(self, swedish_name: str) -> str | None:
        """Return the Latin name for a Swedish name, if one validates."""
        result = await self.lookup_bird(swedish_name)
        if result and result.latin_name and is_valid_latin_name(result.latin_name):
            return result.latin_name
        return None

    async def lookup_swedish_name(self, latin_name: str) -> str | None:
        """Return the Swedish name for a Latin name.

        A result that merely echoes the input is not a Swedish name.
        """
        result = await self.lookup_bird(latin_name)
        if result and result.swedish_name and result.swedish_name != latin_name.strip().lower():
            return result.swedish_name
        return None
