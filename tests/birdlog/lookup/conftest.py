"""Fixtures for lookup tests: an in-memory stand-in for the Wikimedia APIs."""

from typing import Any
from unittest.mock import AsyncMock

import httpx
import pytest

from birdlog.lookup.cache import MediaCache
from birdlog.lookup.commons import COMMONS_API, CommonsAdapter
from birdlog.lookup.http import RetryingFetcher
from birdlog.lookup.media import MediaResolver
from birdlog.lookup.orchestrator import BirdLookupService
from birdlog.lookup.rate_gate import RateGate
from birdlog.lookup.wikidata import WIKIDATA_API, WikidataAdapter
from birdlog.lookup.wikipedia import WIKIPEDIA_API, WikipediaAdapter


def json_response(
    data: Any, status_code: int = 200, url: str = "https://example.org/"
) -> httpx.Response:
    """Build an httpx response carrying a JSON body."""
    return httpx.Response(status_code, json=data, request=httpx.Request("GET", url))


def make_entity(
    entity_id: str,
    taxon_name: str | None = None,
    sv_label: str | None = None,
    en_label: str | None = None,
    image: str | None = None,
    sitelinks: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Build a Wikidata entity payload in the wbgetentities shape."""
    claims: dict[str, Any] = {}
    if taxon_name:
        claims["P225"] = [{"mainsnak": {"datavalue": {"value": taxon_name, "type": "string"}}}]
    if image:
        claims["P18"] = [{"mainsnak": {"datavalue": {"value": image, "type": "string"}}}]
    labels = {}
    if sv_label:
        labels["sv"] = {"language": "sv", "value": sv_label}
    if en_label:
        labels["en"] = {"language": "en", "value": en_label}
    return {
        "id": entity_id,
        "claims": claims,
        "labels": labels,
        "sitelinks": {
            site: {"site": site, "title": title} for site, title in (sitelinks or {}).items()
        },
    }


class FakeWikimedia:
    """Answers MediaWiki API requests from in-memory tables and records them."""

    def __init__(self) -> None:
        self.wikidata_search: dict[str, list[str]] = {}
        self.entities: dict[str, dict[str, Any]] = {}
        self.wikipedia_search: dict[tuple[str, str], list[str]] = {}
        self.pageprops: dict[tuple[str, str], str] = {}
        self.extracts: dict[tuple[str, str], str] = {}
        self.langlinks: dict[tuple[str, str], str] = {}
        self.thumbnails: dict[str, str] = {}
        self.requests: list[tuple[str, dict[str, Any]]] = []
        self.failing_urls: dict[str, int] = {}

    def add_entity(self, entity_id: str, **fields: Any) -> dict[str, Any]:
        """Register an entity, see make_entity for the fields."""
        entity = make_entity(entity_id, **fields)
        self.entities[entity_id] = entity
        return entity

    def requests_to(self, url: str) -> list[dict[str, Any]]:
        """Parameters of every request sent to ``url``."""
        return [params for sent_url, params in self.requests if sent_url == url]

    def handle(self, url: str, params: dict[str, Any] | None = None) -> httpx.Response:
        params = dict(params or {})
        self.requests.append((url, params))

        if url in self.failing_urls:
            return json_response({"error": "unavailable"}, self.failing_urls[url], url)
        if url == WIKIDATA_API:
            return self._wikidata(params)
        if url == COMMONS_API:
            return self._commons(params)
        for lang in ("sv", "en"):
            if url == WIKIPEDIA_API.format(lang=lang):
                return self._wikipedia(lang, params)
        return json_response({"error": "unknown endpoint"}, 404, url)

    def _wikidata(self, params: dict[str, Any]) -> httpx.Response:
        if params["action"] == "wbsearchentities":
            ids = self.wikidata_search.get(params["search"].lower(), [])
            return json_response({"search": [{"id": i, "label": i} for i in ids]}, url=WIKIDATA_API)
        entity_id = params["ids"]
        entity = self.entities.get(entity_id, {"id": entity_id, "missing": ""})
        return json_response({"entities": {entity_id: entity}}, url=WIKIDATA_API)

    def _commons(self, params: dict[str, Any]) -> httpx.Response:
        title = params["titles"]
        base = self.thumbnails.get(title.removeprefix("File:"))
        if base:
            page = {"title": title, "imageinfo": [{"thumburl": f"{base}/{params['iiurlwidth']}px"}]}
        else:
            page = {"title": title, "missing": ""}
        return json_response({"query": {"pages": {"-1": page}}}, url=COMMONS_API)

    def _wikipedia(self, lang: str, params: dict[str, Any]) -> httpx.Response:
        url = WIKIPEDIA_API.format(lang=lang)
        if params.get("list") == "search":
            titles = self.wikipedia_search.get((lang, params["srsearch"].lower()), [])
            return json_response({"query": {"search": [{"title": t} for t in titles]}}, url=url)

        title = params["titles"]
        page: dict[str, Any] = {"pageid": 1, "title": title}
        key = (lang, title)
        if params["prop"] == "pageprops" and key in self.pageprops:
            page["pageprops"] = {"wikibase_item": self.pageprops[key]}
        if params["prop"] == "extracts" and key in self.extracts:
            page["extract"] = self.extracts[key]
        if params["prop"] == "langlinks" and key in self.langlinks:
            page["langlinks"] = [{"lang": params["lllang"], "*": self.langlinks[key]}]
        return json_response({"query": {"pages": {"1": page}}}, url=url)


@pytest.fixture
def wikimedia() -> FakeWikimedia:
    """Provide an empty fake Wikimedia backend."""
    return FakeWikimedia()


@pytest.fixture
def http_client(wikimedia):
    """Provide an AsyncClient mock answering from the fake backend."""
    client = AsyncMock(spec=httpx.AsyncClient)
    client.get.side_effect = wikimedia.handle
    return client


@pytest.fixture
def fetcher(http_client):
    """Provide a RetryingFetcher that never actually sleeps."""
    return RetryingFetcher(http_client, sleep=AsyncMock())


@pytest.fixture
def gate():
    """Provide a rate gate with no interval."""
    return RateGate(interval=0.0)


@pytest.fixture
def wikidata(fetcher, gate):
    """Provide a WikidataAdapter backed by the fake."""
    return WikidataAdapter(fetcher, gate)


@pytest.fixture
def swedish_wikipedia(fetcher, gate, wikidata):
    """Provide a Swedish WikipediaAdapter backed by the fake."""
    return WikipediaAdapter("sv", fetcher, gate, wikidata)


@pytest.fixture
def english_wikipedia(fetcher, gate, wikidata):
    """Provide an English WikipediaAdapter backed by the fake."""
    return WikipediaAdapter("en", fetcher, gate, wikidata)


@pytest.fixture
def commons(fetcher, gate):
    """Provide a CommonsAdapter backed by the fake."""
    return CommonsAdapter(fetcher, gate)


@pytest.fixture
def media_cache():
    """Provide an empty media cache."""
    return MediaCache()


@pytest.fixture
def media_resolver(wikidata, commons, media_cache):
    """Provide a MediaResolver backed by the fake."""
    return MediaResolver(wikidata, commons, media_cache)


@pytest.fixture
def bird_lookup(wikidata, swedish_wikipedia, english_wikipedia):
    """Provide a BirdLookupService backed by the fake."""
    return BirdLookupService(wikidata, swedish_wikipedia, english_wikipedia)
