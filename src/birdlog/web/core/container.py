"""Dependency injection container for the birdlog application."""

from dependency_injector import containers, providers

from birdlog.config import get_config
from birdlog.lookup.cache import MediaCache
from birdlog.lookup.commons import CommonsAdapter
from birdlog.lookup.http import RetryingFetcher, create_http_client
from birdlog.lookup.media import MediaResolver
from birdlog.lookup.orchestrator import BirdLookupService
from birdlog.lookup.rate_gate import RateGate
from birdlog.lookup.wikidata import WikidataAdapter
from birdlog.lookup.wikipedia import WikipediaAdapter
from birdlog.system.path_resolver import PathResolver


class Container(containers.DeclarativeContainer):
    """Application dependency injection container.

    Rate gates, the media cache and the HTTP client are process-wide
    singletons; tests override them with fakes.
    """

    # Core infrastructure services - singletons
    path_resolver = providers.Singleton(PathResolver)

    config = providers.Singleton(
        get_config,
        path_resolver=path_resolver,
    )

    lookup_config = providers.Callable(lambda config: config.lookup, config=config)

    # Shared HTTP transport
    http_client = providers.Singleton(
        create_http_client,
        user_agent=lookup_config.provided.user_agent,
        timeout=lookup_config.provided.timeout,
    )

    fetcher = providers.Singleton(
        RetryingFetcher,
        client=http_client,
        max_retries=lookup_config.provided.max_retries,
        backoff_base=lookup_config.provided.backoff_base,
        backoff_cap=lookup_config.provided.backoff_cap,
    )

    # One rate gate per API family
    wikipedia_gate = providers.Singleton(
        RateGate, interval=lookup_config.provided.request_interval, name="wikipedia"
    )
    wikidata_gate = providers.Singleton(
        RateGate, interval=lookup_config.provided.request_interval, name="wikidata"
    )
    commons_gate = providers.Singleton(
        RateGate, interval=lookup_config.provided.request_interval, name="commons"
    )

    # Knowledge source adapters
    wikidata = providers.Singleton(
        WikidataAdapter,
        fetcher=fetcher,
        gate=wikidata_gate,
        search_limit=lookup_config.provided.search_limit,
        latin_search_limit=lookup_config.provided.latin_search_limit,
    )

    swedish_wikipedia = providers.Singleton(
        WikipediaAdapter,
        lang="sv",
        fetcher=fetcher,
        gate=wikipedia_gate,
        wikidata=wikidata,
        search_limit=lookup_config.provided.search_limit,
    )

    english_wikipedia = providers.Singleton(
        WikipediaAdapter,
        lang="en",
        fetcher=fetcher,
        gate=wikipedia_gate,
        wikidata=wikidata,
        search_limit=lookup_config.provided.search_limit,
    )

    commons = providers.Singleton(
        CommonsAdapter,
        fetcher=fetcher,
        gate=commons_gate,
    )

    # Lookup services
    media_cache = providers.Singleton(MediaCache)

    media_resolver = providers.Singleton(
        MediaResolver,
        wikidata=wikidata,
        commons=commons,
        cache=media_cache,
        thumbnail_width=lookup_config.provided.thumbnail_width,
        full_image_width=lookup_config.provided.full_image_width,
    )

    bird_lookup = providers.Singleton(
        BirdLookupService,
        wikidata=wikidata,
        swedish_wikipedia=swedish_wikipedia,
        english_wikipedia=english_wikipedia,
    )
