"""Species name resolution package.

This package resolves free-text bird names against public knowledge bases:
- BirdLookupService: Swedish/Latin name resolution across sources
- MediaResolver: Photo and article lookup with a process-lifetime cache
- RateGate, RetryingFetcher: Request pacing and 429 backoff
- WikidataAdapter, WikipediaAdapter, CommonsAdapter: Source adapters
- is_valid_latin_name: Latin binomial validator
"""

from birdlog.lookup.cache import MediaCache
from birdlog.lookup.commons import CommonsAdapter
from birdlog.lookup.exceptions import LookupSourceError, MaxRetriesExceededError
from birdlog.lookup.http import RetryingFetcher, create_http_client
from birdlog.lookup.media import MediaResolver
from birdlog.lookup.models import MediaInfo, ResolvedName
from birdlog.lookup.orchestrator import BirdLookupService, LookupStrategy
from birdlog.lookup.rate_gate import RateGate
from birdlog.lookup.validation import is_valid_latin_name, looks_like_latin_name
from birdlog.lookup.wikidata import WikidataAdapter
from birdlog.lookup.wikipedia import WikipediaAdapter

__all__ = [
    "BirdLookupService",
    "CommonsAdapter",
    "LookupSourceError",
    "LookupStrategy",
    "MaxRetriesExceededError",
    "MediaCache",
    "MediaInfo",
    "MediaResolver",
    "RateGate",
    "ResolvedName",
    "RetryingFetcher",
    "WikidataAdapter",
    "WikipediaAdapter",
    "create_http_client",
    "is_valid_latin_name",
    "looks_like_latin_name",
]
