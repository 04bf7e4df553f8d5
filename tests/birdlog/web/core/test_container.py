"""Tests for the dependency injection container and application factory."""

from unittest.mock import AsyncMock

import httpx
import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from birdlog.config import BirdLogConfig, LookupConfig
from birdlog.lookup.media import MediaResolver
from birdlog.lookup.orchestrator import BirdLookupService
from birdlog.web.core.container import Container
from birdlog.web.core.factory import create_app


@pytest.fixture
def container(test_config):
    """Create a container with test configuration and a mock HTTP client."""
    container = Container()
    container.config.override(providers.Singleton(lambda: test_config))
    container.http_client.override(providers.Singleton(lambda: AsyncMock(spec=httpx.AsyncClient)))
    return container


class TestContainer:
    """Test provider wiring."""

    def test_services(self, container):
        """Should build the lookup services as singletons."""
        assert isinstance(container.bird_lookup(), BirdLookupService)
        assert isinstance(container.media_resolver(), MediaResolver)
        assert container.bird_lookup() is container.bird_lookup()

    def test_wikipedia_editions_share_a_gate(self, container):
        """Should pace both Wikipedia editions through one gate."""
        lookup = container.bird_lookup()

        assert lookup.swedish_wikipedia.lang == "sv"
        assert lookup.english_wikipedia.lang == "en"
        assert lookup.swedish_wikipedia.gate is lookup.english_wikipedia.gate
        assert lookup.wikidata.gate is not lookup.swedish_wikipedia.gate
        assert container.commons().gate is not lookup.wikidata.gate

    def test_settings_from_config(self):
        """Should pass lookup settings to the services."""
        config = BirdLogConfig(
            lookup=LookupConfig(request_interval=1.5, max_retries=5, thumbnail_width=64)
        )
        container = Container()
        container.config.override(providers.Singleton(lambda: config))
        container.http_client.override(
            providers.Singleton(lambda: AsyncMock(spec=httpx.AsyncClient))
        )

        assert container.wikidata_gate().interval == 1.5
        assert container.fetcher().max_retries == 5
        assert container.media_resolver().thumbnail_width == 64
        assert container.wikidata().fetcher is container.fetcher()


class TestCreateApp:
    """Test the application factory and lifespan."""

    def test_lookup_routes_registered(self, container, mocker):
        """Should serve the lookup API and close the HTTP client on shutdown."""
        mocker.patch("birdlog.web.core.lifespan.configure_structlog")
        mock_lookup = mocker.MagicMock(spec=BirdLookupService)
        mock_lookup.lookup_bird = AsyncMock(return_value=None)
        container.bird_lookup.override(providers.Singleton(lambda: mock_lookup))
        app = create_app(container)

        with TestClient(app) as client:
            response = client.get("/api/lookup/name", params={"term": "knölsvan"})

        assert response.status_code == 200
        assert response.json()["found"] is False
        container.http_client().aclose.assert_awaited_once()
        container.unwire()
