from pathlib import Path

import pytest

from birdlog.config.models import BirdLogConfig, LookupConfig
from birdlog.system.path_resolver import PathResolver


@pytest.fixture
def path_resolver(tmp_path: Path) -> PathResolver:
    """Provide a PathResolver whose writable paths live in a temporary directory.

    Both the attribute and the method are overridden, because some code reads
    ``data_dir`` directly while other code calls ``get_config_path()``.
    """
    resolver = PathResolver()
    resolver.data_dir = tmp_path / "data"
    config_path = tmp_path / "config" / "birdlog.yaml"
    resolver.get_config_path = lambda: config_path  # type: ignore[method-assign]
    return resolver


@pytest.fixture
def test_config() -> BirdLogConfig:
    """Provide a configuration that never waits between requests."""
    return BirdLogConfig(lookup=LookupConfig(request_interval=0.0))
