import os
from pathlib import Path


class PathResolver:
    """Central authority for file path resolution in birdlog.

    Uses environment variables for configuration with sensible defaults.
    """

    def __init__(self) -> None:
        """Initialize PathResolver with environment-based configuration."""
        default_data_dir = Path.home() / ".local" / "share" / "birdlog"
        self.data_dir = Path(os.getenv("BIRDLOG_DATA", str(default_data_dir)))

    def get_config_path(self) -> Path:
        """Get the path to the main configuration file.

        Checks BIRDLOG_CONFIG environment variable first, then falls back to default.
        """
        config_path = os.getenv("BIRDLOG_CONFIG")
        if config_path:
            return Path(config_path)

        return self.data_dir / "config" / "birdlog.yaml"
