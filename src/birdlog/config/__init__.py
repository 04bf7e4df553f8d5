"""birdlog configuration package.

This package provides centralized configuration management with:
- Pydantic models with validation for each section
- YAML parsing and serialization
- Defaults written on first load
"""

from .manager import ConfigManager, get_config
from .models import BirdLogConfig, LoggingConfig, LookupConfig

__all__ = [
    "BirdLogConfig",
    "ConfigManager",
    "LoggingConfig",
    "LookupConfig",
    "get_config",
]
