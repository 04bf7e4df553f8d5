"""Configuration models for birdlog.

This module contains all configuration-related Pydantic models used throughout the application.
"""

from pydantic import BaseModel, Field, field_validator

from birdlog.lookup.http import DEFAULT_USER_AGENT


class LoggingConfig(BaseModel):
    """Structlog-based logging configuration."""

    level: str = "INFO"
    json_logs: bool | None = None  # None = auto-detect based on environment
    include_caller: bool = False  # Include file:line info (useful for debugging)
    extra_fields: dict[str, str] = Field(default_factory=dict)  # Merged into every log event


class LookupConfig(BaseModel):
    """Knowledge-source lookup settings."""

    user_agent: str = DEFAULT_USER_AGENT  # Wikimedia asks clients to identify themselves
    request_interval: float = 0.5  # Seconds between requests to one API family
    max_retries: int = 3  # Attempts per request while rate limited (HTTP 429)
    backoff_base: float = 1.0  # First backoff delay in seconds, doubled per attempt
    backoff_cap: float = 8.0  # Longest single backoff delay in seconds
    timeout: float = 10.0  # HTTP timeout per request in seconds
    search_limit: int = 5  # Candidates requested for free-text searches
    latin_search_limit: int = 10  # Candidates requested when searching by Latin name
    thumbnail_width: int = 100  # Pixels
    full_image_width: int = 800  # Pixels

    @field_validator("request_interval", "backoff_base", "backoff_cap")
    @classmethod
    def validate_non_negative(cls, v: float) -> float:
        """Reject negative delays."""
        if v < 0:
            raise ValueError(f"Delay must not be negative, got {v}")
        return v

    @field_validator(
        "max_retries",
        "timeout",
        "search_limit",
        "latin_search_limit",
        "thumbnail_width",
        "full_image_width",
    )
    @classmethod
    def validate_positive(cls, v: float) -> float:
        """Reject zero or negative counts, widths and timeouts."""
        if v <= 0:
            raise ValueError(f"Value must be positive, got {v}")
        return v


class BirdLogConfig(BaseModel):
    """Configuration settings for the birdlog application."""

    site_name: str = "Fågelbok"
    language: str = "sv"  # Language code for UI and common names

    # Logging settings
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # Species name and media lookups
    lookup: LookupConfig = Field(default_factory=LookupConfig)
