"""Result models for species name and media lookups."""

from dataclasses import dataclass


@dataclass
class ResolvedName:
    """Swedish and Latin names resolved for a free-text search term.

    Both fields are independently optional and always lower-cased. A result
    with neither field set means "not found" and is never handed to callers.
    """

    swedish_name: str | None = None  # e.g. "blåfotad sula"
    latin_name: str | None = None  # Validated binomial, e.g. "sula nebouxii"

    @property
    def is_empty(self) -> bool:
        """Whether neither name was resolved."""
        return not (self.swedish_name or self.latin_name)

    @property
    def display_name(self) -> str:
        """Capitalized "Swedish (Latin)" form used when presenting a suggestion."""
        swedish = self.swedish_name.capitalize() if self.swedish_name else ""
        latin = self.latin_name.capitalize() if self.latin_name else ""
        if swedish and latin:
            return f"{swedish} ({latin})"
        return swedish or latin

    def __str__(self) -> str:
        """Return string representation for debugging."""
        return self.display_name or "<unresolved>"


@dataclass
class MediaInfo:
    """Photo and encyclopedia link for a species."""

    image_url: str | None = None  # Thumbnail at the configured thumbnail width
    full_image_url: str | None = None  # Same file at the configured full width
    wiki_url: str | None = None  # Swedish article preferred, English fallback

    @property
    def found(self) -> bool:
        """Whether the lookup produced an image or an article link."""
        return bool(self.image_url or self.wiki_url)
