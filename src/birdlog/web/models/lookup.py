"""Lookup API response models."""

from pydantic import BaseModel, Field

from birdlog.lookup.models import MediaInfo, ResolvedName


class NameLookupResponse(BaseModel):
    """Response for a free-text name lookup."""

    found: bool = Field(..., description="Whether any name was resolved")
    swedish_name: str | None = Field(None, description="Lower-cased Swedish common name")
    latin_name: str | None = Field(None, description="Lower-cased Latin binomial")

    @classmethod
    def from_result(cls, result: ResolvedName | None) -> "NameLookupResponse":
        """Build a response from an orchestrator result."""
        if result is None:
            return cls(found=False)
        return cls(found=True, swedish_name=result.swedish_name, latin_name=result.latin_name)


class LatinNameResponse(BaseModel):
    """Response for a Swedish-to-Latin lookup."""

    found: bool = Field(..., description="Whether a valid Latin name was found")
    latin_name: str | None = Field(None, description="Lower-cased Latin binomial")


class SwedishNameResponse(BaseModel):
    """Response for a Latin-to-Swedish lookup."""

    found: bool = Field(..., description="Whether a Swedish name was found")
    swedish_name: str | None = Field(None, description="Lower-cased Swedish common name")


class MediaResponse(BaseModel):
    """Response for a species media lookup."""

    found: bool = Field(..., description="Whether an image or article was found")
    image_url: str | None = Field(None, description="Thumbnail URL")
    full_image_url: str | None = Field(None, description="Full-size image URL")
    wiki_url: str | None = Field(None, description="Wikipedia article URL")

    @classmethod
    def from_media(cls, info: MediaInfo) -> "MediaResponse":
        """Build a response from a media lookup result."""
        return cls(
            found=info.found,
            image_url=info.image_url,
            full_image_url=info.full_image_url,
            wiki_url=info.wiki_url,
        )
