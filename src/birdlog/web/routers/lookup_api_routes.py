"""Species lookup API endpoints used by the add-species form and species cards."""

import logging
from typing import Annotated

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Query

from birdlog.lookup.media import MediaResolver
from birdlog.lookup.orchestrator import BirdLookupService
from birdlog.web.core.container import Container
from birdlog.web.models.lookup import (
    LatinNameResponse,
    MediaResponse,
    NameLookupResponse,
    SwedishNameResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/lookup", tags=["lookup"])


@router.get("/name", response_model=NameLookupResponse)
@inject
async def lookup_name(
    bird_lookup: Annotated[BirdLookupService, Depends(Provide[Container.bird_lookup])],
    term: Annotated[str, Query(min_length=1, description="Swedish or Latin name")],
) -> NameLookupResponse:
    """Resolve a partial or ambiguous name to Swedish and Latin names.

    Not-found is a normal response with ``found`` set to false.
    """
    result = await bird_lookup.lookup_bird(term)
    return NameLookupResponse.from_result(result)


@router.get("/latin", response_model=LatinNameResponse)
@inject
async def lookup_latin_name(
    bird_lookup: Annotated[BirdLookupService, Depends(Provide[Container.bird_lookup])],
    swedish_name: Annotated[str, Query(min_length=1)],
) -> LatinNameResponse:
    """Find the Latin name for a Swedish name."""
    latin_name = await bird_lookup.lookup_latin_name(swedish_name)
    return LatinNameResponse(found=latin_name is not None, latin_name=latin_name)


@router.get("/swedish", response_model=SwedishNameResponse)
@inject
async def lookup_swedish_name(
    bird_lookup: Annotated[BirdLookupService, Depends(Provide[Container.bird_lookup])],
    latin_name: Annotated[str, Query(min_length=1)],
) -> SwedishNameResponse:
    """Find the Swedish name for a Latin name."""
    swedish_name = await bird_lookup.lookup_swedish_name(latin_name)
    return SwedishNameResponse(found=swedish_name is not None, swedish_name=swedish_name)


@router.get("/media", response_model=MediaResponse)
@inject
async def lookup_media(
    media_resolver: Annotated[MediaResolver, Depends(Provide[Container.media_resolver])],
    latin_name: str | None = None,
    swedish_name: str | None = None,
) -> MediaResponse:
    """Find a photo and Wikipedia article for a species.

    Raises:
        HTTPException: 422 when neither name is given
    """
    if not (latin_name and latin_name.strip()) and not (swedish_name and swedish_name.strip()):
        raise HTTPException(status_code=422, detail="latin_name or swedish_name is required")

    info = await media_resolver.resolve(latin_name, swedish_name)
    return MediaResponse.from_media(info)
