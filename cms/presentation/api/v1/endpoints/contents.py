"""Content authoring endpoints."""

from fastapi import APIRouter, Depends, Query, status

from cms.application.schemas import (
    ContentCreate,
    ContentResponse,
    ContentUpdate,
    FeaturedAvailabilityResponse,
)
from cms.application.services import ContentService
from cms.config import get_settings
from cms.infrastructure.dependencies import get_content_service
from cms.presentation.api.errors import unwrap_or_raise
from cms.presentation.api.v1.identity import Caller, get_caller

router = APIRouter(prefix="/contents", tags=["Contents"])


@router.get("", response_model=list[ContentResponse])
async def list_published_contents(
    page: int = Query(1, ge=1),
    limit: int | None = Query(None, ge=1),
    service: ContentService = Depends(get_content_service),
) -> list[ContentResponse]:
    """Retrieve one page of published content."""
    settings = get_settings()
    page_size = min(limit or settings.default_page_size, settings.max_page_size)
    contents = unwrap_or_raise(await service.get_published_content(page, page_size))
    return [ContentResponse.model_validate(c) for c in contents]


@router.get("/featured", response_model=list[ContentResponse])
async def list_featured_contents(
    service: ContentService = Depends(get_content_service),
) -> list[ContentResponse]:
    """Retrieve the most recently published content (max 5)."""
    contents = unwrap_or_raise(await service.get_featured_content())
    return [ContentResponse.model_validate(c) for c in contents]


@router.get("/featured/availability", response_model=FeaturedAvailabilityResponse)
async def featured_availability(
    service: ContentService = Depends(get_content_service),
) -> FeaturedAvailabilityResponse:
    """Report whether the featured cap leaves room for another item."""
    can_add = unwrap_or_raise(await service.can_add_featured_content())
    return FeaturedAvailabilityResponse(can_add=can_add)


@router.post("", response_model=ContentResponse, status_code=status.HTTP_201_CREATED)
async def create_content(
    data: ContentCreate,
    caller: Caller = Depends(get_caller),
    service: ContentService = Depends(get_content_service),
) -> ContentResponse:
    """Create a draft owned by the caller."""
    content = unwrap_or_raise(await service.create_content(data, caller.user_id))
    return ContentResponse.model_validate(content)


@router.get("/{content_id}", response_model=ContentResponse)
async def get_content(
    content_id: str,
    caller: Caller = Depends(get_caller),
    service: ContentService = Depends(get_content_service),
) -> ContentResponse:
    """Retrieve a single piece of content by ID."""
    content = unwrap_or_raise(
        await service.get_content(content_id, caller.user_id, caller.role)
    )
    return ContentResponse.model_validate(content)


@router.patch("/{content_id}", response_model=ContentResponse)
async def update_content(
    content_id: str,
    data: ContentUpdate,
    caller: Caller = Depends(get_caller),
    service: ContentService = Depends(get_content_service),
) -> ContentResponse:
    """Update title, body and/or excerpt."""
    content = unwrap_or_raise(
        await service.update_content(content_id, data, caller.user_id, caller.role)
    )
    return ContentResponse.model_validate(content)


@router.post("/{content_id}/publish", response_model=ContentResponse)
async def publish_content(
    content_id: str,
    caller: Caller = Depends(get_caller),
    service: ContentService = Depends(get_content_service),
) -> ContentResponse:
    """Publish content."""
    content = unwrap_or_raise(
        await service.publish_content(content_id, caller.user_id, caller.role)
    )
    return ContentResponse.model_validate(content)


@router.delete("/{content_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_content(
    content_id: str,
    caller: Caller = Depends(get_caller),
    service: ContentService = Depends(get_content_service),
) -> None:
    """Delete content — soft for published, hard for everything else."""
    unwrap_or_raise(
        await service.delete_content(content_id, caller.user_id, caller.role)
    )
