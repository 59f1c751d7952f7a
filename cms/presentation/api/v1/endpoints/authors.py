"""Per-author content listing."""

from fastapi import APIRouter, Depends

from cms.application.schemas import ContentResponse
from cms.application.services import ContentService
from cms.infrastructure.dependencies import get_content_service
from cms.presentation.api.errors import unwrap_or_raise
from cms.presentation.api.v1.identity import Caller, get_caller

router = APIRouter(prefix="/authors", tags=["Authors"])


@router.get("/{author_id}/contents", response_model=list[ContentResponse])
async def list_author_contents(
    author_id: str,
    caller: Caller = Depends(get_caller),
    service: ContentService = Depends(get_content_service),
) -> list[ContentResponse]:
    """Retrieve every piece of content owned by an author."""
    contents = unwrap_or_raise(
        await service.get_content_by_author(author_id, caller.user_id, caller.role)
    )
    return [ContentResponse.model_validate(c) for c in contents]
