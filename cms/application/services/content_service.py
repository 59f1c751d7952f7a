"""Application service (use case) for Content operations.

Every use case follows the same shape: look the content up, check the
permission policy, apply the domain operation, persist. The first failure
short-circuits and is returned unchanged to the caller.
"""

import logging
import uuid

from cms.application.interfaces import (
    FEATURED_CONTENT_LIMIT,
    ContentRepository,
    ContentSearchCriteria,
)
from cms.application.schemas import ContentCreate, ContentUpdate
from cms.application.services.content_permissions import ContentPermissions
from cms.domain.entities import Content
from cms.domain.exceptions import (
    EntityNotFoundError,
    InvalidInputError,
    PermissionDeniedError,
)
from cms.domain.result import Result
from cms.domain.value_objects import UserRole

logger = logging.getLogger(__name__)


class ContentService:
    """Orchestrates content business logic. Depends on the repository and policy ports (DI)."""

    def __init__(self, repository: ContentRepository, permissions: ContentPermissions):
        self._repository = repository
        self._permissions = permissions

    async def _load(self, content_id: str) -> Result[Content]:
        found = await self._repository.find_by_id(content_id)
        if not found.ok:
            return found
        if found.value is None:
            return Result.failure(EntityNotFoundError("Content", content_id))
        return found

    # ── Commands ─────────────────────────────────────────────────────

    async def create_content(self, data: ContentCreate, author_id: str) -> Result[Content]:
        """Create a draft owned by ``author_id`` with a freshly generated ID."""
        created = Content.create(
            id=str(uuid.uuid4()),
            title=data.title,
            body=data.body,
            author_id=author_id,
            excerpt=data.excerpt,
        )
        if not created.ok:
            return created

        saved = await self._repository.save(created.value)
        if not saved.ok:
            return Result.failure(saved.error)

        logger.info("Content %s created by %s", created.value.id, author_id)
        return created

    async def publish_content(
        self, content_id: str, user_id: str, role: UserRole
    ) -> Result[Content]:
        loaded = await self._load(content_id)
        if not loaded.ok:
            return loaded
        content = loaded.value

        if not self._permissions.can_publish(content, user_id, role):
            logger.warning("User %s (%s) denied publishing %s", user_id, role.value, content_id)
            return Result.failure(PermissionDeniedError("publish content"))

        published = content.publish()
        if not published.ok:
            return published

        saved = await self._repository.save(published.value)
        if not saved.ok:
            return Result.failure(saved.error)

        logger.info("Content %s published by %s", content_id, user_id)
        return published

    async def update_content(
        self,
        content_id: str,
        updates: ContentUpdate,
        user_id: str,
        role: UserRole,
    ) -> Result[Content]:
        """Apply title, body and excerpt updates in that order.

        Empty values count as not supplied. Nothing is persisted unless
        every requested update succeeds.
        """
        loaded = await self._load(content_id)
        if not loaded.ok:
            return loaded
        content = loaded.value

        if not self._permissions.can_edit(content, user_id, role):
            logger.warning("User %s (%s) denied editing %s", user_id, role.value, content_id)
            return Result.failure(PermissionDeniedError("edit content"))

        if updates.title:
            result = content.update_title(updates.title)
            if not result.ok:
                return result
            content = result.value

        if updates.body:
            result = content.update_body(updates.body)
            if not result.ok:
                return result
            content = result.value

        if updates.excerpt:
            result = content.update_excerpt(updates.excerpt)
            if not result.ok:
                return result
            content = result.value

        saved = await self._repository.save(content)
        if not saved.ok:
            return Result.failure(saved.error)

        logger.info("Content %s updated by %s", content_id, user_id)
        return Result.success(content)

    async def delete_content(
        self, content_id: str, user_id: str, role: UserRole
    ) -> Result[None]:
        """Soft-delete published content, hard-delete everything else."""
        loaded = await self._load(content_id)
        if not loaded.ok:
            return Result.failure(loaded.error)
        content = loaded.value

        if not self._permissions.can_delete(content, user_id, role):
            logger.warning("User %s (%s) denied deleting %s", user_id, role.value, content_id)
            return Result.failure(PermissionDeniedError("delete content"))

        if content.state.is_published():
            result = await self._repository.soft_delete(content_id)
            mode = "soft"
        else:
            result = await self._repository.delete(content_id)
            mode = "hard"

        if result.ok:
            logger.info("Content %s %s-deleted by %s", content_id, mode, user_id)
        return result

    # ── Queries ──────────────────────────────────────────────────────

    async def get_content(
        self, content_id: str, user_id: str, role: UserRole
    ) -> Result[Content]:
        """Published content is public; anything else needs edit rights."""
        loaded = await self._load(content_id)
        if not loaded.ok:
            return loaded
        content = loaded.value

        if content.state.is_published() or self._permissions.can_edit(content, user_id, role):
            return loaded
        return Result.failure(PermissionDeniedError("view content"))

    async def get_content_by_author(
        self, author_id: str, requesting_user_id: str, role: UserRole
    ) -> Result[list[Content]]:
        # Authors see their own content, editors and admins see everyone's
        if author_id != requesting_user_id and not role.is_staff:
            return Result.failure(PermissionDeniedError("view other users' content"))
        return await self._repository.find_by_author(author_id)

    async def get_published_content(
        self, page: int = 1, limit: int = 10
    ) -> Result[list[Content]]:
        """Return one 1-indexed page of published content."""
        if page < 1 or limit < 1:
            return Result.failure(
                InvalidInputError("Page and limit must be positive integers")
            )
        offset = (page - 1) * limit
        return await self._repository.find_published(
            ContentSearchCriteria(limit=limit, offset=offset)
        )

    async def get_featured_content(self) -> Result[list[Content]]:
        return await self._repository.find_featured()

    async def can_add_featured_content(self) -> Result[bool]:
        """Advisory cap check; callers consult it before featuring new content."""
        counted = await self._repository.count_featured()
        if not counted.ok:
            return Result.failure(counted.error)
        return Result.success(counted.value < FEATURED_CONTENT_LIMIT)
