"""FastAPI dependency injection — wires infrastructure to application layer.

One repository per process (cached), a fresh ContentService per request.
"""

import logging
from functools import lru_cache

from fastapi import Depends

from cms.config import get_settings
from cms.application.interfaces import ContentRepository
from cms.application.services import (
    ContentPermissions,
    ContentService,
    DefaultContentPermissions,
)
from cms.infrastructure.repositories import InMemoryContentRepository

logger = logging.getLogger(__name__)


@lru_cache
def get_content_repository() -> ContentRepository:
    """Provides the process-wide content repository for the configured backend."""
    settings = get_settings()

    if settings.repository_backend == "sqlalchemy":
        from cms.infrastructure.database import async_session_factory
        from cms.infrastructure.database.repositories import SQLAlchemyContentRepository

        logger.info("Using SQLAlchemy content repository")
        return SQLAlchemyContentRepository(async_session_factory)

    if settings.repository_backend != "memory":
        logger.warning(
            "Unknown repository backend '%s' — falling back to in-memory storage",
            settings.repository_backend,
        )
    return InMemoryContentRepository()


@lru_cache
def get_content_permissions() -> ContentPermissions:
    return DefaultContentPermissions()


async def get_content_service(
    repository: ContentRepository = Depends(get_content_repository),
    permissions: ContentPermissions = Depends(get_content_permissions),
) -> ContentService:
    """Provides a ContentService instance with its repository and policy wired up."""
    return ContentService(repository, permissions)
