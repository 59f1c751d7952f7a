"""Shared fixtures for content tests."""

from collections.abc import Callable
from datetime import datetime

import pytest

from cms.application.services import ContentService, DefaultContentPermissions
from cms.domain.entities import Content
from cms.domain.value_objects import ContentState
from cms.infrastructure.repositories import InMemoryContentRepository

VALID_TITLE = "Test Content"
VALID_BODY = "x" * 120


@pytest.fixture
def make_content() -> Callable[..., Content]:
    """Build valid content, failing the test if the factory rejects it."""

    def _make(
        content_id: str = "content-1",
        author_id: str = "user-1",
        state: ContentState = ContentState.DRAFT,
        title: str = VALID_TITLE,
        body: str = VALID_BODY,
        excerpt: str | None = None,
        published_at: datetime | None = None,
    ) -> Content:
        result = Content.create(
            id=content_id,
            title=title,
            body=body,
            author_id=author_id,
            state=state,
            excerpt=excerpt,
            published_at=published_at,
        )
        assert result.ok, result.error
        return result.value

    return _make


@pytest.fixture
def repository() -> InMemoryContentRepository:
    return InMemoryContentRepository()


@pytest.fixture
def service(repository: InMemoryContentRepository) -> ContentService:
    return ContentService(repository, DefaultContentPermissions())
