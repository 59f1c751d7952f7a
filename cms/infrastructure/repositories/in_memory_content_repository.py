"""In-memory Content repository — reference implementation of the port.

Used as the default backend and as the store behind unit tests. Map
operations are atomic under asyncio, check-then-act sequences are not.
"""

from datetime import datetime, timezone

from cms.application.interfaces import (
    FEATURED_CONTENT_LIMIT,
    ContentRepository,
    ContentSearchCriteria,
)
from cms.domain.entities import Content
from cms.domain.exceptions import EntityNotFoundError, InvalidOperationError
from cms.domain.result import Result


def _paginate(contents: list[Content], criteria: ContentSearchCriteria) -> list[Content]:
    if criteria.offset:
        contents = contents[criteria.offset :]
    if criteria.limit:
        contents = contents[: criteria.limit]
    return contents


def _as_utc(value: datetime) -> datetime:
    # Naive values are taken to be UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _within_window(content: Content, criteria: ContentSearchCriteria) -> bool:
    if criteria.published_after is None and criteria.published_before is None:
        return True
    if content.published_at is None:
        return False
    published_at = _as_utc(content.published_at)
    if criteria.published_after is not None and published_at < _as_utc(criteria.published_after):
        return False
    if criteria.published_before is not None and published_at > _as_utc(criteria.published_before):
        return False
    return True


def _published_sort_key(content: Content) -> float:
    if content.published_at is None:
        return float("-inf")
    return _as_utc(content.published_at).timestamp()


class InMemoryContentRepository(ContentRepository):
    """Implements the ContentRepository port with a dict and a tombstone set."""

    def __init__(self):
        self._contents: dict[str, Content] = {}
        self._deleted: set[str] = set()

    def _visible(self) -> list[Content]:
        return [c for c in self._contents.values() if c.id not in self._deleted]

    def _get_live(self, content_id: str) -> Content | None:
        if content_id in self._deleted:
            return None
        return self._contents.get(content_id)

    async def find_by_id(self, content_id: str) -> Result[Content | None]:
        return Result.success(self._get_live(content_id))

    async def find_by_author(self, author_id: str) -> Result[list[Content]]:
        return Result.success([c for c in self._visible() if c.author_id == author_id])

    async def find_published(
        self, criteria: ContentSearchCriteria | None = None
    ) -> Result[list[Content]]:
        contents = [c for c in self._visible() if c.state.is_published()]
        if criteria is not None:
            if criteria.author_id is not None:
                contents = [c for c in contents if c.author_id == criteria.author_id]
            contents = [c for c in contents if _within_window(c, criteria)]
            contents = _paginate(contents, criteria)
        return Result.success(contents)

    async def find_featured(self) -> Result[list[Content]]:
        published = await self.find_published()
        if not published.ok:
            return published

        featured = sorted(published.value, key=_published_sort_key, reverse=True)
        return Result.success(featured[:FEATURED_CONTENT_LIMIT])

    async def search(self, criteria: ContentSearchCriteria) -> Result[list[Content]]:
        contents = self._visible()
        if criteria.author_id is not None:
            contents = [c for c in contents if c.author_id == criteria.author_id]
        if criteria.state is not None:
            contents = [c for c in contents if c.state.equals(criteria.state)]
        contents = [c for c in contents if _within_window(c, criteria)]
        return Result.success(_paginate(contents, criteria))

    async def save(self, content: Content) -> Result[None]:
        self._contents[content.id] = content
        return Result.success()

    async def soft_delete(self, content_id: str) -> Result[None]:
        content = self._get_live(content_id)
        if content is None:
            return Result.failure(EntityNotFoundError("Content", content_id))
        if not content.state.is_published():
            return Result.failure(
                InvalidOperationError("Only published content can be soft deleted")
            )

        self._deleted.add(content_id)
        return Result.success()

    async def delete(self, content_id: str) -> Result[None]:
        content = self._get_live(content_id)
        if content is None:
            return Result.failure(EntityNotFoundError("Content", content_id))
        if content.state.is_published():
            return Result.failure(
                InvalidOperationError("Published content cannot be hard deleted")
            )

        del self._contents[content_id]
        return Result.success()

    async def count_featured(self) -> Result[int]:
        featured = await self.find_featured()
        if not featured.ok:
            return Result.failure(featured.error)
        return Result.success(len(featured.value))

    async def exists(self, content_id: str) -> Result[bool]:
        return Result.success(self._get_live(content_id) is not None)

    # Test helpers

    def clear(self) -> None:
        self._contents.clear()
        self._deleted.clear()

    def get_all(self) -> list[Content]:
        return self._visible()
