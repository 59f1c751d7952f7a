"""Abstract repository interface (port) for Content persistence.

Every implementation must honour the delete asymmetry: published content
can only be soft-deleted, non-published content can only be hard-deleted.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from cms.domain.entities import Content
from cms.domain.result import Result
from cms.domain.value_objects import ContentState

FEATURED_CONTENT_LIMIT = 5


@dataclass(frozen=True)
class ContentSearchCriteria:
    """Optional filters and pagination for content queries.

    ``offset`` is applied before ``limit``; a falsy value applies neither.
    The publish window is inclusive on both ends.
    """

    author_id: str | None = None
    state: ContentState | None = None
    published_after: datetime | None = None
    published_before: datetime | None = None
    limit: int | None = None
    offset: int | None = None


class ContentRepository(ABC):
    """Port for content persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def find_by_id(self, content_id: str) -> Result[Content | None]:
        """Retrieve content by ID; success(None) if absent or soft-deleted."""
        ...

    @abstractmethod
    async def find_by_author(self, author_id: str) -> Result[list[Content]]:
        """Retrieve all non-deleted content owned by an author."""
        ...

    @abstractmethod
    async def find_published(
        self, criteria: ContentSearchCriteria | None = None
    ) -> Result[list[Content]]:
        """Retrieve published content, optionally filtered and paginated.

        Only ``author_id``, the publish window, ``offset`` and ``limit`` of
        the criteria apply.
        """
        ...

    @abstractmethod
    async def find_featured(self) -> Result[list[Content]]:
        """Retrieve the most recently published content (max 5), newest first."""
        ...

    @abstractmethod
    async def search(self, criteria: ContentSearchCriteria) -> Result[list[Content]]:
        """Retrieve non-deleted content matching the criteria."""
        ...

    @abstractmethod
    async def save(self, content: Content) -> Result[None]:
        """Create or update content, keyed by its ID."""
        ...

    @abstractmethod
    async def soft_delete(self, content_id: str) -> Result[None]:
        """Hide published content from every finder while keeping the record."""
        ...

    @abstractmethod
    async def delete(self, content_id: str) -> Result[None]:
        """Physically remove non-published content."""
        ...

    @abstractmethod
    async def count_featured(self) -> Result[int]:
        """Count the featured content."""
        ...

    @abstractmethod
    async def exists(self, content_id: str) -> Result[bool]:
        """Check whether content is present and not deleted."""
        ...
