from .content_repository import (
    FEATURED_CONTENT_LIMIT,
    ContentRepository,
    ContentSearchCriteria,
)

__all__ = [
    "FEATURED_CONTENT_LIMIT",
    "ContentRepository",
    "ContentSearchCriteria",
]
