from .content import (
    ContentCreate,
    ContentResponse,
    ContentUpdate,
    FeaturedAvailabilityResponse,
)

__all__ = [
    "ContentCreate",
    "ContentResponse",
    "ContentUpdate",
    "FeaturedAvailabilityResponse",
]
