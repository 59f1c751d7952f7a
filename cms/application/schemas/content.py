"""Pydantic DTOs (Data Transfer Objects) for the Content feature.

Length rules live in the domain entity, so the request schemas only
describe shape; violations come back as domain InvalidInputError.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from cms.domain.value_objects import ContentState


class ContentCreate(BaseModel):
    """Schema for creating new content owned by the caller."""

    title: str = Field(..., examples=["Getting Started"])
    body: str = Field(..., examples=["A body of at least one hundred characters..."])
    excerpt: str | None = None


class ContentUpdate(BaseModel):
    """Schema for updating existing content — all fields optional."""

    title: str | None = None
    body: str | None = None
    excerpt: str | None = None


class ContentResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    title: str
    body: str
    author_id: str
    state: ContentState
    excerpt: str
    published_at: datetime | None
    updated_at: datetime

    model_config = {"from_attributes": True}


class FeaturedAvailabilityResponse(BaseModel):
    """Whether another piece of content may be promoted to featured."""

    can_add: bool
