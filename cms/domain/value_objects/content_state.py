"""Value object for the content lifecycle state."""

from enum import Enum

from cms.domain.exceptions import InvalidStateError
from cms.domain.result import Result


class ContentState(str, Enum):
    """Lifecycle states of a piece of content.

    Members double as the factory helpers (``ContentState.DRAFT`` etc.);
    ``create`` is the validating entry point for untrusted tags.
    """

    DRAFT = "draft"
    PUBLISHED = "published"
    PRIVATE = "private"
    ARCHIVED = "archived"

    @classmethod
    def create(cls, tag: str) -> Result["ContentState"]:
        """Parse a raw tag, failing with InvalidStateError for unknown values."""
        try:
            return Result.success(cls(tag))
        except ValueError:
            return Result.failure(InvalidStateError(str(tag)))

    def is_draft(self) -> bool:
        return self is ContentState.DRAFT

    def is_published(self) -> bool:
        return self is ContentState.PUBLISHED

    def is_private(self) -> bool:
        return self is ContentState.PRIVATE

    def is_archived(self) -> bool:
        return self is ContentState.ARCHIVED

    def can_transition_to(self, target: "ContentState") -> bool:
        # Archived content can never be published again.
        if self is ContentState.ARCHIVED and target is ContentState.PUBLISHED:
            return False
        return True

    def equals(self, other: "ContentState") -> bool:
        return self.value == other.value
