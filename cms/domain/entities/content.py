"""Domain entity for editorial content — the aggregate root of the CMS."""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from cms.domain.exceptions import IllegalTransitionError, InvalidInputError
from cms.domain.result import Result
from cms.domain.value_objects import ContentState

TITLE_MIN_LENGTH = 5
TITLE_MAX_LENGTH = 100
BODY_MIN_LENGTH = 100
EXCERPT_LENGTH = 150


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _validate_title(title: str) -> InvalidInputError | None:
    if not TITLE_MIN_LENGTH <= len(title) <= TITLE_MAX_LENGTH:
        return InvalidInputError(
            f"Title must be between {TITLE_MIN_LENGTH} and {TITLE_MAX_LENGTH} characters",
            field="title",
        )
    return None


def _validate_body(body: str) -> InvalidInputError | None:
    if len(body) < BODY_MIN_LENGTH:
        return InvalidInputError(
            f"Body must be at least {BODY_MIN_LENGTH} characters",
            field="body",
        )
    return None


@dataclass(frozen=True)
class Content:
    """A piece of editorial content.

    Instances are immutable: every mutator returns a ``Result`` holding a
    new instance, or a failure while the original stays untouched. Build
    new content through ``Content.create`` so the field invariants are
    checked; the plain constructor is reserved for rehydration from storage.
    """

    id: str
    title: str
    body: str
    author_id: str
    state: ContentState
    excerpt: str
    published_at: datetime | None = None
    updated_at: datetime = field(default_factory=_now)

    @classmethod
    def create(
        cls,
        id: str,
        title: str,
        body: str,
        author_id: str,
        state: ContentState = ContentState.DRAFT,
        excerpt: str | None = None,
        published_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> Result["Content"]:
        """Validate the fields and build a new Content.

        The excerpt defaults to the first 150 characters of the body when
        it is missing or empty.
        """
        error = _validate_title(title) or _validate_body(body)
        if error is not None:
            return Result.failure(error)

        return Result.success(
            cls(
                id=id,
                title=title,
                body=body,
                author_id=author_id,
                state=state,
                excerpt=excerpt or body[:EXCERPT_LENGTH],
                published_at=published_at,
                updated_at=updated_at or _now(),
            )
        )

    def update_title(self, new_title: str) -> Result["Content"]:
        error = _validate_title(new_title)
        if error is not None:
            return Result.failure(error)
        return Result.success(replace(self, title=new_title, updated_at=_now()))

    def update_body(self, new_body: str) -> Result["Content"]:
        """Replace the body, regenerating the excerpt only if it was auto-derived."""
        error = _validate_body(new_body)
        if error is not None:
            return Result.failure(error)

        excerpt = self.excerpt
        if excerpt == self.body[:EXCERPT_LENGTH]:
            excerpt = new_body[:EXCERPT_LENGTH]

        return Result.success(
            replace(self, body=new_body, excerpt=excerpt, updated_at=_now())
        )

    def update_excerpt(self, new_excerpt: str) -> Result["Content"]:
        return Result.success(replace(self, excerpt=new_excerpt, updated_at=_now()))

    def change_state(self, target: ContentState) -> Result["Content"]:
        """Move to ``target`` if the state machine allows it.

        ``published_at`` is stamped on the first entry into ``published``
        and kept as-is on every later transition.
        """
        if not self.state.can_transition_to(target):
            return Result.failure(
                IllegalTransitionError(self.state.value, target.value)
            )

        now = _now()
        published_at = self.published_at
        if target.is_published() and published_at is None:
            published_at = now

        return Result.success(
            replace(self, state=target, published_at=published_at, updated_at=now)
        )

    def publish(self) -> Result["Content"]:
        return self.change_state(ContentState.PUBLISHED)

    def unpublish(self) -> Result["Content"]:
        return self.change_state(ContentState.PRIVATE)

    def archive(self) -> Result["Content"]:
        return self.change_state(ContentState.ARCHIVED)

    def is_owned_by(self, user_id: str) -> bool:
        return self.author_id == user_id
