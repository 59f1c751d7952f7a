"""SQLAlchemy ORM model for the Content entity."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from cms.infrastructure.database.base import Base


class ContentModel(Base):
    """ORM model — maps to the 'contents' table.

    ``deleted_at`` is the soft-delete tombstone; rows carrying it are
    invisible to every finder.
    """

    __tablename__ = "contents"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    author_id: Mapped[str] = mapped_column(String(255), nullable=False)
    state: Mapped[str] = mapped_column(String(20), nullable=False)
    excerpt: Mapped[str] = mapped_column(Text, nullable=False, default="")
    published_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    __table_args__ = (
        Index("ix_contents_author", "author_id"),
        Index("ix_contents_state_published", "state", "published_at"),
    )

    def __repr__(self) -> str:
        return f"<ContentModel(id={self.id}, title='{self.title}', state='{self.state}')>"
