"""Concrete repository implementation for Content backed by SQLAlchemy."""

import logging
from datetime import datetime, timezone

from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from cms.application.interfaces import (
    FEATURED_CONTENT_LIMIT,
    ContentRepository,
    ContentSearchCriteria,
)
from cms.domain.entities import Content
from cms.domain.exceptions import (
    EntityNotFoundError,
    InvalidOperationError,
    StorageError,
)
from cms.domain.result import Result
from cms.domain.value_objects import ContentState
from cms.infrastructure.database.models import ContentModel

logger = logging.getLogger(__name__)


def _as_utc(value: datetime | None) -> datetime | None:
    """Normalise to aware UTC. Naive values are taken to be UTC already.

    SQLite drops the offset on write, so every value is converted before it
    reaches the database and relabelled when it comes back.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _apply_criteria(stmt: Select, criteria: ContentSearchCriteria) -> Select:
    if criteria.author_id is not None:
        stmt = stmt.where(ContentModel.author_id == criteria.author_id)
    if criteria.published_after is not None:
        stmt = stmt.where(ContentModel.published_at >= _as_utc(criteria.published_after))
    if criteria.published_before is not None:
        stmt = stmt.where(ContentModel.published_at <= _as_utc(criteria.published_before))
    return stmt


def _paginate(stmt: Select, criteria: ContentSearchCriteria) -> Select:
    if criteria.offset:
        stmt = stmt.offset(criteria.offset)
    if criteria.limit:
        stmt = stmt.limit(criteria.limit)
    return stmt


class SQLAlchemyContentRepository(ContentRepository):
    """Implements the ContentRepository port using SQLAlchemy async sessions.

    Holds a session factory rather than a session so a single instance can
    serve the whole process; each operation runs in its own session.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    def _to_entity(self, model: ContentModel) -> Content:
        """Map ORM model → domain entity."""
        return Content(
            id=model.id,
            title=model.title,
            body=model.body,
            author_id=model.author_id,
            state=ContentState(model.state),
            excerpt=model.excerpt,
            published_at=_as_utc(model.published_at),
            updated_at=_as_utc(model.updated_at),
        )

    def _to_model(self, entity: Content) -> ContentModel:
        """Map domain entity → ORM model (for creation)."""
        return ContentModel(
            id=entity.id,
            title=entity.title,
            body=entity.body,
            author_id=entity.author_id,
            state=entity.state.value,
            excerpt=entity.excerpt,
            published_at=_as_utc(entity.published_at),
            updated_at=_as_utc(entity.updated_at),
        )

    def _storage_failure(self, operation: str, exc: SQLAlchemyError) -> Result:
        logger.exception("Content storage operation '%s' failed", operation)
        return Result.failure(StorageError(operation, str(exc)))

    @staticmethod
    def _live() -> Select:
        return select(ContentModel).where(ContentModel.deleted_at.is_(None))

    async def _fetch_all(self, stmt: Select) -> list[Content]:
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return [self._to_entity(row) for row in result.scalars().all()]

    async def find_by_id(self, content_id: str) -> Result[Content | None]:
        try:
            async with self._session_factory() as session:
                model = await session.get(ContentModel, content_id)
                if model is None or model.deleted_at is not None:
                    return Result.success(None)
                return Result.success(self._to_entity(model))
        except SQLAlchemyError as exc:
            return self._storage_failure("find_by_id", exc)

    async def find_by_author(self, author_id: str) -> Result[list[Content]]:
        stmt = self._live().where(ContentModel.author_id == author_id)
        try:
            return Result.success(await self._fetch_all(stmt))
        except SQLAlchemyError as exc:
            return self._storage_failure("find_by_author", exc)

    async def find_published(
        self, criteria: ContentSearchCriteria | None = None
    ) -> Result[list[Content]]:
        stmt = self._live().where(ContentModel.state == ContentState.PUBLISHED.value)
        if criteria is not None:
            stmt = _apply_criteria(stmt, criteria)
        stmt = stmt.order_by(ContentModel.published_at.desc().nulls_last(), ContentModel.id)
        if criteria is not None:
            stmt = _paginate(stmt, criteria)
        try:
            return Result.success(await self._fetch_all(stmt))
        except SQLAlchemyError as exc:
            return self._storage_failure("find_published", exc)

    async def find_featured(self) -> Result[list[Content]]:
        stmt = (
            self._live()
            .where(ContentModel.state == ContentState.PUBLISHED.value)
            .order_by(ContentModel.published_at.desc().nulls_last(), ContentModel.id)
            .limit(FEATURED_CONTENT_LIMIT)
        )
        try:
            return Result.success(await self._fetch_all(stmt))
        except SQLAlchemyError as exc:
            return self._storage_failure("find_featured", exc)

    async def search(self, criteria: ContentSearchCriteria) -> Result[list[Content]]:
        stmt = _apply_criteria(self._live(), criteria)
        if criteria.state is not None:
            stmt = stmt.where(ContentModel.state == criteria.state.value)
        stmt = _paginate(stmt.order_by(ContentModel.updated_at.desc(), ContentModel.id), criteria)
        try:
            return Result.success(await self._fetch_all(stmt))
        except SQLAlchemyError as exc:
            return self._storage_failure("search", exc)

    async def save(self, content: Content) -> Result[None]:
        try:
            async with self._session_factory() as session:
                model = await session.get(ContentModel, content.id)
                if model is None:
                    session.add(self._to_model(content))
                else:
                    model.title = content.title
                    model.body = content.body
                    model.state = content.state.value
                    model.excerpt = content.excerpt
                    model.published_at = _as_utc(content.published_at)
                    model.updated_at = _as_utc(content.updated_at)
                await session.commit()
            return Result.success()
        except SQLAlchemyError as exc:
            return self._storage_failure("save", exc)

    async def soft_delete(self, content_id: str) -> Result[None]:
        try:
            async with self._session_factory() as session:
                model = await session.get(ContentModel, content_id)
                if model is None or model.deleted_at is not None:
                    return Result.failure(EntityNotFoundError("Content", content_id))
                if model.state != ContentState.PUBLISHED.value:
                    return Result.failure(
                        InvalidOperationError("Only published content can be soft deleted")
                    )
                model.deleted_at = datetime.now(timezone.utc)
                await session.commit()
            return Result.success()
        except SQLAlchemyError as exc:
            return self._storage_failure("soft_delete", exc)

    async def delete(self, content_id: str) -> Result[None]:
        try:
            async with self._session_factory() as session:
                model = await session.get(ContentModel, content_id)
                if model is None or model.deleted_at is not None:
                    return Result.failure(EntityNotFoundError("Content", content_id))
                if model.state == ContentState.PUBLISHED.value:
                    return Result.failure(
                        InvalidOperationError("Published content cannot be hard deleted")
                    )
                await session.delete(model)
                await session.commit()
            return Result.success()
        except SQLAlchemyError as exc:
            return self._storage_failure("delete", exc)

    async def count_featured(self) -> Result[int]:
        featured = await self.find_featured()
        if not featured.ok:
            return Result.failure(featured.error)
        return Result.success(len(featured.value))

    async def exists(self, content_id: str) -> Result[bool]:
        found = await self.find_by_id(content_id)
        if not found.ok:
            return Result.failure(found.error)
        return Result.success(found.value is not None)
