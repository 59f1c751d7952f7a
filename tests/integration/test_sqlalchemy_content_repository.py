"""Integration tests for the SQLAlchemy content repository on in-memory SQLite."""

from collections.abc import AsyncIterator
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from cms.application.interfaces import ContentSearchCriteria
from cms.application.services import ContentService, DefaultContentPermissions
from cms.domain.exceptions import EntityNotFoundError, InvalidOperationError
from cms.domain.value_objects import ContentState, UserRole
from cms.infrastructure.database import Base, build_session_factory
from cms.infrastructure.database.repositories import SQLAlchemyContentRepository

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest_asyncio.fixture
async def sql_repository() -> AsyncIterator[SQLAlchemyContentRepository]:
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield SQLAlchemyContentRepository(build_session_factory(engine))

    await engine.dispose()


@pytest.mark.asyncio
async def test_save_round_trips_the_entity(sql_repository, make_content):
    content = make_content(excerpt="Short summary")
    assert (await sql_repository.save(content)).ok

    found = (await sql_repository.find_by_id("content-1")).value
    assert found.title == content.title
    assert found.body == content.body
    assert found.excerpt == "Short summary"
    assert found.state is ContentState.DRAFT
    assert found.updated_at.tzinfo is not None


@pytest.mark.asyncio
async def test_save_updates_existing_row(sql_repository, make_content):
    content = make_content()
    await sql_repository.save(content)
    await sql_repository.save(content.publish().value)

    found = (await sql_repository.find_by_id("content-1")).value
    assert found.state is ContentState.PUBLISHED
    assert found.published_at is not None
    assert len((await sql_repository.find_by_author("user-1")).value) == 1


@pytest.mark.asyncio
async def test_find_published_window_and_pagination(sql_repository, make_content):
    for i in range(4):
        await sql_repository.save(
            make_content(
                f"c{i}",
                state=ContentState.PUBLISHED,
                published_at=BASE_TIME + timedelta(days=i),
            )
        )
    await sql_repository.save(make_content("draft", state=ContentState.DRAFT))

    window = ContentSearchCriteria(
        published_after=BASE_TIME + timedelta(days=1),
        published_before=BASE_TIME + timedelta(days=2),
    )
    assert {c.id for c in (await sql_repository.find_published(window)).value} == {"c1", "c2"}

    page = await sql_repository.find_published(ContentSearchCriteria(offset=1, limit=2))
    assert len(page.value) == 2


@pytest.mark.asyncio
async def test_find_featured_newest_first_capped(sql_repository, make_content):
    for i in range(6):
        await sql_repository.save(
            make_content(
                f"c{i}",
                state=ContentState.PUBLISHED,
                published_at=BASE_TIME + timedelta(hours=i),
            )
        )

    featured = (await sql_repository.find_featured()).value
    assert [c.id for c in featured] == ["c5", "c4", "c3", "c2", "c1"]
    assert (await sql_repository.count_featured()).value == 5


@pytest.mark.asyncio
async def test_search_by_state(sql_repository, make_content):
    await sql_repository.save(make_content("c1", state=ContentState.PRIVATE))
    await sql_repository.save(make_content("c2", state=ContentState.DRAFT))

    result = await sql_repository.search(ContentSearchCriteria(state=ContentState.PRIVATE))
    assert [c.id for c in result.value] == ["c1"]


@pytest.mark.asyncio
async def test_soft_delete_hides_published(sql_repository, make_content):
    await sql_repository.save(make_content(state=ContentState.PUBLISHED))

    assert (await sql_repository.soft_delete("content-1")).ok
    assert (await sql_repository.find_by_id("content-1")).value is None
    assert (await sql_repository.exists("content-1")).value is False
    assert (await sql_repository.find_featured()).value == []


@pytest.mark.asyncio
async def test_delete_asymmetry(sql_repository, make_content):
    await sql_repository.save(make_content("pub", state=ContentState.PUBLISHED))
    await sql_repository.save(make_content("draft", state=ContentState.DRAFT))

    assert isinstance((await sql_repository.delete("pub")).error, InvalidOperationError)
    assert isinstance((await sql_repository.soft_delete("draft")).error, InvalidOperationError)

    assert (await sql_repository.delete("draft")).ok
    assert (await sql_repository.exists("draft")).value is False
    assert isinstance((await sql_repository.delete("draft")).error, EntityNotFoundError)
    assert isinstance((await sql_repository.soft_delete("missing")).error, EntityNotFoundError)


@pytest.mark.asyncio
async def test_service_runs_against_sql_backend(sql_repository, make_content):
    service = ContentService(sql_repository, DefaultContentPermissions())
    await sql_repository.save(make_content())

    published = await service.publish_content("content-1", "user-1", UserRole.AUTHOR)
    assert published.ok

    deleted = await service.delete_content("content-1", "admin", UserRole.ADMIN)
    assert deleted.ok
    assert (await sql_repository.exists("content-1")).value is False


@pytest.mark.asyncio
async def test_offset_timestamps_are_stored_as_utc(sql_repository, make_content):
    plus_two = timezone(timedelta(hours=2))
    published_at = datetime(2024, 1, 1, 12, tzinfo=plus_two)
    await sql_repository.save(
        make_content(state=ContentState.PUBLISHED, published_at=published_at)
    )

    found = (await sql_repository.find_by_id("content-1")).value
    assert found.published_at == published_at
    assert found.published_at.utcoffset() == timedelta(0)
    assert found.published_at.hour == 10

    # 11:00 UTC expressed as +02:00 lies after the stored 10:00 UTC
    window = ContentSearchCriteria(published_after=datetime(2024, 1, 1, 13, tzinfo=plus_two))
    assert (await sql_repository.find_published(window)).value == []

    naive_window = ContentSearchCriteria(published_before=datetime(2024, 1, 1, 10))
    assert [c.id for c in (await sql_repository.find_published(naive_window)).value] == [
        "content-1"
    ]


@pytest.mark.asyncio
async def test_saving_soft_deleted_content_keeps_it_hidden(sql_repository, make_content):
    content = make_content(state=ContentState.PUBLISHED)
    await sql_repository.save(content)
    await sql_repository.soft_delete("content-1")

    assert (await sql_repository.save(content)).ok
    assert (await sql_repository.find_by_id("content-1")).value is None
    assert (await sql_repository.exists("content-1")).value is False
