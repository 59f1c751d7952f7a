"""Unit tests for the Content aggregate."""

import pytest

from cms.domain.entities import Content
from cms.domain.exceptions import IllegalTransitionError, InvalidInputError
from cms.domain.value_objects import ContentState

BODY = "x" * 120


def _create(title: str = "Test Content", body: str = BODY, **kwargs):
    return Content.create(id="content-1", title=title, body=body, author_id="user-1", **kwargs)


class TestCreate:
    @pytest.mark.parametrize("length", [5, 6, 50, 99, 100])
    def test_accepts_valid_title_lengths(self, length: int):
        result = _create(title="t" * length)
        assert result.ok
        assert result.value.title == "t" * length

    @pytest.mark.parametrize("length", [0, 4, 101, 150])
    def test_rejects_invalid_title_lengths(self, length: int):
        result = _create(title="t" * length)
        assert not result.ok
        assert isinstance(result.error, InvalidInputError)
        assert result.error.field == "title"

    @pytest.mark.parametrize("length", [100, 101, 5000])
    def test_accepts_valid_body_lengths(self, length: int):
        assert _create(body="b" * length).ok

    def test_rejects_short_body(self):
        result = _create(body="b" * 99)
        assert not result.ok
        assert isinstance(result.error, InvalidInputError)
        assert result.error.field == "body"

    def test_defaults_to_draft_without_published_at(self):
        content = _create().value
        assert content.state is ContentState.DRAFT
        assert content.published_at is None
        assert content.updated_at is not None

    def test_auto_generates_excerpt_from_body(self):
        body = "a" * 100 + "b" * 100
        content = _create(body=body).value
        assert content.excerpt == body[:150]

    def test_uses_provided_excerpt(self):
        content = _create(excerpt="Hand written summary").value
        assert content.excerpt == "Hand written summary"

    def test_empty_excerpt_counts_as_missing(self):
        content = _create(excerpt="").value
        assert content.excerpt == BODY[:150]


class TestMutators:
    def test_update_title_returns_new_instance(self):
        original = _create().value
        result = original.update_title("A Better Title")
        assert result.ok
        assert result.value.title == "A Better Title"
        assert result.value is not original
        assert original.title == "Test Content"

    def test_invalid_title_leaves_original_untouched(self):
        original = _create().value
        result = original.update_title("bad")
        assert not result.ok
        assert isinstance(result.error, InvalidInputError)
        assert original.title == "Test Content"

    def test_instances_are_frozen(self):
        content = _create().value
        with pytest.raises(AttributeError):
            content.title = "Mutated title"  # type: ignore[misc]

    def test_update_body_regenerates_auto_excerpt(self):
        original = _create(body="a" * 200).value
        new_body = "n" * 180
        updated = original.update_body(new_body).value
        assert updated.body == new_body
        assert updated.excerpt == new_body[:150]

    def test_update_body_keeps_hand_written_excerpt(self):
        original = _create(excerpt="Custom excerpt").value
        updated = original.update_body("n" * 180).value
        assert updated.excerpt == "Custom excerpt"

    def test_update_body_uses_exact_prefix_comparison(self):
        # An excerpt shorter than the old body prefix is treated as hand-written
        body = "a" * 200
        original = _create(body=body, excerpt=body[:100]).value
        updated = original.update_body("n" * 180).value
        assert updated.excerpt == body[:100]

    def test_update_body_rejects_short_body(self):
        original = _create().value
        result = original.update_body("short")
        assert not result.ok
        assert isinstance(result.error, InvalidInputError)
        assert original.body == BODY

    def test_update_excerpt_accepts_anything(self):
        original = _create().value
        assert original.update_excerpt("").value.excerpt == ""

    def test_mutation_refreshes_updated_at(self):
        original = _create().value
        updated = original.update_excerpt("Fresh excerpt").value
        assert updated.updated_at >= original.updated_at


class TestStateChanges:
    def test_publish_sets_published_at(self):
        published = _create().value.publish().value
        assert published.state is ContentState.PUBLISHED
        assert published.published_at is not None

    def test_published_at_is_set_once(self):
        first = _create().value.publish().value
        stamped = first.published_at

        cycled = first.unpublish().value.publish().value.unpublish().value.publish().value
        assert cycled.state is ContentState.PUBLISHED
        assert cycled.published_at == stamped

    def test_published_at_survives_archiving(self):
        published = _create().value.publish().value
        archived = published.archive().value
        assert archived.state is ContentState.ARCHIVED
        assert archived.published_at == published.published_at

    def test_non_publish_transitions_leave_published_at_empty(self):
        private = _create().value.unpublish().value
        assert private.state is ContentState.PRIVATE
        assert private.published_at is None

    def test_archived_content_cannot_be_published(self):
        archived = _create().value.archive().value
        result = archived.change_state(ContentState.PUBLISHED)
        assert not result.ok
        assert isinstance(result.error, IllegalTransitionError)
        assert "archived" in str(result.error)
        assert "published" in str(result.error)
        assert archived.state is ContentState.ARCHIVED

    def test_archived_content_can_return_to_draft(self):
        archived = _create().value.archive().value
        assert archived.change_state(ContentState.DRAFT).value.state is ContentState.DRAFT

    def test_self_transition_is_allowed(self):
        draft = _create().value
        assert draft.change_state(ContentState.DRAFT).ok


def test_is_owned_by():
    content = _create().value
    assert content.is_owned_by("user-1")
    assert not content.is_owned_by("user-2")
