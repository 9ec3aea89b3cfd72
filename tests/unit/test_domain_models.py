"""Unit tests for blog.domain.models — Comment, Order, Pageable, Page.

Coverage targets
----------------
- Comment: required fields, optional id, field constraints, BIGINT id range,
           createdDate alias, unknown fields ignored, frozen immutability
- Order.parse: single and multi-field keys, direction handling, unknown
               properties rejected
- Pageable: offset, constraints
- Page: total_pages, has_next / has_previous
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from blog.domain.models import (
    MAX_ID,
    Comment,
    Order,
    Page,
    Pageable,
    SortDirection,
    StoryRef,
    UserRef,
)


def _make_comment(**overrides: object) -> Comment:
    defaults: dict[str, object] = {
        "user": {"login": "alice"},
        "story": {"id": 7},
        "text": "Nice write-up.",
    }
    defaults.update(overrides)
    return Comment.model_validate(defaults)


# ---------------------------------------------------------------------------
# TestComment
# ---------------------------------------------------------------------------


class TestCommentCreation:
    def test_required_fields_stored(self) -> None:
        comment = _make_comment()
        assert comment.user == UserRef(login="alice")
        assert comment.story == StoryRef(id=7)
        assert comment.text == "Nice write-up."

    def test_id_defaults_to_none(self) -> None:
        assert _make_comment().id is None

    def test_id_is_preserved(self) -> None:
        assert _make_comment(id=42).id == 42

    def test_created_date_accepts_camel_case_alias(self) -> None:
        comment = _make_comment(createdDate="2026-10-19T10:00:00Z")
        assert comment.created_date == datetime(2026, 10, 19, 10, 0, tzinfo=timezone.utc)

    def test_created_date_accepts_field_name(self) -> None:
        comment = _make_comment(created_date="2026-10-19T10:00:00Z")
        assert comment.created_date is not None

    def test_unknown_fields_are_ignored(self) -> None:
        comment = _make_comment(votes=3, user={"login": "alice", "email": "a@example.com"})
        assert not hasattr(comment, "votes")
        assert comment.user.login == "alice"

    def test_serialises_with_camel_case_alias(self) -> None:
        dumped = _make_comment().model_dump(mode="json", by_alias=True)
        assert dumped == {
            "id": None,
            "user": {"login": "alice"},
            "story": {"id": 7},
            "text": "Nice write-up.",
            "createdDate": None,
        }


class TestCommentConstraints:
    def test_missing_text_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Comment.model_validate({"user": {"login": "alice"}, "story": {"id": 7}})

    def test_empty_text_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _make_comment(text="")

    def test_text_too_long_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _make_comment(text="x" * 2001)

    def test_text_at_max_length_accepted(self) -> None:
        assert len(_make_comment(text="x" * 2000).text) == 2000

    def test_missing_user_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Comment.model_validate({"story": {"id": 7}, "text": "hi"})

    def test_missing_story_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Comment.model_validate({"user": {"login": "alice"}, "text": "hi"})

    def test_empty_login_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _make_comment(user={"login": ""})

    def test_story_without_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _make_comment(story={})

    @pytest.mark.parametrize("value", [0, -1, MAX_ID + 1])
    def test_story_id_outside_bigint_range_rejected(self, value: int) -> None:
        with pytest.raises(ValidationError):
            StoryRef(id=value)

    @pytest.mark.parametrize("value", [0, -1, MAX_ID + 1])
    def test_comment_id_outside_bigint_range_rejected(self, value: int) -> None:
        with pytest.raises(ValidationError):
            _make_comment(id=value)

    def test_bigint_bounds_accepted(self) -> None:
        comment = _make_comment(id=1, story={"id": MAX_ID})
        assert comment.id == 1
        assert comment.story.id == MAX_ID


class TestCommentImmutability:
    def test_frozen(self) -> None:
        comment = _make_comment()
        with pytest.raises(ValidationError):
            comment.text = "edited"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# TestOrderParse
# ---------------------------------------------------------------------------


class TestOrderParse:
    def test_field_only_defaults_to_ascending(self) -> None:
        assert Order.parse("id") == [Order(column="id", direction=SortDirection.ASC)]

    def test_explicit_descending(self) -> None:
        assert Order.parse("id,desc") == [Order(column="id", direction=SortDirection.DESC)]

    def test_direction_is_case_insensitive(self) -> None:
        assert Order.parse("text,DESC")[0].direction is SortDirection.DESC

    def test_json_property_names_map_to_columns(self) -> None:
        assert Order.parse("createdDate")[0].column == "created_date"
        assert Order.parse("user.login")[0].column == "user_login"
        assert Order.parse("story.id")[0].column == "story_id"

    def test_trailing_direction_applies_to_every_field(self) -> None:
        orders = Order.parse("story.id,id,desc")
        assert [o.column for o in orders] == ["story_id", "id"]
        assert all(o.direction is SortDirection.DESC for o in orders)

    def test_empty_tokens_skipped(self) -> None:
        assert Order.parse("id,,asc") == [Order(column="id")]

    def test_empty_value_yields_no_orders(self) -> None:
        assert Order.parse("") == []

    def test_unknown_property_rejected(self) -> None:
        with pytest.raises(ValueError, match="password"):
            Order.parse("password,asc")


# ---------------------------------------------------------------------------
# TestPageable / TestPage
# ---------------------------------------------------------------------------


class TestPageable:
    def test_defaults(self) -> None:
        pageable = Pageable()
        assert (pageable.page, pageable.size, pageable.sort) == (0, 20, ())

    def test_offset(self) -> None:
        assert Pageable(page=3, size=10).offset == 30

    def test_negative_page_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Pageable(page=-1)

    def test_zero_size_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Pageable(size=0)


class TestPage:
    def test_total_pages_rounds_up(self) -> None:
        assert Page(content=[], total_elements=25, number=0, size=10).total_pages == 3

    def test_total_pages_zero_when_empty(self) -> None:
        assert Page(content=[], total_elements=0, number=0, size=10).total_pages == 0

    def test_middle_page_has_next_and_previous(self) -> None:
        page = Page(content=[], total_elements=25, number=1, size=10)
        assert page.has_next
        assert page.has_previous

    def test_first_page_has_no_previous(self) -> None:
        page = Page(content=[], total_elements=25, number=0, size=10)
        assert page.has_next
        assert not page.has_previous

    def test_last_page_has_no_next(self) -> None:
        page = Page(content=[], total_elements=25, number=2, size=10)
        assert not page.has_next
        assert page.has_previous
