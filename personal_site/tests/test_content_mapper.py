"""Tests for raw entry → Post mapping."""

from datetime import date

import pytest

from personal_site.services.content_mapper import EXCERPT_PLACEHOLDER, effective_date, map_to_post
from personal_site.tests.conftest import make_entry, rich_text


class TestMapToPost:
    def test_copies_core_fields(self):
        entry = make_entry(title="Hello", slug="hello", sys={"id": "abc123"})
        post = map_to_post(entry)
        assert post.title == "Hello"
        assert post.slug == "hello"
        assert post.content == rich_text()
        assert post.published is True
        assert post.entry_id == "abc123"
        assert post.source == "Contentful"

    def test_minimal_entry_defaults(self):
        """No date, excerpt, tags or featured: creation day, placeholder, no tags and False."""
        entry = make_entry(drop=("publishedDate", "excerpt"),
                           sys={"createdAt": "2024-03-05T23:59:59.000Z"})
        post = map_to_post(entry)
        assert post.date == date(2024, 3, 5)
        assert post.excerpt == EXCERPT_PLACEHOLDER
        assert post.tags == ()
        assert post.featured is False

    def test_blank_excerpt_uses_placeholder(self):
        assert map_to_post(make_entry(excerpt="  ")).excerpt == EXCERPT_PLACEHOLDER

    def test_featured_flag(self):
        assert map_to_post(make_entry(featured=True)).featured is True

    def test_idempotent(self):
        entry = make_entry(tags="systems", featured=True)
        assert map_to_post(entry) == map_to_post(entry)


class TestDates:
    def test_plain_date_field(self):
        assert effective_date(make_entry(publishedDate="2024-01-15")) == date(2024, 1, 15)

    def test_datetime_field_truncated(self):
        entry = make_entry(publishedDate="2024-01-15T22:30:00.000+01:00")
        assert effective_date(entry) == date(2024, 1, 15)

    def test_unparseable_field_falls_back_to_created(self):
        entry = make_entry(publishedDate="soon", sys={"createdAt": "2023-12-31T08:00:00Z"})
        assert effective_date(entry) == date(2023, 12, 31)

    def test_falls_back_to_published_at(self):
        entry = make_entry(drop=("publishedDate", "createdAt"),
                           sys={"publishedAt": "2024-04-01T00:00:00Z"})
        assert effective_date(entry) == date(2024, 4, 1)

    def test_no_usable_date_raises(self):
        entry = make_entry(drop=("publishedDate", "createdAt"), sys={"publishedAt": "yes"})
        with pytest.raises(ValueError):
            effective_date(entry)


class TestTags:
    def test_single_string_becomes_one_tag(self):
        assert map_to_post(make_entry(tags="product")).tags == ("product",)

    def test_blank_string_gives_no_tags(self):
        assert map_to_post(make_entry(tags=" ")).tags == ()

    def test_list_value_keeps_first_tag_only(self):
        assert map_to_post(make_entry(tags=["", 3, " growth ", "design"])).tags == ("growth",)

    def test_empty_list_gives_no_tags(self):
        assert map_to_post(make_entry(tags=["", "  "])).tags == ()

    def test_other_types_ignored(self):
        assert map_to_post(make_entry(tags={"name": "x"})).tags == ()
