"""Unit tests for listing helpers: recency order, draft filtering, and limits."""

from __future__ import annotations

import datetime as dt

import pytest

from yakitori_pages.content import (
    BlogPost,
    ContentEntry,
    filter_published,
    homepage_listing,
    sort_by_recency,
    take,
    validate,
)


def _post(date: str, slug: str, *, draft: bool = False) -> BlogPost:
    return BlogPost(
        title=slug,
        description=f"{slug} description",
        publication_date=dt.date.fromisoformat(date),
        draft=draft,
        slug=slug,
    )


def _slugs(entries: list[ContentEntry]) -> list[str | None]:
    return [entry.slug for entry in entries]


def test_sort_by_recency_is_stable_for_ties() -> None:
    """Same-day entries keep their input order behind newer ones."""
    entries = [
        _post("2024-01-01", "first"),
        _post("2024-03-01", "newest"),
        _post("2024-01-01", "third"),
    ]
    ordered = sort_by_recency(entries)
    assert _slugs(ordered) == ["newest", "first", "third"], (
        f"unexpected order {_slugs(ordered)!r}"
    )


def test_sort_by_recency_leaves_input_untouched() -> None:
    """Sorting returns a new list."""
    entries = [_post("2024-01-01", "a"), _post("2024-02-01", "b")]
    sort_by_recency(entries)
    assert _slugs(entries) == ["a", "b"]


def test_filter_published_drops_drafts_in_order() -> None:
    """Only non-draft entries survive, in their original order."""
    entries = [
        _post("2024-01-01", "draft-a", draft=True),
        _post("2024-01-02", "live"),
        _post("2024-01-03", "draft-b", draft=True),
    ]
    assert _slugs(filter_published(entries)) == ["live"]


def test_take_zero_is_empty() -> None:
    """A limit of zero yields nothing rather than an error."""
    assert take([_post("2024-01-01", "a")], 0) == []


def test_take_more_than_available_returns_everything() -> None:
    """A limit beyond the input length returns the input unchanged."""
    entries = [_post("2024-01-01", "a"), _post("2024-01-02", "b")]
    assert take(entries, 10) == entries


def test_take_keeps_existing_order() -> None:
    """Take does not reorder."""
    entries = [
        _post("2024-01-01", "a"),
        _post("2024-05-01", "b"),
        _post("2024-03-01", "c"),
    ]
    assert _slugs(take(entries, 2)) == ["a", "b"]


def test_take_rejects_negative_counts() -> None:
    """Negative limits are a programming error."""
    with pytest.raises(ValueError, match="non-negative"):
        take([], -1)


def test_homepage_listing_end_to_end() -> None:
    """Validated front matter flows through filter, sort, and limit."""
    raw = [
        {"title": "October", "description": "d", "date": "2024-10-01"},
        {"title": "Draft", "description": "d", "date": "2024-09-15", "draft": True},
        {"title": "September", "description": "d", "date": "2024-09-20"},
    ]
    entries = [validate(record) for record in raw]
    assert all(isinstance(entry, BlogPost) for entry in entries)
    listing = homepage_listing(entries, 5)  # type: ignore[arg-type]
    assert [entry.publication_date.isoformat() for entry in listing] == [
        "2024-10-01",
        "2024-09-20",
    ], f"unexpected homepage listing {listing!r}"
