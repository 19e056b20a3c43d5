"""Deterministic ordering and filtering of validated content entries.

Listing pages combine these helpers; for the homepage that is
``take(sort_by_recency(filter_published(entries)), limit)``, exposed as
:func:`homepage_listing`. Every helper returns a new list and leaves its input
untouched.
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import ContentEntry

EntryT = typ.TypeVar("EntryT", bound="ContentEntry")


def sort_by_recency(entries: cabc.Iterable[EntryT]) -> list[EntryT]:
    """Return ``entries`` newest first; same-day entries keep their input order."""
    # sorted() is stable, so reverse=True keeps ties in input order.
    return sorted(entries, key=lambda entry: entry.publication_date, reverse=True)


def filter_published(entries: cabc.Iterable[EntryT]) -> list[EntryT]:
    """Return the non-draft entries in their original order."""
    return [entry for entry in entries if not entry.draft]


def take(entries: cabc.Iterable[EntryT], n: int) -> list[EntryT]:
    """Return at most the first ``n`` entries.

    Raises
    ------
    ValueError
        If ``n`` is negative.
    """
    if n < 0:
        msg = f"take() requires a non-negative count, got {n}"
        raise ValueError(msg)
    return list(entries)[:n]


def homepage_listing(entries: cabc.Iterable[EntryT], limit: int) -> list[EntryT]:
    """Return the newest ``limit`` published entries for a homepage block."""
    return take(sort_by_recency(filter_published(entries)), limit)


__all__ = ["filter_published", "homepage_listing", "sort_by_recency", "take"]
