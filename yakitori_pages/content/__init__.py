"""Content entry schema for blog posts and project write-ups.

The subpackage defines the front-matter contract every content file must meet
(:func:`validate`), the listing helpers used by index pages
(:func:`sort_by_recency`, :func:`filter_published`, :func:`take`), and a
reader that loads whole collections from disk (:func:`load_collection`).

Examples
--------
>>> from yakitori_pages.content import filter_published, sort_by_recency, validate
>>> posts = [
...     validate({"title": "A", "description": "a", "date": "2024-01-01"}),
...     validate({"title": "B", "description": "b", "date": "2024-03-01"}),
... ]
>>> [post.title for post in sort_by_recency(filter_published(posts))]
['B', 'A']
"""

from .listing import filter_published, homepage_listing, sort_by_recency, take
from .models import (
    BlogPost,
    ContentCollection,
    ContentDocument,
    ContentEntry,
    ContentKind,
    ContentSchemaError,
    FieldViolation,
    FrontMatterError,
    Project,
    SchemaViolation,
    ViolationReason,
)
from .schema import parse_publication_date, validate
from .source import load_collection, read_entry, split_front_matter

__all__ = [
    "BlogPost",
    "ContentCollection",
    "ContentDocument",
    "ContentEntry",
    "ContentKind",
    "ContentSchemaError",
    "FieldViolation",
    "FrontMatterError",
    "Project",
    "SchemaViolation",
    "ViolationReason",
    "filter_published",
    "homepage_listing",
    "load_collection",
    "parse_publication_date",
    "read_entry",
    "sort_by_recency",
    "split_front_matter",
    "take",
    "validate",
]
