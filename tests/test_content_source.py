"""Tests for reading content files and collections from disk."""

from __future__ import annotations

import datetime as dt
import typing as typ
from textwrap import dedent

import pytest

from yakitori_pages.content import (
    BlogPost,
    ContentDocument,
    ContentKind,
    FrontMatterError,
    Project,
    SchemaViolation,
    ViolationReason,
    load_collection,
    read_entry,
    split_front_matter,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


def _write(directory: Path, name: str, text: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(dedent(text).lstrip(), encoding="utf-8")
    return path


def test_split_front_matter_parses_yaml_and_body() -> None:
    """The block becomes a mapping and the rest is kept as the body."""
    front_matter, body = split_front_matter(
        "---\ntitle: Hello\ndate: 2024-10-01\ndraft: true\n---\n\n# Body\n"
    )
    assert front_matter["title"] == "Hello"
    assert front_matter["draft"] is True
    assert str(front_matter["date"]) == "2024-10-01"
    assert body == "# Body"


def test_split_front_matter_without_block() -> None:
    """Files with no block yield empty front matter."""
    assert split_front_matter("Just text\n") == ({}, "Just text")


def test_split_front_matter_keeps_slash_dates_as_strings() -> None:
    """Non-ISO dates stay strings so the schema can reject them."""
    front_matter, _ = split_front_matter("---\ndate: 10/01/2024\n---\n")
    assert front_matter["date"] == "10/01/2024"


@pytest.mark.parametrize(
    "text",
    ["---\ntitle: Hello\n", "---\n- a\n- b\n---\n", "---\ntitle: [unclosed\n---\n"],
)
def test_split_front_matter_rejects_bad_blocks(text: str) -> None:
    """Unterminated, non-mapping, or unparsable blocks raise."""
    with pytest.raises(FrontMatterError):
        split_front_matter(text)


def test_read_entry_uses_stem_as_slug(tmp_path: Path) -> None:
    """The file stem is carried onto the entry as its slug."""
    path = _write(
        tmp_path,
        "gas-golfing.md",
        """
        ---
        title: Gas golfing
        description: Shaving opcodes.
        date: 2024-09-20
        ---
        Body text.
        """,
    )
    document = read_entry(path, ContentKind.BLOG)
    assert isinstance(document, ContentDocument), f"unexpected {document!r}"
    assert document.entry == BlogPost(
        title="Gas golfing",
        description="Shaving opcodes.",
        publication_date=dt.date(2024, 9, 20),
        slug="gas-golfing",
    )
    assert document.body == "Body text."


def test_read_entry_reports_broken_front_matter(tmp_path: Path) -> None:
    """A malformed block becomes a violation tied to the file."""
    path = _write(tmp_path, "broken.md", "---\ntitle: Broken\n")
    violation = read_entry(path, ContentKind.BLOG)
    assert isinstance(violation, SchemaViolation)
    assert violation.source == path
    assert violation.fields == ("front matter",)
    assert violation.errors[0].reason is ViolationReason.UNPARSABLE


def test_load_collection_splits_documents_and_violations(tmp_path: Path) -> None:
    """Valid and invalid files are returned separately, in name order."""
    projects = tmp_path / "projects"
    _write(
        projects,
        "b-explorer.md",
        """
        ---
        title: Explorer
        description: A block explorer.
        date: 2024-05-01
        repoURL: https://github.com/Oni-giri/explorer
        ---
        """,
    )
    _write(
        projects,
        "a-bot.md",
        """
        ---
        title: Bot
        description: An arbitrage bot.
        date: 2024-04-01
        ---
        """,
    )
    _write(
        projects,
        "c-broken.md",
        """
        ---
        title: Broken
        date: 04/01/2024
        ---
        """,
    )
    _write(projects, "notes.txt", "ignored")

    collection = load_collection(projects, ContentKind.PROJECTS)

    assert [entry.slug for entry in collection.entries] == ["a-bot", "b-explorer"]
    assert all(isinstance(entry, Project) for entry in collection.entries)
    assert len(collection.violations) == 1
    violation = collection.violations[0]
    assert violation.source == projects / "c-broken.md"
    assert violation.fields == ("description", "date")


def test_load_collection_missing_directory(tmp_path: Path) -> None:
    """A missing collection folder is simply empty."""
    collection = load_collection(tmp_path / "nope", ContentKind.BLOG)
    assert collection.documents == ()
    assert collection.violations == ()


def test_split_front_matter_keeps_dates_as_written() -> None:
    """Bare YAML dates are not converted, so the schema sees the text."""
    front_matter, _ = split_front_matter("---\ndate: 2024-02-30\n---\n")
    assert front_matter["date"] == "2024-02-30"


def test_load_collection_reports_impossible_unquoted_date(tmp_path: Path) -> None:
    """An unquoted 2024-02-30 is an invalid_date violation, not a crash."""
    blog = tmp_path / "blog"
    _write(
        blog,
        "leap.md",
        """
        ---
        title: Leap day
        description: Not quite.
        date: 2024-02-30
        ---
        """,
    )
    _write(
        blog,
        "valid.md",
        """
        ---
        title: Valid
        description: Fine.
        date: 2024-02-29
        ---
        """,
    )

    collection = load_collection(blog, ContentKind.BLOG)

    assert [entry.slug for entry in collection.entries] == ["valid"]
    assert len(collection.violations) == 1
    violation = collection.violations[0]
    assert violation.source == blog / "leap.md"
    assert violation.fields == ("date",)
    assert violation.errors[0].reason is ViolationReason.INVALID_DATE


def test_read_entry_reports_undecodable_file(tmp_path: Path) -> None:
    """Bytes that are not UTF-8 become a violation for that file."""
    path = tmp_path / "bad.md"
    path.write_bytes(b"---\ntitle: \xff\n---\n")
    violation = read_entry(path, ContentKind.BLOG)
    assert isinstance(violation, SchemaViolation), f"unexpected {violation!r}"
    assert violation.source == path
    assert violation.fields == ("encoding",)
    assert violation.errors[0].reason is ViolationReason.UNPARSABLE


def test_load_collection_skips_undecodable_file(tmp_path: Path) -> None:
    """One unreadable file does not stop the rest of the collection."""
    blog = tmp_path / "blog"
    _write(
        blog,
        "good.md",
        """
        ---
        title: Good
        description: Readable.
        date: 2024-03-01
        ---
        """,
    )
    (blog / "bad.md").write_bytes(b"\xff\xfe")

    collection = load_collection(blog, ContentKind.BLOG)

    assert [entry.slug for entry in collection.entries] == ["good"]
    assert [violation.source for violation in collection.violations] == [
        blog / "bad.md"
    ]


def test_load_collection_rejects_duplicate_slugs(tmp_path: Path) -> None:
    """``post.md`` and ``post.mdx`` would write the same page."""
    blog = tmp_path / "blog"
    text = """
        ---
        title: Post
        description: Twice.
        date: 2024-03-01
        ---
        """
    _write(blog, "post.md", text)
    _write(blog, "post.mdx", text)

    collection = load_collection(blog, ContentKind.BLOG)

    assert [entry.slug for entry in collection.entries] == ["post"]
    assert collection.documents[0].source == blog / "post.md"
    assert len(collection.violations) == 1
    violation = collection.violations[0]
    assert violation.source == blog / "post.mdx"
    assert violation.fields == ("slug",)
    assert violation.errors[0].reason is ViolationReason.DUPLICATE_SLUG
    assert "post.md" in violation.errors[0].message
