"""Typed dataclasses describing validated content entries and violations."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt  # noqa: TC003 - used for runtime type metadata
import enum
from pathlib import Path  # noqa: TC003 - used for runtime type metadata


class ContentKind(enum.StrEnum):
    """Content collections that share the entry schema."""

    BLOG = "blog"
    PROJECTS = "projects"


class ViolationReason(enum.StrEnum):
    """Why a single front-matter field failed validation."""

    MISSING = "missing"
    WRONG_TYPE = "wrong_type"
    INVALID_DATE = "invalid_date"
    INVALID_URL = "invalid_url"
    UNPARSABLE = "unparsable"
    DUPLICATE_SLUG = "duplicate_slug"


@dc.dataclass(frozen=True, slots=True)
class ContentEntry:
    """Front matter shared by every blog post and project."""

    title: str
    description: str
    publication_date: dt.date
    draft: bool = False
    slug: str | None = None


@dc.dataclass(frozen=True, slots=True)
class BlogPost(ContentEntry):
    """Long-form article; the body is rendered separately."""


@dc.dataclass(frozen=True, slots=True)
class Project(ContentEntry):
    """Project write-up with optional demo and repository links."""

    demo_link: str | None = None
    repository_link: str | None = None


@dc.dataclass(frozen=True, slots=True)
class FieldViolation:
    """A single failed front-matter field.

    Attributes
    ----------
    field : str
        Front-matter key as written in the content file (for example,
        ``"date"`` or ``"repoURL"``).
    reason : ViolationReason
        Category of failure.
    message : str
        Human-readable explanation suitable for build output.
    """

    field: str
    reason: ViolationReason
    message: str


@dc.dataclass(frozen=True, slots=True)
class SchemaViolation:
    """Every constraint a content file's front matter failed."""

    errors: tuple[FieldViolation, ...]
    source: Path | None = None

    @property
    def fields(self) -> tuple[str, ...]:
        """Return the names of the failed fields in report order."""
        return tuple(error.field for error in self.errors)

    def describe(self) -> list[str]:
        """Return one ``<source>: <field>: <message>`` line per failure."""
        prefix = f"{self.source}: " if self.source else ""
        return [f"{prefix}{error.field}: {error.message}" for error in self.errors]


@dc.dataclass(frozen=True, slots=True)
class ContentDocument:
    """A validated entry paired with its opaque Markdown body."""

    entry: ContentEntry
    body: str
    source: Path | None = None


@dc.dataclass(frozen=True, slots=True)
class ContentCollection:
    """All files read from one content directory, split by validity."""

    kind: ContentKind
    documents: tuple[ContentDocument, ...] = ()
    violations: tuple[SchemaViolation, ...] = ()

    @property
    def entries(self) -> list[ContentEntry]:
        """Return the validated entries in file order."""
        return [document.entry for document in self.documents]


class ContentSchemaError(ValueError):
    """Raised by the build pipeline when it refuses to skip invalid content."""

    def __init__(self, violations: tuple[SchemaViolation, ...]) -> None:
        self.violations = violations
        lines = [line for violation in violations for line in violation.describe()]
        super().__init__(
            f"{len(violations)} content file(s) failed validation:\n"
            + "\n".join(lines)
        )


class FrontMatterError(ValueError):
    """Raised when a front-matter block cannot be parsed into a mapping."""


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
]
