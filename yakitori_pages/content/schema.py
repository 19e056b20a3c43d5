"""Validate raw front matter into typed content entries.

Content files carry weakly typed key/value pairs: dates arrive either as YAML
date scalars or as free-form strings, and ``draft`` is often absent. This
module draws a strict parse-then-validate boundary around that input.
:func:`validate` checks every field, collects every failure, and returns
either a frozen :class:`ContentEntry` or a :class:`SchemaViolation`; it never
substitutes a guessed value.

Persisted keys
--------------
``title`` and ``description`` (non-empty strings), ``date`` (ISO
``YYYY-MM-DD``), ``draft`` (boolean, default ``False``), and for projects the
optional absolute URLs ``demoURL`` and ``repoURL``. Unknown keys are ignored.

Examples
--------
>>> from yakitori_pages.content import validate
>>> entry = validate({"title": "Hi", "description": "Intro", "date": "2024-01-02"})
>>> entry.publication_date.isoformat()
'2024-01-02'
>>> validate({"description": "Intro", "date": "01/02/2024"}).fields
('title', 'date')
"""

from __future__ import annotations

import datetime as dt
import re
import typing as typ

from .._constants import CANONICAL_DATE_FORMAT
from ..config.helpers import is_absolute_url
from .models import (
    BlogPost,
    ContentEntry,
    ContentKind,
    FieldViolation,
    Project,
    SchemaViolation,
    ViolationReason,
)

if typ.TYPE_CHECKING:
    from pathlib import Path

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
PROJECT_LINK_FIELDS = {"demoURL": "demo_link", "repoURL": "repository_link"}


def parse_publication_date(value: object) -> dt.date:
    """Return the calendar date described by ``value``.

    Parameters
    ----------
    value : object
        A ``datetime.date``/``datetime.datetime`` (as produced by YAML date
        scalars) or a string in ``YYYY-MM-DD`` form.

    Returns
    -------
    datetime.date
        The parsed date. Datetimes are reduced to their calendar date.

    Raises
    ------
    TypeError
        If ``value`` is neither a date nor a string.
    ValueError
        If the string is not in canonical form or names an impossible date.
    """
    match value:
        case dt.datetime():
            return value.date()
        case dt.date():
            return value
        case str() as text:
            candidate = text.strip()
            if not ISO_DATE_PATTERN.match(candidate):
                msg = f"expected {CANONICAL_DATE_FORMAT}, got {text!r}"
                raise ValueError(msg)
            try:
                return dt.date.fromisoformat(candidate)
            except ValueError as exc:
                msg = f"{text!r} is not a valid calendar date"
                raise ValueError(msg) from exc
        case _:
            msg = f"expected a date, got {type(value).__name__}"
            raise TypeError(msg)


def _check_text(
    raw: typ.Mapping[str, typ.Any], key: str, errors: list[FieldViolation]
) -> str | None:
    if key not in raw or raw[key] is None:
        errors.append(
            FieldViolation(key, ViolationReason.MISSING, f"'{key}' is required")
        )
        return None
    value = raw[key]
    if not isinstance(value, str):
        errors.append(
            FieldViolation(
                key,
                ViolationReason.WRONG_TYPE,
                f"expected a string, got {type(value).__name__}",
            )
        )
        return None
    text = value.strip()
    if not text:
        errors.append(
            FieldViolation(key, ViolationReason.MISSING, f"'{key}' must not be blank")
        )
        return None
    return text


def _check_date(
    raw: typ.Mapping[str, typ.Any], errors: list[FieldViolation]
) -> dt.date | None:
    if "date" not in raw or raw["date"] is None:
        errors.append(
            FieldViolation("date", ViolationReason.MISSING, "'date' is required")
        )
        return None
    try:
        return parse_publication_date(raw["date"])
    except TypeError as exc:
        errors.append(FieldViolation("date", ViolationReason.WRONG_TYPE, str(exc)))
    except ValueError as exc:
        errors.append(FieldViolation("date", ViolationReason.INVALID_DATE, str(exc)))
    return None


def _check_draft(raw: typ.Mapping[str, typ.Any], errors: list[FieldViolation]) -> bool:
    value = raw.get("draft")
    if value is None:
        return False
    if not isinstance(value, bool):
        errors.append(
            FieldViolation(
                "draft",
                ViolationReason.WRONG_TYPE,
                f"expected true or false, got {value!r}",
            )
        )
        return False
    return value


def _check_link(
    raw: typ.Mapping[str, typ.Any], key: str, errors: list[FieldViolation]
) -> str | None:
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        errors.append(
            FieldViolation(
                key,
                ViolationReason.WRONG_TYPE,
                f"expected a URL string, got {type(value).__name__}",
            )
        )
        return None
    if not is_absolute_url(value):
        errors.append(
            FieldViolation(
                key, ViolationReason.INVALID_URL, f"{value!r} is not an absolute URL"
            )
        )
        return None
    return value


def validate(
    raw_front_matter: typ.Mapping[str, typ.Any],
    *,
    kind: ContentKind = ContentKind.BLOG,
    slug: str | None = None,
    source: Path | None = None,
) -> ContentEntry | SchemaViolation:
    """Validate one content file's front matter.

    Parameters
    ----------
    raw_front_matter : Mapping[str, Any]
        Key/value pairs read from the file's front-matter block.
    kind : ContentKind, optional
        Collection the file belongs to; projects accept ``demoURL`` and
        ``repoURL``. Defaults to :attr:`ContentKind.BLOG`.
    slug : str or None, optional
        Identifier carried onto the entry for routing (usually the file stem).
    source : Path or None, optional
        Origin recorded on a returned violation for error reports.

    Returns
    -------
    ContentEntry or SchemaViolation
        A :class:`BlogPost` or :class:`Project` when every field is valid;
        otherwise a violation listing every failed field in key order
        (``title``, ``description``, ``date``, ``draft``, then links).
    """
    errors: list[FieldViolation] = []
    title = _check_text(raw_front_matter, "title", errors)
    description = _check_text(raw_front_matter, "description", errors)
    publication_date = _check_date(raw_front_matter, errors)
    draft = _check_draft(raw_front_matter, errors)
    links: dict[str, str | None] = {}
    if kind is ContentKind.PROJECTS:
        for key, attribute in PROJECT_LINK_FIELDS.items():
            links[attribute] = _check_link(raw_front_matter, key, errors)

    if errors or title is None or description is None or publication_date is None:
        return SchemaViolation(errors=tuple(errors), source=source)

    if kind is ContentKind.PROJECTS:
        return Project(
            title=title,
            description=description,
            publication_date=publication_date,
            draft=draft,
            slug=slug,
            **links,
        )
    return BlogPost(
        title=title,
        description=description,
        publication_date=publication_date,
        draft=draft,
        slug=slug,
    )


__all__ = ["parse_publication_date", "validate"]
