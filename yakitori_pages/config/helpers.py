"""Utility helpers shared by the site configuration loader and content schema."""

from __future__ import annotations

import re
import typing as typ
from urllib.parse import urlsplit

from .models import SiteConfigError

ALLOWED_URL_SCHEMES = frozenset({"http", "https"})
EMAIL_PATTERN = re.compile(r"^[^@\s|]+@[^@\s|]+\.[^@\s|]+$")


def is_absolute_url(value: str) -> bool:
    """Return True when ``value`` is an absolute http(s) URL with a host."""
    if not value or value != value.strip():
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return parts.scheme in ALLOWED_URL_SCHEMES and bool(parts.hostname)


def is_email_address(value: str) -> bool:
    """Return True when ``value`` looks like a plain ``local@domain`` address."""
    return bool(EMAIL_PATTERN.match(value))


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_text(payload: typ.Mapping[str, typ.Any], key: str, context: str) -> str:
    """Return the stripped string at ``key`` or raise when absent or blank."""
    value = payload.get(key)
    if not isinstance(value, str) or not value.strip():
        msg = f"{context} requires a non-empty '{key}'."
        raise SiteConfigError(msg)
    return value.strip()


def _require_count(payload: typ.Mapping[str, typ.Any], key: str, context: str) -> int:
    """Return the non-negative integer at ``key`` or raise."""
    value = payload.get(key)
    # bool is an int subclass; `true` is not a count.
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{context} requires an integer '{key}', got {value!r}."
        raise SiteConfigError(msg)
    if value < 0:
        msg = f"{context} '{key}' must be non-negative, got {value}."
        raise SiteConfigError(msg)
    return value


__all__ = [
    "ALLOWED_URL_SCHEMES",
    "EMAIL_PATTERN",
    "_optional_str",
    "_require_count",
    "_require_text",
    "is_absolute_url",
    "is_email_address",
]
