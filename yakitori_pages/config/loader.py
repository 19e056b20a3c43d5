"""Load the site definition YAML into typed, immutable dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path
from types import MappingProxyType

from ruamel.yaml import YAML

from .helpers import (
    _optional_str,
    _require_count,
    _require_text,
    is_absolute_url,
    is_email_address,
)
from .models import (
    SectionKey,
    SectionMetadata,
    SiteConfig,
    SiteConfigError,
    SiteIdentity,
    SocialLink,
)


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML site definition describing identity, sections, and socials.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML site definition (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Fully validated registry ready to be passed to page builders.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    SiteConfigError
        If the top-level structure is not a mapping or any field is missing or
        invalid. Nothing is returned in that case, so a partially populated
        registry can never reach a template.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from yakitori_pages.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.get_site_identity().title  # doctest: +SKIP
    'yakitori.dev'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    return build_site_config(loaded)


def build_site_config(payload: typ.Mapping[str, typ.Any]) -> SiteConfig:
    """Validate an in-memory site definition and build the registry."""
    match payload:
        case dict() as raw:
            pass
        case _:
            msg = "Top-level site configuration must be a mapping."
            raise SiteConfigError(msg)

    identity = _build_site_identity(raw.get("site"))
    sections = _build_sections(raw.get("sections"))
    social_links = _build_social_links(raw.get("socials"))
    return SiteConfig(
        identity=identity,
        sections=MappingProxyType(sections),
        social_links=social_links,
    )


def _build_site_identity(payload: typ.Mapping[str, typ.Any] | None) -> SiteIdentity:
    """Build the site identity block."""
    if not isinstance(payload, dict):
        msg = "Site configuration requires a 'site' mapping."
        raise SiteConfigError(msg)
    contact_email = _require_text(payload, "contact_email", "Site identity")
    if not is_email_address(contact_email):
        msg = (
            f"Site identity 'contact_email' must be a plain address, got "
            f"{contact_email!r}; obfuscation is applied when rendering."
        )
        raise SiteConfigError(msg)
    return SiteIdentity(
        title=_require_text(payload, "title", "Site identity"),
        description=_require_text(payload, "description", "Site identity"),
        contact_email=contact_email,
        posts_per_homepage=_require_count(
            payload, "posts_per_homepage", "Site identity"
        ),
        projects_per_homepage=_require_count(
            payload, "projects_per_homepage", "Site identity"
        ),
    )


def _build_sections(
    payload: typ.Mapping[str, typ.Any] | None,
) -> dict[SectionKey, SectionMetadata]:
    """Build per-section metadata, requiring exactly one entry per section."""
    if not isinstance(payload, dict):
        msg = "Site configuration requires a 'sections' mapping."
        raise SiteConfigError(msg)
    sections: dict[SectionKey, SectionMetadata] = {}
    for name, entry in payload.items():
        try:
            key = SectionKey(name)
        except ValueError as exc:
            known = ", ".join(SectionKey)
            msg = f"Unknown section '{name}'. Known sections: {known}"
            raise SiteConfigError(msg) from exc
        if not isinstance(entry, dict):
            msg = f"Section '{name}' must be a mapping."
            raise SiteConfigError(msg)
        context = f"Section '{name}'"
        sections[key] = SectionMetadata(
            title=_require_text(entry, "title", context),
            description=_require_text(entry, "description", context),
        )
    missing = [key.value for key in SectionKey if key not in sections]
    if missing:
        msg = f"Missing metadata for sections: {', '.join(missing)}"
        raise SiteConfigError(msg)
    return sections


def _build_social_links(
    entries: list[typ.Mapping[str, object]] | None,
) -> tuple[SocialLink, ...]:
    """Build the ordered social links, rejecting malformed or duplicate URLs."""
    match entries:
        case None:
            return ()
        case list() as items:
            iterable = items
        case _:
            msg = "Site 'socials' must be a list."
            raise SiteConfigError(msg)
    links: list[SocialLink] = []
    seen: set[str] = set()
    for index, entry in enumerate(iterable):
        match entry:
            case {"name": name, "url": url, **_rest}:
                pass
            case _:
                msg = f"Social link #{index + 1} requires 'name' and 'url'."
                raise SiteConfigError(msg)
        display_name = _optional_str(name)
        if display_name is None:
            msg = f"Social link #{index + 1} requires a non-empty 'name'."
            raise SiteConfigError(msg)
        if not isinstance(url, str) or not is_absolute_url(url):
            msg = f"Social link '{display_name}' has an invalid URL: {url!r}"
            raise SiteConfigError(msg)
        if url in seen:
            msg = f"Social link URL '{url}' is listed more than once."
            raise SiteConfigError(msg)
        seen.add(url)
        links.append(SocialLink(display_name=display_name, url=url))
    return tuple(links)


__all__ = ["build_site_config", "load_site_config"]
