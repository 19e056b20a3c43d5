"""Typed dataclasses describing the yakitori.dev site configuration."""

from __future__ import annotations

import dataclasses as dc
import enum
from types import MappingProxyType


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


class SectionKey(enum.StrEnum):
    """Top-level sections of the site, each with its own page metadata."""

    HOME = "home"
    BLOG = "blog"
    PROJECTS = "projects"


@dc.dataclass(frozen=True, slots=True)
class SiteIdentity:
    """Global site identity shared by every page's header and footer."""

    title: str
    description: str
    contact_email: str
    posts_per_homepage: int
    projects_per_homepage: int


@dc.dataclass(frozen=True, slots=True)
class SectionMetadata:
    """Title and summary rendered for a single section's pages."""

    title: str
    description: str


@dc.dataclass(frozen=True, slots=True)
class SocialLink:
    """Outbound social profile link shown in the footer."""

    display_name: str
    url: str


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Immutable registry of site identity, section metadata, and social links.

    Instances are built once by :func:`~yakitori_pages.config.load_site_config`
    and handed to every consumer that renders shared page chrome.
    """

    identity: SiteIdentity
    sections: MappingProxyType[SectionKey, SectionMetadata]
    social_links: tuple[SocialLink, ...] = ()

    def get_site_identity(self) -> SiteIdentity:
        """Return the site identity record."""
        return self.identity

    def get_section_metadata(self, section: SectionKey | str) -> SectionMetadata:
        """Return metadata for ``section``.

        Parameters
        ----------
        section : SectionKey or str
            Section identifier; strings are coerced through :class:`SectionKey`.

        Returns
        -------
        SectionMetadata
            Title and description configured for the section.

        Raises
        ------
        KeyError
            If ``section`` does not name a known section.
        """
        try:
            key = SectionKey(section)
            return self.sections[key]
        except (ValueError, KeyError) as exc:
            available = ", ".join(sorted(self.sections))
            msg = f"Unknown section '{section}'. Known sections: {available}"
            raise KeyError(msg) from exc

    def get_social_links(self) -> tuple[SocialLink, ...]:
        """Return the configured social links in display order."""
        return self.social_links


__all__ = [
    "SectionKey",
    "SectionMetadata",
    "SiteConfig",
    "SiteConfigError",
    "SiteIdentity",
    "SocialLink",
]
