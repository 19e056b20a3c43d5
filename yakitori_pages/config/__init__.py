"""Load and validate the site definition YAML for yakitori.dev builds.

This subpackage parses the project's ``site.yaml`` file and produces
immutable dataclasses (:class:`SiteConfig`, :class:`SiteIdentity`,
:class:`SectionMetadata`, :class:`SocialLink`) that page builders consume. The
primary entry point is :func:`load_site_config`, which ensures every required
field is present and well formed before returning a :class:`SiteConfig`.

Examples
--------
>>> from pathlib import Path
>>> from yakitori_pages.config import SectionKey, load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.get_section_metadata(SectionKey.BLOG).title  # doctest: +SKIP
'Blog'
"""

from .helpers import is_absolute_url, is_email_address
from .loader import build_site_config, load_site_config
from .models import (
    SectionKey,
    SectionMetadata,
    SiteConfig,
    SiteConfigError,
    SiteIdentity,
    SocialLink,
)

__all__ = [
    "SectionKey",
    "SectionMetadata",
    "SiteConfig",
    "SiteConfigError",
    "SiteIdentity",
    "SocialLink",
    "build_site_config",
    "is_absolute_url",
    "is_email_address",
    "load_site_config",
]
