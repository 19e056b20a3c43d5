"""yakitori.dev static page rendering pipeline.

This module turns a :class:`~yakitori_pages.config.SiteConfig` plus the blog
and project collections into the static HTML tree under ``public/``. It wires
the configuration registry, the listing helpers, the Markdown renderer, and the
Jinja environment, then writes:

* ``index.html`` with the newest published posts and projects, bounded by
  ``posts_per_homepage`` and ``projects_per_homepage``;
* ``blog/index.html`` and ``projects/index.html`` listing every published
  entry, newest first;
* ``<section>/<slug>/index.html`` for every entry. Drafts get a page here but
  never appear in a listing.

Typical usage mirrors the ``pages build`` command:

>>> from pathlib import Path
>>> from yakitori_pages.config import load_site_config
>>> from yakitori_pages.content import ContentKind, load_collection
>>> builder = SiteBuilder(
...     load_site_config(Path("config/site.yaml")),
...     blog=load_collection(Path("content/blog"), ContentKind.BLOG),
...     projects=load_collection(Path("content/projects"), ContentKind.PROJECTS),
... )  # doctest: +SKIP
>>> written = builder.run()  # doctest: +SKIP
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .config import SectionKey
from .content import (
    ContentCollection,
    ContentKind,
    filter_published,
    homepage_listing,
    sort_by_recency,
)
from .renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    from .config import SiteConfig
    from .content import ContentDocument

SECTION_FOR_KIND = {
    ContentKind.BLOG: SectionKey.BLOG,
    ContentKind.PROJECTS: SectionKey.PROJECTS,
}


def obfuscate_email(address: str) -> str:
    """Return the display form of ``address`` used in rendered pages.

    >>> obfuscate_email("contact@yakitori.dev")
    'contact|at|yakitori.dev'
    """
    local, _, domain = address.partition("@")
    if not domain:
        return address
    return f"{local}|at|{domain}"


class SiteBuilder:
    """Render the homepage, section indexes, and entry pages."""

    def __init__(
        self,
        site_config: SiteConfig,
        *,
        blog: ContentCollection,
        projects: ContentCollection,
        output_dir: Path = Path("public"),
        templates_dir: Path | None = None,
        renderer: HtmlContentRenderer | None = None,
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        site_config : SiteConfig
            Registry providing identity, section metadata, and social links
            for the shared page chrome.
        blog, projects : ContentCollection
            Validated collections. Only their documents are rendered; any
            violations they carry are the caller's responsibility.
        output_dir : Path, optional
            Root of the generated tree. Defaults to ``public``.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``yakitori_pages/templates``.
        renderer : HtmlContentRenderer, optional
            Markdown renderer for entry bodies.
        """
        self.site_config = site_config
        self.collections = {ContentKind.BLOG: blog, ContentKind.PROJECTS: projects}
        self.output_dir = output_dir
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.renderer = renderer or HtmlContentRenderer()
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["obfuscate_email"] = obfuscate_email
        self.env.globals.update(
            site=site_config.get_site_identity(),
            sections={
                key.value: site_config.get_section_metadata(key) for key in SectionKey
            },
            social_links=site_config.get_social_links(),
            stylesheet=self.renderer.stylesheet,
        )

    def run(self) -> list[Path]:
        """Render every page and return the written paths in write order."""
        generated_at = dt.datetime.now(dt.UTC)
        written = [self._write_homepage(generated_at)]
        for kind, collection in self.collections.items():
            written.append(self._write_section_index(kind, collection, generated_at))
            written.extend(
                self._write_entry_page(kind, document, generated_at)
                for document in collection.documents
            )
        return written

    def _write_homepage(self, generated_at: dt.datetime) -> Path:
        identity = self.site_config.get_site_identity()
        context = {
            "page": self.site_config.get_section_metadata(SectionKey.HOME),
            "posts": homepage_listing(
                self.collections[ContentKind.BLOG].entries,
                identity.posts_per_homepage,
            ),
            "projects": homepage_listing(
                self.collections[ContentKind.PROJECTS].entries,
                identity.projects_per_homepage,
            ),
            "generated_at": generated_at,
        }
        return self._write("home_page.jinja", self.output_dir / "index.html", context)

    def _write_section_index(
        self,
        kind: ContentKind,
        collection: ContentCollection,
        generated_at: dt.datetime,
    ) -> Path:
        context = {
            "page": self.site_config.get_section_metadata(SECTION_FOR_KIND[kind]),
            "kind": kind.value,
            "entries": sort_by_recency(filter_published(collection.entries)),
            "generated_at": generated_at,
        }
        output_path = self.output_dir / kind.value / "index.html"
        return self._write("section_index.jinja", output_path, context)

    def _write_entry_page(
        self,
        kind: ContentKind,
        document: ContentDocument,
        generated_at: dt.datetime,
    ) -> Path:
        entry = document.entry
        context = {
            "page": entry,
            "kind": kind.value,
            "entry": entry,
            "body_html": self.renderer.markdown(document.body),
            "generated_at": generated_at,
        }
        output_path = self.output_dir / kind.value / str(entry.slug) / "index.html"
        return self._write("entry_page.jinja", output_path, context)

    def _write(
        self, template_name: str, output_path: Path, context: dict[str, typ.Any]
    ) -> Path:
        html = self.env.get_template(template_name).render(**context)
        if not html.endswith("\n"):
            html += "\n"
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
        return output_path


__all__ = ["SiteBuilder", "obfuscate_email"]
