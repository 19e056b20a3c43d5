"""Cyclopts CLI entrypoint for building the yakitori.dev static site.

The ``pages`` console script defined here validates the site definition and
every content file, then renders the static HTML tree. Typical usage involves
running ``pages check`` while writing to catch front-matter mistakes early, and
``pages build`` locally or in CI to regenerate ``public/``.

Examples
--------
Build the site with the default paths:

>>> from yakitori_pages.cli import main
>>> main()  # doctest: +SKIP

Build into a custom directory, skipping files with invalid front matter:

>>> from yakitori_pages.cli import app
>>> app(["build", "--output-dir", "dist", "--skip-invalid"])  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_site_config
from .content import ContentKind, ContentSchemaError, load_collection
from .site import SiteBuilder

if typ.TYPE_CHECKING:
    from .content import ContentCollection, SchemaViolation

DEFAULT_CONFIG = Path("config/site.yaml")
DEFAULT_CONTENT_DIR = Path("content")
DEFAULT_OUTPUT_DIR = Path("public")

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_collections(
    content_dir: Path,
) -> tuple[ContentCollection, ContentCollection]:
    """Load the blog and project collections beneath ``content_dir``."""
    blog = load_collection(content_dir / ContentKind.BLOG.value, ContentKind.BLOG)
    projects = load_collection(
        content_dir / ContentKind.PROJECTS.value, ContentKind.PROJECTS
    )
    return blog, projects


def _report_violations(violations: typ.Iterable[SchemaViolation]) -> None:
    """Print one line per failed field to stderr."""
    for violation in violations:
        for line in violation.describe():
            print(line, file=sys.stderr)


@app.command(help="Render the static site from the site config and content.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    content_dir: typ.Annotated[
        Path,
        Parameter(
            help="Folder holding blog/ and projects/", env_var="INPUT_CONTENT_DIR"
        ),
    ] = DEFAULT_CONTENT_DIR,
    output_dir: typ.Annotated[
        Path, Parameter(help="Output folder", env_var="INPUT_OUTPUT_DIR")
    ] = DEFAULT_OUTPUT_DIR,
    skip_invalid: typ.Annotated[
        bool,
        Parameter(
            help="Skip content files that fail validation instead of aborting",
            env_var="INPUT_SKIP_INVALID",
        ),
    ] = False,
) -> None:
    """Validate configuration and content, then write the HTML tree.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` definition (overridable via
        ``INPUT_CONFIG``).
    content_dir : Path, optional
        Folder containing the ``blog`` and ``projects`` collections.
    output_dir : Path, optional
        Root folder for the generated site; defaults to ``public``.
    skip_invalid : bool, optional
        When ``True`` invalid content files are reported and left out of the
        build; otherwise the build stops after reporting them.

    Raises
    ------
    SiteConfigError
        If the site definition is malformed.
    ContentSchemaError
        If any content file is invalid and ``skip_invalid`` is ``False``.
    """
    site_config = load_site_config(config)
    blog, projects = _load_collections(content_dir)
    violations = blog.violations + projects.violations
    if violations:
        _report_violations(violations)
        if not skip_invalid:
            raise ContentSchemaError(violations)
        print(f"skipped {len(violations)} invalid content file(s)", file=sys.stderr)

    builder = SiteBuilder(
        site_config, blog=blog, projects=projects, output_dir=output_dir
    )
    for path in builder.run():
        print(f"wrote {_format_path(path)}")


@app.command(help="Validate the site config and every content file.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    content_dir: typ.Annotated[
        Path,
        Parameter(
            help="Folder holding blog/ and projects/", env_var="INPUT_CONTENT_DIR"
        ),
    ] = DEFAULT_CONTENT_DIR,
) -> None:
    """Report every schema violation and exit non-zero when any is found."""
    load_site_config(config)
    blog, projects = _load_collections(content_dir)
    violations = blog.violations + projects.violations
    if violations:
        _report_violations(violations)
        raise SystemExit(1)
    total = len(blog.documents) + len(projects.documents)
    print(f"ok: {total} content file(s) valid")


def main() -> None:
    """Invoke the Cyclopts application that powers the `pages` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
