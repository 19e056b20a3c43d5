"""Read content files from disk and validate their front matter.

Each Markdown file starts with a ``---``-delimited YAML block followed by the
body. The reader parses the block with ``ruamel.yaml``, hands the mapping to
:func:`~yakitori_pages.content.schema.validate`, and keeps the body as an
opaque string for the renderer. Invalid files are reported alongside the valid
ones; whether to abort or skip is left to the caller.
"""

from __future__ import annotations

import typing as typ
from io import StringIO

from ruamel.yaml import YAML
from ruamel.yaml.constructor import SafeConstructor
from ruamel.yaml.error import YAMLError

from .._constants import CONTENT_SUFFIXES, FRONT_MATTER_DELIMITER
from .models import (
    ContentCollection,
    ContentDocument,
    ContentKind,
    FieldViolation,
    FrontMatterError,
    SchemaViolation,
    ViolationReason,
)
from .schema import validate

if typ.TYPE_CHECKING:
    from pathlib import Path


class _FrontMatterConstructor(SafeConstructor):
    """Safe constructor that leaves YAML timestamps as plain strings."""


# Dates reach the schema as written so impossible ones become violations.
_FrontMatterConstructor.add_constructor(
    "tag:yaml.org,2002:timestamp", SafeConstructor.construct_yaml_str
)


def _front_matter_loader() -> YAML:
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    loader.Constructor = _FrontMatterConstructor
    return loader


def split_front_matter(text: str) -> tuple[dict[str, typ.Any], str]:
    """Split ``text`` into its front-matter mapping and Markdown body.

    Parameters
    ----------
    text : str
        Full content file.

    Returns
    -------
    tuple[dict[str, Any], str]
        The parsed front matter (empty when the file has no block) and the
        body with surrounding blank lines removed.

    Raises
    ------
    FrontMatterError
        If the block is unterminated, is not valid YAML, or is not a mapping.
    """
    lines = text.lstrip("\ufeff").splitlines(keepends=True)
    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        return {}, text.strip()
    for index, line in enumerate(lines[1:], start=1):
        if line.strip() == FRONT_MATTER_DELIMITER:
            header = "".join(lines[1:index])
            body = "".join(lines[index + 1 :])
            break
    else:
        msg = "Front matter block is not terminated by '---'."
        raise FrontMatterError(msg)

    try:
        loaded = _front_matter_loader().load(StringIO(header))
    except YAMLError as exc:
        msg = f"Front matter is not valid YAML: {exc}"
        raise FrontMatterError(msg) from exc
    if loaded is None:
        return {}, body.strip()
    if not isinstance(loaded, dict):
        msg = f"Front matter must be a mapping, got {type(loaded).__name__}."
        raise FrontMatterError(msg)
    return dict(loaded), body.strip()


def read_entry(path: Path, kind: ContentKind) -> ContentDocument | SchemaViolation:
    """Read and validate a single content file; the file stem becomes the slug."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        error = FieldViolation(
            "encoding", ViolationReason.UNPARSABLE, f"file is not valid UTF-8: {exc}"
        )
        return SchemaViolation(errors=(error,), source=path)
    try:
        front_matter, body = split_front_matter(text)
    except FrontMatterError as exc:
        error = FieldViolation("front matter", ViolationReason.UNPARSABLE, str(exc))
        return SchemaViolation(errors=(error,), source=path)
    result = validate(front_matter, kind=kind, slug=path.stem, source=path)
    match result:
        case SchemaViolation():
            return result
        case _:
            return ContentDocument(entry=result, body=body, source=path)


def load_collection(directory: Path, kind: ContentKind) -> ContentCollection:
    """Read every content file in ``directory`` in file-name order.

    Parameters
    ----------
    directory : Path
        Folder holding one collection (for example ``content/blog``). A
        missing folder yields an empty collection.
    kind : ContentKind
        Collection type used to select the schema variant.

    Returns
    -------
    ContentCollection
        Valid documents and violations, each in file-name order. A file whose
        slug was already taken by an earlier file is reported as a violation.
    """
    if not directory.is_dir():
        return ContentCollection(kind=kind)
    documents: list[ContentDocument] = []
    violations: list[SchemaViolation] = []
    owners: dict[str, Path] = {}
    paths = sorted(
        path
        for path in directory.iterdir()
        if path.is_file() and path.suffix in CONTENT_SUFFIXES
    )
    for path in paths:
        if (owner := owners.get(path.stem)) is not None:
            error = FieldViolation(
                "slug",
                ViolationReason.DUPLICATE_SLUG,
                f"slug '{path.stem}' is already used by {owner.name}",
            )
            violations.append(SchemaViolation(errors=(error,), source=path))
            continue
        owners[path.stem] = path
        match read_entry(path, kind):
            case SchemaViolation() as violation:
                violations.append(violation)
            case ContentDocument() as document:
                documents.append(document)
    return ContentCollection(
        kind=kind, documents=tuple(documents), violations=tuple(violations)
    )


__all__ = ["load_collection", "read_entry", "split_front_matter"]
