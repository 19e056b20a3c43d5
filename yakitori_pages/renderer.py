"""Render entry bodies from Markdown into HTML with highlighted code blocks.

Solidity and shell snippets are the norm in posts, so each highlighted block
carries a ``data-language`` attribute taken from its opening fence.
"""

from __future__ import annotations

import re
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

HIGHLIGHT_CLASS = "codehilite"
FENCED_BLOCK_PATTERN = re.compile(
    r"^```[ \t]*([\w+#.-]*)[^\n]*\n.*?^```", re.DOTALL | re.MULTILINE
)


def fence_languages(text: str) -> list[str]:
    """Return the language of each fenced block in ``text``, ``"text"`` if unset."""
    return [match.group(1) or "text" for match in FENCED_BLOCK_PATTERN.finditer(text)]


class HtmlContentRenderer:
    """Render post and project bodies with consistent code styling."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass=HIGHLIGHT_CLASS)
        self._md = Markdown(
            extensions=["fenced_code", "codehilite", "tables", "sane_lists"],
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": HIGHLIGHT_CLASS,
                    "pygments_style": pygments_style,
                }
            },
        )

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(f".{HIGHLIGHT_CLASS}")

    def markdown(self, text: str) -> str:
        """Render an entry body; blank bodies render to an empty string."""
        if not text.strip():
            return ""
        html = self._md.reset().convert(text)
        return _tag_languages(html, fence_languages(text))


def _tag_languages(html: str, languages: list[str]) -> str:
    opening = f'<div class="{HIGHLIGHT_CLASS}">'
    head, *blocks = html.split(opening)
    tagged = [head]
    for index, block in enumerate(blocks):
        lang = languages[index] if index < len(languages) else "text"
        tagged.append(
            f'<div class="{HIGHLIGHT_CLASS}" '
            f'data-language="{escape(lang, quote=True)}">{block}'
        )
    return "".join(tagged)


__all__ = ["HtmlContentRenderer", "fence_languages"]
