"""Inline Markdown processing for a single line of text.

The substitutions run in a fixed order, each applied to the whole segment
before the next one starts:

1. inline code
2. bold italic (``***text***``)
3. bold (``**text**`` / ``__text__``)
4. italic (``*text*`` / ``_text_``)
5. strikethrough
6. wiki links (``[[target]]`` / ``[[target|alias]]``)
7. images (placeholder only, never embedded)
8. links (text only, URL dropped)

Later patterns rely on earlier ones having consumed their delimiters, so the
order must not change.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from noteflow.options import EmphasisStyle
    from noteflow.styles import StyleBundle

IMAGE_PLACEHOLDER_ALT = "图片"

INLINE_CODE = re.compile(r"`([^`]+)`")
BOLD_ITALIC = re.compile(r"\*{3}(.+?)\*{3}")
BOLD_STAR = re.compile(r"\*{2}(.+?)\*{2}")
BOLD_UNDERSCORE = re.compile(r"_{2}(.+?)_{2}")
ITALIC_STAR = re.compile(r"\*(.+?)\*")
ITALIC_UNDERSCORE = re.compile(r"_(.+?)_")
STRIKETHROUGH = re.compile(r"~~(.+?)~~")
WIKI_LINK = re.compile(r"\[\[([^\]|]+)(?:\|([^\]]+))?\]\]")
IMAGE = re.compile(r"!\[([^\]]*)\]\([^)]*\)")
LINK = re.compile(r"\[([^\]]+)\]\([^)]*\)")


def escape_html(text: str) -> str:
    """Escape ``&``, ``<``, ``>`` and ``"`` for use in HTML text or attributes."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def _wiki_label(match: re.Match[str]) -> str:
    target, alias = match.group(1), match.group(2)
    return alias if alias is not None else target


def render_inline_html(text: str, bundle: StyleBundle) -> str:
    """Convert inline Markdown to HTML tags styled with ``bundle``.

    Only inline code contents, wiki-link labels and image alt text are
    escaped; everything else passes through verbatim.
    """
    text = INLINE_CODE.sub(
        lambda m: f'<code style="{bundle.code}">{escape_html(m.group(1))}</code>', text
    )

    text = BOLD_ITALIC.sub(r"<strong><em>\1</em></strong>", text)
    text = BOLD_STAR.sub(r"<strong>\1</strong>", text)
    text = BOLD_UNDERSCORE.sub(r"<strong>\1</strong>", text)
    text = ITALIC_STAR.sub(r"<em>\1</em>", text)
    text = ITALIC_UNDERSCORE.sub(r"<em>\1</em>", text)
    text = STRIKETHROUGH.sub(r"<del>\1</del>", text)

    text = WIKI_LINK.sub(lambda m: escape_html(_wiki_label(m)), text)
    text = IMAGE.sub(
        lambda m: f"<em>[Image: {escape_html(m.group(1) or IMAGE_PLACEHOLDER_ALT)}]</em>", text
    )
    return LINK.sub(lambda m: m.group(1), text)


def render_inline_plain(text: str, emphasis_style: EmphasisStyle = "「」") -> str:
    """Strip inline Markdown, marking bold text with the emphasis brackets."""
    opening, closing = emphasis_style[0], emphasis_style[1]

    def emphasize(match: re.Match[str]) -> str:
        return f"{opening}{match.group(1)}{closing}"

    text = INLINE_CODE.sub(lambda m: m.group(1), text)

    text = BOLD_ITALIC.sub(emphasize, text)
    text = BOLD_STAR.sub(emphasize, text)
    text = BOLD_UNDERSCORE.sub(emphasize, text)
    text = ITALIC_STAR.sub(lambda m: m.group(1), text)
    text = ITALIC_UNDERSCORE.sub(lambda m: m.group(1), text)
    text = STRIKETHROUGH.sub(lambda m: m.group(1), text)

    text = WIKI_LINK.sub(_wiki_label, text)
    text = IMAGE.sub(lambda m: f"[图片: {m.group(1) or IMAGE_PLACEHOLDER_ALT}]", text)
    return LINK.sub(lambda m: m.group(1), text)
