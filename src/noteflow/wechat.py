"""Markdown to WeChat Official Account HTML.

Every element carries its theme style inline, since the WeChat editor drops
``<style>`` blocks and classes on paste.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from noteflow.blocks import (
    Blank,
    Blockquote,
    FencedCode,
    Heading,
    HorizontalRule,
    OrderedList,
    Table,
    UnorderedList,
    segment,
    split_lines,
)
from noteflow.inline import escape_html, render_inline_html
from noteflow.options import RenderOptions
from noteflow.styles import THEMES, resolve_theme

if TYPE_CHECKING:
    from collections.abc import Mapping

    from noteflow.blocks import Block
    from noteflow.styles import StyleBundle

logger = logging.getLogger(__name__)

MAX_HEADING_LEVEL = 6


def _heading(block: Heading, bundle: StyleBundle, *, shift: bool) -> str:
    level = min(block.level + 1, MAX_HEADING_LEVEL) if shift else block.level
    inner = render_inline_html(block.text, bundle)
    return f'<h{level} style="{bundle.heading(level)}">{inner}</h{level}>'


def _fenced_code(block: FencedCode, bundle: StyleBundle) -> str:
    code = escape_html("\n".join(block.lines))
    lang_attr = f' data-lang="{escape_html(block.language)}"' if block.language else ""
    return (
        f'<pre{lang_attr} style="{bundle.pre}">'
        f'<code style="{bundle.pre_code}">{code}</code></pre>'
    )


def _list(items: tuple[str, ...], tag: str, list_style: str, bundle: StyleBundle) -> str:
    lis = "".join(
        f'<li style="{bundle.li}">{render_inline_html(item, bundle)}</li>' for item in items
    )
    return f'<{tag} style="{list_style}">{lis}</{tag}>'


def _table(block: Table, bundle: StyleBundle) -> str:
    th_cells = "".join(
        f'<th style="{bundle.th}">{render_inline_html(cell, bundle)}</th>'
        for cell in block.header_cells
    )
    body = "".join(
        "<tr>"
        + "".join(
            f'<td style="{bundle.td}">{render_inline_html(cell, bundle)}</td>' for cell in row
        )
        + "</tr>"
        for row in block.body_rows
    )
    return (
        f'<table style="{bundle.table}">'
        f"<thead><tr>{th_cells}</tr></thead><tbody>{body}</tbody></table>"
    )


def _paragraph(lines: tuple[str, ...], bundle: StyleBundle) -> str:
    inner = "<br>".join(render_inline_html(line, bundle) for line in lines)
    return f'<p style="{bundle.paragraph}">{inner}</p>'


def _render_block(block: Block, bundle: StyleBundle, options: RenderOptions) -> list[str]:
    """Render one block to zero or more HTML elements."""
    if isinstance(block, Blank):
        return []
    if isinstance(block, Heading):
        return [_heading(block, bundle, shift=options.heading_shift)]
    if isinstance(block, FencedCode):
        return [_fenced_code(block, bundle)]
    if isinstance(block, Blockquote):
        inner = "<br>".join(render_inline_html(line, bundle) for line in block.lines)
        return [f'<blockquote style="{bundle.blockquote}">{inner}</blockquote>']
    if isinstance(block, UnorderedList):
        return [_list(block.items, "ul", bundle.ul, bundle)]
    if isinstance(block, OrderedList):
        return [_list(block.items, "ol", bundle.ol, bundle)]
    if isinstance(block, HorizontalRule):
        return [f'<hr style="{bundle.hr}">']
    if isinstance(block, Table):
        if block.is_well_formed:
            return [_table(block, bundle)]
        logger.debug("Table at line %d has no separator row, rendering as text", block.span[0] + 1)
        return [_paragraph((row,), bundle) for row in block.rows]
    return [_paragraph(block.lines, bundle)]


def render_wechat(
    markdown: str,
    options: RenderOptions | None = None,
    themes: Mapping[str, StyleBundle] = THEMES,
) -> str:
    """Render a Markdown document to a single styled HTML fragment.

    Returns an empty string when the document has no content.
    """
    opts = options if options is not None else RenderOptions()
    bundle = resolve_theme(opts.theme_id, themes)

    parts: list[str] = []
    for block in segment(split_lines(markdown)):
        parts.extend(_render_block(block, bundle, opts))

    if not parts:
        return ""
    body = "\n".join(parts)
    return f'<section style="{bundle.container}">\n{body}\n</section>'
