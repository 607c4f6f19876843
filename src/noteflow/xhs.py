"""Markdown to Xiaohongshu (XHS) plain text.

XHS posts accept no markup at all, so structure is carried by Unicode
markers: bracketed or emoji headings, bullet glyphs, quote marks around
blockquotes and bars around code.
"""

from __future__ import annotations

import re
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
    is_separator_row,
    segment,
    split_lines,
    split_table_row,
)
from noteflow.inline import render_inline_plain
from noteflow.options import RenderOptions

if TYPE_CHECKING:
    from noteflow.blocks import Block

HORIZONTAL_RULE = "—" * 20
QUOTE_OPEN = "❝"
QUOTE_CLOSE = "❞"
CODE_END = "▌ end ▌"

_BLANK_RUN = re.compile(r"\n{3,}")


def text_length(text: str) -> int:
    """Length in UTF-16 code units, so astral emoji count as two."""
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


def soft_wrap(text: str, max_length: int) -> str:
    """Greedily pack space-separated words into lines of at most ``max_length``.

    Widths are measured with :func:`text_length`. A word longer than
    ``max_length`` gets a line of its own and is never split.
    ``max_length <= 0`` disables wrapping.
    """
    if max_length <= 0 or text_length(text) <= max_length:
        return text
    lines: list[str] = []
    current = ""
    for word in text.split(" "):
        if current and text_length(current) + 1 + text_length(word) > max_length:
            lines.append(current)
            current = word
        else:
            current = f"{current} {word}" if current else word
    if current:
        lines.append(current)
    return "\n".join(lines)


def collapse_blank_lines(text: str) -> str:
    """Collapse any run of three or more newlines into a single blank line."""
    return _BLANK_RUN.sub("\n\n", text)


def _format_heading(level: int, text: str, options: RenderOptions) -> str:
    emoji = options.heading_style == "emoji"
    if level == 1:
        return f"✨ {text} ✨" if emoji else f"【{text}】"
    if level == 2:  # noqa: PLR2004
        return f"✅ {text}" if emoji else f"▎{text}"
    return f"· {text}"


def _table_lines(block: Table, options: RenderOptions) -> list[str]:
    out: list[str] = []
    for row in block.rows:
        if is_separator_row(row):
            continue
        cells = [cell for cell in split_table_row(row) if cell]
        out.append(" | ".join(render_inline_plain(cell, options.emphasis_style) for cell in cells))
    return out


def _render_block(block: Block, options: RenderOptions) -> list[str]:
    """Render one block to output lines."""
    emphasis = options.emphasis_style
    if isinstance(block, Blank):
        return [""]
    if isinstance(block, FencedCode):
        marker = f"▌ {block.language} ▌" if block.language else "▌ code ▌"
        return [marker, *block.lines, CODE_END]
    if isinstance(block, Heading):
        text = render_inline_plain(block.text, emphasis)
        return ["", _format_heading(block.level, text, options), ""]
    if isinstance(block, HorizontalRule):
        return [HORIZONTAL_RULE]
    if isinstance(block, Blockquote):
        quoted = [render_inline_plain(line, emphasis) for line in block.lines]
        return [QUOTE_OPEN, *quoted, QUOTE_CLOSE]
    if isinstance(block, UnorderedList):
        return [f"• {render_inline_plain(item, emphasis)}" for item in block.items]
    if isinstance(block, OrderedList):
        return [
            f"{number}. {render_inline_plain(item, emphasis)}"
            for number, item in enumerate(block.items, start=1)
        ]
    if isinstance(block, Table):
        return _table_lines(block, options)
    text = " ".join(render_inline_plain(line, emphasis) for line in block.lines)
    return [soft_wrap(text, options.max_line_length)]


def render_xhs(markdown: str, options: RenderOptions | None = None) -> str:
    """Render a Markdown document to XHS-ready plain text."""
    opts = options if options is not None else RenderOptions()
    out: list[str] = []
    for block in segment(split_lines(markdown)):
        out.extend(_render_block(block, opts))
    return collapse_blank_lines("\n".join(out)).strip()
