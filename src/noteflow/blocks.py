"""Line-oriented block segmenter shared by both renderers.

``segment()`` walks the document with a forward-only cursor and tries the
block matchers in a fixed priority order; the first match wins and consumes
one or more lines. Anything that matches nothing accumulates into a
paragraph.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Sequence

logger = logging.getLogger(__name__)

FENCE = re.compile(r"^```")
HEADING = re.compile(r"^(#{1,6})\s+(.+)$")
BLOCKQUOTE = re.compile(r"^>\s?")
UNORDERED_ITEM = re.compile(r"^[-*+]\s")
ORDERED_ITEM = re.compile(r"^\d+\.\s")
HORIZONTAL_RULE = re.compile(r"^(?:-{3,}|\*{3,})$")
# A full separator row: only pipes, dashes, colons and whitespace.
TABLE_SEPARATOR = re.compile(r"^\|?[\s\-|:]+\|?$")


# === Blocks ===


@dataclass(frozen=True)
class Heading:
    """ATX heading, ``level`` is the number of leading hashes (1-6)."""

    level: int
    text: str
    span: tuple[int, int]


@dataclass(frozen=True)
class FencedCode:
    """Fenced code block; ``lines`` are the raw content lines."""

    language: str
    lines: tuple[str, ...]
    span: tuple[int, int]
    closed: bool = True


@dataclass(frozen=True)
class Blockquote:
    """Run of ``>`` lines with the prefix stripped."""

    lines: tuple[str, ...]
    span: tuple[int, int]


@dataclass(frozen=True)
class UnorderedList:
    """Run of ``-``/``*``/``+`` items with the marker stripped."""

    items: tuple[str, ...]
    span: tuple[int, int]


@dataclass(frozen=True)
class OrderedList:
    """Run of ``N.`` items with the numeral stripped."""

    items: tuple[str, ...]
    span: tuple[int, int]


@dataclass(frozen=True)
class HorizontalRule:
    span: tuple[int, int]


@dataclass(frozen=True)
class Table:
    """Contiguous table rows as written in the source."""

    rows: tuple[str, ...]
    span: tuple[int, int]

    @property
    def is_well_formed(self) -> bool:
        """True when there is a header row followed by a separator row."""
        return len(self.rows) >= 2 and is_separator_row(self.rows[1])  # noqa: PLR2004

    @property
    def header_cells(self) -> list[str]:
        return split_table_row(self.rows[0]) if self.rows else []

    @property
    def body_rows(self) -> list[list[str]]:
        return [split_table_row(row) for row in self.rows[2:]]


@dataclass(frozen=True)
class Paragraph:
    lines: tuple[str, ...]
    span: tuple[int, int]


@dataclass(frozen=True)
class Blank:
    span: tuple[int, int]


Block: TypeAlias = (
    Heading
    | FencedCode
    | Blockquote
    | UnorderedList
    | OrderedList
    | HorizontalRule
    | Table
    | Paragraph
    | Blank
)


# === Helpers ===


def split_lines(markdown: str) -> list[str]:
    """Normalize line endings and split a document into lines."""
    return markdown.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def split_table_row(line: str) -> list[str]:
    """Split a table row into trimmed cells, ignoring one outer pipe on each side."""
    line = line.strip().removeprefix("|").removesuffix("|")
    return [cell.strip() for cell in line.split("|")]


def is_separator_row(line: str) -> bool:
    return TABLE_SEPARATOR.match(line) is not None


def is_horizontal_rule(line: str) -> bool:
    return HORIZONTAL_RULE.match(line.strip()) is not None


class LineCursor:
    """Forward-only cursor over a sequence of lines."""

    def __init__(self, lines: Sequence[str]) -> None:
        self._lines = lines
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._lines)

    def peek(self, offset: int = 0) -> str | None:
        """Return the line ``offset`` lines ahead, or None past the end."""
        index = self._pos + offset
        if 0 <= index < len(self._lines):
            return self._lines[index]
        return None

    def advance(self, count: int = 1) -> list[str]:
        """Consume ``count`` lines (at least one) and return them."""
        if count < 1:
            msg = f"Cursor must advance by at least one line, got {count}"
            raise ValueError(msg)
        taken = list(self._lines[self._pos : self._pos + count])
        self._pos = min(self._pos + count, len(self._lines))
        return taken

    def take_while(self, predicate: Callable[[str], bool]) -> list[str]:
        """Consume lines for as long as ``predicate`` holds."""
        taken: list[str] = []
        while (line := self.peek()) is not None and predicate(line):
            taken.append(line)
            self._pos += 1
        return taken


# === Classification ===


def _announces_table(next_line: str | None) -> bool:
    # A bare ``---`` carries no pipe and stays a horizontal rule.
    return next_line is not None and "|" in next_line and is_separator_row(next_line)


def _starts_table(line: str, next_line: str | None) -> bool:
    return line.startswith("|") or _announces_table(next_line)


def _starts_non_table_block(line: str) -> bool:
    return (
        line.strip() == ""
        or FENCE.match(line) is not None
        or HEADING.match(line) is not None
        or BLOCKQUOTE.match(line) is not None
        or UNORDERED_ITEM.match(line) is not None
        or ORDERED_ITEM.match(line) is not None
        or is_horizontal_rule(line)
    )


def _starts_block(line: str, next_line: str | None) -> bool:
    """True when ``line`` would open any block other than a paragraph."""
    return _starts_non_table_block(line) or _starts_table(line, next_line)


def _read_fence(cursor: LineCursor) -> FencedCode:
    start = cursor.position
    opening = cursor.advance()[0]
    language = opening[3:].strip()
    body = cursor.take_while(lambda line: FENCE.match(line) is None)
    closed = not cursor.at_end
    if closed:
        cursor.advance()
    else:
        logger.debug("Unterminated code fence at line %d runs to end of document", start + 1)
    return FencedCode(language, tuple(body), (start, cursor.position), closed=closed)


def _read_table(cursor: LineCursor) -> Table:
    start = cursor.position
    header = cursor.advance()[0]
    if header.startswith("|"):
        rest = cursor.take_while(lambda line: line.startswith("|"))
    else:
        # Pipe-less table: the separator that announced it, then body rows up
        # to the first line that opens some other block.
        rest = cursor.advance()
        rest += cursor.take_while(lambda line: "|" in line and not _starts_non_table_block(line))
    return Table((header, *rest), (start, cursor.position))


def _read_paragraph(cursor: LineCursor) -> Paragraph:
    start = cursor.position
    lines = cursor.advance()
    while (line := cursor.peek()) is not None and not _starts_block(line, cursor.peek(1)):
        lines.append(line)
        cursor.advance()
    return Paragraph(tuple(lines), (start, cursor.position))


def segment(lines: Sequence[str]) -> Iterator[Block]:
    """Split ``lines`` into blocks, in document order."""
    cursor = LineCursor(lines)
    while (line := cursor.peek()) is not None:
        start = cursor.position

        if line.strip() == "":
            cursor.advance()
            yield Blank((start, cursor.position))
            continue

        if FENCE.match(line):
            yield _read_fence(cursor)
            continue

        if heading := HEADING.match(line):
            cursor.advance()
            yield Heading(len(heading.group(1)), heading.group(2), (start, cursor.position))
            continue

        if BLOCKQUOTE.match(line):
            quoted = cursor.take_while(lambda text: BLOCKQUOTE.match(text) is not None)
            stripped = tuple(BLOCKQUOTE.sub("", text, count=1) for text in quoted)
            yield Blockquote(stripped, (start, cursor.position))
            continue

        if UNORDERED_ITEM.match(line):
            items = cursor.take_while(lambda text: UNORDERED_ITEM.match(text) is not None)
            stripped = tuple(UNORDERED_ITEM.sub("", text, count=1) for text in items)
            yield UnorderedList(stripped, (start, cursor.position))
            continue

        if ORDERED_ITEM.match(line):
            items = cursor.take_while(lambda text: ORDERED_ITEM.match(text) is not None)
            stripped = tuple(ORDERED_ITEM.sub("", text, count=1) for text in items)
            yield OrderedList(stripped, (start, cursor.position))
            continue

        if is_horizontal_rule(line):
            cursor.advance()
            yield HorizontalRule((start, cursor.position))
            continue

        if _starts_table(line, cursor.peek(1)):
            yield _read_table(cursor)
            continue

        yield _read_paragraph(cursor)
