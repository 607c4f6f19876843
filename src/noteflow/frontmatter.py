"""Split a leading ``---`` frontmatter block off a note."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_FRONTMATTER = re.compile(r"---\n(.*?)\n---\n?(.*)", re.DOTALL)


@dataclass(frozen=True)
class Frontmatter:
    """Flat ``key: value`` pairs from the frontmatter, plus the remaining body."""

    data: dict[str, str] = field(default_factory=dict)
    content: str = ""


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def parse_frontmatter(markdown: str) -> Frontmatter:
    """Parse YAML-ish frontmatter.

    Only single-line ``key: value`` entries are understood; values keep any
    further colons and are not unquoted. Without frontmatter the data is empty
    and the content is the (newline-normalized) input.
    """
    normalized = normalize_newlines(markdown)
    match = _FRONTMATTER.fullmatch(normalized)
    if match is None:
        return Frontmatter({}, normalized)

    data: dict[str, str] = {}
    for line in match.group(1).split("\n"):
        key, sep, value = line.partition(":")
        key = key.strip()
        if key and sep:
            data[key] = value.strip()
    return Frontmatter(data, match.group(2))
