"""Reading notes from disk and dispatching them to a platform renderer."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from noteflow.blocks import HEADING
from noteflow.frontmatter import Frontmatter, parse_frontmatter
from noteflow.inline import render_inline_plain
from noteflow.styles import THEMES
from noteflow.wechat import render_wechat
from noteflow.xhs import render_xhs

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from noteflow.options import RenderOptions
    from noteflow.styles import StyleBundle

logger = logging.getLogger(__name__)


class NoteError(Exception):
    """Raised when a note cannot be read or decoded."""


class Platform(enum.StrEnum):
    WECHAT = "wechat"
    XHS = "xhs"

    @property
    def label(self) -> str:
        return "WeChat HTML" if self is Platform.WECHAT else "Xiaohongshu Text"


@dataclass(frozen=True)
class Note:
    """A Markdown note with its frontmatter split off."""

    path: Path
    frontmatter: Frontmatter
    body: str

    @property
    def title(self) -> str:
        """Frontmatter ``title``, else the first heading, else the file stem."""
        title = self.frontmatter.data.get("title")
        if title:
            return title
        for line in self.body.split("\n"):
            if match := HEADING.match(line):
                return render_inline_plain(match.group(2)).strip()
        return self.path.stem


def read_note(path: Path, *, strip_frontmatter: bool = True) -> Note:
    """Read a UTF-8 Markdown note.

    With ``strip_frontmatter=False`` the frontmatter is still parsed but the
    body keeps it, so it is rendered along with the rest of the document.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        msg = f"Note not found: {path}"
        raise NoteError(msg) from e
    except UnicodeDecodeError as e:
        msg = f"Note is not valid UTF-8: {path}"
        raise NoteError(msg) from e
    except OSError as e:
        msg = f"Cannot read note {path}: {e.strerror or e}"
        raise NoteError(msg) from e

    frontmatter = parse_frontmatter(text)
    body = frontmatter.content if strip_frontmatter else text
    logger.debug("Read %s (%d frontmatter keys)", path, len(frontmatter.data))
    return Note(path=path, frontmatter=frontmatter, body=body)


def render_note(
    note: Note,
    platform: Platform,
    options: RenderOptions,
    themes: Mapping[str, StyleBundle] = THEMES,
) -> str:
    """Render a note's body for ``platform``."""
    if platform is Platform.WECHAT:
        return render_wechat(note.body, options, themes)
    return render_xhs(note.body, options)
