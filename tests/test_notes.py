"""Tests for reading notes and dispatching them to a renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from noteflow.notes import NoteError, Platform, read_note, render_note
from noteflow.options import RenderOptions

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


def test_read_note_strips_frontmatter(write_note: Callable[..., Path]) -> None:
    note = read_note(write_note())
    assert note.frontmatter.data == {"title": "Weekend Notes", "author": "ron"}
    assert note.body.startswith("# Weekend **Notes**")


def test_read_note_keeps_frontmatter_on_request(write_note: Callable[..., Path]) -> None:
    note = read_note(write_note(), strip_frontmatter=False)
    assert note.body.startswith("---\ntitle: Weekend Notes")
    assert note.frontmatter.data["title"] == "Weekend Notes"


def test_title_prefers_frontmatter(write_note: Callable[..., Path]) -> None:
    assert read_note(write_note()).title == "Weekend Notes"


def test_title_falls_back_to_first_heading(write_note: Callable[..., Path]) -> None:
    path = write_note("intro\n\n## The **Real** Title\n\n# Later\n")
    assert read_note(path).title == "The 「Real」 Title"


def test_title_falls_back_to_file_stem(write_note: Callable[..., Path]) -> None:
    path = write_note("no headings here", name="my-draft.md")
    assert read_note(path).title == "my-draft"


def test_missing_note_raises_note_error(tmp_path: Path) -> None:
    with pytest.raises(NoteError, match="not found"):
        read_note(tmp_path / "missing.md")


def test_undecodable_note_raises_note_error(tmp_path: Path) -> None:
    path = tmp_path / "latin1.md"
    path.write_bytes(b"caf\xe9")
    with pytest.raises(NoteError, match="UTF-8"):
        read_note(path)


def test_directory_raises_note_error(tmp_path: Path) -> None:
    with pytest.raises(NoteError):
        read_note(tmp_path)


def test_render_note_dispatches_by_platform(write_note: Callable[..., Path]) -> None:
    note = read_note(write_note())
    options = RenderOptions()

    html = render_note(note, Platform.WECHAT, options)
    assert html.startswith("<section")
    assert "&lt;hi&gt;" in html
    assert "<table" in html
    assert "title: Weekend Notes" not in html

    text = render_note(note, Platform.XHS, options)
    assert text.startswith("【Weekend 「Notes」】")
    assert "print(\"<hi>\")" in text
    assert "Day | Plan" in text
    assert "<" not in text.replace('print("<hi>")', "")


def test_platform_labels() -> None:
    assert Platform("wechat") is Platform.WECHAT
    assert Platform.XHS.label == "Xiaohongshu Text"
