"""Shared fixtures: isolated config directory and sample notes on disk."""

from __future__ import annotations

import textwrap
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


SAMPLE_NOTE = textwrap.dedent("""\
    ---
    title: Weekend Notes
    author: ron
    ---
    # Weekend **Notes**

    A short intro with `code` and a [[Linked Note|link]].

    ## Checklist

    - Pack bags
    - Book tickets

    > Travel light.

    ```python
    print("<hi>")
    ```

    | Day | Plan |
    |-----|------|
    | Sat | Hike |
    """)


@pytest.fixture(autouse=True)
def config_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so user config never leaks in."""
    home = tmp_path / "config-home"
    home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    return home


@pytest.fixture
def write_note(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes a Markdown note and returns its path."""

    def _write(content: str = SAMPLE_NOTE, name: str = "note.md") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
