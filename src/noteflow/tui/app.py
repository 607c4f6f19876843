"""Textual app previewing a note rendered for one platform at a time."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Footer, Header, Static

from noteflow.notes import Platform, render_note
from noteflow.styles import THEMES, resolve_theme
from noteflow.tui.help_screen import HelpScreen

if TYPE_CHECKING:
    from collections.abc import Mapping

    from textual.binding import BindingType

    from noteflow.notes import Note
    from noteflow.options import RenderOptions
    from noteflow.styles import StyleBundle


class PreviewApp(App[None]):
    """Preview a note as WeChat HTML or XHS plain text."""

    TITLE = "noteflow"

    CSS = """
    #status {
        height: 1;
        padding: 0 2;
        background: $primary-background;
    }
    #preview-scroll {
        height: 1fr;
        padding: 1 2;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("q", "quit", "Quit", show=True),
        Binding("question_mark", "show_help", "Help", show=True),
        Binding("p", "toggle_platform", "Platform", show=True),
        Binding("t", "next_theme", "Theme", show=True),
        Binding("j", "scroll_down", "Scroll down", show=False),
        Binding("k", "scroll_up", "Scroll up", show=False),
    ]

    def __init__(
        self,
        note: Note,
        options: RenderOptions,
        themes: Mapping[str, StyleBundle] = THEMES,
        *,
        platform: Platform = Platform.WECHAT,
    ) -> None:
        super().__init__()
        self._note = note
        self._options = options
        self._themes = themes
        self.platform = platform
        self.rendered = ""

    @property
    def options(self) -> RenderOptions:
        return self._options

    def compose(self) -> ComposeResult:
        """Create the status line and the scrollable preview."""
        yield Header()
        yield Static(id="status")
        with VerticalScroll(id="preview-scroll"):
            yield Static(id="preview")
        yield Footer()

    def on_mount(self) -> None:
        """Render the initial preview."""
        self.sub_title = self._note.title
        self._render_preview()

    def _status_line(self) -> str:
        if self.platform is Platform.WECHAT:
            theme = resolve_theme(self._options.theme_id, self._themes)
            return f"Platform: {self.platform.label} · Theme: {theme.name}"
        return f"Platform: {self.platform.label}"

    def _render_preview(self) -> None:
        self.rendered = render_note(self._note, self.platform, self._options, self._themes)
        self.query_one("#status", Static).update(self._status_line())
        preview = self.query_one("#preview", Static)
        if self.rendered:
            # Plain Text so brackets in the output are never read as markup.
            preview.update(Text(self.rendered))
        else:
            preview.update(Text("Note is empty.", style="dim"))

    def action_toggle_platform(self) -> None:
        """Switch between WeChat HTML and XHS text."""
        self.platform = Platform.XHS if self.platform is Platform.WECHAT else Platform.WECHAT
        self._render_preview()

    def action_next_theme(self) -> None:
        """Cycle to the next theme; only meaningful for WeChat."""
        if self.platform is not Platform.WECHAT or not self._themes:
            return
        ids = list(self._themes)
        current = self._options.theme_id
        next_index = (ids.index(current) + 1) % len(ids) if current in ids else 0
        self._options = self._options.replace(theme_id=ids[next_index])
        self._render_preview()

    def action_scroll_down(self) -> None:
        self.query_one("#preview-scroll", VerticalScroll).scroll_down(animate=False)

    def action_scroll_up(self) -> None:
        self.query_one("#preview-scroll", VerticalScroll).scroll_up(animate=False)

    def action_show_help(self) -> None:
        """Show the help overlay."""
        self.push_screen(HelpScreen())
