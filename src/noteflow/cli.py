"""CLI entry point and subcommand definitions."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from noteflow.config import ConfigError, get_config_path, load_settings
from noteflow.notes import Note, NoteError, Platform, read_note, render_note
from noteflow.options import EMPHASIS_STYLES, HEADING_STYLES, RenderOptions
from noteflow.styles import DEFAULT_THEME_ID, THEMES

logger = logging.getLogger(__name__)


def _load_options(args: argparse.Namespace) -> RenderOptions:
    """Build render options from config.toml, overridden by command-line flags."""
    config_path = Path(args.config) if args.config else get_config_path()
    try:
        options = load_settings(config_path).render_options()
    except ConfigError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    overrides: dict[str, object] = {}
    if getattr(args, "theme", None) is not None:
        overrides["theme_id"] = args.theme
    if getattr(args, "no_heading_shift", False):
        overrides["heading_shift"] = False
    if getattr(args, "emphasis", None) is not None:
        overrides["emphasis_style"] = args.emphasis
    if getattr(args, "heading_style", None) is not None:
        overrides["heading_style"] = args.heading_style
    if getattr(args, "max_line_length", None) is not None:
        overrides["max_line_length"] = args.max_line_length
    return options.replace(**overrides) if overrides else options


def _load_note(args: argparse.Namespace) -> Note:
    try:
        return read_note(Path(args.file), strip_frontmatter=not args.keep_frontmatter)
    except NoteError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)


def _write_output(text: str, args: argparse.Namespace) -> None:
    if args.output:
        try:
            Path(args.output).write_text(text + "\n", encoding="utf-8")
        except OSError as e:
            print(f"Cannot write {args.output}: {e.strerror or e}", file=sys.stderr)
            sys.exit(1)
        logger.info("Wrote %s", args.output)
    else:
        print(text)


def _cmd_render(args: argparse.Namespace, platform: Platform) -> None:
    options = _load_options(args)
    note = _load_note(args)
    theme = getattr(args, "theme", None)
    if platform is Platform.WECHAT and theme is not None and theme not in THEMES:
        print(f"Unknown theme {theme!r}, using {DEFAULT_THEME_ID!r}", file=sys.stderr)
    output = render_note(note, platform, options)
    if args.json:
        output = json.dumps(
            {"title": note.title, "frontmatter": note.frontmatter.data, "content": output},
            ensure_ascii=False,
            indent=2,
        )
    _write_output(output, args)


def _cmd_wechat(args: argparse.Namespace) -> None:
    """Render a note as WeChat HTML."""
    _cmd_render(args, Platform.WECHAT)


def _cmd_xhs(args: argparse.Namespace) -> None:
    """Render a note as XHS plain text."""
    _cmd_render(args, Platform.XHS)


def _cmd_themes(_args: argparse.Namespace) -> None:
    """List the available WeChat themes."""
    for theme_id, bundle in THEMES.items():
        marker = "*" if theme_id == DEFAULT_THEME_ID else " "
        print(f"{marker} {theme_id:<12} {bundle.name}")


def _cmd_preview(args: argparse.Namespace) -> None:
    """Launch the Textual preview.

    Imports are deferred to avoid loading Textual for CLI-only commands.
    """
    from noteflow.tui.app import PreviewApp  # noqa: PLC0415

    options = _load_options(args)
    note = _load_note(args)
    PreviewApp(note, options, platform=Platform(args.platform)).run()


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        number = -1
    if number < 0:
        msg = f"expected a non-negative integer, got {value!r}"
        raise argparse.ArgumentTypeError(msg)
    return number


def _add_note_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("file", help="Markdown note to render")
    parser.add_argument(
        "--keep-frontmatter",
        action="store_true",
        help="Render the frontmatter block instead of stripping it",
    )


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json", action="store_true", help="Output title, frontmatter and content as JSON"
    )
    parser.add_argument("-o", "--output", help="Write to this file instead of stdout")


def _add_wechat_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--theme", help=f"Theme id (default: {DEFAULT_THEME_ID})")
    parser.add_argument(
        "--no-heading-shift",
        action="store_true",
        help="Keep heading levels as written instead of shifting H1 to H2",
    )


def _add_xhs_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--emphasis", choices=EMPHASIS_STYLES, help="Brackets around bold text")
    parser.add_argument("--heading-style", choices=HEADING_STYLES, help="Heading marker style")
    parser.add_argument(
        "--max-line-length",
        type=_non_negative_int,
        help="Soft-wrap paragraphs at this many characters (0 disables wrapping)",
    )


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and dispatch to the appropriate subcommand."""
    parser = argparse.ArgumentParser(
        prog="noteflow",
        description="Convert Markdown notes for WeChat Official Accounts and Xiaohongshu",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--config", help="Path to config.toml (default: XDG config dir)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # wechat
    wechat_parser = subparsers.add_parser("wechat", help="Render a note as WeChat HTML")
    _add_note_arguments(wechat_parser)
    _add_wechat_arguments(wechat_parser)
    _add_output_arguments(wechat_parser)

    # xhs
    xhs_parser = subparsers.add_parser("xhs", help="Render a note as XHS plain text")
    _add_note_arguments(xhs_parser)
    _add_xhs_arguments(xhs_parser)
    _add_output_arguments(xhs_parser)

    # themes
    subparsers.add_parser("themes", help="List WeChat themes")

    # preview
    preview_parser = subparsers.add_parser("preview", help="Preview a note in the terminal")
    _add_note_arguments(preview_parser)
    preview_parser.add_argument(
        "--platform",
        choices=[p.value for p in Platform],
        default=Platform.WECHAT.value,
        help="Platform shown first (default: wechat)",
    )
    _add_wechat_arguments(preview_parser)
    _add_xhs_arguments(preview_parser)

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    dispatch = {
        "wechat": _cmd_wechat,
        "xhs": _cmd_xhs,
        "themes": _cmd_themes,
        "preview": _cmd_preview,
    }
    dispatch[args.command](args)
