"""Theme table: per-role inline style strings for the WeChat HTML renderer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

DEFAULT_THEME_ID = "default"


@dataclass(frozen=True)
class StyleBundle:
    """Inline CSS for every element the HTML renderer emits."""

    name: str
    container: str
    paragraph: str
    h1: str
    h2: str
    h3: str
    h4: str  # shared by h4-h6
    blockquote: str
    pre: str
    pre_code: str
    code: str
    ul: str
    ol: str
    li: str
    table: str
    th: str
    td: str
    hr: str

    def heading(self, level: int) -> str:
        """Return the style for an ``h{level}`` tag."""
        if level <= 1:
            return self.h1
        if level == 2:  # noqa: PLR2004
            return self.h2
        if level == 3:  # noqa: PLR2004
            return self.h3
        return self.h4


_DEFAULT = StyleBundle(
    name="Default",
    container="font-size:16px;color:#333;line-height:1.7;word-break:break-word",
    paragraph="margin:8px 0;line-height:1.7",
    h1="font-size:1.6em;font-weight:bold;margin:16px 0 8px",
    h2="font-size:1.4em;font-weight:bold;margin:16px 0 8px",
    h3="font-size:1.2em;font-weight:bold;margin:16px 0 8px",
    h4="font-size:1em;font-weight:bold;margin:16px 0 8px",
    blockquote="border-left:3px solid #ccc;margin:8px 0;padding:4px 12px;color:#666",
    pre="background:#f5f5f5;padding:12px;border-radius:4px;overflow-x:auto",
    pre_code="font-family:monospace;font-size:0.9em",
    code="font-family:monospace;background:#f5f5f5;padding:2px 4px;border-radius:3px",
    ul="padding-left:1.5em;margin:8px 0",
    ol="padding-left:1.5em;margin:8px 0",
    li="margin:4px 0",
    table="border-collapse:collapse;width:100%",
    th="border:1px solid #ddd;padding:6px 10px;background:#f0f0f0",
    td="border:1px solid #ddd;padding:6px 10px",
    hr="border:none;border-top:1px solid #ddd;margin:16px 0",
)

_MINIMAL = StyleBundle(
    name="Minimal",
    container="font-size:15px;color:#222;line-height:1.8",
    paragraph="margin:0 0 14px",
    h1="font-size:24px;font-weight:bold;margin:24px 0 12px",
    h2="font-size:20px;font-weight:bold;margin:20px 0 10px",
    h3="font-size:18px;font-weight:bold;margin:16px 0 8px",
    h4="font-size:16px;font-weight:bold;margin:14px 0 6px",
    blockquote="margin:0 0 14px;padding:8px 12px;border-left:3px solid #bbb;color:#444",
    pre="margin:0 0 14px;padding:10px;background:#f5f5f5;white-space:pre-wrap",
    pre_code="font-family:Menlo,Monaco,Consolas,monospace;font-size:13px;line-height:1.6",
    code="padding:1px 4px;background:#f5f5f5;font-family:Menlo,Monaco,Consolas,monospace",
    ul="margin:0 0 14px;padding-left:1.3em",
    ol="margin:0 0 14px;padding-left:1.3em",
    li="margin:0 0 6px",
    table="border-collapse:collapse;width:100%;margin:0 0 14px",
    th="border-bottom:2px solid #ccc;padding:6px 8px;text-align:left",
    td="border-bottom:1px solid #eee;padding:6px 8px",
    hr="border:0;border-top:1px solid #ccc;margin:20px 0",
)

_ELEGANT = StyleBundle(
    name="Elegant",
    container=(
        "font-family:Georgia,'Songti SC',serif;font-size:16px;color:#3e3a36;"
        "line-height:1.9;letter-spacing:0.5px"
    ),
    paragraph="margin:10px 0;text-align:justify",
    h1="font-size:1.6em;font-weight:bold;text-align:center;margin:24px 0 12px;color:#8b5e3c",
    h2=(
        "font-size:1.35em;font-weight:bold;margin:22px 0 10px;padding-bottom:6px;"
        "border-bottom:1px solid #d8c3a5;color:#8b5e3c"
    ),
    h3="font-size:1.15em;font-weight:bold;margin:18px 0 8px;color:#a0724f",
    h4="font-size:1em;font-weight:bold;margin:14px 0 6px;color:#a0724f",
    blockquote=(
        "margin:12px 0;padding:8px 16px;background:#faf6f0;"
        "border-left:4px solid #d8c3a5;color:#7a6a58;font-style:italic"
    ),
    pre="background:#faf6f0;padding:12px;border-radius:6px;overflow-x:auto",
    pre_code="font-family:Menlo,Consolas,monospace;font-size:0.88em;color:#5c4b3b",
    code="font-family:Menlo,Consolas,monospace;background:#f3ebe0;padding:2px 4px;color:#8b5e3c",
    ul="padding-left:1.6em;margin:10px 0",
    ol="padding-left:1.6em;margin:10px 0",
    li="margin:6px 0",
    table="border-collapse:collapse;width:100%;margin:12px 0",
    th="border:1px solid #d8c3a5;padding:6px 10px;background:#f3ebe0;color:#5c4b3b",
    td="border:1px solid #e6d8c3;padding:6px 10px",
    hr="border:none;border-top:1px dashed #d8c3a5;margin:24px 0",
)

_TECH = StyleBundle(
    name="Tech",
    container=(
        "font-family:-apple-system,BlinkMacSystemFont,'PingFang SC',sans-serif;"
        "font-size:15px;color:#1f2328;line-height:1.75"
    ),
    paragraph="margin:10px 0",
    h1="font-size:1.6em;font-weight:bold;margin:24px 0 12px;color:#0969da",
    h2=(
        "font-size:1.35em;font-weight:bold;margin:20px 0 10px;padding-left:10px;"
        "border-left:4px solid #0969da"
    ),
    h3="font-size:1.15em;font-weight:bold;margin:16px 0 8px;color:#0969da",
    h4="font-size:1em;font-weight:bold;margin:14px 0 6px",
    blockquote="margin:10px 0;padding:8px 14px;border-left:4px solid #94a3b8;background:#f6f8fa",
    pre="background:#0d1117;padding:14px;border-radius:6px;overflow-x:auto",
    pre_code="font-family:'JetBrains Mono',Menlo,monospace;font-size:13px;color:#e6edf3",
    code=(
        "font-family:'JetBrains Mono',Menlo,monospace;background:#eff1f3;"
        "padding:2px 5px;border-radius:4px;color:#cf222e"
    ),
    ul="padding-left:1.4em;margin:10px 0",
    ol="padding-left:1.4em;margin:10px 0",
    li="margin:4px 0",
    table="border-collapse:collapse;width:100%;margin:12px 0;font-size:14px",
    th="border:1px solid #d0d7de;padding:6px 12px;background:#f6f8fa",
    td="border:1px solid #d0d7de;padding:6px 12px",
    hr="border:none;border-top:2px solid #d0d7de;margin:20px 0",
)

THEMES: Mapping[str, StyleBundle] = MappingProxyType(
    {
        DEFAULT_THEME_ID: _DEFAULT,
        "minimal": _MINIMAL,
        "elegant": _ELEGANT,
        "tech": _TECH,
    }
)


def resolve_theme(theme_id: str, themes: Mapping[str, StyleBundle] = THEMES) -> StyleBundle:
    """Look up a theme by id, falling back to the default bundle on a miss."""
    bundle = themes.get(theme_id)
    if bundle is not None:
        return bundle
    logger.debug("Unknown theme %r, using %r", theme_id, DEFAULT_THEME_ID)
    return themes.get(DEFAULT_THEME_ID, _DEFAULT)
