"""Per-render configuration shared by both renderers."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Literal, TypeAlias

from noteflow.styles import DEFAULT_THEME_ID

EmphasisStyle: TypeAlias = Literal["「」", "【】"]
HeadingStyle: TypeAlias = Literal["brackets", "emoji"]

EMPHASIS_STYLES: tuple[str, ...] = ("「」", "【】")
HEADING_STYLES: tuple[str, ...] = ("brackets", "emoji")

DEFAULT_MAX_LINE_LENGTH = 60


@dataclass(frozen=True)
class RenderOptions:
    """Options for one render call.

    ``heading_shift`` and ``theme_id`` only affect WeChat HTML; the rest only
    affect XHS plain text. ``max_line_length <= 0`` disables soft wrapping.
    """

    heading_shift: bool = True
    theme_id: str = DEFAULT_THEME_ID
    emphasis_style: EmphasisStyle = "「」"
    heading_style: HeadingStyle = "brackets"
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH

    def replace(self, **changes: Any) -> RenderOptions:  # noqa: ANN401
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)
