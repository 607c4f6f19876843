"""User settings: load and validate config.toml."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from noteflow.options import (
    DEFAULT_MAX_LINE_LENGTH,
    EMPHASIS_STYLES,
    HEADING_STYLES,
    RenderOptions,
)
from noteflow.styles import DEFAULT_THEME_ID

if TYPE_CHECKING:
    from noteflow.options import EmphasisStyle, HeadingStyle


class ConfigError(Exception):
    """Raised when config.toml is malformed or holds invalid values."""


@dataclass(frozen=True)
class Settings:
    """Persistent defaults for both renderers."""

    wechat_heading_shift: bool = True
    wechat_theme: str = DEFAULT_THEME_ID
    xhs_emphasis_style: EmphasisStyle = "「」"
    xhs_heading_style: HeadingStyle = "brackets"
    xhs_max_line_length: int = DEFAULT_MAX_LINE_LENGTH

    def render_options(self) -> RenderOptions:
        return RenderOptions(
            heading_shift=self.wechat_heading_shift,
            theme_id=self.wechat_theme,
            emphasis_style=self.xhs_emphasis_style,
            heading_style=self.xhs_heading_style,
            max_line_length=self.xhs_max_line_length,
        )


def get_config_path() -> Path:
    """Return the path to config.toml, respecting XDG_CONFIG_HOME."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "noteflow" / "config.toml"


def _section(data: dict[str, Any], name: str, path: Path) -> dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        msg = f"[{name}] in {path} must be a table"
        raise ConfigError(msg)
    return section


def _typed(
    section: dict[str, Any], key: str, expected: type, default: Any, where: str  # noqa: ANN401
) -> Any:  # noqa: ANN401
    if key not in section:
        return default
    value = section[key]
    # bool is an int subclass; keep `max_line_length = true` out.
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        msg = f"{where}.{key} must be of type {expected.__name__}, got {value!r}"
        raise ConfigError(msg)
    return value


def _choice(
    section: dict[str, Any], key: str, choices: tuple[str, ...], default: str, where: str
) -> str:
    value: str = _typed(section, key, str, default, where)
    if value not in choices:
        msg = f"{where}.{key} must be one of {', '.join(choices)}, got {value!r}"
        raise ConfigError(msg)
    return value


def load_settings(path: Path) -> Settings:
    """Load and validate settings from a TOML file.

    Returns default settings if the file does not exist.
    Raises ConfigError on parse errors or invalid values.
    """
    if not path.exists():
        return Settings()

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {path}: {e}"
        raise ConfigError(msg) from e

    defaults = Settings()
    wechat = _section(data, "wechat", path)
    xhs = _section(data, "xhs", path)
    where_wechat = f"{path}: wechat"
    where_xhs = f"{path}: xhs"

    max_line_length: int = _typed(
        xhs, "max_line_length", int, defaults.xhs_max_line_length, where_xhs
    )
    if max_line_length < 0:
        msg = f"{where_xhs}.max_line_length must be >= 0, got {max_line_length}"
        raise ConfigError(msg)

    return Settings(
        wechat_heading_shift=_typed(
            wechat, "heading_shift", bool, defaults.wechat_heading_shift, where_wechat
        ),
        wechat_theme=_typed(wechat, "theme", str, defaults.wechat_theme, where_wechat),
        xhs_emphasis_style=_choice(  # type: ignore[arg-type]
            xhs, "emphasis_style", EMPHASIS_STYLES, defaults.xhs_emphasis_style, where_xhs
        ),
        xhs_heading_style=_choice(  # type: ignore[arg-type]
            xhs, "heading_style", HEADING_STYLES, defaults.xhs_heading_style, where_xhs
        ),
        xhs_max_line_length=max_line_length,
    )
