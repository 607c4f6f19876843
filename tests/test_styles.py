"""Tests for the theme table and theme resolution."""

from __future__ import annotations

import dataclasses
from types import MappingProxyType

import pytest

from noteflow.styles import DEFAULT_THEME_ID, THEMES, StyleBundle, resolve_theme


def test_default_theme_is_registered() -> None:
    assert DEFAULT_THEME_ID in THEMES


def test_theme_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        THEMES["new"] = THEMES[DEFAULT_THEME_ID]  # type: ignore[index]


def test_bundles_are_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        THEMES[DEFAULT_THEME_ID].paragraph = "color:red"  # type: ignore[misc]


@pytest.mark.parametrize("theme_id", list(THEMES))
def test_every_role_is_filled(theme_id: str) -> None:
    """Inline processing must not find emphasis delimiters inside style strings."""
    bundle = THEMES[theme_id]
    for field in dataclasses.fields(StyleBundle):
        value = getattr(bundle, field.name)
        assert value, f"{theme_id}.{field.name} is empty"
        assert not set(value) & set("*_~`[]"), f"{theme_id}.{field.name} has markup chars"


def test_resolve_known_theme() -> None:
    assert resolve_theme("elegant") is THEMES["elegant"]


def test_resolve_unknown_theme_falls_back() -> None:
    assert resolve_theme("does-not-exist") is THEMES[DEFAULT_THEME_ID]


def test_resolve_without_default_in_mapping_never_raises() -> None:
    themes = MappingProxyType({"only": THEMES["tech"]})
    bundle = resolve_theme("missing", themes)
    assert bundle.name == "Default"


@pytest.mark.parametrize(
    ("level", "role"),
    [(1, "h1"), (2, "h2"), (3, "h3"), (4, "h4"), (5, "h4"), (6, "h4")],
)
def test_heading_role_per_level(level: int, role: str) -> None:
    bundle = THEMES[DEFAULT_THEME_ID]
    assert bundle.heading(level) == getattr(bundle, role)
