"""Tests for the XHS plain-text renderer, soft wrap and blank-line collapse."""

from __future__ import annotations

import pytest

from noteflow.options import RenderOptions
from noteflow.xhs import (
    HORIZONTAL_RULE,
    collapse_blank_lines,
    render_xhs,
    soft_wrap,
    text_length,
)

EMOJI = RenderOptions(heading_style="emoji")


# === Headings ===


@pytest.mark.parametrize(
    ("markdown", "expected"),
    [
        ("# My Title", "【My Title】"),
        ("## Section", "▎Section"),
        ("### Sub", "· Sub"),
        ("###### Deep", "· Deep"),
    ],
)
def test_bracket_headings(markdown: str, expected: str) -> None:
    assert render_xhs(markdown) == expected


@pytest.mark.parametrize(
    ("markdown", "expected"),
    [
        ("# Title", "✨ Title ✨"),
        ("## Sec", "✅ Sec"),
        ("### Sub", "· Sub"),
        ("#### Deeper", "· Deeper"),
    ],
)
def test_emoji_headings(markdown: str, expected: str) -> None:
    assert render_xhs(markdown, EMOJI) == expected


def test_headings_are_surrounded_by_blank_lines() -> None:
    assert render_xhs("intro\n## Section\nbody") == "intro\n\n▎Section\n\nbody"


def test_heading_inline_markup_is_stripped() -> None:
    assert render_xhs("# **Bold Title**") == "【「Bold Title」】"


# === Emphasis ===


def test_bold_default_corner_brackets() -> None:
    assert render_xhs("**important**") == "「important」"


def test_bold_lenticular_brackets() -> None:
    assert render_xhs("**important**", RenderOptions(emphasis_style="【】")) == "【important】"


def test_italic_and_strike_markers_are_stripped() -> None:
    assert render_xhs("*italic text* and ~~gone~~") == "italic text and gone"


# === Blocks ===


def test_unordered_list_uses_bullets() -> None:
    assert render_xhs("- Apple\n* Banana\n+ Cherry") == "• Apple\n• Banana\n• Cherry"


def test_ordered_list_is_renumbered_from_one() -> None:
    assert render_xhs("5. First\n5. Second\n10. Third") == "1. First\n2. Second\n3. Third"


def test_blockquote_is_wrapped_in_quote_marks() -> None:
    assert render_xhs("> some **quote**\n> more") == "❝\nsome 「quote」\nmore\n❞"


def test_fenced_code_is_passed_through_raw() -> None:
    text = render_xhs("```python\nprint('**hi**')\n```")
    assert text == "▌ python ▌\nprint('**hi**')\n▌ end ▌"


def test_fenced_code_without_language() -> None:
    assert render_xhs("```\nx = 1\n```") == "▌ code ▌\nx = 1\n▌ end ▌"


def test_unterminated_fence_still_gets_end_marker() -> None:
    assert render_xhs("```sh\nls") == "▌ sh ▌\nls\n▌ end ▌"


def test_horizontal_rule() -> None:
    assert render_xhs("a\n\n---\n\nb") == f"a\n\n{HORIZONTAL_RULE}\n\nb"


def test_table_degrades_to_pipe_joined_lines() -> None:
    text = render_xhs("| Name | Age |\n|------|-----|\n| **Ron** | 30 |")
    assert text == "Name | Age\n「Ron」 | 30"
    assert "<table" not in text
    assert "---" not in text


def test_table_drops_empty_cells() -> None:
    assert render_xhs("| a |  | b |\n|---|---|---|") == "a | b"


def test_table_without_separator_keeps_all_rows() -> None:
    assert render_xhs("| a | b |\n| c | d |") == "a | b\nc | d"


def test_list_item_with_pipe_after_text_keeps_its_bullet() -> None:
    assert render_xhs("Steps\n- | not a separator") == "Steps\n• | not a separator"


def test_blockquote_after_pipe_less_table_is_quoted() -> None:
    text = render_xhs("a | b\n---|---\n1 | 2\n> quoted | cell")
    assert text == "a | b\n1 | 2\n❝\nquoted | cell\n❞"


def test_paragraph_lines_are_joined_with_spaces() -> None:
    assert render_xhs("one\ntwo\nthree") == "one two three"


def test_blank_lines_between_paragraphs_are_kept() -> None:
    assert render_xhs("Para 1\n\nPara 2") == "Para 1\n\nPara 2"


def test_many_blank_lines_collapse_to_one() -> None:
    text = render_xhs("Para 1\n\n\n\n\n\nPara 2")
    assert text == "Para 1\n\nPara 2"


def test_image_placeholder() -> None:
    assert render_xhs("![sunset](img/a.png)") == "[图片: sunset]"


def test_wiki_link_uses_plain_target() -> None:
    text = render_xhs("See [[My Note]]")
    assert text == "See My Note"
    assert "[[" not in text


# === Soft wrap ===


def test_short_line_is_unmodified() -> None:
    assert render_xhs("Short line", RenderOptions(max_line_length=60)) == "Short line"


def test_long_paragraph_wraps_within_limit() -> None:
    long = " ".join(["word"] * 20)
    text = render_xhs(long, RenderOptions(max_line_length=30))
    lines = text.split("\n")
    assert len(lines) > 1
    assert all(len(line) <= 30 for line in lines)
    assert " ".join(lines) == long


def test_zero_disables_wrapping() -> None:
    long = " ".join(["word"] * 20)
    assert render_xhs(long, RenderOptions(max_line_length=0)) == long


def test_wrap_applies_to_paragraphs_only() -> None:
    item = " ".join(["item"] * 10)
    text = render_xhs(f"- {item}\n\n> {item}", RenderOptions(max_line_length=10))
    assert f"• {item}" in text
    assert f"\n{item}\n" in text


def test_soft_wrap_greedy_packing() -> None:
    assert soft_wrap("aa bb cc dd", 5) == "aa bb\ncc dd"
    assert soft_wrap("aa bb cc", 6) == "aa bb\ncc"


def test_soft_wrap_never_splits_long_words() -> None:
    assert soft_wrap("tiny supercalifragilistic end", 8) == "tiny\nsupercalifragilistic\nend"


def test_astral_emoji_count_as_two_units() -> None:
    assert text_length("ab") == 2
    assert text_length("😀") == 2
    assert text_length("你好") == 2
    assert soft_wrap("😀😀 ab", 6) == "😀😀\nab"
    assert soft_wrap("你好 ab", 6) == "你好 ab"


def test_soft_wrap_fits_exactly() -> None:
    assert soft_wrap("abc def", 7) == "abc def"


@pytest.mark.parametrize("max_length", [0, -5])
def test_soft_wrap_disabled(max_length: int) -> None:
    assert soft_wrap("a b c d e f", max_length) == "a b c d e f"


def test_collapse_blank_lines() -> None:
    assert collapse_blank_lines("a\n\n\n\nb\n\nc\nd") == "a\n\nb\n\nc\nd"


# === Edge cases ===


@pytest.mark.parametrize("markdown", ["", "\n\n", "  \n\t"])
def test_empty_input(markdown: str) -> None:
    assert render_xhs(markdown) == ""


def test_rendering_is_deterministic() -> None:
    markdown = "# T\n\n**b** *i* `c`\n\n| a | b |\n|---|---|\n\n- x\n1. y\n> q\n```\nz"
    options = RenderOptions(heading_style="emoji", emphasis_style="【】", max_line_length=5)
    assert render_xhs(markdown, options) == render_xhs(markdown, options)
