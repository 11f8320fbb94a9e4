from __future__ import annotations

import pytest

from mino.constants import HL_IDENT, HL_NORMAL, HL_NUMBER, LANG_C, OV_MATCH, OV_NORMAL, OV_SELECTED
from mino.row import Row
from mino.style import STYLE_RESET
from mino.syntax import syntax_for_lang

C = syntax_for_lang(LANG_C)


def test_update_expands_tabs_to_next_stop() -> None:
    row = Row.from_chars("\tab", 4)
    assert row.render == "    ab"
    assert row.has_tabs

    row = Row.from_chars("a\tb", 4)
    assert row.render == "a   b"

    row = Row.from_chars("abcd\te", 4)
    assert row.render == "abcd    e"

    row = Row.from_chars("plain", 4)
    assert row.render == "plain"
    assert not row.has_tabs


def test_update_keeps_highlight_in_step_with_render() -> None:
    row = Row.from_chars("\tint x;\t// c", 8, C)
    assert len(row.hl) == len(row.render)
    assert len(row.render) >= len(row.chars)


def test_update_is_idempotent() -> None:
    row = Row.from_chars("\tfoo(1, 'x');", 4, C)
    render, hl = row.render, list(row.hl)
    row.update(4, C)
    assert row.render == render
    assert row.hl == hl


@pytest.mark.parametrize("tab_stop", [1, 2, 4, 8])
@pytest.mark.parametrize("text", ["", "abc", "\t", "\t\t", "a\tb\tc", "ab\t\tcd\t", "\tx y\t"])
def test_render_column_round_trip(text: str, tab_stop: int) -> None:
    row = Row.from_chars(text, tab_stop)
    for cx in range(len(text) + 1):
        assert row.rx_to_cx(row.cx_to_rx(cx, tab_stop), tab_stop) == cx


def test_render_column_inside_tab_maps_to_the_tab() -> None:
    row = Row.from_chars("\tx", 4)
    assert row.cx_to_rx(1, 4) == 4
    assert row.rx_to_cx(2, 4) == 0
    assert row.rx_to_cx(4, 4) == 1
    assert row.rx_to_cx(99, 4) == 2


def test_bounded_access_clamps() -> None:
    row = Row.from_chars("hello", 4)
    assert row.chars_at(1, 3) == "el"
    assert row.chars_at(3, 100) == "lo"
    assert row.chars_at(10, 20) == ""
    assert row.chars_at(5, 6) == ""
    assert row.chars_at(-3, 2) == "he"
    assert row.chars_at(4, 2) == ""
    assert row.chars_at() == "hello"
    assert Row.from_chars("", 4).chars_at(0, 3) == ""


def test_render_access_uses_expanded_text() -> None:
    row = Row.from_chars("\tab", 4)
    assert row.rchars_at(2, 5) == "  a"
    assert row.rchars_at(6, 9) == ""


def test_styled_slice_coalesces_runs() -> None:
    row = Row.from_chars("ab 12", 4, C)
    out = row.hlchars_at(style=lambda h: f"<{h.syntax}>")
    assert out == f"<{HL_IDENT}>ab<{HL_NORMAL}> <{HL_NUMBER}>12{STYLE_RESET}"


def test_styled_slice_out_of_range_is_only_reset() -> None:
    row = Row.from_chars("ab", 4, C)
    assert row.hlchars_at(5, 9) == STYLE_RESET


def test_overlays() -> None:
    row = Row.from_chars("abcdef", 4, C)
    row.set_overlay(1, 3, OV_SELECTED)
    row.set_overlay(4, None, OV_MATCH)
    assert [h.overlay for h in row.hl] == [
        OV_NORMAL,
        OV_SELECTED,
        OV_SELECTED,
        OV_NORMAL,
        OV_MATCH,
        OV_MATCH,
    ]
    assert all(h.syntax == HL_IDENT for h in row.hl)

    assert row.clear_overlay(OV_SELECTED)
    assert [h.overlay for h in row.hl][:4] == [OV_NORMAL] * 4
    assert row.hl[4].overlay == OV_MATCH
    assert row.clear_overlay()
    assert not row.clear_overlay()


def test_update_drops_overlays() -> None:
    row = Row.from_chars("abc", 4)
    row.set_overlay(0, 3, OV_SELECTED)
    row.update(4)
    assert all(h.overlay == OV_NORMAL for h in row.hl)
