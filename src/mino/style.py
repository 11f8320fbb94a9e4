from __future__ import annotations

from .constants import (
    HL_COMMENT,
    HL_FLOWWORD,
    HL_FUNCTION,
    HL_IDENT,
    HL_KEYWORD,
    HL_METAWORD,
    HL_NUMBER,
    HL_PATH,
    HL_STRING,
    HL_TYPE,
    OV_MATCH,
    OV_SELECTED,
)
from .models import Highlight

STYLE_RESET = "\x1b[m"

Rgb = tuple[int, int, int]

FG_NORMAL: Rgb = (204, 204, 204)
BG_NORMAL: Rgb = (12, 12, 12)
DIMMED: Rgb = (138, 138, 138)
CURRENT_LINE: Rgb = (208, 208, 208)


def syntax_to_color(hl: int) -> Rgb:
    if hl == HL_NUMBER:
        return (181, 206, 168)
    if hl == HL_STRING:
        return (206, 145, 120)
    if hl == HL_COMMENT:
        return (106, 153, 85)
    if hl in (HL_KEYWORD, HL_METAWORD):
        return (86, 156, 214)
    if hl == HL_FLOWWORD:
        return (197, 134, 192)
    if hl in (HL_TYPE, HL_PATH):
        return (78, 201, 176)
    if hl == HL_IDENT:
        return (156, 220, 254)
    if hl == HL_FUNCTION:
        return (220, 220, 170)
    return FG_NORMAL


def overlay_to_color(overlay: int) -> Rgb:
    if overlay == OV_MATCH:
        return (0, 0, 250)
    if overlay == OV_SELECTED:
        return (38, 79, 120)
    return BG_NORMAL


def fg_escape(rgb: Rgb) -> str:
    return "\x1b[38;2;%d;%d;%dm" % rgb


def highlight_escape(hl: Highlight) -> str:
    fg = syntax_to_color(hl.syntax)
    bg = overlay_to_color(hl.overlay)
    return "\x1b[38;2;%d;%d;%d;48;2;%d;%d;%dm" % (fg + bg)
