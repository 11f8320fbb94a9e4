from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Callable

from .constants import DEFAULT_TAB_STOP, OV_NORMAL
from .highlight import highlight_row
from .models import EditorSyntax, Highlight
from .style import STYLE_RESET, highlight_escape
from .syntax import SYNTAX_UNKNOWN


def _bounds(size: int, start: int, end: int | None) -> tuple[int, int]:
    start = min(max(start, 0), size)
    end = size if end is None else min(max(end, start), size)
    return start, end


@dataclass(slots=True)
class Row:
    """One line of the buffer.

    ``render`` and ``hl`` are derived from ``chars``; call :meth:`update`
    after every change to ``chars`` before reading them again.
    """

    chars: str = ""
    render: str = ""
    hl: list[Highlight] = field(default_factory=list)
    has_tabs: bool = False
    dirty: bool = False
    syntax: EditorSyntax = SYNTAX_UNKNOWN

    @classmethod
    def from_chars(
        cls, chars: str, tab_stop: int = DEFAULT_TAB_STOP, syntax: EditorSyntax = SYNTAX_UNKNOWN
    ) -> Row:
        row = cls(chars=chars)
        row.update(tab_stop, syntax)
        return row

    @property
    def size(self) -> int:
        return len(self.chars)

    @property
    def rsize(self) -> int:
        return len(self.render)

    def update(self, tab_stop: int, syntax: EditorSyntax | None = None) -> None:
        if syntax is not None:
            self.syntax = syntax
        out: list[str] = []
        idx = 0
        self.has_tabs = False
        for ch in self.chars:
            if ch == "\t":
                self.has_tabs = True
                out.append(" ")
                idx += 1
                while idx % tab_stop != 0:
                    out.append(" ")
                    idx += 1
            else:
                out.append(ch)
                idx += 1
        self.render = "".join(out)
        self.update_highlight()

    def update_highlight(self) -> None:
        self.hl = highlight_row(self.render, self.syntax)

    def cx_to_rx(self, cx: int, tab_stop: int) -> int:
        rx = 0
        for ch in self.chars[:cx]:
            if ch == "\t":
                rx += (tab_stop - 1) - (rx % tab_stop)
            rx += 1
        return rx

    def rx_to_cx(self, rx: int, tab_stop: int) -> int:
        cur_rx = 0
        for cx, ch in enumerate(self.chars):
            if ch == "\t":
                cur_rx += (tab_stop - 1) - (cur_rx % tab_stop)
            cur_rx += 1
            if cur_rx > rx:
                return cx
        return self.size

    def chars_at(self, start: int = 0, end: int | None = None) -> str:
        start, end = _bounds(self.size, start, end)
        return self.chars[start:end]

    def rchars_at(self, start: int = 0, end: int | None = None) -> str:
        start, end = _bounds(self.rsize, start, end)
        return self.render[start:end]

    def hlchars_at(
        self,
        start: int = 0,
        end: int | None = None,
        style: Callable[[Highlight], str] = highlight_escape,
    ) -> str:
        """Return a render slice with a style escape at every tag change."""
        start, end = _bounds(self.rsize, start, end)
        out: list[str] = []
        prev: Highlight | None = None
        for i in range(start, end):
            hl = self.hl[i]
            if hl != prev:
                out.append(style(hl))
                prev = hl
            out.append(self.render[i])
        out.append(STYLE_RESET)
        return "".join(out)

    def set_overlay(self, start: int, end: int | None, overlay: int) -> None:
        start, end = _bounds(self.rsize, start, end)
        for i in range(start, end):
            if self.hl[i].overlay != overlay:
                self.hl[i] = replace(self.hl[i], overlay=overlay)

    def clear_overlay(self, overlay: int | None = None) -> bool:
        """Reset overlays (all of them, or only ``overlay``). Returns True if any changed."""
        changed = False
        for i, hl in enumerate(self.hl):
            if hl.overlay == OV_NORMAL:
                continue
            if overlay is None or hl.overlay == overlay:
                self.hl[i] = replace(hl, overlay=OV_NORMAL)
                changed = True
        return changed
