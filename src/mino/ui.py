"""Frame building for a terminal host.

Nothing here touches the terminal: `refresh_screen` returns one complete
frame (rows with a line-number gutter, status bar, message bar, cursor
placement) as a string for the host to write.
"""

from __future__ import annotations

import os
import shutil
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .constants import MINO_STATUS_TIMEOUT, MINO_VERSION
from .style import CURRENT_LINE, DIMMED, STYLE_RESET, fg_escape

if TYPE_CHECKING:
    from .editor import Editor

ANSI_HIDE_CURSOR = "\x1b[?25l"
ANSI_SHOW_CURSOR = "\x1b[?25h"
ANSI_CURSOR_HOME = "\x1b[H"
ANSI_CLEAR_LINE = "\x1b[K"
ANSI_INVERT_ON = "\x1b[7m"


@dataclass
class Viewport:
    screenrows: int = 22
    screencols: int = 80
    rowoff: int = 0
    coloff: int = 0

    def resize(self, lines: int | None = None, columns: int | None = None) -> None:
        if lines is None or columns is None:
            size = shutil.get_terminal_size((80, 24))
            lines, columns = size.lines, size.columns
        self.screencols = max(1, columns)
        # Two lines go to the status bar and the message bar.
        self.screenrows = max(1, lines - 2)


def gutter_width(num_rows: int) -> int:
    return len(str(num_rows)) + 1


def scroll(view: Viewport, cx: int, cy: int, gutter: int = 0) -> None:
    textcols = max(1, view.screencols - gutter)
    if cy < view.rowoff:
        view.rowoff = cy
    if cy >= view.rowoff + view.screenrows:
        view.rowoff = cy - view.screenrows + 1
    if cx < view.coloff:
        view.coloff = cx
    if cx >= view.coloff + textcols:
        view.coloff = cx - textcols + 1


def draw_welcome(view: Viewport, out: list[str]) -> None:
    welcome = f"Mino editor -- version {MINO_VERSION}"
    if len(welcome) > view.screencols:
        welcome = welcome[: view.screencols]
    pad = (view.screencols - len(welcome)) // 2
    if pad:
        out.append(fg_escape(DIMMED) + "~" + STYLE_RESET)
        pad -= 1
    if pad > 0:
        out.append(" " * pad)
    out.append(welcome)


def draw_rows(editor: Editor, view: Viewport, out: list[str]) -> None:
    buf = editor.buf
    gutter = gutter_width(buf.num_rows)
    textcols = max(0, view.screencols - gutter)
    for y in range(view.screenrows):
        filerow = view.rowoff + y
        if filerow < buf.num_rows:
            color = CURRENT_LINE if filerow == editor.cy else DIMMED
            out.append(f"{fg_escape(color)}{filerow + 1:>{gutter - 1}}{STYLE_RESET} ")
            out.append(buf.rows[filerow].hlchars_at(view.coloff, view.coloff + textcols))
        elif buf.num_rows == 0 and y == view.screenrows // 3:
            draw_welcome(view, out)
        else:
            out.append(fg_escape(DIMMED) + "~" + STYLE_RESET)
        out.append(ANSI_CLEAR_LINE)
        out.append("\r\n")


def draw_status_bar(editor: Editor, view: Viewport, out: list[str]) -> None:
    buf = editor.buf
    name = os.path.basename(buf.filename) or "[No Name]"
    mod = " (modified)" if buf.dirty else ""
    tabs = f" [{editor.current_buf + 1}/{len(editor.bufs)}]" if len(editor.bufs) > 1 else ""
    status = f"{name:.20} - {buf.num_rows} lines{mod}{tabs}"[: view.screencols]
    rstatus = f"{editor.cy + 1}/{max(1, buf.num_rows)}"
    out.append(ANSI_INVERT_ON)
    out.append(status)
    fill = len(status)
    while fill < view.screencols:
        if view.screencols - fill == len(rstatus):
            out.append(rstatus)
            break
        out.append(" ")
        fill += 1
    out.append(STYLE_RESET)
    out.append("\r\n")


def draw_message_bar(editor: Editor, view: Viewport, out: list[str], now: float | None = None) -> None:
    out.append(ANSI_CLEAR_LINE)
    now = time.time() if now is None else now
    if editor.statusmsg and now - editor.statusmsg_time < MINO_STATUS_TIMEOUT:
        out.append(editor.statusmsg[: view.screencols])


def cursor_escape(editor: Editor, view: Viewport) -> str:
    gutter = gutter_width(editor.buf.num_rows)
    screen_cy = max(1, (editor.cy - view.rowoff) + 1)
    screen_cx = max(1, (editor.cx - view.coloff) + gutter + 1)
    return f"\x1b[{screen_cy};{screen_cx}H"


def refresh_screen(editor: Editor, view: Viewport, now: float | None = None) -> str:
    """Build one full frame; the caller writes it to the terminal."""
    scroll(view, editor.cx, editor.cy, gutter_width(editor.buf.num_rows))
    out: list[str] = [ANSI_HIDE_CURSOR, ANSI_CURSOR_HOME]
    draw_rows(editor, view, out)
    draw_status_bar(editor, view, out)
    draw_message_bar(editor, view, out, now)
    out.append(cursor_escape(editor, view))
    out.append(ANSI_SHOW_CURSOR)
    return "".join(out)
