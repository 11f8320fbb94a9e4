from __future__ import annotations

import logging
import os

from . import fileio
from .constants import DEFAULT_TAB_STOP, OV_SELECTED
from .diff import Diff
from .history import History
from .models import EditorSyntax, Position
from .row import Row
from .syntax import SYNTAX_UNKNOWN, select_syntax

log = logging.getLogger(__name__)


class TextBuffer:
    """The rows of one open file plus its edit history and selection state.

    Every position taken or returned by the editing entry points is a
    render-column position. Rows are always addressed by index; no row
    reference is held across a splice.
    """

    def __init__(self, filename: str = "", syntax: EditorSyntax = SYNTAX_UNKNOWN) -> None:
        self.rows: list[Row] = []
        self.filename = filename
        self.dirty = False
        self.saved_cursor = Position()
        self.select_anchor: Position | None = None
        self.in_select_mode = False
        self.syntax = syntax
        self.history = History()

    @classmethod
    def open(cls, path: str, tab_stop: int = DEFAULT_TAB_STOP) -> TextBuffer:
        buf = cls()
        buf.load(path, tab_stop)
        return buf

    def load(self, path: str, tab_stop: int = DEFAULT_TAB_STOP) -> None:
        self.filename = path
        self.syntax = select_syntax(path)
        text = fileio.read_text(path)
        self.rows = [Row.from_chars(line, tab_stop, self.syntax) for line in fileio.split_lines(text)]
        self.history.clear()
        self.dirty = False
        log.info("loaded %s: %d rows", path, len(self.rows))

    def save(self, path: str | None = None) -> int:
        if path:
            self.filename = path
        written = fileio.write_text(self.filename, self.rows_to_string())
        self.dirty = False
        return written

    def rename(self, path: str) -> None:
        fileio.rename(self.filename, path)
        self.filename = path

    @property
    def num_rows(self) -> int:
        return len(self.rows)

    @property
    def file_ext(self) -> str | None:
        ext = os.path.splitext(self.filename)[1]
        return ext[1:] if ext else None

    def row_at(self, idx: int) -> Row | None:
        if not self.rows:
            return None
        return self.rows[min(max(idx, 0), len(self.rows) - 1)]

    def append(self, chars: str, tab_stop: int = DEFAULT_TAB_STOP) -> None:
        self.rows.append(Row.from_chars(chars, tab_stop, self.syntax))

    def rows_to_string(self) -> str:
        return fileio.join_lines([row.chars for row in self.rows])

    def set_syntax(self, syntax: EditorSyntax, tab_stop: int = DEFAULT_TAB_STOP) -> None:
        self.syntax = syntax
        for row in self.rows:
            row.update(tab_stop, syntax)

    def make_dirty(self) -> None:
        self.dirty = True

    def make_clean(self) -> None:
        self.dirty = False

    def _clamp_y(self, y: int) -> int:
        return min(max(y, 0), len(self.rows) - 1)

    def _snap(self, pos: Position, tab_stop: int) -> Position:
        # Clamp to an existing row and to a char boundary inside it.
        if not self.rows:
            return Position(0, 0)
        y = self._clamp_y(pos.y)
        row = self.rows[y]
        return Position(row.cx_to_rx(row.rx_to_cx(max(pos.x, 0), tab_stop), tab_stop), y)

    def insert_rows(self, pos: Position, rows: list[str], tab_stop: int = DEFAULT_TAB_STOP) -> Position:
        """Insert ``rows`` at ``pos``, record it and return the new cursor."""
        if not rows:
            return pos
        at = self._snap(pos, tab_stop)
        self.history.record(Diff.insert(at, rows))
        log.debug("insert %d row(s) at %s", len(rows), at)
        return self._splice_insert(at, rows, tab_stop)

    def remove_rows(self, from_: Position, rows: list[str], tab_stop: int = DEFAULT_TAB_STOP) -> Position:
        """Remove the span shaped like ``rows`` starting at ``from_``, record it.

        The span is clamped to the buffer; the recorded diff holds the text
        that was actually removed, not ``rows``.
        """
        if not rows or not self.rows:
            return from_
        at = self._snap(from_, tab_stop)
        removed = self.create_removal_span(at, self._span_end(at, rows, tab_stop), tab_stop)
        if removed == [""]:
            return at
        self.history.record(Diff.remove(at, removed))
        log.debug("remove %d row(s) at %s", len(removed), at)
        return self._splice_remove(at, removed, tab_stop)

    def _span_end(self, at: Position, rows: tuple[str, ...] | list[str], tab_stop: int) -> Position:
        # Where a span shaped like ``rows`` starting at ``at`` ends, clamped.
        y = self._clamp_y(at.y)
        if len(rows) == 1:
            row = self.rows[y]
            end_cx = min(row.rx_to_cx(at.x, tab_stop) + len(rows[0]), row.size)
            return Position(row.cx_to_rx(end_cx, tab_stop), y)
        last_y = min(y + len(rows) - 1, len(self.rows) - 1)
        last = self.rows[last_y]
        end = Position(last.cx_to_rx(min(len(rows[-1]), last.size), tab_stop), last_y)
        return max(end, Position(at.x, y))

    def _splice_insert(self, at: Position, rows: tuple[str, ...] | list[str], tab_stop: int) -> Position:
        if not self.rows:
            self.rows.append(Row.from_chars("", tab_stop, self.syntax))
        y = self._clamp_y(at.y)
        target = self.rows[y]
        cx = target.rx_to_cx(at.x, tab_stop)
        remaining = target.chars[cx:]
        target.chars = target.chars[:cx] + rows[0]
        target.dirty = True

        if len(rows) > 1:
            # Split the tail off, insert the middle, reattach the tail below.
            self.rows[y + 1 : y + 1] = [Row(chars=line, dirty=True) for line in rows[1:]]
            for row in self.rows[y + len(rows) :]:
                row.dirty = True

        last = y + len(rows) - 1
        self.rows[last].chars += remaining
        for idx in range(y, last + 1):
            self.rows[idx].update(tab_stop, self.syntax)

        self.dirty = True
        end_row = self.rows[last]
        return Position(end_row.cx_to_rx(len(remaining), tab_stop), last)

    def _splice_remove(self, at: Position, rows: tuple[str, ...] | list[str], tab_stop: int) -> Position:
        if not self.rows:
            return at
        y = self._clamp_y(at.y)
        first = self.rows[y]
        start_cx = first.rx_to_cx(at.x, tab_stop)
        end = self._span_end(at, rows, tab_stop)
        last = self.rows[end.y]
        end_cx = last.rx_to_cx(end.x, tab_stop)

        if end.y == y:
            first.chars = first.chars[:start_cx] + first.chars[max(end_cx, start_cx) :]
        else:
            first.chars = first.chars[:start_cx] + last.chars[end_cx:]
            del self.rows[y + 1 : end.y + 1]
            for row in self.rows[y + 1 :]:
                row.dirty = True

        first.dirty = True
        first.update(tab_stop, self.syntax)
        self.dirty = True
        return at

    def create_removal_span(self, from_: Position, to: Position, tab_stop: int = DEFAULT_TAB_STOP) -> list[str]:
        """Return the logical text between two render-column positions."""
        if not self.rows:
            return []
        start, end = (from_, to) if from_ <= to else (to, from_)
        sy = self._clamp_y(start.y)
        ey = self._clamp_y(end.y)
        first = self.rows[sy]
        start_cx = first.rx_to_cx(max(start.x, 0), tab_stop)
        if sy == ey:
            return [first.chars_at(start_cx, first.rx_to_cx(max(end.x, 0), tab_stop))]

        last = self.rows[ey]
        span = [first.chars_at(start_cx)]
        span.extend(row.chars for row in self.rows[sy + 1 : ey])
        span.append(last.chars_at(0, last.rx_to_cx(max(end.x, 0), tab_stop)))
        return span

    def undo(self, tab_stop: int = DEFAULT_TAB_STOP) -> Position | None:
        diff = self.history.current()
        if diff is None:
            return None
        if diff.is_insert:
            pos = self._splice_remove(diff.pos, diff.rows, tab_stop)
        else:
            pos = self._splice_insert(diff.pos, diff.rows, tab_stop)
        if not self.history.undo():
            return None
        log.debug("undo %s at %s", diff.kind, diff.pos)
        return pos

    def redo(self, tab_stop: int = DEFAULT_TAB_STOP) -> Position | None:
        if not self.history.redo():
            return None
        diff = self.history.current()
        if diff is None:
            return None
        if diff.is_remove:
            pos = self._splice_remove(diff.pos, diff.rows, tab_stop)
        else:
            pos = self._splice_insert(diff.pos, diff.rows, tab_stop)
        log.debug("redo %s at %s", diff.kind, diff.pos)
        return pos

    def enter_select(self, anchor: Position) -> None:
        self.in_select_mode = True
        self.select_anchor = anchor

    def exit_select(self) -> None:
        self.in_select_mode = False
        self.select_anchor = None
        for row in self.rows:
            row.clear_overlay(OV_SELECTED)

    def mark_selection(self, anchor: Position, cursor: Position) -> None:
        for row in self.rows:
            row.clear_overlay(OV_SELECTED)
        if not self.rows:
            return

        start, end = (anchor, cursor) if anchor <= cursor else (cursor, anchor)
        sy = self._clamp_y(start.y)
        ey = self._clamp_y(end.y)
        if sy == ey:
            self.rows[sy].set_overlay(start.x, end.x, OV_SELECTED)
        else:
            self.rows[sy].set_overlay(start.x, None, OV_SELECTED)
            for row in self.rows[sy + 1 : ey]:
                row.set_overlay(0, None, OV_SELECTED)
            self.rows[ey].set_overlay(0, end.x, OV_SELECTED)
