from __future__ import annotations

import logging
import time

from .buffer import TextBuffer
from .clipboard import Clipboard
from .diff import Diff
from .errors import ERR_NOT_FOUND, EditorIOError
from .models import EditorConfig, Position
from .row import Row
from .search import SearchState, clear_matches, find_next
from .syntax import select_syntax

log = logging.getLogger(__name__)


class Editor:
    """A session over one or more open buffers.

    The cursor (``cx``, ``cy``) is a render-column position in the current
    buffer. Each buffer remembers its own cursor while it is in the
    background.
    """

    def __init__(self, config: EditorConfig | None = None) -> None:
        self.config = config or EditorConfig()
        self.bufs: list[TextBuffer] = [TextBuffer()]
        self.current_buf = 0
        self.cx = 0
        self.cy = 0
        self.statusmsg = ""
        self.statusmsg_time = 0.0
        self.quit_times = self.config.quit_times
        self.close_times = self.config.close_times
        self.clipboard = Clipboard(self.config.use_system_clipboard)
        self.search = SearchState()

    @classmethod
    def open_from(cls, paths: list[str], config: EditorConfig | None = None) -> Editor:
        editor = cls(config)
        if paths:
            editor.bufs = [editor._load(path) for path in paths]
        return editor

    def _load(self, path: str) -> TextBuffer:
        try:
            return TextBuffer.open(path, self.tab_stop)
        except EditorIOError as exc:
            if exc.kind != ERR_NOT_FOUND:
                raise
        # A missing file opens as a new, empty buffer under that name.
        log.info("%s does not exist yet, starting empty", path)
        return TextBuffer(path, select_syntax(path))

    @property
    def buf(self) -> TextBuffer:
        return self.bufs[self.current_buf]

    @property
    def tab_stop(self) -> int:
        return self.config.tab_stop

    @property
    def cursor(self) -> Position:
        return Position(self.cx, self.cy)

    def set_status_message(self, fmt: str, *args: object) -> None:
        self.statusmsg = fmt % args if args else fmt
        self.statusmsg_time = time.time()

    def _row(self) -> Row | None:
        return self.buf.rows[self.cy] if self.cy < self.buf.num_rows else None

    def _move_to(self, pos: Position) -> None:
        self.cy = min(max(pos.y, 0), max(self.buf.num_rows - 1, 0))
        row = self._row()
        self.cx = row.cx_to_rx(row.rx_to_cx(max(pos.x, 0), self.tab_stop), self.tab_stop) if row else 0
        if self.buf.in_select_mode and self.buf.select_anchor is not None:
            self.buf.mark_selection(self.buf.select_anchor, self.cursor)

    def _char_index(self) -> int:
        row = self._row()
        return row.rx_to_cx(self.cx, self.tab_stop) if row else 0

    # Buffers.

    def switch_buffer(self, idx: int) -> None:
        self.buf.saved_cursor = self.cursor
        self.current_buf = idx % len(self.bufs)
        self._move_to(self.buf.saved_cursor)

    def next_buffer(self) -> None:
        self.switch_buffer(self.current_buf + 1)

    def new_buffer(self) -> None:
        self.bufs.append(TextBuffer())
        self.switch_buffer(len(self.bufs) - 1)

    def open_buffer(self, path: str) -> None:
        self.bufs.append(self._load(path))
        self.switch_buffer(len(self.bufs) - 1)

    def close_buffer(self) -> bool:
        if self.buf.dirty and self.close_times > 0:
            remaining = "again" if self.close_times == 1 else f"{self.close_times} more times"
            self.set_status_message(
                "WARNING! File has unsaved changes. Press Ctrl-S to save or Ctrl-W %s to close without saving.",
                remaining,
            )
            self.close_times -= 1
            return False

        del self.bufs[self.current_buf]
        if not self.bufs:
            self.bufs.append(TextBuffer())
        self.current_buf = min(self.current_buf, len(self.bufs) - 1)
        self._move_to(self.buf.saved_cursor)
        self.close_times = self.config.close_times
        self.set_status_message("")
        return True

    def confirm_quit(self) -> bool:
        if any(buf.dirty for buf in self.bufs) and self.quit_times > 0:
            remaining = "again" if self.quit_times == 1 else f"{self.quit_times} more times"
            self.set_status_message(
                "WARNING! At least one file has unsaved changes. Press Ctrl-Q %s to quit without saving.",
                remaining,
            )
            self.quit_times -= 1
            return False
        return True

    def reset_confirmations(self) -> None:
        self.quit_times = self.config.quit_times
        self.close_times = self.config.close_times

    def save(self, path: str | None = None) -> int:
        if not path and not self.buf.filename:
            self.set_status_message("Can't save! No filename.")
            return 0
        try:
            written = self.buf.save(path)
        except EditorIOError as exc:
            self.set_status_message("Can't save! I/O error: %s", exc)
            return 0
        if path:
            self.buf.set_syntax(select_syntax(path), self.tab_stop)
        self.set_status_message("%d bytes written to disk", written)
        return written

    # Cursor movement.

    def move_left(self) -> None:
        cx = self._char_index()
        if cx > 0:
            self.cx = self._row().cx_to_rx(cx - 1, self.tab_stop)
            self._move_to(self.cursor)
        elif self.cy > 0:
            prev = self.buf.rows[self.cy - 1]
            self._move_to(Position(prev.rsize, self.cy - 1))

    def move_right(self) -> None:
        row = self._row()
        if row is None:
            return
        cx = self._char_index()
        if cx < row.size:
            self._move_to(Position(row.cx_to_rx(cx + 1, self.tab_stop), self.cy))
        elif self.cy + 1 < self.buf.num_rows:
            self._move_to(Position(0, self.cy + 1))

    def move_up(self) -> None:
        if self.cy > 0:
            self._move_to(Position(self.cx, self.cy - 1))

    def move_down(self) -> None:
        if self.cy + 1 < self.buf.num_rows:
            self._move_to(Position(self.cx, self.cy + 1))

    def move_home(self) -> None:
        self._move_to(Position(0, self.cy))

    def move_end(self) -> None:
        row = self._row()
        self._move_to(Position(row.rsize if row else 0, self.cy))

    # Edits. Each one goes through the buffer's recorded splices.

    def _end_of_insert(self, diff: Diff) -> Position:
        # Cursor right after the text ``diff`` inserted; its first row keeps
        # the prefix before ``diff.pos``.
        rows = self.buf.rows
        cx = rows[diff.pos.y].rx_to_cx(diff.pos.x, self.tab_stop)
        end_y = diff.pos.y + len(diff.rows) - 1
        end_cx = len(diff.rows[-1]) + (cx if len(diff.rows) == 1 else 0)
        return Position(rows[end_y].cx_to_rx(end_cx, self.tab_stop), end_y)

    def _insert(self, rows: list[str]) -> None:
        y = min(self.cy, max(self.buf.num_rows - 1, 0))
        self.buf.insert_rows(Position(self.cx, y), rows, self.tab_stop)
        end = self._end_of_insert(self.buf.history.current())
        self.cx, self.cy = end.x, end.y

    def insert_char(self, c: str) -> None:
        self._insert([c])

    def insert_newline(self) -> None:
        self._insert(["", ""])

    def delete_char(self) -> None:
        row = self._row()
        if row is None:
            return
        cx = self._char_index()
        if cx > 0:
            start = Position(row.cx_to_rx(cx - 1, self.tab_stop), self.cy)
            self.buf.remove_rows(start, [row.chars[cx - 1]], self.tab_stop)
        elif self.cy > 0:
            prev = self.buf.rows[self.cy - 1]
            start = Position(prev.rsize, self.cy - 1)
            self.buf.remove_rows(start, ["", ""], self.tab_stop)
        else:
            return
        self._move_to(start)

    def delete_forward(self) -> None:
        row = self._row()
        if row is None:
            return
        cx = self._char_index()
        if cx < row.size:
            self.buf.remove_rows(self.cursor, [row.chars[cx]], self.tab_stop)
        elif self.cy + 1 < self.buf.num_rows:
            self.buf.remove_rows(self.cursor, ["", ""], self.tab_stop)

    def undo(self) -> None:
        pos = self.buf.undo(self.tab_stop)
        if pos is None:
            self.set_status_message("Nothing to undo")
            return
        # The undone stack holds what was just applied to the buffer.
        performed = self.buf.history.undone[-1]
        self._move_to(self._end_of_insert(performed) if performed.is_insert else pos)

    def redo(self) -> None:
        pos = self.buf.redo(self.tab_stop)
        if pos is None:
            self.set_status_message("Nothing to redo")
            return
        performed = self.buf.history.current()
        self._move_to(self._end_of_insert(performed) if performed.is_insert else pos)

    # Selection and clipboard.

    def toggle_select(self) -> None:
        if self.buf.in_select_mode:
            self.buf.exit_select()
        else:
            self.buf.enter_select(self.cursor)

    def _selection(self) -> tuple[Position, list[str]] | None:
        anchor = self.buf.select_anchor
        if not self.buf.in_select_mode or anchor is None or anchor == self.cursor:
            return None
        start = min(anchor, self.cursor)
        return start, self.buf.create_removal_span(anchor, self.cursor, self.tab_stop)

    def copy_selection(self) -> list[str]:
        selection = self._selection()
        if selection is None:
            self.set_status_message("Nothing to copy")
            return []
        _, span = selection
        self.clipboard.save_context(span)
        self.buf.exit_select()
        self.set_status_message("Copied %d line(s)", len(span))
        return span

    def cut_selection(self) -> list[str]:
        selection = self._selection()
        if selection is None:
            self.set_status_message("Nothing to cut")
            return []
        start, span = selection
        self.clipboard.save_context(span)
        self.buf.exit_select()
        self.buf.remove_rows(start, span, self.tab_stop)
        self._move_to(start)
        return span

    def paste(self) -> None:
        rows = self.clipboard.load_context()
        if not rows:
            self.set_status_message("Clipboard is empty")
            return
        self._insert(rows)

    # Search.

    def find(self, query: str) -> Position | None:
        self.search.set_query(query)
        return self._find()

    def find_again(self, forward: bool = True) -> Position | None:
        if forward:
            self.search.forward()
        else:
            self.search.backward()
        return self._find()

    def _find(self) -> Position | None:
        pos = find_next(self.buf, self.search)
        if pos is None:
            self.set_status_message("No match for %s", self.search.query)
            return None
        self._move_to(pos)
        return pos

    def end_search(self) -> None:
        clear_matches(self.buf)
        self.search = SearchState()
