from __future__ import annotations

from dataclasses import dataclass

from .buffer import TextBuffer
from .constants import OV_MATCH
from .models import Position


@dataclass
class SearchState:
    query: str = ""
    last_match: int = -1
    last_col: int = -1
    direction: int = 1

    def set_query(self, query: str) -> None:
        self.query = query
        self.last_match = -1
        self.last_col = -1

    def forward(self) -> None:
        self.direction = 1

    def backward(self) -> None:
        self.direction = -1


def search_next_match(
    buf: TextBuffer, query: str, last_match: int, direction: int, last_col: int = -1
) -> tuple[int, int] | None:
    """Return ``(row, render column)`` of the next occurrence of ``query``.

    Later (or earlier) matches on the row of the last match come first when
    ``last_col`` is given; then the scan moves row by row in ``direction``
    and wraps around.
    """
    if 0 <= last_match < buf.num_rows and last_col >= 0:
        render = buf.rows[last_match].render
        if direction > 0:
            pos = render.find(query, last_col + 1)
        else:
            pos = render.rfind(query, 0, last_col + len(query) - 1)
        if pos != -1:
            return last_match, pos

    current = last_match
    for _ in range(buf.num_rows):
        current += direction
        if current == -1:
            current = buf.num_rows - 1
        elif current == buf.num_rows:
            current = 0
        render = buf.rows[current].render
        pos = render.find(query) if direction > 0 else render.rfind(query)
        if pos != -1:
            return current, pos
    return None


def clear_matches(buf: TextBuffer) -> None:
    for row in buf.rows:
        row.clear_overlay(OV_MATCH)


def find_next(buf: TextBuffer, state: SearchState) -> Position | None:
    clear_matches(buf)
    if not state.query or not buf.rows:
        return None
    if state.last_match == -1:
        state.direction = 1

    match = search_next_match(buf, state.query, state.last_match, state.direction, state.last_col)
    if match is None:
        return None
    row_idx, rx = match
    state.last_match = row_idx
    state.last_col = rx
    buf.rows[row_idx].set_overlay(rx, rx + len(state.query), OV_MATCH)
    return Position(rx, row_idx)
