from __future__ import annotations

import logging
from collections import deque

from .constants import HISTORY_DEPTH
from .diff import Diff

log = logging.getLogger(__name__)


class History:
    """Undo/redo log for one buffer.

    ``applied`` holds diffs as they were performed, newest last, and drops
    the oldest entry past ``depth``. ``undone`` holds the *inverse* of every
    undone diff; redo inverts it again on the way back to ``applied``.
    History never touches the buffer: the buffer applies ``current()``
    itself and then calls :meth:`undo` or :meth:`redo`.
    """

    def __init__(self, depth: int = HISTORY_DEPTH) -> None:
        self.applied: deque[Diff] = deque(maxlen=depth)
        self.undone: list[Diff] = []

    def __len__(self) -> int:
        return len(self.applied)

    @property
    def can_undo(self) -> bool:
        return bool(self.applied)

    @property
    def can_redo(self) -> bool:
        return bool(self.undone)

    def record(self, diff: Diff) -> None:
        if len(self.applied) == self.applied.maxlen:
            log.debug("history full, dropping %s", self.applied[0].kind)
        self.applied.append(diff)
        self.undone.clear()

    def undo(self) -> bool:
        if not self.applied:
            return False
        self.undone.append(self.applied.pop().inverse())
        return True

    def redo(self) -> bool:
        if not self.undone:
            return False
        self.applied.append(self.undone.pop().inverse())
        return True

    def current(self) -> Diff | None:
        return self.applied[-1] if self.applied else None

    def clear(self) -> None:
        self.applied.clear()
        self.undone.clear()
