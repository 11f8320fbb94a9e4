from __future__ import annotations

from dataclasses import dataclass

from .constants import DIFF_INSERT, DIFF_REMOVE
from .models import Position


@dataclass(frozen=True, slots=True)
class Diff:
    """An insertion or removal of ``rows`` at ``pos``.

    ``rows`` are logical lines, including the partial first and last lines
    that were actually spliced; ``pos`` is a render-column position.
    """

    kind: str
    pos: Position
    rows: tuple[str, ...]

    @classmethod
    def insert(cls, pos: Position, rows: list[str] | tuple[str, ...]) -> Diff:
        return cls(DIFF_INSERT, pos, tuple(rows))

    @classmethod
    def remove(cls, pos: Position, rows: list[str] | tuple[str, ...]) -> Diff:
        return cls(DIFF_REMOVE, pos, tuple(rows))

    @property
    def is_insert(self) -> bool:
        return self.kind == DIFF_INSERT

    @property
    def is_remove(self) -> bool:
        return self.kind == DIFF_REMOVE

    def inverse(self) -> Diff:
        kind = DIFF_REMOVE if self.kind == DIFF_INSERT else DIFF_INSERT
        return Diff(kind, self.pos, self.rows)
