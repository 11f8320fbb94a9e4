from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

from .constants import (
    DEFAULT_TAB_STOP,
    HL_NORMAL,
    LANG_UNKNOWN,
    MINO_CLOSE_TIMES,
    MINO_QUIT_TIMES,
    OV_NORMAL,
)


@total_ordering
@dataclass(frozen=True, slots=True)
class Position:
    """A column/row pair.

    ``x`` is a char index or a render column depending on the call site;
    ``y`` is always a row index. Positions order row-major.
    """

    x: int = 0
    y: int = 0

    def __lt__(self, other: Position) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (self.y, self.x) < (other.y, other.x)


@dataclass(frozen=True, slots=True)
class Highlight:
    syntax: int = HL_NORMAL
    overlay: int = OV_NORMAL


@dataclass(frozen=True, slots=True)
class EditorSyntax:
    lang: int
    filematch: tuple[str, ...] = ()
    keywords: tuple[str, ...] = ()
    flowwords: tuple[str, ...] = ()
    types: tuple[str, ...] = ()
    metawords: tuple[str, ...] = ()
    path_delims: tuple[str, ...] = ()
    singleline_comment_start: str | None = None
    multiline_comment: tuple[str, str] | None = None
    flags: int = 0

    @property
    def is_unknown(self) -> bool:
        return self.lang == LANG_UNKNOWN


@dataclass(slots=True)
class EditorConfig:
    tab_stop: int = DEFAULT_TAB_STOP
    quit_times: int = MINO_QUIT_TIMES
    close_times: int = MINO_CLOSE_TIMES
    use_system_clipboard: bool = True

    def __post_init__(self) -> None:
        if self.tab_stop < 1:
            raise ValueError(f"tab stop must be positive, got {self.tab_stop}")
