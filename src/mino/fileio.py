from __future__ import annotations

import logging
import os

from .errors import EditorIOError

log = logging.getLogger(__name__)


def read_text(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise EditorIOError.from_exc(exc, path) from exc
    log.info("read %d chars from %s", len(text), path)
    return text


def write_text(path: str, content: str) -> int:
    data = content.encode("utf-8")
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as exc:
        raise EditorIOError.from_exc(exc, path) from exc
    log.info("%d bytes written to %s", len(data), path)
    return len(data)


def rename(src: str, dst: str) -> None:
    try:
        os.rename(src, dst)
    except OSError as exc:
        raise EditorIOError.from_exc(exc, src) from exc


def split_lines(text: str) -> list[str]:
    """Split loaded text into row strings.

    Lines end at ``\\n``; a trailing ``\\r`` is dropped and the empty piece
    after a final newline is not a row.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def join_lines(lines: list[str]) -> str:
    return "".join(f"{line}\n" for line in lines)
