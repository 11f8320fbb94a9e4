from __future__ import annotations

import logging

import pyperclip

log = logging.getLogger(__name__)


def _split_context(text: str) -> list[str]:
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


class Clipboard:
    """Copy/paste storage in logical lines.

    The system clipboard is tried first; the internal copy is kept either way
    and serves loads when the system clipboard is unavailable or empty.
    """

    def __init__(self, use_system: bool = True) -> None:
        self.rows: list[str] = []
        self.use_system = use_system

    def save_context(self, context: list[str]) -> None:
        if not context:
            return
        self.rows = list(context)
        if not self.use_system:
            return
        try:
            pyperclip.copy("\n".join(context))
        except pyperclip.PyperclipException as exc:
            log.warning("system clipboard unavailable, kept internal copy: %s", exc)

    def load_context(self) -> list[str]:
        if self.use_system:
            try:
                text = pyperclip.paste()
            except pyperclip.PyperclipException as exc:
                log.warning("system clipboard unavailable, using internal copy: %s", exc)
            else:
                if text:
                    return _split_context(text)
        return list(self.rows)

    def clear_context(self) -> None:
        self.rows = []
