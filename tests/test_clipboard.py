from __future__ import annotations

import pyperclip
import pytest

from mino.clipboard import Clipboard


@pytest.fixture
def system(monkeypatch):
    store = {"text": ""}

    def copy(text: str) -> None:
        store["text"] = text

    def paste() -> str:
        return store["text"]

    monkeypatch.setattr(pyperclip, "copy", copy)
    monkeypatch.setattr(pyperclip, "paste", paste)
    return store


@pytest.fixture
def broken(monkeypatch):
    def fail(*args):
        raise pyperclip.PyperclipException("no clipboard mechanism")

    monkeypatch.setattr(pyperclip, "copy", fail)
    monkeypatch.setattr(pyperclip, "paste", fail)


def test_save_goes_to_system_clipboard(system) -> None:
    clip = Clipboard()
    clip.save_context(["ab", "cd"])
    assert system["text"] == "ab\ncd"
    assert clip.rows == ["ab", "cd"]
    assert clip.load_context() == ["ab", "cd"]


def test_load_reads_external_text(system) -> None:
    system["text"] = "one\r\ntwo\n"
    assert Clipboard().load_context() == ["one", "two", ""]


def test_falls_back_to_internal_copy(broken) -> None:
    clip = Clipboard()
    clip.save_context(["x", "y"])
    assert clip.rows == ["x", "y"]
    assert clip.load_context() == ["x", "y"]


def test_empty_system_clipboard_uses_internal_copy(system) -> None:
    clip = Clipboard()
    clip.save_context(["kept"])
    system["text"] = ""
    assert clip.load_context() == ["kept"]


def test_internal_only(monkeypatch) -> None:
    def unexpected(*args):
        raise AssertionError("system clipboard used")

    monkeypatch.setattr(pyperclip, "copy", unexpected)
    monkeypatch.setattr(pyperclip, "paste", unexpected)
    clip = Clipboard(use_system=False)
    clip.save_context(["a", "b"])
    assert clip.load_context() == ["a", "b"]
    clip.clear_context()
    assert clip.load_context() == []


def test_saving_nothing_keeps_previous_context() -> None:
    clip = Clipboard(use_system=False)
    clip.save_context(["a"])
    clip.save_context([])
    assert clip.rows == ["a"]
