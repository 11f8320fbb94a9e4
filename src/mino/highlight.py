from __future__ import annotations

import string

from .constants import (
    HL_CAPITAL_TYPES,
    HL_COMMENT,
    HL_FLOWWORD,
    HL_FUNCTION,
    HL_HIGHLIGHT_IDENTS,
    HL_HIGHLIGHT_NUMBERS,
    HL_HIGHLIGHT_STRINGS,
    HL_IDENT,
    HL_KEYWORD,
    HL_METAWORD,
    HL_NESTED_COMMENTS,
    HL_NORMAL,
    HL_NUMBER,
    HL_PATH,
    HL_STRING,
    HL_TYPE,
)
from .models import EditorSyntax, Highlight


_SEPARATORS = frozenset(string.whitespace + "\0" + string.punctuation.replace("_", ""))

# One shared tag per syntax class; overlays are applied later by the row.
_PLAIN = {cls: Highlight(cls) for cls in range(HL_NORMAL, HL_PATH + 1)}


def is_separator(c: str) -> bool:
    return not c or c in _SEPARATORS


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _reclassify_run(hl: list[int], end: int, cls: int) -> None:
    # Walk back over the identifier run that ends right before ``end``.
    j = end - 1
    while j >= 0 and hl[j] == HL_IDENT:
        hl[j] = cls
        j -= 1


def scan_syntax(render: str, syntax: EditorSyntax) -> list[int]:
    """Classify every rendered character of one row.

    The scan is a single forward pass. Function and path detection patch the
    identifier run that was just emitted instead of looking ahead. No state
    survives the end of the row, so a string or block comment left open on one
    row is not continued on the next.
    """
    n = len(render)
    hl = [HL_NORMAL] * n
    if syntax.is_unknown:
        return hl

    flags = syntax.flags
    scs = syntax.singleline_comment_start
    mcs, mce = syntax.multiline_comment or ("", "")
    word_lists = (
        (HL_KEYWORD, syntax.keywords),
        (HL_FLOWWORD, syntax.flowwords),
        (HL_TYPE, syntax.types),
        (HL_METAWORD, syntax.metawords),
    )

    prev_sep = True
    quote = ""
    depth = 0
    i = 0
    while i < n:
        ch = render[i]
        prev_hl = hl[i - 1] if i > 0 else HL_NORMAL

        if not quote and scs and render.startswith(scs, i):
            for h in range(i, n):
                hl[h] = HL_COMMENT
            break

        if not quote and mcs:
            if render.startswith(mcs, i):
                end = min(i + len(mcs), n)
                for h in range(i, end):
                    hl[h] = HL_COMMENT
                i = end
                depth += 1
                continue
            if depth > 0:
                if render.startswith(mce, i):
                    end = min(i + len(mce), n)
                    for h in range(i, end):
                        hl[h] = HL_COMMENT
                    i = end
                    depth = depth - 1 if flags & HL_NESTED_COMMENTS else 0
                    prev_sep = True
                    continue
                hl[i] = HL_COMMENT
                i += 1
                continue

        if prev_sep and not quote:
            matched = False
            for cls, words in word_lists:
                for word in words:
                    end = i + len(word)
                    if render.startswith(word, i) and (end == n or is_separator(render[end])):
                        for h in range(i, end):
                            hl[h] = cls
                        i = end
                        matched = True
                        break
                if matched:
                    break
            if matched:
                # A match is only accepted in front of a separator.
                prev_sep = True
                continue

        if flags & HL_HIGHLIGHT_STRINGS:
            if quote:
                hl[i] = HL_STRING
                if ch == "\\" and i + 1 < n:
                    hl[i + 1] = HL_STRING
                    i += 2
                    continue
                if ch == quote:
                    quote = ""
                prev_sep = True
                i += 1
                continue
            if ch in ('"', "'"):
                quote = ch
                hl[i] = HL_STRING
                i += 1
                continue

        if flags & HL_HIGHLIGHT_NUMBERS and (
            (_is_digit(ch) and (prev_sep or prev_hl == HL_NUMBER))
            or (ch == "." and prev_hl == HL_NUMBER)
        ):
            hl[i] = HL_NUMBER
            prev_sep = False
            i += 1
            continue

        if flags & HL_HIGHLIGHT_IDENTS and not is_separator(ch):
            capital_types = flags & HL_CAPITAL_TYPES
            if prev_sep:
                hl[i] = HL_TYPE if capital_types and ch.isupper() else HL_IDENT
                prev_sep = False
                i += 1
                continue
            if prev_hl == HL_IDENT or (capital_types and prev_hl == HL_TYPE):
                hl[i] = prev_hl
                i += 1
                continue

        if prev_hl == HL_IDENT:
            if ch == "(":
                _reclassify_run(hl, i, HL_FUNCTION)
            elif any(render.startswith(delim, i) for delim in syntax.path_delims):
                _reclassify_run(hl, i, HL_PATH)

        hl[i] = HL_NORMAL
        prev_sep = is_separator(ch)
        i += 1

    return hl


def highlight_row(render: str, syntax: EditorSyntax) -> list[Highlight]:
    return [_PLAIN[cls] for cls in scan_syntax(render, syntax)]
