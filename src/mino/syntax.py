from __future__ import annotations

import os
from types import MappingProxyType
from typing import Mapping

from .constants import (
    C_HL_EXTENSIONS,
    C_HL_FLOWWORDS,
    C_HL_KEYWORDS,
    C_HL_METAWORDS,
    C_HL_PATH_DELIMS,
    C_HL_TYPES,
    HL_CAPITAL_TYPES,
    HL_HIGHLIGHT_IDENTS,
    HL_HIGHLIGHT_NUMBERS,
    HL_HIGHLIGHT_STRINGS,
    HL_NESTED_COMMENTS,
    LANG_C,
    LANG_PYTHON,
    LANG_RUST,
    LANG_UNKNOWN,
    PYTHON_HL_EXTENSIONS,
    PYTHON_HL_FLOWWORDS,
    PYTHON_HL_KEYWORDS,
    PYTHON_HL_METAWORDS,
    PYTHON_HL_TYPES,
    RUST_HL_EXTENSIONS,
    RUST_HL_FLOWWORDS,
    RUST_HL_KEYWORDS,
    RUST_HL_METAWORDS,
    RUST_HL_PATH_DELIMS,
    RUST_HL_TYPES,
)
from .models import EditorSyntax


SYNTAX_UNKNOWN = EditorSyntax(lang=LANG_UNKNOWN)

# Built once at import; rows hold references into this table, never copies.
HLDB: Mapping[int, EditorSyntax] = MappingProxyType(
    {
        LANG_UNKNOWN: SYNTAX_UNKNOWN,
        LANG_C: EditorSyntax(
            lang=LANG_C,
            filematch=C_HL_EXTENSIONS,
            keywords=C_HL_KEYWORDS,
            flowwords=C_HL_FLOWWORDS,
            types=C_HL_TYPES,
            metawords=C_HL_METAWORDS,
            path_delims=C_HL_PATH_DELIMS,
            singleline_comment_start="//",
            multiline_comment=("/*", "*/"),
            flags=HL_HIGHLIGHT_STRINGS | HL_HIGHLIGHT_NUMBERS | HL_HIGHLIGHT_IDENTS,
        ),
        LANG_RUST: EditorSyntax(
            lang=LANG_RUST,
            filematch=RUST_HL_EXTENSIONS,
            keywords=RUST_HL_KEYWORDS,
            flowwords=RUST_HL_FLOWWORDS,
            types=RUST_HL_TYPES,
            metawords=RUST_HL_METAWORDS,
            path_delims=RUST_HL_PATH_DELIMS,
            singleline_comment_start="//",
            multiline_comment=("/*", "*/"),
            flags=(
                HL_HIGHLIGHT_STRINGS
                | HL_HIGHLIGHT_NUMBERS
                | HL_HIGHLIGHT_IDENTS
                | HL_NESTED_COMMENTS
                | HL_CAPITAL_TYPES
            ),
        ),
        LANG_PYTHON: EditorSyntax(
            lang=LANG_PYTHON,
            filematch=PYTHON_HL_EXTENSIONS,
            keywords=PYTHON_HL_KEYWORDS,
            flowwords=PYTHON_HL_FLOWWORDS,
            types=PYTHON_HL_TYPES,
            metawords=PYTHON_HL_METAWORDS,
            path_delims=(".",),
            singleline_comment_start="#",
            flags=(
                HL_HIGHLIGHT_STRINGS
                | HL_HIGHLIGHT_NUMBERS
                | HL_HIGHLIGHT_IDENTS
                | HL_CAPITAL_TYPES
            ),
        ),
    }
)


def syntax_for_lang(lang: int) -> EditorSyntax:
    return HLDB.get(lang, SYNTAX_UNKNOWN)


def select_syntax(filename: str | None) -> EditorSyntax:
    """Pick the table whose extensions match ``filename``."""
    if not filename:
        return SYNTAX_UNKNOWN
    ext = os.path.splitext(filename)[1]
    if not ext:
        return SYNTAX_UNKNOWN
    for syntax in HLDB.values():
        if ext in syntax.filematch:
            return syntax
    return SYNTAX_UNKNOWN
