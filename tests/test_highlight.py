from __future__ import annotations

from mino.constants import (
    HL_COMMENT,
    HL_FLOWWORD,
    HL_FUNCTION,
    HL_IDENT,
    HL_KEYWORD,
    HL_METAWORD,
    HL_NORMAL,
    HL_NUMBER,
    HL_PATH,
    HL_STRING,
    HL_TYPE,
    LANG_C,
    LANG_PYTHON,
    LANG_RUST,
    OV_NORMAL,
)
from mino.highlight import highlight_row, is_separator, scan_syntax
from mino.syntax import SYNTAX_UNKNOWN, syntax_for_lang

C = syntax_for_lang(LANG_C)
RUST = syntax_for_lang(LANG_RUST)
PYTHON = syntax_for_lang(LANG_PYTHON)


def classes_of(text: str, hl: list[int], word: str, start: int = 0) -> set[int]:
    i = text.index(word, start)
    return set(hl[i : i + len(word)])


def test_separators() -> None:
    for c in " \t\0,.()+-/*=~%[];:\"'#!":
        assert is_separator(c)
    for c in "aZ9_é":
        assert not is_separator(c)


def test_unknown_syntax_is_all_normal() -> None:
    text = 'int x = "5"; // note'
    assert scan_syntax(text, SYNTAX_UNKNOWN) == [HL_NORMAL] * len(text)


def test_c_declaration_with_trailing_comment() -> None:
    text = "int x = 5; // note"
    hl = scan_syntax(text, C)
    assert classes_of(text, hl, "int") == {HL_TYPE}
    assert hl[text.index("x")] == HL_IDENT
    assert hl[text.index("5")] == HL_NUMBER
    assert classes_of(text, hl, "// note") == {HL_COMMENT}
    assert hl[text.index("=")] == HL_NORMAL


def test_function_call_reclassifies_identifier() -> None:
    text = "foo(bar)"
    hl = scan_syntax(text, C)
    assert hl[:3] == [HL_FUNCTION] * 3
    assert hl[3] == HL_NORMAL
    assert hl[4:7] == [HL_IDENT] * 3
    assert hl[7] == HL_NORMAL


def test_keyword_must_end_at_separator() -> None:
    text = "format(forx) for"
    hl = scan_syntax(text, C)
    assert classes_of(text, hl, "format") == {HL_FUNCTION}
    assert classes_of(text, hl, "forx") == {HL_IDENT}
    assert classes_of(text, hl, "for", text.rindex("for")) == {HL_FLOWWORD}


def test_keyword_classes() -> None:
    text = "static return"
    hl = scan_syntax(text, C)
    assert classes_of(text, hl, "static") == {HL_KEYWORD}
    assert classes_of(text, hl, "return") == {HL_FLOWWORD}


def test_metaword() -> None:
    text = "#include <stdio.h>"
    hl = scan_syntax(text, C)
    assert classes_of(text, hl, "#include") == {HL_METAWORD}

    text = 'println!("hi")'
    hl = scan_syntax(text, RUST)
    assert classes_of(text, hl, "println!") == {HL_METAWORD}
    assert classes_of(text, hl, '"hi"') == {HL_STRING}


def test_string_with_escape() -> None:
    text = r'"a\"b" x'
    hl = scan_syntax(text, C)
    assert hl[:6] == [HL_STRING] * 6
    assert hl[7] == HL_IDENT


def test_comment_marker_inside_string_is_not_a_comment() -> None:
    text = '"// no" x'
    hl = scan_syntax(text, C)
    assert hl[:7] == [HL_STRING] * 7
    assert hl[8] == HL_IDENT


def test_unterminated_string_runs_to_end_of_row() -> None:
    text = '"abc def'
    assert scan_syntax(text, C) == [HL_STRING] * len(text)


def test_decimal_number() -> None:
    text = "x = 3.14"
    hl = scan_syntax(text, PYTHON)
    assert classes_of(text, hl, "3.14") == {HL_NUMBER}


def test_digits_inside_identifier_are_not_numbers() -> None:
    text = "x1 = y22"
    hl = scan_syntax(text, C)
    assert classes_of(text, hl, "x1") == {HL_IDENT}
    assert classes_of(text, hl, "y22") == {HL_IDENT}


def test_block_comment_without_nesting() -> None:
    text = "/* a /* b */ c */ d"
    hl = scan_syntax(text, C)
    assert hl[:12] == [HL_COMMENT] * 12
    assert hl[13] == HL_IDENT
    assert hl[18] == HL_IDENT


def test_block_comment_with_nesting() -> None:
    text = "/* a /* b */ c */ d"
    hl = scan_syntax(text, RUST)
    assert hl[:17] == [HL_COMMENT] * 17
    assert hl[18] == HL_IDENT


def test_unterminated_block_comment_runs_to_end_of_row() -> None:
    text = "x /* open"
    hl = scan_syntax(text, C)
    assert hl[0] == HL_IDENT
    assert hl[2:] == [HL_COMMENT] * (len(text) - 2)


def test_path_reclassification() -> None:
    text = "std::io::stdin()"
    hl = scan_syntax(text, RUST)
    assert classes_of(text, hl, "std") == {HL_PATH}
    assert classes_of(text, hl, "io") == {HL_PATH}
    assert classes_of(text, hl, "stdin") == {HL_FUNCTION}

    text = "os.path"
    hl = scan_syntax(text, PYTHON)
    assert classes_of(text, hl, "os") == {HL_PATH}
    assert classes_of(text, hl, "path") == {HL_IDENT}


def test_capitalized_identifiers_are_types() -> None:
    text = "class Foo: pass"
    hl = scan_syntax(text, PYTHON)
    assert classes_of(text, hl, "class") == {HL_KEYWORD}
    assert classes_of(text, hl, "Foo") == {HL_TYPE}
    assert classes_of(text, hl, "pass") == {HL_FLOWWORD}

    # C does not treat capitalized names as types.
    text = "Foo bar"
    hl = scan_syntax(text, C)
    assert classes_of(text, hl, "Foo") == {HL_IDENT}


def test_python_line_comment() -> None:
    text = "x = 1  # one"
    hl = scan_syntax(text, PYTHON)
    assert classes_of(text, hl, "# one") == {HL_COMMENT}


def test_highlight_row_covers_every_character() -> None:
    for text in ("", "a", "\t", "int main(void) { return 0; }", '"x', "/* a", "Foo::bar()"):
        for syntax in (SYNTAX_UNKNOWN, C, RUST, PYTHON):
            hl = highlight_row(text, syntax)
            assert len(hl) == len(text)
            assert all(h.overlay == OV_NORMAL for h in hl)
