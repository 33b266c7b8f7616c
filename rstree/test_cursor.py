from .cursor import LineCursor
from .util import dedent, indentation_of, is_section_underline, match_bullet, trim_blank_lines


def test_cursor() -> None:
    cursor = LineCursor("first\r\n  second\n\nlast", 10)
    assert cursor.has_more()
    assert cursor.lineno == 10
    assert cursor.peek() == "first"
    assert cursor.peek(1) == "  second"
    assert cursor.peek(3) == "last"
    assert cursor.peek(4) is None

    assert cursor.consume() == "first"
    assert cursor.lineno == 11
    assert cursor.peek(-1) == "first"
    assert LineCursor.indentation_of(cursor.peek() or "") == 2

    for _ in range(3):
        cursor.consume()
    assert not cursor.has_more()
    assert cursor.peek() is None
    assert cursor.consume() is None


def test_cursor_from_lines() -> None:
    cursor = LineCursor.from_lines(["a", "", "b"], 5)
    assert [cursor.consume() for _ in range(3)] == ["a", "", "b"]
    assert cursor.lineno == 8


def test_dedent() -> None:
    assert dedent(["    a", "", "      b", "   "]) == ["a", "", "  b", ""]
    assert dedent(["  ", ""]) == ["", ""]
    assert dedent([]) == []


def test_trim_blank_lines() -> None:
    lines = ["a", "", "b", "", "  "]
    trim_blank_lines(lines)
    assert lines == ["a", "", "b"]


def test_indentation_of() -> None:
    assert indentation_of("   x") == 3
    assert indentation_of("\tx") == 1
    assert indentation_of("") == 0


def test_match_bullet() -> None:
    assert match_bullet("- item") == (False, "-", "- ")
    assert match_bullet("  *   item") == (False, "*", "*   ")
    assert match_bullet("12. item") == (True, "12", "12. ")
    assert match_bullet("#. item") == (True, "#", "#. ")
    assert match_bullet("-item") is None
    assert match_bullet("ab. item") is None


def test_is_section_underline() -> None:
    assert is_section_underline("~~~~")
    assert is_section_underline("  ``")
    assert not is_section_underline("~")
    assert not is_section_underline("~~-")
    assert not is_section_underline("....")
