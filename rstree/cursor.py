import re
from typing import List, Optional

from .util import indentation_of

PAT_NEWLINE = re.compile(r"\r?\n")


class LineCursor:
    """A forward-only read position over the lines of a document.

    ``first_lineno`` is the source line number of the first line, so that
    cursors over extracted sub-documents report positions in terms of the
    enclosing document."""

    __slots__ = ("lines", "index", "first_lineno")

    def __init__(self, text: str, first_lineno: int = 1) -> None:
        self.lines: List[str] = PAT_NEWLINE.split(text)
        self.index = 0
        self.first_lineno = first_lineno

    @classmethod
    def from_lines(cls, lines: List[str], first_lineno: int = 1) -> "LineCursor":
        return cls("\n".join(lines), first_lineno)

    def has_more(self) -> bool:
        return self.index < len(self.lines)

    def peek(self, offset: int = 0) -> Optional[str]:
        """Return the line ``offset`` lines ahead of the current one without
        consuming anything, or None past the end of the document."""
        position = self.index + offset
        if position < 0 or position >= len(self.lines):
            return None
        return self.lines[position]

    def consume(self) -> Optional[str]:
        if not self.has_more():
            return None

        line = self.lines[self.index]
        self.index += 1
        return line

    @property
    def lineno(self) -> int:
        """The source line number of the current line."""
        return self.first_lineno + self.index

    @staticmethod
    def indentation_of(line: str) -> int:
        return indentation_of(line)

    def __repr__(self) -> str:
        remaining = len(self.lines) - self.index
        return f"LineCursor(line={self.lineno}, remaining={remaining})"
