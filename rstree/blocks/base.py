from typing import ClassVar, Dict, List, Match, NamedTuple, Optional, Pattern

from .. import n
from ..cursor import LineCursor
from ..diagnostics import Diagnostic
from ..types import EmbeddedRstParser
from ..util import (
    PAT_OPTION,
    dedent,
    indentation_of,
    parse_option_line,
    trim_blank_lines,
)


class IndentedBody(NamedTuple):
    """Raw lines claimed by a construct, and the source line of the first one."""

    lineno: int
    lines: List[str]

    def dedented(self) -> List[str]:
        return dedent(self.lines)

    def is_empty(self) -> bool:
        return not any(line.strip() for line in self.lines)


class ConstructParser:
    """A parser that tries to claim the block at the cursor.

    parse() returns None without consuming anything when the block is not
    one it recognizes."""

    def __init__(
        self, cursor: LineCursor, rst_parser: Optional[EmbeddedRstParser]
    ) -> None:
        self.cursor = cursor
        self.rst_parser = rst_parser

    def parse(self) -> Optional[n.Node]:
        raise NotImplementedError()

    def report(self, diagnostic: Diagnostic) -> None:
        if self.rst_parser is not None:
            self.rst_parser.report(diagnostic)

    def parse_options(self, pattern: Pattern[str] = PAT_OPTION) -> Dict[str, str]:
        """Consume the run of option lines at the cursor. Repeated keys keep the last value."""
        options: Dict[str, str] = {}
        while True:
            option = parse_option_line(self.cursor.peek(), pattern)
            if option is None:
                break

            key, value = option
            options[key] = value
            self.cursor.consume()

        return options

    def skip_blank_lines(self) -> int:
        skipped = 0
        while self.cursor.has_more():
            line = self.cursor.peek()
            if line is None or line.strip():
                break
            self.cursor.consume()
            skipped += 1

        return skipped

    def collect_indented(self, indent: int) -> IndentedBody:
        """Consume every line indented past ``indent``, along with interleaved
        blank lines. Trailing blank lines are dropped."""
        lineno = self.cursor.lineno
        lines: List[str] = []
        while self.cursor.has_more():
            line = self.cursor.peek()
            assert line is not None
            if line.strip() and indentation_of(line) <= indent:
                break

            lines.append(line)
            self.cursor.consume()

        trim_blank_lines(lines)
        return IndentedBody(lineno, lines)

    def parse_body(self, lines: List[str], lineno: int) -> List[n.Node]:
        """Parse already-dedented lines as a sub-document."""
        if not any(line.strip() for line in lines):
            return []

        if self.rst_parser is None:
            return [n.Text((lineno,), "\n".join(lines).strip())]

        return self.rst_parser.parse_subdocument(lines, lineno)


class DirectiveBlockParser(ConstructParser):
    """The shared shape of a named block: an opening ``.. name::`` line, a contiguous
    run of options, and an indented body which is parsed as a sub-document."""

    pattern: ClassVar[Pattern[str]]
    option_pattern: ClassVar[Pattern[str]] = PAT_OPTION

    def accepts(self, match: Match[str]) -> bool:
        return True

    def parse(self) -> Optional[n.Node]:
        line = self.cursor.peek()
        if not line:
            return None

        match = self.pattern.match(line)
        if not match or not self.accepts(match):
            return None

        lineno = self.cursor.lineno
        self.cursor.consume()
        indent = indentation_of(line)
        options = self.parse_options(self.option_pattern)
        self.skip_blank_lines()
        body = self.collect_indented(indent)
        return self.build(lineno, match, options, body)

    def build(
        self,
        lineno: int,
        match: Match[str],
        options: Dict[str, str],
        body: IndentedBody,
    ) -> n.Node:
        raise NotImplementedError()

    def parse_indented_body(self, body: IndentedBody) -> List[n.Node]:
        return self.parse_body(body.dedented(), body.lineno)
