import logging
from typing import List, Optional, Sequence, Tuple

from . import n
from .blocks import CONSTRUCT_PARSERS, ConstructParser
from .cursor import LineCursor
from .diagnostics import Diagnostic, MaxNestingExceeded
from .types import ParserConfig
from .util import PerformanceLogger, is_section_underline, match_bullet

__all__ = ("BlockParser", "parse", "parse_rst")
logger = logging.getLogger(__name__)


class BlockParser:
    """Parse one document (or sub-document) into block nodes.

    Each sub-document gets its own BlockParser and cursor, one level deeper. All of
    them share the configuration and the diagnostic list of the outermost parser."""

    def __init__(
        self,
        cursor: LineCursor,
        config: Optional[ParserConfig] = None,
        diagnostics: Optional[List[Diagnostic]] = None,
        depth: int = 0,
    ) -> None:
        self.cursor = cursor
        self.config = config if config is not None else ParserConfig()
        self.diagnostics: List[Diagnostic] = (
            diagnostics if diagnostics is not None else []
        )
        self.depth = depth
        self.constructs: Tuple[ConstructParser, ...] = tuple(
            construct(cursor, self) for construct in CONSTRUCT_PARSERS
        )

    def parse(self) -> n.Document:
        lineno = self.cursor.lineno
        children: List[n.Node] = []
        while self.cursor.has_more():
            node = self.parse_block()
            if node is not None:
                children.append(node)

        return n.Document((lineno,), children)

    def parse_block(self) -> Optional[n.Node]:
        line = self.cursor.peek()
        if line is None:
            return None

        if not line.strip():
            self.cursor.consume()
            return None

        for construct in self.constructs:
            node = construct.parse()
            if node is not None:
                logger.debug(
                    "%s claimed line %d", construct.__class__.__name__, node.start[0]
                )
                return node

        next_line = self.cursor.peek(1)
        if (
            next_line
            and is_section_underline(next_line)
            and len(next_line.strip()) >= len(line.strip())
        ):
            return self.parse_section()

        return self.parse_paragraph()

    def parse_section(self) -> n.Section:
        lineno = self.cursor.lineno
        title = self.cursor.consume()
        underline = self.cursor.consume()
        assert title is not None and underline is not None

        level = 2 if underline.strip().startswith("-") else 1
        return n.Section((lineno,), children=[], title=title.strip(), level=level)

    def parse_paragraph(self) -> n.Paragraph:
        """Consume lines up to the next blank line, or the next line that starts a
        different construct. The first line is always taken."""
        lineno = self.cursor.lineno
        first = self.cursor.consume()
        assert first is not None
        lines = [first.strip()]

        while self.cursor.has_more():
            line = self.cursor.peek()
            if line is None or not line.strip():
                break

            next_line = self.cursor.peek(1)
            if next_line and is_section_underline(next_line):
                break

            if line.strip().startswith(".. ") or match_bullet(line):
                break

            lines.append(line.strip())
            self.cursor.consume()

        return n.Paragraph((lineno,), self.parse_inline(" ".join(lines), lineno))

    def parse_subdocument(self, lines: Sequence[str], lineno: int) -> List[n.Node]:
        """Parse already-dedented lines as a nested document starting at lineno."""
        if self.depth >= self.config.max_depth:
            self.report(MaxNestingExceeded(self.config.max_depth, lineno))
            return []

        cursor = LineCursor.from_lines(list(lines), lineno)
        parser = BlockParser(cursor, self.config, self.diagnostics, self.depth + 1)
        return list(parser.parse().children)

    def parse_inline(self, text: str, lineno: int) -> List[n.InlineNode]:
        return self.config.inline.parse_inline(text, lineno)

    def report(self, diagnostic: Diagnostic) -> None:
        logger.debug("%s at line %d", diagnostic, diagnostic.start[0])
        self.diagnostics.append(diagnostic)


def parse_rst(
    text: str, config: Optional[ParserConfig] = None
) -> Tuple[n.Document, List[Diagnostic]]:
    """Parse a reStructuredText document, returning its tree and any diagnostics."""
    parser = BlockParser(LineCursor(text), config)
    with PerformanceLogger.singleton().start("parse"):
        document = parser.parse()

    return document, parser.diagnostics


def parse(text: str) -> n.Document:
    """Parse a reStructuredText document into a tree."""
    document, _ = parse_rst(text)
    return document
