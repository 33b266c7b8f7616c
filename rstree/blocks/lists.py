from typing import List, Optional

from .. import n
from ..util import indentation_of, match_bullet, trim_blank_lines
from .base import ConstructParser


class ListParser(ConstructParser):
    """Parse a run of bulleted or enumerated items.

    A list ends when the indentation changes, when an unordered list's bullet
    character changes, or when enumerated and bulleted items meet."""

    def parse(self) -> Optional[n.Node]:
        line = self.cursor.peek()
        if not line:
            return None

        bullet = match_bullet(line)
        if bullet is None:
            return None

        lineno = self.cursor.lineno
        ordered, bullet_char, _ = bullet
        indent = indentation_of(line)
        items: List[n.ListNodeItem] = []

        while self.cursor.has_more():
            current = self.cursor.peek()
            if not current or indentation_of(current) != indent:
                break

            match = match_bullet(current)
            if match is None or match[0] != ordered:
                break
            if not ordered and match[1] != bullet_char:
                break

            items.append(self.parse_item())

        return n.ListNode((lineno,), children=items, ordered=ordered)

    def parse_item(self) -> n.ListNodeItem:
        lineno = self.cursor.lineno
        line = self.cursor.consume()
        assert line is not None
        bullet = match_bullet(line)
        assert bullet is not None, f"Invalid list item: {line}"

        content_indent = indentation_of(line) + len(bullet[2])
        lines = [line[content_indent:]]
        while self.cursor.has_more():
            next_line = self.cursor.peek()
            assert next_line is not None
            if not next_line.strip():
                lines.append("")
                self.cursor.consume()
                continue

            if indentation_of(next_line) < content_indent:
                break

            lines.append(next_line[content_indent:])
            self.cursor.consume()

        trim_blank_lines(lines)
        return n.ListNodeItem((lineno,), children=self.parse_body(lines, lineno))


class DefinitionListParser(ConstructParser):
    """Parse terms, each immediately followed by a more-indented definition."""

    def is_definition_start(self) -> bool:
        term = self.cursor.peek()
        definition = self.cursor.peek(1)
        if not term or not definition or not definition.strip():
            return False

        return indentation_of(definition) > indentation_of(term)

    def parse(self) -> Optional[n.Node]:
        if not self.is_definition_start():
            return None

        lineno = self.cursor.lineno
        first = self.cursor.peek()
        assert first is not None
        term_indent = indentation_of(first)
        items: List[n.DefinitionListItem] = []

        while self.cursor.has_more():
            line = self.cursor.peek()
            assert line is not None
            if not line.strip():
                self.cursor.consume()
                continue

            if indentation_of(line) != term_indent or not self.is_definition_start():
                break

            items.append(self.parse_item())

        return n.DefinitionList((lineno,), children=items)

    def parse_item(self) -> n.DefinitionListItem:
        lineno = self.cursor.lineno
        term_line = self.cursor.consume()
        definition_line = self.cursor.peek()
        assert term_line is not None and definition_line is not None

        definition_lineno = self.cursor.lineno
        definition_indent = indentation_of(definition_line)
        lines: List[str] = []
        while self.cursor.has_more():
            line = self.cursor.peek()
            assert line is not None
            if not line.strip():
                lines.append("")
                self.cursor.consume()
                continue

            if indentation_of(line) < definition_indent:
                break

            lines.append(line[definition_indent:])
            self.cursor.consume()

        trim_blank_lines(lines)
        term = n.Term((lineno,), children=[n.Text((lineno,), term_line.strip())])
        definition = n.Definition(
            (definition_lineno,),
            children=self.parse_body(lines, definition_lineno),
        )
        return n.DefinitionListItem((lineno,), children=[term, definition])
