import re
from typing import List, Optional, Union

from .. import n
from ..util import indentation_of, trim_blank_lines
from .base import ConstructParser, IndentedBody

PAT_GRID = re.compile(r"^\s*\.\.\s+grid::(.*)$")
PAT_GRID_ITEM = re.compile(r"^\s+\.\.\s+grid-item::")
PAT_GRID_ITEM_CARD = re.compile(r"^\s+\.\.\s+grid-item-card::(.*)$")
PAT_SIBLING_DIRECTIVE = re.compile(r"^\s+\.\.")

#: Grid options are looser than ordinary directive options: any key without a colon.
PAT_GRID_OPTION = re.compile(r"^\s+:([^:]+):\s*(.*)$")


def parse_columns(argument: str) -> List[int]:
    columns = [int(column) for column in argument.split() if column.isdigit()]
    return columns or [1]


def parse_gutter(value: str) -> Union[str, List[int]]:
    parts = value.split()
    if len(parts) == 1:
        return value
    return [int(part) for part in parts if part.isdigit()]


class GridParser(ConstructParser):
    """Parse a grid directive. Its body is scanned for grid-item and grid-item-card
    blocks rather than parsed as a whole; any other content ends the grid."""

    def parse(self) -> Optional[n.Node]:
        line = self.cursor.peek()
        if not line:
            return None

        match = PAT_GRID.match(line)
        if not match:
            return None

        lineno = self.cursor.lineno
        self.cursor.consume()
        base_indent = indentation_of(line)

        options = self.parse_options(PAT_GRID_OPTION)
        gutter = parse_gutter(options.pop("gutter")) if "gutter" in options else None
        self.skip_blank_lines()

        children: List[Union[n.GridItem, n.GridItemCard]] = []
        while self.cursor.has_more():
            current = self.cursor.peek()
            assert current is not None
            if not current.strip():
                self.cursor.consume()
                continue

            item_indent = indentation_of(current)
            if item_indent <= base_indent:
                break

            if PAT_GRID_ITEM.match(current):
                children.append(self.parse_grid_item(base_indent, item_indent))
            elif PAT_GRID_ITEM_CARD.match(current):
                children.append(self.parse_grid_item_card(base_indent, item_indent))
            else:
                break

        return n.Grid(
            (lineno,),
            children=children,
            columns=parse_columns(match.group(1)),
            gutter=gutter,
            options=options or None,
        )

    def parse_grid_item(self, base_indent: int, item_indent: int) -> n.GridItem:
        lineno = self.cursor.lineno
        self.cursor.consume()
        body = self.collect_item_body(base_indent, item_indent)
        return n.GridItem(
            (lineno,), children=self.parse_body(body.dedented(), body.lineno)
        )

    def parse_grid_item_card(
        self, base_indent: int, item_indent: int
    ) -> n.GridItemCard:
        lineno = self.cursor.lineno
        line = self.cursor.consume()
        assert line is not None
        match = PAT_GRID_ITEM_CARD.match(line)
        assert match is not None

        options = self.parse_options(PAT_GRID_OPTION)
        body = self.collect_item_body(base_indent, item_indent)
        return n.GridItemCard(
            (lineno,),
            children=self.parse_body(body.dedented(), body.lineno),
            title=match.group(1).strip() or None,
            options=options or None,
        )

    def collect_item_body(self, base_indent: int, item_indent: int) -> IndentedBody:
        """Consume an item's body: everything up to a dedent to the grid's own level,
        or the next directive opened at the item's level."""
        lineno = self.cursor.lineno
        lines: List[str] = []
        while self.cursor.has_more():
            line = self.cursor.peek()
            assert line is not None
            if line.strip():
                indent = indentation_of(line)
                if indent <= base_indent:
                    break
                if indent == item_indent and PAT_SIBLING_DIRECTIVE.match(line):
                    break

            lines.append(line)
            self.cursor.consume()

        trim_blank_lines(lines)
        return IndentedBody(lineno, lines)
