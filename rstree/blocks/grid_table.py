import re
from typing import List, Optional

from .. import n
from .base import ConstructParser

PAT_GRID_TABLE_BORDER = re.compile(r"^\+[-=+]+\+$")


class GridTableParser(ConstructParser):
    """Parse ASCII-art tables:

    +-------+-------+
    | a     | b     |
    +=======+=======+
    | c     | ..    |
    +-------+-------+

    Each content line is one row. Cells do not span lines.
    """

    def parse(self) -> Optional[n.Node]:
        line = self.cursor.peek()
        if not line or not PAT_GRID_TABLE_BORDER.match(line.strip()):
            return None

        lineno = self.cursor.lineno
        rows: List[n.TableRow] = []
        while self.cursor.has_more():
            current = self.cursor.peek()
            assert current is not None
            stripped = current.strip()
            if PAT_GRID_TABLE_BORDER.match(stripped):
                self.cursor.consume()
                continue

            if not stripped.startswith("|"):
                break

            row_lineno = self.cursor.lineno
            self.cursor.consume()
            inner = stripped[1:]
            if inner.endswith("|"):
                inner = inner[:-1]
            cells = [
                self.parse_cell(text.strip(), row_lineno) for text in inner.split("|")
            ]
            rows.append(n.TableRow((row_lineno,), cells=cells))

        return n.Table(
            (lineno,),
            title=None,
            rows=rows,
            header_rows=0,
            stub_columns=0,
            options=None,
        )

    def parse_cell(self, text: str, lineno: int) -> n.TableCell:
        children: List[n.Node] = []
        if text and text != "..":
            children = self.parse_body([text], lineno)

        return n.TableCell((lineno,), children=children, cspan=1, rspan=1)
