import logging
import re
from typing import Dict, List, Optional

from .. import n
from ..cursor import LineCursor
from ..diagnostics import EmptyTable, InvalidTableOption
from ..types import EmbeddedRstParser
from ..util import dedent, indentation_of, trim_blank_lines
from .base import ConstructParser, IndentedBody

PAT_TABLE_DIRECTIVE = re.compile(r"^\s*\.\.\s+(list-table|flat-table|csv-table)::(.*)$")
PAT_TABLE_OPTION = re.compile(r"^\s+:([^\s:]+):\s*(.*)$")
PAT_SPAN_ROLE = re.compile(r"^:([a-z-]+):`(\d+)`")
logger = logging.getLogger(__name__)


def is_row_marker(stripped: str) -> bool:
    return stripped.startswith("* -") or stripped.startswith("*-")


def is_cell_marker(stripped: str) -> bool:
    return stripped.startswith("- ") or stripped == "-"


class TableGrammar(ConstructParser):
    """A cell grammar run over the dedented body of a table directive."""

    def parse(self) -> Optional[n.Node]:
        lineno = self.cursor.lineno
        rows = self.parse_rows()
        if not rows:
            return None

        return n.Table(
            (lineno,),
            title=None,
            rows=rows,
            header_rows=0,
            stub_columns=0,
            options=None,
        )

    def parse_rows(self) -> List[n.TableRow]:
        raise NotImplementedError()

    def make_cell(
        self, lineno: int, content: str, cspan: int = 1, rspan: int = 1
    ) -> n.TableCell:
        children: List[n.Node] = []
        if content:
            if self.rst_parser is None:
                children = [n.Text((lineno,), content)]
            else:
                children = self.rst_parser.parse_subdocument(
                    content.split("\n"), lineno
                )

        return n.TableCell((lineno,), children=children, cspan=cspan, rspan=rspan)


class ListTableParser(TableGrammar):
    """Parse the list-table and flat-table grammar:

    * - row 1, cell 1
      - row 1, cell 2
    * - :cspan:`2` row 2, spanning both columns
    """

    def parse_rows(self) -> List[n.TableRow]:
        rows: List[n.TableRow] = []
        while self.cursor.has_more():
            line = self.cursor.peek()
            if not line or not line.strip().startswith("* -"):
                break

            row_lineno = self.cursor.lineno
            row_indent = indentation_of(line)
            cells = [self.parse_cell_at(line, line.index("-"), row_indent)]

            while self.cursor.has_more():
                cell_line = self.cursor.peek()
                assert cell_line is not None
                stripped = cell_line.strip()
                if is_row_marker(stripped) or indentation_of(cell_line) < row_indent:
                    break

                if not is_cell_marker(stripped):
                    break

                cells.append(
                    self.parse_cell_at(cell_line, cell_line.index("-"), row_indent)
                )

            rows.append(n.TableRow((row_lineno,), cells=cells))

        return rows

    def parse_cell_at(self, line: str, dash: int, row_indent: int) -> n.TableCell:
        """Consume a cell marker line and the cell's continuation lines."""
        lineno = self.cursor.lineno
        self.cursor.consume()
        content_column = dash + 2
        lines = [line[content_column:]]

        while self.cursor.has_more():
            next_line = self.cursor.peek()
            assert next_line is not None
            stripped = next_line.strip()
            indent = indentation_of(next_line)

            if is_row_marker(stripped) and indent <= row_indent:
                break
            if is_cell_marker(stripped) and indent <= row_indent + 2:
                break
            if stripped and indent < content_column and indent <= row_indent:
                break

            self.cursor.consume()
            if not stripped:
                lines.append("")
            else:
                # Ragged continuation lines are dedented to their own indentation
                lines.append(next_line[min(indent, content_column) :])

        return self.parse_cell("\n".join(lines), lineno)

    def parse_cell(self, content: str, lineno: int) -> n.TableCell:
        leading = content[: len(content) - len(content.lstrip())]
        lineno += leading.count("\n")
        content = content.strip()

        spans = {"cspan": 1, "rspan": 1}
        while True:
            match = PAT_SPAN_ROLE.match(content)
            if not match:
                break
            if match.group(1) in spans:
                spans[match.group(1)] = int(match.group(2))
            content = content[match.end() :].strip()

        if content == "..":
            content = ""

        return self.make_cell(lineno, content, spans["cspan"], spans["rspan"])


class CsvTableParser(TableGrammar):
    """Parse comma-separated rows. Quoted commas are not supported."""

    def __init__(
        self,
        cursor: LineCursor,
        rst_parser: Optional[EmbeddedRstParser],
        header: Optional[str] = None,
        header_lineno: int = 1,
    ) -> None:
        super().__init__(cursor, rst_parser)
        self.header = header
        self.header_lineno = header_lineno

    def parse_rows(self) -> List[n.TableRow]:
        rows: List[n.TableRow] = []
        if self.header:
            rows.append(self.parse_csv_line(self.header, self.header_lineno))

        while self.cursor.has_more():
            lineno = self.cursor.lineno
            line = self.cursor.consume()
            if not line or not line.strip():
                continue

            row = self.parse_csv_line(line.strip(), lineno)
            if row.cells:
                rows.append(row)

        return rows

    def parse_csv_line(self, line: str, lineno: int) -> n.TableRow:
        cells: List[n.TableCell] = []
        for raw in line.split(","):
            raw = raw.strip()
            if not raw:
                continue
            if len(raw) >= 2 and raw.startswith('"') and raw.endswith('"'):
                raw = raw[1:-1]
            cells.append(self.make_cell(lineno, raw))

        return n.TableRow((lineno,), cells=cells)


class TableDirectiveParser(ConstructParser):
    """Parse the list-table, flat-table, and csv-table directives, handing the
    dedented body to the matching cell grammar."""

    def parse(self) -> Optional[n.Node]:
        line = self.cursor.peek()
        if not line:
            return None

        match = PAT_TABLE_DIRECTIVE.match(line)
        if not match:
            return None

        lineno = self.cursor.lineno
        self.cursor.consume()
        name = match.group(1)
        options = self.parse_options(PAT_TABLE_OPTION)
        self.skip_blank_lines()

        body = self.collect_table_body(name, indentation_of(line))
        sub_cursor = LineCursor.from_lines(dedent(body.lines), body.lineno)
        grammar: TableGrammar
        if name == "csv-table":
            grammar = CsvTableParser(
                sub_cursor, self.rst_parser, options.get("header"), lineno
            )
        else:
            grammar = ListTableParser(sub_cursor, self.rst_parser)

        rows = grammar.parse_rows()
        if not rows:
            self.report(EmptyTable(name, lineno))

        header_rows = self.parse_int_option(options, "header-rows", lineno)
        if name == "csv-table" and not header_rows and options.get("header"):
            header_rows = 1

        logger.debug("%s at line %d: %d rows", name, lineno, len(rows))
        return n.Table(
            (lineno,),
            title=match.group(2).strip() or None,
            rows=rows,
            header_rows=header_rows,
            stub_columns=self.parse_int_option(options, "stub-columns", lineno),
            options=options or None,
        )

    def collect_table_body(self, name: str, directive_indent: int) -> IndentedBody:
        """Collect every line at or past the indentation of the first body line.

        A body that is not indented past the directive ends at the first line at its
        own indentation that cannot continue the table."""
        lineno = self.cursor.lineno
        first = self.cursor.peek()
        if first is None:
            return IndentedBody(lineno, [])

        baseline = indentation_of(first)
        unindented = baseline <= directive_indent
        lines: List[str] = []
        while self.cursor.has_more():
            line = self.cursor.peek()
            assert line is not None
            stripped = line.strip()
            if not stripped:
                if unindented and name == "csv-table":
                    break
                lines.append(line)
                self.cursor.consume()
                continue

            indent = indentation_of(line)
            if indent < baseline:
                break
            if unindented and indent == baseline and name != "csv-table":
                if not (stripped.startswith("*") or stripped.startswith("-")):
                    break

            lines.append(line)
            self.cursor.consume()

        trim_blank_lines(lines)
        return IndentedBody(lineno, lines)

    def parse_int_option(self, options: Dict[str, str], key: str, lineno: int) -> int:
        value = options.get(key)
        if value is None:
            return 0

        if not value.isdigit():
            self.report(InvalidTableOption(key, value, lineno))
            return 0

        return int(value)

