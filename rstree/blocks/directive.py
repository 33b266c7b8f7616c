import re
from typing import Dict, List, Match, Optional, Tuple

from .. import n
from ..util import indentation_of
from .base import DirectiveBlockParser, IndentedBody

#: Directive names claimed by the table parser, which is tried later.
TABLE_DIRECTIVES = frozenset(("list-table", "flat-table", "csv-table"))

PAT_EXPLICIT_MARKUP = re.compile(r"^\s*\.\.(?:\s+(.*))?$")
PAT_REFERENCE = re.compile(r"^_(?:`([^`]+)`|([^:]+)):(.*)$")
PAT_SUBSTITUTION = re.compile(r"^\|([^|]+)\|(.*)$")
PAT_KEY_VALUE = re.compile(r"^([^\s:]+):(.*)$")


def classify_comment(text: str) -> Tuple[str, List[str]]:
    """Return the directive name and arguments that a ``..`` line without ``::``
    stands for: a reference target, a substitution, a ``key: value`` pair, or a comment."""
    match = PAT_REFERENCE.match(text)
    if match:
        label = match.group(1) or match.group(2)
        trailing = match.group(3).strip()
        return "reference", [label.strip()] + ([trailing] if trailing else [])

    match = PAT_SUBSTITUTION.match(text)
    if match:
        replacement = match.group(2).strip()
        return "substitution", [match.group(1)] + ([replacement] if replacement else [])

    match = PAT_KEY_VALUE.match(text)
    if match:
        value = match.group(2).strip()
        return match.group(1), [value] if value else []

    return "comment", [text] if text else []


class DirectiveParser(DirectiveBlockParser):
    """Parse any ``.. name::`` directive not claimed by a more specific parser, and
    every other explicit markup line (comments, reference targets, substitutions),
    so that no such line is ever dropped."""

    pattern = re.compile(r"^\s*\.\.\s+([a-zA-Z0-9_-]+)::(.*)$")

    def accepts(self, match: Match[str]) -> bool:
        return match.group(1) not in TABLE_DIRECTIVES

    def parse(self) -> Optional[n.Node]:
        line = self.cursor.peek()
        if not line:
            return None

        match = self.pattern.match(line)
        if match:
            return super().parse()

        return self.parse_comment(line)

    def build(
        self,
        lineno: int,
        match: Match[str],
        options: Dict[str, str],
        body: IndentedBody,
    ) -> n.Node:
        return n.Directive(
            (lineno,),
            name=match.group(1),
            args=match.group(2).split(),
            options=options,
            body=self.parse_indented_body(body),
        )

    def parse_comment(self, line: str) -> Optional[n.Node]:
        match = PAT_EXPLICIT_MARKUP.match(line)
        if not match:
            return None

        lineno = self.cursor.lineno
        self.cursor.consume()
        name, args = classify_comment((match.group(1) or "").strip())

        self.skip_blank_lines()
        body = self.collect_indented(indentation_of(line))
        return n.Directive(
            (lineno,),
            name=name,
            args=args,
            options={},
            body=self.parse_indented_body(body),
        )
