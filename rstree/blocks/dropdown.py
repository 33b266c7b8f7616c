import re
from typing import Dict, Match

from .. import n
from .base import DirectiveBlockParser, IndentedBody


class DropdownParser(DirectiveBlockParser):
    """Parse a dropdown directive. Unlike a card, a dropdown requires a title."""

    pattern = re.compile(r"^\s*\.\.\s+dropdown::\s*(.+)$")

    def build(
        self,
        lineno: int,
        match: Match[str],
        options: Dict[str, str],
        body: IndentedBody,
    ) -> n.Node:
        return n.Dropdown(
            (lineno,),
            children=self.parse_indented_body(body),
            title=match.group(1).strip(),
            options=options or None,
        )
