import re
from typing import Dict, Match

from .. import n
from .base import DirectiveBlockParser, IndentedBody


class ContainerParser(DirectiveBlockParser):
    """Parse a container directive, whose arguments are CSS class names."""

    pattern = re.compile(r"^\s*\.\.\s+container::(.*)$")

    def build(
        self,
        lineno: int,
        match: Match[str],
        options: Dict[str, str],
        body: IndentedBody,
    ) -> n.Node:
        return n.Container(
            (lineno,),
            children=self.parse_indented_body(body),
            classes=match.group(1).split(),
            options=options or None,
        )
