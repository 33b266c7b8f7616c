import re
from typing import Dict, Match

from .. import n
from .base import DirectiveBlockParser, IndentedBody


class CardParser(DirectiveBlockParser):
    pattern = re.compile(r"^\s*\.\.\s+card::(.*)$")

    def build(
        self,
        lineno: int,
        match: Match[str],
        options: Dict[str, str],
        body: IndentedBody,
    ) -> n.Node:
        return n.Card(
            (lineno,),
            children=self.parse_indented_body(body),
            title=match.group(1).strip() or None,
            options=options or None,
        )
