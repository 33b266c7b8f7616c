import re
from typing import Dict, List, Match

from .. import n
from ..n import ADMONITION_KINDS
from .base import DirectiveBlockParser, IndentedBody


class AdmonitionParser(DirectiveBlockParser):
    """Parse the fixed set of call-out directives (note, warning, and so on)."""

    pattern = re.compile(r"^\s*\.\.\s+([a-zA-Z-]+)::(.*)$")

    def accepts(self, match: Match[str]) -> bool:
        return match.group(1) in ADMONITION_KINDS

    def build(
        self,
        lineno: int,
        match: Match[str],
        options: Dict[str, str],
        body: IndentedBody,
    ) -> n.Node:
        return n.Admonition(
            (lineno,),
            children=self.parse_admonition_body(lineno, match.group(2).strip(), body),
            kind=match.group(1),
            options=options or None,
        )

    def parse_admonition_body(
        self, lineno: int, argument: str, body: IndentedBody
    ) -> List[n.Node]:
        """An argument on the directive line is the start of the admonition's text."""
        if not argument:
            return self.parse_indented_body(body)

        if body.lineno == lineno + 1:
            # The body continues the argument's paragraph
            return self.parse_body([argument] + body.dedented(), lineno)

        children = self.parse_body([argument], lineno)
        children.extend(self.parse_indented_body(body))
        return children
