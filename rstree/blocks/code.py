import re
from typing import Dict, Match

from .. import n
from .base import DirectiveBlockParser, IndentedBody


class CodeBlockParser(DirectiveBlockParser):
    """Parse code, code-block, and parsed-literal directives. The body is kept verbatim
    (relative indentation preserved) and never parsed as markup."""

    pattern = re.compile(r"^\s*\.\.\s+(code|code-block|parsed-literal)::(.*)$")

    def build(
        self,
        lineno: int,
        match: Match[str],
        options: Dict[str, str],
        body: IndentedBody,
    ) -> n.Node:
        name = match.group(1)
        language = match.group(2).strip() if name != "parsed-literal" else ""

        return n.CodeBlock(
            (lineno,),
            language=language or None,
            content="\n".join(body.dedented()),
            parsed=True if name == "parsed-literal" else None,
            options=options or None,
        )
