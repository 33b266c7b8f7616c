from typing import List

from . import n


class TextInlineParser:
    """The minimal inline producer: wraps the given span verbatim in a single
    text node. Richer producers (emphasis, links, roles) implement the same
    ``parse_inline()`` signature and are supplied through ParserConfig."""

    def parse_inline(self, text: str, lineno: int) -> List[n.InlineNode]:
        return [n.Text((lineno,), text)]
