import re
from typing import Dict, Match

from .. import n
from .base import DirectiveBlockParser, IndentedBody


class ButtonParser(DirectiveBlockParser):
    """Parse button-link and button-ref directives. The argument is the link target, and
    the body is flattened into the button's label."""

    pattern = re.compile(r"^\s*\.\.\s+button-(link|ref)::\s*(.+)$")

    def build(
        self,
        lineno: int,
        match: Match[str],
        options: Dict[str, str],
        body: IndentedBody,
    ) -> n.Node:
        target = match.group(2).strip()
        text = " ".join(line.strip() for line in body.dedented() if line.strip())
        css_class = options.get("class")

        if match.group(1) == "link":
            return n.ButtonLink(
                (lineno,),
                text=text,
                css_class=css_class,
                options=options or None,
                url=target,
            )

        return n.ButtonRef(
            (lineno,),
            text=text,
            css_class=css_class,
            options=options or None,
            ref=target,
        )
