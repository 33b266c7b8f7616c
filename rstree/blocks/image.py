import re
from typing import Dict, List, Optional, Tuple

from .. import n
from ..util import indentation_of
from .base import ConstructParser

PAT_IMAGE = re.compile(r"^\s*\.\.\s+(image|figure)::(.+)$")


def split_caption(lines: List[str]) -> Tuple[Optional[str], Optional[str]]:
    """Split a figure body into its caption (the first block of text) and its
    legend (everything after the first blank line). Each is flattened to one line."""
    caption: List[str] = []
    legend: List[str] = []
    target = caption
    for line in lines:
        if not line.strip():
            if caption:
                target = legend
            continue
        target.append(line.strip())

    return " ".join(caption) or None, " ".join(legend) or None


class ImageParser(ConstructParser):
    """Parse image and figure directives. An image takes only options; a figure
    additionally takes a caption and legend from its body."""

    def parse(self) -> Optional[n.Node]:
        line = self.cursor.peek()
        if not line:
            return None

        match = PAT_IMAGE.match(line)
        if not match:
            return None

        lineno = self.cursor.lineno
        self.cursor.consume()
        uri = match.group(2).strip()
        options: Dict[str, str] = self.parse_options()

        if match.group(1) == "image":
            return n.Image(
                (lineno,),
                uri=uri,
                alt=options.get("alt") or None,
                width=options.get("width") or None,
                height=options.get("height") or None,
                scale=options.get("scale") or None,
                align=options.get("align") or None,
                options=options or None,
            )

        self.skip_blank_lines()
        body = self.collect_indented(indentation_of(line))
        caption, legend = split_caption(body.dedented())
        return n.Figure(
            (lineno,),
            uri=uri,
            alt=options.get("alt") or None,
            width=options.get("width") or None,
            height=options.get("height") or None,
            scale=options.get("scale") or None,
            align=options.get("align") or None,
            options=options or None,
            caption=caption,
            legend=legend,
        )
