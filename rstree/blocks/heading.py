from typing import Dict, Optional, Tuple

from .. import n
from .base import ConstructParser

#: Adornments accepted above and below a title.
OVERLINE_LEVELS: Dict[str, int] = {"#": 1, "*": 2}

#: Adornments accepted below a title. Only levels 3 and deeper may omit the overline.
UNDERLINE_LEVELS: Dict[str, int] = {"#": 1, "*": 2, "=": 3, "-": 4, "^": 5, '"': 6}


def match_adornment(line: Optional[str]) -> Optional[Tuple[str, int]]:
    """Return (character, length) if the line is a run of one heading adornment character."""
    if line is None:
        return None

    stripped = line.strip()
    if not stripped or stripped[0] not in UNDERLINE_LEVELS:
        return None

    if stripped.count(stripped[0]) != len(stripped):
        return None

    return stripped[0], len(stripped)


class HeadingParser(ConstructParser):
    """Parse adorned titles:

    #######       *******
    Level 1       Level 2       Level 3     Level 4
    #######       *******       =======     -------
    """

    def parse(self) -> Optional[n.Node]:
        line = self.cursor.peek()
        next_line = self.cursor.peek(1)
        if not line or next_line is None:
            return None

        lineno = self.cursor.lineno
        overline = match_adornment(line)
        if overline and overline[0] in OVERLINE_LEVELS:
            return self.parse_overlined(lineno, overline)

        underline = match_adornment(next_line)
        if not underline:
            return None

        char, length = underline
        title = line.strip()
        level = UNDERLINE_LEVELS[char]
        if length < len(title) or level < 3:
            return None

        self.cursor.consume()
        self.cursor.consume()
        self.skip_blank_lines()
        return n.Heading((lineno,), level=level, title=title)

    def parse_overlined(
        self, lineno: int, overline: Tuple[str, int]
    ) -> Optional[n.Node]:
        title_line = self.cursor.peek(1)
        underline = match_adornment(self.cursor.peek(2))
        if not title_line or not underline:
            return None

        char, length = underline
        title = title_line.strip()
        if char != overline[0] or length < len(title):
            return None

        for _ in range(3):
            self.cursor.consume()
        self.skip_blank_lines()
        return n.Heading((lineno,), level=OVERLINE_LEVELS[char], title=title)
