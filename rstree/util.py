import re
import sys
import time
from collections import defaultdict
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional, Pattern, Sequence, TextIO, Tuple

#: A directive option line: an indented ``:key: value`` pair.
PAT_OPTION = re.compile(r"^\s+:([a-zA-Z0-9_-]+):\s*(.*)$")

#: Underline characters accepted by the secondary section-title form.
SECTION_UNDERLINE_CHARACTERS = frozenset("=-`:'\"~^_*+#<>")

PAT_UNORDERED_BULLET = re.compile(r"^([*+\-•‣⁃])\s+")
PAT_ORDERED_BULLET = re.compile(r"^([0-9]+|[a-zA-Z]|#)\.\s+")


def indentation_of(line: str) -> int:
    """Return the number of leading whitespace characters in a line."""
    return len(line) - len(line.lstrip())


def is_blank(line: Optional[str]) -> bool:
    return line is not None and not line.strip()


def dedent(lines: Sequence[str]) -> List[str]:
    """Strip the minimum indentation of the non-blank lines from every line.
    Blank lines become empty strings."""
    indents = [indentation_of(line) for line in lines if line.strip()]
    if not indents:
        return ["" for _ in lines]

    min_indent = min(indents)
    return [line[min_indent:] if line.strip() else "" for line in lines]


def trim_blank_lines(lines: List[str]) -> None:
    """Remove trailing blank lines in place."""
    while lines and not lines[-1].strip():
        lines.pop()


def parse_option_line(
    line: Optional[str], pattern: Pattern[str] = PAT_OPTION
) -> Optional[Tuple[str, str]]:
    """Return the (key, value) pair held by an option line, or None."""
    if not line:
        return None

    match = pattern.match(line)
    if not match:
        return None

    return match.group(1), match.group(2).strip()


def match_bullet(line: str) -> Optional[Tuple[bool, str, str]]:
    """Return (ordered, bullet, token) if the line begins a list item, where
    token is the bullet plus its trailing whitespace."""
    stripped = line.strip()
    match = PAT_UNORDERED_BULLET.match(stripped)
    if match:
        return False, match.group(1), match.group(0)

    match = PAT_ORDERED_BULLET.match(stripped)
    if match:
        return True, match.group(1), match.group(0)

    return None


def is_section_underline(line: str) -> bool:
    """Test whether a line is a run of at least two identical adornment characters."""
    stripped = line.strip()
    if len(stripped) < 2 or stripped[0] not in SECTION_UNDERLINE_CHARACTERS:
        return False

    return all(c == stripped[0] for c in stripped)


class PerformanceLogger:
    _singleton: Optional["PerformanceLogger"] = None

    def __init__(self) -> None:
        self._times: Dict[str, List[float]] = defaultdict(list)

    @contextmanager
    def start(self, name: str) -> Iterator[None]:
        start_time = time.perf_counter()
        try:
            yield None
        finally:
            self._times[name].append(time.perf_counter() - start_time)

    def times(self) -> Dict[str, float]:
        return {k: min(v) for k, v in self._times.items()}

    def print(self, file: TextIO = sys.stdout) -> None:
        times = self.times()
        if not times:
            return

        title_column_width = max(len(x) for x in times.keys())
        for name, entry_time in times.items():
            print(f"{name:{title_column_width}} {entry_time:.2f}", file=file)

    @classmethod
    def singleton(cls) -> "PerformanceLogger":
        assert cls._singleton is not None
        return cls._singleton


PerformanceLogger._singleton = PerformanceLogger()
