import re
from typing import Dict, List, Match, Optional

from .. import n
from ..diagnostics import UnknownTabDirective
from ..util import indentation_of, trim_blank_lines
from .base import DirectiveBlockParser, IndentedBody

PAT_TAB = re.compile(r"^\s*\.\.\s+(tab|group-tab|code-tab)::(.*)$")

LANGUAGE_DISPLAY_NAMES: Dict[str, str] = {
    "c": "C",
    "c++": "C++",
    "cpp": "C++",
    "py": "Python",
    "python": "Python",
    "java": "Java",
    "js": "JavaScript",
    "javascript": "JavaScript",
    "ts": "TypeScript",
    "typescript": "TypeScript",
    "julia": "Julia",
    "fortran": "Fortran",
    "r": "R",
    "ruby": "Ruby",
    "go": "Go",
    "rust": "Rust",
    "swift": "Swift",
    "kotlin": "Kotlin",
    "scala": "Scala",
    "bash": "Bash",
    "sh": "Shell",
    "shell": "Shell",
    "sql": "SQL",
    "html": "HTML",
    "css": "CSS",
    "json": "JSON",
    "yaml": "YAML",
    "xml": "XML",
}


def language_display_name(language: str) -> str:
    return LANGUAGE_DISPLAY_NAMES.get(language.lower(), language)


class TabsParser(DirectiveBlockParser):
    """Parse a tabs directive. Each tab, group-tab, or code-tab in the body is
    isolated and parsed on its own, so that tabs never bleed into one another."""

    pattern = re.compile(r"^\s*\.\.\s+tabs::(.*)$")

    def build(
        self,
        lineno: int,
        match: Match[str],
        options: Dict[str, str],
        body: IndentedBody,
    ) -> n.Node:
        return n.Tabs(
            (lineno,),
            children=self.parse_tabs(body.dedented(), body.lineno),
            options=options or None,
        )

    def parse_tabs(self, lines: List[str], first_lineno: int) -> List[n.Tab]:
        tabs: List[n.Tab] = []
        i = 0
        while i < len(lines):
            line = lines[i]
            if not line.strip():
                i += 1
                continue

            match = PAT_TAB.match(line)
            if not match:
                self.report(UnknownTabDirective(line.strip(), first_lineno + i))
                i += 1
                continue

            tab_lineno = first_lineno + i
            tab_indent = indentation_of(line)
            i += 1
            body_start = i
            while i < len(lines):
                body_line = lines[i]
                if body_line.strip() and indentation_of(body_line) <= tab_indent:
                    break
                i += 1

            tab_body = lines[body_start:i]
            trim_blank_lines(tab_body)
            tabs.append(
                self.create_tab(
                    tab_lineno,
                    match.group(1),
                    match.group(2).strip(),
                    IndentedBody(first_lineno + body_start, tab_body),
                )
            )

        return tabs

    def create_tab(
        self, lineno: int, kind: str, argument: str, body: IndentedBody
    ) -> n.Tab:
        title = argument
        group: Optional[str] = None
        language: Optional[str] = None

        if kind == "group-tab":
            group = argument
        elif kind == "code-tab":
            parts = argument.split(None, 1)
            language = parts[0] if parts else ""
            title = parts[1].strip() if len(parts) > 1 else ""
            title = title or language_display_name(language)

        if kind == "code-tab":
            children: List[n.Node] = [
                n.LiteralBlock(
                    (body.lineno,),
                    language=language or None,
                    value="\n".join(body.dedented()).strip(),
                )
            ]
        else:
            children = self.parse_indented_body(body)

        return n.Tab(
            (lineno,),
            children=children,
            title=title,
            group=group,
            language=language or None,
        )
