import enum
from typing import Dict, Tuple, Union

from . import n
from .n import SerializableType


class Diagnostic:
    def __init__(
        self,
        message: str,
        start: Union[int, Tuple[int, int]],
        end: Union[None, int, Tuple[int, int]] = None,
    ) -> None:
        self.message = message

        if isinstance(start, int):
            start_line, start_column = start, 0
        else:
            start_line, start_column = start
        self.start = (start_line, start_column)

        if end is None:
            end_line, end_column = start_line, 1000
        elif isinstance(end, int):
            end_line, end_column = end, 1000
        else:
            end_line, end_column = end
        self.end = (end_line, end_column)

    class Level(enum.IntEnum):
        info = 1
        warning = 2
        error = 3

    @property
    def severity(self) -> "Diagnostic.Level":
        raise TypeError("Cannot access the severity of an abstract base Diagnostic")

    @property
    def severity_string(self) -> str:
        return self.severity.name.title()

    def serialize(self) -> n.SerializedNode:
        """Create dict containing diagnostic attributes for neatly reporting diagnostics at program completion"""
        diag: Dict[str, SerializableType] = {}
        diag["severity"] = self.severity_string.upper()
        diag["start"] = self.start[0]
        diag["message"] = self.message
        return diag

    def __eq__(self, other: object) -> bool:
        if type(self) != type(other):
            return False

        assert isinstance(other, Diagnostic)

        return (
            self.message == other.message
            and self.start == other.start
            and self.end == other.end
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({repr(self.message)}, {repr(self.start)})"


class MaxNestingExceeded(Diagnostic):
    severity = Diagnostic.Level.error

    def __init__(
        self,
        max_depth: int,
        start: Union[int, Tuple[int, int]],
        end: Union[None, int, Tuple[int, int]] = None,
    ) -> None:
        super().__init__(
            f"Maximum nesting depth of {max_depth} exceeded; body not parsed",
            start,
            end,
        )
        self.max_depth = max_depth


class EmptyTable(Diagnostic):
    severity = Diagnostic.Level.warning

    def __init__(
        self,
        name: str,
        start: Union[int, Tuple[int, int]],
        end: Union[None, int, Tuple[int, int]] = None,
    ) -> None:
        super().__init__(f'"{name}" has no rows', start, end)
        self.name = name


class InvalidTableOption(Diagnostic):
    severity = Diagnostic.Level.warning

    def __init__(
        self,
        option: str,
        value: str,
        start: Union[int, Tuple[int, int]],
        end: Union[None, int, Tuple[int, int]] = None,
    ) -> None:
        super().__init__(
            f'Option "{option}" expected an integer, but received "{value}"',
            start,
            end,
        )
        self.option = option


class UnknownTabDirective(Diagnostic):
    severity = Diagnostic.Level.warning

    def __init__(
        self,
        line: str,
        start: Union[int, Tuple[int, int]],
        end: Union[None, int, Tuple[int, int]] = None,
    ) -> None:
        super().__init__(
            f"Expected a tab, group-tab, or code-tab directive; skipping: {line}",
            start,
            end,
        )
