import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, ClassVar, Dict, List, Optional, Sequence

import tomli
from typing_extensions import Protocol

from . import n
from .diagnostics import Diagnostic
from .inline import TextInlineParser

DEFAULT_MAX_DEPTH = 50

#: An upper bound on the interpreter frames one level of sub-document nesting uses.
FRAMES_PER_LEVEL = 16
logger = logging.getLogger(__name__)


def max_supported_depth() -> int:
    """The deepest nesting that can be parsed without exhausting the interpreter stack."""
    return sys.getrecursionlimit() // FRAMES_PER_LEVEL


class RstreeError(Exception):
    pass


class ConfigurationError(RstreeError):
    pass


class InlineParser(Protocol):
    def parse_inline(self, text: str, lineno: int) -> List[n.InlineNode]:
        ...


class EmbeddedRstParser(Protocol):
    """The services a construct parser needs from the block dispatcher that owns it."""

    def parse_subdocument(self, lines: Sequence[str], lineno: int) -> List[n.Node]:
        ...

    def report(self, diagnostic: Diagnostic) -> None:
        ...


@dataclass
class ParserConfig:
    root: Optional[Path] = field(default=None)
    max_depth: int = field(default=DEFAULT_MAX_DEPTH)
    inline: InlineParser = field(default_factory=TextInlineParser)

    CONFIG_FILENAME: ClassVar[str] = "rstree.toml"
    ENV_MAX_DEPTH: ClassVar[str] = "RSTREE_MAX_DEPTH"

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise ConfigurationError(
                f"max_depth must be an integer, not {self.max_depth!r}"
            )

        if self.max_depth < 1:
            raise ConfigurationError(f"max_depth must be positive: {self.max_depth}")

        if self.max_depth > max_supported_depth():
            raise ConfigurationError(
                f"max_depth must be at most {max_supported_depth()} "
                f"with a recursion limit of {sys.getrecursionlimit()}: {self.max_depth}"
            )

    @property
    def config_path(self) -> Optional[Path]:
        if self.root is None:
            return None
        return self.root.joinpath(self.CONFIG_FILENAME)

    @classmethod
    def open(cls, root: Path) -> "ParserConfig":
        """Search root and its ancestors for an rstree.toml, and load the first one found.
        Environment overrides are applied on top of the file."""
        path = root.resolve()
        data: Dict[str, Any] = {}
        config_root = root
        while path.parent != path:
            try:
                with path.joinpath(cls.CONFIG_FILENAME).open("rb") as f:
                    data = tomli.load(f).get("parser", {})
                    config_root = path
                    break
            except FileNotFoundError:
                pass
            except tomli.TOMLDecodeError as err:
                raise ConfigurationError(
                    f"Error parsing {path.joinpath(cls.CONFIG_FILENAME)}: {err}"
                ) from err

            path = path.parent

        env_max_depth = os.environ.get(cls.ENV_MAX_DEPTH)
        if env_max_depth is not None:
            try:
                data["max_depth"] = int(env_max_depth)
            except ValueError as err:
                raise ConfigurationError(
                    f"{cls.ENV_MAX_DEPTH} must be an integer: {env_max_depth}"
                ) from err

        unknown = set(data) - {"max_depth"}
        if unknown:
            raise ConfigurationError(
                f"Unknown parser configuration keys: {', '.join(sorted(unknown))}"
            )

        logger.debug("Loaded parser configuration from %s", config_root)
        return cls(root=config_root, **data)
