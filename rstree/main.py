"""Rstree.

Usage:
  rstree parse <path>... [--output=<file>] [--max-depth=<n>] [--verbose]
  rstree check <path>... [--max-depth=<n>] [--verbose]

Options:
  -h --help                 Show this screen.
  --output=<file>           The path to which the parsed documents should be written.
  --max-depth=<n>           The maximum nesting depth of sub-documents.
  --verbose                 Log each parsing decision.

Paths may be "-" to read from standard input.

Environment variables:
  RSTREE_PARANOID           0, 1 where 0 is default
  RSTREE_MAX_DEPTH          Overrides max_depth in rstree.toml
  DIAGNOSTICS_FORMAT        JSON, text where text is default
  RSTREE_PERF_SUMMARY       0, 1 where 0 is default

"""

import dataclasses
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO

from docopt import docopt

from . import __version__, n
from .diagnostics import Diagnostic
from .parser import parse_rst
from .types import ConfigurationError, ParserConfig
from .util import PerformanceLogger

PARANOID_MODE = os.environ.get("RSTREE_PARANOID", "0") == "1"
logger = logging.getLogger(__name__)

EXIT_STATUS_ERROR_DIAGNOSTICS = 2


class Backend:
    """Receives the results of parsing each file."""

    def __init__(self, output: Optional[TextIO] = None) -> None:
        self.output = output
        self.total_errors = 0
        self.total_diagnostics = 0
        self.total_files = 0

    def on_diagnostics(self, path: str, diagnostics: List[Diagnostic]) -> None:
        output = os.environ.get("DIAGNOSTICS_FORMAT", "text")
        self.total_diagnostics += len(diagnostics)

        for diagnostic in diagnostics:
            info = diagnostic.serialize()
            info["path"] = path

            if output == "JSON":
                document: Dict[str, object] = {"diagnostic": info}
                print(json.dumps(document), file=sys.stderr)
            else:
                print(
                    "{severity}({path}:{start}ish): {message}".format(**info),
                    file=sys.stderr,
                )

            if diagnostic.severity >= Diagnostic.Level.error:
                self.total_errors += 1

    def on_document(self, path: str, document: n.Document) -> None:
        self.total_files += 1
        if PARANOID_MODE:
            document.verify()

        if self.output is None:
            return

        self.output.write(json.dumps({"filename": path, "ast": document.serialize()}))
        self.output.write("\n")


def read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()

    return Path(path).expanduser().read_text(encoding="utf-8")


def load_config(args: Dict[str, Any]) -> ParserConfig:
    config = ParserConfig.open(Path.cwd())
    max_depth = args["--max-depth"]
    if max_depth is None:
        return config

    try:
        return dataclasses.replace(config, max_depth=int(max_depth))
    except ValueError as err:
        raise ConfigurationError(
            f"--max-depth must be an integer: {max_depth}"
        ) from err


def process(paths: List[str], config: ParserConfig, backend: Backend) -> None:
    for path in paths:
        logger.debug("Parsing %s", path)
        try:
            with PerformanceLogger.singleton().start("read"):
                text = read_source(path)
        except (OSError, UnicodeDecodeError) as err:
            logger.error(f"Could not read {path}: {err}")
            backend.total_errors += 1
            continue

        document, diagnostics = parse_rst(text, config)
        backend.on_document(path, document)
        backend.on_diagnostics(path, diagnostics)


def main() -> None:
    # docopt will terminate here and display usage instructions if rstree is run improperly
    args = docopt(__doc__)

    logging.basicConfig(level=logging.DEBUG if args["--verbose"] else logging.INFO)
    logger.info(f"Rstree {__version__} starting")

    if PARANOID_MODE:
        logger.info("Paranoid mode on")

    try:
        config = load_config(args)
    except ConfigurationError as err:
        logger.error(str(err))
        sys.exit(1)

    output_path = args["--output"]
    output: Optional[TextIO] = None
    if args["parse"]:
        output = (
            open(os.path.expanduser(output_path), "w", encoding="utf-8")
            if output_path
            else sys.stdout
        )

    backend = Backend(output)
    try:
        process(args["<path>"], config, backend)

        if os.environ.get("RSTREE_PERF_SUMMARY", "0") == "1":
            PerformanceLogger.singleton().print(sys.stderr)
    except KeyboardInterrupt:
        pass
    finally:
        if output is not None and output is not sys.stdout:
            output.close()

        print(
            f"{backend.total_diagnostics} diagnostics; {backend.total_files} files",
            file=sys.stderr,
        )

    exit_code = 0
    if backend.total_errors > 0:
        exit_code = EXIT_STATUS_ERROR_DIAGNOSTICS

    sys.exit(exit_code)
