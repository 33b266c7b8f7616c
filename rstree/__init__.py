"""A block-level reStructuredText parser producing a typed document tree."""

from .parser import parse, parse_rst

__version__ = "0.3.1"
__all__ = ("__version__", "parse", "parse_rst")
