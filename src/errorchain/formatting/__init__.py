"""Formatting engine for error chains.

Python 3.13+. Zero external dependencies.
"""

from .formatter import ChainFormatter, TextSink, format_error, write_error
from .options import FormatMode, FormatOptions

__all__ = [
    "ChainFormatter",
    "FormatMode",
    "FormatOptions",
    "TextSink",
    "format_error",
    "write_error",
]
