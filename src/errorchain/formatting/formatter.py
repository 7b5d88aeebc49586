"""Error chain formatting service.

Renders an error value, native or foreign, under a FormatOptions
configuration. Output is produced as a stream of fragments so it can be
collected into a string or written straight to a text stream.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import islice
from typing import Protocol

from errorchain.constants import (
    CAUSED_BY_PREFIX,
    CHAIN_SEPARATOR,
    FORMAT_ALL_SEPARATOR,
    TRACE_LINE_PREFIX,
)
from errorchain.core.chain import iter_chain
from errorchain.core.foreign import ErrorLike, adapt

from .options import FormatMode, FormatOptions

__all__ = [
    "ChainFormatter",
    "TextSink",
    "format_error",
    "write_error",
]


class TextSink(Protocol):
    """Anything with a ``write(str)`` method, e.g. ``sys.stderr`` or ``io.StringIO``."""

    def write(self, text: str, /) -> object:
        """Write one fragment of text."""


@dataclass(frozen=True, slots=True)
class ChainFormatter:
    """Error chain formatting service.

    Stateless apart from its options; one instance may be shared freely.

    Attributes:
        options: Mode and optional depth limit

    Example:
        >>> err = wrap("ship exploded", new("cat hair in generator"))
        >>> ChainFormatter().format(err)
        'ship exploded'
        >>> ChainFormatter(FormatOptions(FormatMode.CHAIN)).format(err)
        'ship exploded: cat hair in generator'
        >>> err = wrap(
        ...     "ship exploded",
        ...     new("cat hair in generator", trace=["generator.rs:33"]),
        ...     trace=["ship.rs:89"],
        ... )
        >>> print(ChainFormatter(FormatOptions(FormatMode.CHAIN_WITH_TRACE)).format(err))
        ship exploded
            at ship.rs:89
        Caused by: cat hair in generator
            at generator.rs:33
    """

    options: FormatOptions = field(default_factory=FormatOptions)

    def format(self, error: object) -> str:
        """Format a single error.

        Args:
            error: Native ChainError or any foreign error

        Returns:
            Rendered string
        """
        return "".join(self._render(error))

    def format_all(self, errors: Iterable[object]) -> str:
        """Format multiple errors separated by blank lines."""
        return FORMAT_ALL_SEPARATOR.join(self.format(error) for error in errors)

    def write(self, error: object, stream: TextSink) -> None:
        """Write the rendering of ``error`` to ``stream`` fragment by fragment.

        Exceptions raised by ``stream.write`` propagate unchanged and stop
        rendering; fragments already written are not rolled back.
        """
        for fragment in self._render(error):
            stream.write(fragment)

    def _levels(self, error: object) -> Iterator[ErrorLike]:
        """Chain levels limited to max_depth; levels past it are never visited."""
        levels = iter_chain(error)
        if self.options.max_depth is None:
            return levels
        return islice(levels, self.options.max_depth)

    def _render(self, error: object) -> Iterator[str]:
        match self.options.mode:
            case FormatMode.TOP_ONLY:
                yield adapt(error).message
            case FormatMode.CHAIN:
                for index, level in enumerate(self._levels(error)):
                    if index:
                        yield CHAIN_SEPARATOR
                    yield level.message
            case FormatMode.WITH_TRACE:
                level = adapt(error)
                yield level.message
                yield from _trace_lines(level)
            case FormatMode.CHAIN_WITH_TRACE:
                for index, level in enumerate(self._levels(error)):
                    if index:
                        yield CAUSED_BY_PREFIX
                    yield level.message
                    yield from _trace_lines(level)


def _trace_lines(level: ErrorLike) -> Iterator[str]:
    for frame in level.trace:
        yield TRACE_LINE_PREFIX
        yield str(frame)


def format_error(error: object, options: FormatOptions | None = None) -> str:
    """Format ``error`` with ``options`` (default: top message only).

    Example:
        >>> format_error(wrap("b", "a"), FormatOptions(FormatMode.CHAIN))
        'b: a'
    """
    return ChainFormatter(FormatOptions() if options is None else options).format(error)


def write_error(
    error: object,
    stream: TextSink,
    options: FormatOptions | None = None,
) -> None:
    """Write ``error`` to ``stream`` with ``options`` (default: top message only)."""
    ChainFormatter(FormatOptions() if options is None else options).write(error, stream)
