"""Formatting configuration.

FormatOptions is the whole configuration surface of the formatter: a mode
and an optional depth limit. Python's ``format()`` specs are translated into
it at the boundary by FormatOptions.from_format_spec().

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

__all__ = [
    "FormatMode",
    "FormatOptions",
]


class FormatMode(StrEnum):
    """What the formatter renders.

    Modes:
        TOP_ONLY: Root message only (default)
        CHAIN: Every message in the chain joined by ": "
        WITH_TRACE: Root message and the root's trace frames
        CHAIN_WITH_TRACE: Every level with its frames, joined by "Caused by:"
    """

    TOP_ONLY = "top_only"
    CHAIN = "chain"
    WITH_TRACE = "with_trace"
    CHAIN_WITH_TRACE = "chain_with_trace"

    @property
    def follows_sources(self) -> bool:
        """True for modes that render levels beyond the root."""
        return self in (FormatMode.CHAIN, FormatMode.CHAIN_WITH_TRACE)


# [+][#][.precision], each part optional, in this order.
_FORMAT_SPEC_PATTERN = re.compile(r"(?P<chain>\+)?(?P<trace>#)?(?:\.(?P<precision>\d+))?")


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Immutable formatter configuration.

    Attributes:
        mode: What to render (default: TOP_ONLY)
        max_depth: Maximum number of chain levels rendered, root included
            (default: None, unlimited). Only valid with CHAIN and
            CHAIN_WITH_TRACE. Levels beyond the limit are omitted silently.

    Example:
        >>> options = FormatOptions(FormatMode.CHAIN, max_depth=2)
        >>> options.max_depth
        2
        >>> FormatOptions("chain_with_trace").mode
        <FormatMode.CHAIN_WITH_TRACE: 'chain_with_trace'>
    """

    mode: FormatMode = FormatMode.TOP_ONLY
    max_depth: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If mode is unknown, max_depth is less than 1, or
                max_depth is combined with a mode that renders only the root.
            TypeError: If max_depth is not an integer.
        """
        try:
            mode = FormatMode(self.mode)
        except ValueError:
            valid = ", ".join(repr(member.value) for member in FormatMode)
            msg = f"Unknown format mode {self.mode!r}; expected one of {valid}"
            raise ValueError(msg) from None
        object.__setattr__(self, "mode", mode)

        if self.max_depth is None:
            return
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            msg = f"max_depth must be an int or None, got {type(self.max_depth).__name__}"
            raise TypeError(msg)
        if self.max_depth < 1:
            msg = f"max_depth must be >= 1 (the root counts as depth 1), got {self.max_depth}"
            raise ValueError(msg)
        if not mode.follows_sources:
            msg = f"max_depth is only valid with chain modes, got mode {mode.value!r}"
            raise ValueError(msg)

    @classmethod
    def from_format_spec(cls, format_spec: str) -> FormatOptions:
        """Translate a ``format()`` spec into options.

        ``"+"`` selects the chain, ``"#"`` adds trace frames, and ``".N"``
        limits chain modes to N sources after the root. Precision without
        ``"+"`` is accepted and has no effect, since only the root is shown.

        Raises:
            ValueError: If the spec has any other shape

        Example:
            >>> FormatOptions.from_format_spec("+.1")
            FormatOptions(mode=<FormatMode.CHAIN: 'chain'>, max_depth=2)
        """
        parsed = _FORMAT_SPEC_PATTERN.fullmatch(format_spec)
        if parsed is None:
            msg = f"Invalid format specifier {format_spec!r} for error value"
            raise ValueError(msg)

        chain = parsed["chain"] is not None
        trace = parsed["trace"] is not None
        match (chain, trace):
            case (False, False):
                mode = FormatMode.TOP_ONLY
            case (True, False):
                mode = FormatMode.CHAIN
            case (False, True):
                mode = FormatMode.WITH_TRACE
            case _:
                mode = FormatMode.CHAIN_WITH_TRACE

        precision = parsed["precision"]
        max_depth = int(precision) + 1 if chain and precision is not None else None
        return cls(mode=mode, max_depth=max_depth)
