"""Trace frames: caller-supplied provenance records.

A trace frame names one place an error passed through, e.g. ``ship.rs:89``.
Frames are plain data. errorchain never captures them from the running
interpreter; callers attach whatever locations they find useful.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeIs

__all__ = [
    "SourceLocation",
    "TraceFrame",
    "TraceLike",
    "coerce_trace",
]


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Structured file and line descriptor.

    Attributes:
        file: File name or path as the caller wants it shown
        line: Line number (1-indexed)
        column: Column number (1-indexed, optional)
    """

    file: str
    line: int
    column: int | None = None

    def __post_init__(self) -> None:
        """Validate SourceLocation invariants.

        Raises:
            ValueError: If line is less than 1 or column is less than 1
        """
        if self.line < 1:
            msg = f"SourceLocation.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column is not None and self.column < 1:
            msg = f"SourceLocation.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)

    def __str__(self) -> str:
        if self.column is None:
            return f"{self.file}:{self.line}"
        return f"{self.file}:{self.line}:{self.column}"


@dataclass(frozen=True, slots=True)
class TraceFrame:
    """One provenance entry attached to a level of an error chain.

    Attributes:
        location: Free-form location string or structured SourceLocation

    Example:
        >>> str(TraceFrame("ship.rs:89"))
        'ship.rs:89'
        >>> str(TraceFrame(SourceLocation("engine.rs", 789)))
        'engine.rs:789'
    """

    location: str | SourceLocation

    def __post_init__(self) -> None:
        """Reject locations that are neither strings nor SourceLocations.

        Raises:
            TypeError: If location has an unsupported type
        """
        if not isinstance(self.location, str | SourceLocation):
            msg = (
                "TraceFrame.location must be str or SourceLocation, "
                f"got {type(self.location).__name__}"
            )
            raise TypeError(msg)

    def __str__(self) -> str:
        return str(self.location)

    @classmethod
    def coerce(cls, value: TraceLike) -> TraceFrame:
        """Build a TraceFrame from any accepted shorthand.

        Accepts an existing TraceFrame, a SourceLocation, a location string,
        or a ``(file, line)`` / ``(file, line, column)`` tuple.

        Raises:
            TypeError: If value is none of the accepted shapes
        """
        if isinstance(value, TraceFrame):
            return value
        if isinstance(value, str | SourceLocation):
            return cls(value)
        if isinstance(value, tuple) and len(value) in (2, 3):
            return cls(SourceLocation(*value))
        msg = f"Cannot build a trace frame from {type(value).__name__}: {value!r}"
        raise TypeError(msg)


type TraceLike = TraceFrame | SourceLocation | str | tuple[str, int] | tuple[str, int, int]


def coerce_trace(
    frames: Iterable[TraceLike] | TraceLike | None,
) -> tuple[TraceFrame, ...]:
    """Normalize caller-supplied frames into an immutable tuple.

    A single string, TraceFrame, SourceLocation, or ``(file, line)`` /
    ``(file, line, column)`` tuple counts as one frame rather than being
    iterated. ``None`` and empty iterables yield ``()``.

    Example:
        >>> coerce_trace(("ship.rs", 89))
        (TraceFrame(location=SourceLocation(file='ship.rs', line=89, column=None)),)
        >>> [str(frame) for frame in coerce_trace(["main.rs:55", ("ship.rs", 89)])]
        ['main.rs:55', 'ship.rs:89']
    """
    if frames is None:
        return ()
    if isinstance(frames, str | TraceFrame | SourceLocation) or _is_location_tuple(frames):
        return (TraceFrame.coerce(frames),)
    return tuple(TraceFrame.coerce(frame) for frame in frames)


def _is_location_tuple(value: object) -> TypeIs[tuple[str, int] | tuple[str, int, int]]:
    """True for ``(str, int)`` and ``(str, int, int)`` tuples."""
    if not isinstance(value, tuple) or len(value) not in (2, 3):
        return False
    file, *numbers = value
    return isinstance(file, str) and all(
        isinstance(number, int) and not isinstance(number, bool) for number in numbers
    )
