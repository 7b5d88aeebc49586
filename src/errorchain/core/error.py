"""Immutable error values with an optional source and trace frames.

ChainError is the native error value: a message, an optional source it
holds exclusively, and an ordered tuple of trace frames. It subclasses
Exception so it can be raised, but it is designed as data: every field is
fixed at construction and formatting never mutates it.

OpaqueError is the variant produced by ``errorchain.opaque()``. It keeps a
foreign chain's depth, messages and frames while dropping every reference
to the foreign objects themselves.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum
from typing import final

from errorchain.core.trace import TraceFrame, TraceLike, coerce_trace
from errorchain.integrity import FrozenException

__all__ = [
    "ChainError",
    "ErrorKind",
    "OpaqueError",
]


class ErrorKind(StrEnum):
    """Structural classification of an error value.

    Categories:
        LEAF: No source
        WRAPPED: Holds a source it exclusively owns
        OPAQUE: Message-only copy of a foreign chain
    """

    LEAF = "leaf"
    WRAPPED = "wrapped"
    OPAQUE = "opaque"


class ChainError(FrozenException):
    """Native error value.

    Construct through ``errorchain.new()`` and ``errorchain.wrap()`` or
    directly. Subclasses may add fields; they must assign them before
    calling ``super().__init__()``, which freezes the instance.

    Attributes:
        message: Human-readable message for this level only
        source: The error this one wraps, or None
        trace: Trace frames for this level, innermost call site first
        kind: LEAF, WRAPPED, or OPAQUE

    Example:
        >>> err = ChainError("ship exploded", ChainError("cat hair in generator"))
        >>> str(err)
        'ship exploded'
        >>> f"{err:+}"
        'ship exploded: cat hair in generator'
    """

    __slots__ = ("_hash", "_message", "_source", "_trace")

    _message: str
    _source: object | None
    _trace: tuple[TraceFrame, ...]
    _hash: int

    _frozen_label = "error value"
    _frozen_component = "error"

    def __init__(
        self,
        message: object,
        source: object | None = None,
        *,
        trace: Iterable[TraceLike] | TraceLike | None = (),
    ) -> None:
        """Initialize ChainError.

        Args:
            message: Message for this level; non-strings are converted with str()
            source: Error being wrapped, native or foreign (optional)
            trace: Trace frames or frame shorthands (optional)
        """
        text = message if isinstance(message, str) else str(message)
        super().__init__(text)
        _init_fields(self, text, source, coerce_trace(trace))

    @property
    def message(self) -> str:
        """Message for this level, without any source."""
        return self._message

    @property
    def source(self) -> object | None:
        """Wrapped error, or None for a leaf."""
        return self._source

    @property
    def trace(self) -> tuple[TraceFrame, ...]:
        """Trace frames for this level."""
        return self._trace

    @property
    def kind(self) -> ErrorKind:
        """Structural classification of this level."""
        return ErrorKind.LEAF if self._source is None else ErrorKind.WRAPPED

    def with_trace(self, *frames: TraceLike) -> ChainError:
        """Return a copy of this error whose trace is replaced by ``frames``.

        The copy has the same class, message, and source. Calling with no
        frames returns a copy without a trace. Fields added by subclasses
        are not copied.
        """
        return _restore(type(self), self._message, self._source, coerce_trace(frames))

    def __str__(self) -> str:
        return self._message

    def __format__(self, format_spec: str) -> str:
        """Render through FormatOptions.from_format_spec().

        ``""`` top only, ``"+"`` chain, ``"#"`` with trace, ``"+#"`` chain
        with trace, ``".N"`` limits chain modes to N sources.
        """
        from errorchain.formatting import ChainFormatter, FormatOptions  # noqa: PLC0415

        return ChainFormatter(FormatOptions.from_format_spec(format_spec)).format(self)

    def __eq__(self, other: object) -> bool:
        """Compare kind, message, trace, and source level by level.

        Foreign sources compare by identity.
        """
        if not isinstance(other, ChainError):
            return NotImplemented
        left: object = self
        right: object = other
        while left is not right:
            if not (isinstance(left, ChainError) and isinstance(right, ChainError)):
                return False
            if (
                left.kind is not right.kind
                or left._message != right._message
                or left._trace != right._trace
            ):
                return False
            left, right = left._source, right._source
        return True

    def __hash__(self) -> int:
        return self._hash

    def __reduce__(self) -> tuple[object, ...]:
        return (_restore, (type(self), self._message, self._source, self._trace))

    def __repr__(self) -> str:
        """Return debug representation of the whole chain.

        Built iteratively so deep chains do not exhaust the recursion limit.
        """
        levels: list[ChainError] = []
        tail: object | None = self
        while isinstance(tail, ChainError):
            levels.append(tail)
            tail = tail._source
        text = "" if tail is None else repr(tail)
        for level in reversed(levels):
            parts = [repr(level._message)]
            if text:
                parts.append(f"source={text}")
            if level._trace:
                parts.append(f"trace={tuple(str(frame) for frame in level._trace)!r}")
            text = f"{level.__class__.__name__}({', '.join(parts)})"
        return text


@final
class OpaqueError(ChainError):
    """Message-only copy of a foreign error chain.

    Every level below an OpaqueError is another OpaqueError. No level keeps
    a reference to the object it was copied from, so consumers can read
    messages and trace frames and walk the levels, but cannot recover or
    match on the original error types.
    """

    __slots__ = ()

    def __init__(
        self,
        message: object,
        source: OpaqueError | None = None,
        *,
        trace: Iterable[TraceLike] | TraceLike | None = (),
    ) -> None:
        """Initialize OpaqueError.

        Args:
            message: Message for this level
            source: Next opaque level (optional)
            trace: Trace frames for this level (optional)

        Raises:
            TypeError: If source is neither None nor an OpaqueError
        """
        if source is not None and not isinstance(source, OpaqueError):
            msg = (
                "OpaqueError source must be another OpaqueError; "
                f"use errorchain.opaque() to absorb {type(source).__name__}"
            )
            raise TypeError(msg)
        super().__init__(message, source, trace=trace)

    @property
    def source(self) -> OpaqueError | None:
        """Next opaque level, or None."""
        return self._source  # type: ignore[return-value]

    @property
    def kind(self) -> ErrorKind:
        """Always OPAQUE."""
        return ErrorKind.OPAQUE


def _init_fields(
    error: ChainError,
    message: str,
    source: object | None,
    trace: tuple[TraceFrame, ...],
) -> None:
    """Assign the frozen fields of a freshly created ChainError."""
    object.__setattr__(error, "_message", message)
    object.__setattr__(error, "_source", source)
    object.__setattr__(error, "_trace", trace)
    source_key = hash(source) if isinstance(source, ChainError) else id(source)
    object.__setattr__(error, "_hash", hash((error.kind, message, trace, source_key)))
    if isinstance(source, BaseException):
        object.__setattr__(error, "__cause__", source)
    error._freeze()  # noqa: SLF001


def _restore(
    cls: type[ChainError],
    message: str,
    source: object | None,
    trace: tuple[TraceFrame, ...],
) -> ChainError:
    """Rebuild an error of class ``cls`` without calling its ``__init__``.

    Used by with_trace() and pickling so subclasses with their own
    constructor signatures copy correctly.
    """
    error = cls.__new__(cls, message)
    _init_fields(error, message, source, trace)
    return error
