"""Adapter that lets foreign errors take part in traversal and formatting.

Any value that can report a message participates. The capability is checked
structurally, never by base class:

- message: a ``message`` attribute (called when callable), else ``str(value)``
- source: a ``source`` attribute (called when callable) that resolves to an
  error-like value, else for exceptions ``__cause__``, or ``__context__``
  unless ``__suppress_context__`` is set

Adaptation wraps the value in a thin ForeignErrorView; it never copies the
foreign chain and never converts it into native ChainError values.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from typing import Protocol, final, runtime_checkable

from errorchain.core.error import ChainError
from errorchain.core.trace import TraceFrame

__all__ = [
    "ErrorLike",
    "ForeignErrorView",
    "adapt",
    "identity_key",
]

logger = logging.getLogger(__name__)

_MISSING = object()


@runtime_checkable
class ErrorLike(Protocol):
    """Uniform read-only view of one level of an error chain.

    ChainError, OpaqueError, and ForeignErrorView all satisfy this protocol.
    The chain iterator and the formatter only ever read these three
    properties.
    """

    @property
    def message(self) -> str:
        """Message for this level only."""

    @property
    def source(self) -> object | None:
        """Next level of the chain (native or foreign), or None."""

    @property
    def trace(self) -> tuple[TraceFrame, ...]:
        """Trace frames for this level."""


@final
class ForeignErrorView:
    """Read-only projection of a foreign error.

    The adapted value is held privately and is not exposed by any public
    attribute. Foreign errors never carry trace frames.

    Example:
        >>> try:
        ...     try:
        ...         {}["engine"]
        ...     except KeyError as exc:
        ...         raise RuntimeError("ship exploded") from exc
        ... except RuntimeError as exc:
        ...     view = adapt(exc)
        >>> view.message
        'ship exploded'
        >>> view.source.message
        "'engine'"
    """

    __slots__ = ("_value",)

    def __init__(self, value: object) -> None:
        self._value = value

    @property
    def message(self) -> str:
        """Message reported by the foreign value."""
        return _foreign_message(self._value)

    @property
    def source(self) -> ErrorLike | None:
        """Adapted next level, or None."""
        raw = _foreign_source(self._value)
        if raw is None:
            return None
        return adapt(raw)

    @property
    def trace(self) -> tuple[TraceFrame, ...]:
        """Always empty."""
        return ()

    def __str__(self) -> str:
        return self.message

    def __format__(self, format_spec: str) -> str:
        """Render through FormatOptions.from_format_spec(), as ChainError does."""
        from errorchain.formatting import ChainFormatter, FormatOptions  # noqa: PLC0415

        return ChainFormatter(FormatOptions.from_format_spec(format_spec)).format(self)

    def __repr__(self) -> str:
        return f"ForeignErrorView({self.message!r})"


def adapt(value: object) -> ErrorLike:
    """Return the uniform view of ``value``.

    Native values (ChainError and its subclasses) and existing views are
    returned unchanged. Everything else is wrapped in a ForeignErrorView.

    Example:
        >>> adapt(ValueError("bad input")).message
        'bad input'
    """
    if isinstance(value, ChainError | ForeignErrorView):
        return value
    return ForeignErrorView(value)


def identity_key(level: ErrorLike) -> int:
    """Identity of the object behind a chain level.

    Views are created fresh on every traversal step, so cycle detection
    must key on the adapted object rather than on the view.
    """
    if isinstance(level, ForeignErrorView):
        return id(level._value)  # noqa: SLF001
    return id(level)


def _foreign_message(value: object) -> str:
    """Extract the message of a foreign value."""
    attr = getattr(value, "message", _MISSING)
    if attr is _MISSING or attr is None:
        logger.debug(
            "%s has no message attribute, using str()", type(value).__name__
        )
        return str(value)
    if callable(attr):
        attr = attr()
    return attr if isinstance(attr, str) else str(attr)


def _foreign_source(value: object) -> object | None:
    """Extract the raw next level of a foreign value.

    A ``source`` attribute is honoured only when it resolves to something
    error-like; stdlib errors such as configparser's use ``source`` for a
    file name, which falls through to Python's own exception chaining.
    """
    attr = getattr(value, "source", _MISSING)
    if attr is not _MISSING:
        resolved = attr() if callable(attr) else attr
        if _is_error_like(resolved):
            return resolved
        logger.debug(
            "%s.source is %s, not an error; using exception chaining",
            type(value).__name__,
            type(resolved).__name__,
        )
    if isinstance(value, BaseException):
        if value.__cause__ is not None:
            return value.__cause__
        if value.__suppress_context__:
            return None
        return value.__context__
    return None


def _is_error_like(value: object) -> bool:
    if value is None or isinstance(value, BaseException | ChainError | ForeignErrorView):
        return True
    return hasattr(value, "message")
