"""Entry points for creating error values.

- new: a leaf error with a message
- wrap: a message on top of an existing cause
- opaque: a message-only copy of any error chain

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from errorchain.core.chain import iter_chain
from errorchain.core.error import ChainError, OpaqueError
from errorchain.core.trace import TraceLike

__all__ = [
    "new",
    "opaque",
    "wrap",
]

logger = logging.getLogger(__name__)


def new(
    message: object,
    *,
    trace: Iterable[TraceLike] | TraceLike | None = (),
) -> ChainError:
    """Create a leaf error value.

    Example:
        >>> err = new("sound the alarm")
        >>> str(err)
        'sound the alarm'
    """
    return ChainError(message, trace=trace)


def wrap(
    message: object,
    source: object,
    *,
    trace: Iterable[TraceLike] | TraceLike | None = (),
) -> ChainError:
    """Wrap an error with an additional message.

    The new value holds ``source`` as its cause. A plain string source is
    promoted to a leaf error first, so ``wrap("exploded", "cat hair in
    generator")`` builds a two-level chain. Foreign errors are kept as-is
    and adapted when the chain is traversed.

    Raises:
        TypeError: If source is None (use new() for a leaf error)

    Example:
        >>> err = wrap("exploded", "cat hair in generator")
        >>> str(err)
        'exploded'
        >>> str(err.source)
        'cat hair in generator'
    """
    if source is None:
        msg = "wrap() requires a source error; use new() for a leaf error"
        raise TypeError(msg)
    if isinstance(source, str):
        source = new(source)
    return ChainError(message, source, trace=trace)


def opaque(foreign: object) -> OpaqueError:
    """Absorb an error chain while hiding its concrete types.

    Every level of the chain is copied into an OpaqueError carrying the
    level's message and trace frames. The result still formats and iterates
    with the original depth, but no level references the original objects,
    so callers cannot match on them.

    An OpaqueError is returned unchanged; a plain string becomes a single
    opaque level.

    Raises:
        CyclicChainError: If the foreign chain is cyclic
        ChainDepthExceededError: If the foreign chain is too deep

    Example:
        >>> err = opaque(wrap("request failed", "timeout"))
        >>> f"{err:+}"
        'request failed: timeout'
        >>> type(err.source).__name__
        'OpaqueError'
    """
    if isinstance(foreign, OpaqueError):
        return foreign
    levels = list(iter_chain(foreign))
    logger.debug("Opacifying %s chain of %d level(s)", type(foreign).__name__, len(levels))
    node: OpaqueError | None = None
    for level in reversed(levels):
        node = OpaqueError(level.message, node, trace=level.trace)
    # iter_chain yields at least one level, so node is set
    return node  # type: ignore[return-value]
