"""Iterating error source chains.

- iter_chain: the whole chain, starting with the error itself
- sources: the chain without the error itself
- root_cause: the last level of the chain

All three accept native and foreign errors and are lazy: levels are adapted
one at a time as the caller advances.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator
from itertools import islice

from errorchain.constants import MAX_CHAIN_DEPTH
from errorchain.core.foreign import ErrorLike, ForeignErrorView, adapt, identity_key
from errorchain.integrity import (
    ChainDepthExceededError,
    CyclicChainError,
    IntegrityContext,
)

__all__ = [
    "iter_chain",
    "root_cause",
    "sources",
]

logger = logging.getLogger(__name__)


def iter_chain(error: object, *, max_depth: int = MAX_CHAIN_DEPTH) -> Iterator[ErrorLike]:
    """Iterate over the whole chain of errors, including ``error`` first.

    Each call returns a fresh iterator; the error is only read.

    Native levels never count toward ``max_depth``: a ChainError's source
    is fixed at construction, so a run of native levels always ends. Only
    foreign levels, whose links may point anywhere, are counted.

    Args:
        error: Native or foreign error
        max_depth: Number of foreign levels after which traversal fails

    Raises:
        ValueError: If max_depth is less than 1 (raised immediately)
        CyclicChainError: When the chain revisits a level
        ChainDepthExceededError: When the chain has more than max_depth
            foreign levels

    The last two are raised lazily, after the earlier levels have been
    yielded.

    Example:
        >>> err = wrap("c", wrap("b", "a"))
        >>> [level.message for level in iter_chain(err)]
        ['c', 'b', 'a']
    """
    if max_depth < 1:
        msg = f"max_depth must be >= 1, got {max_depth}"
        raise ValueError(msg)
    return _walk(error, max_depth)


def _walk(error: object, max_depth: int) -> Iterator[ErrorLike]:
    seen: set[int] = set()
    current: ErrorLike | None = adapt(error)
    depth = 0
    foreign_depth = 0
    while current is not None:
        depth += 1
        if isinstance(current, ForeignErrorView):
            foreign_depth += 1
            if foreign_depth > max_depth:
                logger.warning(
                    "Error chain exceeds %d foreign levels, stopping traversal", max_depth
                )
                msg = f"Error chain exceeds maximum depth of {max_depth} foreign levels"
                raise ChainDepthExceededError(
                    msg, IntegrityContext(component="chain", operation="iterate", depth=depth)
                )
        key = identity_key(current)
        if key in seen:
            logger.warning(
                "Error chain revisits %r at level %d", current.message, depth
            )
            msg = f"Error chain is cyclic: level {depth} repeats an earlier level"
            raise CyclicChainError(
                msg, IntegrityContext(component="chain", operation="iterate", depth=depth)
            )
        seen.add(key)
        yield current
        source = current.source
        current = None if source is None else adapt(source)


def sources(error: object) -> Iterator[ErrorLike]:
    """Iterate over the source chain of ``error``, skipping ``error`` itself.

    Equivalent to ``islice(iter_chain(error), 1, None)``.

    Example:
        >>> err = wrap("c", wrap("b", "a"))
        >>> [level.message for level in sources(err)]
        ['b', 'a']
    """
    return islice(iter_chain(error), 1, None)


def root_cause(error: object) -> ErrorLike:
    """Return the last level of the chain.

    If the error has no source, returns the (adapted) error itself.

    Example:
        >>> root_cause(wrap("c", wrap("b", "a"))).message
        'a'
        >>> root_cause(new("ninja cat")).message
        'ninja cat'
    """
    # iter_chain always yields at least one level
    return deque(iter_chain(error), maxlen=1)[0]
