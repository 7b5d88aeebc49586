"""Shared constants for errorchain.

Centralizes the rendering literals and traversal limits used by the core
and formatting packages. Placing them here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Traversal limits: protection against cyclic or runaway source chains
- Rendering literals: separators and prefixes emitted by the formatter

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Traversal limits
    "MAX_CHAIN_DEPTH",
    # Rendering literals
    "CHAIN_SEPARATOR",
    "CAUSED_BY_PREFIX",
    "TRACE_LINE_PREFIX",
    "FORMAT_ALL_SEPARATOR",
]

# ============================================================================
# TRAVERSAL LIMITS
# ============================================================================
#
# Native chains cannot be cyclic: a ChainError receives its source at
# construction and never changes it. Foreign chains can be. Python lets
# callers assign __cause__ freely, and third-party error types may expose a
# source() that points anywhere. The chain iterator therefore tracks visited
# objects and also stops after a fixed number of foreign levels. Native
# levels are never counted, so a native chain of any length iterates fully.
#
# Traversal is iterative, so the limit is not tied to sys.getrecursionlimit().
# 1000 foreign levels is far beyond any legitimate wrapping depth.
#
# ============================================================================

MAX_CHAIN_DEPTH: int = 1000

# ============================================================================
# RENDERING LITERALS
# ============================================================================

# Joins messages in chain mode: "ship exploded: cat hair in generator"
CHAIN_SEPARATOR: str = ": "

# Starts every level after the root in chain-with-trace mode.
CAUSED_BY_PREFIX: str = "\nCaused by: "

# Starts every trace frame line: "ship exploded\n    at ship.rs:89"
TRACE_LINE_PREFIX: str = "\n    at "

# Separates independent errors in ChainFormatter.format_all().
FORMAT_ALL_SEPARATOR: str = "\n\n"
