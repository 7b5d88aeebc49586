"""Hypothesis strategies for errorchain property-based testing.

Usage:
    from tests.strategies import native_chains, foreign_chains
    from tests.strategies.chains import build_chain, trace_frames
"""

from .chains import (
    LinkedError,
    build_chain,
    foreign_chains,
    format_options,
    level_specs,
    messages,
    native_chains,
    trace_frames,
    traces,
)

__all__ = [
    "LinkedError",
    "build_chain",
    "foreign_chains",
    "format_options",
    "level_specs",
    "messages",
    "native_chains",
    "trace_frames",
    "traces",
]
