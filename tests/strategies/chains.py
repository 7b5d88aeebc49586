"""Hypothesis strategies for error chain testing.

Provides reusable, event-emitting strategies for generating trace frames,
native chains, foreign exception chains, and formatter configurations.

Event-Emitting Strategies (HypoFuzz-Optimized):
    - chain_frame_kind: TraceFrame location variant (text|location|column)
    - chain_depth: Native chain length bucket (leaf|short|long)
    - chain_traced_levels: Number of levels carrying trace frames (none|some|all)
    - chain_foreign_link: How foreign levels are linked (cause|context|custom)
    - chain_fmt_mode: FormatMode selected for FormatOptions
    - chain_fmt_depth: FormatOptions depth limit (unlimited|limited)
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st

from errorchain import (
    ChainError,
    FormatMode,
    FormatOptions,
    SourceLocation,
    TraceFrame,
    new,
    wrap,
)

# Messages never need to be special: any text renders verbatim.
messages = st.text(max_size=40)

_file_names = st.from_regex(r"[a-z][a-z_]{0,11}(::[a-z_]{1,8}){0,2}\.(rs|py)", fullmatch=True)


@st.composite
def trace_frames(draw: st.DrawFn) -> TraceFrame:
    """Generate TraceFrame instances.

    Events emitted:
    - chain_frame_kind={text|location|column}
    """
    kind = draw(st.sampled_from(["text", "location", "column"]))
    event(f"chain_frame_kind={kind}")
    file = draw(_file_names)
    line = draw(st.integers(min_value=1, max_value=5000))
    match kind:
        case "text":
            return TraceFrame(f"{file}:{line}")
        case "location":
            return TraceFrame(SourceLocation(file, line))
        case _:
            column = draw(st.integers(min_value=1, max_value=200))
            return TraceFrame(SourceLocation(file, line, column))


traces = st.lists(trace_frames(), max_size=4).map(tuple)


@st.composite
def level_specs(
    draw: st.DrawFn, min_levels: int = 1, max_levels: int = 6
) -> list[tuple[str, tuple[TraceFrame, ...]]]:
    """Generate (message, trace) pairs, root first.

    Events emitted:
    - chain_depth={leaf|short|long}
    - chain_traced_levels={none|some|all}
    """
    specs = draw(
        st.lists(st.tuples(messages, traces), min_size=min_levels, max_size=max_levels)
    )
    if len(specs) == 1:
        event("chain_depth=leaf")
    elif len(specs) <= 3:
        event("chain_depth=short")
    else:
        event("chain_depth=long")
    traced = sum(1 for _, trace in specs if trace)
    if traced == 0:
        event("chain_traced_levels=none")
    elif traced == len(specs):
        event("chain_traced_levels=all")
    else:
        event("chain_traced_levels=some")
    return specs


def build_chain(specs: list[tuple[str, tuple[TraceFrame, ...]]]) -> ChainError:
    """Build a native chain from root-first (message, trace) pairs."""
    innermost_message, innermost_trace = specs[-1]
    error = new(innermost_message, trace=innermost_trace)
    for message, trace in reversed(specs[:-1]):
        error = wrap(message, error, trace=trace)
    return error


@st.composite
def native_chains(
    draw: st.DrawFn, min_levels: int = 1, max_levels: int = 6
) -> tuple[ChainError, list[tuple[str, tuple[TraceFrame, ...]]]]:
    """Generate a native chain together with the specs it was built from."""
    specs = draw(level_specs(min_levels=min_levels, max_levels=max_levels))
    return build_chain(specs), specs


class LinkedError(Exception):
    """Foreign error exposing the message/source capability explicitly."""

    def __init__(self, message: str, source: object | None = None) -> None:
        super().__init__(message)
        self._message = message
        self._source = source

    def message(self) -> str:
        return self._message

    def source(self) -> object | None:
        return self._source


@st.composite
def foreign_chains(
    draw: st.DrawFn, max_levels: int = 5
) -> tuple[BaseException, list[str]]:
    """Generate a foreign exception chain and its messages, root first.

    Events emitted:
    - chain_foreign_link={cause|context|custom}
    """
    level_messages = draw(
        st.lists(st.text(min_size=1, max_size=30), min_size=1, max_size=max_levels)
    )
    link = draw(st.sampled_from(["cause", "context", "custom"]))
    event(f"chain_foreign_link={link}")

    error: BaseException | None = None
    for message in reversed(level_messages):
        match link:
            case "custom":
                error = LinkedError(message, error)
            case "cause":
                outer = RuntimeError(message)
                outer.__cause__ = error
                error = outer
            case _:
                outer = ValueError(message)
                outer.__context__ = error
                error = outer
    assert error is not None
    return error, level_messages


@st.composite
def format_options(draw: st.DrawFn) -> FormatOptions:
    """Generate valid FormatOptions.

    Events emitted:
    - chain_fmt_mode={top_only|chain|with_trace|chain_with_trace}
    - chain_fmt_depth={unlimited|limited}
    """
    mode = draw(st.sampled_from(list(FormatMode)))
    event(f"chain_fmt_mode={mode.value}")
    max_depth = None
    if mode.follows_sources:
        max_depth = draw(st.none() | st.integers(min_value=1, max_value=8))
    event(f"chain_fmt_depth={'unlimited' if max_depth is None else 'limited'}")
    return FormatOptions(mode=mode, max_depth=max_depth)
