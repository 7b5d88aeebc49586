"""Tests for core/chain.py: iter_chain, sources, root_cause.

Covers ordering, laziness, restartability, foreign and mixed chains, and
protection against cyclic and runaway chains.

Python 3.13+.
"""

from __future__ import annotations

import logging

import pytest
from hypothesis import event, given

from errorchain import (
    ChainDepthExceededError,
    ChainError,
    CyclicChainError,
    FormatMode,
    FormatOptions,
    TraceFrame,
    format_error,
    iter_chain,
    new,
    opaque,
    root_cause,
    sources,
    wrap,
)
from errorchain.constants import MAX_CHAIN_DEPTH
from tests.strategies import LinkedError, foreign_chains, native_chains


class TestIterChain:
    """Tests for iter_chain ordering and laziness."""

    def test_yields_root_then_sources(self) -> None:
        """The error itself comes first, then each source."""
        err = wrap("c", wrap("b", "a"))
        assert [level.message for level in iter_chain(err)] == ["c", "b", "a"]

    def test_leaf_yields_itself(self) -> None:
        """A leaf chain has exactly one level."""
        err = new("ninja cat")
        assert list(iter_chain(err)) == [err]

    def test_native_levels_are_the_values_themselves(self) -> None:
        """No views are created for native levels."""
        inner = new("a")
        outer = wrap("b", inner)
        levels = list(iter_chain(outer))
        assert levels[0] is outer
        assert levels[1] is inner

    @given(chain=native_chains())
    def test_yields_exactly_n_levels(
        self, chain: tuple[ChainError, list[tuple[str, tuple[TraceFrame, ...]]]]
    ) -> None:
        """A chain built from N levels iterates N levels, root first."""
        error, specs = chain
        event(f"levels={len(specs)}")
        levels = list(iter_chain(error))
        assert len(levels) == len(specs)
        assert [(level.message, level.trace) for level in levels] == specs

    @given(chain=native_chains())
    def test_restartable(
        self, chain: tuple[ChainError, list[tuple[str, tuple[TraceFrame, ...]]]]
    ) -> None:
        """Iterating twice yields equivalent sequences."""
        error, _ = chain
        assert list(iter_chain(error)) == list(iter_chain(error))

    def test_is_lazy(self) -> None:
        """Levels are adapted only as the iterator advances."""
        calls: list[str] = []

        class Counting(Exception):
            def __init__(self, name: str, source: object | None) -> None:
                super().__init__(name)
                self._source = source

            def source(self) -> object | None:
                calls.append(str(self))
                return self._source

        chain = Counting("outer", Counting("inner", None))
        iterator = iter_chain(chain)
        assert next(iterator).message == "outer"
        assert calls == []
        assert next(iterator).message == "inner"
        assert calls == ["outer"]

    @given(chain=foreign_chains())
    def test_foreign_chains(self, chain: tuple[BaseException, list[str]]) -> None:
        """Foreign chains iterate through the adapter."""
        error, expected = chain
        assert [level.message for level in iter_chain(error)] == expected

    def test_mixed_chain(self) -> None:
        """Native and foreign levels can alternate."""
        foreign = LinkedError("foreign", new("native leaf"))
        err = wrap("top", foreign)
        assert [level.message for level in iter_chain(err)] == [
            "top",
            "foreign",
            "native leaf",
        ]


class TestSourcesAndRoot:
    """Tests for sources() and root_cause()."""

    def test_sources_skip_root(self) -> None:
        """sources() starts at the first source."""
        err = wrap("c", wrap("b", "a"))
        assert [level.message for level in sources(err)] == ["b", "a"]

    def test_sources_of_leaf_is_empty(self) -> None:
        """A leaf has no sources."""
        assert list(sources(new("a"))) == []

    def test_root_cause_is_last_level(self) -> None:
        """root_cause() returns the innermost error."""
        assert root_cause(wrap("c", wrap("b", "a"))).message == "a"

    def test_root_cause_of_leaf_is_itself(self) -> None:
        """Without a chain, root_cause() returns the error itself."""
        err = new("ninja cat")
        assert root_cause(err) is err

    def test_root_cause_of_foreign_chain(self) -> None:
        """root_cause() adapts foreign levels."""
        outer = RuntimeError("outer")
        outer.__cause__ = KeyError("engine")
        assert root_cause(outer).message == "'engine'"


class TestChainProtection:
    """Tests for cycle and depth protection."""

    def test_cyclic_foreign_chain_raises(self, caplog: pytest.LogCaptureFixture) -> None:
        """A chain that revisits a level raises after yielding the cycle once."""
        first = RuntimeError("first")
        second = RuntimeError("second")
        first.__cause__ = second
        second.__cause__ = first

        iterator = iter_chain(first)
        assert next(iterator).message == "first"
        assert next(iterator).message == "second"
        with caplog.at_level(logging.WARNING, logger="errorchain.core.chain"):
            with pytest.raises(CyclicChainError) as info:
                next(iterator)
        assert info.value.context is not None
        assert info.value.context.depth == 3
        assert "revisits" in caplog.text

    def test_self_referencing_error_raises(self) -> None:
        """An error that is its own source is a cycle of length one."""
        err = LinkedError("loop")
        err._source = err
        with pytest.raises(CyclicChainError):
            list(iter_chain(err))

    def test_native_wrapping_cycle_back_raises(self) -> None:
        """A foreign level pointing back at a native level is a cycle."""
        foreign = LinkedError("foreign")
        err = wrap("top", foreign)
        foreign._source = err
        with pytest.raises(CyclicChainError):
            list(iter_chain(err))

    def test_depth_limit(self) -> None:
        """Foreign chains longer than max_depth raise after max_depth levels."""
        err = LinkedError("c", LinkedError("b", LinkedError("a")))
        iterator = iter_chain(err, max_depth=2)
        assert [next(iterator).message, next(iterator).message] == ["c", "b"]
        with pytest.raises(ChainDepthExceededError) as info:
            next(iterator)
        assert info.value.context is not None
        assert info.value.context.depth == 3

    def test_native_levels_do_not_count_toward_depth(self) -> None:
        """Only foreign levels are limited; native levels around them are free."""
        err = wrap("d", wrap("c", LinkedError("b", new("a"))))
        assert [level.message for level in iter_chain(err, max_depth=1)] == ["d", "c", "b", "a"]

    @pytest.mark.parametrize("max_depth", [0, -1])
    def test_max_depth_below_one_rejected(self, max_depth: int) -> None:
        """Invalid limits fail at the call, before any level is produced."""
        with pytest.raises(ValueError, match="max_depth must be >= 1"):
            iter_chain(new("a"), max_depth=max_depth)

    def test_deep_native_chain_is_not_limited(self) -> None:
        """Native chains past MAX_CHAIN_DEPTH iterate, format, and opacify fully."""
        err = new("0")
        for index in range(1, MAX_CHAIN_DEPTH + 1):
            err = wrap(str(index), err)

        assert sum(1 for _ in iter_chain(err)) == MAX_CHAIN_DEPTH + 1
        rendered = format_error(err, FormatOptions(FormatMode.CHAIN))
        assert rendered.count(": ") == MAX_CHAIN_DEPTH
        assert rendered.endswith(": 1: 0")
        assert sum(1 for _ in iter_chain(opaque(err))) == MAX_CHAIN_DEPTH + 1

    def test_default_depth_limit_applies_to_foreign_chains(self) -> None:
        """A foreign chain past MAX_CHAIN_DEPTH raises."""
        err: LinkedError | None = None
        for index in range(MAX_CHAIN_DEPTH + 1):
            err = LinkedError(str(index), err)

        with pytest.raises(ChainDepthExceededError):
            list(iter_chain(err))
