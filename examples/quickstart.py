"""Quickstart example for errorchain.

This example demonstrates building error chains, adapting foreign exceptions,
hiding foreign types behind opaque errors, and rendering chains in each mode.
"""

import io

from errorchain import (
    ChainFormatter,
    FormatMode,
    FormatOptions,
    format_error,
    iter_chain,
    new,
    opaque,
    root_cause,
    wrap,
)
from errorchain.integrity import CyclicChainError

# Example 1: Wrapping errors
print("=" * 50)
print("Example 1: Wrapping Errors")
print("=" * 50)

err = wrap("ship exploded", new("cat hair in generator"))

print(format_error(err))
# Output: ship exploded

print(format_error(err, FormatOptions(FormatMode.CHAIN)))
# Output: ship exploded: cat hair in generator

# Example 2: Trace frames
print("\n" + "=" * 50)
print("Example 2: Trace Frames")
print("=" * 50)

err = wrap(
    "ship exploded",
    new("cat hair in generator", trace=["generator.rs:33", ("engine.rs", 789)]),
    trace=["ship.rs:89"],
)

print(format_error(err, FormatOptions(FormatMode.WITH_TRACE)))
# Output:
# ship exploded
#     at ship.rs:89

print(format_error(err, FormatOptions(FormatMode.CHAIN_WITH_TRACE)))
# Output:
# ship exploded
#     at ship.rs:89
# Caused by: cat hair in generator
#     at generator.rs:33
#     at engine.rs:789

# Example 3: format() specifiers
print("\n" + "=" * 50)
print("Example 3: Format Specifiers")
print("=" * 50)

deep = wrap("c", wrap("b", "a"))
print(f"{deep}")  # Output: c
print(f"{deep:+}")  # Output: c: b: a
print(f"{deep:+.1}")  # Output: c: b

# Example 4: Foreign exceptions
print("\n" + "=" * 50)
print("Example 4: Foreign Exceptions")
print("=" * 50)

try:
    try:
        {}["generator"]
    except KeyError as exc:
        raise RuntimeError("engine stalled") from exc
except RuntimeError as exc:
    err = wrap("ship exploded", exc)

print(format_error(err, FormatOptions(FormatMode.CHAIN)))
# Output: ship exploded: engine stalled: 'generator'

print([level.message for level in iter_chain(err)])
# Output: ['ship exploded', 'engine stalled', "'generator'"]

print(root_cause(err).message)
# Output: 'generator'

# Example 5: Opaque errors
print("\n" + "=" * 50)
print("Example 5: Opaque Errors")
print("=" * 50)

hidden = opaque(err)
print(format_error(hidden, FormatOptions(FormatMode.CHAIN)))
# Output: ship exploded: engine stalled: 'generator'
print(type(hidden.source).__name__)
# Output: OpaqueError

# Example 6: Depth limits and streaming
print("\n" + "=" * 50)
print("Example 6: Depth Limits and Streaming")
print("=" * 50)

formatter = ChainFormatter(FormatOptions(FormatMode.CHAIN, max_depth=2))
stream = io.StringIO()
formatter.write(err, stream)
print(stream.getvalue())
# Output: ship exploded: engine stalled

# Example 7: Cyclic foreign chains
print("\n" + "=" * 50)
print("Example 7: Cyclic Foreign Chains")
print("=" * 50)

loop = RuntimeError("loop")
loop.__cause__ = loop
try:
    format_error(wrap("top", loop), FormatOptions(FormatMode.CHAIN))
except CyclicChainError as exc:
    print(f"Refused: {exc}")
    print(f"Context: {exc.context}")
