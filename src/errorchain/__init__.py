"""errorchain - composable error values with causal chains and trace frames.

Build error values, chain them, and render them uniformly, whether they are
native values or foreign exceptions.

Public API:
    new - Leaf error value
    wrap - Error value wrapping a cause
    opaque - Message-only copy of any error chain, with its types hidden
    iter_chain - Lazy iteration over an error and its sources
    sources - Lazy iteration over the sources only
    root_cause - Last level of a chain
    adapt - Uniform view of a foreign error
    format_error - Render an error under FormatOptions
    write_error - Render an error straight to a text stream

Formatting:
    >>> err = wrap("ship exploded", new("cat hair in generator"))
    >>> f"{err}"
    'ship exploded'
    >>> f"{err:+}"
    'ship exploded: cat hair in generator'

Exceptions:
    ChainIntegrityError - Base class of the library's own failures
    CyclicChainError - A foreign chain revisits a level
    ChainDepthExceededError - A foreign chain is deeper than MAX_CHAIN_DEPTH
    ImmutabilityViolationError - A frozen value was modified

Submodules:
    errorchain.core - Error values, trace frames, adapter, traversal
    errorchain.formatting - FormatOptions and ChainFormatter
    errorchain.integrity - Library failure exceptions
    errorchain.constants - Rendering literals and traversal limits
"""

from .core import (
    ChainError,
    ErrorKind,
    ErrorLike,
    ForeignErrorView,
    OpaqueError,
    SourceLocation,
    TraceFrame,
    adapt,
    iter_chain,
    new,
    opaque,
    root_cause,
    sources,
    wrap,
)
from .formatting import ChainFormatter, FormatMode, FormatOptions, format_error, write_error
from .integrity import (
    ChainDepthExceededError,
    ChainIntegrityError,
    CyclicChainError,
    ImmutabilityViolationError,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("errorchain")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ChainDepthExceededError",
    "ChainError",
    "ChainFormatter",
    "ChainIntegrityError",
    "CyclicChainError",
    "ErrorKind",
    "ErrorLike",
    "ForeignErrorView",
    "FormatMode",
    "FormatOptions",
    "ImmutabilityViolationError",
    "OpaqueError",
    "SourceLocation",
    "TraceFrame",
    "__version__",
    "adapt",
    "format_error",
    "iter_chain",
    "new",
    "opaque",
    "root_cause",
    "sources",
    "wrap",
    "write_error",
]
