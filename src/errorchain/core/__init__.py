"""Error-chain data model.

Error values, trace frames, the foreign error adapter, and chain traversal.

Python 3.13+. Zero external dependencies.
"""

from .chain import iter_chain, root_cause, sources
from .constructors import new, opaque, wrap
from .error import ChainError, ErrorKind, OpaqueError
from .foreign import ErrorLike, ForeignErrorView, adapt
from .trace import SourceLocation, TraceFrame, TraceLike

__all__ = [
    "ChainError",
    "ErrorKind",
    "ErrorLike",
    "ForeignErrorView",
    "OpaqueError",
    "SourceLocation",
    "TraceFrame",
    "TraceLike",
    "adapt",
    "iter_chain",
    "new",
    "opaque",
    "root_cause",
    "sources",
    "wrap",
]
