"""Library failure exceptions and the frozen exception base.

These exceptions indicate failures of errorchain itself or misuse of its
values. They are NOT error values: a ChainError is data describing a
caller's failure, while the classes here are raised by the library when a
chain cannot be traversed or a frozen value is tampered with.

Both families share FrozenException, which rejects attribute writes once
construction has finished while leaving the attributes Python's exception
machinery manages writable.

Design:
    - NOT subclasses of ChainError (different error domain)
    - Carry structured context for diagnosis
    - Immutable after construction
    - @final decorator prevents subclassing

Hierarchy:
    FrozenException (shared immutability guard)
    ├─ ChainError (errorchain.core.error)
    └─ ChainIntegrityError (base of library failures)
       ├─ ChainDepthExceededError (traversal passed MAX_CHAIN_DEPTH)
       ├─ CyclicChainError (a source chain revisits a level)
       └─ ImmutabilityViolationError (mutation attempt on a frozen value)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, final

__all__ = [
    "ChainDepthExceededError",
    "ChainIntegrityError",
    "CyclicChainError",
    "FrozenException",
    "ImmutabilityViolationError",
    "IntegrityContext",
]


@dataclass(frozen=True, slots=True)
class IntegrityContext:
    """Context for integrity error diagnosis.

    Attributes:
        component: Component where the failure was detected (chain, error)
        operation: Operation being performed (iterate, setattr, delattr)
        depth: Chain level (1-indexed) at which the failure was detected
    """

    component: str
    operation: str
    depth: int | None = None


class FrozenException(Exception):
    """Exception whose attributes are fixed once ``_freeze()`` has run.

    Subclasses assign their fields (with ``object.__setattr__`` for slots
    they guard) and call ``_freeze()`` last. Any later write or delete
    raises ImmutabilityViolationError naming the subclass's component.
    """

    __slots__ = ("_frozen",)

    _frozen: bool

    # Python's exception machinery sets these while propagating.
    _PYTHON_EXCEPTION_ATTRS: ClassVar[frozenset[str]] = frozenset(
        ("__traceback__", "__context__", "__cause__", "__suppress_context__", "__notes__")
    )

    # Shown in violation messages and contexts.
    _frozen_label: ClassVar[str] = "frozen exception"
    _frozen_component: ClassVar[str] = "exception"

    def _freeze(self) -> None:
        object.__setattr__(self, "_frozen", True)

    def __setattr__(self, name: str, value: object) -> None:
        """Reject attribute mutations after initialization.

        Raises:
            ImmutabilityViolationError: If attempting to modify after construction
        """
        if name in self._PYTHON_EXCEPTION_ATTRS:
            object.__setattr__(self, name, value)
            return
        if getattr(self, "_frozen", False):
            msg = f"Cannot modify {self._frozen_label} attribute: {name}"
            raise ImmutabilityViolationError(
                msg, IntegrityContext(component=self._frozen_component, operation="setattr")
            )
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        """Reject all attribute deletions.

        Raises:
            ImmutabilityViolationError: Always
        """
        msg = f"Cannot delete {self._frozen_label} attribute: {name}"
        raise ImmutabilityViolationError(
            msg, IntegrityContext(component=self._frozen_component, operation="delattr")
        )


class ChainIntegrityError(FrozenException):
    """Base exception for errorchain's own failures.

    This exception is immutable after construction; subclasses are
    @final to prevent further inheritance.

    Attributes:
        context: Structured diagnostic context
    """

    __slots__ = ("_context",)

    _context: IntegrityContext | None

    _frozen_label = "integrity error"
    _frozen_component = "integrity"

    def __init__(
        self,
        message: str,
        context: IntegrityContext | None = None,
    ) -> None:
        """Initialize ChainIntegrityError.

        Args:
            message: Human-readable error description
            context: Structured diagnostic context (optional)
        """
        super().__init__(message)
        object.__setattr__(self, "_context", context)
        self._freeze()

    @property
    def context(self) -> IntegrityContext | None:
        """Structured diagnostic context."""
        return self._context

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, context={self._context!r})"


@final
class ChainDepthExceededError(ChainIntegrityError):
    """Foreign source chain is deeper than MAX_CHAIN_DEPTH.

    Usually a foreign chain built programmatically in a loop, or a cycle
    long enough that no level was revisited before the limit.
    """


@final
class CyclicChainError(ChainIntegrityError):
    """Source chain revisits a level it already yielded.

    Only foreign chains can be cyclic, e.g. two exceptions whose
    ``__cause__`` attributes point at each other.
    """


@final
class ImmutabilityViolationError(ChainIntegrityError):
    """Attempt to mutate an immutable object.

    Raised when code attempts to modify a ChainError or a
    ChainIntegrityError after construction.
    """
