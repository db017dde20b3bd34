from __future__ import annotations
"""ChainError – immutable error node with an optional owned cause.

A chain is built bottom-up: every :func:`wrap` creates a new head that
references an error which already exists, so the cause links always point
to older nodes and the chain ends at a root cause.  The root is either a
``ChainError`` without cause or a *foreign* exception (anything else), which
is terminal: its own ``__cause__``/``__context__`` are never followed.

Example
-------
```python
from errchain import ChainError

value, err = ChainError.from_(lambda: int("x"), "parse port")
if err:
    _, err = ChainError.wrap(err, "load config")
    print(err.message_stack())
```
"""
import os
import sys
import traceback
from typing import Any, Awaitable, Callable, Iterator, List, Optional, Tuple, TypeGuard, TypeVar

from .result import Result

T = TypeVar("T")

__all__ = [
    "ChainError",
    "ErrorHandle",
    "is_chain_error",
    "message_of",
    "wrap",
]

# Either a ChainError or a foreign exception; both are BaseException instances.
ErrorHandle = BaseException

_PKG_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _capture_stack() -> traceback.StackSummary:
    # Source lines are looked up lazily, when the stack is formatted.
    frames = (
        (frame, lineno)
        for frame, lineno in traceback.walk_stack(sys._getframe())
        if not frame.f_code.co_filename.startswith(_PKG_ROOT + os.sep)
    )
    stack = traceback.StackSummary.extract(frames, lookup_lines=False)
    stack.reverse()
    return stack


class ChainError(Exception):
    """Error node combining a *message* with an optional *cause*.

    ``message`` and ``cause`` are read-only; a node never changes after
    construction.  The cause is also exposed as ``__cause__`` so a chain that
    does get raised prints Python's usual "direct cause" traceback.
    """

    __slots__ = ("_message", "_cause", "_stack")

    def __init__(self, message: Optional[str] = "", cause: Optional[ErrorHandle] = None):
        if cause is not None and not isinstance(cause, BaseException):
            raise TypeError(
                f"cause must be an exception instance, got {type(cause).__name__}"
            )
        message = message or ""
        super().__init__(message)
        self._message = message
        self._cause = cause
        self._stack = _capture_stack()
        if cause is not None:
            self.__cause__ = cause

    # -------------------------------------------------- #
    @property
    def message(self) -> str:
        return self._message

    @property
    def cause(self) -> Optional[ErrorHandle]:
        return self._cause

    @property
    def stack(self) -> traceback.StackSummary:
        """Call stack captured where this node was created."""
        return self._stack

    def format_stack(self) -> str:
        return "".join(self._stack.format())

    # -------------------------------------------------- #
    # Propagation
    # -------------------------------------------------- #
    @staticmethod
    def wrap(err: ErrorHandle, message: str = "") -> Result[None]:  # noqa: D401
        """Return a failed Result holding a new node that wraps *err*."""
        return Result.failure(ChainError(message, err))

    @classmethod
    def from_(cls, fn: Callable[[], T], message: str = "") -> Result[T]:
        """Call *fn* and turn a raised exception into a wrapped failure."""
        from .boundary import from_call  # local import avoids a cycle

        return from_call(fn, message)

    @classmethod
    async def from_async(cls, fn: Callable[[], Awaitable[T]], message: str = "") -> Result[T]:
        """Await *fn()* and turn a raised exception into a wrapped failure."""
        from .boundary import from_async

        return await from_async(fn, message)

    # -------------------------------------------------- #
    # Traversal
    # -------------------------------------------------- #
    def unwrap(self) -> Optional[ErrorHandle]:
        """Return the direct cause, or None if this node is terminal."""
        return self._cause

    def walk(self) -> Iterator[ErrorHandle]:
        """Yield this node, then each cause down to the root cause."""
        node: Optional[ErrorHandle] = self
        while node is not None:
            yield node
            node = node._cause if isinstance(node, ChainError) else None

    def unwrap_all(self) -> ErrorHandle:
        """Return the root cause (``self`` when there is no cause)."""
        root: ErrorHandle = self
        for root in self.walk():
            pass
        return root

    def message_stack(self, separator: str = "\n") -> str:
        """Return every message in the chain, root cause first."""
        messages = [message_of(node) for node in self.walk()]
        messages.reverse()
        return separator.join(messages)

    # -------------------------------------------------- #
    def __repr__(self) -> str:
        # Only the direct cause is shown, so repr stays flat on deep chains.
        if self._cause is None:
            return f"{type(self).__name__}({self._message!r})"
        cause = f"{type(self._cause).__name__}({message_of(self._cause)!r})"
        return f"{type(self).__name__}({self._message!r}, cause={cause})"

    def __reduce__(self) -> Tuple[Any, ...]:
        """Pickle the chain as a flat list of links plus the foreign root.

        Nested reduction would recurse once per link; creation stacks are kept.
        """
        links: List[Tuple[type, str, List[tuple]]] = []
        root: Optional[ErrorHandle] = None
        for node in self.walk():
            if isinstance(node, ChainError):
                frames = [(f.filename, f.lineno, f.name, None) for f in node._stack]
                links.append((type(node), node._message, frames))
            else:
                root = node
        return (_rebuild_chain, (links, root))

    @classmethod
    def _restore(
        cls, message: str, cause: Optional[ErrorHandle], stack: traceback.StackSummary
    ) -> "ChainError":
        node = cls.__new__(cls, message)
        Exception.__init__(node, message)
        node._message = message
        node._cause = cause
        node._stack = stack
        if cause is not None:
            node.__cause__ = cause
        return node


def _rebuild_chain(
    links: List[Tuple[type, str, List[tuple]]], root: Optional[ErrorHandle]
) -> ChainError:
    node = root
    for cls, message, frames in reversed(links):
        node = cls._restore(message, node, traceback.StackSummary.from_list(frames))
    return node  # type: ignore[return-value]


# Module-level alias so callers can `from errchain import wrap`.
wrap = ChainError.wrap


def is_chain_error(err: Optional[BaseException]) -> TypeGuard[ChainError]:
    """Return True when *err* is a chain node (supports unwrap/walk)."""
    return isinstance(err, ChainError)


def message_of(err: ErrorHandle) -> str:
    """Return the message carried by *err*, chain node or foreign error.

    A foreign error built from a single string gives that string back as is
    (``str(KeyError("k"))`` would quote it).
    """
    if isinstance(err, ChainError):
        return err.message
    if len(err.args) == 1 and isinstance(err.args[0], str):
        return err.args[0]
    return str(err)
