"""Lazy iterators over menu trees.

Three iterators cooperate here:

- NullIterator: the empty sequence every Item returns from
  iterate_children(). It lets the depth-first engine push a frame for any
  node without checking the node's variant.
- ChildIterator: a cursor over one category's direct children.
- DepthFirstIterator: the pre-order engine. It keeps an explicit stack of
  per-level iterators (frames) rather than recursing, so memory stays
  proportional to tree depth and nodes are produced only when pulled.

All three expose the explicit has_next()/next()/remove() protocol and the
Python iterator protocol on top of it.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from ..errors import (
    ConcurrentModificationError,
    EndOfSequenceError,
    NotSupportedError,
)


class NodeIterator(ABC):
    """Abstract forward-only iterator over tree nodes.

    Instances are single-use: once exhausted they stay exhausted. Create a
    fresh iterator to traverse again.
    """

    @abstractmethod
    def has_next(self) -> bool:
        """Check whether next() would produce a node."""
        pass

    @abstractmethod
    def next(self) -> Any:
        """Return the next node.

        Raises:
            EndOfSequenceError: If has_next() is False
        """
        pass

    def remove(self) -> None:
        """Deleting through an iterator is not part of the contract."""
        raise NotSupportedError("remove", self)

    def __iter__(self) -> "NodeIterator":
        return self

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        return self.next()


class NullIterator(NodeIterator):
    """Iterator with no elements, returned by leaves."""

    def has_next(self) -> bool:
        return False

    def next(self) -> Any:
        raise EndOfSequenceError("a leaf has no children")

    def __repr__(self) -> str:
        return "NullIterator()"


class ChildIterator(NodeIterator):
    """Cursor over the direct children of one category, in insertion order.

    The cursor reads the category's child list in place; it never copies it.
    Any structural change in the category's subtree after the cursor was
    created makes it raise ConcurrentModificationError.
    """

    def __init__(self, category: Any, children: List[Any]):
        self._category = category
        self._children = children
        self._index = 0
        self._expected_version = category.structure_version()

    def _check_version(self) -> None:
        if self._category.structure_version() != self._expected_version:
            raise ConcurrentModificationError(
                f"{self._category!r} was modified while its children were being iterated"
            )

    def has_next(self) -> bool:
        self._check_version()
        return self._index < len(self._children)

    def next(self) -> Any:
        if not self.has_next():
            raise EndOfSequenceError(f"no more children in {self._category!r}")
        child = self._children[self._index]
        self._index += 1
        return child

    def __repr__(self) -> str:
        return f"ChildIterator({self._category!r}, position={self._index})"


class DepthFirstIterator(NodeIterator):
    """Pre-order depth-first iterator over the proper subtree of a node.

    The stack is seeded with the start node's own iterate_children(), so the
    start node is never produced, only its descendants. Each call to next()
    takes one node from the top frame and pushes that node's
    iterate_children() on top, which makes the following calls descend into
    the node's subtree before returning to its siblings. Items contribute a
    NullIterator frame that has_next() discards straight away.

    Amortized O(1) per node produced; the stack holds at most one frame per
    level, so space is O(depth).

    Args:
        start: Node whose descendants are produced
        max_depth: Deepest level to produce. Direct children of ``start`` are
            at depth 1. Nodes at ``max_depth`` are produced but not descended
            into. None means unlimited.
    """

    def __init__(self, start: Any, max_depth: Optional[int] = None):
        if max_depth is not None and max_depth < 0:
            raise ValueError("max_depth cannot be negative")
        self._start = start
        self._max_depth = max_depth
        self._expected_version = start.structure_version()
        self._stack: List[NodeIterator] = []
        if max_depth is None or max_depth > 0:
            self._stack.append(start.iterate_children())
        self._depth = 0

    @property
    def depth(self) -> int:
        """Depth of the node most recently returned by next(); 0 before the first call."""
        return self._depth

    @property
    def stack_size(self) -> int:
        """Number of frames currently held."""
        return len(self._stack)

    def _check_version(self) -> None:
        if self._start.structure_version() != self._expected_version:
            raise ConcurrentModificationError(
                f"{self._start!r} was restructured during traversal"
            )

    def has_next(self) -> bool:
        stack = self._stack
        if stack:
            self._check_version()
        # Exhausted frames never refill, so popping them is idempotent
        while stack:
            if stack[-1].has_next():
                return True
            stack.pop()
        return False

    def next(self) -> Any:
        if not self.has_next():
            raise EndOfSequenceError(f"traversal of {self._start!r} is exhausted")
        depth = len(self._stack)
        node = self._stack[-1].next()
        if self._max_depth is None or depth < self._max_depth:
            self._stack.append(node.iterate_children())
        self._depth = depth
        return node

    def __repr__(self) -> str:
        return f"DepthFirstIterator({self._start!r}, frames={len(self._stack)})"
