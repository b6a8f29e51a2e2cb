"""Composite nodes of a menu tree."""

import logging
from typing import Any, Dict, List, Tuple

from ..errors import IndexOutOfRangeError, InvalidStructureError, NotFoundError
from .iterator import ChildIterator, NodeIterator
from .node import Node

logger = logging.getLogger(__name__)


class Category(Node):
    """A named group of menu nodes, e.g. "Dinner Menu" or "Desserts".

    A category exclusively owns its children and keeps them in insertion
    order. Each child has one owner at a time: moving a node to another
    category means removing it here first.

    Structural changes (add/remove) bump a version counter on this category
    and on every ancestor, so an iterator over any enclosing subtree notices
    the change and fails with ConcurrentModificationError instead of
    producing an inconsistent sequence.
    """

    node_type = "category"

    def __init__(self, name: str, description: str = ""):
        super().__init__(name, description)
        self._children: List[Node] = []
        self._version = 0

    def add(self, node: Node) -> Node:
        """Append a node to the end of this category.

        Args:
            node: Detached node to adopt

        Returns:
            The node that was added, so nested menus can be built inline

        Raises:
            TypeError: If node is not a Node
            InvalidStructureError: If node is this category, one of its
                ancestors, or already owned by another category
        """
        if not isinstance(node, Node):
            raise TypeError(f"expected a Node, got {type(node).__name__}")

        if node is self or any(ancestor is node for ancestor in self.ancestors()):
            logger.warning("Rejected adding %r to %r: would create a cycle", node, self)
            raise InvalidStructureError(
                f"cannot add {node!r} to {self!r}: it is the category itself or one of its ancestors"
            )

        owner = node.parent()
        if owner is not None:
            logger.warning("Rejected adding %r to %r: already owned by %r", node, self, owner)
            raise InvalidStructureError(
                f"{node!r} already belongs to {owner!r}; remove it there first"
            )

        self._children.append(node)
        node._attach(self)
        self._bump_version()
        logger.debug("Added %r to %r at position %d", node, self, len(self._children) - 1)
        return node

    def remove(self, node: Node) -> None:
        """Detach a direct child, matched by identity.

        Raises:
            NotFoundError: If node is not a direct child of this category
        """
        for index, child in enumerate(self._children):
            if child is node:
                break
        else:
            raise NotFoundError(f"{node!r} is not a child of {self!r}")

        del self._children[index]
        node._detach()
        self._bump_version()
        logger.debug("Removed %r from %r (was position %d)", node, self, index)

    def child_at(self, index: int) -> Node:
        """Return the child at a zero-based position.

        Raises:
            IndexOutOfRangeError: If index is negative or past the last child
        """
        if not 0 <= index < len(self._children):
            raise IndexOutOfRangeError(
                f"index {index} out of range for {self!r} with {len(self._children)} children"
            )
        return self._children[index]

    def children(self) -> Tuple[Node, ...]:
        """Snapshot of the direct children."""
        return tuple(self._children)

    def iterate_children(self) -> NodeIterator:
        return ChildIterator(self, self._children)

    def structure_version(self) -> int:
        return self._version

    def supports_children(self) -> bool:
        return True

    def _bump_version(self) -> None:
        self._version += 1
        for ancestor in self.ancestors():
            ancestor._version += 1

    def _attribute_values(self) -> Dict[str, Any]:
        return {
            'name': self._name,
            'description': self._description,
        }

    def metadata(self) -> Dict[str, Any]:
        data = super().metadata()
        data['child_count'] = len(self._children)
        return data

    def __len__(self) -> int:
        return len(self._children)

    def __bool__(self) -> bool:
        # An empty category is still a category
        return True

    def __iter__(self) -> NodeIterator:
        return self.iterate_children()

    def __repr__(self) -> str:
        return f"Category(name={self._name!r}, children={len(self._children)})"
