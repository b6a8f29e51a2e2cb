"""Node abstraction for MenuTreeLib.

A menu tree is made of two node variants: Category (a composite that owns an
ordered list of children) and Item (a leaf with terminal attributes). Both
share the capability surface defined here.

Every capability is answered by every variant: either with a real result or
with a NotSupportedError. Consumers that query across variants (filters,
collectors) can therefore call anything on any node and treat
NotSupportedError as "this node does not take part", without switching on the
node type first.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Callable, Dict, Iterator, Optional, Tuple, Union

from ..errors import NotSupportedError
from .iterator import DepthFirstIterator, NodeIterator


class Node(ABC):
    """Abstract base class for every member of a menu tree.

    Nodes compare and hash by identity. Two items with the same name and
    price are still two different menu entries, and Category.remove() relies
    on identity to find the child to detach.
    """

    #: Short type tag reported in metadata().
    node_type = "node"

    def __init__(self, name: str, description: str = ""):
        if not isinstance(name, str) or not name:
            raise ValueError("name must be a non-empty string")
        self._name = name
        self._description = description or ""
        self._parent: Optional["Node"] = None

    def name(self) -> str:
        return self._name

    def description(self) -> str:
        return self._description

    # Attribute tests

    @abstractmethod
    def _attribute_values(self) -> Dict[str, Any]:
        """Return the attributes this variant carries, keyed by name."""
        pass

    def attributes(self) -> Tuple[str, ...]:
        """Names of the attributes this node can be tested on."""
        return tuple(self._attribute_values())

    def attribute(self, name: str) -> Any:
        """Return the value of a named attribute.

        Raises:
            NotSupportedError: If this variant does not carry the attribute
        """
        values = self._attribute_values()
        if name not in values:
            raise NotSupportedError(f"attribute {name!r}", self)
        return values[name]

    def matches(self, predicate: Union["AttributeTest", Callable[["Node"], bool]]) -> bool:
        """Evaluate a predicate against this node.

        Args:
            predicate: An AttributeTest, or any callable taking the node and
                returning a truth value

        Returns:
            True if the node satisfies the predicate

        Raises:
            NotSupportedError: If the predicate tests an attribute this
                variant does not carry
        """
        if isinstance(predicate, AttributeTest):
            return bool(predicate.test(self.attribute(predicate.attribute)))
        return bool(predicate(self))

    def metadata(self) -> Dict[str, Any]:
        """Lightweight snapshot of this node's attributes plus its type."""
        data = {'type': self.node_type}
        data.update(self._attribute_values())
        return data

    # Leaf-only attributes; Item overrides these

    def is_vegetarian(self) -> bool:
        raise NotSupportedError("is_vegetarian", self)

    def price(self) -> Decimal:
        raise NotSupportedError("price", self)

    # Composite-only operations; Category overrides these

    def add(self, node: "Node") -> "Node":
        raise NotSupportedError("add", self)

    def remove(self, node: "Node") -> None:
        raise NotSupportedError("remove", self)

    def child_at(self, index: int) -> "Node":
        raise NotSupportedError("child_at", self)

    # Iteration

    @abstractmethod
    def iterate_children(self) -> NodeIterator:
        """Return a lazy iterator over this node's direct children."""
        pass

    def create_iterator(self, max_depth: Optional[int] = None) -> NodeIterator:
        """Return a pre-order depth-first iterator over this node's subtree.

        The node itself is never produced, only its descendants.

        Args:
            max_depth: Deepest level to produce (direct children are 1)
        """
        return DepthFirstIterator(self, max_depth=max_depth)

    def structure_version(self) -> int:
        """Counter that changes whenever this node's subtree is restructured."""
        return 0

    # Capability flags

    def is_leaf(self) -> bool:
        return not self.supports_children()

    @abstractmethod
    def supports_children(self) -> bool:
        """Check if this node can own children (add/remove/child_at)."""
        pass

    # Position in the tree

    def parent(self) -> Optional["Node"]:
        """Owning category, or None for a detached node or a root."""
        return self._parent

    def ancestors(self) -> Iterator["Node"]:
        """Yield the owning category, its owner, and so on up to the root."""
        current = self._parent
        while current is not None:
            yield current
            current = current._parent

    def depth(self) -> int:
        """Number of ancestors; a root is at depth 0."""
        return sum(1 for _ in self.ancestors())

    def path(self) -> Tuple[str, ...]:
        """Names from the outermost ancestor down to this node."""
        names = [self._name]
        names.extend(ancestor.name() for ancestor in self.ancestors())
        names.reverse()
        return tuple(names)

    def _attach(self, parent: "Node") -> None:
        self._parent = parent

    def _detach(self) -> None:
        self._parent = None

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._name!r})"


def _as_decimal(operand: Any) -> Any:
    """Convert a finite float operand the way Item stores prices.

    Prices are kept as Decimal(str(price)), and Decimal("2.99") != 2.99, so
    float operands are compared in the same representation.
    """
    if isinstance(operand, float):
        converted = Decimal(str(operand))
        if converted.is_finite():
            return converted
    return operand


@dataclass(frozen=True)
class AttributeTest:
    """A single-attribute predicate evaluated through Node.matches().

    Nodes that do not carry ``attribute`` raise NotSupportedError instead of
    answering False, which lets filters tell "not applicable" apart from
    "does not match".

    Example:
        >>> veg = AttributeTest.equals("vegetarian", True)
        >>> [n.name() for n in filter_nodes(menu, veg)]
    """

    attribute: str
    test: Callable[[Any], bool] = field(compare=False)
    label: str = ""

    def __call__(self, node: Node) -> bool:
        return node.matches(self)

    def __str__(self) -> str:
        return self.label or f"{self.attribute} test"

    @classmethod
    def equals(cls, attribute: str, expected: Any) -> "AttributeTest":
        operand = _as_decimal(expected)
        return cls(attribute, lambda value: value == operand, f"{attribute} == {expected!r}")

    @classmethod
    def at_most(cls, attribute: str, limit: Any) -> "AttributeTest":
        operand = _as_decimal(limit)
        return cls(attribute, lambda value: value <= operand, f"{attribute} <= {limit!r}")

    @classmethod
    def at_least(cls, attribute: str, limit: Any) -> "AttributeTest":
        operand = _as_decimal(limit)
        return cls(attribute, lambda value: value >= operand, f"{attribute} >= {limit!r}")

    @classmethod
    def contains(cls, attribute: str, text: str) -> "AttributeTest":
        """Case-insensitive substring test on a string attribute."""
        needle = text.lower()
        return cls(attribute, lambda value: needle in str(value).lower(), f"{attribute} contains {text!r}")
