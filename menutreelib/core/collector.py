"""Data collection strategies for MenuTreeLib.

DataCollectors define what information to extract from nodes during traversal.
This allows the same traversal to collect different data based on requirements.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..errors import NotSupportedError
from .iterator import DepthFirstIterator
from .node import Node


class DataCollector(ABC):
    """Abstract base class for data collection strategies.

    DataCollectors determine what information is extracted from each node
    during traversal. This separation allows the same traversal to be used
    for different purposes (e.g., collecting just names vs. full metadata
    vs. subtree totals).

    A collector may raise NotSupportedError for nodes it has nothing to say
    about; the execution plan then leaves that node out of the results.
    """

    @abstractmethod
    def collect(self, node: Node, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Depth of the node relative to the traversal start

        Returns:
            Collected data (type depends on collector)
        """
        pass

    @abstractmethod
    def requires_children(self) -> bool:
        """Check if this collector needs to look below the node it is given.

        Informational: ExecutionPlan reports it in get_summary() but visits
        the same nodes either way.

        Returns:
            True if collector walks the node's children
        """
        pass


class NameCollector(DataCollector):
    """Collects only node names."""

    def collect(self, node: Node, depth: int) -> str:
        return node.name()

    def requires_children(self) -> bool:
        return False


class MetadataCollector(DataCollector):
    """Collects the metadata dictionary of each node."""

    def collect(self, node: Node, depth: int) -> Dict[str, Any]:
        return node.metadata()

    def requires_children(self) -> bool:
        return False


class FullNodeCollector(DataCollector):
    """Collects the node objects themselves."""

    def collect(self, node: Node, depth: int) -> Node:
        return node

    def requires_children(self) -> bool:
        return False


class ChildCountCollector(DataCollector):
    """Collects nodes with their number of direct children.

    Counts through iterate_children() so items (which answer with an empty
    sequence) and categories are handled the same way.
    """

    def collect(self, node: Node, depth: int) -> Dict[str, Any]:
        child_count = sum(1 for _ in node.iterate_children())
        return {
            'name': node.name(),
            'depth': depth,
            'child_count': child_count,
            'is_leaf': node.is_leaf()
        }

    def requires_children(self) -> bool:
        return True


class PathCollector(DataCollector):
    """Collects the names from the tree root down to each node.

    Args:
        separator: When given, paths are joined into a string with it
            instead of being returned as tuples
    """

    def __init__(self, separator: Optional[str] = None):
        self.separator = separator

    def collect(self, node: Node, depth: int) -> Any:
        path = node.path()
        if self.separator is not None:
            return self.separator.join(path)
        return path

    def requires_children(self) -> bool:
        return False


class AggregateCollector(DataCollector):
    """Base class for collectors that aggregate an attribute over subtrees.

    For each node, the attribute is read from the node and every descendant.
    Nodes that do not carry the attribute (NotSupportedError) are skipped,
    so aggregating ``price`` over a category totals the items beneath it.

    Args:
        attribute: Name of the attribute to aggregate
    """

    def __init__(self, attribute: str):
        self.attribute = attribute

    @abstractmethod
    def aggregate(self, values: List[Any]) -> Any:
        """Aggregate multiple values into one."""
        pass

    def _value_of(self, node: Node) -> Tuple[bool, Any]:
        try:
            return True, node.attribute(self.attribute)
        except NotSupportedError:
            return False, None

    def collect(self, node: Node, depth: int) -> Dict[str, Any]:
        has_own, own_value = self._value_of(node)
        values = [own_value] if has_own else []

        iterator = DepthFirstIterator(node)
        while iterator.has_next():
            found, value = self._value_of(iterator.next())
            if found:
                values.append(value)

        return {
            'name': node.name(),
            'depth': depth,
            'own_value': own_value,
            'aggregated': self.aggregate(values)
        }

    def requires_children(self) -> bool:
        return True


class SumCollector(AggregateCollector):
    """Sums an attribute across subtrees, e.g. the total price of a menu."""

    def aggregate(self, values: List[Any]) -> Any:
        return sum(v for v in values if v is not None)


class MaxCollector(AggregateCollector):
    """Finds the largest value of an attribute in each subtree."""

    def aggregate(self, values: List[Any]) -> Any:
        valid_values = [v for v in values if v is not None]
        return max(valid_values) if valid_values else None


class CustomCollector(DataCollector):
    """Collector that uses a user-provided function.

    Args:
        collect_func: Function(node, depth) -> Any
        requires_children_func: Function() -> bool (default: returns False)
    """

    def __init__(self,
                 collect_func: Callable[[Node, int], Any],
                 requires_children_func: Optional[Callable[[], bool]] = None):
        self.collect_func = collect_func
        self.requires_children_func = requires_children_func or (lambda: False)

    def collect(self, node: Node, depth: int) -> Any:
        return self.collect_func(node, depth)

    def requires_children(self) -> bool:
        return self.requires_children_func()
