"""Predicate filtering and report generation over menu trees.

filter_nodes() is the lazy consumer of the depth-first iterator: it produces
the nodes that satisfy a predicate, in traversal order. ReportGenerator
drives it (or the raw iterator) to exhaustion and writes formatted lines to a
caller-supplied sink, any callable that accepts a string.
"""

import logging
from typing import Any, Callable, Iterator, Optional

from .config import ReportConfig
from .core.node import Node
from .errors import NotSupportedError

logger = logging.getLogger(__name__)

Sink = Callable[[str], Any]


def filter_nodes(root: Node, predicate: Callable[[Node], bool]) -> Iterator[Node]:
    """Lazily yield the descendants of ``root`` that satisfy ``predicate``.

    Nodes are tested with ``node.matches(predicate)`` in pre-order. A node
    that raises NotSupportedError (e.g. a category asked whether it is
    vegetarian) is excluded, exactly like a node that answers False.

    Example:
        >>> veg = AttributeTest.equals("vegetarian", True)
        >>> [node.name() for node in filter_nodes(menu, veg)]
        ['Veg Burger', 'Pie']
    """
    iterator = root.create_iterator()
    while iterator.has_next():
        node = iterator.next()
        try:
            matched = node.matches(predicate)
        except NotSupportedError as e:
            logger.debug("Excluding %r: %s", node, e)
            continue
        if matched:
            yield node


class ReportGenerator:
    """Writes menu reports line by line through a sink.

    Args:
        sink: Callable receiving each output line (without trailing newline)
        config: Formatting options
    """

    def __init__(self, sink: Sink, config: Optional[ReportConfig] = None):
        self.sink = sink
        self.config = config or ReportConfig()

    def format_item(self, node: Node, depth: int = 0) -> str:
        """Format one item as "<name> (v), $2.99 -- <description>"."""
        cfg = self.config
        parts = [node.name()]
        if node.is_vegetarian():
            parts.append(f" {cfg.vegetarian_marker}")
        parts.append(f", {cfg.currency_symbol}{node.price()}")
        if cfg.include_descriptions and node.description():
            parts.append(f" {cfg.separator} {node.description()}")
        return cfg.indent * depth + "".join(parts)

    def format_category(self, node: Node, depth: int = 0) -> str:
        cfg = self.config
        line = node.name().upper()
        if cfg.include_descriptions and node.description():
            line += f", {node.description()}"
        return cfg.indent * depth + line

    def format_node(self, node: Node, depth: int = 0) -> str:
        if node.supports_children():
            return self.format_category(node, depth)
        return self.format_item(node, depth)

    def filtered_report(self,
                        root: Node,
                        predicate: Callable[[Node], bool],
                        title: Optional[str] = None) -> int:
        """Write every descendant of ``root`` matching ``predicate``.

        Args:
            root: Start of the traversal (not itself reported)
            predicate: AttributeTest or callable taking a node
            title: Heading line; defaults to a description of the predicate

        Returns:
            Number of matching nodes written
        """
        self.sink(title if title is not None else f"{root.name().upper()}: {predicate}")
        self.sink(self.config.separator * 10)

        count = 0
        for node in filter_nodes(root, predicate):
            self.sink(self.format_node(node))
            count += 1

        logger.debug("Filtered report over %r wrote %d matches", root, count)
        return count

    def menu_report(self, root: Node) -> int:
        """Write the whole tree under ``root``, indented by depth.

        The root is written as the heading; every descendant follows in
        pre-order.

        Returns:
            Number of descendants written
        """
        self.sink(self.format_node(root))
        self.sink(self.config.separator * 10)

        count = 0
        iterator = root.create_iterator()
        while iterator.has_next():
            node = iterator.next()
            self.sink(self.format_node(node, iterator.depth - 1))
            count += 1
        return count
