"""High-level API for MenuTreeLib.

This module provides simple, functional interfaces for common traversal
operations. These functions wrap ExecutionPlan and the report consumer for
ease of use in simple cases.
"""

from typing import Any, Callable, Dict, Iterator, Optional, Tuple

from .config import (
    DataRequirement,
    DepthConfig,
    FilterConfig,
    TraversalConfig,
)
from .core.node import Node
from .planning import ExecutionPlan
from .report import filter_nodes


def traverse_tree(
    root: Node,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[Node], bool]] = None,
    exclude_filter: Optional[Callable[[Node], bool]] = None,
    on_error: Optional[Callable[[Node, Exception], None]] = None,
    **kwargs
) -> Iterator[Node]:
    """Simple interface for tree traversal.

    Produces the descendants of ``root`` in pre-order depth-first order.
    ``root`` itself is never produced.

    Args:
        root: Starting node for traversal
        max_depth: Maximum depth to traverse (direct children are depth 1)
        min_depth: Minimum depth before yielding nodes
        include_filter: Predicate a node must satisfy to be produced
        exclude_filter: Predicate that removes a node from the output
        on_error: Error handler callback
        **kwargs: Additional TraversalConfig attributes

    Yields:
        Node instances that match the criteria

    Example:
        >>> for node in traverse_tree(menu, max_depth=1):
        ...     print(node.name())
    """
    config = TraversalConfig(
        depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
        filter=FilterConfig(include_filter=include_filter, exclude_filter=exclude_filter),
        data_requirements=DataRequirement.FULL_NODE,
        on_error=on_error,
    )
    _apply_kwargs(config, kwargs)

    for node, _ in ExecutionPlan(config).execute(root):
        yield node


def collect_tree_data(
    root: Node,
    data_requirement: DataRequirement = DataRequirement.METADATA,
    **kwargs
) -> Iterator[Tuple[Node, Any]]:
    """Traverse the tree and collect the requested data from each node.

    Args:
        root: Starting node for traversal
        data_requirement: What data to collect
        **kwargs: Additional traversal options (see traverse_tree)

    Yields:
        Tuples of (node, collected_data)

    Example:
        >>> for node, path in collect_tree_data(menu, DataRequirement.PATH):
        ...     print(" > ".join(path))
    """
    config = _build_config_from_kwargs(**kwargs)
    config.data_requirements = data_requirement
    yield from ExecutionPlan(config).execute(root)


def count_nodes(root: Node, **kwargs) -> int:
    """Count descendants of ``root`` that match the traversal options."""
    count = 0
    for _ in traverse_tree(root, **kwargs):
        count += 1
    return count


def find_nodes(root: Node, predicate: Callable[[Node], bool]) -> Iterator[Node]:
    """Find descendants matching a predicate.

    Nodes that cannot answer the predicate are left out rather than raising.

    Example:
        >>> cheap = AttributeTest.at_most("price", Decimal("3.00"))
        >>> [n.name() for n in find_nodes(menu, cheap)]
    """
    return filter_nodes(root, predicate)


def get_items(root: Node, **kwargs) -> Iterator[Node]:
    """Yield every leaf under ``root``, in traversal order."""
    for node in traverse_tree(root, **kwargs):
        if node.is_leaf():
            yield node


def get_tree_stats(root: Node, **kwargs) -> Dict[str, Any]:
    """Get statistics about the subtree below ``root``.

    Returns:
        Dictionary with total_nodes, item_nodes, category_nodes, max_depth,
        per-depth counts in ``depths`` and average_branching (children per
        category)

    Example:
        >>> stats = get_tree_stats(menu)
        >>> print(f"{stats['item_nodes']} items in {stats['category_nodes']} categories")
    """
    stats = {
        'total_nodes': 0,
        'item_nodes': 0,
        'max_depth': 0,
        'depths': {}
    }
    child_links = 0

    for node, info in collect_tree_data(
        root,
        data_requirement=DataRequirement.CHILDREN_COUNT,
        **kwargs
    ):
        depth = info['depth']
        stats['total_nodes'] += 1

        if node.is_leaf():
            stats['item_nodes'] += 1
        else:
            child_links += info['child_count']

        stats['max_depth'] = max(stats['max_depth'], depth)

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['category_nodes'] = stats['total_nodes'] - stats['item_nodes']
    stats['average_branching'] = (
        child_links / stats['category_nodes']
        if stats['category_nodes'] > 0 else 0
    )

    return stats


# Helper functions

def _apply_kwargs(config: TraversalConfig, kwargs: Dict[str, Any]) -> None:
    for key, value in kwargs.items():
        if not hasattr(config, key):
            raise TypeError(f"unknown traversal option: {key!r}")
        setattr(config, key, value)


def _build_config_from_kwargs(**kwargs) -> TraversalConfig:
    """Build a TraversalConfig from keyword arguments."""
    config = TraversalConfig()

    if 'max_depth' in kwargs:
        config.depth.max_depth = kwargs.pop('max_depth')

    if 'min_depth' in kwargs:
        config.depth.min_depth = kwargs.pop('min_depth')

    if 'include_filter' in kwargs:
        config.filter.include_filter = kwargs.pop('include_filter')

    if 'exclude_filter' in kwargs:
        config.filter.exclude_filter = kwargs.pop('exclude_filter')

    if 'on_error' in kwargs:
        config.on_error = kwargs.pop('on_error')

    _apply_kwargs(config, kwargs)
    return config
