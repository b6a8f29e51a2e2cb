"""MenuTreeLib - Composite menu trees with lazy depth-first iteration.

MenuTreeLib models a menu as a tree of categories and items and walks it
with a lazy, stack-based pre-order iterator that never materializes the
whole tree.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from menutreelib import Category, Item, AttributeTest, filter_nodes

    menu = Category("All Menus")
    lunch = menu.add(Category("Lunch"))
    lunch.add(Item("Veg Burger", vegetarian=True, price="3.49"))

    veg = AttributeTest.equals("vegetarian", True)
    for node in filter_nodes(menu, veg):
        print(node.name())
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

import logging

__version__ = "0.1.0"

from .errors import (
    MenuTreeError,
    NotSupportedError,
    EndOfSequenceError,
    InvalidStructureError,
    IndexOutOfRangeError,
    NotFoundError,
    ConcurrentModificationError,
    CapabilityMismatchError,
)
from .core import (
    Node,
    AttributeTest,
    Item,
    Category,
    NodeIterator,
    NullIterator,
    ChildIterator,
    DepthFirstIterator,
    DataCollector,
    NameCollector,
    MetadataCollector,
    FullNodeCollector,
    ChildCountCollector,
    PathCollector,
    AggregateCollector,
    SumCollector,
    MaxCollector,
    CustomCollector,
)
from .config import (
    TraversalConfig,
    DataRequirement,
    FilterConfig,
    DepthConfig,
    PerformanceConfig,
    ReportConfig,
)
from .planning import ExecutionPlan
from .report import filter_nodes, ReportGenerator
from .api import (
    traverse_tree,
    collect_tree_data,
    count_nodes,
    find_nodes,
    get_items,
    get_tree_stats,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Errors
    'MenuTreeError',
    'NotSupportedError',
    'EndOfSequenceError',
    'InvalidStructureError',
    'IndexOutOfRangeError',
    'NotFoundError',
    'ConcurrentModificationError',
    'CapabilityMismatchError',
    # Core
    'Node',
    'AttributeTest',
    'Item',
    'Category',
    'NodeIterator',
    'NullIterator',
    'ChildIterator',
    'DepthFirstIterator',
    'DataCollector',
    'NameCollector',
    'MetadataCollector',
    'FullNodeCollector',
    'ChildCountCollector',
    'PathCollector',
    'AggregateCollector',
    'SumCollector',
    'MaxCollector',
    'CustomCollector',
    # Config
    'TraversalConfig',
    'DataRequirement',
    'FilterConfig',
    'DepthConfig',
    'PerformanceConfig',
    'ReportConfig',
    'ExecutionPlan',
    # Consumers and API
    'filter_nodes',
    'ReportGenerator',
    'traverse_tree',
    'collect_tree_data',
    'count_nodes',
    'find_nodes',
    'get_items',
    'get_tree_stats',
]
