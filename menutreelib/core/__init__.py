"""Core tree components: nodes, iterators and collectors."""

from .iterator import NodeIterator, NullIterator, ChildIterator, DepthFirstIterator
from .node import Node, AttributeTest
from .item import Item
from .category import Category
from .collector import (
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

__all__ = [
    'NodeIterator',
    'NullIterator',
    'ChildIterator',
    'DepthFirstIterator',
    'Node',
    'AttributeTest',
    'Item',
    'Category',
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
]
