"""Configuration system for MenuTreeLib.

This module defines how users specify their traversal requirements,
including what data they need, how to filter nodes, and resource limits,
plus the formatting options of the report generator.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional, Set

from .errors import NotSupportedError

logger = logging.getLogger(__name__)


class DataRequirement(Enum):
    """Specifies what data is collected from each visited node."""
    NAME_ONLY = "name"                   # Just node names
    METADATA = "metadata"                # Attribute snapshot
    CHILDREN_COUNT = "children_count"    # Number of direct children
    FULL_NODE = "full"                   # Node objects
    PATH = "path"                        # Names from root to node
    CUSTOM = "custom"                    # User-defined collector


@dataclass
class FilterConfig:
    """Configuration for filtering nodes during traversal.

    Filters may be AttributeTests or plain callables taking a node. A node
    that cannot answer a filter (NotSupportedError) is treated as not
    matching it: it fails an include filter and passes an exclude filter.
    """

    include_filter: Optional[Callable[[Any], bool]] = None  # Include predicate
    exclude_filter: Optional[Callable[[Any], bool]] = None  # Exclude predicate

    @staticmethod
    def _probe(predicate: Callable[[Any], bool], node) -> bool:
        try:
            return bool(node.matches(predicate))
        except NotSupportedError as e:
            logger.debug("%r cannot answer %s: %s", node, predicate, e)
            return False

    def should_include(self, node) -> bool:
        """Check if a node should be included based on filters.

        Args:
            node: Node to check

        Returns:
            True if node passes all filters
        """
        # Exclusion takes precedence
        if self.exclude_filter is not None and self._probe(self.exclude_filter, node):
            return False

        if self.include_filter is not None:
            return self._probe(self.include_filter, node)

        return True


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering.

    Depths are relative to the traversal start: its direct children are at
    depth 1. The start node itself is never produced.
    """

    min_depth: int = 0                          # Minimum depth to yield
    max_depth: Optional[int] = None             # Maximum depth to traverse
    specific_depths: Optional[Set[int]] = None  # Only these specific depths

    def should_yield(self, depth: int) -> bool:
        if self.specific_depths is not None:
            return depth in self.specific_depths

        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False

        return True

    def should_explore(self, depth: int) -> bool:
        """Check if children of a node at this depth should be visited."""
        if self.specific_depths is not None:
            return any(d > depth for d in self.specific_depths)

        if self.max_depth is not None:
            return depth < self.max_depth

        return True

    def traversal_limit(self) -> Optional[int]:
        """Deepest level the iterator needs to reach, or None for unlimited."""
        if self.specific_depths is not None:
            return max(self.specific_depths) if self.specific_depths else 0
        return self.max_depth


@dataclass
class PerformanceConfig:
    """Configuration for resource limits."""

    max_nodes: Optional[int] = None  # Maximum nodes to produce

    def check_node_limit(self, node_count: int) -> bool:
        """Return True while node_count is within the limit (or no limit is set)."""
        if self.max_nodes is None:
            return True
        return node_count <= self.max_nodes


@dataclass
class ReportConfig:
    """Formatting options for ReportGenerator."""

    indent: str = "  "
    currency_symbol: str = "$"
    vegetarian_marker: str = "(v)"
    separator: str = "--"
    include_descriptions: bool = True


@dataclass
class TraversalConfig:
    """Complete configuration for a tree traversal.

    This is the primary way users specify what they want from a traversal.
    The ExecutionPlan validates it before any node is visited.
    """

    # Depth control
    depth: DepthConfig = field(default_factory=DepthConfig)

    # Node filtering
    filter: FilterConfig = field(default_factory=FilterConfig)

    # Data collection
    data_requirements: DataRequirement = DataRequirement.FULL_NODE
    custom_collector: Optional[Any] = None  # Custom collector instance

    # Limits
    performance: PerformanceConfig = field(default_factory=PerformanceConfig)

    # Error handling
    on_error: Optional[Callable[[Any, Exception], None]] = None
    skip_errors: bool = True  # Continue on collection errors vs fail fast

    # Progress reporting
    progress_callback: Optional[Callable[[int], None]] = None
    progress_interval: int = 100  # Report every N nodes

    @classmethod
    def shallow_scan(cls, max_depth: int = 1) -> 'TraversalConfig':
        """Config that stops after the first ``max_depth`` levels."""
        return cls(depth=DepthConfig(max_depth=max_depth))

    @classmethod
    def items_only(cls, data_requirement: DataRequirement = DataRequirement.FULL_NODE) -> 'TraversalConfig':
        """Config that produces leaves only, at any depth."""
        return cls(
            filter=FilterConfig(include_filter=lambda node: node.is_leaf()),
            data_requirements=data_requirement,
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        if self.depth.specific_depths is not None:
            if any(d < 0 for d in self.depth.specific_depths):
                errors.append("specific_depths cannot contain negative depths")

        if self.performance.max_nodes is not None and self.performance.max_nodes <= 0:
            errors.append("max_nodes must be positive")

        if self.progress_interval <= 0:
            errors.append("progress_interval must be positive")

        if self.data_requirements == DataRequirement.CUSTOM and self.custom_collector is None:
            errors.append("custom_collector required when data_requirements is CUSTOM")

        return errors
