"""Execution planning for MenuTreeLib.

The ExecutionPlan validates a TraversalConfig and coordinates the actual
traversal: the depth-first iterator produces nodes, the configuration decides
which ones are kept, and a collector turns each kept node into data.
"""

import logging
from typing import Any, Dict, Iterator, List, Tuple

from .config import DataRequirement, TraversalConfig
from .core.collector import (
    ChildCountCollector,
    DataCollector,
    FullNodeCollector,
    MetadataCollector,
    NameCollector,
    PathCollector,
)
from .core.iterator import DepthFirstIterator
from .core.node import Node
from .errors import CapabilityMismatchError, NotSupportedError

logger = logging.getLogger(__name__)


class ExecutionPlan:
    """Validated execution plan for a tree traversal.

    The ExecutionPlan is the bridge between user intent (TraversalConfig)
    and execution. Configuration problems surface when the plan is built,
    before any node is visited.

    Args:
        config: Traversal configuration

    Raises:
        CapabilityMismatchError: If the configuration is invalid
    """

    def __init__(self, config: TraversalConfig):
        self.config = config

        config_errors = config.validate()
        if config_errors:
            raise CapabilityMismatchError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.collector = self._select_collector()

        # Execution state
        self.nodes_processed = 0
        self.nodes_skipped = 0
        self.errors_encountered: List[Tuple[str, str]] = []

    def _select_collector(self) -> DataCollector:
        if self.config.data_requirements == DataRequirement.CUSTOM:
            return self.config.custom_collector

        collector_map = {
            DataRequirement.NAME_ONLY: NameCollector,
            DataRequirement.METADATA: MetadataCollector,
            DataRequirement.FULL_NODE: FullNodeCollector,
            DataRequirement.CHILDREN_COUNT: ChildCountCollector,
            DataRequirement.PATH: PathCollector,
        }

        return collector_map[self.config.data_requirements]()

    def _handle_error(self, node: Node, error: Exception) -> None:
        """Record a per-node error and apply the configured policy.

        Raises:
            Exception: The original error when skip_errors is False
        """
        self.errors_encountered.append((node.name(), str(error)))
        logger.debug("Error while processing %r: %s", node, error)

        if self.config.on_error:
            self.config.on_error(node, error)

        if not self.config.skip_errors:
            raise error

    def _report_progress(self) -> None:
        if self.config.progress_callback:
            if self.nodes_processed % self.config.progress_interval == 0:
                self.config.progress_callback(self.nodes_processed)

    def execute(self, root: Node) -> Iterator[Tuple[Node, Any]]:
        """Execute the traversal plan.

        Nodes are produced lazily in pre-order; ``root`` itself is never
        produced. Errors raised by the iterator (such as
        ConcurrentModificationError) always propagate. Errors raised while
        filtering or collecting a single node go through on_error and are
        re-raised only when skip_errors is False. A collector answering
        NotSupportedError leaves the node out without counting an error.

        Args:
            root: Node whose descendants are traversed

        Yields:
            Tuples of (node, collected_data)
        """
        self.nodes_processed = 0
        self.nodes_skipped = 0
        self.errors_encountered = []

        depth_config = self.config.depth
        iterator = DepthFirstIterator(root, max_depth=depth_config.traversal_limit())

        while iterator.has_next():
            node = iterator.next()
            depth = iterator.depth
            try:
                if not depth_config.should_yield(depth):
                    continue

                if not self.config.filter.should_include(node):
                    self.nodes_skipped += 1
                    continue

                try:
                    data = self.collector.collect(node, depth)
                except NotSupportedError as e:
                    logger.debug("Collector skipped %r: %s", node, e)
                    self.nodes_skipped += 1
                    continue

            except Exception as e:
                self._handle_error(node, e)
                continue

            if not self.config.performance.check_node_limit(self.nodes_processed + 1):
                logger.debug("Node limit of %d reached", self.config.performance.max_nodes)
                break

            self.nodes_processed += 1
            self._report_progress()
            yield (node, data)

        logger.debug("Traversal of %r finished: %s", root, self.get_summary())

    def get_summary(self) -> Dict[str, Any]:
        """Summary of the plan and its last execution.

        Useful for debugging and logging.
        """
        return {
            'data_requirements': self.config.data_requirements.value,
            'max_depth': self.config.depth.max_depth,
            'min_depth': self.config.depth.min_depth,
            'max_nodes': self.config.performance.max_nodes,
            'collector': self.collector.__class__.__name__,
            'collector_requires_children': self.collector.requires_children(),
            'nodes_processed': self.nodes_processed,
            'nodes_skipped': self.nodes_skipped,
            'errors': len(self.errors_encountered),
        }
