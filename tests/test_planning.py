"""Unit tests for TraversalConfig validation and ExecutionPlan execution.

Tests depth limits, filters, node limits, collectors, error policies and
progress reporting.
"""

import unittest
from decimal import Decimal

from menutreelib import (
    AttributeTest,
    CapabilityMismatchError,
    ConcurrentModificationError,
    CustomCollector,
    DataRequirement,
    DepthConfig,
    ExecutionPlan,
    FilterConfig,
    Item,
    PerformanceConfig,
    TraversalConfig,
)
from menutreelib.core.collector import FullNodeCollector, MetadataCollector, PathCollector
from menutreelib.testing import build_full_menu, build_sample_menu


def run(config, root):
    return [node.name() for node, _ in ExecutionPlan(config).execute(root)]


class TestConfigValidation(unittest.TestCase):
    """Invalid configurations are rejected before traversal starts."""

    def test_defaults_are_valid(self):
        self.assertEqual(TraversalConfig().validate(), [])

    def test_negative_min_depth(self):
        config = TraversalConfig(depth=DepthConfig(min_depth=-1))
        self.assertIn("min_depth cannot be negative", config.validate())
        with self.assertRaises(CapabilityMismatchError):
            ExecutionPlan(config)

    def test_max_below_min(self):
        config = TraversalConfig(depth=DepthConfig(min_depth=3, max_depth=1))
        self.assertIn("max_depth cannot be less than min_depth", config.validate())

    def test_non_positive_max_nodes(self):
        config = TraversalConfig(performance=PerformanceConfig(max_nodes=0))
        with self.assertRaises(CapabilityMismatchError):
            ExecutionPlan(config)

    def test_custom_requires_collector(self):
        config = TraversalConfig(data_requirements=DataRequirement.CUSTOM)
        with self.assertRaises(CapabilityMismatchError) as ctx:
            ExecutionPlan(config)
        self.assertIn("custom_collector", str(ctx.exception))

    def test_multiple_errors_reported_together(self):
        config = TraversalConfig(
            depth=DepthConfig(min_depth=-1),
            performance=PerformanceConfig(max_nodes=-5),
            progress_interval=0,
        )
        self.assertEqual(len(config.validate()), 3)

    def test_capability_mismatch_is_value_error(self):
        with self.assertRaises(ValueError):
            ExecutionPlan(TraversalConfig(depth=DepthConfig(max_depth=-2)))


class TestCollectorSelection(unittest.TestCase):

    def test_mapping(self):
        self.assertIsInstance(ExecutionPlan(TraversalConfig()).collector, FullNodeCollector)
        plan = ExecutionPlan(TraversalConfig(data_requirements=DataRequirement.METADATA))
        self.assertIsInstance(plan.collector, MetadataCollector)
        plan = ExecutionPlan(TraversalConfig(data_requirements=DataRequirement.PATH))
        self.assertIsInstance(plan.collector, PathCollector)

    def test_custom_collector_used(self):
        collector = CustomCollector(lambda node, depth: (node.name(), depth))
        config = TraversalConfig(data_requirements=DataRequirement.CUSTOM, custom_collector=collector)
        root, _ = build_sample_menu()
        data = [item for _, item in ExecutionPlan(config).execute(root)]
        self.assertEqual(data, [("CategoryA", 1), ("Veg Burger", 2), ("BLT", 2), ("Pie", 1)])


class TestDepthControl(unittest.TestCase):

    def setUp(self):
        self.root, self.nodes = build_sample_menu()

    def test_default_produces_everything_below_root(self):
        self.assertEqual(run(TraversalConfig(), self.root), ["CategoryA", "Veg Burger", "BLT", "Pie"])

    def test_max_depth(self):
        self.assertEqual(run(TraversalConfig.shallow_scan(), self.root), ["CategoryA", "Pie"])

    def test_min_depth(self):
        config = TraversalConfig(depth=DepthConfig(min_depth=2))
        self.assertEqual(run(config, self.root), ["Veg Burger", "BLT"])

    def test_specific_depths(self):
        config = TraversalConfig(depth=DepthConfig(specific_depths={2}))
        self.assertEqual(run(config, self.root), ["Veg Burger", "BLT"])

    def test_empty_specific_depths(self):
        config = TraversalConfig(depth=DepthConfig(specific_depths=set()))
        self.assertEqual(run(config, self.root), [])

    def test_depth_config_helpers(self):
        depth = DepthConfig(max_depth=2)
        self.assertTrue(depth.should_explore(1))
        self.assertFalse(depth.should_explore(2))
        self.assertTrue(depth.should_yield(2))
        self.assertFalse(depth.should_yield(3))
        self.assertEqual(DepthConfig(specific_depths={1, 4}).traversal_limit(), 4)
        self.assertIsNone(DepthConfig().traversal_limit())


class TestFiltering(unittest.TestCase):

    def setUp(self):
        self.root, self.nodes = build_sample_menu()

    def test_include_attribute_test(self):
        config = TraversalConfig(filter=FilterConfig(include_filter=AttributeTest.equals("vegetarian", True)))
        plan = ExecutionPlan(config)
        self.assertEqual([n.name() for n, _ in plan.execute(self.root)], ["Veg Burger", "Pie"])
        self.assertEqual(plan.nodes_skipped, 2)
        self.assertEqual(plan.errors_encountered, [])

    def test_exclude_attribute_test(self):
        # Categories cannot answer, so they are not excluded
        config = TraversalConfig(filter=FilterConfig(exclude_filter=AttributeTest.equals("vegetarian", True)))
        self.assertEqual(run(config, self.root), ["CategoryA", "BLT"])

    def test_exclusion_takes_precedence(self):
        config = TraversalConfig(filter=FilterConfig(
            include_filter=AttributeTest.equals("vegetarian", True),
            exclude_filter=AttributeTest.contains("name", "pie"),
        ))
        self.assertEqual(run(config, self.root), ["Veg Burger"])

    def test_items_only(self):
        self.assertEqual(run(TraversalConfig.items_only(), self.root), ["Veg Burger", "BLT", "Pie"])

    def test_excluded_category_still_descended(self):
        config = TraversalConfig(filter=FilterConfig(exclude_filter=lambda node: node.supports_children()))
        self.assertEqual(run(config, self.root), ["Veg Burger", "BLT", "Pie"])


class TestLimitsAndProgress(unittest.TestCase):

    def test_max_nodes(self):
        root = build_full_menu()
        config = TraversalConfig(performance=PerformanceConfig(max_nodes=2))
        plan = ExecutionPlan(config)
        self.assertEqual([n.name() for n, _ in plan.execute(root)],
                         ["Pancake House Menu", "K&B's Pancake Breakfast"])
        self.assertEqual(plan.nodes_processed, 2)

    def test_progress_callback(self):
        reported = []
        config = TraversalConfig(progress_callback=reported.append, progress_interval=5)
        list(ExecutionPlan(config).execute(build_full_menu()))
        self.assertEqual(reported, [5, 10, 15])

    def test_summary(self):
        plan = ExecutionPlan(TraversalConfig.shallow_scan())
        list(plan.execute(build_full_menu()))
        summary = plan.get_summary()
        self.assertEqual(summary['nodes_processed'], 3)
        self.assertEqual(summary['max_depth'], 1)
        self.assertEqual(summary['collector'], 'FullNodeCollector')
        self.assertEqual(summary['data_requirements'], 'full')
        self.assertFalse(summary['collector_requires_children'])

    def test_summary_reports_subtree_collector(self):
        plan = ExecutionPlan(TraversalConfig(data_requirements=DataRequirement.CHILDREN_COUNT))
        self.assertTrue(plan.get_summary()['collector_requires_children'])


class TestErrorPolicy(unittest.TestCase):

    def setUp(self):
        self.root, self.nodes = build_sample_menu()

        def collect(node, depth):
            if node.name() == "BLT":
                raise ValueError("no bacon today")
            return node.name()

        self.collector = CustomCollector(collect)

    def config(self, **kwargs):
        return TraversalConfig(data_requirements=DataRequirement.CUSTOM,
                               custom_collector=self.collector, **kwargs)

    def test_skip_errors(self):
        seen = []
        plan = ExecutionPlan(self.config(on_error=lambda node, error: seen.append((node, error))))
        self.assertEqual([n.name() for n, _ in plan.execute(self.root)], ["CategoryA", "Veg Burger", "Pie"])
        self.assertEqual(plan.errors_encountered, [("BLT", "no bacon today")])
        self.assertEqual(len(seen), 1)
        self.assertIs(seen[0][0], self.nodes["BLT"])
        self.assertIsInstance(seen[0][1], ValueError)

    def test_fail_fast(self):
        plan = ExecutionPlan(self.config(skip_errors=False))
        results = plan.execute(self.root)
        self.assertEqual(next(results)[1], "CategoryA")
        self.assertEqual(next(results)[1], "Veg Burger")
        with self.assertRaises(ValueError):
            next(results)

    def test_not_supported_from_collector_skips_node(self):
        collector = CustomCollector(lambda node, depth: node.price())
        plan = ExecutionPlan(TraversalConfig(data_requirements=DataRequirement.CUSTOM,
                                             custom_collector=collector))
        data = [(n.name(), price) for n, price in plan.execute(self.root)]
        self.assertEqual(data, [("Veg Burger", Decimal("3.49")), ("BLT", Decimal("2.99")),
                                ("Pie", Decimal("1.59"))])
        self.assertEqual(plan.nodes_skipped, 1)
        self.assertEqual(plan.errors_encountered, [])

    def test_modification_always_propagates(self):
        plan = ExecutionPlan(TraversalConfig())
        results = plan.execute(self.root)
        next(results)
        self.root.add(Item("Late"))
        with self.assertRaises(ConcurrentModificationError):
            next(results)


if __name__ == "__main__":
    unittest.main()
