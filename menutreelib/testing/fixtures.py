"""Test fixtures for MenuTreeLib consumers.

These helpers build well-known trees and observe iterators without reaching
into their internals, so projects that consume MenuTreeLib can reuse them in
their own test suites.
"""

from typing import Dict, List, Tuple

from ..core.category import Category
from ..core.item import Item
from ..core.iterator import NodeIterator
from ..core.node import Node


def build_sample_menu() -> Tuple[Category, Dict[str, Node]]:
    """Build the small reference menu.

    Structure::

        Root
        ├── CategoryA
        │   ├── Veg Burger   (vegetarian, 3.49)
        │   └── BLT          (2.99)
        └── Pie              (vegetarian, 1.59)

    Returns:
        (root, nodes) where nodes maps each name to its node
    """
    root = Category("Root", "All menus")
    category_a = root.add(Category("CategoryA", "Lunch"))
    veg_burger = category_a.add(
        Item("Veg Burger", "Vegetarian burger on a whole wheat bun", True, "3.49"))
    blt = category_a.add(
        Item("BLT", "Bacon with lettuce & tomato on whole wheat", False, "2.99"))
    pie = root.add(Item("Pie", "Apple pie with a flakey crust", True, "1.59"))

    nodes = {node.name(): node for node in (root, category_a, veg_burger, blt, pie)}
    return root, nodes


def build_full_menu() -> Category:
    """Build a three-restaurant menu with a nested dessert menu.

    Structure::

        All Menus
        ├── Pancake House Menu (4 items)
        ├── Diner Menu (4 items, then Dessert Menu with 3 items)
        └── Cafe Menu (3 items)
    """
    all_menus = Category("All Menus", "All menus combined")

    pancake = all_menus.add(Category("Pancake House Menu", "Breakfast"))
    pancake.add(Item("K&B's Pancake Breakfast", "Pancakes with scrambled eggs and toast", True, "2.99"))
    pancake.add(Item("Regular Pancake Breakfast", "Pancakes with fried eggs, sausage", False, "2.99"))
    pancake.add(Item("Blueberry Pancakes", "Pancakes made with fresh blueberries", True, "3.49"))
    pancake.add(Item("Waffles", "Waffles with your choice of blueberries or strawberries", True, "3.59"))

    diner = all_menus.add(Category("Diner Menu", "Lunch"))
    diner.add(Item("Vegetarian BLT", "(Fakin') Bacon with lettuce & tomato on whole wheat", True, "2.99"))
    diner.add(Item("BLT", "Bacon with lettuce & tomato on whole wheat", False, "2.99"))
    diner.add(Item("Soup of the day", "A bowl of the soup of the day, with a side of potato salad", False, "3.29"))
    diner.add(Item("Hot Dog", "A hot dog, with sauerkraut, relish, onions, topped with cheese", False, "3.05"))

    dessert = diner.add(Category("Dessert Menu", "Dessert of course!"))
    dessert.add(Item("Apple Pie", "Apple pie with a flakey crust, topped with vanilla icecream", True, "1.59"))
    dessert.add(Item("Cheesecake", "Creamy New York cheesecake, with a chocolate graham crust", True, "1.99"))
    dessert.add(Item("Sorbet", "A scoop of raspberry and a scoop of lime", True, "1.89"))

    cafe = all_menus.add(Category("Cafe Menu", "Dinner"))
    cafe.add(Item("Veggie Burger and Air Fries", "Veggie burger on a whole wheat bun, lettuce, tomato, and fries", True, "3.99"))
    cafe.add(Item("Soup of the day", "A cup of the soup of the day, with a side salad", False, "3.69"))
    cafe.add(Item("Burrito", "A large burrito, with whole pinto beans, salsa, guacamole", True, "4.29"))

    return all_menus


def build_deep_chain(depth: int) -> Tuple[Category, Item]:
    """Build a chain of ``depth`` nested categories ending in one item.

    Returns:
        (root, leaf) where the leaf sits at depth ``depth + 1`` below root
    """
    root = Category("Level 0")
    current = root
    for level in range(1, depth + 1):
        current = current.add(Category(f"Level {level}"))
    leaf = current.add(Item("Leaf", price="1.00"))
    return root, leaf


class IteratorProbe:
    """Drains an iterator while recording how it behaved.

    Records every node produced, how many has_next() calls were made, and
    the largest frame stack seen (for iterators exposing ``stack_size``).

    Example:
        probe = IteratorProbe(menu.create_iterator())
        names = [n.name() for n in probe.drain()]
        assert probe.max_stack_size <= expected_depth + 1
    """

    def __init__(self, iterator: NodeIterator):
        self._iterator = iterator
        self.produced: List[Node] = []
        self.has_next_calls = 0
        self.max_stack_size = getattr(iterator, 'stack_size', 0)

    def _observe_stack(self) -> None:
        size = getattr(self._iterator, 'stack_size', 0)
        if size > self.max_stack_size:
            self.max_stack_size = size

    def has_next(self) -> bool:
        self.has_next_calls += 1
        result = self._iterator.has_next()
        self._observe_stack()
        return result

    def next(self) -> Node:
        node = self._iterator.next()
        self.produced.append(node)
        self._observe_stack()
        return node

    def drain(self) -> List[Node]:
        """Pull until exhausted and return the nodes produced by this call."""
        start = len(self.produced)
        while self.has_next():
            self.next()
        return self.produced[start:]

    def names(self) -> List[str]:
        return [node.name() for node in self.produced]
