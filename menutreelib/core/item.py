"""Leaf nodes of a menu tree."""

from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Union

from .iterator import NodeIterator, NullIterator
from .node import Node

CENT = Decimal("0.01")


def to_price(value: Union[Decimal, int, str, float]) -> Decimal:
    """Convert a price to a two-place Decimal.

    Floats go through str() first so 2.99 stays 2.99 instead of picking up
    binary rounding noise.

    Raises:
        ValueError: If the value is not a number or is negative
    """
    if isinstance(value, bool):
        raise ValueError(f"invalid price: {value!r}")
    if isinstance(value, float):
        value = str(value)
    try:
        price = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise ValueError(f"invalid price: {value!r}") from None
    if not price.is_finite():
        raise ValueError(f"invalid price: {value!r}")
    if price < 0:
        raise ValueError(f"price cannot be negative: {value!r}")
    return price.quantize(CENT)


class Item(Node):
    """A menu entry: name, description, dietary flag and price.

    Items are immutable once built and never have children. Child operations
    raise NotSupportedError, and iterate_children() returns an empty
    NullIterator.
    """

    node_type = "item"

    def __init__(self,
                 name: str,
                 description: str = "",
                 vegetarian: bool = False,
                 price: Union[Decimal, int, str, float] = 0):
        super().__init__(name, description)
        self._vegetarian = bool(vegetarian)
        self._price = to_price(price)
        self._frozen = True

    def __setattr__(self, key: str, value: Any) -> None:
        # The owner back-reference is the only thing that changes after construction
        if getattr(self, "_frozen", False) and key != "_parent":
            raise AttributeError(f"{self.__class__.__name__} is immutable")
        super().__setattr__(key, value)

    def __delattr__(self, key: str) -> None:
        if getattr(self, "_frozen", False):
            raise AttributeError(f"{self.__class__.__name__} is immutable")
        super().__delattr__(key)

    def is_vegetarian(self) -> bool:
        return self._vegetarian

    def price(self) -> Decimal:
        return self._price

    def _attribute_values(self) -> Dict[str, Any]:
        return {
            'name': self._name,
            'description': self._description,
            'vegetarian': self._vegetarian,
            'price': self._price,
        }

    def iterate_children(self) -> NodeIterator:
        return NullIterator()

    def create_iterator(self, max_depth=None) -> NodeIterator:
        return NullIterator()

    def supports_children(self) -> bool:
        return False

    def __repr__(self) -> str:
        return (f"Item(name={self._name!r}, vegetarian={self._vegetarian}, "
                f"price={str(self._price)!r})")
