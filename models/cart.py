# models/cart.py
import math
from dataclasses import dataclass

from models.errors import InvalidIndexError, InvalidItemError


# One purchased product line. Frozen: there is no edit operation,
# an item is either in the cart as added or removed.
@dataclass(frozen=True)
class LineItem:
    name: str
    unit_price: float
    quantity: int

    def __post_init__(self):
        validate_item(self.name, self.unit_price, self.quantity)

    @property
    def line_total(self) -> float:
        return self.unit_price * self.quantity


def validate_item(name: str, unit_price: float, quantity: int) -> None:
    # All three fields are checked before anything is stored.
    if not name or not name.strip():
        raise InvalidItemError("name", "Item name cannot be empty.")
    if not math.isfinite(unit_price):
        raise InvalidItemError("unit_price", "Item price must be a finite number.")
    if unit_price < 0:
        raise InvalidItemError("unit_price", "Item price cannot be negative.")
    if quantity <= 0:
        raise InvalidItemError("quantity", "Item quantity must be at least 1.")


class Cart:
    def __init__(self):
        self.items: list[LineItem] = []
        self.discount_used: bool = False

    def add(self, name: str, unit_price: float, quantity: int) -> LineItem:
        item = LineItem(name, unit_price, quantity)
        self.items.append(item)
        return item

    def remove(self, one_based_index: int) -> LineItem:
        # Later items move down one position after a removal.
        if not 1 <= one_based_index <= len(self.items):
            raise InvalidIndexError(one_based_index, len(self.items))
        return self.items.pop(one_based_index - 1)

    def clear(self):
        self.items.clear()
        self.discount_used = False

    def replace(self, items: list[LineItem], discount_used: bool) -> None:
        # Used by loading: swap in a fully parsed cart in one step.
        self.items = list(items)
        self.discount_used = discount_used

    @property
    def subtotal(self) -> float:
        return sum(item.line_total for item in self.items)

    def __len__(self):
        return len(self.items)
