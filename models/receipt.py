# models/receipt.py
from dataclasses import dataclass

from models.cart import LineItem
# Receipt and report records built from a cart.


@dataclass(frozen=True)
class Receipt:
    items: tuple[LineItem, ...]
    subtotal: float
    discount: float
    tax: float
    total: float

    @property
    def has_discount(self) -> bool:
        return self.discount > 0


@dataclass(frozen=True)
class DiscountPreview:
    discount: float
    subtotal: float
    tax: float
    total: float


@dataclass(frozen=True)
class CartReport:
    items: tuple[LineItem, ...]
    subtotal: float
    tax: float
    estimated_total: float
    average_line_total: float | None = None
    most_expensive: LineItem | None = None

    @property
    def item_count(self) -> int:
        return len(self.items)
