# services/cart_store.py
"""
cart_store.py

CartStore is the caller-facing API for one café cart.

It owns a Cart and wires it to:
- PricingService   (tax rate, discount code)
- CheckoutService  (receipt)
- ReportService    (cart view figures)
- CartRepository   (save / load to cart.csv + discount_status.txt)

The store never prints. Results come back as values, problems as
CartError subclasses; the console app decides what to show.
"""

import logging

from data.repository import CartRepository, LoadResult
from models.cart import Cart, LineItem
from models.errors import CartStorageError, CartError
from models.receipt import CartReport, DiscountPreview, Receipt
from services.checkout_service import CheckoutService
from services.pricing_service import DiscountCodeRule, PricingService, compute_tax
from services.report_service import ReportService


class CartStore:
    def __init__(self, pricing, repo=None, logger=None):
        self.cart = Cart()
        self.pricing = pricing
        self.repo = repo or CartRepository()
        self.logger = logger or logging.getLogger("cafe.cart")
        self.checkout_service = CheckoutService(pricing)
        self.report_service = ReportService(pricing)

    @classmethod
    def from_settings(cls, settings, logger=None) -> "CartStore":
        pricing = PricingService(
            tax_rate=settings.tax_rate,
            discount_rule=DiscountCodeRule(settings.discount_code, settings.discount_rate),
        )
        repo = CartRepository(settings.cart_file, settings.status_file)
        return cls(pricing, repo, logger)

    # read accessors
    @property
    def items(self) -> tuple[LineItem, ...]:
        return tuple(self.cart.items)

    @property
    def discount_used(self) -> bool:
        return self.cart.discount_used

    @property
    def is_empty(self) -> bool:
        return not self.cart.items

    def __len__(self):
        return len(self.cart)

    # mutations
    def add_item(self, name: str, unit_price: float, quantity: int) -> LineItem:
        try:
            item = self.cart.add(name, unit_price, quantity)
        except CartError as e:
            self.logger.warning(f"Rejected item {name!r} @ {unit_price} x {quantity}: {e}")
            raise
        self.logger.info(f"Added {item.name} x {item.quantity} @ ${item.unit_price:.2f}")
        return item

    def remove_item(self, one_based_index: int) -> LineItem:
        try:
            item = self.cart.remove(one_based_index)
        except CartError as e:
            self.logger.warning(f"Remove rejected: {e}")
            raise
        self.logger.info(f"Removed '{item.name}' (was #{one_based_index})")
        return item

    def clear_cart(self) -> None:
        self.cart.clear()
        self.logger.info("Cart cleared")

    # computations
    def compute_subtotal(self) -> float:
        return self.cart.subtotal

    def compute_tax(self, amount: float, rate: float | None = None) -> float:
        if rate is None:
            rate = self.pricing.tax_rate
        return compute_tax(amount, rate)

    def apply_discount(self, code: str) -> float:
        # At most once per cart life: the flag, not the code, blocks reuse.
        if not self.pricing.accepts(code, self.cart.discount_used):
            return 0.0
        self.cart.discount_used = True
        amount = self.pricing.discount_for(self.cart.subtotal, True)
        self.logger.info(f"Discount code applied, saved ${amount:.2f}")
        return amount

    def preview_discount(self, discount_amount: float) -> DiscountPreview:
        return self.checkout_service.preview(self.cart, discount_amount)

    def checkout(self) -> Receipt:
        return self.checkout_service.checkout(self.cart)

    def report(self) -> CartReport:
        return self.report_service.cart_report(self.cart)

    # persistence
    def save(self, destination=None, status_destination=None):
        try:
            path = self.repo.save(self.cart, destination, status_destination)
        except CartStorageError:
            self.logger.exception("Saving cart failed")
            raise
        self.logger.info(f"Cart saved to {path} ({len(self.cart)} item(s), discount_used={self.cart.discount_used})")
        return path

    def load(self, source=None, status_source=None) -> LoadResult:
        try:
            result = self.repo.load(self.cart, source, status_source)
        except CartStorageError as e:
            self.logger.error(f"Loading cart failed: {e}")
            raise
        if result.found:
            self.logger.info(f"Cart loaded, {result.count} item(s) restored")
        else:
            self.logger.info("No saved cart found")
        return result
