# services/checkout_service.py

import logging

from models.cart import Cart
from models.errors import EmptyCartError
from models.receipt import DiscountPreview, Receipt

logger = logging.getLogger("cafe.checkout")


class CheckoutService:
    def __init__(self, pricing_service):
        self.pricing = pricing_service

    def checkout(self, cart: Cart) -> Receipt:
        if not cart.items:
            raise EmptyCartError("Cannot check out: the cart is empty.")

        subtotal = cart.subtotal
        # Recomputed from the flag and the current subtotal, never taken
        # from an earlier discount preview.
        discount = self.pricing.discount_for(subtotal, cart.discount_used)

        taxable = subtotal - discount
        tax = self.pricing.tax(taxable)
        total = taxable + tax

        receipt = Receipt(
            items=tuple(cart.items),
            subtotal=round(subtotal, 2),
            discount=round(discount, 2),
            tax=round(tax, 2),
            total=round(total, 2),
        )

        # The cart and its discount flag are left as they are;
        # the caller decides whether to clear or exit.
        logger.info(
            f"Checkout: {len(cart.items)} line(s), subtotal={receipt.subtotal:.2f}, "
            f"discount={receipt.discount:.2f}, tax={receipt.tax:.2f}, total={receipt.total:.2f}"
        )
        return receipt

    def preview(self, cart: Cart, discount: float) -> DiscountPreview:
        # What the order would cost with this discount taken off. Commits nothing.
        new_subtotal = cart.subtotal - discount
        tax = self.pricing.tax(new_subtotal)
        return DiscountPreview(
            discount=discount,
            subtotal=new_subtotal,
            tax=tax,
            total=new_subtotal + tax,
        )
