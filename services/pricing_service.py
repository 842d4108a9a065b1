# services/pricing_service.py

from __future__ import annotations
from abc import ABC, abstractmethod
import logging

logger = logging.getLogger("cafe.pricing")


def compute_tax(amount: float, rate: float) -> float:
    # Pure: no cart access, the rate comes from the caller.
    return amount * rate


class DiscountRule(ABC):
    #Abstract base class for order-level discounts.
    #A rule looks at the subtotal and the candidate code and returns
    #the amount to take off (0.0 when it does not apply).

    @abstractmethod
    def matches(self, code: str) -> bool:
        pass

    @abstractmethod
    def amount(self, subtotal: float) -> float:
        pass


class DiscountCodeRule(DiscountRule):
    # Percentage off the whole subtotal when the customer enters the code.
    # Example: DiscountCodeRule("STUDENT10", 0.10) -> 10% off.

    def __init__(self, code: str, rate: float):
        if not code or not code.strip():
            raise ValueError("Discount code cannot be empty.")
        if not 0.0 <= rate <= 1.0:
            raise ValueError("Discount rate must be between 0 and 1.")
        self.code = code.strip()
        self.rate = rate

    def matches(self, code: str) -> bool:
        # exact, case-sensitive match
        return (code or "").strip() == self.code

    def amount(self, subtotal: float) -> float:
        return subtotal * self.rate


class PricingService:
    # Holds the tax rate and the single discount rule for a cart.
    # The cart only remembers whether the discount was used; the amount
    # is always recomputed here from the current subtotal.

    def __init__(self, tax_rate: float, discount_rule: DiscountRule):
        if not 0.0 <= tax_rate <= 1.0:
            raise ValueError("Tax rate must be between 0 and 1.")
        self.tax_rate = tax_rate
        self.discount_rule = discount_rule

    def tax(self, amount: float) -> float:
        return compute_tax(amount, self.tax_rate)

    def accepts(self, code: str, already_used: bool) -> bool:
        # True when the code should unlock the discount now.
        # Blank codes are ignored without a log line.
        if not self.discount_rule.matches(code):
            if code and code.strip():
                logger.warning(f"Invalid discount code entered: {code!r}")
            return False

        if already_used:
            logger.warning("Discount code already used for this cart")
            return False

        return True

    def discount_for(self, subtotal: float, discount_used: bool) -> float:
        # Discount in effect for a cart with the given flag.
        if not discount_used:
            return 0.0
        return self.discount_rule.amount(subtotal)
