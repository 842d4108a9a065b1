# services/report_service.py
from models.cart import Cart
from models.receipt import CartReport
# report_service.py is a service module (Service Layer)
# with the class name ReportService, responsible for the "view cart" summary.
class ReportService:
    def __init__(self, pricing_service):
        self.pricing = pricing_service

    def cart_report(self, cart: Cart) -> CartReport:
        # Subtotal, tax and estimated total ignore any discount,
        # the same figures the cart view has always shown.
        items = tuple(cart.items)
        subtotal = cart.subtotal
        tax = self.pricing.tax(subtotal)

        average = None
        most_expensive = None
        if subtotal > 0:
            average = subtotal / len(items)
            most_expensive = most_expensive_item(cart)

        return CartReport(
            items=items,
            subtotal=subtotal,
            tax=tax,
            estimated_total=subtotal + tax,
            average_line_total=average,
            most_expensive=most_expensive,
        )


def most_expensive_item(cart: Cart):
    # Strict ">" so the first of several equally priced items wins.
    best = None
    for item in cart.items:
        if best is None or item.unit_price > best.unit_price:
            best = item
    return best
