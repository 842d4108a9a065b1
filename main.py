from config import load_settings
from models.errors import CartError
from services.cart_store import CartStore
from utils.formatters import banner, cart_lines, money, preview_lines, receipt_lines
from utils.logger import setup_logger
from utils.validators import parse_int, parse_price

MENU = [
    "1) Add item",
    "2) View cart",
    "3) Remove item",
    "4) Apply Discount",
    "5) Clear Cart",
    "6) Checkout",
    "7) Quit",
    "8) Save Cart",
    "9) Load Cart",
]


class CafeApp:
    def __init__(self, store: CartStore, settings, input_func=input, output_func=print):
        self.store = store
        self.settings = settings
        self.input = input_func
        self.output = output_func
        self.logger = store.logger

        self.actions = {
            "1": self.menu_add_item,
            "2": self.menu_view_cart,
            "3": self.menu_remove_item,
            "4": self.menu_apply_discount,
            "5": self.menu_clear_cart,
            "8": self.menu_save_cart,
            "9": self.menu_load_cart,
        }

    def show(self, *lines: str):
        for line in lines:
            self.output(line)

    def error(self, message: str):
        self.output(f"Error: {message}")

    def run(self):
        self.show(*banner(self.settings.cafe_name, self.settings.tax_rate))
        while True:
            self.show("", *MENU)
            choice = self.input("Choose: ").strip()

            if choice == "6":
                if self.menu_checkout():
                    break
                continue
            if choice == "7":
                self.show(f"Goodbye! Thank you for using the {self.settings.cafe_name} manager.")
                break

            action = self.actions.get(choice)
            if action is None:
                self.show("Invalid choice. Please enter a number from 1 to 9.")
                continue
            action()

    def startup_load(self):
        # Best effort: a missing or broken cart file just means an empty cart.
        try:
            self.store.load()
        except CartError as e:
            self.logger.warning(f"Startup load skipped: {e}")

    # menu actions
    def menu_add_item(self):
        name = self.input("Item name: ").strip()

        price = parse_price(self.input("Item price: "))
        if not price.ok:
            self.show("Invalid input. Price and quantity must be numbers.")
            return
        qty = parse_int(self.input("Quantity: "), "Quantity")
        if not qty.ok:
            self.show("Invalid input. Price and quantity must be numbers.")
            return

        try:
            item = self.store.add_item(name, price.value, qty.value)
        except CartError as e:
            self.error(str(e))
            return
        self.show(f"Added {item.name} x {item.quantity} @ {money(item.unit_price)}")

    def menu_view_cart(self):
        self.show(*cart_lines(self.store.report()))

    def menu_remove_item(self):
        if self.store.is_empty:
            self.show("Your cart is empty. Nothing to remove.")
            return

        index = parse_int(self.input("Enter item number to remove: "), "Item number")
        if not index.ok:
            self.show("Invalid input. Please enter a valid number!")
            return

        try:
            item = self.store.remove_item(index.value)
        except CartError as e:
            self.error(str(e))
            return
        self.show(f"Removed '{item.name}' from the cart.")

    def menu_apply_discount(self):
        if self.store.is_empty:
            self.show("Your cart is empty. Add items before applying a discount.")
            return
        if self.store.discount_used:
            self.show("A discount has already been applied to this order.")
            return

        code = self.input("Enter discount code: ")
        amount = self.store.apply_discount(code)

        if self.store.discount_used:
            self.show(f"{self.settings.discount_code} discount applied!")
            if amount > 0:
                self.show(*preview_lines(self.store.preview_discount(amount)))
        elif code.strip():
            self.error("Invalid discount code.")

    def menu_clear_cart(self):
        self.store.clear_cart()
        self.show("", "Your cart has been cleared.")

    def menu_checkout(self) -> bool:
        # Returns True when the session should end.
        try:
            receipt = self.store.checkout()
        except CartError as e:
            self.error(str(e))
            return False
        self.show("", "CHECKOUT", *receipt_lines(receipt, self.settings.cafe_name))
        return True

    def menu_save_cart(self):
        try:
            path = self.store.save()
        except CartError as e:
            self.error(str(e))
            return
        self.show("", f"Cart successfully saved to {path} and status saved.")

    def menu_load_cart(self):
        try:
            result = self.store.load()
        except CartError as e:
            self.error(str(e))
            return
        if not result.found:
            self.show("", "No saved cart found.")
            return
        self.show("", f"Cart successfully loaded. {result.count} items restored.")


def main():
    settings = load_settings()
    logger = setup_logger(settings.log_dir)
    store = CartStore.from_settings(settings, logger.getChild("cart"))

    app = CafeApp(store, settings)
    app.startup_load()
    app.run()


if __name__ == "__main__":
    main()
