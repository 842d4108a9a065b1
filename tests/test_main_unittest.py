import os
import tempfile
import unittest
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from config import Settings
from main import CafeApp
from services.cart_store import CartStore


class ConsoleAppTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.settings = Settings(
            cafe_name="Campus Café",
            tax_rate=0.095,
            discount_code="STUDENT10",
            discount_rate=0.10,
            cart_file=os.path.join(self.tmp.name, "cart.csv"),
            status_file=os.path.join(self.tmp.name, "discount_status.txt"),
            log_dir=self.tmp.name,
        )
        self.store = CartStore.from_settings(self.settings)

    def tearDown(self):
        self.tmp.cleanup()

    def run_app(self, *answers):
        # scripted input, captured output
        inputs = iter(answers)
        out = []
        app = CafeApp(self.store, self.settings, lambda prompt="": next(inputs), out.append)
        app.run()
        return "\n".join(out)

    def test_add_view_checkout(self):
        out = self.run_app(
            "1", "Coffee", "3.50", "2",
            "1", "Muffin", "2.25", "1",
            "2",
            "6",
        )
        self.assertIn("Campus Café - Tax Rate: 0.095", out)
        self.assertIn("Added Coffee x 2 @ $3.50", out)
        self.assertIn("Average Line Total: $4.62", out)
        self.assertIn("TOTAL:           $10.13", out)
        # checkout leaves the cart alone
        self.assertEqual(len(self.store), 2)

    def test_bad_numbers_add_nothing(self):
        out = self.run_app("1", "Tea", "cheap", "1", "Tea", "2", "x", "7")
        self.assertEqual(out.count("Invalid input. Price and quantity must be numbers."), 2)
        self.assertTrue(self.store.is_empty)

    def test_non_finite_price_is_invalid_input(self):
        out = self.run_app("1", "Tea", "nan", "1", "Tea", "inf", "7")
        self.assertEqual(out.count("Invalid input. Price and quantity must be numbers."), 2)
        self.assertTrue(self.store.is_empty)

    def test_rejected_item_reports_reason(self):
        out = self.run_app("1", "Tea", "-2", "1", "7")
        self.assertIn("Error: Item price cannot be negative.", out)
        self.assertTrue(self.store.is_empty)

    def test_remove(self):
        out = self.run_app("3", "1", "Coffee", "3.5", "1", "3", "5", "3", "1", "7")
        self.assertIn("Your cart is empty. Nothing to remove.", out)
        self.assertIn("Error: Invalid item index 5", out)
        self.assertIn("Removed 'Coffee' from the cart.", out)

    def test_discount_flow(self):
        out = self.run_app(
            "4",
            "1", "Coffee", "3.50", "2",
            "1", "Muffin", "2.25", "1",
            "4", "WRONG",
            "4", "STUDENT10",
            "4",
            "6",
        )
        self.assertIn("Add items before applying a discount.", out)
        self.assertIn("Error: Invalid discount code.", out)
        self.assertIn("--- Discount Preview ---", out)
        self.assertIn("A discount has already been applied to this order.", out)
        self.assertIn("Discount:       -$0.9", out)

    def test_save_and_load(self):
        out = self.run_app(
            "8",
            "1", "Coffee", "3.50", "2",
            "8",
            "5",
            "9",
            "7",
        )
        self.assertIn("Error: Cannot save: the cart is empty.", out)
        self.assertIn("Cart successfully saved to", out)
        self.assertIn("Cart successfully loaded. 1 items restored.", out)
        self.assertEqual(self.store.items[0].name, "Coffee")

    def test_load_missing_and_corrupt(self):
        out = self.run_app("9", "7")
        self.assertIn("No saved cart found.", out)

        with open(self.settings.cart_file, "w", encoding="utf-8") as f:
            f.write("Name,Price,Quantity\nTea,abc,2\n")
        out = self.run_app("9", "7")
        self.assertIn("Data may be corrupt", out)

    def test_startup_load_is_silent(self):
        with open(self.settings.cart_file, "w", encoding="utf-8") as f:
            f.write("Name,Price,Quantity\nTea,abc,2\n")
        out = []
        app = CafeApp(self.store, self.settings, lambda prompt="": "7", out.append)
        app.startup_load()
        self.assertEqual(out, [])
        self.assertTrue(self.store.is_empty)

    def test_startup_load_survives_undecodable_file(self):
        with open(self.settings.cart_file, "wb") as f:
            f.write(b"Name,Price,Quantity\nT\xffa,1.5,2\n")
        out = []
        app = CafeApp(self.store, self.settings, lambda prompt="": "7", out.append)
        app.startup_load()
        self.assertEqual(out, [])
        self.assertTrue(self.store.is_empty)

    def test_invalid_choice(self):
        out = self.run_app("42", "7")
        self.assertIn("Invalid choice. Please enter a number from 1 to 9.", out)
        self.assertIn("Goodbye!", out)

    def test_checkout_empty_cart_keeps_running(self):
        out = self.run_app("6", "7")
        self.assertIn("Error: Cannot check out: the cart is empty.", out)
        self.assertIn("Goodbye!", out)


if __name__ == '__main__':
    unittest.main()
