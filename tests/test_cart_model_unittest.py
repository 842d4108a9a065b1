import os
import unittest
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from models.cart import Cart, LineItem
from models.errors import InvalidIndexError, InvalidItemError


class LineItemTests(unittest.TestCase):
    def test_line_total(self):
        item = LineItem("Coffee", 3.50, 2)
        self.assertAlmostEqual(item.line_total, 7.0)

    def test_free_item_is_allowed(self):
        item = LineItem("Water", 0.0, 1)
        self.assertEqual(item.line_total, 0.0)

    def test_invalid_fields_name_the_field(self):
        cases = [
            (("", 1.0, 1), "name"),
            (("   ", 1.0, 1), "name"),
            (("Tea", -0.01, 1), "unit_price"),
            (("Tea", float("nan"), 1), "unit_price"),
            (("Tea", float("inf"), 1), "unit_price"),
            (("Tea", float("-inf"), 1), "unit_price"),
            (("Tea", 1.0, 0), "quantity"),
            (("Tea", 1.0, -3), "quantity"),
        ]
        for args, field in cases:
            with self.assertRaises(InvalidItemError) as ctx:
                LineItem(*args)
            self.assertEqual(ctx.exception.field, field)

    def test_items_are_immutable(self):
        item = LineItem("Tea", 2.0, 1)
        with self.assertRaises(Exception):
            item.quantity = 5


class CartTests(unittest.TestCase):
    def test_add_keeps_insertion_order(self):
        cart = Cart()
        cart.add("Coffee", 3.50, 2)
        cart.add("Muffin", 2.25, 1)
        self.assertEqual([i.name for i in cart.items], ["Coffee", "Muffin"])
        self.assertAlmostEqual(cart.subtotal, 9.25)

    def test_rejected_add_leaves_cart_unchanged(self):
        cart = Cart()
        cart.add("Coffee", 3.50, 2)
        for args in [("", 1.0, 1), ("Tea", -1.0, 1), ("Tea", 1.0, 0)]:
            with self.assertRaises(InvalidItemError):
                cart.add(*args)
        self.assertEqual(len(cart), 1)

    def test_remove_same_index_twice_removes_both(self):
        cart = Cart()
        cart.add("Coffee", 3.50, 2)
        cart.add("Muffin", 2.25, 1)
        first = cart.remove(1)
        second = cart.remove(1)
        self.assertEqual(first.name, "Coffee")
        self.assertEqual(second.name, "Muffin")
        self.assertEqual(len(cart), 0)

    def test_remove_out_of_range(self):
        cart = Cart()
        cart.add("Coffee", 3.50, 2)
        for index in (0, 2, -1):
            with self.assertRaises(InvalidIndexError):
                cart.remove(index)
        self.assertEqual(len(cart), 1)

    def test_clear_resets_discount_flag(self):
        cart = Cart()
        cart.add("Coffee", 3.50, 2)
        cart.discount_used = True
        cart.clear()
        self.assertEqual(cart.items, [])
        self.assertFalse(cart.discount_used)
        self.assertEqual(cart.subtotal, 0)


if __name__ == '__main__':
    unittest.main()
