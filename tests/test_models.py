import unittest

from data.models import MAX_PRICE, MAX_QUANTITY, Item
from utils.helpers import format_item, require_uint


class TestItem(unittest.TestCase):
    def test_fields(self):
        item = Item("Apple", 100, 50)
        self.assertEqual(item.as_tuple(), ("Apple", 100, 50))
        self.assertEqual(repr(item), "Item(name='Apple', price=100, quantity=50)")

    def test_equality(self):
        self.assertEqual(Item("Apple", 100, 50), Item("Apple", 100, 50))
        self.assertNotEqual(Item("Apple", 100, 50), Item("Apple", 100, 51))
        self.assertNotEqual(Item("Apple", 100, 50), ("Apple", 100, 50))

    def test_from_dict(self):
        item = Item.from_dict({"name": "Orange", "price": 150, "quantity": 30})
        self.assertEqual(item, Item("Orange", 150, 30))

    def test_from_dict_missing_field(self):
        with self.assertRaises(ValueError):
            Item.from_dict({"name": "Orange", "price": 150})

    def test_width_limits(self):
        self.assertEqual(Item("Max", MAX_PRICE, MAX_QUANTITY).as_tuple(), ("Max", 2 ** 256 - 1, 2 ** 40 - 1))
        with self.assertRaises(ValueError):
            Item("Too Much", 2 ** 256, 1)
        with self.assertRaises(ValueError):
            Item("Too Many", 1, 2 ** 40)
        with self.assertRaises(ValueError):
            Item("Negative", -1, 1)

    def test_quantity_width_is_not_price_width(self):
        Item("Wide Price", 2 ** 40, 1)
        with self.assertRaises(ValueError):
            Item("Wide Quantity", 1, 2 ** 40)

    def test_field_types(self):
        with self.assertRaises(TypeError):
            Item(None, 1, 1)
        with self.assertRaises(TypeError):
            Item("Float", 1.5, 1)
        with self.assertRaises(TypeError):
            Item("Bool", 1, True)

    def test_copy_is_independent(self):
        item = Item("Apple", 100, 50)
        clone = item.copy()
        clone.quantity = 1
        self.assertEqual(item.quantity, 50)


class TestHelpers(unittest.TestCase):
    def test_require_uint(self):
        self.assertEqual(require_uint(0, 8, "x"), 0)
        self.assertEqual(require_uint(255, 8, "x"), 255)
        with self.assertRaises(ValueError):
            require_uint(256, 8, "x")

    def test_format_item(self):
        self.assertEqual(
            format_item(3, Item("Apple", 100, 50)),
            {"index": 3, "name": "Apple", "price": 100, "quantity": 50},
        )


if __name__ == "__main__":
    unittest.main()
