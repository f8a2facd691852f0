# Data models

from utils.helpers import require_uint

PRICE_BITS = 256
QUANTITY_BITS = 40

MAX_PRICE = 2 ** PRICE_BITS - 1
MAX_QUANTITY = 2 ** QUANTITY_BITS - 1


class Item:
    """
    Represents an inventory item: a name with a price and a quantity.

    price is an unsigned 256-bit value and quantity an unsigned 40-bit value.
    Values that cannot fit their field raise ValueError at construction.
    """
    __slots__ = ("name", "price", "quantity")

    def __init__(self, name, price, quantity):
        if not isinstance(name, str):
            raise TypeError(f"Item name must be a str, got {type(name).__name__}.")
        self.name = name
        self.price = require_uint(price, PRICE_BITS, "price")
        self.quantity = require_uint(quantity, QUANTITY_BITS, "quantity")

    @classmethod
    def from_dict(cls, values):
        """
        Builds an item from a {"name", "price", "quantity"} mapping.
        """
        try:
            return cls(values["name"], values["price"], values["quantity"])
        except KeyError as e:
            raise ValueError(f"Item mapping is missing field {e.args[0]!r}.") from e

    def as_tuple(self):
        return (self.name, self.price, self.quantity)

    def copy(self):
        return Item(self.name, self.price, self.quantity)

    def __eq__(self, other):
        if not isinstance(other, Item):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __repr__(self):
        return f"Item(name={self.name!r}, price={self.price}, quantity={self.quantity})"


if __name__ == "__main__":
    # Example usage
    item = Item("Sample Item", 100, 5)
    print(item)
