# Data repository

import logging
import threading

from data.exceptions import IndexOutOfRange
from data.models import Item

logger = logging.getLogger(__name__)


class ItemRegistry:
    """
    Append-only, insertion-indexed store of Item records.

    The backing list is owned by the registry; pass one in to share or inspect it.
    Every write has an equivalent read under each access pattern:

    - add_item / add_struct_item store identical records from discrete fields
      or from a pre-built Item.
    - get_item binds the stored record to a local before reading its fields,
      get_item_not_local_variable dereferences storage for each field, and
      get_struct_item returns the whole record.
    """

    def __init__(self, storage=None):
        self._items = storage if storage is not None else []
        self._lock = threading.Lock()

    def __len__(self):
        with self._lock:
            return len(self._items)

    def item_count(self):
        return len(self)

    def _append(self, item):
        with self._lock:
            self._items.append(item)
            index = len(self._items) - 1
        logger.debug("Stored %r at index %d", item, index)
        return index

    def _check_index(self, index):
        # Caller must hold the lock.
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"Item index must be an int, got {type(index).__name__}.")
        if index < 0 or index >= len(self._items):
            raise IndexOutOfRange(index, len(self._items))

    def insert_item(self, name, price, quantity):
        """
        Same as add_item, returning the index the item was stored at.
        """
        return self._append(Item(name, price, quantity))

    def insert_struct_item(self, item):
        """
        Same as add_struct_item, returning the index the item was stored at.
        """
        if not isinstance(item, Item):
            raise TypeError(f"Expected an Item, got {type(item).__name__}.")
        return self._append(item.copy())

    def add_item(self, name, price, quantity):
        """
        Adds an item built from its fields.
        """
        self.insert_item(name, price, quantity)

    def add_struct_item(self, item):
        """
        Adds a pre-assembled item. A copy is stored, so later changes to the
        caller's object do not reach the registry.
        """
        self.insert_struct_item(item)

    def get_item(self, index):
        """
        Returns (name, price, quantity) of the item at index.
        """
        with self._lock:
            self._check_index(index)
            item = self._items[index]
            return item.name, item.price, item.quantity

    def get_item_not_local_variable(self, index):
        """
        Same as get_item, reading each field straight from storage.
        """
        with self._lock:
            self._check_index(index)
            return self._items[index].name, self._items[index].price, self._items[index].quantity

    def get_struct_item(self, index):
        """
        Returns a copy of the item at index.
        """
        with self._lock:
            self._check_index(index)
            return self._items[index].copy()


if __name__ == "__main__":
    # Example usage
    registry = ItemRegistry()
    registry.add_item("Apple", 100, 50)
    registry.add_struct_item(Item("Cherry", 200, 10))
    print(f"Retrieved item: {registry.get_item(0)}")
    print(f"Retrieved item: {registry.get_struct_item(1)}")
