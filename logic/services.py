# Business services

import logging

from data.models import Item
from data.repository import ItemRegistry
from utils.config import READ_STRATEGIES, WRITE_STRATEGIES, check_strategy, get_settings
from utils.helpers import format_item
from utils.log import get_logger

logger = logging.getLogger(__name__)

LOGGED_PACKAGES = ("data", "logic")


class ItemService:
    """
    One add/get pair over an ItemRegistry.

    The registry's access patterns stay reachable through the strategy argument:
    "fields" or "struct" for writes and "local", "direct" or "struct" for reads.
    Without one, the service's default is used.
    """

    def __init__(self, registry, write_strategy="fields", read_strategy="local"):
        self.registry = registry
        self.write_strategy = check_strategy(write_strategy, WRITE_STRATEGIES, "write")
        self.read_strategy = check_strategy(read_strategy, READ_STRATEGIES, "read")

    def add(self, name, price, quantity, strategy=None):
        """
        Adds an item and returns the index it was stored at.
        """
        if strategy is None:
            strategy = self.write_strategy
        check_strategy(strategy, WRITE_STRATEGIES, "write")
        logger.debug("Adding %r with write strategy '%s'", name, strategy)
        if strategy == "struct":
            return self.registry.insert_struct_item(Item(name, price, quantity))
        return self.registry.insert_item(name, price, quantity)

    def get(self, index, strategy=None):
        """
        Returns the Item at index. IndexOutOfRange propagates to the caller.
        """
        if strategy is None:
            strategy = self.read_strategy
        check_strategy(strategy, READ_STRATEGIES, "read")
        logger.debug("Reading index %s with read strategy '%s'", index, strategy)
        if strategy == "struct":
            return self.registry.get_struct_item(index)
        if strategy == "direct":
            return Item(*self.registry.get_item_not_local_variable(index))
        return Item(*self.registry.get_item(index))

    def describe(self, index, strategy=None):
        return format_item(index, self.get(index, strategy))

    def count(self):
        return len(self.registry)


def create_item_service(settings=None, registry=None):
    """
    Service factory: builds an ItemService around a fresh registry (or the one
    given) using configured default strategies and log level.
    """
    if settings is None:
        settings = get_settings()
    for package in LOGGED_PACKAGES:
        get_logger(package, level=settings.log_level_value)
    return ItemService(
        registry if registry is not None else ItemRegistry(),
        write_strategy=settings.write_strategy,
        read_strategy=settings.read_strategy,
    )


if __name__ == "__main__":
    # Example usage of item services
    service = create_item_service()
    service.add("Apple", 100, 50)
    service.add("Banana", 75, 25)
    service.add("Cherry", 200, 10, strategy="struct")

    for i in range(service.count()):
        print(f"Retrieved via service: {service.describe(i, strategy='direct')}")
