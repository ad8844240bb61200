"""In-memory fake persistence managers for unit testing the controllers."""

import copy
from collections.abc import Sequence

from storefront.application.criteria import SearchCriteria
from storefront.application.interfaces import (
    CustomerAddressManager,
    CustomerListManager,
    CustomerListTypeManager,
    CustomerManager,
)
from storefront.application.registry import ManagerDomain, ManagerRegistry
from storefront.domain.entities import (
    Customer,
    CustomerAddress,
    CustomerListItem,
    CustomerListType,
)
from storefront.domain.exceptions import EntityNotFoundError


class _InMemoryManager:
    """Dict-backed storage that records every call made to it."""

    entity_name = "Item"

    def __init__(self):
        self._items: dict[str, object] = {}
        self._next_id = 1
        self.calls: list[tuple] = []

    def add(self, item):
        """Store an item directly, bypassing the call log."""
        if item.id is None:
            item.id = f"new-{self._next_id}"
            self._next_id += 1
        self._items[item.id] = copy.deepcopy(item)
        return item

    def create_search(self) -> SearchCriteria:
        self.calls.append(("create_search",))
        return SearchCriteria()

    async def get_item(self, item_id, domains: Sequence[str] = (), required: bool = True):
        self.calls.append(("get_item", item_id, tuple(domains), required))
        item = self._items.get(item_id)
        if item is None:
            if required:
                raise EntityNotFoundError(self.entity_name, item_id)
            return None
        return copy.deepcopy(item)

    async def save_item(self, item):
        self.calls.append(("save_item", item.id))
        return copy.deepcopy(self.add(item))

    async def delete_item(self, item_id) -> bool:
        self.calls.append(("delete_item", item_id))
        return self._items.pop(item_id, None) is not None

    async def search_items(self, criteria: SearchCriteria, domains: Sequence[str] = ()):
        self.calls.append(("search_items", criteria, tuple(domains)))
        items = [
            copy.deepcopy(item)
            for item in self._items.values()
            if all(
                (getattr(item, c.key) == c.value) == (c.operator == "==")
                for c in criteria.conditions
            )
        ]
        return items[criteria.offset : criteria.offset + criteria.limit], len(items)


class FakeCustomerManager(_InMemoryManager, CustomerManager):
    entity_name = "Customer"

    def create_item(self) -> Customer:
        return Customer()

    async def find_item(self, code, domains=(), domain=None) -> Customer:
        self.calls.append(("find_item", code, tuple(domains), domain))
        for item in self._items.values():
            if item.code == code:
                return copy.deepcopy(item)
        raise EntityNotFoundError(self.entity_name, code)


class FakeCustomerAddressManager(_InMemoryManager, CustomerAddressManager):
    entity_name = "CustomerAddress"

    def create_item(self) -> CustomerAddress:
        return CustomerAddress()

    async def find_item(self, code, domains=(), domain=None) -> CustomerAddress:
        raise EntityNotFoundError(self.entity_name, code)


class FakeCustomerListManager(_InMemoryManager, CustomerListManager):
    entity_name = "CustomerListItem"

    def create_item(self) -> CustomerListItem:
        return CustomerListItem()

    async def find_item(self, code, domains=(), domain=None) -> CustomerListItem:
        raise EntityNotFoundError(self.entity_name, code)


class FakeCustomerListTypeManager(_InMemoryManager, CustomerListTypeManager):
    entity_name = "CustomerListType"

    def create_item(self) -> CustomerListType:
        return CustomerListType(code="", domain="")

    async def find_item(self, code, domains=(), domain=None) -> CustomerListType:
        self.calls.append(("find_item", code, tuple(domains), domain))
        for item in self._items.values():
            if item.code == code and (domain is None or item.domain == domain):
                return copy.deepcopy(item)
        raise EntityNotFoundError(self.entity_name, code)


class FakeManagers:
    """One fake manager per customer domain, plus a registry that serves them."""

    def __init__(self):
        self.customers = FakeCustomerManager()
        self.addresses = FakeCustomerAddressManager()
        self.lists = FakeCustomerListManager()
        self.list_types = FakeCustomerListTypeManager()

        self.registry = ManagerRegistry()
        self.registry.register(ManagerDomain.CUSTOMER, self.customers)
        self.registry.register(ManagerDomain.CUSTOMER_ADDRESS, self.addresses)
        self.registry.register(ManagerDomain.CUSTOMER_LISTS, self.lists)
        self.registry.register(ManagerDomain.CUSTOMER_LISTS_TYPE, self.list_types)
