"""Abstract persistence manager interfaces (ports): one per customer domain."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Generic, TypeVar

from storefront.application.criteria import SearchCriteria
from storefront.domain.entities import (
    Customer,
    CustomerAddress,
    CustomerListItem,
    CustomerListType,
)

ItemT = TypeVar("ItemT")


class ItemManager(ABC, Generic[ItemT]):
    """Capability set every persistence manager provides: implemented in the infrastructure layer."""

    @abstractmethod
    def create_item(self) -> ItemT:
        """Return a new, blank and unsaved item."""
        ...

    @abstractmethod
    async def get_item(
        self, item_id: str | None, domains: Sequence[str] = (), required: bool = True
    ) -> ItemT | None:
        """Load an item by id, including the referenced domains.

        Raises EntityNotFoundError when the item is missing and ``required``
        is set; returns None otherwise.
        """
        ...

    @abstractmethod
    async def find_item(
        self, code: str, domains: Sequence[str] = (), domain: str | None = None
    ) -> ItemT:
        """Load an item by its unique code, optionally scoped to a domain."""
        ...

    @abstractmethod
    async def save_item(self, item: ItemT) -> ItemT:
        """Insert a new item or update an existing one and return it."""
        ...

    @abstractmethod
    async def delete_item(self, item_id: str) -> bool:
        """Delete an item. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    def create_search(self) -> SearchCriteria:
        """Return empty search criteria for this domain."""
        ...

    @abstractmethod
    async def search_items(
        self, criteria: SearchCriteria, domains: Sequence[str] = ()
    ) -> tuple[list[ItemT], int]:
        """Return the items matching the criteria and the total match count."""
        ...


class CustomerManager(ItemManager[Customer]):
    """Port for customer persistence."""


class CustomerAddressManager(ItemManager[CustomerAddress]):
    """Port for customer address persistence."""


class CustomerListManager(ItemManager[CustomerListItem]):
    """Port for customer list item persistence."""


class CustomerListTypeManager(ItemManager[CustomerListType]):
    """Port for customer list type persistence. ``find_item`` is scoped by domain."""
