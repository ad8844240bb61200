"""Abstract frontend controller interface for customer data."""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

from storefront.application.criteria import SearchCriteria
from storefront.application.schemas import (
    CustomerAddressValues,
    CustomerListValues,
    CustomerValues,
)
from storefront.domain.entities import Customer, CustomerAddress, CustomerListItem

CustomerInput = CustomerValues | Mapping[str, Any]
AddressInput = CustomerAddressValues | Mapping[str, Any]
ListInput = CustomerListValues | Mapping[str, Any]


class CustomerController(ABC):
    """Operations a storefront offers on the current customer's own data."""

    # ── Customer ─────────────────────────────────────────────────────

    @abstractmethod
    async def add_item(self, values: CustomerInput) -> Customer:
        """Create and store a new customer, returning it with its generated ID."""
        ...

    @abstractmethod
    def create_item(self, values: CustomerInput | None = None) -> Customer:
        """Return a new, enabled customer pre-filled with the values but not stored."""
        ...

    @abstractmethod
    async def get_item(self, item_id: str | None = None, domains: Sequence[str] = ()) -> Customer:
        """Return the customer for the ID, or the current customer if no ID is given."""
        ...

    @abstractmethod
    async def find_item(self, code: str, domains: Sequence[str] = ()) -> Customer:
        """Return the customer for the unique code. Ownership is not checked."""
        ...

    @abstractmethod
    async def edit_item(self, item_id: str, values: CustomerInput) -> Customer:
        """Merge the values into the stored customer and save it."""
        ...

    @abstractmethod
    async def delete_item(self, item_id: str) -> None:
        """Delete the customer owned by the current user."""
        ...

    @abstractmethod
    async def save_item(self, item: Customer) -> Customer:
        """Store a modified customer item."""
        ...

    # ── Addresses ────────────────────────────────────────────────────

    @abstractmethod
    async def add_address_item(self, values: AddressInput) -> CustomerAddress:
        ...

    @abstractmethod
    def create_address_item(self, values: AddressInput | None = None) -> CustomerAddress:
        ...

    @abstractmethod
    async def get_address_item(self, item_id: str) -> CustomerAddress:
        ...

    @abstractmethod
    async def edit_address_item(self, item_id: str, values: AddressInput) -> CustomerAddress:
        ...

    @abstractmethod
    async def delete_address_item(self, item_id: str) -> None:
        ...

    @abstractmethod
    async def save_address_item(self, item: CustomerAddress) -> CustomerAddress:
        ...

    # ── List items ───────────────────────────────────────────────────

    @abstractmethod
    async def add_list_item(self, values: ListInput) -> CustomerListItem:
        ...

    @abstractmethod
    def create_lists_filter(self) -> SearchCriteria:
        """Return criteria limited to the current customer's list items."""
        ...

    @abstractmethod
    async def get_list_item(self, item_id: str) -> CustomerListItem:
        ...

    @abstractmethod
    async def edit_list_item(self, item_id: str, values: ListInput) -> CustomerListItem:
        ...

    @abstractmethod
    async def delete_list_item(self, item_id: str) -> None:
        ...

    @abstractmethod
    async def search_list_items(
        self, criteria: SearchCriteria
    ) -> tuple[list[CustomerListItem], int]:
        """Return the list items matching the criteria and the total count."""
        ...
