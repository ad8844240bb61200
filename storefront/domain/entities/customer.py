"""Domain entity: pure Python business object for storefront customers."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import IntEnum

from .customer_address import AddressFields, CustomerAddress
from .customer_list import CustomerListItem


class CustomerStatus(IntEnum):
    """Customer account states."""

    REVIEW = -1
    DISABLED = 0
    ENABLED = 1


@dataclass
class Customer(AddressFields):
    """Core domain entity representing a registered customer.

    The billing address lives directly on the customer; further addresses and
    list associations are only populated when their domains are requested.
    """

    id: str | None = None
    code: str | None = None
    label: str = ""
    status: int = CustomerStatus.ENABLED
    birthday: date | None = None
    addresses: list[CustomerAddress] = field(default_factory=list)
    list_items: list[CustomerListItem] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    _protected = AddressFields._protected | {"addresses", "list_items"}

    def get_list_items(self, domain: str | None = None) -> list[CustomerListItem]:
        """Return the loaded list items, optionally only those for one domain."""
        if domain is None:
            return list(self.list_items)
        return [item for item in self.list_items if item.domain == domain]
