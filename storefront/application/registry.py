"""Typed registry of persistence managers, keyed by customer domain.

Controllers resolve their managers from the registry once, when they are
constructed, instead of looking them up by name on every call.

Usage:
    registry = ManagerRegistry()
    registry.register(ManagerDomain.CUSTOMER, SQLAlchemyCustomerManager(session))
    manager = registry.get(ManagerDomain.CUSTOMER)
"""

from enum import Enum

from storefront.application.interfaces import ItemManager


class ManagerDomain(str, Enum):
    """Domains served by the customer controllers."""

    CUSTOMER = "customer"
    CUSTOMER_ADDRESS = "customer/address"
    CUSTOMER_LISTS = "customer/lists"
    CUSTOMER_LISTS_TYPE = "customer/lists/type"


class ManagerRegistry:
    """Maps each domain to exactly one manager instance."""

    def __init__(self) -> None:
        self._managers: dict[ManagerDomain, ItemManager] = {}

    def register(self, domain: ManagerDomain | str, manager: ItemManager) -> None:
        """Register the manager for a domain.

        Note: a domain can only be registered once.
        """
        if not isinstance(manager, ItemManager):
            raise TypeError(f"Expected ItemManager, got {type(manager)}")
        domain = ManagerDomain(domain)
        if domain in self._managers:
            raise ValueError(f"Manager for domain '{domain.value}' already registered")
        self._managers[domain] = manager

    def get(self, domain: ManagerDomain | str) -> ItemManager:
        """Return the manager for a domain or raise LookupError."""
        try:
            key = ManagerDomain(domain)
        except ValueError:
            raise LookupError(f"Unknown manager domain '{domain}'") from None
        try:
            return self._managers[key]
        except KeyError:
            raise LookupError(f"No manager registered for domain '{key.value}'") from None

    def __contains__(self, domain: object) -> bool:
        try:
            return ManagerDomain(domain) in self._managers
        except ValueError:
            return False
