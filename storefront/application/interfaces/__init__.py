from .item_manager import (
    CustomerAddressManager,
    CustomerListManager,
    CustomerListTypeManager,
    CustomerManager,
    ItemManager,
)
from .customer_controller import (
    AddressInput,
    CustomerController,
    CustomerInput,
    ListInput,
)

__all__ = [
    "AddressInput",
    "CustomerAddressManager",
    "CustomerController",
    "CustomerInput",
    "CustomerListManager",
    "CustomerListTypeManager",
    "CustomerManager",
    "ItemManager",
    "ListInput",
]
