from .customer import Customer, CustomerStatus
from .customer_address import AddressFields, CustomerAddress
from .customer_list import CustomerListItem, CustomerListType

__all__ = [
    "AddressFields",
    "Customer",
    "CustomerAddress",
    "CustomerListItem",
    "CustomerListType",
    "CustomerStatus",
]
