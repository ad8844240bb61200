from .customer import AddressValues, CustomerAddressValues, CustomerValues
from .customer_list import CustomerListValues

__all__ = [
    "AddressValues",
    "CustomerAddressValues",
    "CustomerListValues",
    "CustomerValues",
]
