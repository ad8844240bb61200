from .customer_models import (
    ADDRESS_COLUMNS,
    AddressColumnsMixin,
    CustomerAddressModel,
    CustomerModel,
)
from .customer_list_models import CustomerListItemModel, CustomerListTypeModel

__all__ = [
    "ADDRESS_COLUMNS",
    "AddressColumnsMixin",
    "CustomerAddressModel",
    "CustomerListItemModel",
    "CustomerListTypeModel",
    "CustomerModel",
]
