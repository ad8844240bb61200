from .customer_manager import SQLAlchemyCustomerManager
from .customer_address_manager import SQLAlchemyCustomerAddressManager
from .customer_list_manager import SQLAlchemyCustomerListManager
from .customer_list_type_manager import SQLAlchemyCustomerListTypeManager

__all__ = [
    "SQLAlchemyCustomerManager",
    "SQLAlchemyCustomerAddressManager",
    "SQLAlchemyCustomerListManager",
    "SQLAlchemyCustomerListTypeManager",
]
