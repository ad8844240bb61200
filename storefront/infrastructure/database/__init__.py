from .base import Base
from .session import engine, async_session_factory, db_session_scope
from .models import (
    CustomerAddressModel,
    CustomerListItemModel,
    CustomerListTypeModel,
    CustomerModel,
)

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "db_session_scope",
    "CustomerAddressModel",
    "CustomerListItemModel",
    "CustomerListTypeModel",
    "CustomerModel",
]
