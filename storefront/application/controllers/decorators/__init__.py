from .base import CustomerControllerDecorator
from .audit import LoggingCustomerControllerDecorator

__all__ = [
    "CustomerControllerDecorator",
    "LoggingCustomerControllerDecorator",
]
