from .customer_controller import StandardCustomerController
from .decorators import CustomerControllerDecorator, LoggingCustomerControllerDecorator
from .factory import create_customer_controller

__all__ = [
    "CustomerControllerDecorator",
    "LoggingCustomerControllerDecorator",
    "StandardCustomerController",
    "create_customer_controller",
]
