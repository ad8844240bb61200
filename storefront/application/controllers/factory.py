"""Builds customer controllers wrapped in their configured decorators."""

from collections.abc import Sequence

from storefront.application.context import RequestContext
from storefront.application.interfaces import CustomerController
from storefront.application.registry import ManagerRegistry

from .customer_controller import StandardCustomerController
from .decorators import CustomerControllerDecorator, LoggingCustomerControllerDecorator

DECORATORS: dict[str, type[CustomerControllerDecorator]] = {
    "logging": LoggingCustomerControllerDecorator,
}


def create_customer_controller(
    context: RequestContext,
    registry: ManagerRegistry,
    decorators: Sequence[str] = (),
) -> CustomerController:
    """Return the standard controller wrapped by the named decorators.

    The first name in ``decorators`` becomes the innermost wrapper.
    """
    controller: CustomerController = StandardCustomerController(context, registry)

    for name in decorators:
        try:
            decorator_class = DECORATORS[name]
        except KeyError:
            raise ValueError(f"Unknown customer controller decorator '{name}'") from None
        controller = decorator_class(controller, context)

    return controller
