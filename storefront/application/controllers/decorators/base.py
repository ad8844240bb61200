"""Base class for customer controller decorators.

A decorator wraps another ``CustomerController`` and forwards every
operation to it unchanged. Concrete decorators subclass this base and
override only the operations they extend, calling through ``_controller``.
"""

from collections.abc import Sequence

from storefront.application.context import RequestContext
from storefront.application.criteria import SearchCriteria
from storefront.application.interfaces import (
    AddressInput,
    CustomerController,
    CustomerInput,
    ListInput,
)
from storefront.domain.entities import Customer, CustomerAddress, CustomerListItem
from storefront.domain.exceptions import TypeMismatchError


class CustomerControllerDecorator(CustomerController):
    """Forwards all customer controller operations to the wrapped controller.

    Only the ``CustomerController`` operations are forwarded. Extra methods
    of a wrapped controller subclass are not reachable through the
    decorator; call them on ``_controller`` or override them in a subclass.
    """

    def __init__(self, controller: CustomerController, context: RequestContext):
        if not isinstance(controller, CustomerController):
            raise TypeMismatchError(CustomerController, controller)

        self.__controller = controller
        self._context = context

    @property
    def _controller(self) -> CustomerController:
        """The wrapped controller instance."""
        return self.__controller

    async def add_item(self, values: CustomerInput) -> Customer:
        return await self._controller.add_item(values)

    def create_item(self, values: CustomerInput | None = None) -> Customer:
        return self._controller.create_item(values)

    async def get_item(self, item_id: str | None = None, domains: Sequence[str] = ()) -> Customer:
        return await self._controller.get_item(item_id, domains)

    async def find_item(self, code: str, domains: Sequence[str] = ()) -> Customer:
        return await self._controller.find_item(code, domains)

    async def edit_item(self, item_id: str, values: CustomerInput) -> Customer:
        return await self._controller.edit_item(item_id, values)

    async def delete_item(self, item_id: str) -> None:
        return await self._controller.delete_item(item_id)

    async def save_item(self, item: Customer) -> Customer:
        return await self._controller.save_item(item)

    async def add_address_item(self, values: AddressInput) -> CustomerAddress:
        return await self._controller.add_address_item(values)

    def create_address_item(self, values: AddressInput | None = None) -> CustomerAddress:
        return self._controller.create_address_item(values)

    async def get_address_item(self, item_id: str) -> CustomerAddress:
        return await self._controller.get_address_item(item_id)

    async def edit_address_item(self, item_id: str, values: AddressInput) -> CustomerAddress:
        return await self._controller.edit_address_item(item_id, values)

    async def delete_address_item(self, item_id: str) -> None:
        return await self._controller.delete_address_item(item_id)

    async def save_address_item(self, item: CustomerAddress) -> CustomerAddress:
        return await self._controller.save_address_item(item)

    async def add_list_item(self, values: ListInput) -> CustomerListItem:
        return await self._controller.add_list_item(values)

    def create_lists_filter(self) -> SearchCriteria:
        return self._controller.create_lists_filter()

    async def get_list_item(self, item_id: str) -> CustomerListItem:
        return await self._controller.get_list_item(item_id)

    async def edit_list_item(self, item_id: str, values: ListInput) -> CustomerListItem:
        return await self._controller.edit_list_item(item_id, values)

    async def delete_list_item(self, item_id: str) -> None:
        return await self._controller.delete_list_item(item_id)

    async def search_list_items(
        self, criteria: SearchCriteria
    ) -> tuple[list[CustomerListItem], int]:
        return await self._controller.search_list_items(criteria)
