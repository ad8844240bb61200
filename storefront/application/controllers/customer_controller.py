"""Default frontend controller for customer data owned by the current user."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from pydantic import BaseModel

from storefront.application.context import RequestContext
from storefront.application.criteria import SearchCriteria
from storefront.application.interfaces import (
    AddressInput,
    CustomerAddressManager,
    CustomerController,
    CustomerInput,
    CustomerListManager,
    CustomerListTypeManager,
    CustomerManager,
    ListInput,
)
from storefront.application.registry import ManagerDomain, ManagerRegistry
from storefront.application.schemas import (
    CustomerAddressValues,
    CustomerListValues,
    CustomerValues,
)
from storefront.domain.entities import (
    Customer,
    CustomerAddress,
    CustomerListItem,
    CustomerStatus,
)
from storefront.domain.exceptions import PermissionDeniedError, ValidationFailedError

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def _coerce(schema: type[SchemaT], values: SchemaT | Mapping[str, Any] | None) -> SchemaT:
    """Validate plain mappings into the schema; unknown keys such as ``id`` are dropped."""
    if values is None:
        return schema()
    if isinstance(values, schema):
        return values
    if isinstance(values, BaseModel):
        values = values.model_dump(exclude_unset=True)
    return schema.model_validate(dict(values))


def _changes(values: BaseModel) -> dict[str, Any]:
    # Explicit None values are kept so that editing can clear a field.
    return values.model_dump(exclude_unset=True)


class StandardCustomerController(CustomerController):
    """Lets a customer manage their own record, addresses and list associations.

    Every read, edit and delete is gated by comparing the owning customer ID
    with the actor of the request context. Storage is delegated to the
    managers registered for the ``customer``, ``customer/address``,
    ``customer/lists`` and ``customer/lists/type`` domains.
    """

    def __init__(self, context: RequestContext, registry: ManagerRegistry):
        self._context = context
        self._customers: CustomerManager = registry.get(ManagerDomain.CUSTOMER)
        self._addresses: CustomerAddressManager = registry.get(ManagerDomain.CUSTOMER_ADDRESS)
        self._lists: CustomerListManager = registry.get(ManagerDomain.CUSTOMER_LISTS)
        self._list_types: CustomerListTypeManager = registry.get(
            ManagerDomain.CUSTOMER_LISTS_TYPE
        )

    # ── Customer ─────────────────────────────────────────────────────

    async def add_item(self, values: CustomerInput) -> Customer:
        item = self._customers.create_item()
        item.update(**_changes(_coerce(CustomerValues, values)))
        item.id = None

        return await self._customers.save_item(item)

    def create_item(self, values: CustomerInput | None = None) -> Customer:
        item = self._customers.create_item()
        item.update(**_changes(_coerce(CustomerValues, values)))
        item.id = None
        item.status = CustomerStatus.ENABLED
        return item

    async def get_item(self, item_id: str | None = None, domains: Sequence[str] = ()) -> Customer:
        if item_id is None:
            return await self._customers.get_item(self._context.user_id, domains, True)

        self._check_user(item_id)
        return await self._customers.get_item(item_id, domains, True)

    async def find_item(self, code: str, domains: Sequence[str] = ()) -> Customer:
        # Resolving a code is open to anyone, e.g. for login or password reset.
        return await self._customers.find_item(code, domains)

    async def edit_item(self, item_id: str, values: CustomerInput) -> Customer:
        self._check_user(item_id)

        item = await self._customers.get_item(item_id, (), True)
        item.update(**_changes(_coerce(CustomerValues, values)))
        return await self._customers.save_item(item)

    async def delete_item(self, item_id: str) -> None:
        self._check_user(item_id)

        await self._customers.delete_item(item_id)

    async def save_item(self, item: Customer) -> Customer:
        if item.id is not None:
            self._check_user(item.id)
        return await self._customers.save_item(item)

    # ── Addresses ────────────────────────────────────────────────────

    async def add_address_item(self, values: AddressInput) -> CustomerAddress:
        item = self.create_address_item(values)
        return await self._addresses.save_item(item)

    def create_address_item(self, values: AddressInput | None = None) -> CustomerAddress:
        item = self._addresses.create_item()
        item.update(**_changes(_coerce(CustomerAddressValues, values)))
        item.id = None
        item.parent_id = self._context.user_id
        return item

    async def get_address_item(self, item_id: str) -> CustomerAddress:
        item = await self._addresses.get_item(item_id, (), True)
        self._check_user(item.parent_id)
        return item

    async def edit_address_item(self, item_id: str, values: AddressInput) -> CustomerAddress:
        item = await self._addresses.get_item(item_id, (), True)
        self._check_user(item.parent_id)

        item.update(**_changes(_coerce(CustomerAddressValues, values)))
        return await self._addresses.save_item(item)

    async def delete_address_item(self, item_id: str) -> None:
        item = await self._addresses.get_item(item_id, (), True)
        self._check_user(item.parent_id)

        await self._addresses.delete_item(item_id)

    async def save_address_item(self, item: CustomerAddress) -> CustomerAddress:
        if item.id is None:
            item.parent_id = self._context.user_id
        else:
            # The parent ID on the passed item is not trusted, the stored one is.
            stored = await self._addresses.get_item(item.id, (), True)
            self._check_user(stored.parent_id)
            item.parent_id = stored.parent_id

        return await self._addresses.save_item(item)

    # ── List items ───────────────────────────────────────────────────

    async def add_list_item(self, values: ListInput) -> CustomerListItem:
        values = await self._resolve_list_type(_coerce(CustomerListValues, values))

        item = self._lists.create_item()
        item.update(**_changes(values))
        item.id = None
        item.parent_id = self._context.user_id

        return await self._lists.save_item(item)

    def create_lists_filter(self) -> SearchCriteria:
        criteria = self._lists.create_search()
        criteria.set_conditions(criteria.compare("==", "parent_id", self._context.user_id))
        return criteria

    async def get_list_item(self, item_id: str) -> CustomerListItem:
        item = await self._lists.get_item(item_id, (), True)
        self._check_user(item.parent_id)
        return item

    async def edit_list_item(self, item_id: str, values: ListInput) -> CustomerListItem:
        item = await self._lists.get_item(item_id, (), True)
        self._check_user(item.parent_id)

        values = await self._resolve_list_type(_coerce(CustomerListValues, values))
        item.update(**_changes(values))
        return await self._lists.save_item(item)

    async def delete_list_item(self, item_id: str) -> None:
        item = await self._lists.get_item(item_id, (), True)
        self._check_user(item.parent_id)

        await self._lists.delete_item(item_id)

    async def search_list_items(
        self, criteria: SearchCriteria
    ) -> tuple[list[CustomerListItem], int]:
        return await self._lists.search_items(criteria, ())

    # ── Helpers ──────────────────────────────────────────────────────

    async def _resolve_list_type(self, values: CustomerListValues) -> CustomerListValues:
        """Fill in ``type_id`` from the type code and domain if it is missing."""
        if values.type_id is not None:
            return values

        if values.type is None:
            raise ValidationFailedError("No customer lists type code", field="type")
        if values.domain is None:
            raise ValidationFailedError("No customer lists domain", field="domain")

        type_item = await self._list_types.find_item(values.type, (), values.domain)
        return values.model_copy(update={"type_id": type_item.id})

    def _check_user(self, item_id: str | None) -> None:
        """Raise PermissionDeniedError unless the ID is the current user's ID."""
        if item_id != self._context.user_id:
            logger.warning(
                "Denied access to customer data %s for user %s",
                item_id,
                self._context.user_id,
            )
            raise PermissionDeniedError(item_id)
