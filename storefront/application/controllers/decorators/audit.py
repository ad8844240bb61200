"""Customer controller decorator that writes an audit trail of data changes."""

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from storefront.application.interfaces import AddressInput, CustomerInput, ListInput
from storefront.domain.entities import Customer, CustomerAddress, CustomerListItem
from storefront.domain.exceptions import PermissionDeniedError

from .base import CustomerControllerDecorator

logger = logging.getLogger(__name__)


class LoggingCustomerControllerDecorator(CustomerControllerDecorator):
    """Logs every add, edit, save and delete together with the acting user.

    Denied operations are logged at WARNING level and re-raised unchanged.
    """

    @contextmanager
    def _audit(self, operation: str, **details: Any) -> Iterator[None]:
        user_id = self._context.user_id
        start = time.perf_counter()
        try:
            yield
        except PermissionDeniedError as e:
            logger.warning("%s denied for user %s: %s", operation, user_id, e)
            raise
        else:
            elapsed = time.perf_counter() - start
            extra = " | ".join(f"{k}={v}" for k, v in details.items())
            logger.info("%s by user %s (%s) in %.3fs", operation, user_id, extra, elapsed)

    # ── Customer ─────────────────────────────────────────────────────

    async def add_item(self, values: CustomerInput) -> Customer:
        with self._audit("add_item"):
            item = await self._controller.add_item(values)
        return item

    async def edit_item(self, item_id: str, values: CustomerInput) -> Customer:
        with self._audit("edit_item", id=item_id):
            item = await self._controller.edit_item(item_id, values)
        return item

    async def delete_item(self, item_id: str) -> None:
        with self._audit("delete_item", id=item_id):
            await self._controller.delete_item(item_id)

    async def save_item(self, item: Customer) -> Customer:
        with self._audit("save_item", id=item.id):
            item = await self._controller.save_item(item)
        return item

    # ── Addresses ────────────────────────────────────────────────────

    async def add_address_item(self, values: AddressInput) -> CustomerAddress:
        with self._audit("add_address_item"):
            item = await self._controller.add_address_item(values)
        return item

    async def edit_address_item(self, item_id: str, values: AddressInput) -> CustomerAddress:
        with self._audit("edit_address_item", id=item_id):
            item = await self._controller.edit_address_item(item_id, values)
        return item

    async def delete_address_item(self, item_id: str) -> None:
        with self._audit("delete_address_item", id=item_id):
            await self._controller.delete_address_item(item_id)

    async def save_address_item(self, item: CustomerAddress) -> CustomerAddress:
        with self._audit("save_address_item", id=item.id):
            item = await self._controller.save_address_item(item)
        return item

    # ── List items ───────────────────────────────────────────────────

    async def add_list_item(self, values: ListInput) -> CustomerListItem:
        with self._audit("add_list_item"):
            item = await self._controller.add_list_item(values)
        return item

    async def edit_list_item(self, item_id: str, values: ListInput) -> CustomerListItem:
        with self._audit("edit_list_item", id=item_id):
            item = await self._controller.edit_list_item(item_id, values)
        return item

    async def delete_list_item(self, item_id: str) -> None:
        with self._audit("delete_list_item", id=item_id):
            await self._controller.delete_list_item(item_id)
