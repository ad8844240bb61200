"""Concrete customer manager backed by SQLAlchemy."""

import logging
from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.application.criteria import SearchCriteria
from storefront.application.interfaces import CustomerManager
from storefront.application.registry import ManagerDomain
from storefront.domain.entities import Customer
from storefront.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from storefront.infrastructure.database.base import new_id, utc_now
from storefront.infrastructure.database.models import (
    ADDRESS_COLUMNS,
    CustomerAddressModel,
    CustomerListItemModel,
    CustomerModel,
)

from .base import SQLAlchemyManagerBase
from .customer_address_manager import SQLAlchemyCustomerAddressManager
from .customer_list_manager import SQLAlchemyCustomerListManager

logger = logging.getLogger(__name__)


class SQLAlchemyCustomerManager(SQLAlchemyManagerBase[CustomerModel], CustomerManager):
    """Implements the CustomerManager port using SQLAlchemy async sessions.

    Referenced domains are loaded on request: ``customer/address`` fills
    ``addresses``, ``customer/lists`` fills ``list_items`` with every list
    item, and any other domain name adds the list items pointing to it.
    """

    model = CustomerModel
    entity_name = "Customer"
    searchable = frozenset({"id", "code", "status", "email", "lastname", "city"})

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self._addresses = SQLAlchemyCustomerAddressManager(session)
        self._lists = SQLAlchemyCustomerListManager(session)

    def _to_entity(self, model: CustomerModel) -> Customer:
        """Map ORM model → domain entity."""
        return Customer(
            id=model.id,
            code=model.code,
            label=model.label,
            status=model.status,
            birthday=model.birthday,
            created_at=model.created_at,
            updated_at=model.updated_at,
            **{name: getattr(model, name) for name in ADDRESS_COLUMNS},
        )

    async def _include(self, item: Customer, domains: Sequence[str]) -> Customer:
        """Attach the referenced items of the requested domains."""
        domains = [str(getattr(d, "value", d)) for d in domains]

        if ManagerDomain.CUSTOMER_ADDRESS.value in domains:
            item.addresses = await self._addresses.list_for_parent(item.id)

        if ManagerDomain.CUSTOMER_LISTS.value in domains:
            item.list_items = await self._lists.list_for_parent(item.id)
        else:
            ref_domains = [
                d for d in domains
                if d not in (ManagerDomain.CUSTOMER.value, ManagerDomain.CUSTOMER_ADDRESS.value)
            ]
            if ref_domains:
                item.list_items = await self._lists.list_for_parent(item.id, ref_domains)

        return item

    def create_item(self) -> Customer:
        return Customer()

    async def get_item(
        self, item_id: str | None, domains: Sequence[str] = (), required: bool = True
    ) -> Customer | None:
        model = await self._load(item_id, required)
        if model is None:
            return None
        return await self._include(self._to_entity(model), domains)

    async def find_item(
        self, code: str, domains: Sequence[str] = (), domain: str | None = None
    ) -> Customer:
        result = await self._session.execute(
            select(CustomerModel).where(CustomerModel.code == code)
        )
        model = result.scalar_one_or_none()
        if model is None:
            raise EntityNotFoundError(self.entity_name, code)
        return await self._include(self._to_entity(model), domains)

    async def save_item(self, item: Customer) -> Customer:
        if item.code:
            stmt = select(CustomerModel.id).where(CustomerModel.code == item.code)
            if item.id is not None:
                stmt = stmt.where(CustomerModel.id != item.id)
            if await self._session.scalar(stmt) is not None:
                raise DuplicateEntityError(self.entity_name, "code", item.code)

        if item.id is None:
            model = CustomerModel(id=new_id(), created_at=utc_now())
            self._session.add(model)
            logger.debug("Inserting customer %s", item.code)
        else:
            model = await self._load(item.id)

        model.code = item.code
        model.label = item.label
        model.status = int(item.status)
        model.birthday = item.birthday
        for name in ADDRESS_COLUMNS:
            setattr(model, name, getattr(item, name))
        model.updated_at = utc_now()

        await self._session.flush()

        saved = self._to_entity(model)
        saved.addresses = item.addresses
        saved.list_items = item.list_items
        return saved

    async def delete_item(self, item_id: str) -> bool:
        model = await self._load(item_id, required=False)
        if model is None:
            return False

        # Referenced rows go first; SQLite does not enforce ON DELETE CASCADE by default.
        await self._session.execute(
            delete(CustomerAddressModel).where(CustomerAddressModel.parent_id == item_id)
        )
        await self._session.execute(
            delete(CustomerListItemModel).where(CustomerListItemModel.parent_id == item_id)
        )
        await self._session.delete(model)
        await self._session.flush()
        logger.debug("Deleted customer %s with its addresses and list items", item_id)
        return True

    async def search_items(
        self, criteria: SearchCriteria, domains: Sequence[str] = ()
    ) -> tuple[list[Customer], int]:
        models, total = await self._search_models(criteria)
        items = [await self._include(self._to_entity(m), domains) for m in models]
        return items, total
