"""Concrete customer address manager backed by SQLAlchemy."""

import logging
from collections.abc import Sequence

from sqlalchemy import select

from storefront.application.criteria import SearchCriteria
from storefront.application.interfaces import CustomerAddressManager
from storefront.domain.entities import CustomerAddress
from storefront.domain.exceptions import EntityNotFoundError
from storefront.infrastructure.database.base import new_id, utc_now
from storefront.infrastructure.database.models import ADDRESS_COLUMNS, CustomerAddressModel

from .base import SQLAlchemyManagerBase

logger = logging.getLogger(__name__)


class SQLAlchemyCustomerAddressManager(
    SQLAlchemyManagerBase[CustomerAddressModel], CustomerAddressManager
):
    """Implements the CustomerAddressManager port using SQLAlchemy async sessions."""

    model = CustomerAddressModel
    entity_name = "CustomerAddress"
    searchable = frozenset({"id", "parent_id", "city", "postal", "country_id", "position"})

    def _to_entity(self, model: CustomerAddressModel) -> CustomerAddress:
        """Map ORM model → domain entity."""
        return CustomerAddress(
            id=model.id,
            parent_id=model.parent_id,
            position=model.position,
            created_at=model.created_at,
            updated_at=model.updated_at,
            **{name: getattr(model, name) for name in ADDRESS_COLUMNS},
        )

    def _order_by(self) -> list:
        return [CustomerAddressModel.position, CustomerAddressModel.created_at]

    def create_item(self) -> CustomerAddress:
        return CustomerAddress()

    async def get_item(
        self, item_id: str | None, domains: Sequence[str] = (), required: bool = True
    ) -> CustomerAddress | None:
        model = await self._load(item_id, required)
        return self._to_entity(model) if model else None

    async def find_item(
        self, code: str, domains: Sequence[str] = (), domain: str | None = None
    ) -> CustomerAddress:
        """Addresses have no code of their own; ``code`` is matched against the e-mail."""
        result = await self._session.execute(
            select(CustomerAddressModel)
            .where(CustomerAddressModel.email == code)
            .order_by(*self._order_by())
            .limit(1)
        )
        model = result.scalar_one_or_none()
        if model is None:
            raise EntityNotFoundError(self.entity_name, code)
        return self._to_entity(model)

    async def list_for_parent(self, parent_id: str) -> list[CustomerAddress]:
        """Return all addresses of a customer in position order."""
        result = await self._session.execute(
            select(CustomerAddressModel)
            .where(CustomerAddressModel.parent_id == parent_id)
            .order_by(*self._order_by())
        )
        return [self._to_entity(m) for m in result.scalars().all()]

    async def save_item(self, item: CustomerAddress) -> CustomerAddress:
        if item.id is None:
            model = CustomerAddressModel(id=new_id(), created_at=utc_now())
            self._session.add(model)
            logger.debug("Inserting address for customer %s", item.parent_id)
        else:
            model = await self._load(item.id)

        model.parent_id = item.parent_id
        model.position = item.position
        for name in ADDRESS_COLUMNS:
            setattr(model, name, getattr(item, name))
        model.updated_at = utc_now()

        await self._session.flush()
        return self._to_entity(model)

    async def search_items(
        self, criteria: SearchCriteria, domains: Sequence[str] = ()
    ) -> tuple[list[CustomerAddress], int]:
        models, total = await self._search_models(criteria)
        return [self._to_entity(m) for m in models], total
