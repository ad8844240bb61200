"""Concrete list type manager backed by SQLAlchemy."""

import logging
from collections.abc import Sequence

from sqlalchemy import select

from storefront.application.criteria import SearchCriteria
from storefront.application.interfaces import CustomerListTypeManager
from storefront.domain.entities import CustomerListType
from storefront.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from storefront.infrastructure.database.base import new_id, utc_now
from storefront.infrastructure.database.models import CustomerListTypeModel

from .base import SQLAlchemyManagerBase

logger = logging.getLogger(__name__)


class SQLAlchemyCustomerListTypeManager(
    SQLAlchemyManagerBase[CustomerListTypeModel], CustomerListTypeManager
):
    """Implements the CustomerListTypeManager port using SQLAlchemy async sessions."""

    model = CustomerListTypeModel
    entity_name = "CustomerListType"
    searchable = frozenset({"id", "code", "domain", "status"})

    def _to_entity(self, model: CustomerListTypeModel) -> CustomerListType:
        """Map ORM model → domain entity."""
        return CustomerListType(
            id=model.id,
            code=model.code,
            domain=model.domain,
            label=model.label,
            status=model.status,
        )

    def _order_by(self) -> list:
        return [CustomerListTypeModel.domain, CustomerListTypeModel.code]

    def create_item(self) -> CustomerListType:
        return CustomerListType(code="", domain="")

    async def get_item(
        self, item_id: str | None, domains: Sequence[str] = (), required: bool = True
    ) -> CustomerListType | None:
        model = await self._load(item_id, required)
        return self._to_entity(model) if model else None

    async def find_item(
        self, code: str, domains: Sequence[str] = (), domain: str | None = None
    ) -> CustomerListType:
        stmt = select(CustomerListTypeModel).where(CustomerListTypeModel.code == code)
        if domain is not None:
            stmt = stmt.where(CustomerListTypeModel.domain == domain)

        result = await self._session.execute(stmt.order_by(*self._order_by()).limit(1))
        model = result.scalar_one_or_none()
        if model is None:
            raise EntityNotFoundError(self.entity_name, f"{domain}/{code}" if domain else code)
        return self._to_entity(model)

    async def save_item(self, item: CustomerListType) -> CustomerListType:
        stmt = select(CustomerListTypeModel.id).where(
            CustomerListTypeModel.code == item.code,
            CustomerListTypeModel.domain == item.domain,
        )
        if item.id is not None:
            stmt = stmt.where(CustomerListTypeModel.id != item.id)
        if await self._session.scalar(stmt) is not None:
            raise DuplicateEntityError(self.entity_name, "code", f"{item.domain}/{item.code}")

        if item.id is None:
            model = CustomerListTypeModel(id=new_id(), created_at=utc_now())
            self._session.add(model)
            logger.debug("Inserting list type %s/%s", item.domain, item.code)
        else:
            model = await self._load(item.id)

        model.code = item.code
        model.domain = item.domain
        model.label = item.label
        model.status = item.status
        model.updated_at = utc_now()

        await self._session.flush()
        return self._to_entity(model)

    async def search_items(
        self, criteria: SearchCriteria, domains: Sequence[str] = ()
    ) -> tuple[list[CustomerListType], int]:
        models, total = await self._search_models(criteria)
        return [self._to_entity(m) for m in models], total
