"""Concrete customer list item manager backed by SQLAlchemy."""

import logging
from collections.abc import Sequence

from sqlalchemy import select

from storefront.application.criteria import SearchCriteria
from storefront.application.interfaces import CustomerListManager
from storefront.domain.entities import CustomerListItem
from storefront.domain.exceptions import EntityNotFoundError, ValidationFailedError
from storefront.infrastructure.database.base import new_id, utc_now
from storefront.infrastructure.database.models import (
    CustomerListItemModel,
    CustomerListTypeModel,
)

from .base import SQLAlchemyManagerBase

logger = logging.getLogger(__name__)


class SQLAlchemyCustomerListManager(
    SQLAlchemyManagerBase[CustomerListItemModel], CustomerListManager
):
    """Implements the CustomerListManager port using SQLAlchemy async sessions.

    Loaded items carry the code of their list type in ``type``.
    """

    model = CustomerListItemModel
    entity_name = "CustomerListItem"
    searchable = frozenset({"id", "parent_id", "domain", "type_id", "ref_id", "status"})

    def _to_entity(self, model: CustomerListItemModel, type_code: str | None) -> CustomerListItem:
        """Map ORM model → domain entity."""
        return CustomerListItem(
            id=model.id,
            parent_id=model.parent_id,
            domain=model.domain,
            type_id=model.type_id,
            type=type_code,
            ref_id=model.ref_id,
            position=model.position,
            status=model.status,
            config=dict(model.config or {}),
            date_start=model.date_start,
            date_end=model.date_end,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _order_by(self) -> list:
        return [CustomerListItemModel.position, CustomerListItemModel.created_at]

    async def _with_type_codes(
        self, models: Sequence[CustomerListItemModel]
    ) -> list[CustomerListItem]:
        type_ids = {m.type_id for m in models}
        codes: dict[str, str] = {}
        if type_ids:
            result = await self._session.execute(
                select(CustomerListTypeModel.id, CustomerListTypeModel.code).where(
                    CustomerListTypeModel.id.in_(type_ids)
                )
            )
            codes = {row.id: row.code for row in result}
        return [self._to_entity(m, codes.get(m.type_id)) for m in models]

    def create_item(self) -> CustomerListItem:
        return CustomerListItem()

    async def get_item(
        self, item_id: str | None, domains: Sequence[str] = (), required: bool = True
    ) -> CustomerListItem | None:
        model = await self._load(item_id, required)
        if model is None:
            return None
        return (await self._with_type_codes([model]))[0]

    async def find_item(
        self, code: str, domains: Sequence[str] = (), domain: str | None = None
    ) -> CustomerListItem:
        """List items have no code of their own; ``code`` is matched against ``ref_id``."""
        stmt = select(CustomerListItemModel).where(CustomerListItemModel.ref_id == code)
        if domain is not None:
            stmt = stmt.where(CustomerListItemModel.domain == domain)

        result = await self._session.execute(stmt.order_by(*self._order_by()).limit(1))
        model = result.scalar_one_or_none()
        if model is None:
            raise EntityNotFoundError(self.entity_name, code)
        return (await self._with_type_codes([model]))[0]

    async def list_for_parent(
        self, parent_id: str, domains: Sequence[str] | None = None
    ) -> list[CustomerListItem]:
        """Return all list items of a customer, optionally only those of some domains."""
        stmt = select(CustomerListItemModel).where(CustomerListItemModel.parent_id == parent_id)
        if domains is not None:
            stmt = stmt.where(CustomerListItemModel.domain.in_(list(domains)))

        result = await self._session.execute(stmt.order_by(*self._order_by()))
        return await self._with_type_codes(result.scalars().all())

    async def save_item(self, item: CustomerListItem) -> CustomerListItem:
        if item.type_id is None:
            raise ValidationFailedError("No customer lists type ID", field="type_id")

        type_model = await self._session.get(CustomerListTypeModel, item.type_id)
        if type_model is None:
            raise EntityNotFoundError("CustomerListType", item.type_id)

        if item.id is None:
            model = CustomerListItemModel(id=new_id(), created_at=utc_now())
            self._session.add(model)
            logger.debug("Inserting list item for customer %s", item.parent_id)
        else:
            model = await self._load(item.id)

        model.parent_id = item.parent_id
        model.type_id = item.type_id
        model.domain = item.domain or type_model.domain
        model.ref_id = item.ref_id
        model.position = item.position
        model.status = item.status
        model.config = dict(item.config)
        model.date_start = item.date_start
        model.date_end = item.date_end
        model.updated_at = utc_now()

        await self._session.flush()
        return self._to_entity(model, type_model.code)

    async def search_items(
        self, criteria: SearchCriteria, domains: Sequence[str] = ()
    ) -> tuple[list[CustomerListItem], int]:
        models, total = await self._search_models(criteria)
        return await self._with_type_codes(models), total
