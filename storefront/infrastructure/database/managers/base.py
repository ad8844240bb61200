"""Shared plumbing for the SQLAlchemy-backed persistence managers."""

import logging
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.application.criteria import SearchCriteria
from storefront.domain.exceptions import EntityNotFoundError
from storefront.infrastructure.database.base import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class SQLAlchemyManagerBase(Generic[ModelT]):
    """Loads, deletes and searches rows of one ORM model.

    Subclasses set ``model``, ``entity_name`` and the attribute names that
    search criteria may filter on.
    """

    model: ClassVar[type[Base]]
    entity_name: ClassVar[str]
    searchable: ClassVar[frozenset[str]] = frozenset()

    def __init__(self, session: AsyncSession):
        self._session = session

    def create_search(self) -> SearchCriteria:
        return SearchCriteria()

    async def delete_item(self, item_id: str) -> bool:
        model = await self._load(item_id, required=False)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        logger.debug("Deleted %s %s", self.entity_name, item_id)
        return True

    async def _load(self, item_id: str | None, required: bool = True) -> ModelT | None:
        model = await self._session.get(self.model, item_id) if item_id is not None else None
        if model is None and required:
            raise EntityNotFoundError(self.entity_name, item_id)
        return model

    def _order_by(self) -> list[Any]:
        return [self.model.created_at]

    def _where(self, criteria: SearchCriteria) -> list[ColumnElement[bool]]:
        """Translate the equality conditions of the criteria into WHERE clauses."""
        clauses: list[ColumnElement[bool]] = []
        for condition in criteria.conditions:
            if condition.key not in self.searchable:
                raise ValueError(
                    f"Cannot search {self.entity_name} by '{condition.key}'"
                )
            column = getattr(self.model, condition.key)
            if condition.operator == "==":
                clauses.append(
                    column.is_(None) if condition.value is None else column == condition.value
                )
            else:
                clauses.append(
                    column.is_not(None) if condition.value is None else column != condition.value
                )
        return clauses

    async def _search_models(self, criteria: SearchCriteria) -> tuple[list[ModelT], int]:
        clauses = self._where(criteria)

        total = await self._session.scalar(
            select(func.count()).select_from(self.model).where(*clauses)
        )
        stmt = (
            select(self.model)
            .where(*clauses)
            .order_by(*self._order_by())
            .offset(criteria.offset)
            .limit(criteria.limit)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all()), total or 0
