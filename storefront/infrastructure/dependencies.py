"""Dependency wiring: connects the SQLAlchemy managers to the customer controllers."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from storefront.config import get_settings
from storefront.application.context import RequestContext
from storefront.application.controllers import create_customer_controller
from storefront.application.interfaces import CustomerController
from storefront.application.registry import ManagerDomain, ManagerRegistry
from storefront.infrastructure.database.session import db_session_scope
from storefront.infrastructure.database.managers import (
    SQLAlchemyCustomerAddressManager,
    SQLAlchemyCustomerListManager,
    SQLAlchemyCustomerListTypeManager,
    SQLAlchemyCustomerManager,
)


def build_manager_registry(session: AsyncSession) -> ManagerRegistry:
    """Provides a registry with every customer domain bound to the session."""
    registry = ManagerRegistry()
    registry.register(ManagerDomain.CUSTOMER, SQLAlchemyCustomerManager(session))
    registry.register(ManagerDomain.CUSTOMER_ADDRESS, SQLAlchemyCustomerAddressManager(session))
    registry.register(ManagerDomain.CUSTOMER_LISTS, SQLAlchemyCustomerListManager(session))
    registry.register(
        ManagerDomain.CUSTOMER_LISTS_TYPE, SQLAlchemyCustomerListTypeManager(session)
    )
    return registry


def build_customer_controller(
    session: AsyncSession, context: RequestContext
) -> CustomerController:
    """Provides a customer controller wrapped in the configured decorators."""
    settings = get_settings()
    return create_customer_controller(
        context,
        build_manager_registry(session),
        settings.customer_controller_decorators,
    )


@asynccontextmanager
async def customer_controller_scope(
    context: RequestContext,
    session_factory: async_sessionmaker[AsyncSession] | None = None,
) -> AsyncIterator[CustomerController]:
    """Yields a customer controller bound to one database session.

    The session is committed when the block exits normally and rolled back
    when it raises.

    Usage:
        async with customer_controller_scope(RequestContext(user_id=uid)) as controller:
            customer = await controller.get_item()
    """
    async with db_session_scope(session_factory) as session:
        yield build_customer_controller(session, context)
