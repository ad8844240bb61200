"""Startup tasks: create tables and seed the configured customer list types."""

import logging
from collections.abc import Mapping, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from storefront.config import get_settings
from storefront.domain.entities import CustomerListType
from storefront.infrastructure.database import Base, async_session_factory, engine
from storefront.infrastructure.database.managers import SQLAlchemyCustomerListTypeManager
from storefront.infrastructure.database.models import CustomerListTypeModel
from storefront.infrastructure.logging.log_config import setup_logging

logger = logging.getLogger(__name__)


async def seed_list_types(
    session: AsyncSession, list_types: Mapping[str, Sequence[str]]
) -> int:
    """Ensure a list type exists for every domain/code pair.

    Idempotent: existing types are left untouched. Returns the number of
    types created.
    """
    manager = SQLAlchemyCustomerListTypeManager(session)
    created = 0

    for domain, codes in list_types.items():
        for code in codes:
            exists = await session.scalar(
                select(CustomerListTypeModel.id).where(
                    CustomerListTypeModel.code == code,
                    CustomerListTypeModel.domain == domain,
                )
            )
            if exists is not None:
                logger.debug("List type %s/%s already exists", domain, code)
                continue

            await manager.save_item(
                CustomerListType(code=code, domain=domain, label=code.capitalize())
            )
            created += 1

    if created:
        logger.info("Seeded %d customer list types", created)
    return created


async def init_database(
    db_engine: AsyncEngine | None = None,
    session_factory: async_sessionmaker[AsyncSession] | None = None,
) -> None:
    """Create all tables and seed the list types from the settings."""
    settings = get_settings()
    db_engine = db_engine or engine
    session_factory = session_factory or async_session_factory

    setup_logging(settings)

    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with session_factory() as session:
        await seed_list_types(session, settings.customer_list_types)
        await session.commit()


if __name__ == "__main__":
    import asyncio

    asyncio.run(init_database())
