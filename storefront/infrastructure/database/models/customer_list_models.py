"""SQLAlchemy ORM models for customer list items and list types."""

from datetime import datetime

from sqlalchemy import JSON, DateTime, ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from storefront.infrastructure.database.base import Base, IdMixin, TimestampMixin


class CustomerListTypeModel(IdMixin, TimestampMixin, Base):
    """ORM model: maps to the 'customer_list_types' table."""

    __tablename__ = "customer_list_types"

    code: Mapped[str] = mapped_column(String(64), nullable=False)
    domain: Mapped[str] = mapped_column(String(32), nullable=False)
    label: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    status: Mapped[int] = mapped_column(Integer, default=1, nullable=False)

    __table_args__ = (
        UniqueConstraint("code", "domain", name="uq_customer_list_types_code_domain"),
    )

    def __repr__(self) -> str:
        return f"<CustomerListTypeModel(id={self.id}, domain='{self.domain}', code='{self.code}')>"


class CustomerListItemModel(IdMixin, TimestampMixin, Base):
    """ORM model: maps to the 'customer_lists' table."""

    __tablename__ = "customer_lists"

    parent_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("customers.id", ondelete="CASCADE"), nullable=False
    )
    type_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("customer_list_types.id"), nullable=False
    )
    domain: Mapped[str] = mapped_column(String(32), nullable=False)
    ref_id: Mapped[str] = mapped_column(String(36), nullable=False)
    position: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    status: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    config: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    date_start: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    date_end: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        UniqueConstraint(
            "parent_id", "domain", "type_id", "ref_id", name="uq_customer_lists_ref"
        ),
        Index("ix_customer_lists_parent", "parent_id"),
        Index("ix_customer_lists_parent_domain", "parent_id", "domain"),
    )

    def __repr__(self) -> str:
        return (
            f"<CustomerListItemModel(id={self.id}, parent_id={self.parent_id}, "
            f"domain='{self.domain}', ref_id='{self.ref_id}')>"
        )
