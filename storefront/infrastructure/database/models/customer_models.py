"""SQLAlchemy ORM models for customers and customer addresses."""

from datetime import date

from sqlalchemy import Date, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from storefront.infrastructure.database.base import Base, IdMixin, TimestampMixin


class AddressColumnsMixin:
    """Postal and contact columns shared by customers and their addresses."""

    salutation: Mapped[str] = mapped_column(String(8), default="", nullable=False)
    title: Mapped[str] = mapped_column(String(64), default="", nullable=False)
    firstname: Mapped[str] = mapped_column(String(64), default="", nullable=False)
    lastname: Mapped[str] = mapped_column(String(64), default="", nullable=False)
    company: Mapped[str] = mapped_column(String(100), default="", nullable=False)
    vat_id: Mapped[str] = mapped_column(String(32), default="", nullable=False)
    address1: Mapped[str] = mapped_column(String(200), default="", nullable=False)
    address2: Mapped[str] = mapped_column(String(200), default="", nullable=False)
    address3: Mapped[str] = mapped_column(String(200), default="", nullable=False)
    postal: Mapped[str] = mapped_column(String(16), default="", nullable=False)
    city: Mapped[str] = mapped_column(String(200), default="", nullable=False)
    state: Mapped[str] = mapped_column(String(200), default="", nullable=False)
    country_id: Mapped[str | None] = mapped_column(String(2), nullable=True)
    language_id: Mapped[str | None] = mapped_column(String(5), nullable=True)
    telephone: Mapped[str] = mapped_column(String(32), default="", nullable=False)
    telefax: Mapped[str] = mapped_column(String(32), default="", nullable=False)
    email: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    website: Mapped[str] = mapped_column(String(255), default="", nullable=False)


# Column names copied between entities and models by the managers.
ADDRESS_COLUMNS = (
    "salutation", "title", "firstname", "lastname", "company", "vat_id",
    "address1", "address2", "address3", "postal", "city", "state",
    "country_id", "language_id", "telephone", "telefax", "email", "website",
)


class CustomerModel(IdMixin, TimestampMixin, AddressColumnsMixin, Base):
    """ORM model: maps to the 'customers' table."""

    __tablename__ = "customers"

    code: Mapped[str | None] = mapped_column(String(255), unique=True, nullable=True)
    label: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    status: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    birthday: Mapped[date | None] = mapped_column(Date, nullable=True)

    def __repr__(self) -> str:
        return f"<CustomerModel(id={self.id}, code='{self.code}')>"


class CustomerAddressModel(IdMixin, TimestampMixin, AddressColumnsMixin, Base):
    """ORM model: maps to the 'customer_addresses' table."""

    __tablename__ = "customer_addresses"

    parent_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("customers.id", ondelete="CASCADE"), nullable=False
    )
    position: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    __table_args__ = (
        Index("ix_customer_addresses_parent", "parent_id"),
    )

    def __repr__(self) -> str:
        return f"<CustomerAddressModel(id={self.id}, parent_id={self.parent_id})>"
