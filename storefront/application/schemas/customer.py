"""Pydantic input values (patch structures) for customers and their addresses.

None of these schemas declares an ``id`` or ``parent_id`` field and unknown
keys are ignored, so identifiers and ownership can never be supplied by the
caller.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class AddressValues(BaseModel):
    """Postal and contact fields: all optional."""

    model_config = ConfigDict(extra="ignore")

    salutation: str | None = Field(None, max_length=8, examples=["mr"])
    title: str | None = Field(None, max_length=64)
    firstname: str | None = Field(None, max_length=64, examples=["Jane"])
    lastname: str | None = Field(None, max_length=64, examples=["Doe"])
    company: str | None = Field(None, max_length=100)
    vat_id: str | None = Field(None, max_length=32)
    address1: str | None = Field(None, max_length=200, examples=["Main Street 1"])
    address2: str | None = Field(None, max_length=200)
    address3: str | None = Field(None, max_length=200)
    postal: str | None = Field(None, max_length=16, examples=["20095"])
    city: str | None = Field(None, max_length=200, examples=["Hamburg"])
    state: str | None = Field(None, max_length=200)
    country_id: str | None = Field(None, min_length=2, max_length=2, examples=["DE"])
    language_id: str | None = Field(None, min_length=2, max_length=5, examples=["de"])
    telephone: str | None = Field(None, max_length=32)
    telefax: str | None = Field(None, max_length=32)
    email: str | None = Field(None, max_length=255, examples=["jane@example.com"])
    website: str | None = Field(None, max_length=255)


class CustomerValues(AddressValues):
    """Values for creating or editing a customer."""

    code: str | None = Field(None, min_length=1, max_length=255, examples=["jane@example.com"])
    label: str | None = Field(None, max_length=255)
    status: int | None = Field(None, ge=-1, le=1)
    birthday: date | None = None


class CustomerAddressValues(AddressValues):
    """Values for creating or editing a customer address."""

    position: int | None = Field(None, ge=0)
