"""Pydantic input values for customer list items."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CustomerListValues(BaseModel):
    """Values for creating or editing a customer list item.

    Either ``type_id`` or both ``type`` (the type code) and ``domain`` must be
    present for the item to be saved.
    """

    model_config = ConfigDict(extra="ignore")

    domain: str | None = Field(None, min_length=1, max_length=32, examples=["product"])
    type: str | None = Field(None, min_length=1, max_length=64, examples=["favorite"])
    type_id: str | None = None
    ref_id: str | None = Field(None, max_length=36)
    position: int | None = Field(None, ge=0)
    status: int | None = Field(None, ge=-1, le=1)
    config: dict[str, Any] | None = None
    date_start: datetime | None = None
    date_end: datetime | None = None
