"""Domain entities for postal address data shared by customers and their addresses."""

from dataclasses import MISSING, Field, dataclass, field, fields
from datetime import datetime, timezone
from typing import Any


def cleared_value(f: Field) -> Any:
    """Value stored when None is assigned to a field: its default, which may itself be None."""
    if f.default_factory is not MISSING:
        return f.default_factory()
    if f.default is not MISSING:
        return f.default
    return None


@dataclass
class AddressFields:
    """Postal and contact fields common to customers and customer addresses."""

    salutation: str = ""
    title: str = ""
    firstname: str = ""
    lastname: str = ""
    company: str = ""
    vat_id: str = ""
    address1: str = ""
    address2: str = ""
    address3: str = ""
    postal: str = ""
    city: str = ""
    state: str = ""
    country_id: str | None = None
    language_id: str | None = None
    telephone: str = ""
    telefax: str = ""
    email: str = ""
    website: str = ""

    # Fields that update() must never touch.
    _protected = frozenset({"id", "parent_id", "created_at", "updated_at"})

    def update(self, **values: Any) -> None:
        """Merge known, mutable fields and refresh the updated_at timestamp.

        ``None`` clears a field back to its default, e.g. ``""`` for text.
        """
        known = {f.name: f for f in fields(self)}
        for key, value in values.items():
            if key in known and key not in self._protected:
                setattr(self, key, cleared_value(known[key]) if value is None else value)
        self.updated_at = datetime.now(timezone.utc)


@dataclass
class CustomerAddress(AddressFields):
    """A delivery or secondary address that belongs to exactly one customer."""

    id: str | None = None
    parent_id: str | None = None
    position: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
