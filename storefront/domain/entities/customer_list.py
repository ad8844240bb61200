"""Domain entities for customer list associations and their types."""

from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from typing import Any

from .customer_address import cleared_value


@dataclass
class CustomerListType:
    """A list type code scoped to the domain it applies to, e.g. ``favorite`` in ``product``."""

    code: str
    domain: str
    id: str | None = None
    label: str = ""
    status: int = 1


@dataclass
class CustomerListItem:
    """Links a customer to an item of another domain via a typed relationship."""

    id: str | None = None
    parent_id: str | None = None
    domain: str = ""
    type_id: str | None = None
    type: str | None = None
    ref_id: str = ""
    position: int = 0
    status: int = 1
    config: dict[str, Any] = field(default_factory=dict)
    date_start: datetime | None = None
    date_end: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, **values: Any) -> None:
        """Merge known fields except id and parent_id, then refresh updated_at.

        ``None`` clears a field back to its default.
        """
        known = {f.name: f for f in fields(self)}
        for key, value in values.items():
            if key in known and key not in {"id", "parent_id", "created_at", "updated_at"}:
                setattr(self, key, cleared_value(known[key]) if value is None else value)
        self.updated_at = datetime.now(timezone.utc)
