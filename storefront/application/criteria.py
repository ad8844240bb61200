"""Search criteria passed from controllers to persistence managers."""

from dataclasses import dataclass, field
from typing import Any

SUPPORTED_OPERATORS = frozenset({"==", "!="})


@dataclass(frozen=True)
class Condition:
    """A single comparison of an entity attribute against a value."""

    operator: str
    key: str
    value: Any


@dataclass
class SearchCriteria:
    """Conjunction of conditions plus a result slice.

    Keys are entity attribute names (e.g. ``parent_id``); each manager decides
    which keys it can filter on.
    """

    conditions: list[Condition] = field(default_factory=list)
    offset: int = 0
    limit: int = 100

    @staticmethod
    def compare(operator: str, key: str, value: Any) -> Condition:
        if operator not in SUPPORTED_OPERATORS:
            raise ValueError(f"Unsupported operator '{operator}'")
        return Condition(operator=operator, key=key, value=value)

    def set_conditions(self, *conditions: Condition) -> "SearchCriteria":
        self.conditions = list(conditions)
        return self

    def add_condition(self, condition: Condition) -> "SearchCriteria":
        self.conditions.append(condition)
        return self

    def set_slice(self, offset: int = 0, limit: int = 100) -> "SearchCriteria":
        if offset < 0 or limit < 1:
            raise ValueError(f"Invalid slice offset={offset}, limit={limit}")
        self.offset = offset
        self.limit = limit
        return self
