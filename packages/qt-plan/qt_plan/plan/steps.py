"""Plan step records: one per row of EXPLAIN output."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)

# Column carrying the group identifier in MySQL EXPLAIN output
GROUP_ID_COLUMN = "id"


def coerce_group_id(value: Any) -> Optional[int]:
    """Convert a raw ``id`` column value to an int, or None.

    NULL, booleans and anything that is not an integer (or integer string)
    map to None. Zero and negative values are returned as-is.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, (str, bytes)):
        try:
            text = value.decode() if isinstance(value, bytes) else value
            return int(text.strip())
        except ValueError:
            logger.debug(f"Ignoring non-integer plan step id: {value!r}")
            return None
    logger.debug(f"Ignoring plan step id of type {type(value).__name__}")
    return None


@dataclass(frozen=True)
class PlanStep:
    """A single row of plan-explain output.

    Attributes:
        group_id: Optional identifier tying steps of one query block together.
        columns: All columns as returned by the source (read-only).
    """

    group_id: Optional[int]
    columns: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.columns, MappingProxyType):
            object.__setattr__(self, "columns", MappingProxyType(dict(self.columns)))

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "PlanStep":
        """Build a step from a result row mapping."""
        raw_id = None
        for name, value in row.items():
            if str(name).lower() == GROUP_ID_COLUMN:
                raw_id = value
                break
        return cls(group_id=coerce_group_id(raw_id), columns=row)

    def get(self, name: str, default: Any = None) -> Any:
        """Look up a column by name, case-insensitively."""
        if name in self.columns:
            return self.columns[name]
        lowered = name.lower()
        for key, value in self.columns.items():
            if str(key).lower() == lowered:
                return value
        return default

    @property
    def select_type(self) -> Optional[str]:
        return self.get("select_type")

    @property
    def table(self) -> Optional[str]:
        return self.get("table")

    @property
    def partitions(self) -> Optional[str]:
        return self.get("partitions")

    @property
    def access_type(self) -> Optional[str]:
        """The ``type`` column (ALL, index, range, ref, eq_ref, const...)."""
        return self.get("type")

    @property
    def possible_keys(self) -> Optional[str]:
        return self.get("possible_keys")

    @property
    def key(self) -> Optional[str]:
        return self.get("key")

    @property
    def key_len(self) -> Optional[str]:
        return self.get("key_len")

    @property
    def ref(self) -> Optional[str]:
        return self.get("ref")

    @property
    def rows(self) -> Optional[int]:
        return self.get("rows")

    @property
    def filtered(self) -> Optional[float]:
        return self.get("filtered")

    @property
    def extra(self) -> Optional[str]:
        return self.get("extra")
