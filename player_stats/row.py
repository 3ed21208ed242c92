"""
Statistic Rows

A StatRow is one recorded observation of a statistic: a read-only set of
columns with a distinguished numeric 'value' column used for aggregation.
Two rows taken from different data sources may describe the same event; such
rows conflict and are merged into a single row.
"""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterable, Optional

logger = logging.getLogger(__name__)

VALUE_COLUMN = "value"
ID_COLUMN = "id"

# Columns that do not identify the event a row describes
NON_IDENTIFYING_COLUMNS = frozenset({VALUE_COLUMN, ID_COLUMN})


class MergeStrategy(Enum):
    """How the values of two conflicting rows are combined."""
    MAX = "max"
    SUM = "sum"

    def merge(self, first: float, second: float) -> float:
        """
        Combine the values of two conflicting rows.

        Args:
            first: Value of the row the merge is resolved on
            second: Value of the conflicting row

        Returns:
            float: The sum for SUM, the larger value for MAX
        """
        if self is MergeStrategy.SUM:
            return first + second
        return max(first, second)


class StatRow:
    """
    A single row of statistic data.

    Rows compare equal when their columns are equal. The merge strategy only
    decides how a conflict is resolved and takes no part in equality.
    """

    __slots__ = ("_data", "_merge_strategy")

    def __init__(self, data: Optional[Dict[str, Any]] = None,
                 merge_strategy: MergeStrategy = MergeStrategy.MAX, **columns):
        combined = dict(data or {})
        combined.update(columns)
        self._data = MappingProxyType(combined)
        self._merge_strategy = merge_strategy

    @property
    def data(self):
        """Read-only view of every column in this row."""
        return self._data

    @property
    def merge_strategy(self) -> MergeStrategy:
        return self._merge_strategy

    @property
    def columns(self) -> frozenset:
        return frozenset(self._data)

    @property
    def value(self) -> float:
        """The distinguished 'value' column as a float."""
        return self.get_numeric_value(VALUE_COLUMN)

    def get_value(self, column: str) -> Optional[Any]:
        """Get the raw value of a column or None if the column is absent."""
        return self._data.get(column)

    def get_numeric_value(self, column: str) -> float:
        """
        Get a column as a float.

        A missing column reads as 0.0. A column that cannot be converted
        raises ValueError.
        """
        raw = self._data.get(column)
        if raw is None:
            return 0.0

        try:
            return float(raw)
        except (TypeError, ValueError):
            raise ValueError(f"Column '{column}' is not numeric: {raw!r}")

    def get_int_value(self, column: str) -> int:
        return int(self.get_numeric_value(column))

    def meets_all_requirements(self, requirements: Iterable) -> bool:
        """Check whether this row satisfies every requirement (True if none)."""
        return all(requirement.is_met_by(self) for requirement in requirements)

    def conflicts(self, other: "StatRow") -> bool:
        """
        Check whether this row and another row describe the same event.

        Rows conflict when they hold the same columns and agree on every
        column apart from 'value' and 'id'.
        """
        if other is None:
            return False

        if self.columns != other.columns:
            return False

        for column, item in self._data.items():
            if column in NON_IDENTIFYING_COLUMNS:
                continue
            if item != other.get_value(column):
                return False

        return True

    def resolve_conflict(self, other: "StatRow") -> "StatRow":
        """
        Merge this row with a conflicting row into a new row.

        The new row keeps the identifying columns (and the id of this row) and
        combines both values using this row's merge strategy.

        Raises:
            ValueError: if the rows do not conflict
        """
        if not self.conflicts(other):
            raise ValueError(f"Cannot resolve rows that do not conflict: {self} and {other}")

        merged = dict(self._data)
        merged[VALUE_COLUMN] = self._merge_strategy.merge(self.value, other.value)

        logger.debug(f"Resolved conflict ({self._merge_strategy.value}): {self} + {other}")
        return StatRow(merged, merge_strategy=self._merge_strategy)

    def __eq__(self, other):
        if not isinstance(other, StatRow):
            return NotImplemented
        return dict(self._data) == dict(other._data)

    def __hash__(self):
        # Unhashable column values (lists, dicts) only contribute their column name
        hashed = []
        for column, item in sorted(self._data.items(), key=lambda item: item[0]):
            try:
                hashed.append((column, hash(item)))
            except TypeError:
                hashed.append((column, None))
        return hash(tuple(hashed))

    def __repr__(self):
        columns = ", ".join(f"{key}={item!r}" for key, item in self._data.items())
        return f"StatRow({columns})"
