"""
Row Requirements

A RowRequirement is a condition on a single column of a row. Requirements are
used to restrict aggregations to a subset of rows, for example only the blocks
broken in a given world:

    info.get_total_value(PlayerStat.BLOCKS_BROKEN, RowRequirement("world", "earth"))

Several requirements passed together must all be met.
"""

import operator
from dataclasses import dataclass
from typing import Any

# Supported comparison operators
OPERATORS = {
    "=": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
}


@dataclass(frozen=True)
class RowRequirement:
    """Requirement that a column of a row compares to a given value."""
    column: str
    value: Any
    operator: str = "="

    def __post_init__(self):
        if not self.column:
            raise ValueError("Requirement column cannot be empty")
        if self.operator not in OPERATORS:
            raise ValueError(f"Unknown operator '{self.operator}'. Available: {list(OPERATORS.keys())}")

    def is_met_by(self, row) -> bool:
        """
        Check whether a row meets this requirement.

        A row without the column never meets the requirement. Values that
        cannot be compared (e.g. a string against a number) do not match.
        """
        actual = row.get_value(self.column)
        if actual is None:
            return False

        expected = self.value
        if isinstance(expected, (int, float)) and not isinstance(actual, (int, float)):
            try:
                actual = float(actual)
            except (TypeError, ValueError):
                return False

        try:
            return OPERATORS[self.operator](actual, expected)
        except TypeError:
            return False

    def __str__(self):
        return f"{self.column} {self.operator} {self.value!r}"
