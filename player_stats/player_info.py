"""
Player Info

In-memory statistics of a single player. Statistics are stored as
(statistic, rows) pairs where each row is a StatRow read from, or destined
for, the statistics database.

Key Features:
- Row lookups by statistic and row number
- Value aggregation with optional row requirements and rounding
- Defensive copies on every read so callers cannot alter stored rows
- Conflict-free merging of two independently collected PlayerInfo objects
"""

import logging
from typing import Dict, List, Optional, Any, Set

from player_stats.row import StatRow
from player_stats.requirements import RowRequirement
from player_stats.statistics import PlayerStat
from player_stats.utils import round_half_up

logger = logging.getLogger(__name__)


class PlayerInfo:
    """
    Statistics of one player, keyed by PlayerStat.

    A statistic that has never been set reads as an empty list of rows. A
    statistic that was explicitly set to an empty list still counts as
    having data.
    """

    def __init__(self, uuid):
        """
        Initialize an empty PlayerInfo.

        Args:
            uuid: Identifier of the player this object describes
        """
        if uuid is None:
            raise ValueError("UUID cannot be None")

        self._uuid = uuid
        self._statistics: Dict[PlayerStat, List[StatRow]] = {}

    @property
    def uuid(self):
        """Identifier of the player this PlayerInfo represents."""
        return self._uuid

    def has_data(self, stat_type: PlayerStat) -> bool:
        """
        Check whether data for a given statistic is available.

        Args:
            stat_type: Statistic to check

        Returns:
            bool: True if rows (possibly none) are stored for the statistic
        """
        return self._statistics.get(stat_type) is not None

    def get_rows(self, stat_type: PlayerStat) -> List[StatRow]:
        """
        Get all rows stored for a statistic.

        Args:
            stat_type: Statistic to get rows for

        Returns:
            List of StatRow objects, empty if nothing is stored
        """
        if not self.has_data(stat_type):
            return []

        return list(self._statistics[stat_type])

    def get_row(self, stat_type: PlayerStat, row_number: int) -> Optional[StatRow]:
        """
        Get a single row of a statistic.

        Args:
            stat_type: Statistic to get the row of
            row_number: Zero-based position of the row

        Returns:
            The StatRow or None if the row does not exist
        """
        rows = self._statistics.get(stat_type) or []

        if row_number < 0 or row_number >= len(rows):
            return None

        return rows[row_number]

    def get_value(self, stat_type: PlayerStat, row_number: int, column: str) -> Optional[Any]:
        """
        Get the value of a column of a given row.

        Returns:
            The stored value, or None if the row or column does not exist
        """
        row = self.get_row(stat_type, row_number)

        if row is None:
            return None

        return row.get_value(column)

    def get_number_of_rows(self, stat_type: PlayerStat) -> int:
        """Number of rows stored for a statistic (zero if none)."""
        return len(self._statistics.get(stat_type) or [])

    def get_total_number_of_rows(self) -> int:
        """Total number of rows over all statistics."""
        return sum(self.get_number_of_rows(stat_type) for stat_type in PlayerStat)

    def get_number_of_statistics(self) -> int:
        """Number of different statistics stored in this object."""
        return len(self._statistics)

    def get_total_value(self, stat_type: PlayerStat, *requirements: RowRequirement,
                        decimals: Optional[int] = None) -> float:
        """
        Sum the 'value' column of the rows of a statistic.

        Only rows that meet every given requirement are counted. Without
        requirements all rows are counted.

        Args:
            stat_type: Statistic to sum
            *requirements: RowRequirements a row must meet to be counted
            decimals: Optional number of decimal places to round the sum to
                (half-up rounding)

        Returns:
            float: The sum, or 0.0 if there are no matching rows
        """
        total = 0.0

        for row in self._statistics.get(stat_type) or []:
            if requirements and not row.meets_all_requirements(requirements):
                continue
            total += row.value

        if decimals is not None:
            return round_half_up(total, decimals)

        return total

    def set_data(self, stat_type: PlayerStat, rows: List[StatRow]) -> None:
        """
        Set the rows of a statistic, replacing any stored rows.

        Args:
            stat_type: Statistic to set
            rows: Rows to store; an empty list is allowed

        Raises:
            ValueError: if stat_type or rows is None
        """
        if stat_type is None:
            raise ValueError("Stat cannot be None")

        if rows is None:
            raise ValueError("Given rows cannot be None")

        self._statistics[stat_type] = list(rows)
        logger.debug(f"Set {len(self._statistics[stat_type])} rows of {stat_type.name} for {self._uuid}")

    def add_row(self, stat_type: PlayerStat, row: StatRow) -> None:
        """
        Append a row to a statistic.

        Raises:
            ValueError: if stat_type or row is None
        """
        if stat_type is None:
            raise ValueError("Stat cannot be None")

        if row is None:
            raise ValueError("Row cannot be None")

        self._statistics.setdefault(stat_type, []).append(row)
        logger.debug(f"Added row to {stat_type.name} for {self._uuid}: {row}")

    def remove_row(self, stat_type: PlayerStat, row: StatRow) -> None:
        """
        Remove the first row equal to the given row.

        Nothing happens when the statistic has no data or the row is not
        stored.

        Raises:
            ValueError: if stat_type or row is None
        """
        if stat_type is None:
            raise ValueError("Stat cannot be None")

        if row is None:
            raise ValueError("Row cannot be None")

        if not self.has_data(stat_type):
            return

        rows = self._statistics[stat_type]
        if row in rows:
            rows.remove(row)
            logger.debug(f"Removed row from {stat_type.name} for {self._uuid}: {row}")

    def get_statistics(self) -> Set[PlayerStat]:
        """All statistics stored in this object, including empty ones."""
        return set(self._statistics)

    def get_all_rows(self) -> List[StatRow]:
        """All rows of this object, ordered by the declaration order of PlayerStat."""
        rows = []

        for stat_type in PlayerStat:
            rows.extend(self._statistics.get(stat_type) or [])

        return rows

    def get_rows_per_statistic(self) -> Dict[PlayerStat, List[StatRow]]:
        """
        Get a snapshot of every stored statistic and its rows.

        Returns:
            Dict mapping each statistic to a copy of its rows
        """
        return {
            stat_type: list(rows)
            for stat_type, rows in self._statistics.items()
            if rows is not None
        }

    def resolve_conflicts(self, compare_info: "PlayerInfo") -> "PlayerInfo":
        """
        Get a PlayerInfo holding the data of this object and the given one
        without conflicting rows. See player_stats.reconciler.
        """
        from player_stats.reconciler import resolve_conflicts

        return resolve_conflicts(self, compare_info)

    def __repr__(self):
        parts = []

        for stat_type, rows in self._statistics.items():
            parts.append(f"{stat_type.name}: {{{', '.join(str(row) for row in rows)}}}")

        return f"PlayerInfo of {self._uuid}: {{{', '.join(parts)}}}"

    __str__ = __repr__
