"""
Conflict Resolution

Merges two PlayerInfo objects collected independently for the same player
(for example a cached copy and a fresh read of the database) into a single
PlayerInfo without duplicated rows.

For every statistic, each row of the first object is compared with each row
of the second. Every conflicting pair is replaced by its resolved row; rows
that took part in no conflict are copied as they are. Rows are tracked by
their position in their own list, so a row that merely equals a conflicting
row is still kept.
"""

import logging
from typing import List, Set, Tuple

from player_stats.player_info import PlayerInfo
from player_stats.row import StatRow
from player_stats.statistics import PlayerStat

logger = logging.getLogger(__name__)


def _merge_rows(rows: List[StatRow], compared_rows: List[StatRow]) -> Tuple[List[StatRow], int]:
    """
    Merge two lists of rows of the same statistic.

    Returns:
        Tuple of (merged rows, number of conflicts resolved)
    """
    # If one of the lists is empty, nothing can conflict.
    if not compared_rows:
        return list(rows), 0
    if not rows:
        return list(compared_rows), 0

    merged = []
    consumed: Set[int] = set()
    compared_consumed: Set[int] = set()
    conflicts = 0

    for index, row in enumerate(rows):
        for compared_index, compared_row in enumerate(compared_rows):
            if row.conflicts(compared_row):
                merged.append(row.resolve_conflict(compared_row))
                consumed.add(index)
                compared_consumed.add(compared_index)
                conflicts += 1

    merged.extend(row for index, row in enumerate(rows) if index not in consumed)
    merged.extend(row for index, row in enumerate(compared_rows) if index not in compared_consumed)

    return merged, conflicts


def resolve_conflicts(info: PlayerInfo, compare_info: PlayerInfo) -> PlayerInfo:
    """
    Get a PlayerInfo containing all data of both given objects without
    conflicting rows.

    Neither input is modified. The result carries the uuid of the first
    object. Statistics that neither object has data for are left out of the
    result; statistics that end up with no rows are kept as empty lists.

    Args:
        info: PlayerInfo to take the uuid from
        compare_info: PlayerInfo to merge into it

    Returns:
        A new, non-conflicting PlayerInfo

    Raises:
        ValueError: if either PlayerInfo is None
    """
    if info is None or compare_info is None:
        raise ValueError("PlayerInfo object cannot be None")

    if info.uuid != compare_info.uuid:
        logger.warning(f"Resolving conflicts between different players: {info.uuid} and {compare_info.uuid}")

    resolved = PlayerInfo(info.uuid)
    total_conflicts = 0

    for stat_type in PlayerStat:
        if not info.has_data(stat_type) and not compare_info.has_data(stat_type):
            continue

        rows, conflicts = _merge_rows(info.get_rows(stat_type), compare_info.get_rows(stat_type))

        if conflicts:
            logger.debug(f"{stat_type.name}: resolved {conflicts} conflicts into {len(rows)} rows")

        total_conflicts += conflicts
        resolved.set_data(stat_type, rows)

    logger.info(f"Resolved {total_conflicts} conflicts over {resolved.get_number_of_statistics()} "
                f"statistics for {info.uuid}")

    return resolved
