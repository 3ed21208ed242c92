"""
Statistic Kinds

The closed set of statistics recorded for a player. Each statistic has a
StatDescriptor describing the columns its rows carry and how conflicting rows
are merged, so kind-specific behaviour lives in one lookup table rather than
in conditionals spread across callers.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from config.settings import get_table_name
from player_stats.row import MergeStrategy, StatRow, VALUE_COLUMN, ID_COLUMN

logger = logging.getLogger(__name__)


class PlayerStat(Enum):
    """Statistics tracked per player, in their declared iteration order."""
    ARROWS_SHOT = "arrows_shot"
    BLOCKS_BROKEN = "blocks_broken"
    BLOCKS_PLACED = "blocks_placed"
    BUCKETS_EMPTIED = "buckets_emptied"
    BUCKETS_FILLED = "buckets_filled"
    COMMANDS_PERFORMED = "commands_performed"
    DAMAGE_TAKEN = "damage_taken"
    DEATHS = "deaths"
    DISTANCE_TRAVELLED = "distance_travelled"
    EGGS_THROWN = "eggs_thrown"
    ENTERED_BEDS = "entered_beds"
    FOOD_EATEN = "food_eaten"
    ITEMS_CAUGHT = "items_caught"
    ITEMS_CRAFTED = "items_crafted"
    ITEMS_DROPPED = "items_dropped"
    ITEMS_PICKED_UP = "items_picked_up"
    JOINS = "joins"
    KILLS_MOBS = "kills_mobs"
    KILLS_PLAYERS = "kills_players"
    TELEPORTS = "teleports"
    TIME_PLAYED = "time_played"
    TIMES_KICKED = "times_kicked"
    TIMES_SHORN = "times_shorn"
    TOOLS_BROKEN = "tools_broken"
    VILLAGER_TRADES = "villager_trades"
    VOTES = "votes"
    WORLDS_CHANGED = "worlds_changed"
    XP_GAINED = "xp_gained"

    @property
    def descriptor(self) -> "StatDescriptor":
        return STAT_DESCRIPTORS[self]

    @classmethod
    def from_name(cls, name: str) -> "PlayerStat":
        """
        Look up a statistic by member name or table name, case-insensitive.

        Raises:
            ValueError: if no statistic has that name
        """
        if isinstance(name, cls):
            return name

        key = str(name).strip()
        for stat in cls:
            if key.upper() == stat.name or key.lower() == stat.value:
                return stat

        raise ValueError(f"Unknown statistic: {name}")


@dataclass(frozen=True)
class StatDescriptor:
    """Static description of one statistic kind."""
    table_name: str
    columns: Tuple[str, ...] = ()
    merge_strategy: MergeStrategy = MergeStrategy.MAX

    def get_table_name(self, environment=None) -> str:
        """Storage name of this statistic for the given environment."""
        return get_table_name(self.table_name, environment)

    def build_row(self, value=0, **columns) -> StatRow:
        """
        Build a row for this statistic.

        Columns the statistic does not declare are kept but logged, since the
        persistence layer will not know where to store them.
        """
        unknown = [column for column in columns
                   if column not in self.columns and column != ID_COLUMN]
        if unknown:
            logger.warning(f"Columns {unknown} are not declared for {self.table_name}")

        data = {VALUE_COLUMN: value}
        data.update(columns)
        return StatRow(data, merge_strategy=self.merge_strategy)


def _describe(stat: PlayerStat, *columns: str) -> StatDescriptor:
    return StatDescriptor(table_name=stat.value, columns=tuple(columns))


STAT_DESCRIPTORS = {
    PlayerStat.ARROWS_SHOT: _describe(PlayerStat.ARROWS_SHOT, "world", "forceShot"),
    PlayerStat.BLOCKS_BROKEN: _describe(PlayerStat.BLOCKS_BROKEN, "typeid", "datavalue", "world"),
    PlayerStat.BLOCKS_PLACED: _describe(PlayerStat.BLOCKS_PLACED, "typeid", "datavalue", "world"),
    PlayerStat.BUCKETS_EMPTIED: _describe(PlayerStat.BUCKETS_EMPTIED, "world"),
    PlayerStat.BUCKETS_FILLED: _describe(PlayerStat.BUCKETS_FILLED, "world"),
    PlayerStat.COMMANDS_PERFORMED: _describe(PlayerStat.COMMANDS_PERFORMED, "command", "arguments", "world"),
    PlayerStat.DAMAGE_TAKEN: _describe(PlayerStat.DAMAGE_TAKEN, "cause", "world"),
    PlayerStat.DEATHS: _describe(PlayerStat.DEATHS, "world"),
    PlayerStat.DISTANCE_TRAVELLED: _describe(PlayerStat.DISTANCE_TRAVELLED, "world", "moveType"),
    PlayerStat.EGGS_THROWN: _describe(PlayerStat.EGGS_THROWN, "world"),
    PlayerStat.ENTERED_BEDS: _describe(PlayerStat.ENTERED_BEDS, "world"),
    PlayerStat.FOOD_EATEN: _describe(PlayerStat.FOOD_EATEN, "foodEaten", "world"),
    PlayerStat.ITEMS_CAUGHT: _describe(PlayerStat.ITEMS_CAUGHT, "caught", "world"),
    PlayerStat.ITEMS_CRAFTED: _describe(PlayerStat.ITEMS_CRAFTED, "item", "world"),
    PlayerStat.ITEMS_DROPPED: _describe(PlayerStat.ITEMS_DROPPED, "item", "world"),
    PlayerStat.ITEMS_PICKED_UP: _describe(PlayerStat.ITEMS_PICKED_UP, "item", "world"),
    PlayerStat.JOINS: _describe(PlayerStat.JOINS, "world"),
    PlayerStat.KILLS_MOBS: _describe(PlayerStat.KILLS_MOBS, "mob", "world"),
    PlayerStat.KILLS_PLAYERS: _describe(PlayerStat.KILLS_PLAYERS, "playerKilled", "world"),
    PlayerStat.TELEPORTS: _describe(PlayerStat.TELEPORTS, "world", "destWorld", "cause"),
    PlayerStat.TIME_PLAYED: _describe(PlayerStat.TIME_PLAYED, "world"),
    PlayerStat.TIMES_KICKED: _describe(PlayerStat.TIMES_KICKED, "world", "reason"),
    PlayerStat.TIMES_SHORN: _describe(PlayerStat.TIMES_SHORN, "world"),
    PlayerStat.TOOLS_BROKEN: _describe(PlayerStat.TOOLS_BROKEN, "item", "world"),
    PlayerStat.VILLAGER_TRADES: _describe(PlayerStat.VILLAGER_TRADES, "world", "trade"),
    PlayerStat.VOTES: _describe(PlayerStat.VOTES),
    PlayerStat.WORLDS_CHANGED: _describe(PlayerStat.WORLDS_CHANGED, "world", "destWorld"),
    PlayerStat.XP_GAINED: _describe(PlayerStat.XP_GAINED, "world"),
}
