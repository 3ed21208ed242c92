"""
Player Stats Module

In-memory statistics store for a single player and the conflict resolution
used to merge two independently collected copies of it.

Key Components:
- player_info.py: PlayerInfo, the per-player statistics store
- reconciler.py: Conflict-free merging of two PlayerInfo objects
- row.py: StatRow, one recorded observation of a statistic
- requirements.py: RowRequirement, conditions used to filter rows
- statistics.py: PlayerStat and the per-statistic descriptors
- frames.py: pandas export of a PlayerInfo
- config.py: Environment-specific settings and logging setup
"""

__version__ = "1.0.0"

from .row import StatRow, MergeStrategy
from .requirements import RowRequirement
from .statistics import PlayerStat, StatDescriptor
from .player_info import PlayerInfo
from .reconciler import resolve_conflicts

__all__ = [
    'StatRow',
    'MergeStrategy',
    'RowRequirement',
    'PlayerStat',
    'StatDescriptor',
    'PlayerInfo',
    'resolve_conflicts'
]
