"""
Tabular export of player statistics.

Converts a PlayerInfo to pandas DataFrames for analysis and back again:
- rows_to_dataframe: one line per stored row (long format)
- totals_dataframe: one line per stored statistic with row count and total
- player_info_from_dataframe: rebuild a PlayerInfo from a long-format frame
"""

import logging
from typing import Optional

import pandas as pd

from player_stats.config import get_config_for_environment
from player_stats.player_info import PlayerInfo
from player_stats.row import VALUE_COLUMN
from player_stats.statistics import PlayerStat

logger = logging.getLogger(__name__)

# Columns describing where a row came from rather than the row itself
PLAYER_UUID_COLUMN = 'player_uuid'
PLAYER_STAT_COLUMN = 'player_stat'
ROW_NUMBER_COLUMN = 'row_number'
METADATA_COLUMNS = (PLAYER_UUID_COLUMN, PLAYER_STAT_COLUMN, ROW_NUMBER_COLUMN)

BASE_COLUMNS = list(METADATA_COLUMNS) + [VALUE_COLUMN]
TOTALS_COLUMNS = ['statistic', 'rows', 'total_value']


def rows_to_dataframe(info: PlayerInfo) -> pd.DataFrame:
    """
    Flatten every row of a PlayerInfo into a DataFrame.

    Columns a row does not carry are left as NaN.

    Args:
        info: PlayerInfo to export

    Returns:
        DataFrame with the base columns followed by every auxiliary column

    Raises:
        ValueError: if a row has a column named like one of the metadata
            columns
    """
    records = []
    extra_columns = []

    for stat_type in PlayerStat:
        for row_number, row in enumerate(info.get_rows(stat_type)):
            clashing = [column for column in row.data if column in METADATA_COLUMNS]
            if clashing:
                raise ValueError(f"Row columns {clashing} of {stat_type.name} clash with DataFrame metadata columns")

            record = {
                PLAYER_UUID_COLUMN: str(info.uuid),
                PLAYER_STAT_COLUMN: stat_type.name,
                ROW_NUMBER_COLUMN: row_number,
            }
            for column, item in row.data.items():
                record[column] = item
                if column not in BASE_COLUMNS and column not in extra_columns:
                    extra_columns.append(column)
            records.append(record)

    if not records:
        return pd.DataFrame(columns=BASE_COLUMNS)

    return pd.DataFrame(records, columns=BASE_COLUMNS + extra_columns)


def totals_dataframe(info: PlayerInfo, decimals: Optional[int] = None) -> pd.DataFrame:
    """
    Summarize a PlayerInfo per statistic.

    Args:
        info: PlayerInfo to summarize
        decimals: Number of decimal places for the totals (defaults to the
            configured rounding_decimals)

    Returns:
        DataFrame with statistic, rows and total_value, in declaration order
    """
    if decimals is None:
        decimals = get_config_for_environment()['rounding_decimals']

    stored = info.get_statistics()
    summary = [
        {
            'statistic': stat_type.name,
            'rows': info.get_number_of_rows(stat_type),
            'total_value': info.get_total_value(stat_type, decimals=decimals),
        }
        for stat_type in PlayerStat
        if stat_type in stored
    ]

    return pd.DataFrame(summary, columns=TOTALS_COLUMNS)


def player_info_from_dataframe(uuid, frame: pd.DataFrame) -> PlayerInfo:
    """
    Build a PlayerInfo from a long-format DataFrame.

    The frame needs a 'player_stat' column; 'player_uuid' and 'row_number'
    are ignored. Rows are added in frame order and NaN cells are dropped.

    Raises:
        ValueError: if the frame lacks a 'player_stat' column or names an
            unknown statistic
    """
    if PLAYER_STAT_COLUMN not in frame.columns:
        raise ValueError(f"DataFrame must have a '{PLAYER_STAT_COLUMN}' column")

    info = PlayerInfo(uuid)
    row_columns = [column for column in frame.columns if column not in METADATA_COLUMNS]

    for record in frame.to_dict(orient='records'):
        stat_type = PlayerStat.from_name(record[PLAYER_STAT_COLUMN])
        columns = {column: record[column] for column in row_columns
                   if not pd.isna(record[column])}
        info.add_row(stat_type, stat_type.descriptor.build_row(**columns))

    logger.info(f"Loaded {len(frame)} rows for {uuid} from DataFrame")
    return info
