"""
Configuration settings for the Player Stats module.

This module centralizes the configuration of the player statistics store:
aggregation defaults, logging and the storage names of every statistic.
"""

import os
import logging

from config.settings import (
    get_environment,
    is_test_environment
)
from player_stats.statistics import PlayerStat

# ============================================
# Aggregation Configuration
# ============================================

# Decimal places used when presenting totals
DEFAULT_ROUNDING_DECIMALS = 2

# ============================================
# Logging Configuration
# ============================================

# Log levels
LOG_LEVEL_PRODUCTION = "INFO"
LOG_LEVEL_TEST = "DEBUG"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_statistic_table_names(environment=None):
    """Get the table name of every statistic for the environment."""
    return {
        stat_type: stat_type.descriptor.get_table_name(environment)
        for stat_type in PlayerStat
    }


# ============================================
# Environment-specific overrides
# ============================================

def get_config_for_environment(environment=None):
    """Get configuration settings for specific environment."""
    env = get_environment(environment)

    config = {
        'environment': env,
        'is_test': is_test_environment(env),
        'log_level': LOG_LEVEL_TEST if is_test_environment(env) else LOG_LEVEL_PRODUCTION,
        'rounding_decimals': int(os.getenv('STATZ_ROUNDING_DECIMALS', DEFAULT_ROUNDING_DECIMALS)),
        'statistic_tables': get_statistic_table_names(env),
    }

    return config


def configure_logging(environment=None):
    """
    Set up logging with the project format and the environment's log level.

    Returns:
        dict: The configuration that was applied
    """
    config = get_config_for_environment(environment)

    logging.basicConfig(
        level=getattr(logging, config['log_level']),
        format=LOG_FORMAT
    )

    return config
