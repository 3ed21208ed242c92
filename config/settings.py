"""
Central configuration for the player statistics store.

This module provides a single source of truth for the runtime environment and
the storage names of each statistic, ensuring proper separation between test
and production environments.

Environment Control:
    - Set DATA_ENV=test for test environment
    - Set DATA_ENV=production for production (default)
    - Set STATZ_TABLE_PREFIX to change the prefix of statistic tables
    - Values can also be placed in a .env file
    - Can also be controlled via function parameters
"""

import os
import logging

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

# Supported environments
PRODUCTION = "production"
TEST = "test"
VALID_ENVIRONMENTS = (PRODUCTION, TEST)

# Default environment
DEFAULT_ENVIRONMENT = PRODUCTION

# Prefix shared by every statistic table
DEFAULT_TABLE_PREFIX = "statz_"


def get_environment(override=None):
    """
    Get the current environment setting.

    Args:
        override: Optional environment override ('test' or 'production')

    Returns:
        str: The environment ('test' or 'production')
    """
    if override:
        return override.lower()

    env = os.getenv('DATA_ENV', DEFAULT_ENVIRONMENT).lower()

    if env not in VALID_ENVIRONMENTS:
        logger.warning(f"Invalid DATA_ENV '{env}', using '{PRODUCTION}'")
        return PRODUCTION

    return env


def get_table_prefix():
    """Get the prefix applied to every statistic table name."""
    return os.getenv('STATZ_TABLE_PREFIX', DEFAULT_TABLE_PREFIX)


def get_table_name(base_name, environment=None):
    """
    Get the full table name for the environment.

    Test tables carry a '_test' suffix so the two environments never share
    rows.

    Args:
        base_name: Base table name (e.g., 'blocks_broken', 'joins')
        environment: Optional environment override

    Returns:
        str: Full table name with prefix and environment suffix
    """
    env = get_environment(environment)
    name = f"{get_table_prefix()}{base_name}"

    if env == TEST:
        return f"{name}_test"
    return name


def is_test_environment(environment=None):
    """
    Check if we're in test environment.

    Args:
        environment: Optional environment override

    Returns:
        bool: True if test environment
    """
    return get_environment(environment) == TEST


def is_production_environment(environment=None):
    """
    Check if we're in production environment.

    Args:
        environment: Optional environment override

    Returns:
        bool: True if production environment
    """
    return get_environment(environment) == PRODUCTION
