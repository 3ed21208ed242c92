"""
Central configuration module for the player statistics store.
"""

from .settings import (
    get_table_prefix,
    get_table_name,
    get_environment,
    is_test_environment,
    is_production_environment
)

__all__ = [
    'get_table_prefix',
    'get_table_name',
    'get_environment',
    'is_test_environment',
    'is_production_environment'
]
