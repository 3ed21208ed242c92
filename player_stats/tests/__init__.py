"""
Player Stats Module Test Suite

Unit tests for the player statistics store, its rows and requirements, the
conflict resolution and the configuration helpers.

Run all tests:
    python -m unittest discover player_stats.tests

Run specific test module:
    python -m unittest player_stats.tests.test_player_info
    python -m unittest player_stats.tests.test_reconciler
"""

__version__ = "1.0.0"
