"""
Unit tests for the PlayerInfo statistics store.
"""

import unittest
import uuid
from pathlib import Path
import sys

# Add parent directory to path
sys.path.append(str(Path(__file__).parent.parent.parent))

from player_stats.player_info import PlayerInfo
from player_stats.requirements import RowRequirement
from player_stats.row import StatRow
from player_stats.statistics import PlayerStat


class TestPlayerInfo(unittest.TestCase):
    """Test cases for PlayerInfo."""

    def setUp(self):
        """Set up test fixtures."""
        self.player_uuid = uuid.UUID("c2a0e6bb-8a4c-4a8e-9b0e-3f1d2c4b5a69")
        self.info = PlayerInfo(self.player_uuid)

        self.earth_row = StatRow(value=5, typeid=1, datavalue=0, world="earth")
        self.nether_row = StatRow(value=2, typeid=87, datavalue=0, world="nether")
        self.info.set_data(PlayerStat.BLOCKS_BROKEN, [self.earth_row, self.nether_row])

    def test_uuid(self):
        self.assertEqual(self.info.uuid, self.player_uuid)
        with self.assertRaises(AttributeError):
            self.info.uuid = uuid.uuid4()
        with self.assertRaises(ValueError):
            PlayerInfo(None)

    def test_get_rows(self):
        """Test retrieving the rows of a statistic."""
        self.assertEqual(self.info.get_rows(PlayerStat.BLOCKS_BROKEN), [self.earth_row, self.nether_row])
        self.assertEqual(self.info.get_rows(PlayerStat.VOTES), [])

    def test_get_rows_returns_copy(self):
        """Test that changing a returned list leaves the store untouched."""
        rows = self.info.get_rows(PlayerStat.BLOCKS_BROKEN)
        rows.clear()

        self.assertEqual(self.info.get_number_of_rows(PlayerStat.BLOCKS_BROKEN), 2)

        snapshot = self.info.get_rows_per_statistic()
        snapshot[PlayerStat.BLOCKS_BROKEN].append(StatRow(value=100))
        self.assertEqual(self.info.get_number_of_rows(PlayerStat.BLOCKS_BROKEN), 2)

    def test_set_data_copies_input(self):
        rows = [StatRow(value=1)]
        self.info.set_data(PlayerStat.JOINS, rows)
        rows.append(StatRow(value=2))

        self.assertEqual(self.info.get_number_of_rows(PlayerStat.JOINS), 1)

    def test_get_row(self):
        self.assertEqual(self.info.get_row(PlayerStat.BLOCKS_BROKEN, 0), self.earth_row)
        self.assertEqual(self.info.get_row(PlayerStat.BLOCKS_BROKEN, 1), self.nether_row)
        self.assertIsNone(self.info.get_row(PlayerStat.BLOCKS_BROKEN, 2))
        self.assertIsNone(self.info.get_row(PlayerStat.BLOCKS_BROKEN, -1))
        self.assertIsNone(self.info.get_row(PlayerStat.DEATHS, 0))

    def test_get_value(self):
        self.assertEqual(self.info.get_value(PlayerStat.BLOCKS_BROKEN, 1, "world"), "nether")
        self.assertIsNone(self.info.get_value(PlayerStat.BLOCKS_BROKEN, 1, "mob"))
        self.assertIsNone(self.info.get_value(PlayerStat.BLOCKS_BROKEN, 5, "world"))

    def test_has_data(self):
        """Test that an explicitly empty statistic still counts as present."""
        self.assertTrue(self.info.has_data(PlayerStat.BLOCKS_BROKEN))
        self.assertFalse(self.info.has_data(PlayerStat.JOINS))

        self.info.set_data(PlayerStat.JOINS, [])
        self.assertTrue(self.info.has_data(PlayerStat.JOINS))
        self.assertEqual(self.info.get_number_of_rows(PlayerStat.JOINS), 0)

    def test_counts(self):
        self.info.add_row(PlayerStat.JOINS, StatRow(value=1))
        self.info.set_data(PlayerStat.VOTES, [])

        self.assertEqual(self.info.get_number_of_rows(PlayerStat.BLOCKS_BROKEN), 2)
        self.assertEqual(self.info.get_number_of_rows(PlayerStat.DEATHS), 0)
        self.assertEqual(self.info.get_total_number_of_rows(), 3)
        self.assertEqual(self.info.get_number_of_statistics(), 3)

    def test_get_total_value(self):
        self.assertEqual(self.info.get_total_value(PlayerStat.BLOCKS_BROKEN), 7.0)
        self.assertEqual(self.info.get_total_value(PlayerStat.DEATHS), 0.0)

    def test_get_total_value_with_requirements(self):
        """Test summing only rows that meet every requirement."""
        self.assertEqual(self.info.get_total_value(PlayerStat.BLOCKS_BROKEN,
                                                   RowRequirement("world", "earth")), 5.0)
        self.assertEqual(self.info.get_total_value(PlayerStat.BLOCKS_BROKEN,
                                                   RowRequirement("world", "nether"),
                                                   RowRequirement("typeid", 87)), 2.0)
        self.assertEqual(self.info.get_total_value(PlayerStat.BLOCKS_BROKEN,
                                                   RowRequirement("world", "nether"),
                                                   RowRequirement("typeid", 1)), 0.0)

    def test_get_total_value_without_requirements_matches_plain_sum(self):
        requirements = []
        self.assertEqual(self.info.get_total_value(PlayerStat.BLOCKS_BROKEN, *requirements),
                         self.info.get_total_value(PlayerStat.BLOCKS_BROKEN))

    def test_get_total_value_rounded(self):
        """Test half-up rounding of totals."""
        self.info.set_data(PlayerStat.DISTANCE_TRAVELLED, [StatRow(value=1.005), StatRow(value=1.004)])

        self.assertEqual(self.info.get_total_value(PlayerStat.DISTANCE_TRAVELLED, decimals=2), 2.01)
        self.assertEqual(self.info.get_total_value(PlayerStat.BLOCKS_BROKEN, decimals=0), 7.0)

        with self.assertRaises(ValueError):
            self.info.get_total_value(PlayerStat.BLOCKS_BROKEN, decimals=-1)

    def test_get_total_value_rounded_large_total(self):
        """Test rounding totals with more digits than the default decimal precision."""
        self.info.add_row(PlayerStat.DISTANCE_TRAVELLED, StatRow(value=1e27))
        self.info.add_row(PlayerStat.DISTANCE_TRAVELLED, StatRow(value=1e27))

        self.assertEqual(self.info.get_total_value(PlayerStat.DISTANCE_TRAVELLED, decimals=2), 2e27)
        self.assertEqual(self.info.get_total_value(PlayerStat.DISTANCE_TRAVELLED, decimals=0), 2e27)

        self.info.set_data(PlayerStat.TIME_PLAYED, [StatRow(value=float("inf"))])
        self.assertEqual(self.info.get_total_value(PlayerStat.TIME_PLAYED, decimals=2), float("inf"))

    def test_add_and_remove_row(self):
        """Test that adding then removing a row restores the total."""
        before = self.info.get_total_value(PlayerStat.BLOCKS_BROKEN)
        row = StatRow(value=4, typeid=3, datavalue=0, world="earth")

        self.info.add_row(PlayerStat.BLOCKS_BROKEN, row)
        self.assertEqual(self.info.get_total_value(PlayerStat.BLOCKS_BROKEN), before + 4)

        self.info.remove_row(PlayerStat.BLOCKS_BROKEN, row)
        self.assertEqual(self.info.get_total_value(PlayerStat.BLOCKS_BROKEN), before)

    def test_add_row_creates_statistic(self):
        self.info.add_row(PlayerStat.JOINS, StatRow(value=1))

        self.assertTrue(self.info.has_data(PlayerStat.JOINS))
        self.assertEqual(self.info.get_rows(PlayerStat.JOINS), [StatRow(value=1)])

    def test_remove_row_removes_first_equal_row(self):
        self.info.set_data(PlayerStat.JOINS, [StatRow(value=1), StatRow(value=1)])
        self.info.remove_row(PlayerStat.JOINS, StatRow(value=1))

        self.assertEqual(self.info.get_number_of_rows(PlayerStat.JOINS), 1)

    def test_remove_row_without_data(self):
        """Test that removing from an unknown statistic is a no-op."""
        self.info.remove_row(PlayerStat.VOTES, StatRow(value=1))
        self.info.remove_row(PlayerStat.BLOCKS_BROKEN, StatRow(value=99))

        self.assertFalse(self.info.has_data(PlayerStat.VOTES))
        self.assertEqual(self.info.get_number_of_rows(PlayerStat.BLOCKS_BROKEN), 2)

    def test_invalid_arguments(self):
        """Test that None arguments are rejected without changing the store."""
        with self.assertRaises(ValueError):
            self.info.set_data(None, [])
        with self.assertRaises(ValueError):
            self.info.set_data(PlayerStat.BLOCKS_BROKEN, None)
        with self.assertRaises(ValueError):
            self.info.add_row(None, StatRow(value=1))
        with self.assertRaises(ValueError):
            self.info.add_row(PlayerStat.JOINS, None)
        with self.assertRaises(ValueError):
            self.info.remove_row(None, self.earth_row)
        with self.assertRaises(ValueError):
            self.info.remove_row(PlayerStat.BLOCKS_BROKEN, None)

        self.assertEqual(self.info.get_rows(PlayerStat.BLOCKS_BROKEN), [self.earth_row, self.nether_row])
        self.assertEqual(self.info.get_statistics(), {PlayerStat.BLOCKS_BROKEN})

    def test_get_statistics(self):
        self.info.set_data(PlayerStat.VOTES, [])
        self.assertEqual(self.info.get_statistics(), {PlayerStat.BLOCKS_BROKEN, PlayerStat.VOTES})

    def test_get_all_rows_in_declaration_order(self):
        """Test that rows are ordered by statistic, not by insertion."""
        join = StatRow(value=1)
        arrow = StatRow(value=3, world="earth", forceShot=0.8)
        self.info.add_row(PlayerStat.JOINS, join)
        self.info.add_row(PlayerStat.ARROWS_SHOT, arrow)

        self.assertEqual(self.info.get_all_rows(), [arrow, self.earth_row, self.nether_row, join])

    def test_get_rows_per_statistic(self):
        self.info.set_data(PlayerStat.VOTES, [])
        snapshot = self.info.get_rows_per_statistic()

        self.assertEqual(set(snapshot), {PlayerStat.BLOCKS_BROKEN, PlayerStat.VOTES})
        self.assertEqual(snapshot[PlayerStat.VOTES], [])

    def test_repr(self):
        text = repr(self.info)
        self.assertTrue(text.startswith(f"PlayerInfo of {self.player_uuid}"))
        self.assertIn("BLOCKS_BROKEN", text)
        self.assertIn("nether", text)
        self.assertEqual(str(self.info), text)


if __name__ == '__main__':
    unittest.main()
