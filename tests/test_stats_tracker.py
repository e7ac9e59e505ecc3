"""Tests for match statistics."""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import unittest

from events import BallServed, PaddleHit, PointScored, Side, WallBounce
from stats_tracker import StatsTracker


class TestStatsTracker(unittest.TestCase):
    """Test StatsTracker."""

    def setUp(self):
        self.stats = StatsTracker()

    def test_initial(self):
        self.assertEqual(self.stats.match_count, 0)
        self.assertEqual(self.stats.average_ticks, 0.0)
        self.assertEqual(self.stats.win_rate_player, 0.5)

    def test_records_hits_and_points(self):
        """Hits extend the rally, points end it."""
        hit = PaddleHit(Side.PLAYER, 47, 250)
        self.stats.record_tick([hit])
        self.stats.record_tick([WallBounce("top", 100, 12)])
        self.stats.record_tick([PaddleHit(Side.OPPONENT, 753, 250)])
        self.stats.record_tick([hit])
        self.stats.record_tick(
            [PointScored(Side.PLAYER, 1, 0, False), BallServed(400, 250, 5, 0)]
        )
        self.stats.record_tick([hit])

        self.assertEqual(self.stats.current_ticks, 6)
        self.assertEqual(self.stats.current_hits, 4)
        self.assertEqual(self.stats.longest_rally, 3)
        self.assertEqual(self.stats.current_rally, 1)
        self.assertEqual(self.stats.points, 1)
        self.assertIn("Point to player (1-0)", self.stats.event_log[0])

    def test_end_match(self):
        """Ending a match stores it and resets the current counters."""
        self.stats.record_tick([PaddleHit(Side.PLAYER, 47, 250)])
        self.stats.record_tick([])
        match = self.stats.end_match(Side.OPPONENT, 2, 5)

        self.assertEqual(match.match_num, 1)
        self.assertEqual(match.ticks, 2)
        self.assertEqual(match.paddle_hits, 1)
        self.assertEqual(self.stats.total_wins[Side.OPPONENT], 1)
        self.assertEqual(self.stats.current_ticks, 0)
        self.assertEqual(self.stats.average_ticks, 2.0)
        self.assertEqual(self.stats.win_rate_opponent, 1.0)

    def test_unfinished_match(self):
        """A match without a winner is counted separately."""
        self.stats.end_match(None, 1, 1)
        self.assertEqual(self.stats.unfinished_matches, 1)
        self.assertEqual(sum(self.stats.total_wins.values()), 0)

    def test_history_trimmed(self):
        stats = StatsTracker(max_history=3)
        for _ in range(5):
            stats.end_match(Side.PLAYER, 5, 0)
        self.assertEqual(len(stats.history), 3)
        self.assertEqual(stats.history[0].match_num, 3)
        self.assertEqual(stats.match_count, 5)


if __name__ == "__main__":
    unittest.main()
