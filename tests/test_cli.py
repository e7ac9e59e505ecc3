"""Tests for CLI integration (main.py)."""

import os
import sys
import json
import random
import tempfile
import unittest
from io import StringIO
from unittest.mock import patch

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import Config
from debug import DebugLogger, EventType
from game import Game
from main import autopilot, main, run_headless


class TestAutopilot(unittest.TestCase):
    """Test the autopilot paddle."""

    def setUp(self):
        self.game = Game(Config(), rng=random.Random(0))

    def test_follows_ball_down(self):
        self.game.state.ball_y = 400
        autopilot(self.game, 5)
        self.assertEqual(self.game.state.player_paddle_y, 205)

    def test_holds_when_level(self):
        self.game.state.ball_y = 250
        autopilot(self.game, 5)
        self.assertEqual(self.game.state.player_paddle_y, 200)

    def test_clamped(self):
        self.game.state.player_paddle_y = 2
        self.game.state.ball_y = 0
        autopilot(self.game, 5)
        self.assertEqual(self.game.state.player_paddle_y, 0)


class TestHeadlessMatches(unittest.TestCase):
    """Test run_headless."""

    def test_plays_requested_matches(self):
        with patch("sys.stdout", new=StringIO()):
            stats = run_headless(Config(), matches=2, seed=1, max_ticks=300)
        self.assertEqual(stats.match_count, 2)
        self.assertEqual(len(stats.history), 2)
        for match in stats.history:
            self.assertLessEqual(match.ticks, 300)

    def test_seed_reproducible(self):
        """Same seed gives the same results."""
        with patch("sys.stdout", new=StringIO()):
            a = run_headless(Config(), matches=2, seed=9, max_ticks=500)
            b = run_headless(Config(), matches=2, seed=9, max_ticks=500)
        self.assertEqual(
            [(m.player_score, m.opponent_score, m.ticks) for m in a.history],
            [(m.player_score, m.opponent_score, m.ticks) for m in b.history],
        )

    def test_finished_match_has_winner(self):
        """Matches that reach five points record their winner."""
        with patch("sys.stdout", new=StringIO()):
            stats = run_headless(Config(), matches=3, seed=4, max_ticks=20000)
        for match in stats.history:
            if match.winner is not None:
                self.assertEqual(max(match.player_score, match.opponent_score), 5)

    def test_summary_printed(self):
        output = StringIO()
        with patch("sys.stdout", output):
            run_headless(Config(), matches=1, seed=0, max_ticks=50)
        self.assertIn("Final:", output.getvalue())
        self.assertIn("unfinished=1", output.getvalue())
        self.assertIn("Win rate: player 50.0%, opponent 50.0%", output.getvalue())

    def test_summary_lists_recent_points(self):
        """Win rates and the latest points are part of the summary."""
        output = StringIO()
        with patch("sys.stdout", output):
            stats = run_headless(Config(), matches=2, seed=4, max_ticks=20000)
        text = output.getvalue()
        self.assertIn(f"player {stats.win_rate_player:.1%}", text)
        self.assertIn("Recent points:", text)
        self.assertIn(stats.event_log[0], text)

    def test_logger_shared(self):
        """A logger passed in records events from every match."""
        logger = DebugLogger()
        with patch("sys.stdout", new=StringIO()):
            run_headless(Config(), matches=1, seed=0, max_ticks=2000, logger=logger)
        self.assertTrue(logger.get_events_by_type(EventType.PADDLE_HIT))


class TestMain(unittest.TestCase):
    """Test the command line entry point."""

    def test_headless_mode(self):
        argv = ["main.py", "--mode", "headless", "--matches", "1", "--max-ticks", "100", "--seed", "2"]
        output = StringIO()
        with patch.object(sys, "argv", argv), patch("sys.stdout", output):
            main()
        self.assertIn("Matches: 1", output.getvalue())

    def test_export_log(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "events.json")
            argv = ["main.py", "--mode", "headless", "--matches", "1",
                    "--max-ticks", "500", "--seed", "3", "--export-log", path]
            with patch.object(sys, "argv", argv), patch("sys.stdout", new=StringIO()):
                main()
            with open(path) as f:
                data = json.load(f)
        self.assertGreater(data["total_frames"], 0)
        self.assertIn("events", data)


if __name__ == "__main__":
    unittest.main()
