"""Statistics tracking for Pong Arena."""

from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, List, Optional, Sequence

from events import GameEvent, PaddleHit, PointScored, Side


@dataclass
class MatchStats:
    """Statistics for a single match."""

    match_num: int
    winner: Optional[Side]  # None if the match hit the tick limit
    player_score: int
    opponent_score: int
    ticks: int
    paddle_hits: int


class StatsTracker:
    """Tracks statistics across matches.

    Fed with the events of every tick, so headless runs and a live
    window collect the same numbers.
    """

    def __init__(self, max_history: int = 200):
        self.max_history = max_history

        # Totals
        self.total_wins: Dict[Side, int] = {Side.PLAYER: 0, Side.OPPONENT: 0}
        self.match_count = 0
        self.unfinished_matches = 0
        self.points = 0

        # Current match / rally tracking
        self.current_ticks = 0
        self.current_hits = 0
        self.current_rally = 0
        self.longest_rally = 0

        self.history: List[MatchStats] = []
        self.event_log: Deque[str] = deque(maxlen=8)

    def record_tick(self, events: Sequence[GameEvent]) -> None:
        """Record the events of one tick."""
        self.current_ticks += 1
        for event in events:
            if isinstance(event, PaddleHit):
                self.current_hits += 1
                self.current_rally += 1
                self.longest_rally = max(self.longest_rally, self.current_rally)
            elif isinstance(event, PointScored):
                self.points += 1
                self.current_rally = 0
                self.event_log.appendleft(
                    f"T{self.current_ticks}: Point to {event.side.value} "
                    f"({event.player_score}-{event.opponent_score})"
                )

    def end_match(self, winner: Optional[Side], player_score: int, opponent_score: int) -> MatchStats:
        """Finalize match statistics."""
        self.match_count += 1
        if winner is None:
            self.unfinished_matches += 1
        else:
            self.total_wins[winner] += 1

        stats = MatchStats(
            match_num=self.match_count,
            winner=winner,
            player_score=player_score,
            opponent_score=opponent_score,
            ticks=self.current_ticks,
            paddle_hits=self.current_hits,
        )
        self.history.append(stats)

        # Trim history
        if len(self.history) > self.max_history:
            self.history = self.history[-self.max_history:]

        # Reset for next match
        self.current_ticks = 0
        self.current_hits = 0
        self.current_rally = 0
        return stats

    @property
    def average_ticks(self) -> float:
        """Average match length in ticks over the kept history."""
        if not self.history:
            return 0.0
        return sum(m.ticks for m in self.history) / len(self.history)

    @property
    def win_rate_player(self) -> float:
        """Win rate for the player side."""
        total = sum(self.total_wins.values())
        return self.total_wins[Side.PLAYER] / total if total > 0 else 0.5

    @property
    def win_rate_opponent(self) -> float:
        """Win rate for the opponent side."""
        return 1.0 - self.win_rate_player
