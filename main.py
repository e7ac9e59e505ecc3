#!/usr/bin/env python3
"""
Pong Arena - Main Entry Point

Two-paddle pong against a scripted opponent. Play it in a window with
the mouse, or let an autopilot play headless matches for statistics.
"""

import argparse
import random
from typing import Optional

try:
    from tqdm import tqdm

    TQDM_AVAILABLE = True
except ImportError:
    TQDM_AVAILABLE = False

from config import Config
from debug import DebugLogger
from events import Side
from game import Game
from opponent import track_target
from scheduler import FrameScheduler
from stats_tracker import StatsTracker


def autopilot(game: Game, step: float) -> None:
    """Steer the player paddle with the same heuristic as the opponent."""
    state = game.state
    state.player_paddle_y = track_target(
        state.player_paddle_y, state.ball_y, step, game.config
    )


def run_visual_game(
    config: Config,
    seed: Optional[int] = None,
    logger: Optional[DebugLogger] = None,
) -> None:
    """Run a game in a pygame window, controlled with the mouse.

    Responsibilities are cleanly separated:
    - InputHandler: turns events into pointer/restart/quit input
    - Renderer, SoundBoard: passive collaborators
    - FrameScheduler: runs the frame the game asked for
    - Game: runs simulation logic
    """
    try:
        from input_handler import InputHandler
        from renderer import Renderer
        from sound import SoundBoard
    except ImportError as e:
        print(f"Error: {e}")
        print("Install pygame with: pip install pygame")
        return

    renderer = Renderer(config)
    sound = SoundBoard()
    scheduler = FrameScheduler()
    game = Game(
        config,
        renderer=renderer,
        sound=sound,
        scheduler=scheduler,
        rng=random.Random(seed),
        logger=logger,
    )
    input_handler = InputHandler(game)

    print("\n=== Pong Arena ===")
    print("Mouse     - Move paddle")
    print("Click / R - Restart after game over")
    print("SPACE     - Pause")
    print("ESC       - Quit")
    print("==================\n")

    scheduler.schedule(game.tick)
    while input_handler.running and scheduler.has_pending:
        input_handler.process_events()
        if not input_handler.state.paused:
            scheduler.run_next()
        renderer.tick(config.fps)

    sound.close()
    renderer.close()


def run_headless(
    config: Config,
    matches: int = 10,
    seed: Optional[int] = None,
    max_ticks: int = 20000,
    player_step: float = 5.0,
    logger: Optional[DebugLogger] = None,
) -> StatsTracker:
    """Play autopilot-vs-opponent matches without graphics.

    Args:
        config: Game configuration
        matches: Number of matches to play
        seed: Seed for serves and particles (None = random)
        max_ticks: Ticks after which an unfinished match is abandoned
        player_step: Autopilot paddle speed per tick
        logger: Optional debug logger shared by every match

    Returns:
        StatsTracker with the results of every match
    """
    print("\n=== Headless Matches ===")
    print(f"Matches: {matches}")
    print(f"Autopilot step: {player_step}")
    print("========================\n")

    rng = random.Random(seed)
    stats = StatsTracker()

    # Use tqdm progress bar if available
    match_range = range(1, matches + 1)
    if TQDM_AVAILABLE:
        match_iterator = tqdm(match_range, desc="Playing", unit="match")
    else:
        match_iterator = match_range

    for match in match_iterator:
        game = Game(config, rng=rng, logger=logger)

        for _ in range(max_ticks):
            autopilot(game, player_step)
            result = game.tick()
            stats.record_tick(result.events)
            if result.game_over:
                break

        stats.end_match(game.winner, *game.state.scores)

        wins_p = stats.total_wins[Side.PLAYER]
        wins_o = stats.total_wins[Side.OPPONENT]
        if TQDM_AVAILABLE and match % 10 == 0:
            match_iterator.set_postfix({"player": wins_p, "opponent": wins_o})
        elif not TQDM_AVAILABLE and match % 10 == 0:
            print(f"Match {match}: Wins player={wins_p} opponent={wins_o}")

    print(
        f"\nFinal: player={stats.total_wins[Side.PLAYER]} wins, "
        f"opponent={stats.total_wins[Side.OPPONENT]} wins, "
        f"unfinished={stats.unfinished_matches}"
    )
    print(f"Win rate: player {stats.win_rate_player:.1%}, "
          f"opponent {stats.win_rate_opponent:.1%}")
    print(f"Longest rally: {stats.longest_rally} hits, "
          f"average match: {stats.average_ticks:.0f} ticks")
    if stats.event_log:
        print("Recent points:")
        for line in stats.event_log:
            print(f"  {line}")

    return stats


def main():
    parser = argparse.ArgumentParser(
        description="Pong Arena - Beat the scripted opponent to 5 points!",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Play with the mouse
  python main.py

  # Watch the event log while playing
  python main.py --debug

  # 100 autopilot matches without graphics
  python main.py --mode headless --matches 100 --seed 7

  # Save every event of a headless run
  python main.py --mode headless --export-log events.json
""",
    )
    parser.add_argument(
        "--mode",
        choices=["play", "headless"],
        default="play",
        help="Game mode (default: %(default)s)\n"
        "  play: Mouse controlled game in a pygame window\n"
        "  headless: Autopilot matches without graphics",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=None,
        metavar="FPS",
        help=f"Frames per second in play mode (default: {Config().fps})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        metavar="N",
        help="Random seed for serves and particles",
    )
    parser.add_argument(
        "--matches",
        type=int,
        default=10,
        metavar="N",
        help="Number of matches in headless mode (default: %(default)s)",
    )
    parser.add_argument(
        "--max-ticks",
        type=int,
        default=20000,
        metavar="N",
        help="Tick limit per headless match (default: %(default)s)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print game events as they happen and a summary at the end",
    )
    parser.add_argument(
        "--export-log",
        type=str,
        default=None,
        metavar="PATH",
        help="Write the recorded events to a JSON file on exit",
    )

    args = parser.parse_args()

    config_kwargs = {}
    if args.fps is not None:
        config_kwargs["fps"] = args.fps
    config = Config(**config_kwargs)

    logger = None
    if args.debug or args.export_log:
        logger = DebugLogger()
        logger.print_live = args.debug

    if args.mode == "headless":
        run_headless(
            config,
            matches=args.matches,
            seed=args.seed,
            max_ticks=args.max_ticks,
            logger=logger,
        )
    else:
        run_visual_game(config, seed=args.seed, logger=logger)

    if logger is not None:
        if args.debug:
            logger.print_summary()
        if args.export_log:
            logger.export_json(args.export_log)


if __name__ == "__main__":
    main()
