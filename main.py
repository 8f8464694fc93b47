"""
Entry point for blockdrop.

Supports two modes:
  - play:     Play with keyboard controls in a pygame window.
  - headless: Run an autoplay game on the intent loop without a display
              and print the final score.

Usage:
    python main.py --mode play
    python main.py --mode play --config config/game.yaml
    python main.py --mode headless --ticks 2000 --seed 7
"""

from __future__ import annotations

import argparse
import random
import sys

from blockdrop.config import GameConfig, load_config
from blockdrop.game.session import GameSession, Intent
from blockdrop.loop import GameLoop
from blockdrop.score_store import MemoryScoreStore


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Namespace with mode, config, ticks, and seed attributes.
    """
    parser = argparse.ArgumentParser(
        description="blockdrop: a falling-block puzzle game.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--mode",
        type=str,
        choices=["play", "headless"],
        default="play",
        help="Run mode: 'play' (pygame window) or 'headless' (autoplay, no display).",
    )
    parser.add_argument(
        "--config",
        type=str,
        default="config/game.yaml",
        help="Path to the YAML configuration file.",
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=1000,
        help="Maximum number of gravity ticks in 'headless' mode.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the piece sequence (overrides the config file).",
    )
    return parser.parse_args(argv)


def run_headless(config: GameConfig, max_ticks: int) -> int:
    """Play one game by hard-dropping every piece where it spawns.

    Intents go through the GameLoop queue exactly as timer and keyboard
    input would, but are drained synchronously so no display or real timer
    is needed.

    Args:
        config: Game configuration.
        max_ticks: Stop after this many gravity ticks even if not over.

    Returns:
        The final score.
    """
    rng = random.Random(config.seed)
    session = GameSession(config.rows, config.cols, score_store=MemoryScoreStore(), rng=rng)
    loop = GameLoop(session, tick_ms=config.tick_ms)
    session.start()

    ticks = 0
    while session.running and ticks < max_ticks:
        loop.submit(rng.choice([Intent.LEFT, Intent.RIGHT, Intent.ROTATE]))
        loop.submit(Intent.HARD_DROP)
        loop.submit(Intent.TICK)
        loop.run_pending()
        ticks += 1

    status = "game over" if session.game_over else "stopped"
    print(f"Headless run {status} after {ticks} ticks | Score: {session.score}")
    return session.score


def main(argv: list[str] | None = None) -> None:
    """Main entry point: parse args, load config, and dispatch to the selected mode."""
    args = parse_args(argv)
    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    if args.seed is not None:
        config.seed = args.seed

    if args.mode == "play":
        from blockdrop.play import play
        play(config)

    elif args.mode == "headless":
        run_headless(config, args.ticks)

    else:
        print(f"Unknown mode: {args.mode}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
