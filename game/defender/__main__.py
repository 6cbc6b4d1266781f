"""
Play Space Defender in an Arcade window

Usage:
    python -m game.defender [--width 800] [--height 600] [--seed 42]
"""

import argparse
import logging

from .config import GameConfig


def main():
    parser = argparse.ArgumentParser(description="Play Space Defender")
    parser.add_argument("--width", type=int, default=800, help="Window width in pixels (default: 800)")
    parser.add_argument("--height", type=int, default=600, help="Window height in pixels (default: 600)")
    parser.add_argument("--fps", type=int, default=60, help="Refresh rate (default: 60)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--high-score-file",
        type=str,
        default="highscore.json",
        help="Where the high score is kept (default: highscore.json)",
    )
    parser.add_argument("--log-level", type=str, default="INFO", help="Logging level (default: INFO)")

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Imported here so the core package works without a display
    from .app import DefenderApp

    config = GameConfig(width=args.width, height=args.height, fps=args.fps)
    app = DefenderApp(config, high_score_path=args.high_score_file, seed=args.seed)
    app.run()


if __name__ == "__main__":
    main()
