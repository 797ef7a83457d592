"""
Command-line entry point: `python -m flappy_sim` or `flappy-sim`.
"""

import argparse
import logging
import random
from typing import List, Optional

from .autopilot import Autopilot, run_headless
from .constants import RENDER_FPS
from .engine import SimulationEngine


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play (or simulate) the flappy game.")
    parser.add_argument("--fps", type=int, default=RENDER_FPS, help="Frames (ticks) per second.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for obstacle heights.")
    parser.add_argument("--autopilot", action="store_true", help="Let the heuristic policy play.")
    parser.add_argument("--headless", action="store_true",
                        help="Run one autopilot game without a window and print the result.")
    parser.add_argument("--ticks", type=int, default=10_000, help="Tick limit for --headless.")
    parser.add_argument("--log-level", default="INFO", help="Logging level.")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    engine = SimulationEngine(rng=random.Random(args.seed))

    if args.headless:
        result = run_headless(engine, Autopilot.for_engine(engine),
                              max_ticks=args.ticks, frame_ms=1000 / args.fps)
        print(f"ticks={result.ticks} score={result.score} flaps={result.flaps} state={result.state.value}")
        return

    # Imported here so headless runs never need a display.
    from .flappy_client import FlappyClient

    FlappyClient(engine, fps=args.fps, autopilot=args.autopilot).run()


if __name__ == "__main__":
    main()
