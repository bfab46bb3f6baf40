"""
Launch the asteroids simulation
Opens an arcade window by default, or runs a random headless episode.
"""

import argparse
import logging
from dataclasses import replace

from game.configs.asteroids_config import SIM_CONFIG
from game.g2D.asteroids_env import run_random_episode
from game.g2D.params import SimulationParams


def _non_negative_int(value):
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def _positive_int(value):
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {n}")
    return n


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play the asteroids simulation")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the initial asteroid field (default: random)",
    )
    parser.add_argument(
        "--asteroids",
        type=_non_negative_int,
        default=SIM_CONFIG["asteroid_count"],
        help=f"Number of asteroids (default: {SIM_CONFIG['asteroid_count']})",
    )
    parser.add_argument(
        "--headless-steps",
        type=_positive_int,
        default=None,
        help="Run a random headless episode of this many steps instead of opening a window",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    params = replace(SimulationParams.from_config(), asteroid_count=args.asteroids)

    if args.headless_steps is not None:
        print(f"Running headless episode for {args.headless_steps:,} steps...")
        return run_random_episode(
            render=False,
            seed=0 if args.seed is None else args.seed,
            max_steps=args.headless_steps,
            params=params,
        )

    # arcade needs a display, import only when opening a window
    import arcade
    from game.g2D.window import AsteroidsWindow

    print("Arrows rotate/thrust, Space shoots, Down shields, Esc quits.")
    AsteroidsWindow(params=params, seed=args.seed)
    arcade.run()
    return None


if __name__ == "__main__":
    main()
