#!/usr/bin/env python3
# run_game.py - Run one side of a maze duel without a window

import argparse
import math
import time

from game import Game, MazeGenerationError
from maze_grid import print_grid
from maze_solver import Autopilot
from session import Role
from settings import SETTINGS_FILE, load_settings


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Run the host or client side of a maze duel')
    parser.add_argument('--role', choices=[r.value for r in Role], default=Role.HOST.value,
                        help='host listens and unlocks, client connects and waits')
    parser.add_argument('--address', type=str, help='Host address to connect to (client)')
    parser.add_argument('--port', type=int, help='TCP port')
    parser.add_argument('--width', type=int, help='Maze width')
    parser.add_argument('--height', type=int, help='Maze height')
    parser.add_argument('--seed', type=int, help='Random seed for the maze')
    parser.add_argument('--farthest-goal', action='store_true',
                        help='Place the goal at the cell farthest from the start')
    parser.add_argument('--settings', type=str, default=SETTINGS_FILE, help='Settings file')
    parser.add_argument('--fps', type=float, default=60.0, help='Frames per second')
    parser.add_argument('--frames', type=int, default=0, help='Stop after this many frames (0 = no limit)')
    parser.add_argument('--show', action='store_true', help='Print the maze before starting')
    args = parser.parse_args(argv)
    if not (math.isfinite(args.fps) and args.fps > 0):
        parser.error("--fps must be a positive number")
    return args


def build_settings(args):
    """Settings file values, overridden by command-line flags"""
    settings = load_settings(args.settings)
    overrides = {
        "HOST_ADDRESS": args.address,
        "PORT": args.port,
        "MAZE_WIDTH": args.width,
        "MAZE_HEIGHT": args.height,
        "SEED": args.seed,
        "GOAL_PLACEMENT": "farthest" if args.farthest_goal else None,
    }
    settings.update({k: v for k, v in overrides.items() if v is not None})
    return settings


def run(game, autopilot, fps=60.0, frames=0):
    """Fixed-rate loop until the goal is reached or frames run out"""
    dt = 1.0 / fps
    frame = 0
    last_locked = game.movement_locked

    while not game.victory and (frames <= 0 or frame < frames):
        frame_start = time.perf_counter()

        keys = autopilot.step(game.pose, dt) if not game.movement_locked else set()
        game.process_input(keys, dt)
        game.update(dt)

        if last_locked and not game.movement_locked:
            print("Movement unlocked")
        last_locked = game.movement_locked

        if frame % max(1, int(fps)) == 0:
            status = game.status()
            x, _, z = status["position"]
            path_left = autopilot.remaining_distance(game.pose)
            print(f"[{status['state']}] pos=({x:.2f}, {z:.2f}) "
                  f"goal in {game.distance_to_goal():.2f} path left {path_left:.2f} "
                  f"locked={status['locked']}")

        frame += 1
        elapsed = time.perf_counter() - frame_start
        time.sleep(max(0.0, dt - elapsed))

    return game.victory


def main(argv=None):
    args = parse_args(argv)
    settings = build_settings(args)

    try:
        game = Game(Role(args.role), settings)
    except MazeGenerationError as e:
        print(f"CRITICAL: {e}")
        return 1

    if args.show:
        print_grid(game.grid)

    autopilot = Autopilot.to_goal(game.grid)
    game.start()

    try:
        if run(game, autopilot, args.fps, args.frames):
            print("Victory!")
        else:
            print("Stopped before reaching the goal")
    except KeyboardInterrupt:
        print("\nInterrupted by user")
    finally:
        print("Closing connection")
        game.close()
        print("Done!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
