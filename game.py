#!/usr/bin/env python3
# game.py - Headless game core shared by the host and client processes

import math

from collision import resolve_movement
from geometry import PLAYER_RADIUS, TINT_FAR, TINT_NEAR
from maze_generator import generate
from pose import Pose
from session import Role, Session
from settings import DEFAULT_SETTINGS


class MazeGenerationError(RuntimeError):
    """No playable maze for this session"""


def interpolate_tint(distance, max_distance, near=TINT_NEAR, far=TINT_FAR):
    """Blend from far to near as distance drops to zero"""
    if max_distance <= 0:
        t = 0.0
    else:
        t = min(max(distance / max_distance, 0.0), 1.0)
    return tuple(n + (f - n) * t for n, f in zip(near, far))


class Game:
    """
    Everything a frame needs apart from drawing.

    The renderer reads grid and pose every frame; the window layer feeds
    process_input() with held keys and update() with delta time.
    """

    def __init__(self, role, settings=None, session=None, grid=None):
        self.settings = {**DEFAULT_SETTINGS, **(settings or {})}
        self.role = role

        if grid is None:
            grid = generate(self.settings["MAZE_WIDTH"], self.settings["MAZE_HEIGHT"],
                            seed=self.settings["SEED"],
                            goal_placement=self.settings["GOAL_PLACEMENT"])
        if not grid.generated:
            raise MazeGenerationError("maze generation failed")
        if grid.start is None or grid.goal is None:
            raise MazeGenerationError(f"no path cell in a {grid.width}x{grid.height} maze")
        self.grid = grid
        print(f"Start position found at: {grid.start[0]}, {grid.start[1]}")

        self.pose = Pose.at_cell(grid, grid.start, speed=self.settings["MOVE_SPEED"])
        self.goal_position = grid.cell_to_world(*grid.goal)
        self.max_distance = math.hypot(grid.width * grid.cell_size, grid.height * grid.cell_size)

        if session is None:
            session = Session(role, self.settings["HOST_ADDRESS"], self.settings["PORT"])
        self.session = session

        self.paused = False
        self.victory = False

    def start(self):
        return self.session.start()

    @property
    def movement_locked(self):
        return self.session.movement_locked

    def distance_to_goal(self):
        return self.pose.distance_to(*self.goal_position)

    @property
    def tint(self):
        return interpolate_tint(self.distance_to_goal(), self.max_distance)

    def toggle_pause(self):
        if self.victory:
            return
        self.paused = not self.paused

    def turn(self, yaw_offset):
        if not self.paused:
            self.pose.turn(yaw_offset)

    def process_input(self, keys, dt):
        """Move the pose for the held keys, sliding along walls"""
        if self.paused or self.movement_locked:
            return False

        dx, dz = self.pose.propose_move(keys, dt)
        if not dx and not dz:
            return False

        x, z = resolve_movement(self.grid, self.pose.x, self.pose.z, dx, dz, PLAYER_RADIUS)
        moved = (x, z) != (self.pose.x, self.pose.z)
        self.pose.x, self.pose.z = x, z
        return moved

    def update(self, dt):
        """Network step plus the goal proximity check"""
        self.session.tick()

        if self.session.check_goal(self.distance_to_goal(), self.settings["GOAL_RADIUS"],
                                   tint=self.tint):
            print("Goal reached!")
            self.victory = True
            self.paused = True

    def status(self):
        """State for the overlay layer"""
        return {
            "role": self.role.value,
            "state": self.session.state.name,
            "locked": self.movement_locked,
            "goal_reached": self.session.goal_reached,
            "paused": self.paused,
            "tint": self.tint,
            "received_tint": None if self.role is Role.HOST else self.session.tint,
            "position": self.pose.position,
        }

    def close(self):
        self.session.close()
