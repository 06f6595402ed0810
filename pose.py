#!/usr/bin/env python3
# pose.py - Player pose tracking

import math
from dataclasses import dataclass

from geometry import EYE_HEIGHT, MOVE_SPEED

MOVE_KEYS = ("forward", "back", "left", "right")


@dataclass(slots=True)
class Pose:
    """Tracks the player's position and heading in world space"""
    x: float
    z: float
    y: float = EYE_HEIGHT
    yaw: float = -90.0  # degrees, 0 looks along +X, 90 along +Z
    speed: float = MOVE_SPEED

    @classmethod
    def at_cell(cls, grid, cell, **kwargs):
        """Pose standing at the center of a grid cell"""
        x, z = grid.cell_to_world(*cell)
        return cls(x=x, z=z, **kwargs)

    @property
    def position(self):
        return (self.x, self.y, self.z)

    def front(self):
        """Unit view direction flattened onto the XZ plane"""
        rad = math.radians(self.yaw)
        return (math.cos(rad), math.sin(rad))

    def right(self):
        fx, fz = self.front()
        return (-fz, fx)

    def turn(self, degrees):
        """Update heading after a mouse-look offset"""
        self.yaw = (self.yaw + degrees) % 360.0

    def face(self, x, z):
        """Point the heading at a world position"""
        self.yaw = math.degrees(math.atan2(z - self.z, x - self.x)) % 360.0

    def propose_move(self, keys, dt):
        """(dx, dz) this pose would move for the held keys over dt seconds"""
        velocity = self.speed * dt
        fx, fz = self.front()
        rx, rz = self.right()

        dx = dz = 0.0
        if "forward" in keys:
            dx += fx * velocity
            dz += fz * velocity
        if "back" in keys:
            dx -= fx * velocity
            dz -= fz * velocity
        if "left" in keys:
            dx -= rx * velocity
            dz -= rz * velocity
        if "right" in keys:
            dx += rx * velocity
            dz += rz * velocity
        return dx, dz

    def distance_to(self, x, z):
        return math.hypot(self.x - x, self.z - z)
