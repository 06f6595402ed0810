#!/usr/bin/env python3
# collision.py - Wall queries against a maze grid

import math

from geometry import PLAYER_RADIUS
from maze_grid import WALL

# Footprint samples: center, 4 cardinal, 4 diagonal (unit offsets)
FOOTPRINT = [
    (0, 0),
    (1, 0), (-1, 0), (0, 1), (0, -1),
    (1, 1), (1, -1), (-1, 1), (-1, -1),
]


def world_to_cell(grid, world_x, world_z):
    """Nearest grid cell (x, z) for a world position"""
    return (math.floor(world_x / grid.cell_size + 0.5),
            math.floor(world_z / grid.cell_size + 0.5))


def is_wall(grid, world_x, world_z):
    """True if the world position falls on a wall or outside the grid"""
    if not (math.isfinite(world_x) and math.isfinite(world_z)):
        return True
    x, z = world_to_cell(grid, world_x, world_z)
    if x < 0 or x >= grid.width or z < 0 or z >= grid.height:
        return True
    return bool(grid.cells[z, x] == WALL)


def footprint_blocked(grid, world_x, world_z, radius=PLAYER_RADIUS):
    """Nine-point check approximating a circle of the given radius"""
    return any(is_wall(grid, world_x + ox * radius, world_z + oz * radius)
               for ox, oz in FOOTPRINT)


def resolve_movement(grid, x, z, dx, dz, radius=PLAYER_RADIUS):
    """
    Apply a proposed (dx, dz) move, one axis at a time.

    X is tried first from the current position, then Z from wherever X
    left us, so a blocked diagonal still slides along the free axis.
    Returns the new (x, z).
    """
    if dx and not footprint_blocked(grid, x + dx, z, radius):
        x += dx
    if dz and not footprint_blocked(grid, x, z + dz, radius):
        z += dz
    return x, z
