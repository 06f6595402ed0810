#!/usr/bin/env python3
# maze_grid.py - Grid model for a generated maze

import json
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from geometry import CELL_SIZE, DX, DZ

# Cell values: 0=wall, 1=path
WALL = 0
PATH = 1


@dataclass
class Grid:
    """Row-major maze grid, indexed cells[z, x]"""
    width: int
    height: int
    cells: np.ndarray
    goal: Optional[Tuple[int, int]] = None   # (x, z)
    start: Optional[Tuple[int, int]] = None  # (x, z)
    cell_size: float = CELL_SIZE
    generated: bool = True

    @classmethod
    def filled(cls, width, height, cell_size=CELL_SIZE):
        """All-wall grid of the given size"""
        cells = np.full((max(height, 0), max(width, 0)), WALL, dtype=np.uint8)
        return cls(width, height, cells, cell_size=cell_size)

    @classmethod
    def from_rows(cls, rows, cell_size=CELL_SIZE):
        """Build a grid from strings, '#' is a wall and anything else a path.

        'S' and 'G' mark the start and goal cells; if absent they are found
        with the usual scans.
        """
        height = len(rows)
        width = len(rows[0]) if rows else 0
        grid = cls.filled(width, height, cell_size)
        for z, row in enumerate(rows):
            for x, ch in enumerate(row):
                if ch != '#':
                    grid.cells[z, x] = PATH
                if ch == 'S':
                    grid.start = (x, z)
                elif ch == 'G':
                    grid.goal = (x, z)
        if grid.start is None:
            grid.start = grid.first_path_cell()
        if grid.goal is None:
            grid.goal = grid.last_path_cell()
        return grid

    def in_bounds(self, x, z):
        return 0 <= x < self.width and 0 <= z < self.height

    def is_path(self, x, z):
        return self.in_bounds(x, z) and self.cells[z, x] == PATH

    def first_path_cell(self):
        """First path cell scanning rows first to last, columns first to last"""
        for z in range(self.height):
            for x in range(self.width):
                if self.cells[z, x] == PATH:
                    return (x, z)
        return None

    def last_path_cell(self):
        """First path cell scanning rows last to first, columns last to first"""
        for z in range(self.height - 1, -1, -1):
            for x in range(self.width - 1, -1, -1):
                if self.cells[z, x] == PATH:
                    return (x, z)
        return None

    def cell_to_world(self, x, z):
        """World-space (x, z) of a cell center"""
        return (x * self.cell_size, z * self.cell_size)

    def path_cells(self):
        zs, xs = np.nonzero(self.cells == PATH)
        return [(int(x), int(z)) for z, x in zip(zs, xs)]

    def neighbours(self, x, z):
        """Path cells one grid step away"""
        for dx, dz in zip(DX, DZ):
            if self.is_path(x + dx, z + dz):
                yield (x + dx, z + dz)

    def to_dict(self):
        return {
            "width": self.width,
            "height": self.height,
            "cell_size": self.cell_size,
            "cells": self.cells.tolist(),
            "goal": list(self.goal) if self.goal else None,
            "start": list(self.start) if self.start else None,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            width=data["width"],
            height=data["height"],
            cells=np.array(data["cells"], dtype=np.uint8),
            goal=tuple(data["goal"]) if data.get("goal") else None,
            start=tuple(data["start"]) if data.get("start") else None,
            cell_size=data.get("cell_size", CELL_SIZE),
        )


def render_ascii(grid, wall='█', path=' '):
    """Text rendering of the grid, row 0 on top, S=start and G=goal"""
    lines = []
    for z in range(grid.height):
        line = ''
        for x in range(grid.width):
            if (x, z) == grid.start:
                line += 'S'
            elif (x, z) == grid.goal:
                line += 'G'
            else:
                line += path if grid.cells[z, x] == PATH else wall
        lines.append(line)
    return '\n'.join(lines)


def print_grid(grid):
    print(f"Maze grid ({grid.width} × {grid.height}):")
    print(render_ascii(grid))


def save_grid(grid, filename='maze_grid.json'):
    """Save grid to a JSON file"""
    with open(filename, 'w') as f:
        json.dump(grid.to_dict(), f)
    print(f"Grid saved to {filename}")


def load_grid(filename='maze_grid.json'):
    """Load grid from a JSON file, None if it does not exist"""
    try:
        with open(filename, 'r') as f:
            return Grid.from_dict(json.load(f))
    except FileNotFoundError:
        print(f"Grid file {filename} not found.")
        return None


# Visualization with matplotlib (optional)
def plot_grid(grid, show=True):
    """Visual representation of the grid using matplotlib"""
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        print("Matplotlib is required for visualization")
        return None

    fig, ax = plt.subplots(figsize=(grid.width * 0.4, grid.height * 0.4))
    ax.imshow(grid.cells == WALL, cmap='Greys', interpolation='nearest')

    if grid.start:
        ax.plot(grid.start[0], grid.start[1], 'go', markersize=8)
    if grid.goal:
        ax.plot(grid.goal[0], grid.goal[1], 'ro', markersize=8)

    ax.set_aspect('equal')
    ax.axis('off')
    ax.set_title(f'Maze grid ({grid.width} × {grid.height})')

    if show:
        plt.show()
    return fig, ax


if __name__ == '__main__':
    import argparse
    from geometry import MAZE_W, MAZE_H
    from maze_generator import generate

    parser = argparse.ArgumentParser(description='Maze Grid Tool')
    parser.add_argument('--width', type=int, default=MAZE_W, help='Maze width')
    parser.add_argument('--height', type=int, default=MAZE_H, help='Maze height')
    parser.add_argument('--seed', type=int, help='Random seed')
    parser.add_argument('--load', type=str, help='Load a grid from file instead of generating')
    parser.add_argument('--save', type=str, help='Save the grid to file')
    parser.add_argument('--plot', action='store_true', help='Plot the grid using matplotlib')

    args = parser.parse_args()

    if args.load:
        grid = load_grid(args.load)
        if grid is None:
            raise SystemExit(1)
    else:
        grid = generate(args.width, args.height, seed=args.seed)

    print_grid(grid)

    if args.plot:
        plot_grid(grid)

    if args.save:
        save_grid(grid, args.save)
