#!/usr/bin/env python3
# maze_generator.py - Randomized Kruskal maze generation

import numpy as np

from disjoint_set import DisjointSet
from geometry import CELL_SIZE
from maze_grid import Grid, PATH
from maze_solver import farthest_cell

GOAL_PLACEMENTS = ("scan", "farthest")


def odd(n):
    """Round an even size up to the next odd one"""
    return n + 1 if n % 2 == 0 else n


def lattice_edges(width, height):
    """
    Candidate passages between neighbouring nodes of the odd sublattice.

    Returns a list of ((x1, z1), (x2, z2)) pairs, each node paired with
    its right and lower neighbour.
    """
    edges = []
    for z in range(1, height - 1, 2):
        for x in range(1, width - 1, 2):
            if x + 2 < width - 1:
                edges.append(((x, z), (x + 2, z)))
            if z + 2 < height - 1:
                edges.append(((x, z), (x, z + 2)))
    return edges


def carve_kruskal(grid, rng):
    """Carve a spanning tree over the odd/odd cells of an all-wall grid"""
    cols = (grid.width - 1) // 2

    def node_id(cell):
        x, z = cell
        return (z // 2) * cols + (x // 2)

    # Every node ends up in the tree, so carve them all first. This also
    # covers a single-node maze, which has no edges.
    grid.cells[1:grid.height - 1:2, 1:grid.width - 1:2] = PATH

    nodes = cols * ((grid.height - 1) // 2)
    sets = DisjointSet(nodes)
    edges = lattice_edges(grid.width, grid.height)

    for i in rng.permutation(len(edges)):
        a, b = edges[i]
        if sets.union(node_id(a), node_id(b)):
            grid.cells[(a[1] + b[1]) // 2, (a[0] + b[0]) // 2] = PATH


def generate(width, height, seed=None, cell_size=CELL_SIZE, goal_placement="scan"):
    """
    Build a perfect maze.

    Even sizes are bumped to odd first, so generate(w, h) and
    generate(w + 1, h + 1) agree for even w, h given the same seed.

    goal_placement "scan" picks the last path cell in row-major order.
    "farthest" picks the path cell with the largest BFS distance from the
    start instead, which changes where the goal lands.

    On failure the error is printed and the partially built grid comes back
    with generated=False.
    """
    width, height = odd(width), odd(height)
    grid = Grid(width, height, np.zeros((0, 0), dtype=np.uint8), cell_size=cell_size,
                generated=False)

    try:
        if width < 1 or height < 1:
            raise ValueError(f"maze size must be positive, got {width}x{height}")
        if goal_placement not in GOAL_PLACEMENTS:
            raise ValueError(f"unknown goal placement {goal_placement!r}")

        grid = Grid.filled(width, height, cell_size)
        grid.generated = False

        rng = np.random.default_rng(seed)
        carve_kruskal(grid, rng)

        grid.start = grid.first_path_cell()
        if goal_placement == "farthest" and grid.start is not None:
            grid.goal, _ = farthest_cell(grid, grid.start)
        else:
            grid.goal = grid.last_path_cell()

        grid.generated = True
        print(f"Maze generated: {width}x{height}")
    except Exception as e:
        print(f"Error generating maze: {e}")

    return grid
