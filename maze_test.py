import unittest
from collections import deque

from disjoint_set import DisjointSet
from maze_generator import generate, lattice_edges, odd
from maze_grid import PATH, WALL, Grid, render_ascii


def path_graph(grid):
    """Path cells and the 4-neighbour edges between them"""
    cells = set(grid.path_cells())
    edges = set()
    for x, z in cells:
        for n in grid.neighbours(x, z):
            edges.add(frozenset([(x, z), n]))
    return cells, edges


def reachable(grid, start):
    seen = {start}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        for n in grid.neighbours(*cell):
            if n not in seen:
                seen.add(n)
                queue.append(n)
    return seen


class TestDisjointSet(unittest.TestCase):

    def test_starts_as_singletons(self):
        """Every id is its own set before any union."""
        ds = DisjointSet(5)
        self.assertEqual(ds.sets, 5)
        for i in range(5):
            self.assertEqual(ds.find(i), i)

    def test_union_joins_and_reports(self):
        """union() merges two sets once, then reports them as already joined."""
        ds = DisjointSet(4)
        self.assertTrue(ds.union(0, 1))
        self.assertTrue(ds.connected(0, 1))
        self.assertFalse(ds.union(1, 0))
        self.assertFalse(ds.connected(0, 2))
        self.assertEqual(ds.sets, 3)

    def test_union_is_transitive(self):
        ds = DisjointSet(6)
        ds.union(0, 1)
        ds.union(2, 3)
        ds.union(1, 3)
        self.assertTrue(ds.connected(0, 2))
        self.assertFalse(ds.union(0, 3))
        self.assertEqual(ds.sets, 3)

    def test_path_compression(self):
        """After find(), every node on the path points straight at the root."""
        ds = DisjointSet(4)
        ds.parent = [0, 0, 1, 2]  # chain 3 -> 2 -> 1 -> 0
        self.assertEqual(ds.find(3), 0)
        self.assertEqual(ds.parent, [0, 0, 0, 0])

    def test_union_by_rank(self):
        """The shallower tree is hung under the deeper one."""
        ds = DisjointSet(3)
        ds.union(0, 1)
        root = ds.find(0)
        ds.union(2, 0)
        self.assertEqual(ds.find(2), root)
        self.assertEqual(ds.rank[root], 1)


class TestMazeGenerator(unittest.TestCase):

    def test_perfect_maze_property(self):
        """Path cells form a single tree for a range of odd sizes."""
        for width, height in [(3, 3), (5, 3), (3, 7), (9, 9), (15, 15), (21, 11)]:
            for seed in range(3):
                with self.subTest(width=width, height=height, seed=seed):
                    grid = generate(width, height, seed=seed)
                    self.assertTrue(grid.generated)
                    cells, edges = path_graph(grid)
                    self.assertEqual(len(edges), len(cells) - 1)
                    self.assertEqual(reachable(grid, grid.start), cells)

    def test_every_node_is_carved(self):
        """All odd/odd cells are paths, the outer border stays wall."""
        grid = generate(11, 9, seed=4)
        self.assertTrue((grid.cells[1::2, 1::2] == PATH).all())
        self.assertTrue((grid.cells[0, :] == WALL).all())
        self.assertTrue((grid.cells[-1, :] == WALL).all())
        self.assertTrue((grid.cells[:, 0] == WALL).all())
        self.assertTrue((grid.cells[:, -1] == WALL).all())
        # even/even cells are never carved
        self.assertTrue((grid.cells[::2, ::2] == WALL).all())

    def test_carved_passages_count(self):
        """A spanning tree over n nodes carves n - 1 passages."""
        grid = generate(9, 7, seed=1)
        nodes = 4 * 3
        self.assertEqual(len(grid.path_cells()), nodes + nodes - 1)

    def test_even_sizes_become_odd(self):
        """generate(w, h) with even sizes matches generate(w + 1, h + 1)."""
        a = generate(10, 8, seed=7)
        b = generate(11, 9, seed=7)
        self.assertEqual((a.width, a.height), (11, 9))
        self.assertEqual(a.cells.shape, (9, 11))
        self.assertTrue((a.cells == b.cells).all())
        self.assertEqual(a.goal, b.goal)
        self.assertEqual(a.start, b.start)

    def test_odd(self):
        self.assertEqual(odd(4), 5)
        self.assertEqual(odd(5), 5)
        self.assertEqual(odd(0), 1)

    def test_same_seed_same_maze(self):
        a = generate(15, 15, seed=42)
        b = generate(15, 15, seed=42)
        self.assertTrue((a.cells == b.cells).all())

    def test_start_and_goal_scans(self):
        """Start is the first path cell, goal the last, in row-major order."""
        grid = generate(13, 9, seed=3)
        self.assertEqual(grid.start, (1, 1))
        self.assertEqual(grid.goal, (11, 7))
        self.assertEqual(grid.cells[7, 11], PATH)

    def test_farthest_goal_placement(self):
        """The farthest placement still lands the goal on a reachable path cell."""
        grid = generate(15, 15, seed=5, goal_placement="farthest")
        self.assertTrue(grid.generated)
        self.assertIn(grid.goal, reachable(grid, grid.start))

    def test_single_cell_maze(self):
        """A 1x1 maze has no nodes, so no start or goal."""
        grid = generate(1, 1, seed=0)
        self.assertTrue(grid.generated)
        self.assertIsNone(grid.start)
        self.assertIsNone(grid.goal)

    def test_three_by_three(self):
        grid = generate(3, 3, seed=0)
        self.assertEqual(grid.path_cells(), [(1, 1)])
        self.assertEqual(grid.start, grid.goal)

    def test_invalid_size_is_reported(self):
        """Negative sizes are caught and come back as an ungenerated grid."""
        grid = generate(-3, 5)
        self.assertFalse(grid.generated)
        self.assertIsNone(grid.goal)

    def test_unknown_goal_placement(self):
        grid = generate(5, 5, goal_placement="middle")
        self.assertFalse(grid.generated)

    def test_lattice_edges(self):
        """A 5x5 grid has a 2x2 node lattice with 4 candidate passages."""
        self.assertEqual(len(lattice_edges(5, 5)), 4)
        self.assertEqual(lattice_edges(3, 3), [])


class TestGrid(unittest.TestCase):

    def test_from_rows(self):
        grid = Grid.from_rows([
            "#####",
            "#S..#",
            "###G#",
            "#####",
        ])
        self.assertEqual((grid.width, grid.height), (5, 4))
        self.assertEqual(grid.start, (1, 1))
        self.assertEqual(grid.goal, (3, 2))
        self.assertTrue(grid.is_path(2, 1))
        self.assertFalse(grid.is_path(0, 0))
        self.assertFalse(grid.is_path(-1, 1))

    def test_dict_round_trip_keeps_markers(self):
        grid = generate(7, 7, seed=2)
        copy = Grid.from_dict(grid.to_dict())
        self.assertTrue((copy.cells == grid.cells).all())
        self.assertEqual(copy.goal, grid.goal)
        self.assertEqual(copy.start, grid.start)

    def test_render_ascii(self):
        grid = Grid.from_rows(["###", "#S#", "###"])
        self.assertEqual(render_ascii(grid, wall='#'), "###\n#S#\n###")


if __name__ == '__main__':
    unittest.main()
