#!/usr/bin/env python3
# maze_solver.py - Path search over a maze grid and an autopilot to follow it

import math
from collections import deque
from queue import PriorityQueue


def heuristic(a, b):
    """Manhattan distance heuristic for A*"""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def a_star(grid, start, goal):
    """Find a path of (x, z) cells from start to goal, [] if there is none"""
    if not grid.is_path(*start) or not grid.is_path(*goal):
        return []

    open_set = PriorityQueue()
    open_set.put((0, start))
    came_from = {start: None}
    g_score = {start: 0}

    open_set_hash = {start}

    while not open_set.empty():
        current = open_set.get()[1]
        open_set_hash.discard(current)

        if current == goal:
            # Reconstruct path
            path = []
            while current is not None:
                path.append(current)
                current = came_from[current]
            return path[::-1]

        for neighbour in grid.neighbours(*current):
            tentative_g_score = g_score[current] + 1

            if neighbour not in g_score or tentative_g_score < g_score[neighbour]:
                # This path is better
                came_from[neighbour] = current
                g_score[neighbour] = tentative_g_score
                f_score = tentative_g_score + heuristic(neighbour, goal)

                if neighbour not in open_set_hash:
                    open_set.put((f_score, neighbour))
                    open_set_hash.add(neighbour)

    return []  # No path found


def bfs_distances(grid, start):
    """Step distance from start to every reachable path cell"""
    dist = {start: 0}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        for neighbour in grid.neighbours(*cell):
            if neighbour not in dist:
                dist[neighbour] = dist[cell] + 1
                queue.append(neighbour)
    return dist


def farthest_cell(grid, start):
    """Reachable path cell farthest from start, and its distance"""
    dist = bfs_distances(grid, start)
    # ties go to the later cell in row-major order
    cell = max(dist, key=lambda c: (dist[c], c[1], c[0]))
    return cell, dist[cell]


class Autopilot:
    """
    Steers a pose along a list of cells.

    Stands in for a human at the keyboard: each step turns the pose toward
    the next waypoint and reports which movement keys to hold.
    """

    def __init__(self, grid, path, tolerance=0.05):
        self.waypoints = [grid.cell_to_world(x, z) for x, z in path]
        self.tolerance = tolerance
        self.speed = None  # cruising speed, taken from the pose on the first step
        self.index = 1 if len(self.waypoints) > 1 else len(self.waypoints)

    @classmethod
    def to_goal(cls, grid, **kwargs):
        return cls(grid, a_star(grid, grid.start, grid.goal), **kwargs)

    @property
    def done(self):
        return self.index >= len(self.waypoints)

    def step(self, pose, dt):
        """Aim the pose and return the keys to hold for this frame"""
        if self.speed is None:
            self.speed = pose.speed

        # Skip waypoints we are already standing on
        while not self.done:
            wx, wz = self.waypoints[self.index]
            remaining = pose.distance_to(wx, wz)
            if remaining > self.tolerance:
                break
            self.index += 1

        if self.done or dt <= 0:
            return set()

        pose.face(wx, wz)
        # Never overshoot a waypoint, the next leg turns a corner
        pose.speed = min(self.speed, remaining / dt)
        return {"forward"}

    def remaining_distance(self, pose):
        """Distance left along the path, for logging"""
        if self.done:
            return 0.0
        total = pose.distance_to(*self.waypoints[self.index])
        for a, b in zip(self.waypoints[self.index:], self.waypoints[self.index + 1:]):
            total += math.dist(a, b)
        return total
