from enum import IntEnum
from typing import NamedTuple

import numpy as np


class Direction(IntEnum):
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def delta(self):
        return _DELTAS[self]

    @property
    def opposite(self):
        return Direction((self + 2) % 4)

    @classmethod
    def from_delta(cls, dx, dy):
        """Returns the direction of a unit axis vector, or None for anything else."""
        return _BY_DELTA.get((dx, dy))


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}
_BY_DELTA = {delta: direction for direction, delta in _DELTAS.items()}


class Position(NamedTuple):
    x: int
    y: int

    def step(self, direction):
        dx, dy = direction.delta
        return Position(self.x + dx, self.y + dy)


class Cell(NamedTuple):
    top: bool
    right: bool
    bottom: bool
    left: bool
    visited: bool


class Grid:
    """
    Wall topology of a fixed-size maze.
    walls[y, x, d] is True while cell (x, y) has a wall on side d.
    """
    def __init__(self, width, height):
        if width < 1 or height < 1:
            raise ValueError(f"Grid must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height
        self.walls = np.ones((height, width, 4), dtype=bool)
        self.visited = np.zeros((height, width), dtype=bool)

    @classmethod
    def from_display(cls, screen_width, screen_height, cell_size):
        return cls(screen_width // cell_size, screen_height // cell_size)

    def reset(self):
        self.walls.fill(True)
        self.visited.fill(False)

    def is_in_bounds(self, position):
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    def has_wall(self, position, direction):
        x, y = position
        return bool(self.walls[y, x, direction])

    def cell(self, position):
        x, y = position
        top, right, bottom, left = (bool(w) for w in self.walls[y, x])
        return Cell(top, right, bottom, left, bool(self.visited[y, x]))

    # Generation only
    def is_visited(self, position):
        x, y = position
        return bool(self.visited[y, x])

    def mark_visited(self, position):
        x, y = position
        self.visited[y, x] = True

    def remove_wall(self, position, direction):
        """Carves the passage between a cell and its neighbour, clearing both facing walls."""
        neighbor = Position(*position).step(direction)
        if not (self.is_in_bounds(position) and self.is_in_bounds(neighbor)):
            raise ValueError(f"No neighbour {direction.name} of {tuple(position)}")
        self.walls[position[1], position[0], direction] = False
        self.walls[neighbor.y, neighbor.x, direction.opposite] = False
