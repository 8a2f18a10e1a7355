import random
from collections import deque

from grid import Direction, Grid, Position


class Maze:
    """
    Generates a perfect maze using a randomized recursive backtracking algorithm.
    The carve runs on an explicit stack, so grid size is not limited by recursion depth.
    """
    def __init__(self, width, height, rng=None, start=(0, 0)):
        self.grid = Grid(width, height)
        self.rng = rng if rng is not None else random.Random()
        self.generate(start)

    @property
    def width(self):
        return self.grid.width

    @property
    def height(self):
        return self.grid.height

    def has_wall(self, position, direction):
        return self.grid.has_wall(position, direction)

    def is_in_bounds(self, position):
        return self.grid.is_in_bounds(position)

    def _shuffled_directions(self):
        directions = list(Direction)
        for i in range(4):
            j = self.rng.randint(i, 3)
            directions[i], directions[j] = directions[j], directions[i]
        return directions

    def generate(self, start=(0, 0)):
        """Carves the whole grid from `start`."""
        start = Position(*start)
        if not self.grid.is_in_bounds(start):
            raise ValueError(f"Start {tuple(start)} is outside the {self.width}x{self.height} grid")
        self.grid.reset()
        self.grid.mark_visited(start)
        # Each frame keeps its own shuffle; popping a frame is the backtrack step
        stack = [(start, iter(self._shuffled_directions()))]
        while stack:
            cell, directions = stack[-1]
            for direction in directions:
                neighbor = cell.step(direction)
                if self.grid.is_in_bounds(neighbor) and not self.grid.is_visited(neighbor):
                    self.grid.remove_wall(cell, direction)
                    self.grid.mark_visited(neighbor)
                    stack.append((neighbor, iter(self._shuffled_directions())))
                    break
            else:
                stack.pop()

    def regenerate(self, position):
        """Rebuilds the maze around the player's current cell."""
        self.generate(position)

    def passages(self):
        """Number of removed wall pairs."""
        # Each open pair shows up once as a missing RIGHT or DOWN wall
        walls = self.grid.walls
        return int((~walls[:, :-1, Direction.RIGHT]).sum() + (~walls[:-1, :, Direction.DOWN]).sum())

    def reachable_from(self, position):
        """Flood fill through open walls."""
        start = Position(*position)
        seen = {start}
        queue = deque([start])
        while queue:
            cell = queue.popleft()
            for direction in Direction:
                if self.grid.has_wall(cell, direction):
                    continue
                neighbor = cell.step(direction)
                if neighbor not in seen:
                    seen.add(neighbor)
                    queue.append(neighbor)
        return seen
