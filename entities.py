import random
from enum import Enum

from grid import Direction, Position
from settings import GRID_HEIGHT, GRID_WIDTH


class MoveOutcome(Enum):
    BLOCKED = "blocked"
    MOVED = "moved"
    REACHED_GOAL = "reached_goal"


class Player:
    """The player's cell plus the grid size it is bound to."""
    def __init__(self, x=0, y=0, width=GRID_WIDTH, height=GRID_HEIGHT):
        self.position = Position(x, y)
        self.width = width
        self.height = height

    def bind(self, width, height):
        self.width = width
        self.height = height

    @property
    def goal(self):
        return Position(self.width - 1, self.height - 1)

    def reset(self):
        self.position = Position(0, 0)

    def move(self, dx, dy, grid):
        """
        Tries one step of (dx, dy) through `grid`.
        Diagonal, out-of-bounds and walled moves leave the player where it is.
        """
        direction = Direction.from_delta(dx, dy)
        if direction is None:
            return MoveOutcome.BLOCKED
        target = self.position.step(direction)
        if not (0 <= target.x < self.width and 0 <= target.y < self.height):
            return MoveOutcome.BLOCKED
        if grid.has_wall(self.position, direction):
            return MoveOutcome.BLOCKED
        self.position = target
        if self.position == self.goal:
            return MoveOutcome.REACHED_GOAL
        return MoveOutcome.MOVED


class Obstacle:
    """
    A random walker: every `move_interval` seconds it jumps up to two cells on each axis.
    It does not look at walls and can land on the other side of one.
    """
    def __init__(self, x=0, y=0, interval=0.5, rng=None):
        self.position = Position(x, y)
        self.move_timer = 0.0
        self.move_interval = interval
        self.rng = rng if rng is not None else random.Random()

    def step(self, elapsed, width, height):
        self.move_timer += elapsed
        if self.move_timer < self.move_interval:
            return False
        x = self.position.x + self.rng.randint(-2, 2)
        y = self.position.y + self.rng.randint(-2, 2)
        self.position = Position(min(max(x, 0), width - 1), min(max(y, 0), height - 1))
        self.move_timer = 0.0
        return True

    def collides_with(self, position):
        return self.position == tuple(position)
