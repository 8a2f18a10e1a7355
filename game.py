import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

from entities import MoveOutcome, Obstacle, Player
from grid import Position
from maze import Maze
from settings import GRID_HEIGHT, GRID_WIDTH, Difficulty, as_difficulty, settings_for


class State(Enum):
    PLAYING = "playing"
    PAUSED = "paused"
    WON = "won"
    # Terminal: the host leaves the session
    HOME = "home"
    QUIT = "quit"


class Event(Enum):
    MOVE_UP = (0, -1)
    MOVE_DOWN = (0, 1)
    MOVE_LEFT = (-1, 0)
    MOVE_RIGHT = (1, 0)
    TOGGLE_PAUSE = "toggle_pause"
    RESET = "reset"
    HOME = "home"
    RETRY = "retry"
    QUIT = "quit"

    @property
    def is_move(self):
        return isinstance(self.value, tuple)


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a session handed to the renderer."""
    walls: np.ndarray
    width: int
    height: int
    player: Position
    obstacle: Optional[Position]
    goal: Position
    elapsed: float
    best_time: Optional[float]
    state: State
    difficulty: Difficulty


def format_time(seconds):
    seconds = int(seconds)
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


class Game:
    """
    One play session at a fixed difficulty.
    All randomness (maze carving, obstacle jumps) comes from a single Random instance.
    """
    def __init__(self, difficulty, rng=None, seed=None, store=None, width=GRID_WIDTH, height=GRID_HEIGHT):
        self.difficulty = as_difficulty(difficulty)
        self.settings = settings_for(self.difficulty)
        self.rng = rng if rng is not None else random.Random(seed)
        self.store = store

        self.maze = Maze(width, height, self.rng)
        self.player = Player(0, 0, self.maze.width, self.maze.height)
        self.obstacle = Obstacle(0, 0, self.settings.obstacle_interval, self.rng)

        self.state = State.PLAYING
        self.won = False
        self.elapsed = 0.0
        self.regen_timer = 0.0
        self.best_time = store.load() if store is not None else None

    @property
    def goal(self):
        return self.player.goal

    def reset(self):
        """Starts over from the origin on a freshly carved maze."""
        self.player.reset()
        self.won = False
        self.elapsed = 0.0
        self.regen_timer = 0.0
        self.maze.regenerate(self.player.position)
        self.player.bind(self.maze.width, self.maze.height)
        self.state = State.PLAYING

    def tick(self, dt, events=()):
        """Advances the session by one frame of `dt` seconds and returns the new state."""
        events = list(events)
        if self.state is State.PLAYING:
            self._tick_playing(dt, events)
        elif self.state is State.PAUSED:
            if Event.TOGGLE_PAUSE in events:
                self.state = State.PLAYING
        elif self.state is State.WON:
            for event in events:
                if event is Event.RETRY:
                    self.reset()
                    break
                if event is Event.QUIT:
                    self.state = State.QUIT
                    break
        return self.state

    def _tick_playing(self, dt, events):
        if self.settings.is_dynamic:
            self.regen_timer += dt
            if self.regen_timer >= self.settings.regen_interval:
                self.maze.regenerate(self.player.position)
                self.player.bind(self.maze.width, self.maze.height)
                self.regen_timer = 0.0

        if self.settings.has_wandering_obstacle:
            self.obstacle.step(dt, self.maze.width, self.maze.height)
            if self.obstacle.collides_with(self.player.position):
                self.player.reset()

        move = next((event for event in events if event.is_move), None)
        if move is not None:
            dx, dy = move.value
            if self.player.move(dx, dy, self.maze) is MoveOutcome.REACHED_GOAL:
                self.won = True

        self.elapsed += dt

        if self.won:
            self.state = State.WON
            print(f"Maze solved in {format_time(self.elapsed)} ({self.elapsed:.2f}s)")
            self._record_time(self.elapsed)
            return

        for event in events:
            if event is Event.TOGGLE_PAUSE:
                self.state = State.PAUSED
                return
            if event is Event.RESET:
                self.reset()
            elif event is Event.HOME:
                self.state = State.HOME
                return

    def _record_time(self, seconds):
        if self.best_time is not None and seconds >= self.best_time:
            return
        self.best_time = seconds
        print(f"New best time: {self.best_time:.2f}s")
        if self.store is None:
            return
        try:
            self.store.save(seconds)
        except OSError as e:
            print(f"Could not save best time: {e}")

    def snapshot(self):
        return Snapshot(
            walls=self.maze.grid.walls.copy(),
            width=self.maze.width,
            height=self.maze.height,
            player=self.player.position,
            obstacle=self.obstacle.position if self.settings.has_wandering_obstacle else None,
            goal=self.goal,
            elapsed=self.elapsed,
            best_time=self.best_time,
            state=self.state,
            difficulty=self.difficulty,
        )
