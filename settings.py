from dataclasses import dataclass
from enum import Enum

# --- Screen & grid ---
SCREEN_WIDTH, SCREEN_HEIGHT = 800, 600
CELL_SIZE = 40
GRID_WIDTH = SCREEN_WIDTH // CELL_SIZE
GRID_HEIGHT = SCREEN_HEIGHT // CELL_SIZE
MAZE_SCALE = 0.75
TARGET_FPS = 60

BEST_TIME_FILE = "best_time.txt"

BLACK, WHITE, GREEN, RED, BLUE, GRAY, YELLOW, GOLD, BROWN = (
    (0, 0, 0), (255, 255, 255), (0, 255, 0), (255, 0, 0), (0, 0, 255),
    (100, 100, 100), (255, 255, 0), (255, 203, 0), (76, 63, 47),
)


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True)
class DifficultySettings:
    """Behaviour toggles for one difficulty tier."""
    obstacle_density: float
    is_dynamic: bool
    has_wandering_obstacle: bool
    regen_interval: float = 3.0
    obstacle_interval: float = 0.5


DIFFICULTIES = {
    Difficulty.EASY: DifficultySettings(obstacle_density=0.3, is_dynamic=False, has_wandering_obstacle=False),
    Difficulty.MEDIUM: DifficultySettings(obstacle_density=0.5, is_dynamic=False, has_wandering_obstacle=True),
    Difficulty.HARD: DifficultySettings(obstacle_density=0.7, is_dynamic=True, has_wandering_obstacle=False),
}


def as_difficulty(difficulty):
    """Normalises a Difficulty or its name ("easy", "HARD", ...) to a Difficulty."""
    if isinstance(difficulty, Difficulty):
        return difficulty
    try:
        return Difficulty(str(difficulty).lower())
    except ValueError:
        raise ValueError(f"Unknown difficulty: {difficulty!r}") from None


def settings_for(difficulty):
    """Looks up the settings for a Difficulty or its name."""
    return DIFFICULTIES[as_difficulty(difficulty)]
