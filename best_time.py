import math

from settings import BEST_TIME_FILE


class BestTimeStore:
    """Keeps the best finishing time as a single number in a small text file."""
    def __init__(self, path=BEST_TIME_FILE):
        self.path = path

    def load(self):
        """Returns the stored time, or None when there is no usable value."""
        try:
            with open(self.path, encoding="utf-8") as f:
                value = float(f.read().strip())
        except (OSError, ValueError):
            return None
        if not math.isfinite(value) or value < 0:
            return None
        return value

    def save(self, seconds):
        # repr round-trips the float exactly
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(f"{float(seconds)!r}\n")
