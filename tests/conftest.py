import random

import pytest

from grid import Direction


class FakeStore:
    def __init__(self, best=None):
        self.best = best
        self.saves = []

    def load(self):
        return self.best

    def save(self, seconds):
        self.saves.append(seconds)
        self.best = seconds


class BrokenStore(FakeStore):
    def save(self, seconds):
        raise OSError("disk full")


class ScriptedRandom(random.Random):
    """Random whose randint answers come from `script` first, then from the seeded stream."""
    script = ()

    def randint(self, a, b):
        if self.script:
            return self.script.pop(0)
        return super().randint(a, b)


def scripted(values=(), seed=0):
    rng = ScriptedRandom(seed)
    rng.script = list(values)
    return rng


def flood_fill(grid, start):
    seen = {tuple(start)}
    stack = [tuple(start)]
    while stack:
        x, y = stack.pop()
        for d in Direction:
            if grid.has_wall((x, y), d):
                continue
            dx, dy = d.delta
            n = (x + dx, y + dy)
            if n not in seen:
                seen.add(n)
                stack.append(n)
    return seen


@pytest.fixture
def store():
    return FakeStore()
