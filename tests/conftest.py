import random

import pytest


class FakeSurface:
    """Records what the engine draws instead of rendering it."""

    def __init__(self, width=400, height=400, answers=None):
        self.width = width
        self.height = height
        self.answers = list(answers or [])
        self.prompts = []
        self.drawn = []
        self.cleared = []
        self.scores = []
        self.clears = 0

    def draw_cell(self, x, y, width, height, color, shape="filled", padding=2):
        self.drawn.append((x, y, shape, color))

    def clear_cell(self, x, y, width, height):
        self.cleared.append((x, y))

    def clear(self):
        self.clears += 1

    def display_score(self, score):
        self.scores.append(score)

    def confirm(self, prompt):
        self.prompts.append(prompt)
        return self.answers.pop(0) if self.answers else False

    def resize(self, width, height):
        self.width = width
        self.height = height


class FakeClock:
    """Millisecond clock the tests move by hand."""

    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


@pytest.fixture
def surface():
    return FakeSurface()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def rng():
    return random.Random(1234)
