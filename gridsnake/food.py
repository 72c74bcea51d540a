import logging
import random

from config import *
from gridsnake.cell import Cell

logger = logging.getLogger(__name__)


class BoardSaturated(Exception):
    """Raised when no free cell is left to place food on."""


class Food(Cell):
    """Food cell, drawn as an outlined square with a diagonal cross."""

    shape = "cross"


def _axis_range(size, pitch, margin):
    cells = size // pitch
    if cells - 2 * margin <= 0:
        # Board too small for the margin, use the whole axis
        return 0, max(cells, 1)
    return margin, cells - margin


def random_position(width, height, chunk_width=CHUNK_WIDTH, chunk_height=CHUNK_HEIGHT,
                    margin=FOOD_SPAWN_MARGIN, rng=None):
    """Pick a uniformly random grid-aligned pixel position on the board."""
    rng = rng or random
    lo_x, hi_x = _axis_range(width, chunk_width, margin)
    lo_y, hi_y = _axis_range(height, chunk_height, margin)
    x = rng.randrange(lo_x, hi_x) * chunk_width
    y = rng.randrange(lo_y, hi_y) * chunk_height
    return (x, y)


def free_positions(snake, width, height, chunk_width=CHUNK_WIDTH, chunk_height=CHUNK_HEIGHT,
                   margin=0):
    """List every grid position inside the margin that the snake does not occupy."""
    occupied = {cell.position for cell in snake.queue}
    lo_x, hi_x = _axis_range(width, chunk_width, margin)
    lo_y, hi_y = _axis_range(height, chunk_height, margin)
    return [
        (col * chunk_width, row * chunk_height)
        for row in range(lo_y, hi_y)
        for col in range(lo_x, hi_x)
        if (col * chunk_width, row * chunk_height) not in occupied
    ]


def spawn_food(surface, snake, width, height, chunk_width=CHUNK_WIDTH, chunk_height=CHUNK_HEIGHT,
               color=FOOD_COLOR, margin=FOOD_SPAWN_MARGIN, rng=None,
               max_attempts=FOOD_SPAWN_ATTEMPTS):
    """Place new food on a random cell the snake does not occupy.

    Random sampling is tried ``max_attempts`` times. After that the free
    cells are enumerated (inside the margin first, then the whole board) and
    one is chosen at random. Raises ``BoardSaturated`` if none is left.
    """
    rng = rng or random
    attempts = 0
    while attempts < max_attempts:
        x, y = random_position(width, height, chunk_width, chunk_height, margin, rng)
        food = Food(surface, x, y, chunk_width, chunk_height, color)
        if not snake.contains_cell(food):
            return food
        attempts += 1

    logger.debug("No free cell after %d attempts, scanning board", max_attempts)
    candidates = free_positions(snake, width, height, chunk_width, chunk_height, margin)
    if not candidates:
        candidates = free_positions(snake, width, height, chunk_width, chunk_height)
    if not candidates:
        raise BoardSaturated(f"no free cell on a {width}x{height} board")
    x, y = rng.choice(candidates)
    return Food(surface, x, y, chunk_width, chunk_height, color)
