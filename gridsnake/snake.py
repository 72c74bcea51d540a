from collections import deque

from config import LEFT, RIGHT, UP, DOWN

OPPOSITE = {LEFT: RIGHT, RIGHT: LEFT, UP: DOWN, DOWN: UP}

# Unit vectors, scaled by the snake's speed each step
VECTORS = {LEFT: (-1, 0), RIGHT: (1, 0), UP: (0, -1), DOWN: (0, 1)}


def is_orthogonal(a, b):
    return VECTORS[a][0] * VECTORS[b][0] + VECTORS[a][1] * VECTORS[b][1] == 0


class Snake:
    """Queue of grid cells, tail first and head last."""

    def __init__(self, cells, speed, direction=None):
        if not cells:
            raise ValueError("a snake needs at least one cell")
        self._queue = deque(cells)
        # Pixels per step on each axis, one grid pitch
        if isinstance(speed, (int, float)):
            speed = (speed, speed)
        self.speed = tuple(speed)
        self.direction = direction

    @property
    def queue(self):
        return tuple(self._queue)

    @property
    def head(self):
        return self._queue[-1]

    @property
    def body(self):
        """All cells except the head, tail first."""
        return list(self._queue)[:-1]

    @property
    def length(self):
        return len(self._queue)

    def __len__(self):
        return len(self._queue)

    def set_direction(self, direction):
        """Change heading; only orthogonal turns are accepted once moving."""
        if direction not in VECTORS:
            return False
        if self.direction is not None and not is_orthogonal(self.direction, direction):
            return False
        self.direction = direction
        return True

    def translation(self, direction=None):
        direction = direction or self.direction
        if direction is None:
            return (0, 0)
        dx, dy = VECTORS[direction]
        return (dx * self.speed[0], dy * self.speed[1])

    def add_head(self, cell):
        self._queue.append(cell)

    def remove_tail(self):
        return self._queue.popleft()

    def contains_cell(self, cell):
        for c in self._queue:
            if c.same_position(cell):
                return True
        return False

    def draw(self):
        for cell in self._queue:
            cell.draw()
