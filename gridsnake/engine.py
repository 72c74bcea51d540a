import logging
import random

from config import *
from gridsnake.cell import Cell
from gridsnake.food import BoardSaturated, random_position, spawn_food
from gridsnake.snake import Snake
from gridsnake.timer import Scheduler

logger = logging.getLogger(__name__)

IDLE = "IDLE"
RUNNING = "RUNNING"
PAUSED = "PAUSED"
GAME_OVER = "GAME_OVER"
STOPPED = "STOPPED"

KEY_DIRECTIONS = {
    KEY_LEFT: LEFT,
    KEY_UP: UP,
    KEY_RIGHT: RIGHT,
    KEY_DOWN: DOWN,
}


def next_fps(fps, fps_max=FPS_MAX, factor=FPS_STEP_FACTOR):
    """Speed after one eat event: big steps far from the ceiling, small near it."""
    return min(fps_max, fps + (fps_max / fps) * factor)


class SnakeEngine:
    """Game state machine: owns the snake, the food, the score and the tick timer.

    ``surface`` is the presentation side (see ``gridsnake.display.PygameBoard``)
    and must provide ``width``, ``height``, ``draw_cell``, ``clear_cell``,
    ``clear``, ``display_score``, ``confirm`` and ``resize``.

    ``listener``, if given, is called as ``listener(event, engine)`` for
    ``"start"``, ``"eat"``, ``"pause"``, ``"resume"``, ``"die"`` and
    ``"restart"``.
    """

    def __init__(self, surface, scheduler=None, fps=None, fps_max=None,
                 chunk_width=None, chunk_height=None, spawn_margin=None,
                 snake_head_color=None, snake_body_color=None, food_color=None,
                 is_paused=None, rng=None, listener=None):
        self.surface = surface
        self.scheduler = scheduler or Scheduler()
        self.fps_max = fps_max or FPS_MAX
        if self.fps_max < FPS_MIN:
            raise ValueError(f"fps_max {self.fps_max} is below FPS_MIN {FPS_MIN}")
        # Keep the starting speed inside [FPS_MIN, fps_max] so eating never slows it down
        self.initial_fps = min(max(fps or FPS_MIN, FPS_MIN), self.fps_max)
        self.chunk_width = chunk_width or CHUNK_WIDTH
        self.chunk_height = chunk_height or CHUNK_HEIGHT
        self.spawn_margin = FOOD_SPAWN_MARGIN if spawn_margin is None else spawn_margin
        self.snake_head_color = snake_head_color or SNAKE_HEAD_COLOR
        self.snake_body_color = snake_body_color or SNAKE_BODY_COLOR
        self.food_color = food_color or FOOD_COLOR
        self.start_paused = START_PAUSED if is_paused is None else is_paused
        self.rng = rng or random.Random()
        self.listener = listener

        self.fps = self.initial_fps
        self.score = 0
        self.snake = None
        self.food = None
        self.state = IDLE

    @property
    def period(self):
        """Delay until the next tick in milliseconds, read fresh every tick."""
        return 1000.0 / self.fps

    @property
    def is_paused(self):
        return self.state == PAUSED

    @property
    def width(self):
        return self.surface.width

    @property
    def height(self):
        return self.surface.height

    def _notify(self, event):
        if self.listener is not None:
            self.listener(event, self)

    def init(self):
        """Build a fresh snake and food and draw them on a cleared board."""
        self.scheduler.stop()
        self.surface.clear()

        x, y = random_position(self.width, self.height, self.chunk_width, self.chunk_height,
                               self.spawn_margin, self.rng)
        head = Cell(self.surface, x, y, self.chunk_width, self.chunk_height,
                    self.snake_head_color)
        self.snake = Snake([head], speed=(self.chunk_width, self.chunk_height))
        self.food = self._make_food()

        self.snake.draw()
        self.food.draw()
        self.surface.display_score(self.score)
        self.state = IDLE
        logger.debug("New board %dx%d, head at %s, food at %s",
                     self.width, self.height, head.position, self.food.position)

    def _make_food(self):
        return spawn_food(self.surface, self.snake, self.width, self.height,
                          self.chunk_width, self.chunk_height, self.food_color,
                          margin=self.spawn_margin, rng=self.rng)

    def on_key(self, code):
        """Handle an abstract key code (arrows 37-40, space 32)."""
        if self.state in (GAME_OVER, STOPPED) or self.snake is None:
            return

        if code == KEY_SPACE:
            if self.state == RUNNING:
                self.pause()
            elif self.state == PAUSED:
                self.resume()
            return

        direction = KEY_DIRECTIONS.get(code)
        if direction is None or self.state == PAUSED:
            return
        if not self.snake.set_direction(direction):
            return
        if self.state == IDLE:
            self.start()

    def start(self):
        """Leave IDLE: arm the tick timer (held paused if configured so)."""
        if self.state != IDLE or self.snake.direction is None:
            return
        self.scheduler.start(self.step, self.period)
        self.state = RUNNING
        logger.info("Start heading %s", self.snake.direction)
        self._notify("start")
        if self.start_paused:
            self.pause()

    def pause(self):
        if self.state != RUNNING:
            return
        logger.info("Pause")
        self.scheduler.pause()
        self.state = PAUSED
        self._notify("pause")

    def resume(self):
        if self.state != PAUSED:
            return
        logger.info("Resume")
        self.scheduler.resume()
        self.state = RUNNING
        self._notify("resume")

    def _inside(self, x, y, cell):
        return 0 <= x and x + cell.width <= self.width and 0 <= y and y + cell.height <= self.height

    def step(self):
        """Advance the game by one tick."""
        if self.state != RUNNING:
            return
        self.scheduler.start(self.step, self.period)

        direction = self.snake.direction
        if direction is None:
            return
        dx, dy = self.snake.translation(direction)
        old_head = self.snake.head
        x, y = old_head.x + dx, old_head.y + dy

        if not self._inside(x, y, old_head):
            logger.debug("Hit the wall at (%d, %d)", x, y)
            return self.game_over()

        # Body is taken before the tail moves, so the tail cell still counts
        for cell in self.snake.body:
            if cell.x == x and cell.y == y:
                logger.debug("Ouch!")
                return self.game_over()

        ate = self.food is not None and self.food.x == x and self.food.y == y
        if ate:
            self.score += 1
            self.fps = next_fps(self.fps, self.fps_max)
            self.surface.display_score(self.score)
            self.food.clear()
            self.food = None
            logger.debug("Eat, score %d, fps %.2f", self.score, self.fps)
        else:
            self.snake.remove_tail().clear()

        new_head = Cell(self.surface, x, y, old_head.width, old_head.height,
                        self.snake_head_color)
        self.snake.add_head(new_head)
        new_head.draw()

        if self.snake.length > 1:
            old_head.set_color(self.snake_body_color)
            old_head.draw()

        if ate:
            self._notify("eat")
            # New head is already in place so food can't land under it
            try:
                self.food = self._make_food()
            except BoardSaturated:
                logger.warning("Board saturated at length %d", self.snake.length)
                return self.game_over()
            self.food.draw()

    def game_over(self):
        """Stop ticking and ask the player whether to play again."""
        self.scheduler.stop()
        self.state = GAME_OVER
        logger.info("Game Over, score %d", self.score)
        self._notify("die")

        if self.surface.confirm("Play again?"):
            self.restart()
        else:
            self.state = STOPPED
            logger.info("Stopped")

    def restart(self):
        self.score = 0
        self.fps = self.initial_fps
        self.init()
        self._notify("restart")

    def resize(self, window_width, window_height):
        """Fit the board to a new window size; only allowed before the first move."""
        if self.state != IDLE:
            return False
        width = window_width - (window_width % self.chunk_width) - self.chunk_width
        height = window_height - (window_height % self.chunk_height) - self.chunk_height
        # Two cells per axis so food always has somewhere to go
        width = max(width, self.chunk_width * 2)
        height = max(height, self.chunk_height * 2)
        self.surface.resize(width, height)
        self.init()
        logger.debug("Board resized to %dx%d", width, height)
        return True
