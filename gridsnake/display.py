import logging

import pygame

from config import *
from gridsnake.audio import load_sounds
from gridsnake.engine import SnakeEngine, IDLE, PAUSED, STOPPED
from gridsnake.timer import Scheduler

logger = logging.getLogger(__name__)

# pygame key -> abstract key code understood by the engine
KEY_CODES = {
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_UP: KEY_UP,
    pygame.K_RIGHT: KEY_RIGHT,
    pygame.K_DOWN: KEY_DOWN,
    pygame.K_SPACE: KEY_SPACE,
}


class PygameBoard:
    """Drawing surface for the engine.

    Cells are drawn incrementally onto a persistent ``pygame.Surface`` the way
    a canvas is, and the app blits it to the window every frame.
    """

    def __init__(self, screen, width, height, canvas_color=CANVAS_COLOR, font=None):
        self.screen = screen
        self.canvas_color = canvas_color
        self.font = font
        self.score = 0
        self.surface = None
        self.resize(width, height)

    @property
    def width(self):
        return self.surface.get_width()

    @property
    def height(self):
        return self.surface.get_height()

    def resize(self, width, height):
        self.surface = pygame.Surface((width, height))
        self.surface.fill(self.canvas_color)

    def clear(self):
        self.surface.fill(self.canvas_color)

    def draw_cell(self, x, y, width, height, color, shape="filled", padding=CELL_PADDING):
        rect = pygame.Rect(x + padding, y + padding, width - padding * 2, height - padding * 2)
        if shape == "cross":
            pygame.draw.rect(self.surface, color, rect, 1)
            pygame.draw.line(self.surface, color, rect.topleft, rect.bottomright)
            pygame.draw.line(self.surface, color, rect.topright, rect.bottomleft)
        else:
            pygame.draw.rect(self.surface, color, rect)

    def clear_cell(self, x, y, width, height):
        self.surface.fill(self.canvas_color, pygame.Rect(x, y, width, height))

    def display_score(self, score):
        self.score = int(score)

    def offset(self):
        """Top-left of the board inside the window, centred."""
        return ((self.screen.get_width() - self.width) // 2,
                (self.screen.get_height() - self.height) // 2)

    def blit(self):
        self.screen.blit(self.surface, self.offset())

    def confirm(self, prompt):
        """Block on a modal yes/no overlay. Y/Enter is yes, N/Esc or closing is no."""
        self.blit()
        overlay = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 160))
        self.screen.blit(overlay, (0, 0))
        if self.font is not None:
            msg = f"{prompt} (Y/N)"
            text_surf = self.font.render(msg, True, WHITE)
            text_rect = text_surf.get_rect(center=self.screen.get_rect().center)
            pad = 12
            box_rect = text_rect.inflate(pad * 2, pad * 2)
            pygame.draw.rect(self.screen, DARK_GREY, box_rect, border_radius=6)
            self.screen.blit(text_surf, text_rect)
        pygame.display.flip()

        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return False
                if event.type == pygame.KEYDOWN:
                    if event.key in (pygame.K_y, pygame.K_RETURN, pygame.K_KP_ENTER):
                        return True
                    if event.key in (pygame.K_n, pygame.K_ESCAPE):
                        return False
            clock.tick(30)


class SnakeGame:
    """pygame window that hosts a SnakeEngine."""

    def __init__(self, width=WINDOW_WIDTH, height=WINDOW_HEIGHT, chunk_width=CHUNK_WIDTH,
                 chunk_height=CHUNK_HEIGHT, fps=FPS_MIN, is_paused=START_PAUSED, muted=False):
        pygame.init()
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(CAPTION)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 36)
        self.small_font = pygame.font.Font(None, 24)

        self.board = PygameBoard(self.screen, chunk_width, chunk_height, font=self.font)
        self.scheduler = Scheduler(pygame.time.get_ticks)
        self.engine = SnakeEngine(self.board, self.scheduler, fps=fps,
                                  chunk_width=chunk_width, chunk_height=chunk_height,
                                  is_paused=is_paused, listener=self.on_engine_event)
        self.engine.resize(width, height)

        self.muted = muted
        self.sounds = load_sounds()
        self.running = True

    def on_engine_event(self, event, engine):
        if self.muted:
            return
        sound = self.sounds.get(event)
        if sound is not None:
            sound.play()

    def handle_key(self, key):
        if key in (pygame.K_q, pygame.K_ESCAPE):
            self.running = False
        elif key == pygame.K_m:
            self.muted = not self.muted
            logger.info("Muted" if self.muted else "Unmuted")
        elif key in KEY_CODES:
            self.engine.on_key(KEY_CODES[key])

    def draw_text(self, text, pos, color=TEXT_COLOR, font=None):
        """Draw text centred on pos."""
        font = font or self.small_font
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=pos)
        self.screen.blit(text_surface, text_rect)

    def draw(self):
        self.screen.fill(BACKGROUND_COLOR)
        self.board.blit()

        # Score and status sit in the margin above the board
        _, top = self.board.offset()
        y = max(top // 2, 10)
        self.draw_text(f"{SCORE_LABEL}: {self.board.score}", (self.screen.get_width() // 2, y))
        status = None
        if self.engine.state == IDLE:
            status = "Arrow keys to start"
        elif self.engine.state == PAUSED:
            status = "PAUSED"
        if status:
            self.draw_text(status, (self.screen.get_width() // 2, self.screen.get_height() - y))
        pygame.display.flip()

    def run(self):
        """Main loop: dispatch input, poll the tick timer, redraw."""
        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN:
                    self.handle_key(event.key)
                elif event.type == pygame.VIDEORESIZE:
                    self.engine.resize(event.w, event.h)

            self.scheduler.poll()
            if self.engine.state == STOPPED:
                self.running = False
                break

            self.draw()
            self.clock.tick(FRAME_RATE)

        self.cleanup()

    def cleanup(self):
        self.scheduler.stop()
        pygame.quit()
