"""Tests for the pygame board surface and key mapping.

Only off-screen ``pygame.Surface`` objects are used, so no window opens.
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from config import *
from gridsnake.display import KEY_CODES, PygameBoard


@pytest.fixture
def board():
    screen = pygame.Surface((200, 160))
    return PygameBoard(screen, 120, 80, canvas_color=RED)


class TestKeyCodes:
    def test_arrow_and_space_codes(self):
        """pygame keys map onto the abstract codes the engine reads."""
        assert KEY_CODES[pygame.K_LEFT] == 37
        assert KEY_CODES[pygame.K_UP] == 38
        assert KEY_CODES[pygame.K_RIGHT] == 39
        assert KEY_CODES[pygame.K_DOWN] == 40
        assert KEY_CODES[pygame.K_SPACE] == 32
        assert pygame.K_m not in KEY_CODES


class TestPygameBoard:
    def test_size_and_resize(self, board):
        """width and height follow the backing surface."""
        assert (board.width, board.height) == (120, 80)
        board.resize(160, 120)
        assert (board.width, board.height) == (160, 120)

    def test_filled_cell_is_padded(self, board):
        """A filled cell leaves its padding in the canvas color."""
        board.draw_cell(40, 40, 40, 40, WHITE, padding=2)
        assert board.surface.get_at((60, 60))[:3] == WHITE
        assert board.surface.get_at((40, 40))[:3] == RED
        assert board.surface.get_at((42, 42))[:3] == WHITE

    def test_cross_cell_is_outlined(self, board):
        """The food marker has an outline and diagonals but a hollow middle edge."""
        board.draw_cell(0, 0, 40, 40, WHITE, shape="cross", padding=2)
        assert board.surface.get_at((2, 20))[:3] == WHITE
        assert board.surface.get_at((20, 20))[:3] == WHITE
        assert board.surface.get_at((10, 20))[:3] == RED

    def test_clear_cell_restores_canvas(self, board):
        """clear_cell wipes the whole bounding box."""
        board.draw_cell(40, 0, 40, 40, WHITE)
        board.clear_cell(40, 0, 40, 40)
        assert board.surface.get_at((60, 20))[:3] == RED

    def test_score_and_offset(self, board):
        """The score is stored for the HUD and the board is centred."""
        board.display_score(7)
        assert board.score == 7
        assert board.offset() == (40, 40)
