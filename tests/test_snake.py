"""Tests for the Snake queue, Cell and Food cells."""

import pytest

from config import LEFT, RIGHT, UP, DOWN
from gridsnake.cell import Cell
from gridsnake.food import Food
from gridsnake.snake import Snake


def make_snake(surface, positions, direction=None):
    cells = [Cell(surface, x, y, 40, 40, "white") for x, y in positions]
    return Snake(cells, speed=40, direction=direction)


class TestCell:
    def test_position_is_read_only(self, surface):
        """Cell position cannot be reassigned after construction."""
        cell = Cell(surface, 40, 80, 40, 40, "white")
        with pytest.raises(AttributeError):
            cell.x = 0
        assert cell.position == (40, 80)

    def test_color_is_mutable(self, surface):
        """set_color changes only the color."""
        cell = Cell(surface, 40, 80, 40, 40, "white")
        cell.set_color("black")
        assert cell.color == "black"
        assert cell.position == (40, 80)

    def test_draw_and_clear_use_surface(self, surface):
        """draw renders a filled cell, clear erases its box."""
        cell = Cell(surface, 40, 80, 40, 40, "white")
        cell.draw()
        cell.clear()
        assert surface.drawn == [(40, 80, "filled", "white")]
        assert surface.cleared == [(40, 80)]

    def test_same_position(self, surface):
        """Cells match on position regardless of type and color."""
        cell = Cell(surface, 40, 80, 40, 40, "white")
        assert cell.same_position(Food(surface, 40, 80, 40, 40, "red"))
        assert not cell.same_position(Cell(surface, 80, 40, 40, 40, "white"))

    def test_food_draws_cross(self, surface):
        """Food uses the outlined cross marker."""
        Food(surface, 0, 0, 40, 40, "white").draw()
        assert surface.drawn == [(0, 0, "cross", "white")]


class TestSnake:
    def test_needs_a_cell(self):
        """A snake can't be empty."""
        with pytest.raises(ValueError):
            Snake([], speed=40)

    def test_head_body_length(self, surface):
        """queue[0] is the tail and the last cell is the head."""
        snake = make_snake(surface, [(0, 0), (40, 0), (80, 0)])
        assert snake.head.position == (80, 0)
        assert [c.position for c in snake.body] == [(0, 0), (40, 0)]
        assert snake.length == len(snake) == 3

    def test_add_head_remove_tail(self, surface):
        """add_head appends at the head end, remove_tail pops the oldest cell."""
        snake = make_snake(surface, [(0, 0), (40, 0)])
        snake.add_head(Cell(surface, 80, 0, 40, 40, "white"))
        tail = snake.remove_tail()
        assert tail.position == (0, 0)
        assert [c.position for c in snake.queue] == [(40, 0), (80, 0)]

    def test_contains_cell_by_position(self, surface):
        """contains_cell compares positions, not identity."""
        snake = make_snake(surface, [(0, 0), (40, 0)])
        assert snake.contains_cell(Food(surface, 40, 0, 40, 40, "red"))
        assert not snake.contains_cell(Food(surface, 80, 0, 40, 40, "red"))

    def test_any_direction_accepted_from_none(self, surface):
        """The first direction may be anything."""
        snake = make_snake(surface, [(0, 0)])
        assert snake.set_direction(LEFT)
        assert snake.direction == LEFT

    @pytest.mark.parametrize("current,reverse", [(LEFT, RIGHT), (RIGHT, LEFT), (UP, DOWN), (DOWN, UP)])
    def test_reverse_is_ignored(self, surface, current, reverse):
        """A 180 degree turn is silently ignored."""
        snake = make_snake(surface, [(0, 0)], direction=current)
        assert not snake.set_direction(reverse)
        assert snake.direction == current

    def test_same_direction_is_ignored(self, surface):
        """Pressing the current heading again changes nothing."""
        snake = make_snake(surface, [(0, 0)], direction=UP)
        assert not snake.set_direction(UP)

    def test_orthogonal_turn_accepted(self, surface):
        """Quarter turns are accepted."""
        snake = make_snake(surface, [(0, 0)], direction=UP)
        assert snake.set_direction(RIGHT)
        assert snake.set_direction(DOWN)
        assert snake.direction == DOWN

    def test_unknown_direction_ignored(self, surface):
        """Names outside the four headings are ignored."""
        snake = make_snake(surface, [(0, 0)])
        assert not snake.set_direction("Sideways")
        assert snake.direction is None

    def test_translation_moves_one_axis(self, surface):
        """Translation is one grid pitch along one axis."""
        snake = make_snake(surface, [(0, 0)])
        assert snake.translation() == (0, 0)
        assert snake.translation(LEFT) == (-40, 0)
        assert snake.translation(DOWN) == (0, 40)

    def test_translation_uses_pitch_per_axis(self, surface):
        """Non-square grids move by width horizontally and height vertically."""
        snake = Snake([Cell(surface, 0, 0, 40, 20, "white")], speed=(40, 20))
        assert snake.translation(RIGHT) == (40, 0)
        assert snake.translation(UP) == (0, -20)
