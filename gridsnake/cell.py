from config import CELL_PADDING


class Cell:
    """Grid-aligned rectangle that makes up the snake's body.

    Position and size are fixed once built; only the color changes (the
    head turns into a body cell by being recolored).
    """

    shape = "filled"

    def __init__(self, surface, x, y, width, height, color, padding=CELL_PADDING):
        self.surface = surface
        self._x = int(x)
        self._y = int(y)
        self._width = int(width)
        self._height = int(height)
        self.color = color
        self.padding = padding

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    @property
    def position(self):
        return (self._x, self._y)

    def set_color(self, color):
        self.color = color

    def same_position(self, other):
        return self._x == other.x and self._y == other.y

    def draw(self):
        """Draw the padded cell on the surface."""
        self.surface.draw_cell(self._x, self._y, self._width, self._height,
                               self.color, shape=self.shape, padding=self.padding)

    def clear(self):
        """Erase the cell's whole bounding box."""
        self.surface.clear_cell(self._x, self._y, self._width, self._height)

    def __repr__(self):
        return f"{type(self).__name__}(x={self._x}, y={self._y}, color={self.color!r})"
