WINDOW_WIDTH = 920
WINDOW_HEIGHT = 680
FRAME_RATE = 120

CAPTION = "Grid Snake"
SCORE_LABEL = "Score"

# Grid pitch in pixels
CHUNK_WIDTH = 40
CHUNK_HEIGHT = 40
CELL_PADDING = 2

# Cells kept free along each edge when placing the snake or food
FOOD_SPAWN_MARGIN = 1
FOOD_SPAWN_ATTEMPTS = 100

FPS_MIN = 6
FPS_MAX = 24
FPS_STEP_FACTOR = 0.05

START_PAUSED = False

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (238, 51, 77)
YELLOW = (255, 255, 0)
DARK_GREY = (40, 40, 40)

BACKGROUND_COLOR = WHITE
CANVAS_COLOR = RED
SNAKE_HEAD_COLOR = WHITE
SNAKE_BODY_COLOR = WHITE
FOOD_COLOR = WHITE
TEXT_COLOR = BLACK

LEFT = "Left"
RIGHT = "Right"
UP = "Up"
DOWN = "Down"

KEY_LEFT = 37
KEY_UP = 38
KEY_RIGHT = 39
KEY_DOWN = 40
KEY_SPACE = 32
