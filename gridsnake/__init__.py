"""Package initializer for the gridsnake package.

The engine and its data structures import without a display. The pygame
application is exported lazily so that::

	from gridsnake import SnakeGame

only opens the pygame display modules when it is actually used.
"""

__version__ = "0.1"

__all__ = ["SnakeEngine", "SnakeGame"]

def __getattr__(name: str):
	if name == "SnakeGame":
		from .display import SnakeGame

		return SnakeGame
	if name == "SnakeEngine":
		from .engine import SnakeEngine

		return SnakeEngine
	raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__():
	return sorted(__all__)
