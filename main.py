import argparse
import logging

from config import *


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Grid-based snake game")
    parser.add_argument("--width", type=int, default=WINDOW_WIDTH, help="window width in pixels")
    parser.add_argument("--height", type=int, default=WINDOW_HEIGHT, help="window height in pixels")
    parser.add_argument("--cell-size", type=int, default=CHUNK_WIDTH, help="grid pitch in pixels")
    parser.add_argument("--fps", type=float, default=FPS_MIN, help=f"initial speed (ceiling {FPS_MAX})")
    parser.add_argument("--paused", action="store_true", default=START_PAUSED,
                        help="hold the first move until space is pressed")
    parser.add_argument("--mute", action="store_true", help="start with sound off")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)
    if args.cell_size <= 0:
        parser.error("--cell-size must be a positive number of pixels")
    return args


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    # Imported here so --help works without opening a display
    from gridsnake.display import SnakeGame

    game = SnakeGame(width=args.width, height=args.height,
                     chunk_width=args.cell_size, chunk_height=args.cell_size,
                     fps=min(max(args.fps, FPS_MIN), FPS_MAX),
                     is_paused=args.paused, muted=args.mute)
    game.run()


if __name__ == "__main__":
    main()
