import argparse
import os
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "hide")

from space_circles.app.loop import run_game
from space_circles.logging_config import setup_logging


def parse_screen(value: str) -> tuple[int, int]:
    try:
        w, h = map(int, value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WxH, e.g. 1280x720, got {value!r}")
    if w <= 0 or h <= 0:
        raise argparse.ArgumentTypeError(f"screen size must be positive, got {value!r}")
    return w, h


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Space Circles")
    parser.add_argument("--game", default="space-circles", help="Game folder name under games/")
    parser.add_argument("--screen", type=parse_screen, default=(1280, 720), help="Screen size WxH, e.g. 1280x720")
    parser.add_argument("--fps", type=int, default=60, help="Frame rate cap")
    parser.add_argument("--mirror", action="store_true", help="Mirror the game window horizontally")
    parser.add_argument("--profile", default="default", help="Storage profile for the highscore")
    parser.add_argument("--no-save", dest="persist", action="store_false", help="Keep the highscore in memory only")
    parser.add_argument("--log-level", default="INFO", help="DEBUG, INFO, WARNING, ...")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    run_game(
        game_id=args.game,
        screen_size=args.screen,
        fps=args.fps,
        mirror=args.mirror,
        profile=args.profile,
        persist=args.persist,
    )


if __name__ == "__main__":
    main()
