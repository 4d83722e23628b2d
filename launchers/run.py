import argparse
import sys
from pathlib import Path
import os
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = "hide"

# Ensure repo root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from engine.app.loop import run_game


def parse_screen(value: str) -> tuple[int, int]:
    try:
        w, h = map(int, value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WxH, e.g. 1280x720, got '{value}'") from None
    if w <= 0 or h <= 0:
        raise argparse.ArgumentTypeError("screen size must be positive")
    return w, h


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sign Reflex launcher")
    parser.add_argument("--game", default="sign_reflex", help="Game folder name under games/")
    parser.add_argument("--screen", type=parse_screen, default=(1280, 720), help="Screen size WxH, e.g. 1280x720")
    parser.add_argument("--fps", type=int, default=60, help="Frame rate cap")
    parser.add_argument("--mute", action="store_true", help="Disable the sign-change beep")
    parser.add_argument("--debug", action="store_true", help="Print round events to stderr")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    return run_game(
        game_id=args.game,
        screen_size=args.screen,
        fps=args.fps,
        mute=args.mute,
        debug=args.debug,
    )


if __name__ == "__main__":
    sys.exit(main())
