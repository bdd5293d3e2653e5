import argparse
import logging
import sys
from pathlib import Path
import os
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = "hide"

# Ensure repo root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from holetap.app.loop import run_game

GAMES_DIR = ROOT / "games"
RUNTIME_DIR = ROOT / "runtime"


def parse_screen(value: str) -> tuple[int, int]:
    try:
        w, h = map(int, value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WxH, got {value!r}")
    if w <= 0 or h <= 0:
        raise argparse.ArgumentTypeError(f"screen size must be positive, got {value!r}")
    return w, h


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Laser Platform Launcher")
    parser.add_argument("--game", default="tap-rush", help="Game folder name under games/")
    parser.add_argument("--screen", type=parse_screen, default=(1280, 720), help="Screen size WxH, e.g. 1280x720")
    parser.add_argument("--input", dest="input_mode", choices=("mouse", "laser"), default="mouse",
                        help="Pointer source; mouse/touch always works, laser adds a webcam-tracked dot")
    parser.add_argument("--cam-index", type=int, default=0, help="OpenCV camera index")
    parser.add_argument("--calibration", type=Path, default=RUNTIME_DIR / "cache" / "homographies" / "default.npz", help="Camera->screen homography (.npz)")
    parser.add_argument("--mirror", action="store_true", help="Mirror the game window horizontally")
    parser.add_argument("--seed", type=int, default=None, help="Seed spawn randomness for reproducible rounds")
    parser.add_argument("--mute", action="store_true", help="Start with sound off (toggle with S)")
    parser.add_argument("--best-file", type=Path, default=RUNTIME_DIR / "best_score.yaml", help="Where the best score is kept")
    parser.add_argument("--log-level", default="INFO", choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    run_game(
        game_id=args.game,
        screen_size=args.screen,
        input_mode=args.input_mode,
        cam_index=args.cam_index,
        calibration=args.calibration,
        mirror=args.mirror,
        seed=args.seed,
        mute=args.mute,
        best_file=args.best_file,
        games_dir=GAMES_DIR,
    )


if __name__ == "__main__":
    main()
