from __future__ import annotations
import argparse
import sys

from minefield import __version__
from minefield.config import DEFAULT_SEPARATOR, GameConfig
from minefield.engine import MAX_HEIGHT, MAX_MINES, MAX_WIDTH, MIN_HEIGHT, MIN_MINES, MIN_WIDTH
from minefield.errors import ConfigError
from minefield.game import HELP_TEXT, run_game


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='A mine finding game.',
        epilog=HELP_TEXT,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('--width', type=int, default=20, help=f'Board width ({MIN_WIDTH}-{MAX_WIDTH})')
    parser.add_argument('--height', type=int, default=20, help=f'Board height ({MIN_HEIGHT}-{MAX_HEIGHT})')
    parser.add_argument('--mines', type=int, default=40, help=f'Mine count ({MIN_MINES}-{MAX_MINES}), clamped to the board area')
    parser.add_argument('--separator', type=str, default=DEFAULT_SEPARATOR,
                        help='Text printed between frames; ESC[H ESC[J clears the screen')
    parser.add_argument('--seed', type=int, default=-1, help='RNG seed; <0 derives one from the clock (random every run)')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = GameConfig(
            width=args.width,
            height=args.height,
            mines=args.mines,
            separator=args.separator,
            seed=(None if args.seed < 0 else args.seed),
        ).validated()
    except ConfigError as exc:
        print(f'[minefield] {exc}', file=sys.stderr)
        return 1
    if config.seed is not None:
        print(f'[minefield] Using seed {config.seed}', file=sys.stderr)
    run_game(config)
    return 0


if __name__ == '__main__':
    sys.exit(main())
