import argparse
import sys
from typing import List, Optional
from . import image, animation, utils, __version__
from .core import Decoder
from .typealiases import AsciifierException


__all__ = ['build_parser', 'main']


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f'must be at least 1, got {number}')
    return number


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='termascii', description='Convert an image file or GIF to ASCII art in the terminal')
    p.add_argument('--input', '-i', required=True, help='Input image file or GIF')
    p.add_argument('--width', '-w', type=positive_int, default=100,
                   help='Width of the output ASCII art in characters (default: 100)')
    p.add_argument('--invert', action='store_true', help='Invert the character map (use for dark backgrounds)')
    p.add_argument('--contrast', type=float, default=1.0,
                   help='Adjust contrast (1.0 = normal, >1.0 = higher contrast)')
    p.add_argument('--loop-gif', action='store_true', help='Loop GIF animation indefinitely')
    p.add_argument('--color', action='store_true', help='Output ASCII art with ANSI colors')
    p.add_argument('--quiet', '-q', action='store_true', help='Only print the ASCII art, no status messages')
    p.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _print = utils.conditional_print(args.quiet)
    options = dict(width=args.width, invert=args.invert, contrast=args.contrast, color=args.color, quiet=args.quiet)

    try:
        _print(f'Processing input: {args.input}')
        if Decoder.is_animated(Decoder.detect_format(args.input)):
            animation.asciify(args.input, loop=args.loop_gif, **options)
        else:
            image.asciify(args.input, **options)
    except AsciifierException as e:
        utils.error_print(e)
        return 1
    except KeyboardInterrupt:
        sys.stdout.write(utils.RESET + '\n')
        sys.stdout.flush()
        return 130
    return 0
