import sys
from typing import Optional
from ..core import CoreAsciifier, RenderConfig, Decoder, CHARS, CORRECTION
from .. import utils
from ..typealiases import SomeSortOfPath, Stream


__all__ = ['asciify']


def asciify(
        path: SomeSortOfPath, width: int = 100, invert: bool = False, contrast: float = 1.0, color: bool = False,
        chars: str = CHARS, correction: float = CORRECTION, quiet: bool = False,
        out: Optional[Stream] = None) -> str:

    """**Convert a still image to ascii art and print it to the terminal.**

        >>> asciify('foo.png')
        [Prints the ascii art and returns it as a string]

        >>> asciify('foo.png', width=60, invert=True, color=True)
        [Prints 60 columns of colored ascii art meant for a dark background.]

    :param path: The path to the image file.
    :param width: The number of characters in the horizontal axis. Defaults to 100.
    :param invert: Invert the brightness-to-glyph mapping, for dark terminal backgrounds. Defaults to False.
    :param contrast: Contrast multiplier around the luminance midpoint. Defaults to 1.0.
    :param color: Emit 24-bit ANSI colors for every glyph. Defaults to False.
    :param chars: The string of characters to be used in the ascii art, in darkest to brightest order.
        Defaults to ' .:-=+*#%@'
    :param correction: The factor of compensation for the non-square nature of a terminal cell. Defaults to 0.55.
    :param quiet: Set to True to avoid printing status messages. The art itself is always printed.
        Defaults to False.
    :param out: The stream the art is written to. Defaults to standard output.
    :return: The ascii art as a string.
    """

    _print = utils.conditional_print(quiet)
    core = CoreAsciifier(RenderConfig(width, invert, contrast, color, chars, correction))

    fmt = Decoder.detect_format(path)
    _print(f'Detected static image format ({fmt}).')
    frame = Decoder.still(path)
    w, h = frame.dimensions
    _print(f'Image loaded successfully (Dimensions: {w}x{h})')

    resp = core.generate_ascii_art(frame.image)
    _print('\n--- Generated ASCII Art ---')
    utils.write(out or sys.stdout, resp)
    return resp
