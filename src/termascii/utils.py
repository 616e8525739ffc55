from typing import Any, Callable
import sys
from .typealiases import Stream, OutputException


CLEAR_SCREEN = '\x1b[2J'
CURSOR_HOME = '\x1b[H'
RESET = '\x1b[0m'


def fg_color(r: int, g: int, b: int) -> str:
    """24-bit ANSI foreground color escape."""
    return f'\x1b[38;2;{r};{g};{b}m'


def write(out: Stream, *chunks: str) -> None:
    """Write to a terminal stream and flush it immediately."""
    try:
        for chunk in chunks:
            out.write(chunk)
        out.flush()
    except OSError as e:
        raise OutputException(f'Failed to write to the terminal: {e}') from e


def conditional_print(quiet: bool) -> Callable:
    """Return a conditional print function."""
    def _print(*values: Any, end: str = '\n'):
        if not quiet:
            try:
                print(*values, end=end, flush=True)
            except OSError as e:
                raise OutputException(f'Failed to write to the terminal: {e}') from e
    return _print


def error_print(*values: Any) -> None:
    print('termascii: error:', *values, file=sys.stderr)
