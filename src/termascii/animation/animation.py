import sys
import time
from dataclasses import dataclass
from fractions import Fraction
from typing import Iterator, List, Optional, Sequence, Tuple, Union
from time import perf_counter
from ..core import CoreAsciifier, RenderConfig, RenderedFrame, Frame, Decoder, CHARS, CORRECTION
from .. import utils
from ..typealiases import SomeSortOfPath, Number, Milliseconds, Sleeper, Stream, AsciifierException, NoFramesException


__all__ = ['PlaybackConfig', 'Playback', 'effective_delay', 'render_frames', 'asciify']


MIN_FRAME_DELAY_MS = 20
DEFAULT_FRAME_DELAY_MS = 100
LOOPING = '\rLooping...        '


@dataclass(frozen=True)
class PlaybackConfig:
    """Timing of the terminal animation.

    :param loop: Repeat the animation until the process is interrupted. Defaults to False.
    :param min_delay_ms: Floor for every frame delay, in milliseconds. Defaults to 20 (50 fps).
    :param default_delay_ms: Delay given to frames that do not declare one. Defaults to 100.
    """

    loop: bool = False
    min_delay_ms: Milliseconds = MIN_FRAME_DELAY_MS
    default_delay_ms: Milliseconds = DEFAULT_FRAME_DELAY_MS

    def __post_init__(self) -> None:
        if self.min_delay_ms < 0 or self.default_delay_ms < 0:
            raise AsciifierException('Frame delays must not be negative.')


def ld_0(num: Union[Number, str]) -> str:
    """Leading zero version of a number."""
    return '0' * (int(num) < 10) + str(num)


def in_minutes(seconds: Number) -> str:
    """Display a seconds value as MM:SS"""
    minutes = seconds // 60
    return ld_0(minutes) + ':' + ld_0(seconds - minutes * 60)


def effective_delay(delay: Milliseconds, min_delay_ms: Milliseconds = MIN_FRAME_DELAY_MS) -> Fraction:
    """The delay a frame is actually shown for, in milliseconds."""
    return max(Fraction(delay), Fraction(min_delay_ms))


class Playback:
    """Plays a sequence of rendered frames in the terminal. Every frame is drawn over the previous one by moving
    the cursor home instead of clearing, which avoids flicker. Output and sleeping are injected so the timing can
    be driven by a fake clock:

        >>> slept = []
        >>> Playback([RenderedFrame('@\\n', Fraction(0))], out=io.StringIO(), sleep=slept.append).play()
        1
        >>> slept
        [0.02]
    """

    def __init__(
            self, frames: Sequence[RenderedFrame], config: Optional[PlaybackConfig] = None,
            out: Optional[Stream] = None, sleep: Sleeper = time.sleep) -> None:
        if not frames:
            raise NoFramesException('There are no frames to play.')
        self.frames = list(frames)
        self.config = config or PlaybackConfig()
        self.out = out or sys.stdout
        self.sleep = sleep

    def passes(self) -> Iterator[Tuple[str, Fraction]]:
        """One pass over the animation as (text, effective delay in ms) pairs."""
        for text, delay in self.frames:
            yield text, effective_delay(delay, self.config.min_delay_ms)

    def play(self) -> int:
        """Play the animation once, or forever when looping. Returns the number of frames shown."""
        shown = 0
        utils.write(self.out, utils.CLEAR_SCREEN, utils.CURSOR_HOME)
        while True:
            for text, delay in self.passes():
                utils.write(self.out, utils.CURSOR_HOME, text)
                self.sleep(float(delay) / 1000)
                shown += 1
            if not self.config.loop:
                return shown
            utils.write(self.out, LOOPING)


def render_frames(frames: Sequence[Frame], core: CoreAsciifier, quiet: bool = False) -> List[RenderedFrame]:
    """Convert every frame up front, reporting progress on a single line."""
    _print = utils.conditional_print(quiet)
    resp = []
    for k, frame in enumerate(frames, 1):
        _print(f'\rConverting frame {k}/{len(frames)}...', end='')
        resp.append(core.render(frame))
    return resp


def asciify(
        path: SomeSortOfPath, width: int = 100, invert: bool = False, contrast: float = 1.0, color: bool = False,
        loop: bool = False, chars: str = CHARS, correction: float = CORRECTION,
        min_delay_ms: Milliseconds = MIN_FRAME_DELAY_MS, default_delay_ms: Milliseconds = DEFAULT_FRAME_DELAY_MS,
        quiet: bool = False, out: Optional[Stream] = None, sleep: Sleeper = time.sleep) -> List[RenderedFrame]:

    """**Convert an animated GIF to ascii art and play it in the terminal.**

    Every frame is converted before playback starts, so the animation timing does not depend on how fast the
    frames render. With ``loop`` set, this function only returns when the process is interrupted.

        >>> asciify('foo.gif')
        [Plays the animation once and returns the rendered frames]

        >>> asciify('foo.gif', width=80, color=True, loop=True)
        [Plays 80 columns of colored ascii art until Ctrl+C.]

    :param path: The path to the GIF file.
    :param width: The number of characters in the horizontal axis. Defaults to 100.
    :param invert: Invert the brightness-to-glyph mapping, for dark terminal backgrounds. Defaults to False.
    :param contrast: Contrast multiplier around the luminance midpoint. Defaults to 1.0.
    :param color: Emit 24-bit ANSI colors for every glyph. Defaults to False.
    :param loop: Repeat the animation indefinitely. Defaults to False.
    :param chars: The string of characters to be used in the ascii art, in darkest to brightest order.
        Defaults to ' .:-=+*#%@'
    :param correction: The factor of compensation for the non-square nature of a terminal cell. Defaults to 0.55.
    :param min_delay_ms: No frame is shown for less than this many milliseconds. Defaults to 20.
    :param default_delay_ms: Delay for frames that do not declare one. Defaults to 100.
    :param quiet: Set to True to avoid printing progress to the console. Defaults to False.
    :param out: The stream the animation is written to. Defaults to standard output.
    :param sleep: The function used to wait between frames. Defaults to ``time.sleep``.
    :return: The rendered frames, once playback finishes.
    """

    _print = utils.conditional_print(quiet)
    core = CoreAsciifier(RenderConfig(width, invert, contrast, color, chars, correction))
    config = PlaybackConfig(loop, min_delay_ms, default_delay_ms)

    Decoder.detect_format(path)
    _print('Detected GIF format. Processing frames...')
    frames = Decoder.frames(path, config.default_delay_ms)
    _print(f'Processed {len(frames)} frames.')

    start_time = perf_counter()
    rendered = render_frames(frames, core, quiet)
    _print(f'\nFrame conversion complete in {in_minutes(int(perf_counter() - start_time))}.')

    _print('Starting animation (Press Ctrl+C to stop)...')
    Playback(rendered, config, out, sleep).play()
    return rendered
