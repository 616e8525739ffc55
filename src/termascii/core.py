from __future__ import annotations
import math
from typing import Iterator, List, NamedTuple, Optional, Tuple, Union
from dataclasses import dataclass
from fractions import Fraction
from pathlib import Path
from PIL import Image, ImageFilter, ImageSequence, UnidentifiedImageError
from . import utils
from .typealiases import (
    SomeSortOfPath, Number, Milliseconds, AsciifierException, FormatDetectionException, DecodeException,
    NoFramesException)


__all__ = [
    'CHARS', 'CORRECTION', 'BLUR_RADIUS', 'RenderConfig', 'Frame', 'RenderedFrame', 'RgbSample', 'LumaSample',
    'luminance', 'adjust_contrast', 'glyph_index', 'target_height', 'CoreAsciifier', 'Decoder']


CHARS = ' .:-=+*#%@'
CORRECTION = 0.55
BLUR_RADIUS = 0.6
MIDPOINT = 128
LUMA_MATRIX = (0.2126, 0.7152, 0.0722, 0)


@dataclass(frozen=True)
class RenderConfig:
    """Everything the renderer needs to turn one frame into text. Built once, read-only afterwards.

    :param width: The number of characters in the horizontal axis. Defaults to 100.
    :param invert: Whether to invert the brightness-to-glyph mapping, for dark backgrounds. Defaults to False.
    :param contrast: Contrast multiplier around the luminance midpoint (128). Defaults to 1.0.
    :param color: Whether to emit 24-bit ANSI foreground colors before every glyph. Defaults to False.
    :param chars: The glyph ramp, in darkest to brightest order. Defaults to ' .:-=+*#%@'
    :param correction: The factor of compensation for the non-square nature of a terminal cell. A value between
        zero and one shrinks the output height. Defaults to 0.55.
    :param blur_radius: Gaussian blur sigma applied in color mode to suppress resampling noise. Defaults to 0.6.
    """

    width: int = 100
    invert: bool = False
    contrast: float = 1.0
    color: bool = False
    chars: str = CHARS
    correction: float = CORRECTION
    blur_radius: float = BLUR_RADIUS

    def __post_init__(self) -> None:
        if self.width < 1:
            raise AsciifierException(f'Width must be at least 1 character, got {self.width}.')
        if not math.isfinite(self.contrast):
            raise AsciifierException(f'Contrast must be a finite number, got {self.contrast}.')
        if not self.chars:
            raise AsciifierException('The glyph ramp must contain at least one character.')
        if self.correction <= 0:
            raise AsciifierException(f'Aspect ratio correction must be positive, got {self.correction}.')


@dataclass(frozen=True)
class Frame:
    """A decoded RGBA image. ``delay`` is in milliseconds for animation frames and None for still images."""

    image: Image.Image
    delay: Optional[Fraction] = None

    @property
    def dimensions(self) -> Tuple[int, int]:
        return self.image.size


class RenderedFrame(NamedTuple):
    text: str
    delay: Fraction


class RgbSample(NamedTuple):
    r: int
    g: int
    b: int


class LumaSample(NamedTuple):
    value: int


SampledPixel = Union[RgbSample, LumaSample]


def luminance(sample: SampledPixel) -> float:
    """Brightness of a sample. Colors use the ITU-R BT.709 luma weights."""
    if isinstance(sample, RgbSample):
        return 0.2126 * sample.r + 0.7152 * sample.g + 0.0722 * sample.b
    return float(sample.value)


def adjust_contrast(value: float, contrast: float, midpoint: Number = MIDPOINT) -> float:
    if contrast == 1.0:
        return value
    return min(max(contrast * (value - midpoint) + midpoint, 0.0), 255.0)


def glyph_index(intensity: float, ramp_length: int) -> int:
    """Index into a glyph ramp of ``ramp_length`` characters, clamped to the ramp bounds."""
    index = round((intensity / 255) * (ramp_length - 1))
    return min(max(index, 0), ramp_length - 1)


def target_height(dimensions: Tuple[int, int], width: int, correction: float = CORRECTION) -> int:
    """Number of text lines for a source of ``dimensions`` rendered ``width`` characters wide."""
    source_width, source_height = dimensions
    return max(1, round(source_height * width * correction / source_width))


class CoreAsciifier:
    """The class behind the image and animation functions. Holds a ``RenderConfig`` and converts
    frames to character art with it. The class is stateless between calls, so the same instance
    can render every frame of an animation:

        >>> core = CoreAsciifier(RenderConfig(width=4))
        >>> core.generate_ascii_art(Image.new('RGBA', (2, 2), (0, 0, 0, 255)))
        '    \\n    \\n'
    """

    def __init__(self, config: Optional[RenderConfig] = None) -> None:
        self.config = config or RenderConfig()

    def figure_out_sizes(self, dimensions: Tuple[int, int]) -> Tuple[int, int]:
        """Output grid dimensions (columns, lines) for a source image of ``dimensions``."""
        width = self.config.width
        return width, target_height(dimensions, width, self.config.correction)

    def prepare(self, image: Image.Image) -> Image.Image:
        """Resize to the output grid. Color mode keeps RGBA and blurs slightly, grayscale mode keeps luminance."""
        resized = image.resize(self.figure_out_sizes(image.size), Image.LANCZOS)
        if self.config.color:
            return resized.convert('RGBA').filter(ImageFilter.GaussianBlur(self.config.blur_radius))
        return resized.convert('RGB').convert('L', matrix=LUMA_MATRIX)

    def samples(self, image: Image.Image) -> Iterator[List[SampledPixel]]:
        """Yield the rows of a prepared image as sampled pixels."""
        pixels = image.load()
        width, height = image.size
        color = image.mode != 'L'
        for y in range(height):
            if color:
                yield [RgbSample(*pixels[x, y][:3]) for x in range(width)]
            else:
                yield [LumaSample(pixels[x, y]) for x in range(width)]

    def glyph(self, sample: SampledPixel) -> str:
        adjusted = adjust_contrast(luminance(sample), self.config.contrast)
        intensity = 255 - adjusted if self.config.invert else adjusted
        chars = self.config.chars
        return chars[glyph_index(intensity, len(chars))]

    def generate_ascii_art(self, image: Image.Image) -> str:
        """Convert one image to character art, one line per output row, each terminated with a newline.

        :param image: The source image, any mode Pillow can convert to RGBA.
        :return: The generated ascii art as a string.
        """
        resp = []
        for row in self.samples(self.prepare(image)):
            for sample in row:
                if isinstance(sample, RgbSample):
                    resp.append(utils.fg_color(*sample))
                resp.append(self.glyph(sample))
            if self.config.color:
                resp.append(utils.RESET)
            resp.append('\n')
        return ''.join(resp)

    def render(self, frame: Frame) -> RenderedFrame:
        return RenderedFrame(self.generate_ascii_art(frame.image), frame.delay or Fraction(0))


def frame_delay(info: dict, default_delay_ms: Milliseconds) -> Fraction:
    """Delay of an animation frame in milliseconds. Frames that do not declare one get ``default_delay_ms``."""
    duration = info.get('duration')
    if duration is None:
        return Fraction(default_delay_ms)
    return Fraction(duration)


class Decoder:
    """Class with static functions wrapping the Pillow decoding of input files."""

    ANIMATED_FORMATS = ('GIF',)

    @staticmethod
    def detect_format(path: SomeSortOfPath) -> str:
        """Pillow format name for ``path``, detected from its extension."""
        path = Path(path)
        if not path.is_file():
            raise DecodeException(f'The file path \'{path}\' does not exist.')
        if not path.suffix:
            raise FormatDetectionException(f'Failed to detect image format: \'{path}\' has no file extension.')
        fmt = Image.registered_extensions().get(path.suffix.lower())
        if fmt is None:
            raise FormatDetectionException(
                f'Failed to detect image format: the extension \'{path.suffix}\' is not supported.')
        return fmt

    @staticmethod
    def is_animated(fmt: str) -> bool:
        return fmt in Decoder.ANIMATED_FORMATS

    @staticmethod
    def open(path: SomeSortOfPath) -> Image.Image:
        try:
            return Image.open(path)
        except FileNotFoundError as e:
            raise DecodeException(f'The file path \'{path}\' does not exist.') from e
        except UnidentifiedImageError as e:
            raise DecodeException(f'File format not supported or file is corrupt: {e}') from e
        except OSError as e:
            raise DecodeException(f'Failed to read \'{path}\': {e}') from e

    @staticmethod
    def still(path: SomeSortOfPath) -> Frame:
        """Decode a single RGBA frame."""
        with Decoder.open(path) as img:
            try:
                return Frame(img.convert('RGBA'))
            except (OSError, ValueError) as e:
                raise DecodeException(f'Failed to decode \'{path}\': {e}') from e

    @staticmethod
    def frames(path: SomeSortOfPath, default_delay_ms: Milliseconds = 100) -> List[Frame]:
        """Decode every frame of an animation into memory, with its delay."""
        with Decoder.open(path) as img:
            try:
                frames = [
                    Frame(frame.convert('RGBA'), frame_delay(frame.info, default_delay_ms))
                    for frame in ImageSequence.Iterator(img)]
            except (OSError, ValueError) as e:
                raise DecodeException(f'Failed to decode \'{path}\': {e}') from e
        if not frames:
            raise NoFramesException('GIF contains no frames.')
        return frames
