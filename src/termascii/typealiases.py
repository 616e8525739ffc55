from typing import Union, Callable, TextIO
from os import PathLike
from pathlib import Path
from fractions import Fraction

SomeSortOfPath = Union[str, PathLike, Path]
Number = Union[int, float]
Milliseconds = Union[int, float, Fraction]
Sleeper = Callable[[float], None]
Stream = TextIO


class AsciifierException(Exception):
    pass


class FormatDetectionException(AsciifierException):
    pass


class DecodeException(AsciifierException):
    pass


class NoFramesException(DecodeException):
    pass


class OutputException(AsciifierException):
    pass
