"""
Test Configuration
==================

Pytest fixtures for termascii. Every input image is generated with Pillow
into a temporary directory, so the tests need no binary fixtures.
"""

import pytest
from PIL import Image


@pytest.fixture
def black_png(tmp_path):
    """A 2x2 solid black PNG."""
    path = tmp_path / "black.png"
    Image.new("RGB", (2, 2), (0, 0, 0)).save(path)
    return path


@pytest.fixture
def split_png(tmp_path):
    """A 64x32 image, black on the left half and white on the right half."""
    path = tmp_path / "split.png"
    img = Image.new("RGB", (64, 32), (0, 0, 0))
    img.paste((255, 255, 255), (32, 0, 64, 32))
    img.save(path)
    return path


@pytest.fixture
def two_frame_gif(tmp_path):
    """A red then blue 4x4 GIF with 100 ms and 200 ms frame delays."""
    path = tmp_path / "anim.gif"
    red = Image.new("RGB", (4, 4), (255, 0, 0))
    blue = Image.new("RGB", (4, 4), (0, 0, 255))
    red.save(path, save_all=True, append_images=[blue], duration=[100, 200], loop=0)
    return path


@pytest.fixture
def corrupt_png(tmp_path):
    """A file with a PNG extension and garbage content."""
    path = tmp_path / "corrupt.png"
    path.write_bytes(b"this is not an image")
    return path


@pytest.fixture
def zero_delay_gif(tmp_path):
    """A 1x1 single-frame GIF whose graphic control extension declares a delay of 0."""
    path = tmp_path / "zero.gif"
    path.write_bytes(
        b"GIF89a"
        b"\x01\x00\x01\x00\x80\x00\x00"  # 1x1 screen, 2-color global table
        b"\x00\x00\x00\xff\xff\xff"  # black, white
        b"\x21\xf9\x04\x00\x00\x00\x00\x00"  # graphic control extension, delay 0
        b"\x2c\x00\x00\x00\x00\x01\x00\x01\x00\x00"  # image descriptor
        b"\x02\x02\x44\x01\x00"  # LZW data, one black pixel
        b"\x3b"
    )
    return path
