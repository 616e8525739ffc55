"""
CLI Tests
=========

Argument parsing, dispatch on the input format and exit codes.
"""

import io
import sys

import pytest

from termascii import __version__
from termascii.cli import build_parser, main


class ClosedPipe(io.StringIO):
    def write(self, s):
        raise BrokenPipeError("reader went away")


class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args(["--input", "foo.png"])
        assert args.width == 100
        assert args.contrast == 1.0
        assert not args.invert
        assert not args.loop_gif
        assert not args.color
        assert not args.quiet

    def test_flags(self):
        args = build_parser().parse_args(
            ["-i", "foo.gif", "-w", "60", "--invert", "--contrast", "1.5", "--loop-gif", "--color"])
        assert args.width == 60
        assert args.contrast == 1.5
        assert args.invert and args.loop_gif and args.color

    def test_input_required(self):
        with pytest.raises(SystemExit) as exc:
            build_parser().parse_args([])
        assert exc.value.code == 2

    def test_width_must_be_positive(self):
        with pytest.raises(SystemExit) as exc:
            build_parser().parse_args(["--input", "foo.png", "--width", "0"])
        assert exc.value.code == 2

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            build_parser().parse_args(["--version"])
        assert exc.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestMain:
    """Exit status and output of whole runs."""

    def test_still_image(self, black_png, capsys):
        assert main(["--input", str(black_png), "--width", "4", "--invert"]) == 0
        out = capsys.readouterr().out
        assert "Processing input:" in out
        assert out.endswith("@@@@\n@@@@\n")

    def test_quiet(self, black_png, capsys):
        assert main(["--input", str(black_png), "--width", "4", "--quiet"]) == 0
        assert capsys.readouterr().out == "    \n    \n"

    def test_animation(self, two_frame_gif, capsys):
        assert main(["--input", str(two_frame_gif), "--width", "4"]) == 0
        out = capsys.readouterr().out
        assert "Processed 2 frames." in out
        assert "\x1b[2J\x1b[H" in out

    def test_missing_input(self, tmp_path, capsys):
        assert main(["--input", str(tmp_path / "missing.png")]) == 1
        captured = capsys.readouterr()
        assert "does not exist" in captured.err
        assert "Generated ASCII Art" not in captured.out

    def test_unknown_format(self, tmp_path, capsys):
        path = tmp_path / "notes.xyz"
        path.write_text("hello")
        assert main(["--input", str(path)]) == 1
        assert "Failed to detect image format" in capsys.readouterr().err

    def test_corrupt_input(self, corrupt_png, capsys):
        assert main(["--input", str(corrupt_png)]) == 1
        assert "termascii: error:" in capsys.readouterr().err

    def test_negative_contrast(self, black_png, capsys):
        assert main(["--input", str(black_png), "--width", "4", "--contrast", "-2", "--quiet"]) == 0
        assert capsys.readouterr().out == "@@@@\n@@@@\n"

    @pytest.mark.parametrize("contrast", ["nan", "inf"])
    def test_non_finite_contrast(self, black_png, capsys, contrast):
        assert main(["--input", str(black_png), "--contrast", contrast, "--quiet"]) == 1
        assert "finite" in capsys.readouterr().err

    def test_closed_stdout(self, black_png, capsys, monkeypatch):
        monkeypatch.setattr(sys, "stdout", ClosedPipe())
        assert main(["--input", str(black_png), "--width", "4"]) == 1
        assert "Failed to write to the terminal" in capsys.readouterr().err
