"""
:Version: 0.1.0

termascii
=========

Turn images and animated GIFs into ASCII art, right in the terminal.

`termascii` converts a still image or every frame of a GIF to a grid of characters, picked by brightness from a
ramp that goes from dimmest to brightest (``' .:-=+*#%@'``). Still images are printed once. Animations are
converted up front and then played in place, moving the cursor home before each frame.

Basic Usage
-----------

Use the corresponding function depending on your input:

- ``image.asciify()`` prints a still image as ascii art and returns it as a string.

- ``animation.asciify()`` plays a GIF as ascii art, once or in a loop.

Both take the **path** of the input file as the first argument. Everything else has a default value:

    >>> import termascii as ta
    >>> ta.image.asciify('foo.png')

The most important **parameter** to play around with is the ``width``. It is simply the number of characters in
the **horizontal** axis. Defaults to 100. The height follows from the image proportions, squeezed by the
``correction`` factor (0.55) because terminal cells are taller than they are wide.

If your terminal has a **dark background**, set ``invert`` to ``True`` so bright pixels map to dense glyphs.
``color=True`` prints every glyph in the 24-bit color of its pixel.

The same is available from the command line:

    $ termascii --input foo.gif --width 80 --color --loop-gif
"""

__version__ = '0.1.0'

from . import image, animation
from .core import *
