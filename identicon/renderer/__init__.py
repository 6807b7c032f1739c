"""Rendering subpackage.

Turns a finished :class:`identicon.image.ImageSpec` into pixels:

* The pixel map is rasterized onto a transparent 250x250 RGBA canvas with
    NumPy slicing, one opaque rectangle per filled cell.
* The canvas is handed to Pillow and encoded as PNG bytes, ready for a raw
    binary file write.

See :mod:`identicon.renderer.png` for the rendering entry points.
"""

from .png import draw_image, render_canvas

__all__ = ["draw_image", "render_canvas"]
