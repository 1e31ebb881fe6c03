# palette_thief/loaders/__init__.py
"""
Image acquisition for the two platforms.

  CanvasLoader  : decoded Pillow images, plus URL fetch that never raises.
  DecoderLoader : paths, URLs, data URLs and tagged buffers; errors propagate.
"""

from .canvas import CanvasLoader
from .decoder import DecoderLoader

__all__ = ["CanvasLoader", "DecoderLoader"]
