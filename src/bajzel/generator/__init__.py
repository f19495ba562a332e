"""Generator: emits random bytes from an evaluated ProgramEnv.

Python 3.13+.
"""

from .buffer import OutputBuffer
from .core import Generator, generate, render_text_number
from .source import RandomSource

__all__ = ["Generator", "OutputBuffer", "RandomSource", "generate", "render_text_number"]
