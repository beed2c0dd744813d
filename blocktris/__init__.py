"""Falling-block puzzle rules, a block canvas with a 5x5 font, and graphics instruction encoding."""

__version__ = "0.1.0"
__all__ = ["game", "glyphs", "gpu_instructions", "screen", "terminal"]