"""tagmark - inline tag markup for chat messages."""

__version__ = "0.1.0"
