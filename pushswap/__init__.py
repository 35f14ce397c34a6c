"""Two-stack integer sorting with a restricted set of operations, plus small text and buffer helpers."""

__version__ = "1.0.0"