"""Classic data structures and algorithms, and a small menu-driven text editor."""

__version__ = "0.1.0"