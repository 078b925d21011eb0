"""Classic data structures and algorithms in plain Python, and a tic-tac-toe game."""

__version__ = "0.1.0"