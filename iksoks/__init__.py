"""Two-player terminal tic-tac-toe with a persistent score file."""

__version__ = "1.0.0"