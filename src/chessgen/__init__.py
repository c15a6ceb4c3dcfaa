"""chessgen — pseudo-legal chess move generation."""

__version__ = "0.1.0"
