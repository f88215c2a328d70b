"""A terminal chess board with per-piece move rules and a framed text display."""

__version__ = "0.1.0"
__all__ = ["board", "game", "pieces", "screen"]