"""A tile-based puzzle game: collect every banana, then reach the door."""

__version__ = "0.1.0"
__all__ = ["mapfile", "validation", "game", "display"]