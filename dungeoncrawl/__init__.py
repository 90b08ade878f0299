"""Grid-based dungeon levels loaded from JSON, with items, monsters and treasure placement."""

__version__ = "0.1.0"

__all__ = ["__version__"]