"""A tile-based game: collect every coin, then reach the exit.

Map loading and checking, the standard and bonus rules, and a pygame window.
"""

__version__ = "0.1.0"
__all__ = ["grid", "lines", "maps", "paths", "game", "bonus", "display"]