"""String, memory and formatting helpers, a line reader, an integer stack and a text-mode tile-map game."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "memory",
    "strings",
    "formatting",
    "linereader",
    "stack",
    "game_map",
    "game",
]