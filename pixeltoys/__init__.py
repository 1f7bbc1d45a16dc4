"""Small graphical toys: a starfield and a snake game."""

__version__ = "1.0.0"

__all__ = ["snake", "snake_game", "starfield"]