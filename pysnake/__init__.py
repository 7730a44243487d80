"""A snake arcade game: game rules, colour palette, shape geometry and a pygame window."""

__version__ = "0.1.0"
__all__ = ["colors", "geometry", "game", "app"]