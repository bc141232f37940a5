"""A small side-scrolling platform game with three levels, playable in a pygame window."""

__version__ = "1.0.0"