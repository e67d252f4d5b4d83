"""A side-scrolling pygame platformer: a knight against zombies, flying enemies and a boss."""

__version__ = "0.1.0"