"""A lane-defence game with plants, sunshine and zombies, its rules, and drawing helpers."""

__version__ = "1.0.0"
__all__ = ["app", "game", "tools", "vector2"]