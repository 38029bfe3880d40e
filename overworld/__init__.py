"""Entity-component core for a tile-based overworld role-playing game."""

__version__ = "0.1.0"