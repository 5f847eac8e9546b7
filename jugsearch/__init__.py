"""Graph search strategies applied to the water-jug puzzle."""

__version__ = "0.1.0"
__all__ = ["problem", "hashtable", "search", "cli"]