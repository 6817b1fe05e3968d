"""Character builder and encounter simulator for the Forsaken RPG."""

__version__ = "0.1.0"
