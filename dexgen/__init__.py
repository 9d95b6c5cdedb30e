"""dexgen: convert a Pokedex override CSV into a Showdown data module."""

__version__ = "0.1.0"
