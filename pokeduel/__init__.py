"""Terminal creature battles backed by PokeAPI data."""
__version__ = "0.1.0"
