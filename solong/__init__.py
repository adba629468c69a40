"""Load, validate and print .ber tile maps for a collect-and-escape puzzle game."""

__version__ = "0.1.0"