"""Ordinal satoshi numbering, notations, rarity and inscription envelopes."""

__version__ = "0.1.0"