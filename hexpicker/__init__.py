"""Honeycomb and color bar pickers."""

__version__ = "0.1.0"
