"""Rotfolio Rankings backend."""

__version__ = "1.0.0"
