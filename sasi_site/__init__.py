"""Spread A Smile India site backend."""

__version__ = "0.1.0"
