"""Packed dictionary scanning, capitalization schemes and Ukrainian grammar tables."""

__version__ = "0.1.0"