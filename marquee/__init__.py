"""Marquee: movie reviews, favorites and a curated catalog."""

__version__ = "1.0.0"
