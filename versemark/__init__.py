"""Bookmark and label storage anchored to canonical Bible verse ordinals."""

__version__ = "0.1.0"
