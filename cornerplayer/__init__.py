"""Floating player panel that snaps to the corners of its window."""

__version__ = "0.1.0"
