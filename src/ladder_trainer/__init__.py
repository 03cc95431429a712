"""Ladder workout progression engine and tools."""

__version__ = "0.1.0"
