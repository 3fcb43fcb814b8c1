"""Simulated memory manager with recycle lists, and array, list and tree ADTs with test benches."""

__version__ = "0.1.0"