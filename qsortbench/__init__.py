"""Quicksort and simple in-place sorts, with a fixed 2048-integer input dataset."""

__version__ = "1.0.0"
__all__ = ["input_data", "sorting"]