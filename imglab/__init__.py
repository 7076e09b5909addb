"""Classic image-processing operations on RGB images held as NumPy arrays."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "edges",
    "filters",
    "histogram",
    "morphology",
    "noise",
    "pixels",
    "point",
]