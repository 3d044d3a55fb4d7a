"""Two-player terminal asteroid shooter with fixed-point maths and an LCD status model."""

__version__ = "0.1.0"