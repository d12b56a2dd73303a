"""Classic algorithms and small exercises: sorting, searching, numbers, trees, graphs and more."""

__version__ = "0.1.0"