"""Coverage visualization utilities."""

from .plot_coverage import plot_file, plot_polygon

__all__ = ["plot_file", "plot_polygon"]
