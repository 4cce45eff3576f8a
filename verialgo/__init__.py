"""Classic algorithms: sorting, selection, dynamic programming, graphs, numeric, trees and hashing."""

__version__ = "0.1.0"
__all__ = ["dynamic", "graphs", "hashing", "numeric", "selection", "sorting", "trees"]