"""Classic algorithms and data structures for graphs, strings, trees and number theory."""

__version__ = "0.1.0"