"""Classic algorithm routines: sorting, strings, grids, binary trees and combinatorics."""

__version__ = "0.1.0"

__all__ = [
    "combinatorics",
    "grids",
    "sorting",
    "strings",
    "trees",
]