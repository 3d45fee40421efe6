"""
Core types: coordinates, ring input and double-double arithmetic.
"""

from .coordinate import Coordinate, as_ring
from .dd import DD, two_sum, fast_two_sum, split, two_product

__all__ = [
    'Coordinate',
    'as_ring',
    'DD',
    'two_sum',
    'fast_two_sum',
    'split',
    'two_product',
]
