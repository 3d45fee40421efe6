"""
Visualization utilities.
"""

from .plotting import plot_ring

__all__ = ['plot_ring']
