"""
Ringorient - Robust orientation predicates for planar geometry.

This package provides:
- An orientation index for point triples that stays exact for
  near-collinear input (floating-point filter + double-double fallback)
- Winding direction of closed rings without computing a signed area
- Helpers to put rings in a given winding, and to plot them

Main Functions
--------------
index : Turn direction of a point relative to a directed segment
is_ccw : Test whether a closed ring is counter-clockwise
ensure_ccw, ensure_cw : Return a ring in the requested winding
plot_ring : Visualize a ring and its winding

Example
-------
>>> from ringorient import index, is_ccw, COUNTERCLOCKWISE

>>> index((0, 0), (1, 0), (0, 1)) == COUNTERCLOCKWISE
True
>>> is_ccw([(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)])
True
"""

from .algorithm.orientation import (
    Orientation,
    CLOCKWISE,
    COLLINEAR,
    COUNTERCLOCKWISE,
    index,
    is_ccw,
    ensure_ccw,
    ensure_cw,
)
from .algorithm.robust import (
    orientation_index_filter,
    orientation_index_dd,
    orientation_index_exact,
)
from .core.coordinate import Coordinate, as_ring
from .core.dd import DD
from .visualization.plotting import plot_ring

__all__ = [
    # Orientation
    'Orientation',
    'CLOCKWISE',
    'COLLINEAR',
    'COUNTERCLOCKWISE',
    'index',
    'is_ccw',
    'ensure_ccw',
    'ensure_cw',
    # Robust predicate
    'orientation_index_filter',
    'orientation_index_dd',
    'orientation_index_exact',
    # Core types
    'Coordinate',
    'as_ring',
    'DD',
    # Visualization
    'plot_ring',
]
