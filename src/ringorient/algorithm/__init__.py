"""
Orientation predicates.
"""

from .orientation import (
    Orientation,
    CLOCKWISE,
    COLLINEAR,
    COUNTERCLOCKWISE,
    index,
    is_ccw,
    ensure_ccw,
    ensure_cw,
)
from .robust import (
    orientation_index_filter,
    orientation_index_dd,
    orientation_index_exact,
)

__all__ = [
    'Orientation',
    'CLOCKWISE',
    'COLLINEAR',
    'COUNTERCLOCKWISE',
    'index',
    'is_ccw',
    'ensure_ccw',
    'ensure_cw',
    'orientation_index_filter',
    'orientation_index_dd',
    'orientation_index_exact',
]
