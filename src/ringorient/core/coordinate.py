"""
Coordinate and ring input handling.

Contains utility functions for:
- The Coordinate point type (null sentinel, exact 2D equality)
- Converting numpy arrays and Shapely geometries to ring arrays
"""

from dataclasses import dataclass
import math
import warnings

import numpy as np
from shapely.geometry import LinearRing, LineString, MultiPolygon, Polygon


@dataclass(frozen=True)
class Coordinate:
    """
    A planar point.

    The null coordinate (both ordinates NaN) marks a value that has not
    been set yet. It is not equal to any coordinate, itself included.

    Attributes
    ----------
    x : float
        Abscissa.
    y : float
        Ordinate.
    """
    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    @classmethod
    def null(cls) -> "Coordinate":
        return cls(math.nan, math.nan)

    @classmethod
    def from_sequence(cls, point) -> "Coordinate":
        """
        Build a Coordinate from any indexable (x, y) pair.

        Coordinates are returned as-is.
        """
        if isinstance(point, Coordinate):
            return point
        return cls(point[0], point[1])

    @property
    def is_null(self) -> bool:
        return math.isnan(self.x) and math.isnan(self.y)

    def equals_2d(self, other: "Coordinate") -> bool:
        """
        Exact comparison of x and y, no tolerance.
        """
        return self.x == other.x and self.y == other.y

    def __iter__(self):
        yield self.x
        yield self.y


def as_ring(ring) -> np.ndarray:
    """
    Convert ring input to a float array of (x, y) rows.

    Parameters
    ----------
    ring : array-like, LinearRing, LineString or Polygon
        Ring vertices. Arrays must have shape (N, 2) or wider (extra
        ordinates such as z are dropped). For a Polygon the exterior ring
        is used.

    Returns
    -------
    np.ndarray
        Ring vertices of shape (N, 2). The ring is not closed for the
        caller; by convention the first and last rows are already equal.

    Raises
    ------
    ValueError
        If the input is a MultiPolygon, has the wrong shape, or contains
        non-finite ordinates.
    """
    if isinstance(ring, MultiPolygon):
        raise ValueError(
            f"Expected a single ring, got MultiPolygon with {len(ring.geoms)} parts"
        )

    if isinstance(ring, Polygon):
        if len(ring.interiors) > 0:
            warnings.warn(
                f"Polygon has {len(ring.interiors)} interior ring(s); "
                "only the exterior ring is used",
                UserWarning,
                stacklevel=2,
            )
        ring = ring.exterior

    if isinstance(ring, (LinearRing, LineString)):
        coords = np.asarray(ring.coords, dtype=np.float64)
    else:
        coords = np.asarray(ring, dtype=np.float64)

    if coords.ndim != 2 or coords.shape[1] < 2:
        raise ValueError(f"Expected ring of shape (N, 2), got {coords.shape}")

    coords = coords[:, :2]

    if not np.all(np.isfinite(coords)):
        raise ValueError("Ring contains non-finite coordinates")

    return coords
