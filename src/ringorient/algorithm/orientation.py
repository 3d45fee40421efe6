"""
Orientation of point triples and ring winding direction.

Contains:
- index: robust turn direction of a point relative to a directed segment
- is_ccw: winding direction of a closed ring
- ensure_ccw / ensure_cw: return a ring in the requested winding
"""

from enum import IntEnum

import numpy as np

from ..core.coordinate import Coordinate, as_ring
from .robust import orientation_index


class Orientation(IntEnum):
    """
    Turn direction from segment p1->p2 towards a point q.
    """
    CLOCKWISE = -1
    COLLINEAR = 0
    COUNTERCLOCKWISE = 1

    RIGHT = -1
    STRAIGHT = 0
    LEFT = 1


CLOCKWISE = Orientation.CLOCKWISE
COLLINEAR = Orientation.COLLINEAR
COUNTERCLOCKWISE = Orientation.COUNTERCLOCKWISE


def index(p1, p2, q) -> Orientation:
    """
    Orientation index of q relative to the directed segment p1->p2.

    Parameters
    ----------
    p1, p2 : point-like
        Segment endpoints, as Coordinate, tuple or array of (x, y).
    q : point-like
        Point to classify.

    Returns
    -------
    Orientation
        COUNTERCLOCKWISE (+1) if q is left of the segment, CLOCKWISE (-1)
        if it is right of it, COLLINEAR (0) otherwise.
    """
    return Orientation(orientation_index(p1, p2, q))


def is_ccw(ring) -> bool:
    """
    Test whether a closed ring is oriented counter-clockwise.

    The orientation is read off the highest part of the ring: the last
    upward segment reaching the maximum y, and the first point after it
    that leaves that height. A pointed cap is resolved with one call to
    index(); a flat cap by the direction of the horizontal top segment.
    No signed area is computed.

    Flat rings and caps of the form A-B-A (fewer than 3 distinct points
    or coincident segments) return False.

    Parameters
    ----------
    ring : array-like, LinearRing, LineString or Polygon
        Ring vertices of shape (N, 2), first point equal to last.

    Returns
    -------
    bool
        True if the ring is counter-clockwise.

    Raises
    ------
    ValueError
        If the ring has fewer than 3 distinct vertices.
    """
    ring = as_ring(ring)

    # number of points without the closing endpoint
    n_pts = len(ring) - 1
    if n_pts < 3:
        raise ValueError(
            "Ring has fewer than 4 points, so orientation cannot be determined"
        )

    ys = ring[:, 1]

    # Last rising segment whose endpoint is at least as high as any seen
    up_hi_pt = Coordinate.from_sequence(ring[0])
    up_low_pt = Coordinate.null()
    prev_y = up_hi_pt.y
    i_up_hi = 0
    for i in range(1, n_pts + 1):
        py = ys[i]
        if py > prev_y and py >= up_hi_pt.y:
            up_hi_pt = Coordinate.from_sequence(ring[i])
            up_low_pt = Coordinate.from_sequence(ring[i - 1])
            i_up_hi = i
        prev_y = py

    # No rising segment: the ring is flat
    if up_low_pt.is_null:
        return False

    # Next point below the high point; exists since the ring is not flat
    i_down_low = i_up_hi
    while True:
        i_down_low = (i_down_low + 1) % n_pts
        if i_down_low == i_up_hi or ys[i_down_low] != up_hi_pt.y:
            break

    down_low_pt = Coordinate.from_sequence(ring[i_down_low])
    i_down_hi = i_down_low - 1 if i_down_low > 0 else n_pts - 1
    down_hi_pt = Coordinate.from_sequence(ring[i_down_hi])

    if up_hi_pt.equals_2d(down_hi_pt):
        # Pointed cap. An A-B-A cap has no usable triangle.
        if (up_low_pt.equals_2d(up_hi_pt)
                or down_low_pt.equals_2d(up_hi_pt)
                or up_low_pt.equals_2d(down_low_pt)):
            return False
        return index(up_low_pt, up_hi_pt, down_low_pt) == COUNTERCLOCKWISE

    # Flat cap: the top segment runs right-to-left in a CCW ring
    del_x = down_hi_pt.x - up_hi_pt.x
    return del_x < 0


def ensure_ccw(ring) -> np.ndarray:
    """
    Ensure ring vertices are in counter-clockwise order.

    Parameters
    ----------
    ring : array-like, LinearRing, LineString or Polygon
        Closed ring of shape (N, 2).

    Returns
    -------
    np.ndarray
        Ring vertices in CCW order. Reversed copy if the input is not CCW.
    """
    ring = as_ring(ring)
    if is_ccw(ring):
        return ring
    return ring[::-1].copy()


def ensure_cw(ring) -> np.ndarray:
    """
    Ensure ring vertices are in clockwise order.

    Rings that is_ccw() reports as not CCW (flat or degenerate ones
    included) are returned unchanged.
    """
    ring = as_ring(ring)
    if is_ccw(ring):
        return ring[::-1].copy()
    return ring
