"""
Robust orientation predicate.

The sign of the 2x2 determinant

    | p2.x - p1.x   p2.y - p1.y |
    | q.x  - p2.x   q.y  - p2.y |

is evaluated first with plain doubles and an error bound. When the bound
cannot certify the sign, the determinant is recomputed in double-double
arithmetic. Input whose magnitudes would make the double-double products
over- or underflow is evaluated in exact rational arithmetic instead.
"""

from fractions import Fraction
import math

from ..core.coordinate import Coordinate
from ..core.dd import DD


# Relative error bound for the floating-point filter
DP_SAFE_EPSILON = 1e-15

# Returned by the filter when the sign cannot be certified
FILTER_FAILURE = 2

# Non-zero values in this range have exact double-double products:
# every product bit stays above the smallest subnormal and below overflow
_SAFE_MIN = 2.0 ** -450
_SAFE_MAX = 2.0 ** 450


def _signum(x) -> int:
    if x > 0:
        return 1
    if x < 0:
        return -1
    return 0


def _checked(point) -> Coordinate:
    c = Coordinate.from_sequence(point)
    if not (math.isfinite(c.x) and math.isfinite(c.y)):
        raise ValueError(f"Orientation is undefined for non-finite point {tuple(c)}")
    return c


def _in_safe_range(d: float) -> bool:
    return d == 0.0 or _SAFE_MIN <= abs(d) <= _SAFE_MAX


def orientation_index_filter(p1, p2, q) -> int:
    """
    Fast orientation test with a floating-point error bound.

    Parameters
    ----------
    p1, p2 : point-like
        Origin and destination of the directed segment.
    q : point-like
        Point to classify.

    Returns
    -------
    int
        -1, 0 or +1 when the sign is certain, FILTER_FAILURE otherwise
        (near-collinear input, or products that could over- or underflow).
    """
    p1 = _checked(p1)
    p2 = _checked(p2)
    q = _checked(q)

    ax = p1.x - q.x
    ay = p1.y - q.y
    bx = p2.x - q.x
    by = p2.y - q.y
    if not all(_in_safe_range(d) for d in (ax, ay, bx, by)):
        return FILTER_FAILURE

    detleft = ax * by
    detright = ay * bx
    det = detleft - detright

    if detleft > 0.0:
        if detright <= 0.0:
            return _signum(det)
        detsum = detleft + detright
    elif detleft < 0.0:
        if detright >= 0.0:
            return _signum(det)
        detsum = -detleft - detright
    else:
        return _signum(det)

    errbound = DP_SAFE_EPSILON * detsum
    if det >= errbound or -det >= errbound:
        return _signum(det)

    return FILTER_FAILURE


def orientation_index_exact(p1, p2, q) -> int:
    """
    Orientation of q relative to p1->p2 in rational arithmetic.

    Exact for every finite input, whatever the magnitudes involved.
    """
    p1 = _checked(p1)
    p2 = _checked(p2)
    q = _checked(q)

    dx1 = Fraction(p2.x) - Fraction(p1.x)
    dy1 = Fraction(p2.y) - Fraction(p1.y)
    dx2 = Fraction(q.x) - Fraction(p2.x)
    dy2 = Fraction(q.y) - Fraction(p2.y)
    return _signum(dx1 * dy2 - dy1 * dx2)


def orientation_index_dd(p1, p2, q) -> int:
    """
    Orientation of q relative to p1->p2 in double-double arithmetic.

    The coordinate differences are exact in DD, so the only rounding is
    in the final products and their difference. When an ordinate or a
    difference component lies outside the range where those products
    are representable, the sign is computed by orientation_index_exact.

    Returns
    -------
    int
        +1 (counter-clockwise), -1 (clockwise) or 0 (collinear).
    """
    p1 = _checked(p1)
    p2 = _checked(p2)
    q = _checked(q)

    if not all(abs(v) <= _SAFE_MAX for v in (p1.x, p1.y, p2.x, p2.y, q.x, q.y)):
        return orientation_index_exact(p1, p2, q)

    dx1 = DD(p2.x) + (-p1.x)
    dy1 = DD(p2.y) + (-p1.y)
    dx2 = DD(q.x) + (-p2.x)
    dy2 = DD(q.y) + (-p2.y)

    parts = [v for d in (dx1, dy1, dx2, dy2) for v in (d.hi, d.lo)]
    if not all(_in_safe_range(v) for v in parts):
        return orientation_index_exact(p1, p2, q)

    det = dx1 * dy2 - dy1 * dx2
    return det.signum()


def orientation_index(p1, p2, q) -> int:
    """
    Robust orientation index: filter first, double-double on failure.
    """
    index = orientation_index_filter(p1, p2, q)
    if index != FILTER_FAILURE:
        return index
    return orientation_index_dd(p1, p2, q)
