"""
Double-Double Arithmetic Module

Extended-precision floating point built from pairs of IEEE doubles.
A value is stored as the unevaluated sum hi + lo with |lo| <= ulp(hi)/2,
giving roughly 106 bits of mantissa.

Contains:
- Error-free transforms (two_sum, fast_two_sum, split, two_product)
- The DD value type with +, -, * and sign extraction

Used by the robust orientation predicate when the fast floating-point
filter cannot decide a sign.
"""

from dataclasses import dataclass
from typing import Tuple, Union


# 2^27 + 1, splits a double into two 26-bit halves
SPLITTER = 134217729.0


def two_sum(a: float, b: float) -> Tuple[float, float]:
    """
    Compute a + b exactly as a rounded sum and its rounding error.

    Parameters
    ----------
    a, b : float
        Operands.

    Returns
    -------
    tuple of float
        (s, err) with s = fl(a + b) and s + err == a + b exactly.
    """
    s = a + b
    bb = s - a
    err = (a - (s - bb)) + (b - bb)
    return s, err


def fast_two_sum(a: float, b: float) -> Tuple[float, float]:
    """
    Like two_sum, but requires |a| >= |b| (or a == 0).
    """
    s = a + b
    err = b - (s - a)
    return s, err


def split(a: float) -> Tuple[float, float]:
    """
    Split a double into high and low halves with a == hi + lo.

    Each half fits in 26 bits, so products of halves are exact.
    """
    c = SPLITTER * a
    hi = c - (c - a)
    lo = a - hi
    return hi, lo


def two_product(a: float, b: float) -> Tuple[float, float]:
    """
    Compute a * b as a rounded product and its rounding error.

    Parameters
    ----------
    a, b : float
        Operands.

    Returns
    -------
    tuple of float
        (p, err) with p = fl(a * b) and p + err == a * b exactly.
    """
    p = a * b
    a_hi, a_lo = split(a)
    b_hi, b_lo = split(b)
    err = ((a_hi * b_hi - p) + a_hi * b_lo + a_lo * b_hi) + a_lo * b_lo
    return p, err


@dataclass(frozen=True)
class DD:
    """
    Immutable double-double number.

    Attributes
    ----------
    hi : float
        Leading component (the best double approximation of the value).
    lo : float
        Trailing correction term.
    """
    hi: float
    lo: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'hi', float(self.hi))
        object.__setattr__(self, 'lo', float(self.lo))

    @staticmethod
    def _coerce(other: Union["DD", float, int]) -> "DD":
        if isinstance(other, DD):
            return other
        return DD(float(other))

    def __add__(self, other: Union["DD", float, int]) -> "DD":
        other = DD._coerce(other)
        s, e = two_sum(self.hi, other.hi)
        t, f = two_sum(self.lo, other.lo)
        e += t
        s, e = fast_two_sum(s, e)
        e += f
        s, e = fast_two_sum(s, e)
        return DD(s, e)

    def __neg__(self) -> "DD":
        return DD(-self.hi, -self.lo)

    def __sub__(self, other: Union["DD", float, int]) -> "DD":
        return self + (-DD._coerce(other))

    def __mul__(self, other: Union["DD", float, int]) -> "DD":
        other = DD._coerce(other)
        p, e = two_product(self.hi, other.hi)
        e += self.hi * other.lo + self.lo * other.hi
        p, e = fast_two_sum(p, e)
        return DD(p, e)

    def signum(self) -> int:
        """
        Sign of the represented value: -1, 0 or +1.

        The low word decides only when the high word is exactly zero.
        """
        if self.hi > 0:
            return 1
        if self.hi < 0:
            return -1
        if self.lo > 0:
            return 1
        if self.lo < 0:
            return -1
        return 0
