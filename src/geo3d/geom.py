## tolerance and vector kernel for geo3d
## Copyright (c) 2026 the geo3d authors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""tolerance-aware scalar comparisons and 3D vector arithmetic for **geo3d**

====================
OVERVIEW
====================

Every comparison in geo3d goes through the ``fp*`` functions defined
here, and all of them share the single module-level ``epsilon``.  The
comparisons are deliberately asymmetric in the way they fold the
tolerance in:

  ``fplt(a,b)``  is true when ``b - a > epsilon``
  ``fple(a,b)``  is true when ``a - b <= epsilon``
  ``fpgt(a,b)``  is true when ``a - b > epsilon``
  ``fpge(a,b)``  is true when ``b - a <= epsilon``

so that ``fplt`` and ``fpge`` are exact complements, as are ``fpgt``
and ``fple``.  Several algorithms (the box/line case split in
particular) depend on this boundary convention.

Points and vectors are both represented by the immutable ``Point3D``
value type.  The vector functions (``add``, ``sub``, ``scale``,
``dot``, ``cross``, ``mag`` ...) operate on anything that has ``x``,
``y`` and ``z`` components and always return a new ``Point3D``.

``mag`` is computed with ``hypot3``, which factors out the component
of largest magnitude before squaring so very large or very small
coordinates neither overflow nor underflow.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import hypot, inf, isinf, isnan, nan, sqrt
from typing import ClassVar, Iterator, Optional, Sequence

from geo3d.errors import DivisionByZeroError

logger = logging.getLogger(__name__)

__all__ = [
    "epsilon",
    "set_epsilon",
    "get_epsilon",
    "fpzero",
    "fpeq",
    "fpne",
    "fplt",
    "fple",
    "fpgt",
    "fpge",
    "hypot3",
    "Point3D",
    "point",
    "add",
    "sub",
    "scale",
    "dot",
    "cross",
    "vabs",
    "mag",
    "dist",
    "unit",
    "midpoint",
    "vclose",
    "proportional",
    "collinear",
]

## constants
epsilon = 1.0e-6


def set_epsilon(value: float) -> None:
    """Install ``value`` as the process-wide comparison tolerance.

    There is exactly one tolerance in geo3d; changing it changes the
    behaviour of every comparison at once.
    """
    global epsilon
    value = float(value)
    if not value > 0.0 or isinf(value):
        raise ValueError('epsilon must be a positive finite number')
    logger.debug("tolerance changed from %g to %g", epsilon, value)
    epsilon = value


def get_epsilon() -> float:
    return epsilon


## operations on scalars
## -----------------------

def fpzero(a: float) -> bool:
    """is ``a`` zero to within epsilon"""
    return abs(a) <= epsilon


def fpeq(a: float, b: float) -> bool:
    """are two scalars the same to within epsilon"""
    return abs(a - b) <= epsilon


def fpne(a: float, b: float) -> bool:
    return abs(a - b) > epsilon


def fplt(a: float, b: float) -> bool:
    """``a < b`` by more than epsilon"""
    return b - a > epsilon


def fple(a: float, b: float) -> bool:
    """``a <= b`` allowing epsilon slack"""
    return a - b <= epsilon


def fpgt(a: float, b: float) -> bool:
    """``a > b`` by more than epsilon"""
    return a - b > epsilon


def fpge(a: float, b: float) -> bool:
    """``a >= b`` allowing epsilon slack"""
    return b - a <= epsilon


## three-argument hypotenuse.  Infinity wins over NaN, as for the
## two-argument IEEE hypot.
def hypot3(x: float, y: float, z: float) -> float:
    """Return ``sqrt(x*x + y*y + z*z)`` without intermediate overflow.

    The largest component is factored out before squaring.  Any
    infinite input yields infinity; otherwise any NaN input yields NaN.
    """
    if isinf(x) or isinf(y) or isinf(z):
        return inf
    if isnan(x) or isnan(y) or isnan(z):
        return nan

    x = abs(x)
    y = abs(y)
    z = abs(z)

    # make x the largest
    if x < y:
        x, y = y, x
    if x < z:
        x, z = z, x

    if x == 0.0:
        return hypot(y, z)

    yx = y / x
    zx = z / x
    return x * sqrt(1.0 + yx * yx + zx * zx)


## the point/vector value type
## ---------------------------

@dataclass(frozen=True)
class Point3D:
    """Immutable point (or free vector) in XYZ space."""

    kind: ClassVar[str] = "point"

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def __getitem__(self, i: int) -> float:
        return (self.x, self.y, self.z)[i]

    def __add__(self, other: "Point3D") -> "Point3D":
        return add(self, other)

    def __sub__(self, other: "Point3D") -> "Point3D":
        return sub(self, other)

    def __neg__(self) -> "Point3D":
        return Point3D(-self.x, -self.y, -self.z)

    def __mul__(self, k: float) -> "Point3D":
        return scale(k, self)

    __rmul__ = __mul__

    def __truediv__(self, d: float) -> "Point3D":
        if fpzero(d):
            raise DivisionByZeroError()
        return Point3D(self.x / d, self.y / d, self.z / d)

    def same(self, other: "Point3D") -> bool:
        return vclose(self, other)

    def cmp(self, other: "Point3D") -> int:
        """Lexicographic tolerant comparison on x, then y, then z."""
        for a, b in zip(self, other):
            if fplt(a, b):
                return -1
            if fpgt(a, b):
                return 1
        return 0

    def vertical(self, other: "Point3D") -> bool:
        """do the two points share the same x coordinate"""
        return fpeq(self.x, other.x)

    def horizontal(self, other: "Point3D") -> bool:
        """do the two points share the same y coordinate"""
        return fpeq(self.y, other.y)

    def perpendicular(self, other: "Point3D") -> bool:
        """do the two points share the same z coordinate"""
        return fpeq(self.z, other.z)

    def collinear(self, p2: "Point3D", p3: "Point3D") -> Optional[bool]:
        return collinear(self, p2, p3)

    def bbox(self):
        from geo3d.primitives import Box
        return Box(self, self)

    def bsphere(self):
        from geo3d.primitives import Sphere
        return Sphere(self, 0.0)


def point(x=0.0, y=0.0, z=0.0) -> Point3D:
    """Convenience constructor accepting three scalars or a sequence"""
    if isinstance(x, (tuple, list, Point3D)):
        seq: Sequence[float] = x
        if len(seq) != 3:
            raise ValueError('point needs exactly three coordinates')
        return Point3D(float(seq[0]), float(seq[1]), float(seq[2]))
    return Point3D(float(x), float(y), float(z))


## R^3 -> R^3 functions
## ------------------------------------------------

def add(a, b) -> Point3D:
    """ 3 vector, `a + b`"""
    return Point3D(a.x + b.x, a.y + b.y, a.z + b.z)


def sub(a, b) -> Point3D:
    """ 3 vector, `a - b`"""
    return Point3D(a.x - b.x, a.y - b.y, a.z - b.z)


def scale(k: float, a) -> Point3D:
    """ 3 vector ``a`` times scalar ``k``"""
    return Point3D(a.x * k, a.y * k, a.z * k)


def dot(a, b) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a, b) -> Point3D:
    """ cross product `a x b`"""
    return Point3D(a.y * b.z - a.z * b.y,
                   a.z * b.x - a.x * b.z,
                   a.x * b.y - a.y * b.x)


def vabs(a) -> Point3D:
    """ component-wise absolute value"""
    return Point3D(abs(a.x), abs(a.y), abs(a.z))


def mag(a) -> float:
    return hypot3(a.x, a.y, a.z)


def dist(a, b) -> float:
    """ euclidean distance between two points"""
    return hypot3(a.x - b.x, a.y - b.y, a.z - b.z)


## unit vector in the direction of ``a``; the zero vector maps to itself
def unit(a) -> Point3D:
    m = mag(a)
    if m == 0.0:
        return Point3D(0.0, 0.0, 0.0)
    return Point3D(a.x / m, a.y / m, a.z / m)


def midpoint(a, b) -> Point3D:
    return Point3D((a.x + b.x) / 2.0, (a.y + b.y) / 2.0, (a.z + b.z) / 2.0)


## component-wise tolerant equality
def vclose(a, b) -> bool:
    return fpeq(a.x, b.x) and fpeq(a.y, b.y) and fpeq(a.z, b.z)


def proportional(u, v) -> bool:
    """Is ``u`` a scalar multiple of ``v``?

    The ratio is taken from the first component of ``v`` that is not
    zero within epsilon and must reproduce all three components of
    ``u``.  A zero ``v`` is never proportional to anything.
    """
    if not fpzero(v.x):
        k = u.x / v.x
    elif not fpzero(v.y):
        k = u.y / v.y
    elif not fpzero(v.z):
        k = u.z / v.z
    else:
        return False
    return fpeq(u.x, v.x * k) and fpeq(u.y, v.y * k) and fpeq(u.z, v.z * k)


def collinear(p1, p2, p3) -> Optional[bool]:
    """Are three points collinear?

    Returns ``None`` (undefined) if any two of the points coincide.
    """
    if vclose(p1, p2) or vclose(p1, p3) or vclose(p2, p3):
        return None
    return proportional(sub(p2, p1), sub(p3, p1))
