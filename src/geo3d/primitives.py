## 3D primitive value types for geo3d
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

"""immutable 3D primitives for **geo3d**

====================
OVERVIEW
====================

Seven kinds of value make up the geo3d data model:

  ``Point3D``   defined in ``geo3d.geom``
  ``Segment``   two end points, possibly coincident
  ``Line``      infinite line through two distinct points
  ``Box``       axis-aligned box, ``low <= high`` on every axis
  ``Path``      ordered points, open or closed
  ``Polygon``   closed ring of points assumed to lie in one plane
  ``Sphere``    center and non-negative radius

Every kind carries a class attribute ``kind`` naming it; the predicate
layer dispatches on that tag.  All values are frozen dataclasses, so
"modifying" a value (translation, scaling) always builds a new one and
revalidates it.  Constructors coerce any three-element sequence into a
``Point3D``.

Bounding volumes
----------------

``bbox()`` and ``bsphere()`` return an enclosing ``Box`` and
``Sphere``.  Paths and polygons compute their box once at construction.
Lines are unbounded and have neither.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from math import pi
from typing import ClassVar, List, Optional, Sequence, Tuple

from geo3d.errors import ConstructionError, DivisionByZeroError, UnsupportedOperationError
from geo3d.geom import (
    Point3D,
    add,
    dist,
    fpeq,
    fpgt,
    fplt,
    fpzero,
    midpoint,
    point,
    scale,
    sub,
    vclose,
)
from geo3d import plane

logger = logging.getLogger(__name__)

__all__ = [
    "Segment",
    "Line",
    "Box",
    "Path",
    "Polygon",
    "Sphere",
    "box_intersection",
    "bounding_box",
    "bounding_sphere",
    "defining_points",
    "KINDS",
]


def _pt(p) -> Point3D:
    if isinstance(p, Point3D):
        return p
    try:
        return point(p)
    except (TypeError, ValueError) as err:
        raise ConstructionError(f'invalid point: {p!r}') from err


def _check_divisor(d: float) -> None:
    if fpzero(d):
        logger.debug("refusing division by %r", d)
        raise DivisionByZeroError()


def _cmp_points(a: Sequence[Point3D], b: Sequence[Point3D]) -> int:
    for p, q in zip(a, b):
        c = p.cmp(q)
        if c:
            return c
    if len(a) < len(b):
        return -1
    if len(a) > len(b):
        return 1
    return 0


## do two rings of points match, allowing a cyclic shift in either
## direction?
def _same_ring(pt1: Sequence[Point3D], pt2: Sequence[Point3D]) -> bool:
    n = len(pt1)
    if n != len(pt2):
        return False
    for i in range(n):
        if not vclose(pt2[i], pt1[0]):
            continue
        if all(vclose(pt2[(i + k) % n], pt1[k]) for k in range(1, n)):
            return True
        if all(vclose(pt2[(i - k) % n], pt1[k]) for k in range(1, n)):
            return True
    return False


def _centroid(points: Sequence[Point3D]) -> Point3D:
    n = len(points)
    return Point3D(sum(p.x for p in points) / n,
                   sum(p.y for p in points) / n,
                   sum(p.z for p in points) / n)


def _bbox_of(points: Sequence[Point3D]) -> "Box":
    return Box(Point3D(min(p.x for p in points),
                       min(p.y for p in points),
                       min(p.z for p in points)),
               Point3D(max(p.x for p in points),
                       max(p.y for p in points),
                       max(p.z for p in points)))


def _bsphere_of(points: Sequence[Point3D]) -> "Sphere":
    c = _centroid(points)
    return Sphere(c, max(dist(p, c) for p in points))


## Segment
## -------

@dataclass(frozen=True)
class Segment:
    """Finite line segment from ``p0`` to ``p1``.

    The end points may coincide, in which case the segment behaves as
    a point everywhere in the library.
    """

    kind: ClassVar[str] = "segment"

    p0: Point3D
    p1: Point3D

    def __post_init__(self):
        object.__setattr__(self, 'p0', _pt(self.p0))
        object.__setattr__(self, 'p1', _pt(self.p1))

    @property
    def points(self) -> Tuple[Point3D, Point3D]:
        return self.p0, self.p1

    @property
    def direction(self) -> Point3D:
        return sub(self.p1, self.p0)

    @property
    def length(self) -> float:
        return dist(self.p0, self.p1)

    @property
    def center(self) -> Point3D:
        return midpoint(self.p0, self.p1)

    def isdegenerate(self) -> bool:
        return vclose(self.p0, self.p1)

    def bbox(self) -> "Box":
        return Box(self.p0, self.p1)

    def bsphere(self) -> "Sphere":
        c = self.center
        return Sphere(c, dist(c, self.p0))

    ## parallel to the yz, xz and xy planes respectively
    def vertical(self) -> bool:
        return fpeq(self.p0.x, self.p1.x)

    def horizontal(self) -> bool:
        return fpeq(self.p0.y, self.p1.y)

    def perpendicular(self) -> bool:
        return fpeq(self.p0.z, self.p1.z)

    def line(self) -> "Line":
        return Line(self.p0, self.p1)

    def same(self, other: "Segment") -> bool:
        return _same_ring(self.points, other.points)

    def cmp(self, other: "Segment") -> int:
        return _cmp_points(self.points, other.points)

    def __add__(self, p: Point3D) -> "Segment":
        return Segment(add(self.p0, p), add(self.p1, p))

    def __sub__(self, p: Point3D) -> "Segment":
        return Segment(sub(self.p0, p), sub(self.p1, p))

    def __mul__(self, k: float) -> "Segment":
        return Segment(scale(k, self.p0), scale(k, self.p1))

    def __truediv__(self, d: float) -> "Segment":
        _check_divisor(d)
        return Segment(scale(1.0 / d, self.p0), scale(1.0 / d, self.p1))


## Line
## ----

@dataclass(frozen=True)
class Line:
    """Infinite line ``p0 + t (p1 - p0)`` through two distinct points."""

    kind: ClassVar[str] = "line"

    p0: Point3D
    p1: Point3D

    def __post_init__(self):
        object.__setattr__(self, 'p0', _pt(self.p0))
        object.__setattr__(self, 'p1', _pt(self.p1))
        if vclose(self.p0, self.p1):
            logger.debug("rejecting line through coincident points %s", self.p0)
            raise ConstructionError('line requires two distinct points')

    @property
    def points(self) -> Tuple[Point3D, Point3D]:
        return self.p0, self.p1

    @property
    def direction(self) -> Point3D:
        return sub(self.p1, self.p0)

    def point_at(self, t: float) -> Point3D:
        return add(self.p0, scale(t, self.direction))

    def vertical(self) -> bool:
        return fpeq(self.p0.x, self.p1.x)

    def horizontal(self) -> bool:
        return fpeq(self.p0.y, self.p1.y)

    def perpendicular(self) -> bool:
        return fpeq(self.p0.z, self.p1.z)

    def same(self, other: "Line") -> bool:
        return vclose(self.p0, other.p0) and vclose(self.p1, other.p1)

    def cmp(self, other: "Line") -> int:
        return _cmp_points(self.points, other.points)

    def __add__(self, p: Point3D) -> "Line":
        return Line(add(self.p0, p), add(self.p1, p))

    def __sub__(self, p: Point3D) -> "Line":
        return Line(sub(self.p0, p), sub(self.p1, p))

    def __mul__(self, k: float) -> "Line":
        return Line(scale(k, self.p0), scale(k, self.p1))

    def __truediv__(self, d: float) -> "Line":
        _check_divisor(d)
        return Line(scale(1.0 / d, self.p0), scale(1.0 / d, self.p1))


## Box
## ---

@dataclass(frozen=True)
class Box:
    """Axis-aligned box.

    Any two opposite corners may be given; they are canonicalised so
    that ``low <= high`` on every axis.  A box may collapse to a
    rectangle, a segment or a single point.
    """

    kind: ClassVar[str] = "box"

    low: Point3D
    high: Point3D

    def __post_init__(self):
        a = _pt(self.low)
        b = _pt(self.high)
        object.__setattr__(self, 'low', Point3D(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z)))
        object.__setattr__(self, 'high', Point3D(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z)))

    @property
    def points(self) -> Tuple[Point3D, Point3D]:
        return self.high, self.low

    @property
    def width(self) -> float:
        return self.high.x - self.low.x

    @property
    def height(self) -> float:
        return self.high.y - self.low.y

    @property
    def depth(self) -> float:
        return self.high.z - self.low.z

    @property
    def volume(self) -> float:
        return self.width * self.height * self.depth

    @property
    def center(self) -> Point3D:
        return midpoint(self.low, self.high)

    def diagonal(self) -> Segment:
        return Segment(self.high, self.low)

    def bbox(self) -> "Box":
        return self

    def bsphere(self) -> "Sphere":
        c = self.center
        return Sphere(c, dist(c, self.high))

    def corners(self) -> List[Point3D]:
        lo, hi = self.low, self.high
        return [Point3D(x, y, z)
                for x in (lo.x, hi.x)
                for y in (lo.y, hi.y)
                for z in (lo.z, hi.z)]

    def faces(self) -> List["Polygon"]:
        """The six faces as ring-ordered quadrilaterals.

        Only meaningful for boxes with positive extent on every axis.
        """
        lo, hi = self.low, self.high
        return [
            Polygon([(lo.x, lo.y, lo.z), (hi.x, lo.y, lo.z), (hi.x, hi.y, lo.z), (lo.x, hi.y, lo.z)]),
            Polygon([(lo.x, lo.y, hi.z), (hi.x, lo.y, hi.z), (hi.x, hi.y, hi.z), (lo.x, hi.y, hi.z)]),
            Polygon([(lo.x, lo.y, lo.z), (hi.x, lo.y, lo.z), (hi.x, lo.y, hi.z), (lo.x, lo.y, hi.z)]),
            Polygon([(lo.x, hi.y, lo.z), (hi.x, hi.y, lo.z), (hi.x, hi.y, hi.z), (lo.x, hi.y, hi.z)]),
            Polygon([(lo.x, lo.y, lo.z), (lo.x, hi.y, lo.z), (lo.x, hi.y, hi.z), (lo.x, lo.y, hi.z)]),
            Polygon([(hi.x, lo.y, lo.z), (hi.x, hi.y, lo.z), (hi.x, hi.y, hi.z), (hi.x, lo.y, hi.z)]),
        ]

    ## number of axes along which the box has positive extent
    def dimension(self) -> int:
        return sum(1 for a in range(3) if fpgt(self.high[a], self.low[a]))

    def union(self, other: "Box") -> "Box":
        """Smallest box enclosing both boxes."""
        return Box(Point3D(min(self.low.x, other.low.x),
                           min(self.low.y, other.low.y),
                           min(self.low.z, other.low.z)),
                   Point3D(max(self.high.x, other.high.x),
                           max(self.high.y, other.high.y),
                           max(self.high.z, other.high.z)))

    def same(self, other: "Box") -> bool:
        return vclose(self.high, other.high) and vclose(self.low, other.low)

    def cmp(self, other: "Box") -> int:
        return _cmp_points((self.low, self.high), (other.low, other.high))

    def __add__(self, p: Point3D) -> "Box":
        return Box(add(self.low, p), add(self.high, p))

    def __sub__(self, p: Point3D) -> "Box":
        return Box(sub(self.low, p), sub(self.high, p))

    def __mul__(self, k: float) -> "Box":
        return Box(scale(k, self.low), scale(k, self.high))

    def __truediv__(self, d: float) -> "Box":
        _check_divisor(d)
        return Box(scale(1.0 / d, self.low), scale(1.0 / d, self.high))


def box_intersection(b1: Box, b2: Box) -> Optional[Box]:
    """The box common to ``b1`` and ``b2``, or ``None`` if disjoint."""
    lo = []
    hi = []
    for a in range(3):
        l = max(b1.low[a], b2.low[a])
        h = min(b1.high[a], b2.high[a])
        if fplt(h, l):
            return None
        lo.append(l)
        hi.append(max(l, h))
    return Box(Point3D(*lo), Point3D(*hi))


## Path
## ----

@dataclass(frozen=True)
class Path:
    """Ordered sequence of points.

    An open path has an edge between consecutive points; a closed path
    has an extra edge from the last point back to the first and must
    hold at least three non-collinear points.  The bounding box is
    computed once, when the path is built.
    """

    kind: ClassVar[str] = "path"

    points: Tuple[Point3D, ...]
    closed: bool = False
    _bbox: Box = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        pts = tuple(_pt(p) for p in self.points)
        if not pts:
            raise ConstructionError('a path requires at least one point')
        if self.closed and not plane.has_three_noncollinear(pts):
            logger.debug("rejecting closed path of %d points", len(pts))
            raise ConstructionError('a closed path requires at least 3 non collinear points')
        object.__setattr__(self, 'points', pts)
        object.__setattr__(self, 'closed', bool(self.closed))
        object.__setattr__(self, '_bbox', _bbox_of(pts))

    @property
    def npoints(self) -> int:
        return len(self.points)

    @property
    def isopen(self) -> bool:
        return not self.closed

    @property
    def length(self) -> float:
        return sum(e.length for e in self.edges())

    @property
    def center(self) -> Point3D:
        return _centroid(self.points)

    def edges(self) -> List[Segment]:
        """Edge segments in order, including the closing edge."""
        pts = self.points
        segs = [Segment(pts[i - 1], pts[i]) for i in range(1, len(pts))]
        if self.closed:
            segs.append(Segment(pts[-1], pts[0]))
        return segs

    def isplanar(self) -> Optional[bool]:
        return plane.isplanar(self.points)

    def area(self) -> Optional[float]:
        """Enclosed area; ``None`` unless closed and planar."""
        if not self.closed:
            return None
        return plane.polygon_area(self.points)

    def bbox(self) -> Box:
        return self._bbox

    def bsphere(self) -> "Sphere":
        return _bsphere_of(self.points)

    def close(self) -> "Path":
        return Path(self.points, True)

    def open(self) -> "Path":
        return Path(self.points, False)

    def to_polygon(self) -> "Polygon":
        if not self.closed:
            raise ConstructionError('open path cannot be converted to polygon')
        return Polygon(self.points)

    def concat(self, other: "Path") -> Optional["Path"]:
        """Join two open paths; ``None`` if either is closed."""
        if self.closed or other.closed:
            return None
        return Path(self.points + other.points, False)

    def same(self, other: "Path") -> bool:
        return _same_ring(self.points, other.points)

    def cmp(self, other: "Path") -> int:
        return _cmp_points(self.points, other.points)

    def __add__(self, p: Point3D) -> "Path":
        return Path([add(q, p) for q in self.points], self.closed)

    def __sub__(self, p: Point3D) -> "Path":
        return Path([sub(q, p) for q in self.points], self.closed)

    def __mul__(self, k: float) -> "Path":
        return Path([scale(k, q) for q in self.points], self.closed)

    def __truediv__(self, d: float) -> "Path":
        _check_divisor(d)
        return Path([scale(1.0 / d, q) for q in self.points], self.closed)


## Polygon
## -------

@dataclass(frozen=True)
class Polygon:
    """Closed ring of at least three non-collinear points.

    Planarity is not enforced here; plane-dependent queries check it
    and return ``None`` for non-planar rings.
    """

    kind: ClassVar[str] = "polygon"

    points: Tuple[Point3D, ...]
    _bbox: Box = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        pts = tuple(_pt(p) for p in self.points)
        if not plane.has_three_noncollinear(pts):
            logger.debug("rejecting polygon of %d points", len(pts))
            raise ConstructionError('a polygon requires at least 3 non collinear points')
        object.__setattr__(self, 'points', pts)
        object.__setattr__(self, '_bbox', _bbox_of(pts))

    @property
    def closed(self) -> bool:
        return True

    @property
    def npoints(self) -> int:
        return len(self.points)

    @property
    def length(self) -> float:
        """perimeter"""
        return sum(e.length for e in self.edges())

    @property
    def center(self) -> Point3D:
        return _centroid(self.points)

    def edges(self) -> List[Segment]:
        pts = self.points
        return [Segment(pts[i - 1], pts[i]) for i in range(1, len(pts))] + \
            [Segment(pts[-1], pts[0])]

    def isplanar(self) -> Optional[bool]:
        return plane.isplanar(self.points)

    def area(self) -> Optional[float]:
        return plane.polygon_area(self.points)

    def plane_equation(self) -> Optional[Tuple[float, float, float, float]]:
        return plane.fit_plane(self.points)

    def bbox(self) -> Box:
        return self._bbox

    def bsphere(self) -> "Sphere":
        return _bsphere_of(self.points)

    def to_path(self) -> Path:
        return Path(self.points, True)

    def same(self, other: "Polygon") -> bool:
        return _same_ring(self.points, other.points)

    def cmp(self, other: "Polygon") -> int:
        return _cmp_points(self.points, other.points)

    def __add__(self, p: Point3D) -> "Polygon":
        return Polygon([add(q, p) for q in self.points])

    def __sub__(self, p: Point3D) -> "Polygon":
        return Polygon([sub(q, p) for q in self.points])

    def __mul__(self, k: float) -> "Polygon":
        return Polygon([scale(k, q) for q in self.points])

    def __truediv__(self, d: float) -> "Polygon":
        _check_divisor(d)
        return Polygon([scale(1.0 / d, q) for q in self.points])


## Sphere
## ------

@dataclass(frozen=True)
class Sphere:
    """Solid ball of the given center and radius."""

    kind: ClassVar[str] = "sphere"

    center: Point3D
    radius: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'center', _pt(self.center))
        r = float(self.radius)
        if fplt(r, 0.0):
            raise ConstructionError('sphere radius must not be negative')
        object.__setattr__(self, 'radius', max(r, 0.0))

    @property
    def diameter(self) -> float:
        return 2.0 * self.radius

    @property
    def volume(self) -> float:
        return 4.0 / 3.0 * pi * self.radius ** 3

    def bbox(self) -> Box:
        c, r = self.center, self.radius
        return Box(Point3D(c.x - r, c.y - r, c.z - r),
                   Point3D(c.x + r, c.y + r, c.z + r))

    def bsphere(self) -> "Sphere":
        return self

    def same(self, other: "Sphere") -> bool:
        return fpeq(self.radius, other.radius) and vclose(self.center, other.center)

    def cmp(self, other: "Sphere") -> int:
        c = self.center.cmp(other.center)
        if c:
            return c
        if fplt(self.radius, other.radius):
            return -1
        if fpgt(self.radius, other.radius):
            return 1
        return 0

    def __add__(self, p: Point3D) -> "Sphere":
        return Sphere(add(self.center, p), self.radius)

    def __sub__(self, p: Point3D) -> "Sphere":
        return Sphere(sub(self.center, p), self.radius)

    def __mul__(self, k: float) -> "Sphere":
        return Sphere(scale(k, self.center), abs(k) * self.radius)

    def __truediv__(self, d: float) -> "Sphere":
        _check_divisor(d)
        return Sphere(scale(1.0 / d, self.center), self.radius / abs(d))


## generic accessors
## -----------------

KINDS = {
    "point": Point3D,
    "segment": Segment,
    "line": Line,
    "box": Box,
    "path": Path,
    "polygon": Polygon,
    "sphere": Sphere,
}


def _kind(obj) -> str:
    kind = getattr(obj, 'kind', None)
    if kind not in KINDS or not isinstance(obj, KINDS[kind]):
        raise UnsupportedOperationError(f'not a geo3d primitive: {obj!r}')
    return kind


def bounding_box(obj) -> Box:
    """Axis-aligned bounding box of any bounded primitive."""
    if _kind(obj) == "line":
        raise UnsupportedOperationError('a line has no bounding box')
    return obj.bbox()


def bounding_sphere(obj) -> Sphere:
    if _kind(obj) == "line":
        raise UnsupportedOperationError('a line has no bounding sphere')
    return obj.bsphere()


def defining_points(obj) -> Tuple[Point3D, ...]:
    """The points that define ``obj`` (corners for a box, the center
    for a sphere)."""
    kind = _kind(obj)
    if kind == "point":
        return (obj,)
    if kind == "box":
        return tuple(obj.corners())
    if kind == "sphere":
        return (obj.center,)
    return tuple(obj.points)
