## plane fitting and planar projection utilities for geo3d
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

"""Plane fitting, local 2D frames and planar inclusion tests.

All functions here work on plain sequences of ``Point3D`` so they can
be shared by paths, polygons and box faces.  Functions that need a
plane return ``None`` when the points do not determine one (fewer than
three points, or every triple collinear) or, where planarity matters,
when the points are not planar.

2D coordinates are ``(u, v)`` tuples in a polygon's local frame.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from geo3d.geom import (
    Point3D,
    add,
    collinear,
    cross,
    dot,
    fpeq,
    fpge,
    fpgt,
    fple,
    fplt,
    fpzero,
    hypot3,
    mag,
    scale,
    sub,
    unit,
)

logger = logging.getLogger(__name__)

Vec2 = Tuple[float, float]
Frame = Tuple[Point3D, Point3D, Point3D]

__all__ = [
    "find_three_noncollinear",
    "has_three_noncollinear",
    "plane_normal",
    "isplanar",
    "coplanar_points",
    "fit_plane",
    "local_frame",
    "project",
    "project_points",
    "point_in_polygon_2d",
    "point_on_ring_2d",
    "point_in_or_on_polygon_2d",
    "segment_in_polygon_2d",
    "polygon_area",
    "project_to_plane",
    "line_plane_intersection",
]


def find_three_noncollinear(points: Sequence[Point3D]) -> Optional[Tuple[int, int, int]]:
    """Return indices ``(i, j, k)`` of the first non-collinear triple.

    Triples are scanned in index order ``i < j < k``.  Triples
    containing two coincident points are skipped.  Returns ``None``
    if no such triple exists.
    """
    n = len(points)
    for i in range(n - 2):
        for j in range(i + 1, n - 1):
            for k in range(j + 1, n):
                if collinear(points[i], points[j], points[k]) is False:
                    return i, j, k
    return None


def has_three_noncollinear(points: Sequence[Point3D]) -> bool:
    return find_three_noncollinear(points) is not None


## origin and (unnormalized) normal of the plane through the first
## non-collinear triple
def plane_normal(points: Sequence[Point3D]) -> Optional[Tuple[Point3D, Point3D]]:
    if len(points) < 3:
        return None
    tri = find_three_noncollinear(points)
    if tri is None:
        return None
    i, j, k = tri
    p0 = points[i]
    normal = cross(sub(points[j], p0), sub(points[k], p0))
    return p0, normal


def _on_plane(p: Point3D, origin: Point3D, normal: Point3D) -> bool:
    return fpzero(dot(sub(p, origin), unit(normal)))


def isplanar(points: Sequence[Point3D]) -> Optional[bool]:
    """Do all the points lie on one plane?

    ``None`` when the points do not determine a plane.
    """
    pn = plane_normal(points)
    if pn is None:
        logger.debug("planarity undefined for %d points", len(points))
        return None
    origin, normal = pn
    return all(_on_plane(p, origin, normal) for p in points)


def coplanar_points(list_a: Sequence[Point3D],
                    list_b: Sequence[Point3D]) -> Optional[bool]:
    """Are the points of both lists on the plane fitted to ``list_a``?

    ``None`` when ``list_a`` does not determine a plane.
    """
    pn = plane_normal(list_a)
    if pn is None:
        return None
    origin, normal = pn
    for p in list_a:
        if not _on_plane(p, origin, normal):
            return False
    for p in list_b:
        if not _on_plane(p, origin, normal):
            return False
    return True


def fit_plane(points: Sequence[Point3D]) -> Optional[Tuple[float, float, float, float]]:
    """Return ``(A, B, C, D)`` with ``Ax + By + Cz + D = 0``.

    The normal comes from the first non-collinear triple and is not
    normalized.  ``None`` for non-planar or under-determined input.
    """
    if not isplanar(points):
        return None
    origin, n = plane_normal(points)
    return n.x, n.y, n.z, -dot(n, origin)


def local_frame(points: Sequence[Point3D]) -> Optional[Frame]:
    """Build an orthonormal in-plane basis ``(origin, axis_x, axis_y)``.

    The origin is the first vertex of the first non-collinear triple,
    ``axis_x`` points towards the second and ``axis_y`` is
    ``normal x axis_x`` so no global up-vector is assumed.
    """
    tri = find_three_noncollinear(points) if len(points) >= 3 else None
    if tri is None:
        return None
    i, j, k = tri
    origin = points[i]
    locx = sub(points[j], origin)
    normal = cross(locx, sub(points[k], origin))
    locy = cross(normal, locx)
    return origin, unit(locx), unit(locy)


def project(p: Point3D, frame: Frame) -> Vec2:
    origin, axis_x, axis_y = frame
    d = sub(p, origin)
    return dot(d, axis_x), dot(d, axis_y)


def project_points(points: Sequence[Point3D], frame: Frame) -> List[Vec2]:
    return [project(p, frame) for p in points]


## 2D helpers
## ----------

def _dist2(a: Vec2, b: Vec2) -> float:
    return hypot3(a[0] - b[0], a[1] - b[1], 0.0)


def _cross2(a: Vec2, b: Vec2) -> float:
    return a[0] * b[1] - a[1] * b[0]


## triangle-equality test, the same one segments use in 3D
def _on_segment_2d(p: Vec2, a: Vec2, b: Vec2) -> bool:
    return fpeq(_dist2(p, a) + _dist2(p, b), _dist2(a, b))


def _crossing_2d(a: Vec2, b: Vec2, c: Vec2, d: Vec2) -> Optional[Vec2]:
    """A point common to segments ``ab`` and ``cd``, or ``None``."""
    r = (b[0] - a[0], b[1] - a[1])
    s = (d[0] - c[0], d[1] - c[1])
    ca = (c[0] - a[0], c[1] - a[1])
    lr = hypot3(r[0], r[1], 0.0)
    ls = hypot3(s[0], s[1], 0.0)
    denom = _cross2(r, s)
    # parallel when the unit directions are, or either segment is a point
    if lr == 0.0 or ls == 0.0 or fpzero(denom / (lr * ls)):
        # distance of c from the line through ab
        if lr > 0.0 and not fpzero(_cross2(ca, r) / lr):
            return None
        # collinear; split at whichever end of cd lies on ab
        for q in (c, d):
            if _on_segment_2d(q, a, b):
                return q
        return None
    t = _cross2(ca, s) / denom
    u = _cross2(ca, r) / denom
    # parameters compared as distances along each segment
    if fpge(t * lr, 0.0) and fple((t - 1.0) * lr, 0.0) \
            and fpge(u * ls, 0.0) and fple((u - 1.0) * ls, 0.0):
        return a[0] + t * r[0], a[1] + t * r[1]
    return None


def point_in_polygon_2d(p: Vec2, ring: Sequence[Vec2]) -> bool:
    """Crossing-number inclusion test.

    Counts the ring edges crossing the horizontal ray to the right of
    ``p``; an odd count means inside.  Points exactly on the boundary
    may land either way.
    """
    cn = 0
    n = len(ring)
    px, py = p
    for i in range(n):
        xi, yi = ring[i]
        xj, yj = ring[(i + 1) % n]
        # an upward or a downward crossing
        if (fple(yi, py) and fpgt(yj, py)) or (fpgt(yi, py) and fple(yj, py)):
            vt = (py - yi) / (yj - yi)
            if fplt(px, xi + vt * (xj - xi)):
                cn += 1
    return (cn & 1) == 1


def point_on_ring_2d(p: Vec2, ring: Sequence[Vec2]) -> bool:
    n = len(ring)
    return any(_on_segment_2d(p, ring[i - 1], ring[i]) for i in range(n))


def point_in_or_on_polygon_2d(p: Vec2, ring: Sequence[Vec2]) -> bool:
    """Closed-region inclusion: boundary points count as inside."""
    return point_on_ring_2d(p, ring) or point_in_polygon_2d(p, ring)


def segment_in_polygon_2d(a: Vec2, b: Vec2, ring: Sequence[Vec2], start: int = 0) -> bool:
    """Is segment ``ab`` entirely inside the closed 2D polygon ``ring``?

    Edges are examined from ``start``.  An endpoint lying on an edge is
    handled by ``_touched``; a transversal crossing splits ``ab`` and
    both halves are checked against the remaining edges.  If nothing
    splits the segment the midpoint decides.
    """
    n = len(ring)
    res = True
    intersection = False
    s0 = ring[n - 1] if start == 0 else ring[start - 1]

    i = start
    while i < n and res:
        s1 = ring[i]
        if _on_segment_2d(a, s0, s1):
            if _on_segment_2d(b, s0, s1):
                return True
            res = _touched(a, b, s0, s1, ring, i + 1)
        elif _on_segment_2d(b, s0, s1):
            res = _touched(b, a, s0, s1, ring, i + 1)
        else:
            p = _crossing_2d(a, b, s0, s1)
            if p is not None:
                intersection = True
                res = segment_in_polygon_2d(a, p, ring, i + 1)
                if res:
                    res = segment_in_polygon_2d(b, p, ring, i + 1)
        s0 = s1
        i += 1

    if res and not intersection:
        mid = ((a[0] + b[0]) / 2.0, (a[1] + b[1]) / 2.0)
        res = point_in_or_on_polygon_2d(mid, ring)
    return res


## ``a`` lies on edge ``s0 s1`` and ``b`` does not.  Returns False only
## when the part of ``ab`` running along the edge leaves the polygon;
## True may still be refined by the caller's midpoint test.
def _touched(a: Vec2, b: Vec2, s0: Vec2, s1: Vec2,
             ring: Sequence[Vec2], start: int) -> bool:
    if fpeq(a[0], s0[0]) and fpeq(a[1], s0[1]):
        if _on_segment_2d(s1, a, b):
            return segment_in_polygon_2d(b, s1, ring, start)
    elif fpeq(a[0], s1[0]) and fpeq(a[1], s1[1]):
        if _on_segment_2d(s0, a, b):
            return segment_in_polygon_2d(b, s0, ring, start)
    elif _on_segment_2d(s0, a, b):
        return segment_in_polygon_2d(b, s0, ring, start)
    elif _on_segment_2d(s1, a, b):
        return segment_in_polygon_2d(b, s1, ring, start)
    return True


def polygon_area(points: Sequence[Point3D]) -> Optional[float]:
    """Area of a closed planar ring of points.

    The ring is projected onto the coordinate plane that drops the
    dominant axis of its normal, the shoelace sum is taken there and
    rescaled by ``|n| / (2 n_axis)``.  ``None`` for non-planar input.
    """
    if not isplanar(points):
        return None
    _, normal = plane_normal(points)
    magn = mag(normal)

    # coordinate to ignore; the largest normal component is never zero
    coord = max(range(3), key=lambda a: abs(normal[a]))
    u, v = [(1, 2), (0, 2), (0, 1)][coord]

    n = len(points)
    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i][u] * points[j][v]
        area -= points[i][v] * points[j][u]

    area *= magn / (2.0 * normal[coord])
    return abs(area)


def project_to_plane(p: Point3D, origin: Point3D, normal: Point3D) -> Point3D:
    """Orthogonal projection of ``p`` onto the plane (origin, normal)."""
    nn = dot(normal, normal)
    k = dot(sub(p, origin), normal) / nn
    return sub(p, scale(k, normal))


def line_plane_intersection(p0: Point3D, direction: Point3D, origin: Point3D,
                            normal: Point3D) -> Optional[Tuple[float, Point3D]]:
    """Parameter and point where ``p0 + t*direction`` meets the plane.

    ``None`` when the line is parallel to the plane.
    """
    if fpzero(dot(unit(normal), unit(direction))):
        return None
    t = dot(normal, sub(origin, p0)) / dot(normal, direction)
    return t, add(p0, scale(t, direction))
