## spatial predicates over geo3d primitives
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

"""distance, intersection and containment predicates for **geo3d**

====================
OVERVIEW
====================

Most predicates are thin wrappers over the shortest-segment engine
in ``geo3d.shortest``:

  ``distance(a, b)``       length of the shortest segment
  ``closest_point(a, b)``  the point of ``b`` nearest to ``a``
  ``intersects(a, b)``     the shortest segment has zero length

Five pairs have dedicated constant-time intersection tests (segment
and line against a box, box against box, box against sphere and
sphere against sphere).  They are required to agree with the generic
definition, and the test suite checks that they do.

Containment is structural rather than metric: each kind lists the
defining points (or edges) that must fall inside the container.  A
non-planar polygon cannot contain anything meaningfully, so polygon
containment answers ``None`` for one.

Relations between lines and segments (``parallel``, ``coincide``,
``skew``, ``orthogonal``) accept either kind in either position.

"""

from __future__ import annotations

import logging
from math import inf
from typing import Optional

from geo3d.errors import UnsupportedOperationError
from geo3d.geom import (
    Point3D,
    add,
    dist,
    dot,
    fpeq,
    fpge,
    fpgt,
    fple,
    fplt,
    fpzero,
    hypot3,
    mag,
    proportional,
    scale,
    sub,
    unit,
    vabs,
    vclose,
)
from geo3d.primitives import Box, Line, Segment, Sphere, box_intersection, defining_points
from geo3d.shortest import (
    RANK,
    box_contains_point,
    closest_point_on_box,
    kind_of,
    segment_contains_point,
    shortest_pair,
    shortest_segment,
)
from geo3d import plane

logger = logging.getLogger(__name__)

__all__ = [
    "shortest_segment",
    "distance",
    "closest_point",
    "intersects",
    "intersects_generic",
    "intersection_point",
    "overlaps",
    "contains",
    "contained",
    "same",
    "parallel",
    "coincide",
    "skew",
    "orthogonal",
    "coplanar",
    "box_intersection",
]


## metric predicates
## -----------------

def distance(a, b) -> float:
    pa, pb = shortest_pair(a, b)
    return dist(pa, pb)


def closest_point(a, b) -> Point3D:
    """The point of ``b`` closest to ``a``."""
    return shortest_pair(a, b)[1]


## dedicated intersection tests
## ----------------------------

def _half_extent(box: Box) -> Point3D:
    return scale(0.5, sub(box.high, box.low))


def _segment_box_sat(s: Segment, box: Box) -> bool:
    """Separating axis test: three box face normals and the three
    cross products of the segment direction with the box axes."""
    e = _half_extent(box)
    d = scale(0.5, sub(s.p1, s.p0))
    c = sub(add(s.p0, d), box.center)
    ad = vabs(d)

    if fpgt(abs(c.x), e.x + ad.x):
        return False
    if fpgt(abs(c.y), e.y + ad.y):
        return False
    if fpgt(abs(c.z), e.z + ad.z):
        return False

    # d x (unit axis); each separation is divided by the length of
    # its axis so it is compared as a distance
    for sep, reach, axis_len in (
            (d.y * c.z - d.z * c.y, e.y * ad.z + e.z * ad.y, hypot3(0.0, d.y, d.z)),
            (d.z * c.x - d.x * c.z, e.x * ad.z + e.z * ad.x, hypot3(d.x, 0.0, d.z)),
            (d.x * c.y - d.y * c.x, e.x * ad.y + e.y * ad.x, hypot3(d.x, d.y, 0.0))):
        if axis_len > 0.0 and fpgt(abs(sep) / axis_len, reach / axis_len):
            return False
    return True


def _line_box_slab(line: Line, box: Box) -> bool:
    """Clip the line parameter against the three slabs of the box.

    An axis the line runs parallel to cannot clip the parameter; there
    the line origin itself must lie inside the slab.
    """
    d = line.direction
    u = unit(d)
    p0 = line.p0
    t0 = -inf
    t1 = inf
    for a in range(3):
        if fpzero(u[a]):
            if fplt(p0[a], box.low[a]) or fpgt(p0[a], box.high[a]):
                return False
            continue
        ta = (box.low[a] - p0[a]) / d[a]
        tb = (box.high[a] - p0[a]) / d[a]
        if ta > tb:
            ta, tb = tb, ta
        t0 = max(t0, ta)
        t1 = min(t1, tb)
    # the clipped interval may be empty by at most epsilon along the line
    return fple((t0 - t1) * mag(d), 0.0)


def _box_box(b1: Box, b2: Box) -> bool:
    return all(fple(b1.low[a], b2.high[a]) and fple(b2.low[a], b1.high[a])
               for a in range(3))


def _box_sphere(box: Box, sphere: Sphere) -> bool:
    """Quick accept on the six axis extremes of the sphere, then the
    exact test on the box point nearest the center."""
    c, r = sphere.center, sphere.radius
    for a in range(3):
        for sign in (-1.0, 1.0):
            q = [c.x, c.y, c.z]
            q[a] += sign * r
            if box_contains_point(box, Point3D(*q)):
                return True
    return fple(dist(closest_point_on_box(c, box), c), r)


def _sphere_sphere(s1: Sphere, s2: Sphere) -> bool:
    return fple(dist(s1.center, s2.center), s1.radius + s2.radius)


_FAST_INTERSECTS = {
    ("segment", "box"): _segment_box_sat,
    ("line", "box"): _line_box_slab,
    ("box", "box"): _box_box,
    ("box", "sphere"): _box_sphere,
    ("sphere", "sphere"): _sphere_sphere,
}


def _ordered(a, b):
    ka = kind_of(a)
    kb = kind_of(b)
    if RANK[ka] > RANK[kb]:
        return b, a, kb, ka
    return a, b, ka, kb


def intersects(a, b) -> bool:
    """Do ``a`` and ``b`` share at least one point (within epsilon)?"""
    x, y, kx, ky = _ordered(a, b)
    fast = _FAST_INTERSECTS.get((kx, ky))
    if fast is not None:
        return fast(x, y)
    return intersects_generic(x, y)


def intersects_generic(a, b) -> bool:
    """``intersects`` computed from the shortest segment only."""
    pa, pb = shortest_pair(a, b)
    return fpzero(dist(pa, pb))


def intersection_point(a, b) -> Optional[Point3D]:
    """A point common to ``a`` and ``b``; ``None`` if they are disjoint.

    When the intersection is not a single point the engine's choice is
    returned.
    """
    if not intersects(a, b):
        return None
    return shortest_pair(a, b)[0]


_OVERLAP_KINDS = frozenset(("segment", "line", "box", "polygon", "sphere"))


def overlaps(a, b) -> bool:
    """Spatial overlap.  Equivalent to ``intersects`` for the kinds that
    have spatial extent."""
    for obj in (a, b):
        kind = kind_of(obj)
        if kind not in _OVERLAP_KINDS:
            raise UnsupportedOperationError(f'overlap is not defined for {kind}')
    return intersects(a, b)


## containment
## -----------

def _line_contains_point(line: Line, p: Point3D) -> bool:
    """One common parameter on every axis the line moves along; the
    other axes must match the line origin."""
    ## t is a distance along the unit direction
    d = unit(line.direction)
    t = None
    for a in range(3):
        if fpzero(d[a]):
            if not fpeq(p[a], line.p0[a]):
                return False
            continue
        ta = (p[a] - line.p0[a]) / d[a]
        if t is None:
            t = ta
        elif not fpeq(ta, t):
            return False
    return True


def _parts(path):
    if path.npoints == 1:
        return [Segment(path.points[0], path.points[0])]
    return path.edges()


def _path_contains_point(path, p: Point3D) -> bool:
    return any(segment_contains_point(e, p) for e in _parts(path))


def _path_contains_segment(path, s: Segment) -> bool:
    return any(segment_contains_point(e, s.p0) and segment_contains_point(e, s.p1)
               for e in _parts(path))


def _polygon_contains(poly, points, edges) -> Optional[bool]:
    """Is every point (or every edge, when given) inside the closed
    region of ``poly``?  ``None`` if the polygon is not planar."""
    if not plane.isplanar(poly.points):
        logger.debug("containment in a non-planar polygon is undefined")
        return None

    bbox = poly.bbox()
    if not all(box_contains_point(bbox, p) for p in points):
        return False
    if not plane.coplanar_points(poly.points, points):
        return False

    frame = plane.local_frame(poly.points)
    ring = plane.project_points(poly.points, frame)
    if edges is None:
        return all(plane.point_in_or_on_polygon_2d(plane.project(p, frame), ring)
                   for p in points)
    return all(plane.segment_in_polygon_2d(plane.project(e.p0, frame),
                                           plane.project(e.p1, frame), ring)
               for e in edges)


def _in_sphere(sphere: Sphere, points) -> bool:
    return all(fple(dist(p, sphere.center), sphere.radius) for p in points)


def _in_box(box: Box, points) -> bool:
    return all(box_contains_point(box, p) for p in points)


def _sphere_corners(sphere: Sphere):
    return sphere.bbox().corners()


_CONTAINS = {
    ("point", "point"): lambda p, q: vclose(p, q),

    ("segment", "point"): segment_contains_point,
    ("segment", "segment"): lambda s, t: (segment_contains_point(s, t.p0)
                                          and segment_contains_point(s, t.p1)),

    ("line", "point"): _line_contains_point,
    ("line", "segment"): lambda l, s: (_line_contains_point(l, s.p0)
                                       and _line_contains_point(l, s.p1)),
    ("line", "line"): lambda l1, l2: coincide(l1, l2),

    ("box", "point"): box_contains_point,
    ("box", "segment"): lambda b, s: _in_box(b, s.points),
    ("box", "box"): lambda b, c: _in_box(b, c.points),
    ("box", "path"): lambda b, path: _in_box(b, path.points),
    ("box", "polygon"): lambda b, poly: _in_box(b, poly.points),
    ("box", "sphere"): lambda b, sp: _in_box(b, _sphere_corners(sp)),

    ("path", "point"): _path_contains_point,
    ("path", "segment"): _path_contains_segment,
    ("path", "path"): lambda p1, p2: all(_path_contains_segment(p1, e) for e in _parts(p2)),

    ("polygon", "point"): lambda poly, p: _polygon_contains(poly, [p], None),
    ("polygon", "segment"): lambda poly, s: _polygon_contains(poly, list(s.points), [s]),
    ("polygon", "path"): lambda poly, path: _polygon_contains(poly, list(path.points), _parts(path)),
    ("polygon", "polygon"): lambda p1, p2: _polygon_contains(p1, list(p2.points), p2.edges()),

    ("sphere", "point"): lambda sp, p: _in_sphere(sp, [p]),
    ("sphere", "segment"): lambda sp, s: _in_sphere(sp, s.points),
    ("sphere", "box"): lambda sp, b: _in_sphere(sp, b.corners()),
    ("sphere", "path"): lambda sp, path: _in_sphere(sp, path.points),
    ("sphere", "polygon"): lambda sp, poly: _in_sphere(sp, poly.points),
    ("sphere", "sphere"): lambda s1, s2: fple(dist(s1.center, s2.center) + s2.radius, s1.radius),
}


def contains(a, b) -> Optional[bool]:
    """Does ``a`` contain ``b``?

    ``None`` when ``a`` is a non-planar polygon.  Pairs with no
    containment rule raise ``UnsupportedOperationError``.
    """
    ka = kind_of(a)
    kb = kind_of(b)
    rule = _CONTAINS.get((ka, kb))
    if rule is None:
        raise UnsupportedOperationError(f'{ka} cannot contain {kb}')
    return rule(a, b)


def contained(a, b) -> Optional[bool]:
    """Is ``a`` contained in ``b``?"""
    return contains(b, a)


def same(a, b) -> bool:
    """Tolerant equality; values of different kinds are never the same."""
    if kind_of(a) != kind_of(b):
        return False
    return a.same(b)


## lines and segments
## ------------------

def _linear(obj):
    kind = kind_of(obj)
    if kind not in ("segment", "line"):
        raise UnsupportedOperationError(f'expected a line or segment, got {kind}')
    return kind


def _has_direction(obj) -> bool:
    return not fpzero(mag(obj.direction))


def parallel(a, b) -> bool:
    """Same direction, distinct supporting lines."""
    _linear(a)
    _linear(b)
    if not (_has_direction(a) and _has_direction(b)):
        return False
    v = unit(b.direction)
    return proportional(unit(a.direction), v) and not proportional(sub(b.p0, a.p0), v)


def coincide(a, b) -> bool:
    """Same supporting line; two segments must also overlap along it."""
    ka = _linear(a)
    kb = _linear(b)
    if not (_has_direction(a) and _has_direction(b)):
        return False
    u = unit(a.direction)
    v = unit(b.direction)
    if not (proportional(u, v) and proportional(sub(a.p0, b.p0), v)):
        return False
    if ka == "segment" and kb == "segment":
        ## positions of b's endpoints along a, as distances from a.p0
        t0 = dot(sub(b.p0, a.p0), u)
        t1 = dot(sub(b.p1, a.p0), u)
        return fple(min(t0, t1), a.length) and fpge(max(t0, t1), 0.0)
    return True


def skew(a, b) -> bool:
    return not coincide(a, b) and not parallel(a, b) and not intersects(a, b)


def orthogonal(a, b) -> bool:
    _linear(a)
    _linear(b)
    return fpzero(dot(unit(a.direction), unit(b.direction)))


_PLANAR_KINDS = frozenset(("point", "segment", "line", "box", "path", "polygon"))


def coplanar(a, b) -> Optional[bool]:
    """Do ``a`` and ``b`` lie in one plane?

    ``None`` when their points together do not determine a plane (all
    collinear, for example).
    """
    for obj in (a, b):
        kind = kind_of(obj)
        if kind not in _PLANAR_KINDS:
            raise UnsupportedOperationError(f'coplanarity is not defined for {kind}')
    points = list(defining_points(a)) + list(defining_points(b))
    return plane.isplanar(points)
