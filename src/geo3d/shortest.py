## shortest connecting segment between pairs of geo3d primitives
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

"""shortest-segment engine for **geo3d**

====================
OVERVIEW
====================

``shortest_pair(a, b)`` returns ``(pa, pb)``, a point of ``a`` and a
point of ``b`` whose separation is the minimum distance between the
two primitives.  When several pairs realise the minimum (parallel or
overlapping primitives) one of them is picked by a fixed rule, so the
result is deterministic.

The seven kinds are ranked

  point < segment < line < box < path < polygon < sphere

and one solver exists for each unordered pair, taking its arguments
in rank order.  ``shortest_pair`` looks the pair up in ``_SOLVERS``
and swaps the result back when the caller's order was reversed.

Reductions used throughout:

* a point is a segment of zero length
* a path or polygon boundary is the list of its edge segments (plus
  the closing edge); a single-point path is one zero-length segment
* a sphere is a solid ball: the other primitive's point nearest the
  center is found first and then moved onto the surface, unless it is
  already inside the ball

Segments use the parametric closest-point formulation of
http://geomalgorithms.com/a07-_distance.html, taking the minimum over
the stationary point and the border of the parameter square;
http://paulbourke.net/geometry/pointlineplane/ is used for line pairs
and the Geometric Tools DistLine3AlignedBox3 case split for lines
against boxes.

Tolerances apply to distances and unit vectors only, never to
squared or product quantities.

"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional, Tuple

import mpmath as mpm

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
    midpoint,
    scale,
    sub,
    unit,
)
from geo3d.primitives import Box, Line, Path, Polygon, Segment, Sphere, _kind
from geo3d import plane

logger = logging.getLogger(__name__)

Pair = Tuple[Point3D, Point3D]

__all__ = [
    "RANK",
    "kind_of",
    "shortest_pair",
    "shortest_segment",
    "segment_contains_point",
    "box_contains_point",
    "closest_point_on_box",
]

RANK = {
    "point": 0,
    "segment": 1,
    "line": 2,
    "box": 3,
    "path": 4,
    "polygon": 5,
    "sphere": 6,
}


def kind_of(obj) -> str:
    """The kind name of a primitive, rejecting anything else."""
    return _kind(obj)


## small helpers
## -------------

def _closest(candidates: Iterable[Pair]) -> Pair:
    """The candidate pair of smallest separation; first one wins ties."""
    best = None
    best_d = 0.0
    for pa, pb in candidates:
        d = dist(pa, pb)
        if best is None or d < best_d:
            best = (pa, pb)
            best_d = d
    return best


def _swap(pair: Pair) -> Pair:
    return pair[1], pair[0]


def _degenerate(p: Point3D) -> Segment:
    return Segment(p, p)


def _parts(path) -> List[Segment]:
    """Edges of a path or polygon; a lone point becomes a null edge."""
    if path.npoints == 1:
        return [_degenerate(path.points[0])]
    return path.edges()


def _clamp(v: float, lo: float, hi: float) -> float:
    return lo if v < lo else hi if v > hi else v


def segment_contains_point(seg: Segment, p: Point3D) -> bool:
    """Triangle equality: ``|pa| + |pb| == |ab|`` within epsilon."""
    return fpeq(dist(p, seg.p0) + dist(p, seg.p1), dist(seg.p0, seg.p1))


def box_contains_point(box: Box, p: Point3D) -> bool:
    return all(fple(box.low[a], p[a]) and fple(p[a], box.high[a]) for a in range(3))


def closest_point_on_box(p: Point3D, box: Box) -> Point3D:
    return Point3D(_clamp(p.x, box.low.x, box.high.x),
                   _clamp(p.y, box.low.y, box.high.y),
                   _clamp(p.z, box.low.z, box.high.z))


## segment / line solvers
## ----------------------

def _on_segment(p: Point3D, s0: Point3D, v: Point3D, c: float) -> Point3D:
    """Point of segment ``s0 + t*v``, t in [0,1], nearest ``p``."""
    if c == 0.0:
        return s0
    t = _clamp(dot(sub(p, s0), v) / c, 0.0, 1.0)
    return add(s0, scale(t, v))


def _segment_segment(s1: Segment, s2: Segment) -> Pair:
    """Closest points of two segments.

    The squared distance is convex over the parameter square: the
    minimum is the stationary point of the supporting lines or lies on
    the border, where one parameter is 0 or 1 and the other a clamped
    projection.  Every candidate is a valid pair of points, and
    parallel or zero-length segments have no stationary candidate.
    """
    u = sub(s1.p1, s1.p0)
    v = sub(s2.p1, s2.p0)
    w = sub(s1.p0, s2.p0)
    a = dot(u, u)
    b = dot(u, v)
    c = dot(v, v)
    d = dot(u, w)
    e = dot(v, w)
    D = a * c - b * b

    candidates: List[Pair] = []
    if D > 0.0:
        sc = _clamp((b * e - c * d) / D, 0.0, 1.0)
        tc = _clamp((a * e - b * d) / D, 0.0, 1.0)
        candidates.append((add(s1.p0, scale(sc, u)), add(s2.p0, scale(tc, v))))
    # s1.p0 first, so parallel segments pair up at the start of s1
    for p in (s1.p0, s1.p1):
        candidates.append((p, _on_segment(p, s2.p0, v, c)))
    for q in (s2.p0, s2.p1):
        candidates.append((_on_segment(q, s1.p0, u, a), q))
    return _closest(candidates)


def _segment_line(s: Segment, line: Line) -> Pair:
    """As ``_segment_segment`` with only the segment parameter bounded."""
    u = sub(s.p1, s.p0)
    v = sub(line.p1, line.p0)
    w = sub(s.p0, line.p0)
    a = dot(u, u)
    b = dot(u, v)
    c = dot(v, v)
    d = dot(u, w)
    e = dot(v, w)
    D = a * c - b * b

    # a line has a non-zero direction, so c > 0
    def onto_line(p: Point3D) -> Point3D:
        return add(line.p0, scale(dot(sub(p, line.p0), v) / c, v))

    candidates: List[Pair] = []
    if D > 0.0:
        p = add(s.p0, scale(_clamp((b * e - c * d) / D, 0.0, 1.0), u))
        candidates.append((p, onto_line(p)))
    for p in (s.p0, s.p1):
        candidates.append((p, onto_line(p)))
    return _closest(candidates)


def _line_line(l1: Line, l2: Line) -> Pair:
    """Closest points of two infinite lines.

    The 2x2 system is solved with extra working precision since the
    determinant cancels badly for nearly parallel lines.  Parallel
    lines keep ``l1.p0`` and project it onto ``l2``.
    """
    p13 = sub(l1.p0, l2.p0)
    p43 = sub(l2.p1, l2.p0)
    p21 = sub(l1.p1, l1.p0)

    with mpm.workdps(30):
        d1343 = mpm.fdot(list(p13), list(p43))
        d4321 = mpm.fdot(list(p43), list(p21))
        d1321 = mpm.fdot(list(p13), list(p21))
        d4343 = mpm.fdot(list(p43), list(p43))
        d2121 = mpm.fdot(list(p21), list(p21))
        denom = max(d2121 * d4343 - d4321 * d4321, mpm.mpf(0))

        # denom is |p21|^2 |p43|^2 sin^2 of the angle between the lines
        if fpzero(float(mpm.sqrt(denom / (d2121 * d4343)))):
            logger.debug("parallel lines, projecting %s", l1.p0)
            mua = 0.0
            mub = float(d1343 / d4343)
        else:
            numer = d1343 * d4321 - d1321 * d4343
            mua_mp = numer / denom
            mua = float(mua_mp)
            mub = float((d1343 + d4321 * mua_mp) / d4343)

    return add(l1.p0, scale(mua, p21)), add(l2.p0, scale(mub, p43))


## line / box
## ----------
##
## The box is centered at the origin and the line direction reflected
## into the non-negative octant.  The case split is on which
## direction components are positive; each case moves ``pnt`` (the
## line origin in box coordinates) onto the closest box point.

def _face(i0: int, i1: int, i2: int, pnt: List[float], d: List[float],
          pme: List[float], ext: List[float]) -> None:
    ppe = [pnt[a] + ext[a] for a in range(3)]

    if fpge(d[i0] * ppe[i1], d[i1] * pme[i0]):
        if fpge(d[i0] * ppe[i2], d[i2] * pme[i0]):
            # the line crosses the face x[i0] = e[i0]
            inv = 1.0 / d[i0]
            pnt[i0] = ext[i0]
            pnt[i1] -= d[i1] * pme[i0] * inv
            pnt[i2] -= d[i2] * pme[i0] * inv
        else:
            # v[i1] >= -e[i1], v[i2] < -e[i2]
            lensqr = d[i0] * d[i0] + d[i2] * d[i2]
            tmp = lensqr * ppe[i1] - d[i1] * (d[i0] * pme[i0] + d[i2] * ppe[i2])
            pnt[i0] = ext[i0]
            if fple(tmp, 2.0 * lensqr * ext[i1]):
                pnt[i1] = tmp / lensqr - ext[i1]
            else:
                pnt[i1] = ext[i1]
            pnt[i2] = -ext[i2]
        return

    if fpge(d[i0] * ppe[i2], d[i2] * pme[i0]):
        # v[i1] < -e[i1], v[i2] >= -e[i2]
        lensqr = d[i0] * d[i0] + d[i1] * d[i1]
        tmp = lensqr * ppe[i2] - d[i2] * (d[i0] * pme[i0] + d[i1] * ppe[i1])
        pnt[i0] = ext[i0]
        pnt[i1] = -ext[i1]
        if fple(tmp, 2.0 * lensqr * ext[i2]):
            pnt[i2] = tmp / lensqr - ext[i2]
        else:
            pnt[i2] = ext[i2]
        return

    # v[i1] < -e[i1], v[i2] < -e[i2]
    lensqr = d[i0] * d[i0] + d[i2] * d[i2]
    tmp = lensqr * ppe[i1] - d[i1] * (d[i0] * pme[i0] + d[i2] * ppe[i2])
    if fpge(tmp, 0.0):
        # v[i1]-edge
        pnt[i0] = ext[i0]
        if fple(tmp, 2.0 * lensqr * ext[i1]):
            pnt[i1] = tmp / lensqr - ext[i1]
        else:
            pnt[i1] = ext[i1]
        pnt[i2] = -ext[i2]
        return

    lensqr = d[i0] * d[i0] + d[i1] * d[i1]
    tmp = lensqr * ppe[i2] - d[i2] * (d[i0] * pme[i0] + d[i1] * ppe[i1])
    if fpge(tmp, 0.0):
        # v[i2]-edge
        pnt[i0] = ext[i0]
        pnt[i1] = -ext[i1]
        if fple(tmp, 2.0 * lensqr * ext[i2]):
            pnt[i2] = tmp / lensqr - ext[i2]
        else:
            pnt[i2] = ext[i2]
        return

    # (v[i1],v[i2]) corner
    pnt[i0] = ext[i0]
    pnt[i1] = -ext[i1]
    pnt[i2] = -ext[i2]


def _case_no_zeros(pnt: List[float], d: List[float], ext: List[float]) -> None:
    pme = [pnt[a] - ext[a] for a in range(3)]
    prod_dx_py = d[0] * pme[1]
    prod_dy_px = d[1] * pme[0]

    if fpge(prod_dy_px, prod_dx_py):
        if fpge(d[2] * pme[0], d[0] * pme[2]):
            # line meets x = e0
            _face(0, 1, 2, pnt, d, pme, ext)
        else:
            # line meets z = e2
            _face(2, 0, 1, pnt, d, pme, ext)
    else:
        if fpge(d[2] * pme[1], d[1] * pme[2]):
            # line meets y = e1
            _face(1, 2, 0, pnt, d, pme, ext)
        else:
            _face(2, 0, 1, pnt, d, pme, ext)


## d[i2] == 0
def _case0(i0: int, i1: int, i2: int, pnt: List[float], d: List[float],
           ext: List[float]) -> None:
    pme0 = pnt[i0] - ext[i0]
    pme1 = pnt[i1] - ext[i1]
    prod0 = d[i1] * pme0
    prod1 = d[i0] * pme1

    if fpge(prod0, prod1):
        # line meets x[i0] = e[i0]
        ppe1 = pnt[i1] + ext[i1]
        delta = prod0 - d[i0] * ppe1
        pnt[i0] = ext[i0]
        if fpge(delta, 0.0):
            pnt[i1] = -ext[i1]
        else:
            pnt[i1] -= prod0 / d[i0]
    else:
        # line meets x[i1] = e[i1]
        ppe0 = pnt[i0] + ext[i0]
        delta = prod1 - d[i1] * ppe0
        pnt[i1] = ext[i1]
        if fpge(delta, 0.0):
            pnt[i0] = -ext[i0]
        else:
            pnt[i0] -= prod1 / d[i1]

    pnt[i2] = _clamp(pnt[i2], -ext[i2], ext[i2])


## d[i1] == d[i2] == 0
def _case00(i0: int, i1: int, i2: int, pnt: List[float], d: List[float],
            ext: List[float]) -> None:
    pnt[i0] = ext[i0]
    pnt[i1] = _clamp(pnt[i1], -ext[i1], ext[i1])
    pnt[i2] = _clamp(pnt[i2], -ext[i2], ext[i2])


def _case000(pnt: List[float], ext: List[float]) -> None:
    for a in range(3):
        pnt[a] = _clamp(pnt[a], -ext[a], ext[a])


def _line_box(line: Line, box: Box) -> Pair:
    center = midpoint(box.low, box.high)
    ext = [(box.high[a] - box.low[a]) / 2.0 for a in range(3)]
    direction = unit(line.direction)

    pnt = [line.p0[a] - center[a] for a in range(3)]
    d = [direction[a] for a in range(3)]
    reflect = [False, False, False]
    for a in range(3):
        if fplt(d[a], 0.0):
            pnt[a] = -pnt[a]
            d[a] = -d[a]
            reflect[a] = True

    pos = [fpgt(d[a], 0.0) for a in range(3)]
    if pos[0]:
        if pos[1]:
            if pos[2]:
                _case_no_zeros(pnt, d, ext)
            else:
                _case0(0, 1, 2, pnt, d, ext)
        elif pos[2]:
            _case0(0, 2, 1, pnt, d, ext)
        else:
            _case00(0, 1, 2, pnt, d, ext)
    elif pos[1]:
        if pos[2]:
            _case0(1, 2, 0, pnt, d, ext)
        else:
            _case00(1, 0, 2, pnt, d, ext)
    elif pos[2]:
        _case00(2, 0, 1, pnt, d, ext)
    else:
        _case000(pnt, ext)

    for a in range(3):
        if reflect[a]:
            pnt[a] = -pnt[a]

    pb = Point3D(center.x + pnt[0], center.y + pnt[1], center.z + pnt[2])
    # the line point is the projection of the box point
    t = dot(sub(pb, line.p0), direction)
    pa = add(line.p0, scale(t, direction))
    return pa, pb


def _segment_box(s: Segment, box: Box) -> Pair:
    """Line/box closest points, falling back to the nearer end point
    when the line's closest point is off the segment."""
    if s.isdegenerate():
        return s.p0, closest_point_on_box(s.p0, box)

    pa, pb = _line_box(Line(s.p0, s.p1), box)
    if segment_contains_point(s, pa):
        return pa, pb

    pb0 = closest_point_on_box(s.p0, box)
    pb1 = closest_point_on_box(s.p1, box)
    if fpgt(dist(s.p0, pb0), dist(s.p1, pb1)):
        return s.p1, pb1
    return s.p0, pb0


def _box_box(b1: Box, b2: Box) -> Pair:
    """Per axis: facing sides when the intervals are disjoint, otherwise
    the lower bound of the overlap."""
    pa = []
    pb = []
    for a in range(3):
        low1, high1 = b1.low[a], b1.high[a]
        low2, high2 = b2.low[a], b2.high[a]
        if fpge(low1, high2):
            pa.append(low1)
            pb.append(high2)
        elif fpge(low2, high1):
            pa.append(high1)
            pb.append(low2)
        else:
            m = max(low1, low2)
            pa.append(m)
            pb.append(m)
    return Point3D(*pa), Point3D(*pb)


## polygons
## --------

class _PlaneInfo:
    """Plane, local frame and projected ring of a planar polygon."""

    def __init__(self, poly: Polygon):
        self.planar = bool(plane.isplanar(poly.points))
        if self.planar:
            self.origin, self.normal = plane.plane_normal(poly.points)
            self.frame = plane.local_frame(poly.points)
            self.ring = plane.project_points(poly.points, self.frame)
        else:
            logger.debug("non-planar polygon, using its boundary only")

    def inside(self, q: Point3D) -> bool:
        """``q`` must already lie on the plane."""
        return plane.point_in_or_on_polygon_2d(plane.project(q, self.frame), self.ring)

    def onto(self, p: Point3D) -> Point3D:
        return plane.project_to_plane(p, self.origin, self.normal)


def _segment_polygon(s: Segment, poly: Polygon, info: Optional[_PlaneInfo] = None) -> Pair:
    """Closest points of a segment and a (solid, planar) polygon.

    Candidates are the point where the segment pierces the polygon,
    the projections of the end points that fall inside the polygon
    and the closest points to every boundary edge.
    """
    info = info or _PlaneInfo(poly)
    candidates: List[Pair] = []

    if info.planar:
        if not s.isdegenerate():
            hit = plane.line_plane_intersection(s.p0, s.direction, info.origin, info.normal)
            if hit is not None:
                _, q = hit
                if segment_contains_point(s, q) and info.inside(q):
                    return q, q
        ends = (s.p0,) if s.isdegenerate() else (s.p0, s.p1)
        for e in ends:
            q = info.onto(e)
            if info.inside(q):
                candidates.append((e, q))

    for edge in poly.edges():
        candidates.append(_segment_segment(s, edge))
    return _closest(candidates)


def _line_polygon(line: Line, poly: Polygon, info: Optional[_PlaneInfo] = None) -> Pair:
    """Piercing point if it lies inside the polygon, otherwise the
    closest points to the boundary."""
    info = info or _PlaneInfo(poly)
    if info.planar:
        hit = plane.line_plane_intersection(line.p0, line.direction, info.origin, info.normal)
        if hit is not None:
            _, q = hit
            if info.inside(q):
                return q, q
        else:
            logger.debug("line parallel to polygon plane, using the boundary")
    return _closest(_swap(_segment_line(edge, line)) for edge in poly.edges())


def _polygon_polygon(p1: Polygon, p2: Polygon) -> Pair:
    info1 = _PlaneInfo(p1)
    info2 = _PlaneInfo(p2)
    candidates = [_segment_polygon(e, p2, info2) for e in p1.edges()]
    candidates += [_swap(_segment_polygon(e, p1, info1)) for e in p2.edges()]
    return _closest(candidates)


def _flat_face(box: Box) -> Polygon:
    """The rectangle a box with one collapsed axis reduces to."""
    flat = min(range(3), key=lambda a: box.high[a] - box.low[a])
    i, j = [a for a in range(3) if a != flat]
    ring = []
    for ui, uj in ((0, 0), (1, 0), (1, 1), (0, 1)):
        c = [0.0, 0.0, 0.0]
        c[flat] = box.low[flat]
        c[i] = box.high[i] if ui else box.low[i]
        c[j] = box.high[j] if uj else box.low[j]
        ring.append(Point3D(*c))
    return Polygon(ring)


def _box_polygon(box: Box, poly: Polygon) -> Pair:
    dim = box.dimension()
    if dim == 0:
        return _segment_polygon(_degenerate(box.low), poly)
    if dim == 1:
        return _segment_polygon(Segment(box.low, box.high), poly)

    for v in poly.points:
        if box_contains_point(box, v):
            return v, v

    if dim == 2:
        return _polygon_polygon(_flat_face(box), poly)
    return _closest(_polygon_polygon(face, poly) for face in box.faces())


## spheres
## -------

def _onto_sphere(q: Point3D, sphere: Sphere) -> Point3D:
    """Nearest point of the solid ball to ``q``."""
    c, r = sphere.center, sphere.radius
    d = dist(q, c)
    if fple(d, r):
        return q
    return add(c, scale(r / d, sub(q, c)))


def _to_sphere(obj, sphere: Sphere) -> Pair:
    q = shortest_pair(obj, sphere.center)[0]
    return q, _onto_sphere(q, sphere)


def _sphere_sphere(s1: Sphere, s2: Sphere) -> Pair:
    c1, c2 = s1.center, s2.center
    d = dist(c1, c2)
    if fpzero(d):
        return c1, c1
    u = scale(1.0 / d, sub(c2, c1))
    if fple(d, s1.radius + s2.radius):
        p = add(c1, scale(min(s1.radius, d), u))
        return p, p
    return add(c1, scale(s1.radius, u)), sub(c2, scale(s2.radius, u))


## dispatch
## --------

def _over_parts(path, solve: Callable[[Segment], Pair]) -> Pair:
    return _closest(solve(part) for part in _parts(path))


_SOLVERS: Dict[Tuple[str, str], Callable] = {
    ("point", "point"): lambda p, q: (p, q),
    ("point", "segment"): lambda p, s: _segment_segment(_degenerate(p), s),
    ("point", "line"): lambda p, l: _segment_line(_degenerate(p), l),
    ("point", "box"): lambda p, b: (p, closest_point_on_box(p, b)),
    ("point", "path"): lambda p, path: _over_parts(path, lambda e: _segment_segment(_degenerate(p), e)),
    ("point", "polygon"): lambda p, poly: _segment_polygon(_degenerate(p), poly),
    ("point", "sphere"): lambda p, sp: (p, _onto_sphere(p, sp)),

    ("segment", "segment"): _segment_segment,
    ("segment", "line"): _segment_line,
    ("segment", "box"): _segment_box,
    ("segment", "path"): lambda s, path: _over_parts(path, lambda e: _segment_segment(s, e)),
    ("segment", "polygon"): _segment_polygon,
    ("segment", "sphere"): _to_sphere,

    ("line", "line"): _line_line,
    ("line", "box"): _line_box,
    ("line", "path"): lambda l, path: _over_parts(path, lambda e: _swap(_segment_line(e, l))),
    ("line", "polygon"): _line_polygon,
    ("line", "sphere"): _to_sphere,

    ("box", "box"): _box_box,
    ("box", "path"): lambda b, path: _over_parts(path, lambda e: _swap(_segment_box(e, b))),
    ("box", "polygon"): _box_polygon,
    ("box", "sphere"): lambda b, sp: _with_center(closest_point_on_box(sp.center, b), sp),

    ("path", "path"): lambda p1, p2: _closest(_segment_segment(e1, e2)
                                              for e1 in _parts(p1) for e2 in _parts(p2)),
    ("path", "polygon"): lambda path, poly: _path_polygon(path, poly),
    ("path", "sphere"): _to_sphere,

    ("polygon", "polygon"): _polygon_polygon,
    ("polygon", "sphere"): _to_sphere,

    ("sphere", "sphere"): _sphere_sphere,
}


def _with_center(q: Point3D, sphere: Sphere) -> Pair:
    return q, _onto_sphere(q, sphere)


def _path_polygon(path: Path, poly: Polygon) -> Pair:
    info = _PlaneInfo(poly)
    return _over_parts(path, lambda e: _segment_polygon(e, poly, info))


def shortest_pair(a, b) -> Pair:
    """``(pa, pb)`` with ``pa`` on ``a``, ``pb`` on ``b`` and
    ``|pa - pb|`` the distance between them."""
    ka = kind_of(a)
    kb = kind_of(b)
    if RANK[ka] > RANK[kb]:
        logger.debug("shortest pair %s/%s solved as %s/%s", ka, kb, kb, ka)
        return _swap(_SOLVERS[(kb, ka)](b, a))
    return _SOLVERS[(ka, kb)](a, b)


def shortest_segment(a, b) -> Segment:
    """The shortest segment joining ``a`` to ``b``, from ``a`` to ``b``."""
    pa, pb = shortest_pair(a, b)
    return Segment(pa, pb)
