import math

import pytest

from geo3d.errors import ConstructionError, DivisionByZeroError, UnsupportedOperationError
from geo3d.geom import point, vclose, fpeq, fple, dist
from geo3d.primitives import *

## unit tests for geo3d primitives.py


class TestSegment:
    def test_create(self):
        s = Segment((0, 0, 0), [1, 2, 2])
        assert s.p1 == point(1, 2, 2)
        assert fpeq(s.length, 3.0)
        assert vclose(s.center, point(0.5, 1.0, 1.0))
        assert not s.isdegenerate()
        assert Segment(point(1, 1, 1), point(1, 1, 1)).isdegenerate()

    def test_bad_point(self):
        with pytest.raises(ConstructionError):
            Segment((0, 0), (1, 1, 1))

    def test_bounding(self):
        s = Segment(point(2, 0, -1), point(0, 4, 1))
        b = s.bbox()
        assert vclose(b.low, point(0, 0, -1))
        assert vclose(b.high, point(2, 4, 1))
        sp = s.bsphere()
        assert vclose(sp.center, point(1, 2, 0))
        assert fpeq(sp.radius, s.length / 2)

    def test_same(self):
        s = Segment(point(0, 0, 0), point(1, 0, 0))
        assert s.same(Segment(point(1, 0, 0), point(0, 0, 0)))
        assert not s.same(Segment(point(0, 0, 0), point(2, 0, 0)))

    def test_arithmetic(self):
        s = Segment(point(0, 0, 0), point(1, 0, 0))
        assert (s + point(0, 1, 0)).same(Segment(point(0, 1, 0), point(1, 1, 0)))
        assert (s * 2).same(Segment(point(0, 0, 0), point(2, 0, 0)))
        with pytest.raises(DivisionByZeroError):
            s / 0

    def test_line(self):
        s = Segment(point(0, 0, 0), point(1, 0, 0))
        assert isinstance(s.line(), Line)
        with pytest.raises(ConstructionError):
            Segment(point(0, 0, 0), point(0, 0, 0)).line()


class TestLine:
    def test_create(self):
        l = Line(point(0, 0, 0), point(1, 0, 0))
        assert vclose(l.point_at(3.0), point(3, 0, 0))
        assert l.perpendicular() and l.horizontal() and not l.vertical()

    def test_degenerate(self):
        with pytest.raises(ConstructionError):
            Line(point(1, 1, 1), point(1, 1, 1 + 1e-8))

    def test_unbounded(self):
        l = Line(point(0, 0, 0), point(1, 0, 0))
        with pytest.raises(UnsupportedOperationError):
            bounding_box(l)
        with pytest.raises(UnsupportedOperationError):
            bounding_sphere(l)


class TestBox:
    def test_canonical(self):
        b = Box(point(2, 0, 5), point(0, 3, 1))
        assert b.low == point(0, 0, 1)
        assert b.high == point(2, 3, 5)
        assert b.points == (b.high, b.low)
        assert fpeq(b.volume, 24.0)
        assert fpeq(b.width, 2.0) and fpeq(b.height, 3.0) and fpeq(b.depth, 4.0)

    def test_dimension(self):
        assert Box(point(0, 0, 0), point(0, 0, 0)).dimension() == 0
        assert Box(point(0, 0, 0), point(1, 0, 0)).dimension() == 1
        assert Box(point(0, 0, 0), point(1, 1, 0)).dimension() == 2
        assert Box(point(0, 0, 0), point(1, 1, 1)).dimension() == 3

    def test_faces(self):
        b = Box(point(0, 0, 0), point(1, 2, 3))
        faces = b.faces()
        assert len(faces) == 6
        assert sum(f.area() for f in faces) == pytest.approx(2 * (2 + 3 + 6))
        assert len(b.corners()) == 8

    def test_bounding(self):
        b = Box(point(0, 0, 0), point(2, 2, 2))
        assert b.bbox() is b
        sp = b.bsphere()
        assert vclose(sp.center, point(1, 1, 1))
        assert fpeq(sp.radius, math.sqrt(3))

    def test_union_intersection(self):
        b1 = Box(point(0, 0, 0), point(2, 2, 2))
        b2 = Box(point(1, 1, 1), point(3, 3, 3))
        u = b1.union(b2)
        assert u.same(Box(point(0, 0, 0), point(3, 3, 3)))
        i = box_intersection(b1, b2)
        assert i.same(Box(point(1, 1, 1), point(2, 2, 2)))
        assert box_intersection(b1, Box(point(5, 5, 5), point(6, 6, 6))) is None

    def test_arithmetic_recanonicalises(self):
        b = Box(point(0, 0, 0), point(1, 2, 3)) * -1
        assert b.low == point(-1, -2, -3)
        assert b.high == point(0, 0, 0)


class TestPath:
    def test_open(self):
        p = Path([point(0, 0, 0), point(1, 0, 0), point(1, 1, 0)])
        assert p.isopen and p.npoints == 3
        assert len(p.edges()) == 2
        assert fpeq(p.length, 2.0)
        assert p.area() is None

    def test_closed(self):
        p = Path([point(0, 0, 0), point(1, 0, 0), point(1, 1, 0), point(0, 1, 0)], closed=True)
        assert len(p.edges()) == 4
        assert fpeq(p.length, 4.0)
        assert fpeq(p.area(), 1.0)
        assert p.isplanar()

    def test_bbox_cached(self):
        p = Path([point(0, 0, 0), point(3, -1, 2)])
        assert vclose(p.bbox().low, point(0, -1, 0))
        assert vclose(p.bbox().high, point(3, 0, 2))
        moved = p + point(1, 1, 1)
        assert vclose(moved.bbox().low, point(1, 0, 1))

    def test_bsphere_encloses(self):
        p = Path([point(0, 0, 0), point(1, 0, 0), point(10, 0, 0)])
        sp = p.bsphere()
        assert all(fple(dist(q, sp.center), sp.radius) for q in p.points)

    def test_construction_errors(self):
        with pytest.raises(ConstructionError):
            Path([])
        with pytest.raises(ConstructionError):
            Path([point(0, 0, 0), point(1, 0, 0)], closed=True)
        with pytest.raises(ConstructionError):
            Path([point(0, 0, 0), point(1, 0, 0), point(2, 0, 0)], closed=True)
        with pytest.raises(ConstructionError):
            Path([point(0, 0, 0), point(1, 0, 0)]).to_polygon()

    def test_close_open_concat(self):
        p = Path([point(0, 0, 0), point(1, 0, 0), point(1, 1, 0)])
        assert p.close().closed
        assert not p.close().open().closed
        assert isinstance(p.close().to_polygon(), Polygon)
        q = Path([point(2, 2, 0)])
        assert p.concat(q).npoints == 4
        assert p.close().concat(q) is None

    def test_same(self):
        pts = [point(0, 0, 0), point(1, 0, 0), point(1, 1, 0)]
        p = Path(pts, closed=True)
        assert p.same(Path(pts[1:] + pts[:1], closed=True))
        assert p.same(Path(list(reversed(pts)), closed=True))


class TestPolygon:
    square = [point(0, 0, 0), point(2, 0, 0), point(2, 2, 0), point(0, 2, 0)]

    def test_create(self):
        poly = Polygon(self.square)
        assert poly.closed
        assert poly.npoints == 4
        assert fpeq(poly.area(), 4.0)
        assert fpeq(poly.length, 8.0)
        assert vclose(poly.center, point(1, 1, 0))
        assert len(poly.edges()) == 4
        assert poly.to_path().closed

    def test_degenerate(self):
        with pytest.raises(ConstructionError):
            Polygon([point(0, 0, 0), point(1, 1, 1), point(0, 0, 0)])
        with pytest.raises(ConstructionError):
            Polygon([point(0, 0, 0), point(1, 1, 1), point(2, 2, 2)])

    def test_nonplanar(self):
        poly = Polygon(self.square[:3] + [point(0, 2, 1)])
        assert poly.isplanar() is False
        assert poly.area() is None
        assert poly.plane_equation() is None

    def test_plane_equation(self):
        a, b, c, d = Polygon(self.square).plane_equation()
        assert fpeq(a, 0.0) and fpeq(b, 0.0) and not fpeq(c, 0.0)


class TestSphere:
    def test_create(self):
        s = Sphere(point(1, 2, 3), 2.0)
        assert fpeq(s.diameter, 4.0)
        assert fpeq(s.volume, 4.0 / 3.0 * math.pi * 8.0)
        assert s.bsphere() is s
        b = s.bbox()
        assert vclose(b.low, point(-1, 0, 1))
        assert vclose(b.high, point(3, 4, 5))

    def test_negative_radius(self):
        with pytest.raises(ConstructionError):
            Sphere(point(0, 0, 0), -1.0)

    def test_scale(self):
        s = Sphere(point(1, 0, 0), 2.0) * -2
        assert vclose(s.center, point(-2, 0, 0))
        assert fpeq(s.radius, 4.0)
        assert fpeq((s / 4).radius, 1.0)

    def test_cmp(self):
        a = Sphere(point(0, 0, 0), 1.0)
        assert a.cmp(Sphere(point(0, 0, 0), 2.0)) == -1
        assert a.cmp(Sphere(point(0, 0, 0), 1.0)) == 0
        assert a.same(Sphere(point(0, 0, 0), 1.0 + 1e-8))


def test_defining_points():
    b = Box(point(0, 0, 0), point(1, 1, 1))
    assert len(defining_points(b)) == 8
    assert defining_points(point(1, 2, 3)) == (point(1, 2, 3),)
    assert defining_points(Sphere(point(1, 1, 1), 3.0)) == (point(1, 1, 1),)
    with pytest.raises(UnsupportedOperationError):
        defining_points([1, 2, 3])
