import random

import pytest

from geo3d import geom
from geo3d.errors import UnsupportedOperationError
from geo3d.geom import point, vclose, fpeq, fpzero
from geo3d.primitives import Segment, Line, Box, Path, Polygon, Sphere
from geo3d.predicates import *

## unit tests for the geo3d predicate layer


square = Polygon([point(0, 0, 0), point(2, 0, 0), point(2, 2, 0), point(0, 2, 0)])
ushape = Polygon([point(0, 0, 0), point(3, 0, 0), point(3, 3, 0), point(2, 3, 0),
                  point(2, 1, 0), point(1, 1, 0), point(1, 3, 0), point(0, 3, 0)])
xline = Line(point(0, 0, 0), point(1, 0, 0))


def rpoint(rng, r=10.0):
    return point(rng.uniform(-r, r), rng.uniform(-r, r), rng.uniform(-r, r))


def rbox(rng):
    c = rpoint(rng, 8.0)
    h = point(rng.uniform(0.2, 4), rng.uniform(0.2, 4), rng.uniform(0.2, 4))
    return Box(c - h, c + h)


def rsphere(rng):
    return Sphere(rpoint(rng, 8.0), rng.uniform(0.2, 5.0))


def rsegment(rng):
    return Segment(rpoint(rng), rpoint(rng))


def rline(rng):
    p0 = rpoint(rng)
    return Line(p0, p0 + rpoint(rng, 1.0) + point(0.01, 0.01, 0.01))


class TestScenarios:
    def test_parallel_segments(self):
        s1 = Segment(point(0, 0, 0), point(1, 0, 0))
        s2 = Segment(point(0, 1, 0), point(1, 1, 0))
        assert fpeq(distance(s1, s2), 1.0)
        seg = shortest_segment(s1, s2)
        assert fpeq(seg.p0.x, seg.p1.x)

    def test_sphere_point(self):
        s = Sphere(point(0, 0, 0), 5.0)
        p = point(10, 0, 0)
        assert fpeq(distance(s, p), 5.0)
        assert vclose(closest_point(p, s), point(5, 0, 0))

    def test_overlapping_boxes(self):
        b1 = Box(point(0, 0, 0), point(2, 2, 2))
        b2 = Box(point(1, 1, 1), point(3, 3, 3))
        assert intersects(b1, b2)
        assert fpzero(distance(b1, b2))
        assert box_intersection(b1, b2).same(Box(point(1, 1, 1), point(2, 2, 2)))

    def test_polygon_contains_point(self):
        assert contains(square, point(1, 1, 0)) is True
        assert contains(square, point(1, 1, 1)) is False

    def test_parallel_lines(self):
        l2 = Line(point(0, 1, 0), point(1, 1, 0))
        assert parallel(xline, l2)
        assert not coincide(xline, l2)
        assert not intersects(xline, l2)


class TestFastPathAgreement:
    """the dedicated intersection tests agree with the shortest segment"""

    @pytest.mark.parametrize("k", [1e-2, 1.0, 1e2])
    @pytest.mark.parametrize("make_pair", [
        lambda rng: (rsegment(rng), rbox(rng)),
        lambda rng: (rline(rng), rbox(rng)),
        lambda rng: (rbox(rng), rbox(rng)),
        lambda rng: (rbox(rng), rsphere(rng)),
        lambda rng: (rsphere(rng), rsphere(rng)),
    ], ids=["segment-box", "line-box", "box-box", "box-sphere", "sphere-sphere"])
    def test_agreement(self, make_pair, k):
        rng = random.Random(1234)
        eps = geom.get_epsilon()
        hits = 0
        for _ in range(1000):
            a, b = make_pair(rng)
            a, b = a * k, b * k
            d = distance(a, b)
            # pairs grazing within a few epsilon may go either way
            if 1e-2 * eps < d < 10 * eps:
                continue
            fast = intersects(a, b)
            assert fast == intersects_generic(a, b)
            assert fast == intersects(b, a)
            assert fast == fpzero(d)
            hits += fast
        # both outcomes must be exercised
        assert 0 < hits < 1000

    def test_line_box_parallel_axis(self):
        box = Box(point(0, 0, 0), point(1, 1, 1))
        assert intersects(Line(point(-5, 0.5, 0.5), point(5, 0.5, 0.5)), box)
        assert not intersects(Line(point(-5, 1.5, 0.5), point(5, 1.5, 0.5)), box)
        assert intersects(Line(point(0.5, 0.5, 9), point(0.5, 0.5, 8)), box)

    def test_segment_box_short(self):
        box = Box(point(0, 0, 0), point(1, 1, 1))
        assert not intersects(Segment(point(2, 2, 2), point(3, 3, 3)), box)
        assert intersects(Segment(point(0.5, 0.5, 0.5), point(0.5, 0.5, 0.5)), box)
        assert intersects(Segment(point(-1, 0.5, 0.5), point(2, 0.5, 0.5)), box)

    @pytest.mark.parametrize("k", [1e-3, 1.0, 1e2])
    def test_segment_box_diagonal(self, k):
        # passes the z edge at x = y = 1 by 0.1 * sqrt(2); only the
        # axis d x z separates them
        box = Box(point(0, 0, 0), point(1, 1, 1)) * k
        s = Segment(point(2.2, 0.0, 0.5), point(0.0, 2.2, 0.5)) * k
        assert not intersects(s, box)
        assert not intersects_generic(s, box)
        assert distance(s, box) == pytest.approx(0.1 * 2 ** 0.5 * k, rel=1e-6)
        # touching that edge
        s2 = s + point(-0.1, -0.1, 0) * k
        assert intersects(s2, box)
        assert intersects_generic(s2, box)


class TestIntersection:
    def test_point(self):
        s1 = Segment(point(-1, 0, 0), point(1, 0, 0))
        s2 = Segment(point(0, -1, 0), point(0, 1, 0))
        assert vclose(intersection_point(s1, s2), point(0, 0, 0))
        s3 = s2 + point(0, 0, 1)
        assert intersection_point(s1, s3) is None

    def test_polygon(self):
        l = Line(point(1, 1, -1), point(1, 1, 1))
        assert vclose(intersection_point(l, square), point(1, 1, 0))

    def test_overlaps(self):
        b1 = Box(point(0, 0, 0), point(2, 2, 2))
        assert overlaps(b1, Sphere(point(3, 1, 1), 1.5))
        assert not overlaps(b1, Sphere(point(5, 1, 1), 1.5))
        assert overlaps(square, Segment(point(1, 1, -1), point(1, 1, 1)))
        with pytest.raises(UnsupportedOperationError):
            overlaps(point(0, 0, 0), b1)
        with pytest.raises(UnsupportedOperationError):
            overlaps(b1, Path([point(0, 0, 0), point(1, 1, 1)]))


class TestContainment:
    box = Box(point(0, 0, 0), point(2, 2, 2))

    def test_box(self):
        assert contains(self.box, point(1, 1, 1))
        assert contains(self.box, point(2, 2, 2))
        assert not contains(self.box, point(3, 1, 1))
        assert contains(self.box, Segment(point(0, 0, 0), point(2, 1, 1)))
        assert contains(self.box, Box(point(0.5, 0.5, 0.5), point(1, 1, 1)))
        assert contains(self.box, square)
        assert contains(self.box, Path([point(0, 0, 0), point(1, 2, 2)]))
        assert contains(self.box, Sphere(point(1, 1, 1), 0.5))
        assert not contains(self.box, Sphere(point(1, 1, 1), 1.5))

    def test_box_antisymmetry(self):
        rng = random.Random(99)
        for _ in range(200):
            b1 = rbox(rng)
            b2 = rbox(rng)
            assert not (contains(b1, b2) and contains(b2, b1))
            assert contains(b1, b1)
            copy = Box(b1.high, b1.low)
            assert contains(b1, copy) and contains(copy, b1)

    def test_sphere(self):
        s = Sphere(point(0, 0, 0), 5.0)
        assert contains(s, point(3, 4, 0))
        assert not contains(s, point(3, 4, 1))
        assert contains(s, Segment(point(-4, 0, 0), point(4, 0, 0)))
        assert contains(s, Box(point(-2, -2, -2), point(2, 2, 2)))
        # every face is inside the bounding sphere but the corners are not
        assert not contains(s, Box(point(-3, -3, -3), point(3, 3, 3)))
        assert contains(s, Sphere(point(1, 0, 0), 4.0))
        assert not contains(s, Sphere(point(1, 0, 0), 4.5))
        assert contains(s, square)

    def test_segment(self):
        s = Segment(point(0, 0, 0), point(4, 0, 0))
        assert contains(s, point(2, 0, 0))
        assert not contains(s, point(2, 0.1, 0))
        assert not contains(s, point(5, 0, 0))
        assert contains(s, Segment(point(1, 0, 0), point(3, 0, 0)))
        assert not contains(s, Segment(point(1, 0, 0), point(5, 0, 0)))

    def test_line(self):
        assert contains(xline, point(5, 0, 0))
        assert not contains(xline, point(5, 1, 0))
        diag = Line(point(0, 0, 0), point(1, 1, 1))
        assert contains(diag, point(-3, -3, -3))
        assert not contains(diag, point(1, 1, 2))
        assert contains(diag, Segment(point(2, 2, 2), point(3, 3, 3)))
        assert contains(diag, Line(point(5, 5, 5), point(7, 7, 7)))
        assert not contains(diag, xline)

    def test_polygon(self):
        assert contains(square, Segment(point(0.5, 0.5, 0), point(1.5, 1.5, 0)))
        assert not contains(square, Segment(point(0.5, 0.5, 0), point(3, 1.5, 0)))
        assert not contains(square, Segment(point(0.5, 0.5, 0), point(1.5, 1.5, 0.5)))
        small = Polygon([point(0.5, 0.5, 0), point(1.5, 0.5, 0), point(1, 1.5, 0)])
        assert contains(square, small)
        assert not contains(small, square)
        assert contains(square, Path([point(0.5, 0.5, 0), point(1.5, 0.5, 0), point(1.5, 1.5, 0)]))
        assert contains(square, square)

    def test_concave_polygon(self):
        assert contains(ushape, Segment(point(0.5, 0.5, 0), point(2.5, 0.5, 0)))
        assert not contains(ushape, Segment(point(0.5, 2, 0), point(2.5, 2, 0)))
        assert not contains(ushape, point(1.5, 2, 0))

    def test_nonplanar_polygon(self):
        bent = Polygon([point(0, 0, 0), point(2, 0, 0), point(2, 2, 1), point(0, 2, 0)])
        assert contains(bent, point(1, 1, 0)) is None

    def test_path(self):
        path = Path([point(0, 0, 0), point(2, 0, 0), point(2, 2, 0)])
        assert contains(path, point(2, 1, 0))
        assert not contains(path, point(1, 1, 0))
        assert contains(path, Segment(point(0.5, 0, 0), point(1.5, 0, 0)))
        assert contains(path, Path([point(0.5, 0, 0), point(1, 0, 0)]))
        assert not contains(path, Path([point(1, 0, 0), point(2, 1, 0)]))

    def test_point(self):
        assert contains(point(1, 1, 1), point(1, 1, 1 + 1e-8))
        assert not contains(point(1, 1, 1), point(1, 1, 2))

    def test_contained(self):
        assert contained(point(1, 1, 1), self.box)
        assert contained(square, self.box)
        assert not contained(Box(point(-1, -1, -1), point(3, 3, 3)), self.box)

    def test_unsupported(self):
        with pytest.raises(UnsupportedOperationError):
            contains(point(0, 0, 0), self.box)
        with pytest.raises(UnsupportedOperationError):
            contains(self.box, xline)


class TestRelations:
    def test_same(self):
        assert same(point(1, 2, 3), point(1, 2, 3))
        assert same(self_seg(), Segment(point(1, 0, 0), point(0, 0, 0)))
        assert not same(self_seg(), Line(point(0, 0, 0), point(1, 0, 0)))

    def test_skew(self):
        l2 = Line(point(0, 0, 1), point(0, 1, 1))
        assert skew(xline, l2)
        l3 = Line(point(0, -1, 0), point(0, 1, 0))
        assert not skew(xline, l3)

    def test_orthogonal(self):
        assert orthogonal(xline, Line(point(3, 3, 3), point(3, 4, 3)))
        assert not orthogonal(xline, Line(point(0, 0, 0), point(1, 1, 0)))

    def test_coincide(self):
        assert coincide(xline, Line(point(5, 0, 0), point(-2, 0, 0)))
        s1 = Segment(point(0, 0, 0), point(1, 0, 0))
        assert coincide(s1, Segment(point(0.5, 0, 0), point(2, 0, 0)))
        assert not coincide(s1, Segment(point(2, 0, 0), point(3, 0, 0)))
        assert coincide(xline, s1)

    def test_parallel_segments(self):
        s1 = Segment(point(0, 0, 0), point(1, 0, 0))
        assert parallel(s1, Segment(point(0, 1, 0), point(3, 1, 0)))
        assert not parallel(s1, Segment(point(0, 1, 0), point(3, 2, 0)))
        assert not parallel(s1, Segment(point(0, 1, 0), point(0, 1, 0)))

    def test_coplanar(self):
        s1 = Segment(point(0, 0, 0), point(1, 0, 0))
        s2 = Segment(point(0, 1, 0), point(1, 2, 0))
        assert coplanar(s1, s2) is True
        assert coplanar(s1, Segment(point(0, 1, 1), point(1, 2, 0))) is False
        assert coplanar(s1, Segment(point(2, 0, 0), point(3, 0, 0))) is None
        assert coplanar(square, point(5, 5, 0)) is True
        with pytest.raises(UnsupportedOperationError):
            coplanar(square, Sphere(point(0, 0, 0), 1.0))

    @pytest.mark.parametrize("k", [1e-3, 1.0, 1e3])
    def test_relations_scaled(self, k):
        s1 = Segment(point(0, 0, 0), point(1, 0, 0)) * k
        assert parallel(s1, Segment(point(0, 1, 0), point(3, 1, 0)) * k)
        assert not parallel(s1, Segment(point(0, 1, 0), point(3, 1.5, 0)) * k)
        assert coincide(s1, Segment(point(0.5, 0, 0), point(2, 0, 0)) * k)
        assert not coincide(s1, Segment(point(1.5, 0, 0), point(2, 0, 0)) * k)
        assert contains(xline * k, point(7, 0, 0) * k)
        assert not contains(xline * k, point(7, 0.5, 0) * k)

    def test_coplanar_box(self):
        flat = Box(point(0, 0, 0), point(1, 1, 0))
        assert coplanar(square, flat) is True
        assert coplanar(flat, Segment(point(5, 5, 0), point(6, 7, 0))) is True
        assert coplanar(square, Box(point(0, 0, 0), point(1, 1, 1))) is False
        assert coplanar(Box(point(0, 0, 0), point(1, 1, 1)), point(0, 0, 0)) is False

    def test_wrong_kinds(self):
        with pytest.raises(UnsupportedOperationError):
            parallel(xline, square)


def self_seg():
    return Segment(point(0, 0, 0), point(1, 0, 0))
