import math

import pytest
from geo3d.geom import *
from geo3d.errors import DivisionByZeroError
## unit tests for geo3d geom.py


class TestTolerance:
    """tolerant scalar comparisons"""

    def test_zero(self):
        assert fpzero(0.0)
        assert fpzero(1e-7)
        assert fpzero(-1e-6)
        assert not fpzero(2e-6)

    def test_eq_ne(self):
        assert fpeq(1.0, 1.0 + 5e-7)
        assert not fpeq(1.0, 1.0 + 5e-6)
        assert fpne(1.0, 1.1)
        assert not fpne(2.0, 2.0)

    def test_ordering(self):
        assert fplt(1.0, 2.0)
        assert not fplt(1.0, 1.0 + 5e-7)
        assert fple(1.0 + 5e-7, 1.0)
        assert fpgt(2.0, 1.0)
        assert not fpgt(1.0 + 5e-7, 1.0)
        assert fpge(1.0, 1.0 + 5e-7)

    def test_complements(self):
        for a, b in [(0.0, 0.0), (1.0, 1.0 + 5e-7), (1.0, 2.0), (3.0, -1.0)]:
            assert fplt(a, b) != fpge(a, b)
            assert fpgt(a, b) != fple(a, b)

    def test_set_epsilon(self):
        try:
            set_epsilon(1e-3)
            assert get_epsilon() == 1e-3
            assert fpeq(1.0, 1.0005)
        finally:
            set_epsilon(1e-6)
        assert not fpeq(1.0, 1.0005)

    def test_bad_epsilon(self):
        with pytest.raises(ValueError):
            set_epsilon(0.0)
        with pytest.raises(ValueError):
            set_epsilon(-1.0)
        with pytest.raises(ValueError):
            set_epsilon(math.inf)


class TestHypot:
    def test_simple(self):
        assert hypot3(1.0, 2.0, 2.0) == pytest.approx(3.0)
        assert hypot3(0.0, 0.0, 0.0) == 0.0
        assert hypot3(-3.0, 0.0, 4.0) == pytest.approx(5.0)

    def test_no_overflow(self):
        big = 1e300
        assert hypot3(big, big, 0.0) == pytest.approx(big * math.sqrt(2.0))

    def test_no_underflow(self):
        small = 1e-300
        assert hypot3(small, small, small) == pytest.approx(small * math.sqrt(3.0))

    def test_special_values(self):
        assert hypot3(math.inf, 1.0, 2.0) == math.inf
        assert hypot3(math.nan, -math.inf, 0.0) == math.inf
        assert math.isnan(hypot3(math.nan, 1.0, 2.0))


class TestPoint:
    def test_create(self):
        a = point(1, 2, 3)
        b = point([1.0, 2.0, 3.0])
        c = point(a)
        assert a == Point3D(1.0, 2.0, 3.0)
        assert a == b == c
        assert list(a) == [1.0, 2.0, 3.0]
        assert a[2] == 3.0
        assert len(a) == 3

    def test_create_bad(self):
        with pytest.raises(ValueError):
            point([1, 2])

    def test_immutable(self):
        a = point(1, 2, 3)
        with pytest.raises(Exception):
            a.x = 5.0

    def test_arithmetic(self):
        a = point(1, 2, 3)
        b = point(1, 1, 1)
        assert a + b == point(2, 3, 4)
        assert a - b == point(0, 1, 2)
        assert -a == point(-1, -2, -3)
        assert a * 2 == point(2, 4, 6)
        assert 2 * a == point(2, 4, 6)
        assert vclose(a / 2, point(0.5, 1, 1.5))
        with pytest.raises(DivisionByZeroError):
            a / 0.0
        with pytest.raises(ZeroDivisionError):
            a / 1e-9

    def test_same_cmp(self):
        a = point(1, 2, 3)
        assert a.same(point(1 + 1e-7, 2, 3))
        assert a.cmp(point(1, 2, 3)) == 0
        assert a.cmp(point(2, 0, 0)) == -1
        assert a.cmp(point(1, 2, 2)) == 1

    def test_axis_relations(self):
        a = point(1, 2, 3)
        assert a.vertical(point(1, 5, 5))
        assert a.horizontal(point(0, 2, 0))
        assert a.perpendicular(point(9, 9, 3))
        assert not a.vertical(point(2, 2, 3))

    def test_bounding_volumes(self):
        a = point(1, 2, 3)
        assert a.bbox().low == a and a.bbox().high == a
        assert a.bsphere().center == a
        assert a.bsphere().radius == 0.0


class TestVector:
    def test_ops(self):
        a = point(5, 0, 0)
        b = point(0, 5, 0)
        assert vclose(add(a, b), point(5, 5, 0))
        assert vclose(sub(a, b), point(5, -5, 0))
        assert fpzero(dot(a, b))
        assert vclose(cross(a, b), point(0, 0, 25))
        assert vclose(cross(b, a), point(0, 0, -25))
        assert fpeq(mag(sub(a, b)), math.sqrt(50))
        assert fpeq(dist(a, b), math.sqrt(50))
        assert vclose(vabs(point(-1, 2, -3)), point(1, 2, 3))
        assert vclose(scale(3, point(1, -1, 2)), point(3, -3, 6))
        assert vclose(midpoint(a, b), point(2.5, 2.5, 0))

    def test_unit(self):
        assert vclose(unit(point(0, 0, 4)), point(0, 0, 1))
        assert vclose(unit(point(0, 0, 0)), point(0, 0, 0))
        assert fpeq(mag(unit(point(1, 2, 3))), 1.0)

    def test_proportional(self):
        assert proportional(point(2, 4, 6), point(1, 2, 3))
        assert proportional(point(-1, 0, 0), point(3, 0, 0))
        assert proportional(point(0, 0, 0), point(1, 2, 3))
        assert not proportional(point(1, 2, 4), point(1, 2, 3))
        assert not proportional(point(1, 2, 3), point(0, 0, 0))

    def test_collinear(self):
        assert collinear(point(0, 0, 0), point(1, 1, 1), point(2, 2, 2))
        assert collinear(point(0, 0, 0), point(1, 0, 0), point(0, 1, 0)) is False
        assert collinear(point(0, 0, 0), point(0, 0, 0), point(1, 0, 0)) is None
        assert point(0, 0, 0).collinear(point(0, 1, 0), point(0, 3, 0))
