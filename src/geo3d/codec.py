## text and binary encodings of geo3d primitives
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

"""Text and binary encodings for geo3d values.

Text forms::

    point     (x,y,z)            or bare  x,y,z
    segment   [(x,y,z),(x,y,z)]
    line      ((x,y,z),(x,y,z))
    box       (hx,hy,hz),(lx,ly,lz)      high corner first
    path      [(..),(..),...]    open
              ((..),(..),...)    closed
    polygon   ((..),(..),...)
    sphere    <(x,y,z),r>

Numbers are written with ``repr`` so a value survives a round trip
exactly.  The binary forms are little-endian doubles; paths carry a
``<?I`` header (closed flag, point count) and polygons a ``<I`` count.
"""

from __future__ import annotations

import re
import struct
from typing import List, Tuple

from geo3d.errors import ParseError
from geo3d.geom import Point3D
from geo3d.primitives import Box, Line, Path, Polygon, Segment, Sphere, _kind

__all__ = [
    "format_point",
    "format_segment",
    "format_line",
    "format_box",
    "format_path",
    "format_polygon",
    "format_sphere",
    "parse_point",
    "parse_segment",
    "parse_line",
    "parse_box",
    "parse_path",
    "parse_polygon",
    "parse_sphere",
    "to_text",
    "from_text",
    "to_bytes",
    "from_bytes",
]

_NUMBER = re.compile(
    r'[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)',
    re.IGNORECASE)

_POINT = struct.Struct('<3d')
_TWO_POINTS = struct.Struct('<6d')
_SPHERE = struct.Struct('<4d')
_PATH_HEADER = struct.Struct('<?I')
_COUNT = struct.Struct('<I')

_CLOSING = {'(': ')', '[': ']'}


## formatting
## ----------

def _num(v: float) -> str:
    return repr(float(v))


def format_point(p: Point3D) -> str:
    return f"({_num(p.x)},{_num(p.y)},{_num(p.z)})"


def _format_points(points) -> str:
    return ",".join(format_point(p) for p in points)


def format_segment(s: Segment) -> str:
    return f"[{_format_points(s.points)}]"


def format_line(line: Line) -> str:
    return f"({_format_points(line.points)})"


def format_box(box: Box) -> str:
    return f"{format_point(box.high)},{format_point(box.low)}"


def format_path(path: Path) -> str:
    if path.closed:
        return f"({_format_points(path.points)})"
    return f"[{_format_points(path.points)}]"


def format_polygon(poly: Polygon) -> str:
    return f"({_format_points(poly.points)})"


def format_sphere(sphere: Sphere) -> str:
    return f"<{format_point(sphere.center)},{_num(sphere.radius)}>"


## parsing
## -------

class _Cursor:
    """Position in a text being parsed; every read skips whitespace."""

    def __init__(self, text: str, kind: str):
        if not isinstance(text, str):
            raise ParseError(f'{kind} text must be a string')
        self.text = text
        self.kind = kind
        self.pos = 0

    def fail(self, what: str) -> ParseError:
        return ParseError(f'invalid {self.kind} "{self.text}": {what} at offset {self.pos}')

    def skip(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def peek(self, offset: int = 0) -> str:
        self.skip()
        i = self.pos
        while offset:
            i += 1
            while i < len(self.text) and self.text[i].isspace():
                i += 1
            offset -= 1
        return self.text[i] if i < len(self.text) else ''

    def expect(self, ch: str) -> None:
        if self.peek() != ch:
            raise self.fail(f'expected "{ch}"')
        self.pos += 1

    def accept(self, ch: str) -> bool:
        if self.peek() == ch:
            self.pos += 1
            return True
        return False

    def number(self) -> float:
        self.skip()
        m = _NUMBER.match(self.text, self.pos)
        if m is None:
            raise self.fail('expected a number')
        self.pos = m.end()
        return float(m.group(0))

    def triple(self) -> Point3D:
        x = self.number()
        self.expect(',')
        y = self.number()
        self.expect(',')
        z = self.number()
        return Point3D(x, y, z)

    def point(self) -> Point3D:
        self.expect('(')
        p = self.triple()
        self.expect(')')
        return p

    def points(self) -> Tuple[List[Point3D], str]:
        """A delimited list of points and its opening delimiter."""
        opener = self.peek()
        if opener not in _CLOSING:
            raise self.fail('expected "(" or "["')
        self.pos += 1
        pts = [self.point()]
        while self.accept(','):
            pts.append(self.point())
        self.expect(_CLOSING[opener])
        return pts, opener

    def end(self) -> None:
        self.skip()
        if self.pos != len(self.text):
            raise self.fail('unexpected trailing characters')


def parse_point(text: str) -> Point3D:
    cur = _Cursor(text, 'point')
    p = cur.point() if cur.peek() == '(' else cur.triple()
    cur.end()
    return p


def _two_points(cur: _Cursor) -> Tuple[Point3D, Point3D]:
    pts, _ = cur.points()
    if len(pts) != 2:
        raise cur.fail('expected exactly two points')
    return pts[0], pts[1]


def parse_segment(text: str) -> Segment:
    cur = _Cursor(text, 'segment')
    p0, p1 = _two_points(cur)
    cur.end()
    return Segment(p0, p1)


def parse_line(text: str) -> Line:
    cur = _Cursor(text, 'line')
    p0, p1 = _two_points(cur)
    cur.end()
    return Line(p0, p1)


def parse_box(text: str) -> Box:
    cur = _Cursor(text, 'box')
    wrapped = cur.peek() == '(' and cur.peek(1) == '('
    if wrapped:
        cur.expect('(')
    high = cur.point()
    cur.expect(',')
    low = cur.point()
    if wrapped:
        cur.expect(')')
    cur.end()
    return Box(low, high)


def parse_path(text: str) -> Path:
    cur = _Cursor(text, 'path')
    pts, opener = cur.points()
    cur.end()
    return Path(pts, closed=(opener == '('))


def parse_polygon(text: str) -> Polygon:
    cur = _Cursor(text, 'polygon')
    pts, _ = cur.points()
    cur.end()
    return Polygon(pts)


def parse_sphere(text: str) -> Sphere:
    cur = _Cursor(text, 'sphere')
    cur.expect('<')
    center = cur.point()
    cur.expect(',')
    radius = cur.number()
    cur.expect('>')
    cur.end()
    return Sphere(center, radius)


_FORMATTERS = {
    "point": format_point,
    "segment": format_segment,
    "line": format_line,
    "box": format_box,
    "path": format_path,
    "polygon": format_polygon,
    "sphere": format_sphere,
}

_PARSERS = {
    "point": parse_point,
    "segment": parse_segment,
    "line": parse_line,
    "box": parse_box,
    "path": parse_path,
    "polygon": parse_polygon,
    "sphere": parse_sphere,
}


def to_text(value) -> str:
    return _FORMATTERS[_kind(value)](value)


def from_text(kind: str, text: str):
    try:
        parser = _PARSERS[kind]
    except KeyError:
        raise ParseError(f'unknown kind: {kind}') from None
    return parser(text)


## binary
## ------

def _pack_points(points) -> bytes:
    return b''.join(_POINT.pack(*p) for p in points)


def to_bytes(value) -> bytes:
    kind = _kind(value)
    if kind == "point":
        return _POINT.pack(*value)
    if kind in ("segment", "line"):
        return _TWO_POINTS.pack(*value.p0, *value.p1)
    if kind == "box":
        return _TWO_POINTS.pack(*value.low, *value.high)
    if kind == "sphere":
        return _SPHERE.pack(*value.center, value.radius)
    if kind == "path":
        return _PATH_HEADER.pack(value.closed, value.npoints) + _pack_points(value.points)
    return _COUNT.pack(value.npoints) + _pack_points(value.points)


def _unpack_points(data: bytes, offset: int, count: int, kind: str) -> List[Point3D]:
    if len(data) != offset + count * _POINT.size:
        raise ParseError(f'invalid {kind} data: expected {count} points')
    return [Point3D(*_POINT.unpack_from(data, offset + i * _POINT.size))
            for i in range(count)]


def _fixed(fmt: struct.Struct, data: bytes, kind: str) -> tuple:
    if len(data) != fmt.size:
        raise ParseError(f'invalid {kind} data: expected {fmt.size} bytes, got {len(data)}')
    return fmt.unpack(data)


def from_bytes(kind: str, data: bytes):
    data = bytes(data)
    if kind == "point":
        return Point3D(*_fixed(_POINT, data, kind))
    if kind in ("segment", "line", "box"):
        v = _fixed(_TWO_POINTS, data, kind)
        cls = {"segment": Segment, "line": Line, "box": Box}[kind]
        return cls(Point3D(*v[:3]), Point3D(*v[3:]))
    if kind == "sphere":
        v = _fixed(_SPHERE, data, kind)
        return Sphere(Point3D(*v[:3]), v[3])
    if kind == "path":
        if len(data) < _PATH_HEADER.size:
            raise ParseError('invalid path data: truncated header')
        closed, count = _PATH_HEADER.unpack_from(data, 0)
        return Path(_unpack_points(data, _PATH_HEADER.size, count, kind), closed)
    if kind == "polygon":
        if len(data) < _COUNT.size:
            raise ParseError('invalid polygon data: truncated header')
        (count,) = _COUNT.unpack_from(data, 0)
        return Polygon(_unpack_points(data, _COUNT.size, count, kind))
    raise ParseError(f'unknown kind: {kind}')
