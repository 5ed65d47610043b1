## exception hierarchy for geo3d
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

"""Exceptions raised by geo3d.

Only construction problems and malformed input are signalled with
exceptions.  Geometric queries that are not meaningful for their input
(the plane of a non-planar polygon, for example) return ``None``
instead, so callers can tell "false" and "undefined" apart.
"""

__all__ = [
    "Geo3DError",
    "ConstructionError",
    "DivisionByZeroError",
    "ParseError",
    "UnsupportedOperationError",
]


class Geo3DError(Exception):
    """Base exception for geo3d errors."""
    pass


class ConstructionError(Geo3DError, ValueError):
    """A primitive could not be built from the supplied values."""
    pass


class DivisionByZeroError(ConstructionError, ZeroDivisionError):
    """Division of a primitive by a scalar that is zero within epsilon."""

    def __init__(self, message: str = "division by zero"):
        super().__init__(message)


class ParseError(Geo3DError, ValueError):
    """Malformed text or binary representation."""
    pass


class UnsupportedOperationError(Geo3DError, TypeError):
    """A predicate was asked about a pair of kinds it does not define."""
    pass
