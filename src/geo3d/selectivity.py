## constant selectivity estimates for geo3d predicates
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

"""Fixed selectivity estimates a query planner may use for the geo3d
predicates.  These are calibration constants, not measurements."""

from typing import Dict

__all__ = [
    "VOLUME_SELECTIVITY",
    "POSITION_SELECTIVITY",
    "CONTAINMENT_SELECTIVITY",
    "estimate",
    "join_estimate",
]

## fraction of rows expected to satisfy each predicate family
VOLUME_SELECTIVITY = 0.005
POSITION_SELECTIVITY = 0.1
CONTAINMENT_SELECTIVITY = 0.001

_ESTIMATES: Dict[str, float] = {
    "volume": VOLUME_SELECTIVITY,
    "position": POSITION_SELECTIVITY,
    "containment": CONTAINMENT_SELECTIVITY,
    "overlaps": VOLUME_SELECTIVITY,
    "intersects": VOLUME_SELECTIVITY,
    "same": VOLUME_SELECTIVITY,
    "left": POSITION_SELECTIVITY,
    "overleft": POSITION_SELECTIVITY,
    "right": POSITION_SELECTIVITY,
    "overright": POSITION_SELECTIVITY,
    "below": POSITION_SELECTIVITY,
    "overbelow": POSITION_SELECTIVITY,
    "above": POSITION_SELECTIVITY,
    "overabove": POSITION_SELECTIVITY,
    "front": POSITION_SELECTIVITY,
    "overfront": POSITION_SELECTIVITY,
    "back": POSITION_SELECTIVITY,
    "overback": POSITION_SELECTIVITY,
    "contains": CONTAINMENT_SELECTIVITY,
    "contained": CONTAINMENT_SELECTIVITY,
}


def estimate(predicate: str) -> float:
    """Restriction selectivity of ``predicate``; ``KeyError`` if unknown."""
    return _ESTIMATES[predicate]


def join_estimate(predicate: str) -> float:
    """Join selectivity; the same constants serve for joins."""
    return _ESTIMATES[predicate]
