"""
Persistence diagrams.

A diagram is the geometric view of a pairing in a single dimension: every
pair becomes a point (birth, death) from the filtration values of its two
simplices, and every unpaired creator becomes (birth, inf) or
(birth, unpaired_value) when a finite end of observation is wanted.
"""

import math
from typing import NamedTuple

import numpy as np


class Point(NamedTuple):
    birth: float
    death: float
    unpaired: bool = False

    @property
    def persistence(self):
        return self.death - self.birth


class PersistenceDiagram:
    """Immutable multiset of (birth, death) points in one dimension."""

    def __init__(self, points=(), dimension=0, unpaired=None):
        points = np.array(points, dtype=np.float64).reshape(-1, 2)
        if unpaired is None:
            unpaired = np.isposinf(points[:, 1])
        unpaired = np.array(unpaired, dtype=np.bool_).reshape(-1)
        if unpaired.shape[0] != points.shape[0]:
            raise ValueError('Need one unpaired flag per point')
        points.setflags(write=False)
        unpaired.setflags(write=False)
        self._points = points
        self._unpaired = unpaired
        self._dimension = int(dimension)

    @property
    def dimension(self):
        return self._dimension

    @property
    def points(self):
        return self._points

    @property
    def births(self):
        return self._points[:, 0]

    @property
    def deaths(self):
        return self._points[:, 1]

    @property
    def unpaired(self):
        return self._unpaired

    ###Filters
    def _select(self, mask):
        return PersistenceDiagram(self._points[mask], self.dimension, self._unpaired[mask])

    def remove_diagonal(self):
        """Copy without points where birth == death."""
        return self._select(self._points[:, 0] != self._points[:, 1])

    def remove_unpaired(self):
        """Copy without points that never die."""
        return self._select(~self._unpaired)

    ###Betti numbers
    @property
    def betti(self):
        return int(np.count_nonzero(self._unpaired))

    def betti_at(self, threshold):
        """Number of features alive at `threshold`, i.e. birth <= t < death."""
        b, d = self._points[:, 0], self._points[:, 1]
        alive = (b <= threshold) & ((d > threshold) | self._unpaired)
        return int(np.count_nonzero(alive))

    def __len__(self):
        return self._points.shape[0]

    def __bool__(self):
        return len(self) > 0

    def __iter__(self):
        for (b, d), u in zip(self._points, self._unpaired):
            yield Point(float(b), float(d), bool(u))

    def __eq__(self, other):
        if not isinstance(other, PersistenceDiagram):
            return NotImplemented
        if self.dimension != other.dimension or len(self) != len(other):
            return False
        return (np.array_equal(_canonical(self._points), _canonical(other._points), equal_nan=True)
                and self.betti == other.betti)

    __hash__ = None

    def __array__(self, dtype=None, copy=None):
        return np.array(self._points, dtype=dtype)

    def __repr__(self):
        body = ', '.join(f'({b:g}, {d:g})' for b, d in self._points[:8])
        more = ', ...' if len(self) > 8 else ''
        return f'PersistenceDiagram(dimension={self.dimension}, points=[{body}{more}])'


def _canonical(points):
    order = np.lexsort((points[:, 1], points[:, 0]))
    return points[order]


def make_persistence_diagrams(pairing, values, dimensions, unpaired_value=math.inf):
    """
    Build one diagram per dimension 0..max(dimensions) from a pairing.

    Parameters
    ----------
    pairing : PersistencePairing
    values : array-like of float
        Filtration value of each position.
    dimensions : array-like of int
        Dimension of the simplex at each position.
    unpaired_value : float
        Death value given to unpaired creators; the points stay flagged as
        unpaired whatever this value is.
    """
    values = np.asarray(values, dtype=np.float64)
    dimensions = np.asarray(dimensions, dtype=np.int64)
    if dimensions.size == 0:
        return []

    points = [[] for _ in range(int(dimensions.max()) + 1)]
    flags = [[] for _ in points]
    for creator, destroyer in pairing:
        d = dimensions[creator]
        points[d].append((values[creator], values[destroyer]))
        flags[d].append(False)
    for creator in pairing.unpaired:
        d = dimensions[creator]
        points[d].append((values[creator], unpaired_value))
        flags[d].append(True)

    return [PersistenceDiagram(p, d, f) for d, (p, f) in enumerate(zip(points, flags))]
