"""
Boundary matrix reduction over Z/2.

Columns are sparse: each is a sorted int64 array of the positions of the
simplex's boundary faces. Adding two columns is their symmetric difference,
and the "low" of a column is its last (largest) entry.
"""

import logging

import numpy as np

logger = logging.getLogger(__name__)

EMPTY_COLUMN = np.empty(0, dtype=np.int64)


class BoundaryMatrix:
    """
    Sparse boundary matrix of a filtered complex.

    Only simplices of dimension >= `min_dimension` get a non-empty column;
    the others are left empty and are expected to be settled elsewhere.
    """

    def __init__(self, columns, dimensions):
        self.columns = columns
        self.dimensions = np.asarray(dimensions, dtype=np.int64)

    @classmethod
    def from_complex(cls, K, min_dimension=1):
        columns = []
        for j, simplex in enumerate(K):
            if simplex.dimension < max(min_dimension, 1):
                columns.append(EMPTY_COLUMN)
                continue
            rows = [K.face_position(j, face.vertices) for face in simplex.boundary()]
            columns.append(np.array(sorted(rows), dtype=np.int64))
        return cls(columns, K.dimensions())

    def __len__(self):
        return len(self.columns)

    @property
    def dimension(self):
        return int(self.dimensions.max()) if len(self.dimensions) else -1

    def column(self, j):
        return self.columns[j]

    def columns_of_dimension(self, d):
        return np.flatnonzero(self.dimensions == d)


def low(column):
    return int(column[-1]) if column.size else -1


def _reduce_column(column, low_to_column, reduced):
    #add earlier reduced columns until the low is new or the column vanishes
    j_low = low(column)
    while j_low != -1 and low_to_column[j_low] != -1:
        column = np.setxor1d(column, reduced[int(low_to_column[j_low])], assume_unique=True)
        j_low = low(column)
    return column, j_low


def reduce_boundary_matrix(matrix, twist=True, resolved=None):
    """
    Reduce `matrix` and return the persistence pairs it determines.

    Parameters
    ----------
    matrix : BoundaryMatrix
    twist : bool
        Reduce dimensions from the highest down and clear the column of every
        creator found along the way; such columns would reduce to zero anyway.
        With twist off, columns are reduced in plain filtration order.
    resolved : iterable of int, optional
        Positions whose columns were settled by another producer (such as the
        union-find pass over vertices and edges). Their columns are skipped.

    Returns
    -------
    list of (creator, destroyer) tuples, sorted by destroyer.
    """
    n = len(matrix)
    low_to_column = np.full(n, -1, dtype=np.int64)
    reduced = {}
    skip = np.zeros(n, dtype=np.bool_)
    if resolved is not None:
        skip[np.fromiter(resolved, dtype=np.int64)] = True

    if twist:
        order = [matrix.columns_of_dimension(d) for d in range(matrix.dimension, 0, -1)]
    else:
        order = [np.arange(n)]

    pairs = []
    cleared = 0
    for block in order:
        for j in block:
            if skip[j]:
                continue
            column = matrix.column(j)
            if not column.size:
                continue
            column, j_low = _reduce_column(column, low_to_column, reduced)
            if j_low == -1:
                continue
            low_to_column[j_low] = j
            reduced[int(j)] = column
            pairs.append((j_low, int(j)))
            if twist and not skip[j_low]:
                skip[j_low] = True
                cleared += 1

    pairs.sort(key=lambda p: p[1])
    logger.debug('Reduced %d columns: %d pairs, %d columns cleared',
                 n, len(pairs), cleared)
    return pairs
