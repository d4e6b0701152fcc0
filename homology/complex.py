"""
Filtered simplicial complexes.

A `FilteredComplex` is an ordered sequence of simplices. Persistence is
computed over positions in that sequence, so the order *is* the filtration:
every boundary face of the simplex at position i must sit at a position < i.
Use `sort()` to establish that order from the simplex weights.
"""

import numpy as np

from homology.errors import FiltrationError
from homology.simplex import Simplex, filtration_key, reverse_filtration_key


def _as_simplex(item):
    if isinstance(item, Simplex):
        return item
    if isinstance(item, tuple) and len(item) == 2 and isinstance(item[0], (tuple, list, Simplex)):
        vertices, data = item
        return Simplex(vertices, data)
    return Simplex(item)


class FilteredComplex:
    """
    Ordered collection of unique simplices with O(1) lookup by vertex set.

    Items may be `Simplex` instances, plain vertex lists, or
    `(vertices, data)` tuples.
    """

    def __init__(self, simplices=()):
        self._simplices = []
        self._index = {}
        for s in simplices:
            self.append(s)

    ###Construction
    def append(self, simplex):
        simplex = _as_simplex(simplex)
        if simplex.vertices in self._index:
            raise FiltrationError(
                f'Simplex {list(simplex.vertices)} already present at position '
                f'{self._index[simplex.vertices]}',
                index=len(self._simplices), face=simplex.vertices)
        self._index[simplex.vertices] = len(self._simplices)
        self._simplices.append(simplex)

    def sort(self, key=None, reverse=False):
        """
        Sort in place and return the complex.

        The default order is ascending weight, then dimension, then vertices.
        With `reverse=True` and no key, weights descend while ties keep the
        lower-dimension-first rule so faces still precede their cofaces.
        """
        if key is None:
            key = reverse_filtration_key if reverse else filtration_key
            reverse = False
        self._simplices.sort(key=key, reverse=reverse)
        self._index = {s.vertices: i for i, s in enumerate(self._simplices)}
        return self

    ###Lookup
    def find(self, vertices):
        """Position of the simplex with this vertex set, or None."""
        if isinstance(vertices, Simplex):
            vertices = vertices.vertices
        else:
            vertices = tuple(sorted(vertices))
        return self._index.get(vertices)

    def index(self, simplex):
        position = self.find(simplex)
        if position is None:
            raise ValueError(f'{simplex!r} is not in the complex')
        return position

    def __contains__(self, simplex):
        if not isinstance(simplex, Simplex):
            try:
                simplex = _as_simplex(simplex)
            except ValueError:
                return False
        return simplex.vertices in self._index

    def __getitem__(self, i):
        return self._simplices[i]

    def __iter__(self):
        return iter(self._simplices)

    def __len__(self):
        return len(self._simplices)

    def __bool__(self):
        return bool(self._simplices)

    def __repr__(self):
        body = ', '.join(repr(s) for s in self._simplices[:8])
        more = ', ...' if len(self._simplices) > 8 else ''
        return f'FilteredComplex([{body}{more}])'

    ###Properties
    @property
    def dimension(self):
        if not self._simplices:
            return -1
        return max(s.dimension for s in self._simplices)

    def values(self):
        return np.array([s.data for s in self._simplices], dtype=np.float64)

    def dimensions(self):
        return np.array([s.dimension for s in self._simplices], dtype=np.int64)

    def check_filtration(self):
        """Raise FiltrationError at the first simplex whose face is missing or late."""
        for j, s in enumerate(self._simplices):
            for face in s.boundary():
                self.face_position(j, face.vertices)

    def face_position(self, j, face):
        i = self._index.get(face)
        if i is None:
            raise FiltrationError(
                f'Simplex {list(self._simplices[j].vertices)} at position {j} '
                f'has no face {list(face)} in the complex', index=j, face=face)
        if i >= j:
            raise FiltrationError(
                f'Simplex {list(self._simplices[j].vertices)} at position {j} '
                f'precedes its face {list(face)} at position {i}', index=j, face=face)
        return i
