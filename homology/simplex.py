import numbers

from homology.errors import SimplexError


def _canonical(vertices):
    vertices = tuple(vertices)
    if not vertices:
        raise SimplexError('A simplex needs at least one vertex')
    for v in vertices:
        if isinstance(v, bool) or not isinstance(v, numbers.Integral):
            raise SimplexError(f'Vertex identifiers must be integers, got {v!r}')
        if v < 0:
            raise SimplexError(f'Vertex identifiers must be non-negative, got {v}')
    canonical = tuple(sorted(int(v) for v in vertices))
    if len(set(canonical)) != len(canonical):
        raise SimplexError(f'Repeated vertex in {vertices}')
    return canonical


class Simplex:
    """
    An immutable set of k+1 distinct vertices with one filtration value.

    Vertices are kept sorted, so two simplices built from the same vertex set
    in any order compare (and hash) equal. The filtration value, available as
    `data` or `weight`, takes no part in equality.
    """

    __slots__ = ('_vertices', '_data')

    def __init__(self, vertices, data=0.0):
        if isinstance(vertices, numbers.Integral) and not isinstance(vertices, bool):
            vertices = (vertices,)
        self._vertices = _canonical(vertices)
        self._data = float(data)

    @property
    def vertices(self):
        return self._vertices

    @property
    def data(self):
        return self._data

    weight = data

    @property
    def dimension(self):
        return len(self._vertices) - 1

    def with_data(self, data):
        return Simplex(self._vertices, data)

    def boundary(self):
        """Faces obtained by deleting one vertex each; a vertex has none."""
        if len(self._vertices) == 1:
            return []
        return [Simplex(self._vertices[:i] + self._vertices[i + 1:], self._data)
                for i in range(len(self._vertices))]

    def __len__(self):
        return len(self._vertices)

    def __iter__(self):
        return iter(self._vertices)

    def __reversed__(self):
        return reversed(self._vertices)

    def __getitem__(self, i):
        return self._vertices[i]

    def __contains__(self, v):
        return v in self._vertices

    def __eq__(self, other):
        if not isinstance(other, Simplex):
            return NotImplemented
        return self._vertices == other._vertices

    def __hash__(self):
        return hash(self._vertices)

    def __lt__(self, other):
        if not isinstance(other, Simplex):
            return NotImplemented
        return (self.dimension, self._vertices) < (other.dimension, other._vertices)

    def __repr__(self):
        return f"Simplex({list(self._vertices)}, {self._data!r})"


def filtration_key(simplex):
    #weight first, then lower dimension, then lexicographic vertices
    return (simplex.data, simplex.dimension, simplex.vertices)


def reverse_filtration_key(simplex):
    #descending weight, ties still resolved lower dimension first
    return (-simplex.data, simplex.dimension, simplex.vertices)
