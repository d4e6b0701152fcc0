"""
Zero-dimensional persistence by union-find.

Connected components only need the vertices and edges of a filtration. Each
vertex starts a component; an edge either merges two components (the younger
one dies) or closes a cycle, in which case it creates a one-dimensional class.
"""

import logging
from typing import List, NamedTuple, Set, Tuple

import numpy as np
from numba import njit

from homology.errors import FiltrationError

logger = logging.getLogger(__name__)


class ComponentPairing(NamedTuple):
    pairs: List[Tuple[int, int]]     # (vertex position, edge position)
    cycles: List[int]                # edges closing a cycle, dimension-1 creators
    survivors: List[int]             # vertices whose component never dies
    resolved: Set[int]               # every vertex and edge position settled here


@njit
def _find(parent, x):
    while parent[x] != x:
        parent[x] = parent[parent[x]]
        x = parent[x]
    return x


@njit
def _union_find(creation, edge_u, edge_v):
    n = creation.shape[0]
    m = edge_u.shape[0]
    parent = np.arange(n)
    size = np.ones(n, dtype=np.int64)
    oldest = creation.copy()

    dying = np.full(m, -1, dtype=np.int64)
    cycles = np.zeros(m, dtype=np.bool_)
    for k in range(m):
        ru = _find(parent, edge_u[k])
        rv = _find(parent, edge_v[k])
        if ru == rv:
            cycles[k] = True
            continue
        if size[ru] < size[rv]:
            ru, rv = rv, ru
        dying[k] = max(oldest[ru], oldest[rv])
        oldest[ru] = min(oldest[ru], oldest[rv])
        parent[rv] = ru
        size[ru] += size[rv]

    roots = np.zeros(n, dtype=np.bool_)
    for x in range(n):
        roots[x] = _find(parent, x) == x
    return dying, cycles, oldest[roots]


def zero_dimensional_pairing(K):
    """
    Pair vertices with the edges that merge their components away.

    Works on positions of `K` directly: the creation index of a vertex is its
    position, so among equally weighted vertices the one sorted later (the
    larger vertex identifier under the default order) is the younger.
    Raises FiltrationError if an edge precedes one of its vertices.
    """
    local = {}
    vertices = []
    edges = []
    edge_u = []
    edge_v = []
    for j, simplex in enumerate(K):
        if simplex.dimension == 0:
            local[j] = len(vertices)
            vertices.append(j)
        elif simplex.dimension == 1:
            u, v = (K.face_position(j, face.vertices) for face in simplex.boundary())
            edges.append(j)
            edge_u.append(local[u])
            edge_v.append(local[v])

    if not vertices:
        return ComponentPairing([], [], [], set())

    positions = np.array(vertices, dtype=np.int64)
    dying, cycles, survivors = _union_find(
        np.arange(len(vertices), dtype=np.int64),
        np.array(edge_u, dtype=np.int64),
        np.array(edge_v, dtype=np.int64),
    )

    pairs = [(int(positions[dying[k]]), edges[k]) for k in range(len(edges)) if dying[k] != -1]
    cycle_edges = [edges[k] for k in range(len(edges)) if cycles[k]]
    logger.debug('Union-find over %d vertices and %d edges: %d merges, %d cycles',
                 len(vertices), len(edges), len(pairs), len(cycle_edges))
    return ComponentPairing(
        pairs=pairs,
        cycles=cycle_edges,
        survivors=sorted(int(positions[i]) for i in survivors),
        resolved=set(vertices) | set(edges),
    )
