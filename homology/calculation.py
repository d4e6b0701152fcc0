"""
Persistent homology of filtered complexes.

Two producers share one result type: the union-find pass settles vertices
and edges, and boundary matrix reduction handles everything else (or all of
it, when the fast path is switched off). Both work on positions of an
already sorted complex.
"""

import logging
import math

import numpy as np

from homology.boundary import BoundaryMatrix, reduce_boundary_matrix
from homology.complex import FilteredComplex
from homology.config import PersistenceConfig
from homology.diagram import PersistenceDiagram, make_persistence_diagrams
from homology.errors import HomologyError
from homology.pairing import PersistencePairing
from homology.simplex import Simplex
from homology.union_find import zero_dimensional_pairing

logger = logging.getLogger(__name__)


def _configure(config, overrides):
    return (config or PersistenceConfig()).replace(**overrides)


def calculate_persistence_pairing(K, config=None, **overrides):
    """
    Compute the persistence pairing of a sorted complex.

    Every position of `K` ends up in exactly one role: creator of a pair,
    destroyer of a pair, or unpaired creator. Raises FiltrationError if a
    simplex is missing a face or precedes one.

    Keyword overrides (`twist`, `use_union_find`) take precedence over
    `config`.
    """
    config = _configure(config, overrides)
    if len(K) == 0:
        return PersistencePairing()

    pairs = []
    resolved = None
    if config.use_union_find:
        components = zero_dimensional_pairing(K)
        pairs.extend(components.pairs)
        resolved = components.resolved

    if resolved is not None and K.dimension <= 1:
        logger.debug('Graph of %d simplices: union-find only', len(K))
    else:
        min_dimension = 2 if resolved is not None else 1
        logger.debug('Reducing %d simplices from dimension %d (twist=%s)',
                     len(K), min_dimension, config.twist)
        matrix = BoundaryMatrix.from_complex(K, min_dimension=min_dimension)
        reduced = reduce_boundary_matrix(matrix, twist=config.twist, resolved=resolved)
        if resolved is not None:
            _check_cycle_creators(reduced, matrix.dimensions, components.cycles)
        pairs.extend(reduced)

    return PersistencePairing.from_pairs(pairs, len(K))


def _check_cycle_creators(pairs, dimensions, cycles):
    #an edge can only create a loop if union-find found it closing a cycle
    cycles = set(cycles)
    for creator, destroyer in pairs:
        if dimensions[creator] == 1 and creator not in cycles:
            raise HomologyError(
                f'Edge at position {creator} is paired with {destroyer} but merged '
                f'two components')


def calculate_persistence_diagrams(K, config=None, **overrides):
    """
    Compute one persistence diagram per dimension of `K`.

    Unpaired creators die at `unpaired_value` (infinity by default) and stay
    flagged as unpaired. An empty complex yields an empty list.
    """
    config = _configure(config, overrides)
    pairing = calculate_persistence_pairing(K, config)
    return make_persistence_diagrams(pairing, K.values(), K.dimensions(),
                                     unpaired_value=config.unpaired_value)


def calculate_zero_dimensional_persistence_diagram(K, unpaired_value=math.inf):
    """
    Zero-dimensional diagram and pairing of `K` by union-find alone.

    Simplices above dimension one are ignored. The returned pairing only
    covers vertices: its unpaired indices are the surviving components.
    """
    components = zero_dimensional_pairing(K)
    pairing = PersistencePairing(components.pairs, components.survivors)
    diagrams = make_persistence_diagrams(pairing, K.values(), K.dimensions(),
                                         unpaired_value=unpaired_value)
    if not diagrams:
        return PersistenceDiagram(dimension=0), pairing
    return diagrams[0], pairing


def zero_dimensional_persistence_diagram_of_matrix(M, reverse_filtration=True,
                                                   vertex_weight=None,
                                                   unpaired_value=math.inf):
    """
    Zero-dimensional diagram of the bipartite graph with weight matrix `M`.

    Rows become vertices 0..n-1 and columns vertices n..n+m-1, all with
    `vertex_weight`; entry M[u, v] is the weight of edge (u, n+v). By
    default the graph is filtered from large weights to small ones.

    Vertices must enter no later than their edges, so `vertex_weight` has to
    be at least the largest entry of a decreasing filtration and at most the
    smallest entry of an increasing one; otherwise FiltrationError is raised.
    When omitted it is 1.0 for a decreasing filtration and 0.0 for an
    increasing one, matching weights in [0, 1].
    """
    M = np.asarray(M, dtype=np.float64)
    if M.ndim != 2:
        raise ValueError(f'Expected a two-dimensional matrix, got shape {M.shape}')
    n, m = M.shape
    if vertex_weight is None:
        vertex_weight = 1.0 if reverse_filtration else 0.0

    simplices = [Simplex(v, vertex_weight) for v in range(n + m)]
    for u in range(n):
        for v in range(m):
            simplices.append(Simplex((u, n + v), M[u, v]))

    K = FilteredComplex(simplices).sort(reverse=reverse_filtration)
    diagram, _ = calculate_zero_dimensional_persistence_diagram(K, unpaired_value)
    return diagram
