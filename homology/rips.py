#Vietoris-Rips filtrations of point clouds
import math

import numpy as np
from numba import njit

from homology.calculation import calculate_persistence_diagrams
from homology.complex import FilteredComplex
from homology.config import PersistenceConfig
from homology.simplex import Simplex


###FUNCTIONS
@njit
def self_distance_matrix(X):
    n = X.shape[0]
    dist_matrix = np.zeros((n, n), dtype=np.float64)
    for i in range(n):
        for j in range(i + 1, n):
            s = 0.0
            for k in range(X.shape[1]):
                diff = X[i, k] - X[j, k]
                s += diff * diff
            d = math.sqrt(s)
            dist_matrix[i, j] = d
            dist_matrix[j, i] = d
    return dist_matrix


def _as_points(X):
    X = np.asarray(X, dtype=np.float64)
    if X.ndim == 1:
        X = X.reshape(-1, 1)
    if X.ndim != 2:
        raise ValueError(f'Expected an (n_points, n_features) array, got shape {X.shape}')
    return np.ascontiguousarray(X)


def vietoris_rips_complex(X, epsilon=None, max_dimension=2):
    """
    Sorted Vietoris-Rips complex of the point cloud `X`.

    Vertices enter at 0, an edge at its length if that is at most `epsilon`,
    and every clique of up to `max_dimension + 1` vertices at the length of its
    longest edge.
    """
    X = _as_points(X)
    D = self_distance_matrix(X)
    n = D.shape[0]
    if epsilon is None:
        epsilon = math.inf

    neighbours = [set() for _ in range(n)]
    simplices = [Simplex(v, 0.0) for v in range(n)]
    for i in range(n if max_dimension >= 1 else 0):
        for j in range(i + 1, n):
            if D[i, j] <= epsilon:
                neighbours[i].add(j)
                simplices.append(Simplex((i, j), D[i, j]))

    #expand cliques by appending larger common neighbours
    stack = [((i, j), D[i, j]) for i in range(n) for j in sorted(neighbours[i])]
    while stack:
        vertices, weight = stack.pop()
        if len(vertices) > max_dimension:
            continue
        common = set.intersection(*(neighbours[v] for v in vertices))
        for w in sorted(common):
            if w <= vertices[-1]:
                continue
            w_weight = max(weight, max(D[v, w] for v in vertices))
            coface = vertices + (w,)
            simplices.append(Simplex(coface, w_weight))
            stack.append((coface, w_weight))

    return FilteredComplex(simplices).sort()


#MAIN
def run(X, max_dimension=None, epsilon=None, config=None):
    """Persistence diagrams of the Vietoris-Rips filtration of `X`."""
    config = (config or PersistenceConfig()).replace(max_dimension=max_dimension, epsilon=epsilon)
    K = vietoris_rips_complex(X, epsilon=config.epsilon, max_dimension=config.max_dimension)
    return calculate_persistence_diagrams(K, config)
