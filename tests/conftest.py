import numpy as np
import pytest

from homology import FilteredComplex, vietoris_rips_complex


@pytest.fixture
def filled_triangle():
    return FilteredComplex([
        ([0], 0.0), ([1], 0.0), ([2], 0.0),
        ([0, 1], 1.0), ([1, 2], 2.0), ([0, 2], 3.0),
        ([0, 1, 2], 4.0),
    ]).sort()


@pytest.fixture
def hollow_triangle():
    return FilteredComplex([
        ([0], 0.0), ([1], 0.0), ([2], 0.0),
        ([0, 1], 1.0), ([1, 2], 2.0), ([0, 2], 3.0),
    ]).sort()


@pytest.fixture
def bridged_triangles():
    simplices = [([v], 0.0) for v in range(6)]
    for a, b, c in [(0, 1, 2), (3, 4, 5)]:
        simplices += [([a, b], 1.0), ([a, c], 1.0), ([b, c], 1.0)]
    simplices.append(([2, 3], 2.0))
    return FilteredComplex(simplices).sort()


def _random_complexes():
    rng = np.random.default_rng(7)
    complexes = []
    for n in (4, 6, 9, 12):
        complexes.append(vietoris_rips_complex(rng.normal(size=(n, 2)), max_dimension=2))
    # integer grid points give many ties in the filtration
    grid = rng.integers(0, 3, size=(10, 2)).astype(float)
    grid = np.unique(grid, axis=0)
    complexes.append(vietoris_rips_complex(grid, max_dimension=3))
    complexes.append(vietoris_rips_complex(rng.uniform(size=(10, 3)), epsilon=0.6, max_dimension=3))
    return complexes


@pytest.fixture(params=range(6))
def random_complex(request):
    return _random_complexes()[request.param]
