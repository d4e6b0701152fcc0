"""
Persistent homology of filtered simplicial complexes.

Sort a complex into a filtration, reduce its boundary matrix (with a
union-find shortcut for connected components), and read the result as
persistence pairings or per-dimension persistence diagrams.
"""

from homology.boundary import BoundaryMatrix, reduce_boundary_matrix
from homology.calculation import (
    calculate_persistence_diagrams,
    calculate_persistence_pairing,
    calculate_zero_dimensional_persistence_diagram,
    zero_dimensional_persistence_diagram_of_matrix,
)
from homology.complex import FilteredComplex
from homology.config import PersistenceConfig
from homology.diagram import PersistenceDiagram, Point, make_persistence_diagrams
from homology.errors import FiltrationError, HomologyError, SimplexError
from homology.pairing import PersistencePairing
from homology.rips import run, self_distance_matrix, vietoris_rips_complex
from homology.simplex import Simplex, filtration_key, reverse_filtration_key
from homology.union_find import ComponentPairing, zero_dimensional_pairing

__version__ = "0.2.0"

__all__ = [
    'BoundaryMatrix', 'ComponentPairing', 'FilteredComplex', 'FiltrationError',
    'HomologyError', 'PersistenceConfig', 'PersistenceDiagram', 'PersistencePairing',
    'Point', 'Simplex', 'SimplexError',
    'calculate_persistence_diagrams', 'calculate_persistence_pairing',
    'calculate_zero_dimensional_persistence_diagram', 'filtration_key',
    'make_persistence_diagrams', 'reduce_boundary_matrix', 'reverse_filtration_key',
    'run', 'self_distance_matrix', 'vietoris_rips_complex',
    'zero_dimensional_pairing', 'zero_dimensional_persistence_diagram_of_matrix',
]
