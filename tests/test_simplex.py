"""Tests for simplices and filtered complexes."""
import numpy as np
import pytest

from homology import FilteredComplex, FiltrationError, Simplex, SimplexError


class TestSimplex:
    def test_canonical_order(self):
        s = Simplex([2, 0, 1], 1.5)
        assert s.vertices == (0, 1, 2)
        assert s == Simplex([0, 1, 2])
        assert hash(s) == hash(Simplex([1, 2, 0], 7.0))
        assert s.dimension == 2
        assert len(s) == 3

    def test_data_and_weight(self):
        s = Simplex([0, 1], 0.25)
        assert s.data == 0.25
        assert s.weight == 0.25
        t = s.with_data(3.0)
        assert t.data == 3.0
        assert s.data == 0.25

    def test_single_vertex(self):
        s = Simplex(4)
        assert s.vertices == (4,)
        assert s.dimension == 0
        assert s.boundary() == []

    def test_boundary(self):
        s = Simplex([0, 1, 2], 2.0)
        faces = s.boundary()
        assert [f.vertices for f in faces] == [(1, 2), (0, 2), (0, 1)]
        assert all(f.data == 2.0 for f in faces)

    def test_container_protocol(self):
        s = Simplex([3, 1])
        assert 3 in s
        assert 2 not in s
        assert s[0] == 1
        assert list(s) == [1, 3]
        assert list(reversed(s)) == [3, 1]

    def test_ordering(self):
        assert Simplex([5]) < Simplex([0, 1])
        assert Simplex([0, 1]) < Simplex([0, 2])

    def test_numpy_vertices(self):
        assert Simplex(np.array([1, 0])).vertices == (0, 1)

    @pytest.mark.parametrize('vertices', [[], [0, 0], [-1], [0.5], [True]])
    def test_rejects_malformed(self, vertices):
        with pytest.raises(SimplexError):
            Simplex(vertices)


class TestFilteredComplex:
    def test_construction_forms(self):
        K = FilteredComplex([Simplex([0]), [1], ([0, 1], 0.5)])
        assert len(K) == 3
        assert K[2] == Simplex([0, 1])
        assert K[2].data == 0.5

    def test_default_sort(self):
        K = FilteredComplex([
            ([0, 1], 1.0), ([1], 1.0), ([0], 0.0), ([1, 2], 1.0), ([2], 0.5),
        ]).sort()
        assert [s.vertices for s in K] == [(0,), (2,), (1,), (0, 1), (1, 2)]

    def test_reverse_sort_keeps_faces_first(self):
        K = FilteredComplex([([0], 1.0), ([1], 1.0), ([0, 1], 1.0), ([2], 0.0)]).sort(reverse=True)
        assert [s.vertices for s in K] == [(0,), (1,), (0, 1), (2,)]

    def test_custom_key(self):
        K = FilteredComplex([[0], [1], [2]]).sort(key=lambda s: -s[0])
        assert [s.vertices for s in K] == [(2,), (1,), (0,)]
        assert K.find([2]) == 0

    def test_lookup(self):
        K = FilteredComplex([[0], [1], [0, 1]])
        assert K.find([1, 0]) == 2
        assert K.find(Simplex([1])) == 1
        assert K.find([2]) is None
        assert K.index(Simplex([0, 1])) == 2
        with pytest.raises(ValueError):
            K.index(Simplex([5]))
        assert [1, 0] in K
        assert [3] not in K

    def test_duplicates_rejected(self):
        with pytest.raises(FiltrationError) as excinfo:
            FilteredComplex([[0], [1], [1]])
        assert excinfo.value.index == 2

    def test_dimension_and_arrays(self):
        K = FilteredComplex([([0], 0.0), ([1], 0.5), ([0, 1], 2.0)])
        assert K.dimension == 1
        assert FilteredComplex().dimension == -1
        np.testing.assert_array_equal(K.values(), [0.0, 0.5, 2.0])
        np.testing.assert_array_equal(K.dimensions(), [0, 0, 1])

    def test_check_filtration(self, filled_triangle):
        filled_triangle.check_filtration()

    def test_check_filtration_missing_face(self):
        K = FilteredComplex([[0], [1], [0, 1, 2]])
        with pytest.raises(FiltrationError) as excinfo:
            K.check_filtration()
        assert excinfo.value.index == 2
        assert excinfo.value.face == (1, 2)

    def test_check_filtration_late_face(self):
        K = FilteredComplex([[0], [0, 1], [1]])
        with pytest.raises(FiltrationError) as excinfo:
            K.check_filtration()
        assert excinfo.value.index == 1
        assert excinfo.value.face == (1,)
        assert 'precedes' in str(excinfo.value)
