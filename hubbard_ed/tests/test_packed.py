"""
Test Packed Triangle Codec
==========================
Author: Masamichi Iizumi, Tamaki Iizumi
"""

import numpy as np
import pytest

from hubbard_ed.core.packed import (
    triangular_number, is_triangular, dimension_of, packed_index,
    expand_to_dense, symmetric_from_packed, pack_upper,
)
from hubbard_ed.core.exceptions import PackedLengthError


class TestDimension:
    """Inverse of the triangular-number formula."""

    def test_known_lengths(self):
        assert dimension_of(45) == 9
        assert dimension_of(10) == 4
        assert dimension_of(1) == 1
        assert dimension_of(0) == 0

    def test_all_triangular_lengths(self):
        for n in range(200):
            assert dimension_of(triangular_number(n)) == n
            assert is_triangular(triangular_number(n))

    def test_non_triangular_lengths_rejected(self):
        triangular = {triangular_number(n) for n in range(60)}
        for length in range(1, 1500):
            if length in triangular:
                continue
            assert not is_triangular(length)
            with pytest.raises(PackedLengthError):
                dimension_of(length)

    def test_negative_length(self):
        assert not is_triangular(-1)
        with pytest.raises(PackedLengthError):
            dimension_of(-3)


class TestExpand:
    """Packed <-> dense conversions."""

    def test_expand_reference(self):
        elements = [1., 2., 3., 4., 5., 6., 7., 8., 9., 10.]
        expected = np.array([
            [1., 2., 4., 7.],
            [0., 3., 5., 8.],
            [0., 0., 6., 9.],
            [0., 0., 0., 10.],
        ])
        np.testing.assert_array_equal(expand_to_dense(elements), expected)

    def test_packed_index_matches_expand(self):
        elements = np.arange(1., 22.)
        dense = expand_to_dense(elements)
        for j in range(6):
            for i in range(j + 1):
                assert dense[i, j] == elements[packed_index(i, j)]
                assert packed_index(j, i) == packed_index(i, j)

    def test_round_trip(self, random_symmetric):
        packed = pack_upper(random_symmetric)
        assert packed.size == triangular_number(6)
        np.testing.assert_array_equal(expand_to_dense(packed), np.triu(random_symmetric))
        np.testing.assert_array_equal(symmetric_from_packed(packed), random_symmetric)

    def test_expand_bad_length(self):
        with pytest.raises(PackedLengthError):
            expand_to_dense([1., 2.])

    def test_pack_requires_square(self):
        with pytest.raises(PackedLengthError):
            pack_upper(np.zeros((2, 3)))
