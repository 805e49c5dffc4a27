"""
Packed Triangle Arrays
======================

Conversions between LAPACK 'U' packed storage and dense matrices.

Storage convention (column-major upper triangle):
    A[i, j] (i <= j, 0-indexed)  ->  ap[i + j*(j+1)/2]

For N = 4 the flat array [1..10] unpacks to

    [[1, 2, 4,  7],
     [0, 3, 5,  8],
     [0, 0, 6,  9],
     [0, 0, 0, 10]]

This is the layout produced by the block decomposer and consumed by
the packed eigensolver, which expands it before dsytrd.

Author: Masamichi Iizumi, Tamaki Iizumi
"""

import math
import numpy as np
from typing import Sequence, Union

from .exceptions import PackedLengthError


ArrayLike = Union[Sequence[float], np.ndarray]


def triangular_number(n: int) -> int:
    """Packed length of an n x n symmetric matrix: n(n+1)/2."""
    return n * (n + 1) // 2


def is_triangular(length: int) -> bool:
    """True if length == N(N+1)/2 for some integer N >= 0."""
    if length < 0:
        return False
    n = (math.isqrt(8 * length + 1) - 1) // 2
    return triangular_number(n) == length


def dimension_of(packed_length: int) -> int:
    """
    Matrix order N implied by a packed array length.

    Inverts l = N(N+1)/2 in closed form, N = (sqrt(1 + 8l) - 1) / 2,
    using an exact integer square root.

    Args:
        packed_length: Length of the packed upper triangle

    Returns:
        Matrix dimension N

    Raises:
        PackedLengthError: if packed_length is not triangular
    """
    if packed_length < 0:
        raise PackedLengthError(f"Negative packed length: {packed_length}")

    n = (math.isqrt(8 * packed_length + 1) - 1) // 2
    if triangular_number(n) != packed_length:
        raise PackedLengthError(
            f"Packed length {packed_length} is not triangular "
            f"(nearest: {triangular_number(n)} for N={n}, "
            f"{triangular_number(n + 1)} for N={n + 1})"
        )
    return n


def packed_index(i: int, j: int) -> int:
    """
    Flat index of A[i, j] in packed upper storage.

    The pair is swapped if i > j, since the matrix is symmetric.
    """
    if i > j:
        i, j = j, i
    return i + j * (j + 1) // 2


def expand_to_dense(packed: ArrayLike) -> np.ndarray:
    """
    Unpack into an N x N upper-triangular matrix.

    The lower triangle is left as zero. Intended for inspection and
    tests; the diagonalization path never materializes this.

    Args:
        packed: Flat upper triangle, length N(N+1)/2

    Returns:
        Dense (N, N) float array
    """
    ap = np.asarray(packed, dtype=np.float64)
    n = dimension_of(ap.size)

    # Column j holds rows 0..j
    dense = np.zeros((n, n), dtype=np.float64)
    for j in range(n):
        start = triangular_number(j)
        dense[:j + 1, j] = ap[start:start + j + 1]
    return dense


def symmetric_from_packed(packed: ArrayLike) -> np.ndarray:
    """Unpack into the full symmetric N x N matrix."""
    upper = expand_to_dense(packed)
    return upper + np.triu(upper, k=1).T


def pack_upper(matrix: ArrayLike) -> np.ndarray:
    """
    Pack the upper triangle of a square matrix, column-major.

    Inverse of expand_to_dense for the upper triangle; anything
    below the diagonal is ignored.

    Raises:
        PackedLengthError: if matrix is not square
    """
    dense = np.asarray(matrix, dtype=np.float64)
    if dense.ndim != 2 or dense.shape[0] != dense.shape[1]:
        raise PackedLengthError(
            f"Expected a square matrix, got shape {dense.shape}"
        )

    n = dense.shape[0]
    packed = np.empty(triangular_number(n), dtype=np.float64)
    for j in range(n):
        start = triangular_number(j)
        packed[start:start + j + 1] = dense[:j + 1, j]
    return packed
