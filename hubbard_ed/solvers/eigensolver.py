"""
Packed Symmetric Eigensolver
============================

Eigenvalues of a real symmetric matrix given in LAPACK 'U' packed
storage.

Methods:
  - 'packed': unpack, dsytrd (symmetric -> tridiagonal) + dsterf
              (root-free QL/QR on the tridiagonal). Eigenvalues only,
              both LAPACK status codes checked.
  - 'dense':  unpack with core/packed.py and call scipy.linalg.eigh.
              Slower, used to cross-check the packed path.

A nonzero LAPACK status is never dropped: it raises EigensolverError,
which the spectrum driver may turn into a skipped block.

Author: Masamichi Iizumi, Tamaki Iizumi
"""

import numpy as np
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from scipy.linalg import eigh, LinAlgError
from scipy.linalg.lapack import dsytrd, dsterf

from ..core.packed import dimension_of, symmetric_from_packed, triangular_number
from ..core.exceptions import ConfigError, EigensolverError, PackedLengthError


METHODS = ("packed", "dense")


@dataclass
class EigenResult:
    """
    Eigenvalues of one block.

    Attributes:
        eigenvalues: Ascending eigenvalues
        info: LAPACK status (always 0 when returned)
        method: Solver path used
    """
    eigenvalues: np.ndarray
    info: int = 0
    method: str = "packed"

    @property
    def n(self) -> int:
        return len(self.eigenvalues)


def _solve_lapack(ap: np.ndarray, n: int) -> np.ndarray:
    if n == 1:
        return ap.copy()

    _, d, e, _, info = dsytrd(symmetric_from_packed(ap), lower=0)
    if info != 0:
        raise EigensolverError(info, n, routine="dsytrd")

    vals, info = dsterf(d, e)
    if info != 0:
        raise EigensolverError(info, n, routine="dsterf")

    return np.asarray(vals, dtype=np.float64)


def _solve_dense(ap: np.ndarray, n: int) -> np.ndarray:
    try:
        return eigh(symmetric_from_packed(ap), eigvals_only=True)
    except LinAlgError as exc:
        raise EigensolverError(1, n, routine="syevr") from exc


def solve_packed(elements: Union[Sequence[float], np.ndarray],
                 n: Optional[int] = None,
                 method: str = "packed") -> EigenResult:
    """
    Diagonalize a packed symmetric matrix.

    Args:
        elements: Packed upper triangle, length n(n+1)/2
        n: Matrix order (inferred from the length if omitted)
        method: 'packed' (LAPACK dsytrd + dsterf) or 'dense' (eigh)

    Returns:
        EigenResult with ascending eigenvalues

    Raises:
        PackedLengthError: length does not match n
        EigensolverError: LAPACK returned a nonzero status
    """
    ap = np.ascontiguousarray(elements, dtype=np.float64)

    if n is None:
        n = dimension_of(ap.size)
    elif ap.size != triangular_number(n):
        raise PackedLengthError(
            f"Packed array of length {ap.size} does not match order {n} "
            f"(expected {triangular_number(n)})"
        )

    if n == 0:
        return EigenResult(np.zeros(0), 0, method)

    if method == "packed":
        vals = _solve_lapack(ap, n)
    elif method == "dense":
        vals = _solve_dense(ap, n)
    else:
        raise ConfigError(f"Unknown eigensolver method '{method}'. Available: {METHODS}")

    return EigenResult(eigenvalues=np.sort(vals), info=0, method=method)
