"""
Fock States for hubbard_ed
==========================

Bit-packed occupation-number basis states and the second-quantization
operators acting on them.

Encoding (site_count = N, 2N spin-orbitals):
  - orbital k in [0, N)    : spin-up on site k
  - orbital k in [N, 2N)   : spin-down on site k - N
  - orbital k is stored at bit (2N - 1) - k, so orbital 0 is the MSB

Example (N = 2):
    label 5 = 0b0101  ->  orbitals 1 and 3 occupied
                      ->  site 1 doubly occupied

A basis label is the signed integer sign * occupation.

Operators never mutate: each call returns a new FockState, or the
CollapsedState (zero vector) when Pauli exclusion forbids the action.
A collapsed state absorbs every further operator and has zero overlap
with everything.

Author: Masamichi Iizumi, Tamaki Iizumi
"""

from dataclasses import dataclass
from typing import List, Union

from .exceptions import OrbitalIndexError, LabelRangeError


# =============================================================================
# Shared orbital bookkeeping
# =============================================================================

class _FockKet:
    """Orbital indexing shared by valid and collapsed states."""

    site_count: int

    @property
    def n_orbitals(self) -> int:
        """Number of spin-orbitals (2 per site)."""
        return 2 * self.site_count

    @property
    def basis_size(self) -> int:
        """Fock space dimension 4^N."""
        return 4 ** self.site_count

    def _check_orbital(self, orbital: int):
        if not 0 <= orbital < self.n_orbitals:
            raise OrbitalIndexError(orbital, self.n_orbitals)

    def _mask(self, orbital: int) -> int:
        self._check_orbital(orbital)
        return 1 << (self.n_orbitals - 1 - orbital)

    def up(self, site: int) -> int:
        """Orbital index of the spin-up orbital on a site."""
        return site

    def down(self, site: int) -> int:
        """Orbital index of the spin-down orbital on a site."""
        return site + self.site_count


# =============================================================================
# Collapsed (zero) state
# =============================================================================

@dataclass(frozen=True)
class CollapsedState(_FockKet):
    """
    The zero vector produced by a forbidden operator action.

    Orbital indices are still validated, so a contract violation is
    reported even after the state has collapsed.
    """
    site_count: int

    @property
    def is_collapsed(self) -> bool:
        return True

    def create(self, orbital: int) -> "CollapsedState":
        self._check_orbital(orbital)
        return self

    def destroy(self, orbital: int) -> "CollapsedState":
        self._check_orbital(orbital)
        return self

    def number(self, orbital: int) -> "CollapsedState":
        self._check_orbital(orbital)
        return self

    def overlap(self, label: int) -> int:
        return 0

    def __str__(self) -> str:
        return "0"


# =============================================================================
# Valid basis state
# =============================================================================

@dataclass(frozen=True)
class FockState(_FockKet):
    """
    One occupation-number basis ket.

    Attributes:
        site_count: Number of lattice sites N
        occupation: Non-negative bit pattern of occupied orbitals
        sign: Accumulated fermionic phase (+1 or -1)

    Example:
        >>> state = FockState.from_label(2, 5)
        >>> state.number(1).number(3).overlap(5)
        1
        >>> state.create(1).is_collapsed
        True
    """
    site_count: int
    occupation: int
    sign: int = 1

    def __post_init__(self):
        if self.site_count < 1:
            raise LabelRangeError(
                f"site_count must be positive, got {self.site_count}"
            )
        if not 0 <= self.occupation < self.basis_size:
            raise LabelRangeError(
                f"Occupation {self.occupation} outside Fock space of "
                f"{self.site_count} sites (size {self.basis_size})"
            )
        if self.sign not in (1, -1):
            raise LabelRangeError(f"sign must be +1 or -1, got {self.sign}")

    @classmethod
    def from_label(cls, site_count: int, label: int) -> "FockState":
        """Build a state from a signed basis label."""
        return cls(site_count, abs(label), -1 if label < 0 else 1)

    @property
    def is_collapsed(self) -> bool:
        return False

    @property
    def label(self) -> int:
        """Signed basis label (sign folded into the occupation)."""
        return self.sign * self.occupation

    # -------------------------------------------------------------------------
    # Second-quantization operators
    # -------------------------------------------------------------------------

    def create(self, orbital: int) -> Union["FockState", CollapsedState]:
        """c^dag_orbital: set the bit, or collapse if already occupied."""
        mask = self._mask(orbital)
        if self.occupation & mask:
            return CollapsedState(self.site_count)
        return FockState(self.site_count, self.occupation | mask, self.sign)

    def destroy(self, orbital: int) -> Union["FockState", CollapsedState]:
        """c_orbital: clear the bit, or collapse if empty."""
        mask = self._mask(orbital)
        if not self.occupation & mask:
            return CollapsedState(self.site_count)
        return FockState(self.site_count, self.occupation & ~mask, self.sign)

    def number(self, orbital: int) -> Union["FockState", CollapsedState]:
        """n_orbital: identity on an occupied orbital, collapse otherwise."""
        mask = self._mask(orbital)
        if not self.occupation & mask:
            return CollapsedState(self.site_count)
        return self

    def overlap(self, label: int) -> int:
        """<label|self> in the orthonormal occupation basis."""
        return 1 if self.label == label else 0

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    def with_sign(self, sign: int) -> "FockState":
        """Same occupation, phase multiplied by sign."""
        return FockState(self.site_count, self.occupation, self.sign * sign)

    def occupied(self, orbital: int) -> bool:
        return bool(self.occupation & self._mask(orbital))

    def occupied_orbitals(self) -> List[int]:
        return [k for k in range(self.n_orbitals) if self.occupied(k)]

    @property
    def particle_count(self) -> int:
        return bin(self.occupation).count("1")

    def occupied_between(self, a: int, b: int) -> int:
        """
        Number of occupied orbitals strictly between orbitals a and b.

        This is the length of the Jordan-Wigner string picked up by
        c^dag_a c_b (or c^dag_b c_a).
        """
        self._check_orbital(a)
        self._check_orbital(b)
        lo, hi = min(a, b), max(a, b)
        width = hi - lo - 1
        if width <= 0:
            return 0
        # Orbitals lo+1 .. hi-1 sit at bits (2N - hi) .. (2N - 2 - lo)
        mask = ((1 << width) - 1) << (self.n_orbitals - hi)
        return bin(self.occupation & mask).count("1")

    def to_bits(self) -> List[int]:
        """Occupation numbers in orbital order [n_0, n_1, ..., n_{2N-1}]."""
        return [int(self.occupied(k)) for k in range(self.n_orbitals)]

    def __str__(self) -> str:
        bits = self.to_bits()
        up = "".join(str(b) for b in bits[:self.site_count])
        down = "".join(str(b) for b in bits[self.site_count:])
        prefix = "-" if self.sign < 0 else "+"
        return f"{prefix}|{up};{down}>"


FockKet = Union[FockState, CollapsedState]
