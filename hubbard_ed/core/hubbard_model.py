"""
Hubbard Model for hubbard_ed
============================

Matrix elements of the Hubbard Hamiltonian, computed on the fly from
Fock-state operator actions.

Hamiltonian:
  H = t sum_{(i,j), s} c^dag_{i s} c_{j s} + U sum_i n_{i up} n_{i down}

  - (i, j) runs over the ordered hopping pairs of the geometry
    (all pairs of distinct sites by default)
  - hops conserve spin, so up and down channels never mix

Fermionic sign:
  With orbitals ordered 0..2N-1, c^dag_a c_b acting on a basis ket
  picks up (-1)^(number of occupied orbitals strictly between a and b).
  The sign is folded into the resulting label.

This is a thin layer over core/fock_state.py; it never stores a
matrix except in build_hamiltonian(), which exists to cross-check the
block decomposition on small clusters.

Author: Masamichi Iizumi, Tamaki Iizumi
"""

import numpy as np
import scipy.sparse as sp
from typing import Dict, List, Optional, Tuple

from .fock_state import FockState
from .lattice import SystemGeometry, create_complete
from .exceptions import BlockSizeError, ConfigError


class HubbardModel:
    """
    Hubbard Hamiltonian on a small cluster.

    Attributes:
        site_count: Number of lattice sites N
        hopping_amplitude: t
        interaction_strength: U
        geometry: Allowed hopping pairs
        basis_size: Fock space dimension 4^N

    Usage:
        model = HubbardModel(2, hopping_amplitude=1.0, interaction_strength=2.0)
        model.interaction(15)   # 4.0
        model.kinetic(5)        # [6, 9]
    """

    def __init__(self,
                 site_count: int,
                 hopping_amplitude: float = 1.0,
                 interaction_strength: float = 2.0,
                 geometry: Optional[SystemGeometry] = None,
                 verbose: bool = False):
        """
        Args:
            site_count: Number of lattice sites
            hopping_amplitude: Hopping matrix element t
            interaction_strength: On-site repulsion U
            geometry: Site connectivity (default: fully connected)
            verbose: Print model summary
        """
        if int(site_count) != site_count or site_count < 1:
            raise ConfigError(f"site_count must be a positive integer, got {site_count}")

        self.site_count = int(site_count)
        self.hopping_amplitude = float(hopping_amplitude)
        self.interaction_strength = float(interaction_strength)
        self.geometry = geometry if geometry is not None else create_complete(self.site_count)
        self.verbose = verbose

        if self.geometry.n_sites != self.site_count:
            raise ConfigError(
                f"Geometry has {self.geometry.n_sites} sites but "
                f"model has {self.site_count}"
            )

        self._pairs = self.geometry.hopping_pairs()

        if self.verbose:
            print(f"HubbardModel: N={self.site_count}, dim={self.basis_size:,}")
            print(f"   t={self.hopping_amplitude}, U={self.interaction_strength}, "
                  f"geometry={self.geometry.name} ({len(self._pairs)} hops/spin)")

    @property
    def basis_size(self) -> int:
        return 4 ** self.site_count

    def state(self, label: int) -> FockState:
        """Fresh basis ket for a signed label."""
        return FockState.from_label(self.site_count, label)

    # =========================================================================
    # Diagonal term
    # =========================================================================

    def interaction(self, label: int) -> float:
        """
        On-site interaction <label|U sum_i n_up n_down|label>.

        Each site starts from a fresh ket; the two number operators
        collapse it unless both orbitals are occupied.
        """
        base = self.state(label)
        coefficient = 0.0

        for site in range(self.site_count):
            ket = base.number(base.up(site)).number(base.down(site))
            coefficient += self.interaction_strength * ket.overlap(label)

        return coefficient

    # =========================================================================
    # Off-diagonal term
    # =========================================================================

    def _hops(self, base: FockState):
        """Yield every surviving c^dag_i c_j |base>, sign included."""
        for (i, j) in self._pairs:
            for orb_i, orb_j in ((base.up(i), base.up(j)),
                                 (base.down(i), base.down(j))):
                hopped = base.destroy(orb_j).create(orb_i)
                if hopped.is_collapsed:
                    continue
                if base.occupied_between(orb_i, orb_j) % 2:
                    hopped = hopped.with_sign(-1)
                yield hopped

    def kinetic(self, label: int) -> List[int]:
        """
        Basis labels reachable from label by one hop.

        Returns:
            Signed labels, deduplicated and sorted by absolute value.
            The sign of the input label propagates to every output.
        """
        found: Dict[int, int] = {}
        for hopped in self._hops(self.state(label)):
            found.setdefault(hopped.occupation, hopped.label)

        return [found[occ] for occ in sorted(found)]

    def hopping_terms(self, label: int) -> List[Tuple[int, float]]:
        """
        Nonzero off-diagonal elements in the column of |label|.

        Returns:
            [(target, <target|H_kin|label>)] with unsigned targets,
            sorted by target
        """
        return [(abs(target), self.hopping_amplitude * (1 if target > 0 else -1))
                for target in self.kinetic(abs(label))]

    # =========================================================================
    # Full matrix (validation only)
    # =========================================================================

    def matrix_element(self, bra: int, ket: int) -> float:
        """<bra|H|ket> for two signed basis labels."""
        phase = (-1 if bra < 0 else 1) * (-1 if ket < 0 else 1)
        bra, ket = abs(bra), abs(ket)

        if bra == ket:
            return phase * self.interaction(ket)

        for target, amplitude in self.hopping_terms(ket):
            if target == bra:
                return phase * amplitude
        return 0.0

    def build_hamiltonian(self, max_sites: int = 6) -> sp.csr_matrix:
        """
        Assemble the whole 4^N x 4^N Hamiltonian.

        Meant for cross-checking block spectra on small clusters.

        Args:
            max_sites: Refuse larger clusters

        Returns:
            Sparse Hamiltonian in CSR format, H[a, b] = <a|H|b>
        """
        if self.site_count > max_sites:
            raise BlockSizeError(
                f"Full Hamiltonian for N={self.site_count} has dimension "
                f"{self.basis_size:,}; limit is N={max_sites}"
            )

        rows, cols, data = [], [], []
        for ket in range(self.basis_size):
            diagonal = self.interaction(ket)
            if diagonal != 0.0:
                rows.append(ket)
                cols.append(ket)
                data.append(diagonal)
            for bra, amplitude in self.hopping_terms(ket):
                rows.append(bra)
                cols.append(ket)
                data.append(amplitude)

        H = sp.csr_matrix(
            (np.asarray(data, dtype=np.float64), (rows, cols)),
            shape=(self.basis_size, self.basis_size),
        )

        if self.verbose:
            print(f"   Full H: {H.shape[0]:,} x {H.shape[1]:,}, nnz={H.nnz:,}")
        return H

    def __repr__(self) -> str:
        return (f"HubbardModel(N={self.site_count}, t={self.hopping_amplitude}, "
                f"U={self.interaction_strength}, geometry={self.geometry.name})")
