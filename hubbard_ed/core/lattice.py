"""
Lattice Geometry for hubbard_ed
===============================

Which site pairs an electron may hop between.

Geometries:
  - complete: every site connected to every other site (default)
  - chain:    open 1D chain, i <-> i+1
  - ring:     periodic 1D chain, i <-> (i+1) mod L

The Hamiltonian only needs the ordered hopping pairs (i, j), meaning
"destroy at j, create at i". Each undirected bond contributes both
directions.

Author: Masamichi Iizumi, Tamaki Iizumi
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from .exceptions import ConfigError


GEOMETRIES = ("complete", "chain", "ring")


@dataclass
class SystemGeometry:
    """
    Site connectivity of the cluster.

    Attributes:
        n_sites: Number of lattice sites
        bonds: Undirected (i, j) pairs of connected sites
        name: Geometry family this was built from
    """
    n_sites: int
    bonds: List[Tuple[int, int]]
    name: str = "custom"
    _pairs: List[Tuple[int, int]] = field(default=None, init=False, repr=False)

    def __post_init__(self):
        for (i, j) in self.bonds:
            if i == j:
                raise ConfigError(f"Self-bond ({i}, {j}) is not a hop")
            if not (0 <= i < self.n_sites and 0 <= j < self.n_sites):
                raise ConfigError(
                    f"Bond ({i}, {j}) outside {self.n_sites}-site cluster"
                )

    @property
    def n_bonds(self) -> int:
        return len(self.bonds)

    def hopping_pairs(self) -> List[Tuple[int, int]]:
        """
        Ordered (i, j) pairs, i != j, sorted by (i, j).

        For the complete geometry this is all N(N-1) ordered pairs.
        """
        if self._pairs is None:
            pairs = set()
            for (i, j) in self.bonds:
                pairs.add((i, j))
                pairs.add((j, i))
            self._pairs = sorted(pairs)
        return self._pairs

    def __repr__(self) -> str:
        return f"SystemGeometry({self.name}, N={self.n_sites}, {self.n_bonds} bonds)"


# =============================================================================
# Factory functions
# =============================================================================

def create_complete(L: int) -> SystemGeometry:
    """Fully connected cluster: every pair of distinct sites is a bond."""
    bonds = [(i, j) for i in range(L) for j in range(i + 1, L)]
    return SystemGeometry(n_sites=L, bonds=bonds, name="complete")


def create_chain(L: int, periodic: bool = False) -> SystemGeometry:
    """
    Create 1D chain geometry.

    Args:
        L: Number of sites
        periodic: Close the chain into a ring

    Returns:
        SystemGeometry for the chain
    """
    if periodic and L > 2:
        bonds = [(i, (i + 1) % L) for i in range(L)]
    else:
        bonds = [(i, i + 1) for i in range(L - 1)]

    return SystemGeometry(n_sites=L, bonds=bonds,
                          name="ring" if periodic else "chain")


def create_geometry(name: str, L: int) -> SystemGeometry:
    """Build a geometry by name ('complete', 'chain' or 'ring')."""
    if L < 1:
        raise ConfigError(f"Number of sites must be positive, got {L}")
    if name == "complete":
        return create_complete(L)
    if name == "chain":
        return create_chain(L, periodic=False)
    if name == "ring":
        return create_chain(L, periodic=True)
    raise ConfigError(
        f"Unknown geometry '{name}'. Available: {', '.join(GEOMETRIES)}"
    )
