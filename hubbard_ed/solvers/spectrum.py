"""
Spectrum Driver
===============

Full spectrum of a HubbardModel via block decomposition.

Sweep:
    for label in 0 .. 4^N - 1:
        if label already belongs to a block: skip
        block = find_sub_block(label)
        eigenvalues = solve_packed(block.elements)
        mark every state of block as visited

Every basis label ends up in exactly one block, so the concatenated
block spectra are the spectrum of the full 4^N x 4^N Hamiltonian.

Failure policy for one block (LAPACK nonzero status):
  - 'raise': propagate EigensolverError, aborting the sweep
  - 'skip':  record a BlockFailure, warn, continue with the next block

Author: Masamichi Iizumi, Tamaki Iizumi
"""

import warnings
import numpy as np
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Set

from ..core.hubbard_model import HubbardModel
from ..core.exceptions import ConfigError, EigensolverError
from .block_decomposer import BlockDecomposer, SubBlock
from .eigensolver import METHODS, solve_packed


FAILURE_POLICIES = ("raise", "skip")


@dataclass
class BlockSpectrum:
    """Eigenvalues of one block together with its basis labels."""
    states: List[int]
    eigenvalues: np.ndarray
    info: int = 0

    @property
    def size(self) -> int:
        return len(self.states)


@dataclass
class BlockFailure:
    """A block whose diagonalization failed and was skipped."""
    seed: int
    states: List[int]
    info: int
    message: str


@dataclass
class SpectrumResult:
    """
    Result of a full basis sweep.

    Attributes:
        blocks: Successfully diagonalized blocks, in sweep order
        failures: Skipped blocks (only with on_failure='skip')
        basis_size: 4^N
        n_states_visited: Labels assigned to some block
    """
    blocks: List[BlockSpectrum] = field(default_factory=list)
    failures: List[BlockFailure] = field(default_factory=list)
    basis_size: int = 0
    n_states_visited: int = 0

    @property
    def n_blocks(self) -> int:
        return len(self.blocks)

    @property
    def block_sizes(self) -> List[int]:
        return [block.size for block in self.blocks]

    @property
    def complete(self) -> bool:
        """True if every block was diagonalized."""
        return not self.failures and self.n_states_visited == self.basis_size

    def eigenvalues(self) -> np.ndarray:
        """All block eigenvalues merged and sorted."""
        if not self.blocks:
            return np.zeros(0)
        return np.sort(np.concatenate([b.eigenvalues for b in self.blocks]))

    @property
    def ground_state_energy(self) -> Optional[float]:
        """Lowest eigenvalue, or None if no block was diagonalized."""
        if not self.blocks:
            return None
        return float(self.eigenvalues()[0])


class SpectrumDriver:
    """
    Iterates the Fock basis and diagonalizes each connected block.

    Usage:
        driver = SpectrumDriver(HubbardModel(3, 1.0, 2.0))
        result = driver.get_eigenvalues()
        print(result.ground_state_energy)
    """

    def __init__(self, model: HubbardModel,
                 method: str = "packed",
                 on_failure: str = "raise",
                 max_block_size: Optional[int] = None,
                 verbose: bool = False):
        """
        Args:
            model: Hamiltonian to diagonalize
            method: Eigensolver path ('packed' or 'dense')
            on_failure: 'raise' or 'skip' for eigensolver failures
            max_block_size: Refuse blocks with more states than this
            verbose: Print sweep progress
        """
        if method not in METHODS:
            raise ConfigError(f"method must be one of {METHODS}, got '{method}'")
        if on_failure not in FAILURE_POLICIES:
            raise ConfigError(
                f"on_failure must be one of {FAILURE_POLICIES}, got '{on_failure}'"
            )

        self.model = model
        self.method = method
        self.on_failure = on_failure
        self.verbose = verbose
        self.decomposer = BlockDecomposer(model, max_block_size=max_block_size)

    def iter_blocks(self, visited: Optional[Set[int]] = None):
        """
        Yield each new block of the basis sweep.

        The visited set is updated before each block is yielded, so a
        consumer may stop early and resume with the same set.
        """
        if visited is None:
            visited = set()

        for label in range(self.model.basis_size):
            if label in visited:
                continue
            block = self.decomposer.find_sub_block(label)
            visited.update(block.states)
            yield block

    def solve_block(self, block: SubBlock) -> BlockSpectrum:
        """Diagonalize one block; EigensolverError is tagged with its states."""
        try:
            result = solve_packed(block.elements, block.size, method=self.method)
        except EigensolverError as exc:
            raise exc.with_states(block.states) from exc
        return BlockSpectrum(states=block.states,
                             eigenvalues=result.eigenvalues,
                             info=result.info)

    def get_eigenvalues(self,
                        progress: Optional[Callable[[int, int], None]] = None
                        ) -> SpectrumResult:
        """
        Sweep the whole basis and diagonalize every block.

        Args:
            progress: Called as progress(n_visited, basis_size) after
                      each block

        Returns:
            SpectrumResult with per-block eigenvalues
        """
        basis_size = self.model.basis_size
        result = SpectrumResult(basis_size=basis_size)
        visited: Set[int] = set()

        if self.verbose:
            print(f"🔍 Block sweep over {basis_size:,} basis states ({self.method})")

        for block in self.iter_blocks(visited):
            try:
                result.blocks.append(self.solve_block(block))
            except EigensolverError as exc:
                if self.on_failure == "raise":
                    raise
                warnings.warn(f"Skipping block seeded at {block.seed}: {exc}",
                              RuntimeWarning, stacklevel=2)
                result.failures.append(BlockFailure(
                    seed=block.seed, states=block.states,
                    info=exc.info, message=str(exc),
                ))

            result.n_states_visited = len(visited)
            if progress is not None:
                progress(result.n_states_visited, basis_size)

        if self.verbose:
            sizes = result.block_sizes
            print(f"   {result.n_blocks} blocks, largest {max(sizes) if sizes else 0} states")
            if result.failures:
                print(f"   ⚠️  {len(result.failures)} blocks skipped")
            if result.blocks:
                print(f"   E0 = {result.ground_state_energy:.6f}")

        return result


def get_eigenvalues(model: HubbardModel, method: str = "packed",
                    on_failure: str = "raise") -> SpectrumResult:
    """Convenience wrapper around SpectrumDriver.get_eigenvalues()."""
    return SpectrumDriver(model, method=method, on_failure=on_failure).get_eigenvalues()
