"""
Block Decomposer
================

Breadth-first discovery of one connected block of the Hamiltonian.

Starting from a seed label, repeatedly apply the hopping term and
collect every basis state reachable through nonzero off-diagonal
elements. Since H only connects states inside the same block, the
restriction of H to those states is an exact diagonal block.

The block is returned in LAPACK 'U' packed form, ordered by label:

    elements = [H00, H01, H11, H02, H12, H22, ...]

i.e. column j contributes rows 0..j (see core/packed.py).

Author: Masamichi Iizumi, Tamaki Iizumi
"""

import numpy as np
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..core.hubbard_model import HubbardModel
from ..core.packed import symmetric_from_packed, triangular_number
from ..core.exceptions import BlockSizeError


@dataclass
class SubBlock:
    """
    One diagonal block of the Hamiltonian.

    Attributes:
        states: Unsigned basis labels, ascending
        elements: Packed upper triangle in the order of states
    """
    states: List[int]
    elements: np.ndarray

    @property
    def size(self) -> int:
        return len(self.states)

    @property
    def seed(self) -> int:
        """Smallest label of the block."""
        return self.states[0]

    def to_dense(self) -> np.ndarray:
        """Full symmetric block as a dense matrix."""
        return symmetric_from_packed(self.elements)

    def __repr__(self) -> str:
        return f"SubBlock(size={self.size}, states={self.states[:4]}{'...' if self.size > 4 else ''})"


class BlockDecomposer:
    """
    Finds connected blocks of a HubbardModel.

    Usage:
        decomposer = BlockDecomposer(HubbardModel(3))
        block = decomposer.find_sub_block(9)
        block.states    # [9, 10, 12, 17, 18, 20, 33, 34, 36]
    """

    def __init__(self, model: HubbardModel,
                 max_block_size: Optional[int] = None,
                 verbose: bool = False):
        """
        Args:
            model: Hamiltonian providing interaction / hopping terms
            max_block_size: Abort discovery beyond this many states
            verbose: Print one line per block
        """
        self.model = model
        self.max_block_size = max_block_size
        self.verbose = verbose

    def find_sub_block(self, seed_label: int) -> SubBlock:
        """
        Discover the block containing seed_label.

        Algorithm:
          1. queue = [|seed|], cursor idx = 0
          2. while idx < len(queue):
               linked = hopping targets of queue[idx]
               append labels not seen before
               idx += 1
          3. sort the discovered labels and walk them column by
             column, emitting H[s, current] for every s < current,
             then the diagonal

        The packing happens once the block is complete, so the result
        is the canonical packed order whichever member seeds the
        search. Hopping columns are cached during discovery and reused
        in step 3.

        Args:
            seed_label: Any basis label of the wanted block

        Returns:
            SubBlock with sorted states and packed elements
        """
        seed = abs(seed_label)
        # Validates the label against the basis
        self.model.state(seed)

        queue: List[int] = [seed]
        seen = {seed}
        columns: Dict[int, Dict[int, float]] = {}

        idx = 0
        while idx < len(queue):
            current = queue[idx]
            linked = dict(self.model.hopping_terms(current))
            columns[current] = linked

            for s in linked:
                if s not in seen:
                    seen.add(s)
                    queue.append(s)

            if self.max_block_size is not None and len(queue) > self.max_block_size:
                raise BlockSizeError(
                    f"Block seeded at {seed} exceeds {self.max_block_size} states"
                )
            idx += 1

        sub_states = sorted(queue)
        elements = self._pack(sub_states, columns)

        if self.verbose:
            print(f"   Block seed={seed}: {len(sub_states)} states")

        return SubBlock(states=sub_states, elements=elements)

    def _pack(self, sub_states: List[int],
              columns: Dict[int, Dict[int, float]]) -> np.ndarray:
        """Column-major packed upper triangle of H restricted to sub_states."""
        elems = np.zeros(triangular_number(len(sub_states)), dtype=np.float64)

        pos = 0
        for j, current in enumerate(sub_states):
            linked = columns[current]
            for s in sub_states[:j]:
                elems[pos] = linked.get(s, 0.0)
                pos += 1
            elems[pos] = self.model.interaction(current)
            pos += 1

        return elems


def find_sub_block(model: HubbardModel, seed_label: int) -> SubBlock:
    """Convenience wrapper: BlockDecomposer(model).find_sub_block(seed)."""
    return BlockDecomposer(model).find_sub_block(seed_label)
