"""
hubbard_ed: Block Exact Diagonalization of the Hubbard Model
============================================================

Exact spectrum of a small Hubbard cluster over its full Fock space.

Pipeline:
  FockState operators  ->  HubbardModel matrix elements
                       ->  BlockDecomposer (BFS over hops, packed block)
                       ->  solve_packed (LAPACK dsytrd + dsterf)
                       ->  SpectrumDriver (one sweep over 4^N labels)

Structure:
  hubbard_ed/
  ├── core/
  │   ├── packed.py          # Packed triangle codec
  │   ├── fock_state.py      # Basis kets and operators
  │   ├── lattice.py         # Hopping geometries
  │   ├── hubbard_model.py   # Matrix elements
  │   └── exceptions.py      # Error hierarchy
  ├── solvers/
  │   ├── block_decomposer.py
  │   ├── eigensolver.py
  │   └── spectrum.py
  ├── config.py              # ModelConfig / SolverConfig
  ├── cli/                   # hubbard-ed command line
  └── tests/

Example:
    >>> from hubbard_ed import HubbardModel, SpectrumDriver
    >>> result = SpectrumDriver(HubbardModel(2, 1.0, 2.0)).get_eigenvalues()
    >>> result.n_states_visited
    16

Author: Masamichi Iizumi, Tamaki Iizumi
"""

__version__ = "0.1.0"

# =============================================================================
# Core
# =============================================================================

from .core import (
    HubbardEDError,
    OrbitalIndexError,
    LabelRangeError,
    PackedLengthError,
    BlockSizeError,
    ConfigError,
    EigensolverError,
    triangular_number,
    is_triangular,
    dimension_of,
    packed_index,
    expand_to_dense,
    symmetric_from_packed,
    pack_upper,
    FockState,
    CollapsedState,
    SystemGeometry,
    create_complete,
    create_chain,
    create_geometry,
    HubbardModel,
)

# =============================================================================
# Solvers
# =============================================================================

from .solvers import (
    SubBlock,
    BlockDecomposer,
    find_sub_block,
    EigenResult,
    solve_packed,
    BlockSpectrum,
    BlockFailure,
    SpectrumResult,
    SpectrumDriver,
    get_eigenvalues,
)

from .config import ModelConfig, SolverConfig


__all__ = [
    '__version__',

    # Errors
    'HubbardEDError',
    'OrbitalIndexError',
    'LabelRangeError',
    'PackedLengthError',
    'BlockSizeError',
    'ConfigError',
    'EigensolverError',

    # Packed codec
    'triangular_number',
    'is_triangular',
    'dimension_of',
    'packed_index',
    'expand_to_dense',
    'symmetric_from_packed',
    'pack_upper',

    # Fock space
    'FockState',
    'CollapsedState',
    'SystemGeometry',
    'create_complete',
    'create_chain',
    'create_geometry',
    'HubbardModel',

    # Solvers
    'SubBlock',
    'BlockDecomposer',
    'find_sub_block',
    'EigenResult',
    'solve_packed',
    'BlockSpectrum',
    'BlockFailure',
    'SpectrumResult',
    'SpectrumDriver',
    'get_eigenvalues',

    # Config
    'ModelConfig',
    'SolverConfig',
]
