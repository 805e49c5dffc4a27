"""
hubbard_ed Core Components
==========================

Foundation modules: Fock-space algebra and the Hubbard Hamiltonian.

Modules:
  - packed: LAPACK packed triangle codec
  - fock_state: Bit-packed basis kets and c^dag / c / n operators
  - lattice: Hopping geometries
  - hubbard_model: Interaction and hopping matrix elements
  - exceptions: Error hierarchy

Author: Masamichi Iizumi, Tamaki Iizumi
"""

from .exceptions import (
    HubbardEDError,
    OrbitalIndexError,
    LabelRangeError,
    PackedLengthError,
    BlockSizeError,
    ConfigError,
    EigensolverError,
)

from .packed import (
    triangular_number,
    is_triangular,
    dimension_of,
    packed_index,
    expand_to_dense,
    symmetric_from_packed,
    pack_upper,
)

from .fock_state import (
    FockState,
    CollapsedState,
    FockKet,
)

from .lattice import (
    SystemGeometry,
    GEOMETRIES,
    create_complete,
    create_chain,
    create_geometry,
)

from .hubbard_model import HubbardModel


__all__ = [
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

    # Fock states
    'FockState',
    'CollapsedState',
    'FockKet',

    # Lattice
    'SystemGeometry',
    'GEOMETRIES',
    'create_complete',
    'create_chain',
    'create_geometry',

    # Model
    'HubbardModel',
]
