"""
hubbard_ed Solvers
==================

Block discovery, packed eigensolver and the full-basis sweep.

Author: Masamichi Iizumi, Tamaki Iizumi
"""

from .block_decomposer import (
    SubBlock,
    BlockDecomposer,
    find_sub_block,
)

from .eigensolver import (
    EigenResult,
    METHODS,
    solve_packed,
)

from .spectrum import (
    BlockSpectrum,
    BlockFailure,
    SpectrumResult,
    SpectrumDriver,
    FAILURE_POLICIES,
    get_eigenvalues,
)

__all__ = [
    'SubBlock',
    'BlockDecomposer',
    'find_sub_block',
    'EigenResult',
    'METHODS',
    'solve_packed',
    'BlockSpectrum',
    'BlockFailure',
    'SpectrumResult',
    'SpectrumDriver',
    'FAILURE_POLICIES',
    'get_eigenvalues',
]
