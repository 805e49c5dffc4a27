"""
CLI Commands
============

All CLI commands for hubbard-ed.

Commands:
  - info: Show version and basis encoding
  - spectrum: Full spectrum by block decomposition
  - block: Inspect a single block
  - hamiltonian: Dump the full Hamiltonian matrix
  - verify: Compare block spectrum with the full Hamiltonian

Author: Masamichi Iizumi, Tamaki Iizumi
"""

from .info import info
from .spectrum import spectrum
from .block import block
from .hamiltonian import hamiltonian
from .verify import verify

# Registration order is the order shown by --help
COMMANDS = (info, spectrum, block, hamiltonian, verify)

__all__ = [
    'info',
    'spectrum',
    'block',
    'hamiltonian',
    'verify',
    'COMMANDS',
]
