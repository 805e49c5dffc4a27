"""
Errors for hubbard_ed
=====================

Every failure raised by the package derives from HubbardEDError so
callers can catch the whole family at once, or pick the specific
kind they know how to recover from.

Author: Masamichi Iizumi, Tamaki Iizumi
"""

from typing import Optional, Sequence


class HubbardEDError(Exception):
    """Base class for all hubbard_ed errors."""


class OrbitalIndexError(HubbardEDError, IndexError):
    """Operator applied to an orbital outside [0, 2 * site_count)."""

    def __init__(self, orbital: int, n_orbitals: int):
        self.orbital = orbital
        self.n_orbitals = n_orbitals
        super().__init__(
            f"Orbital index {orbital} out of range for "
            f"{n_orbitals} spin-orbitals"
        )


class LabelRangeError(HubbardEDError, ValueError):
    """Basis label does not fit in the Fock space of the model."""


class PackedLengthError(HubbardEDError, ValueError):
    """Packed array length is not a triangular number."""


class BlockSizeError(HubbardEDError, RuntimeError):
    """Block or basis larger than the configured limit."""


class ConfigError(HubbardEDError, ValueError):
    """Invalid model or solver configuration."""


class EigensolverError(HubbardEDError, RuntimeError):
    """
    LAPACK reported a nonzero status for one block.

    Attributes:
        info: LAPACK status code (negative: bad argument,
              positive: no convergence)
        states: Basis labels of the failing block, if known
    """

    def __init__(self, info: int, n: int,
                 states: Optional[Sequence[int]] = None,
                 routine: str = "dsterf"):
        self.info = int(info)
        self.n = n
        self.states = list(states) if states is not None else None
        self.routine = routine

        if self.info < 0:
            reason = f"argument {-self.info} had an illegal value"
        else:
            reason = f"{self.info} off-diagonal elements failed to converge"
        super().__init__(f"{routine} failed on {n}x{n} block: {reason}")

    def with_states(self, states: Sequence[int]) -> "EigensolverError":
        """Return a copy of this error tagged with the block's labels."""
        return EigensolverError(self.info, self.n, states, self.routine)
