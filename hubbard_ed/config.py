"""
Configuration for hubbard_ed
============================

Dataclass configs for the model and the spectrum sweep. The CLI maps
its options onto these; library users may build them directly.

Author: Masamichi Iizumi, Tamaki Iizumi
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

import scipy.sparse as sp

from .core.exceptions import ConfigError
from .core.hubbard_model import HubbardModel
from .core.lattice import GEOMETRIES, create_geometry
from .solvers.eigensolver import METHODS
from .solvers.spectrum import FAILURE_POLICIES, SpectrumDriver


@dataclass
class ModelConfig:
    """Hubbard model parameters."""
    site_count: int = 2
    hopping_amplitude: float = 1.0
    interaction_strength: float = 2.0
    geometry: str = "complete"

    def validate(self) -> "ModelConfig":
        if not isinstance(self.site_count, int) or self.site_count < 1:
            raise ConfigError(f"site_count must be a positive integer, got {self.site_count}")
        if self.geometry not in GEOMETRIES:
            raise ConfigError(f"geometry must be one of {GEOMETRIES}, got '{self.geometry}'")
        return self

    def build_model(self, verbose: bool = False) -> HubbardModel:
        self.validate()
        return HubbardModel(
            self.site_count,
            hopping_amplitude=self.hopping_amplitude,
            interaction_strength=self.interaction_strength,
            geometry=create_geometry(self.geometry, self.site_count),
            verbose=verbose,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SolverConfig:
    """Spectrum sweep settings."""
    method: str = "packed"            # 'packed' (dsytrd+dsterf) or 'dense' (eigh)
    on_failure: str = "raise"         # 'raise' or 'skip'
    max_block_size: Optional[int] = None
    max_full_sites: int = 6           # build_hamiltonian() limit
    verbose: bool = False

    def validate(self) -> "SolverConfig":
        if self.method not in METHODS:
            raise ConfigError(f"method must be one of {METHODS}, got '{self.method}'")
        if self.on_failure not in FAILURE_POLICIES:
            raise ConfigError(
                f"on_failure must be one of {FAILURE_POLICIES}, got '{self.on_failure}'"
            )
        if self.max_block_size is not None and self.max_block_size < 1:
            raise ConfigError(f"max_block_size must be positive, got {self.max_block_size}")
        if self.max_full_sites < 1:
            raise ConfigError(f"max_full_sites must be positive, got {self.max_full_sites}")
        return self

    def build_driver(self, model: HubbardModel) -> SpectrumDriver:
        """SpectrumDriver for model with these settings."""
        self.validate()
        return SpectrumDriver(
            model,
            method=self.method,
            on_failure=self.on_failure,
            max_block_size=self.max_block_size,
            verbose=self.verbose,
        )

    def full_hamiltonian(self, model: HubbardModel) -> sp.csr_matrix:
        """Whole 4^N Hamiltonian of model, refused beyond max_full_sites."""
        self.validate()
        return model.build_hamiltonian(max_sites=self.max_full_sites)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
