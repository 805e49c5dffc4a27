"""
Verify Command
==============

Cross-check the block spectrum against the full Hamiltonian.

Usage:
    hubbard-ed verify -L 2

Author: Masamichi Iizumi, Tamaki Iizumi
"""

import typer
import numpy as np
from scipy.linalg import eigh

from ...config import ModelConfig, SolverConfig
from ...core.exceptions import HubbardEDError
from ..utils import print_section, print_key_value, exit_with_error


def verify(
    sites: int = typer.Option(2, "-L", "--sites", help="Number of lattice sites"),
    t_hop: float = typer.Option(1.0, "-t", help="Hopping amplitude"),
    U: float = typer.Option(2.0, "-U", help="On-site interaction"),
    geometry: str = typer.Option("complete", "--geometry", help="complete, chain or ring"),
    tol: float = typer.Option(1e-9, "--tol", help="Maximum allowed eigenvalue deviation"),
    max_sites: int = typer.Option(5, "--max-sites", help="Refuse larger clusters"),
):
    """
    Compare block eigenvalues with a dense diagonalization of H.

    Example:
        hubbard-ed verify -L 3
    """
    try:
        model = ModelConfig(sites, t_hop, U, geometry).build_model()
        solver_cfg = SolverConfig(max_full_sites=max_sites).validate()
        H = solver_cfg.full_hamiltonian(model)
        result = solver_cfg.build_driver(model).get_eigenvalues()
    except HubbardEDError as e:
        exit_with_error(e)

    H_dense = H.toarray()
    asymmetry = float(np.max(np.abs(H_dense - H_dense.T)))
    full = eigh(H_dense, eigvals_only=True)
    blocks = result.eigenvalues()
    deviation = float(np.max(np.abs(full - blocks)))

    print_section("Verification", "🔬")
    print_key_value("Basis size", f"{model.basis_size:,}")
    print_key_value("Blocks", result.n_blocks)
    print_key_value("max |H - H^T|", f"{asymmetry:.2e}")
    print_key_value("max |ΔE|", f"{deviation:.2e}")

    if deviation > tol or asymmetry > tol:
        exit_with_error(f"Block spectrum deviates from full diagonalization ({deviation:.2e})")

    typer.echo("\n✅ Block spectrum matches full diagonalization")
