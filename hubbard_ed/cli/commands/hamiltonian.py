"""
Hamiltonian Command
===================

Dump the full 4^N x 4^N Hamiltonian of a small cluster.

Usage:
    hubbard-ed hamiltonian -L 2 -o hamiltonian.dat

Author: Masamichi Iizumi, Tamaki Iizumi
"""

import typer
from pathlib import Path

from ...config import ModelConfig, SolverConfig
from ...core.exceptions import HubbardEDError
from ..utils import print_section, print_key_value, write_table, exit_with_error


def hamiltonian(
    sites: int = typer.Option(2, "-L", "--sites", help="Number of lattice sites"),
    t_hop: float = typer.Option(1.0, "-t", help="Hopping amplitude"),
    U: float = typer.Option(2.0, "-U", help="On-site interaction"),
    geometry: str = typer.Option("complete", "--geometry", help="complete, chain or ring"),
    output: Path = typer.Option(Path("hamiltonian.dat"), "-o", "--output", help="Matrix file (one row per line)"),
    max_sites: int = typer.Option(4, "--max-sites", help="Refuse larger clusters"),
):
    """
    Write <a|H|b> for every pair of basis labels, row a on line a.

    Example:
        hubbard-ed hamiltonian -L 2 -o hamiltonian.dat
    """
    try:
        model = ModelConfig(sites, t_hop, U, geometry).build_model()
        H = SolverConfig(max_full_sites=max_sites).full_hamiltonian(model)
    except HubbardEDError as e:
        exit_with_error(e)

    print_section("Full Hamiltonian", "🧮")
    print_key_value("Dimension", f"{H.shape[0]:,} x {H.shape[1]:,}")
    print_key_value("Nonzeros", f"{H.nnz:,}")

    write_table(H.toarray(), output)
