"""
Spectrum Command
================

Full spectrum of a Hubbard cluster by block decomposition.

Usage:
    hubbard-ed spectrum -L 3 -t 1.0 -U 2.0 -o eigenvalues.dat

Author: Masamichi Iizumi, Tamaki Iizumi
"""

import time
import typer
from pathlib import Path
from typing import Optional

from ...config import ModelConfig, SolverConfig
from ...core.exceptions import HubbardEDError
from ..utils import (
    print_banner, print_section, print_key_value, format_values,
    save_json, write_eigenvalue_table, exit_with_error
)


def spectrum(
    sites: int = typer.Option(2, "-L", "--sites", help="Number of lattice sites"),
    t_hop: float = typer.Option(1.0, "-t", help="Hopping amplitude"),
    U: float = typer.Option(2.0, "-U", help="On-site interaction"),
    geometry: str = typer.Option("complete", "--geometry", help="complete, chain or ring"),
    method: str = typer.Option("packed", "--method", help="packed (dsytrd+dsterf) or dense (eigh)"),
    skip_failed: bool = typer.Option(False, "--skip-failed/--fail-fast", help="Skip blocks the eigensolver cannot converge"),
    max_block: Optional[int] = typer.Option(None, "--max-block", help="Refuse blocks larger than this"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Eigenvalue table (one row per block)"),
    json_output: Optional[Path] = typer.Option(None, "--json", help="JSON summary file"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose output"),
):
    """
    Compute the full spectrum block by block.

    Example:
        hubbard-ed spectrum -L 3 -o eigenvalues.dat
    """
    print_banner()

    try:
        model_cfg = ModelConfig(sites, t_hop, U, geometry).validate()
        solver_cfg = SolverConfig(
            method=method,
            on_failure="skip" if skip_failed else "raise",
            max_block_size=max_block,
            verbose=verbose,
        ).validate()
    except HubbardEDError as e:
        exit_with_error(e)

    model = model_cfg.build_model(verbose=verbose)
    driver = solver_cfg.build_driver(model)

    typer.echo("🚀 Block diagonalization")
    typer.echo("─" * 50)
    print_key_value("Sites (L)", sites)
    print_key_value("Basis size", f"{model.basis_size:,}")
    print_key_value("t / U", f"{t_hop} / {U}")
    print_key_value("Geometry", geometry)
    print_key_value("Eigensolver", method)
    typer.echo()

    start = time.time()
    try:
        with typer.progressbar(length=model.basis_size, label="Sweeping") as bar:
            done = [0]

            def advance(n_visited, basis_size):
                bar.update(n_visited - done[0])
                done[0] = n_visited

            result = driver.get_eigenvalues(progress=advance)
    except HubbardEDError as e:
        exit_with_error(e, "Use --skip-failed to continue past failing blocks")
    elapsed = time.time() - start

    print_section("Results", "📊")
    print_key_value("Blocks", result.n_blocks)
    print_key_value("Largest block", max(result.block_sizes) if result.blocks else 0)
    print_key_value("States visited", f"{result.n_states_visited:,}")
    if result.blocks:
        print_key_value("Ground state E0", f"{result.ground_state_energy:.6f}")
        print_key_value("Lowest levels", format_values(result.eigenvalues()[:6]))
    if result.failures:
        print_key_value("Skipped blocks", ", ".join(str(f.seed) for f in result.failures))
    print_key_value("Elapsed", f"{elapsed:.2f}s")

    if output:
        write_eigenvalue_table(result, output)

    if json_output:
        data = {
            'config': {
                'model': model_cfg.to_dict(),
                'solver': solver_cfg.to_dict(),
            },
            'results': {
                'n_blocks': result.n_blocks,
                'block_sizes': result.block_sizes,
                'ground_state_energy': result.ground_state_energy,
                'eigenvalues': result.eigenvalues(),
                'failures': [
                    {'seed': f.seed, 'info': f.info, 'message': f.message}
                    for f in result.failures
                ],
            },
        }
        save_json(data, json_output)

    typer.echo("\n✅ Done!")
