"""
Block Command
=============

Inspect the block containing one basis label.

Usage:
    hubbard-ed block -L 3 --seed 9

Author: Masamichi Iizumi, Tamaki Iizumi
"""

import typer
import numpy as np

from ...config import ModelConfig
from ...core.exceptions import HubbardEDError
from ...core.packed import expand_to_dense
from ...solvers.block_decomposer import BlockDecomposer
from ...solvers.eigensolver import solve_packed
from ..utils import print_section, print_key_value, format_values, exit_with_error


def block(
    sites: int = typer.Option(2, "-L", "--sites", help="Number of lattice sites"),
    seed: int = typer.Option(1, "--seed", help="Basis label inside the block"),
    t_hop: float = typer.Option(1.0, "-t", help="Hopping amplitude"),
    U: float = typer.Option(2.0, "-U", help="On-site interaction"),
    geometry: str = typer.Option("complete", "--geometry", help="complete, chain or ring"),
    show_matrix: bool = typer.Option(True, "--matrix/--no-matrix", help="Print the packed block as a matrix"),
):
    """
    Show the states, matrix and eigenvalues of one block.

    Example:
        hubbard-ed block -L 3 --seed 9
    """
    try:
        model = ModelConfig(sites, t_hop, U, geometry).build_model()
        sub_block = BlockDecomposer(model).find_sub_block(seed)
        eig = solve_packed(sub_block.elements, sub_block.size)
    except HubbardEDError as e:
        exit_with_error(e)

    print_section(f"Block of label {seed}", "🧱")
    print_key_value("Size", sub_block.size)
    print_key_value("States", " ".join(str(s) for s in sub_block.states))
    for s in sub_block.states:
        print_key_value(str(s), model.state(s), indent=4)

    if show_matrix:
        print_section("Upper triangle", "🔢")
        with np.printoptions(precision=3, suppress=True, linewidth=120):
            typer.echo(expand_to_dense(sub_block.elements))

    print_section("Eigenvalues", "📊")
    typer.echo(f"  {format_values(eig.eigenvalues)}")
