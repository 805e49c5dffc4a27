"""
Info Command
============

Show version and basis encoding.

Usage:
    hubbard-ed info

Author: Masamichi Iizumi, Tamaki Iizumi
"""

import typer

from ... import __version__
from ...core.lattice import GEOMETRIES
from ...solvers.eigensolver import METHODS
from ..utils import print_banner, print_section, print_key_value


def info():
    """Show version and basis encoding."""
    print_banner()

    print_section("Package Information", "📦")
    print_key_value("Version", __version__)
    print_key_value("Package", "hubbard-ed")
    print_key_value("Geometries", ", ".join(GEOMETRIES))
    print_key_value("Eigensolvers", ", ".join(METHODS))

    print_section("Basis Encoding", "🔢")
    typer.echo("  N sites -> 2N spin-orbitals, basis size 4^N")
    typer.echo("  orbital k < N  : spin up on site k")
    typer.echo("  orbital k >= N : spin down on site k - N")
    typer.echo("  orbital k is bit (2N - 1 - k) of the label (orbital 0 = MSB)")

    print_section("Hamiltonian", "⚛️")
    typer.echo("  H = t Σ c†_{i s} c_{j s} + U Σ n_{i↑} n_{i↓}")
    typer.echo("  Blocks = states connected by hops, packed column-major ('U')")
