"""
CLI Utilities
=============

Common utilities shared across CLI commands: banner and section
printing, error exit, JSON and whitespace-delimited table output.

Author: Masamichi Iizumi, Tamaki Iizumi
"""

import json
import typer
import numpy as np
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from .. import __version__
from ..core.exceptions import HubbardEDError
from ..solvers.spectrum import SpectrumResult


def print_banner():
    """Print welcome banner."""
    typer.echo(f"""
╔═══════════════════════════════════════════════════════════════╗
║        Block Exact Diagonalization of the Hubbard Model       ║
║                     hubbard-ed v{__version__:<8}                      ║
╚═══════════════════════════════════════════════════════════════╝
    """)


def print_section(title: str, emoji: str = "📦"):
    """Section header, underlined to at least the title width."""
    typer.echo(f"\n{emoji} {title}")
    typer.echo("─" * max(50, len(title) + 3))


def print_key_value(key: str, value: Any, indent: int = 2, precision: int = 6):
    """
    Print "key: value".

    Floats and eigenvalue arrays are shown at fixed precision.
    """
    if isinstance(value, (float, np.floating)):
        value = f"{value:.{precision}f}"
    elif isinstance(value, np.ndarray):
        value = format_values(value, precision)
    spaces = " " * indent
    typer.echo(f"{spaces}{key}: {value}")


def format_values(values, precision: int = 6) -> str:
    """Space-separated fixed-precision numbers."""
    return " ".join(f"{v:.{precision}f}" for v in values)


def save_json(data: dict, output: Path, default_serializer=None):
    """Save data to JSON file."""
    if default_serializer is None:
        def default_serializer(x):
            if isinstance(x, np.ndarray):
                return x.tolist()
            if isinstance(x, (np.floating, np.integer)):
                return x.item()
            raise TypeError(f"Not JSON serializable: {type(x).__name__}")

    output.write_text(json.dumps(data, indent=2, default=default_serializer))
    typer.echo(f"\n💾 Saved to {output}")


def write_table(rows: Iterable, output: Path, precision: int = 12) -> int:
    """
    Write numeric rows, whitespace-delimited, one per line.

    Rows may have different lengths.

    Returns:
        Number of rows written
    """
    n_rows = 0
    with output.open("w") as fh:
        for row in rows:
            fh.write(" ".join(f"{v:.{precision}g}" for v in row))
            fh.write("\n")
            n_rows += 1
    typer.echo(f"\n💾 Wrote {n_rows} rows to {output}")
    return n_rows


def write_eigenvalue_table(result: SpectrumResult, output: Path,
                           precision: int = 12) -> int:
    """One row of eigenvalues per diagonalized block, in sweep order."""
    return write_table((block.eigenvalues for block in result.blocks),
                       output, precision)


def exit_with_error(error: Union[str, Exception], hint: Optional[str] = None):
    """
    Report a failure on stderr and exit with status 1.

    Library errors are prefixed with their class name; eigensolver
    failures also list the labels of the offending block.
    """
    if isinstance(error, HubbardEDError):
        typer.echo(f"❌ {type(error).__name__}: {error}", err=True)
        states = getattr(error, "states", None)
        if states:
            typer.echo(f"   block states: {' '.join(str(s) for s in states)}", err=True)
    else:
        typer.echo(f"❌ {error}", err=True)
    if hint:
        typer.echo(f"   {hint}", err=True)
    raise typer.Exit(1)
