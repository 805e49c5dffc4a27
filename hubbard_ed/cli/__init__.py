"""
hubbard-ed CLI
==============

Command-line interface for block exact diagonalization.

Usage:
    hubbard-ed info
    hubbard-ed spectrum -L 3 -t 1.0 -U 2.0 -o eigenvalues.dat
    hubbard-ed block -L 3 --seed 9
    hubbard-ed hamiltonian -L 2 -o hamiltonian.dat
    hubbard-ed verify -L 2

Architecture:
    cli/
    ├── __init__.py       # This file - app definition
    ├── commands/         # Individual command modules
    │   ├── info.py
    │   ├── spectrum.py
    │   ├── block.py
    │   ├── hamiltonian.py
    │   └── verify.py
    └── utils.py          # Shared utilities

Author: Masamichi Iizumi, Tamaki Iizumi
"""

import typer

# Create CLI app
app = typer.Typer(
    name="hubbard-ed",
    help="Block exact diagonalization of the Hubbard model",
    add_completion=False,
    no_args_is_help=True,
)


# =============================================================================
# Register Commands
# =============================================================================

from .commands import COMMANDS

for command in COMMANDS:
    app.command()(command)


# =============================================================================
# Main Entry Point
# =============================================================================

def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
