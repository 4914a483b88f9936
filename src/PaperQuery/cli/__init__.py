"""CLI package for PaperQuery command orchestration.

This package contains the click command definitions, the command
implementations and the runner that handles logging and errors.
"""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from PaperQuery.cli.runner import CommandRunner
from PaperQuery.cli.ui import cli


def main() -> None:
    """Run PaperQuery CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
