"""Command runner for coordinating CLI execution.

Manages logging configuration, result output and error handling for command
execution.
"""

from __future__ import annotations

import click

from PaperQuery.cli.commands import Command
from PaperQuery.config import AppConfig
from PaperQuery.utils.log import configure_logging, log


class CommandRunner:
    """Runs one command at the CLI boundary.

    Configures logging from the runtime config, prints the command result on
    stdout and converts failures into `click.Abort`.
    """

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def run(self, action: str, command: Command) -> None:
        """Execute ``command`` and echo its output.

        Args:
            action: The CLI command name (e.g., 'parse').
            command: Command to execute.

        Raises:
            click.Abort: When the command fails.
        """
        log_path = configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        if log_path:
            log.debug("Logging to %s", log_path)
        try:
            output = command.execute()
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("%s failed: %s", action, e)
            raise click.Abort from e
        if output:
            click.echo(output)
