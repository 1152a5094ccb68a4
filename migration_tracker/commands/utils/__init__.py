"""
Utility commands for the migration tracker CLI.
Provides helper commands for system operations and diagnostics.
"""

import click
from sqlalchemy import text

from ...cli.base import BaseCommand, command_error_handler
from ...cli.config import Config

class TestConnectionCommand(BaseCommand):
    """Command to test database connectivity."""

    def __init__(self, config: Config):
        super().__init__(config)

    @command_error_handler
    def execute(self) -> None:
        """Execute the connection test."""
        self.logger.info("Testing database connection...")

        with self.session_manager as session:
            session.execute(text("SELECT 1")).scalar()

        click.secho(
            "Successfully connected to the database!",
            fg='green'
        )

class InitDatabaseCommand(BaseCommand):
    """Command to create the tracker tables."""

    @command_error_handler
    def execute(self) -> None:
        """Create any tables that do not exist yet."""
        self.logger.info("Creating database schema...")
        self.session_manager.create_schema()
        click.secho("Database schema is up to date", fg='green')

__all__ = ['TestConnectionCommand', 'InitDatabaseCommand']
