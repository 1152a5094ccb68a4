"""
Base command infrastructure for the migration tracker CLI.
Provides common functionality and utilities for all commands.
"""

import functools
import json
import click
import logging
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

from .config import Config
from ..db.session import SessionManager
from ..processors.error_tracker import ErrorTracker

class BaseCommand(ABC):
    """Base class for all CLI commands."""

    def __init__(self, config: Config):
        self.config = config
        self.logger = logging.getLogger(self.__class__.__name__)
        self.error_tracker = ErrorTracker()
        self._session_manager = None

        # Get debug status from click context
        ctx = click.get_current_context(silent=True)
        self.debug = bool(ctx and ctx.obj and ctx.obj.get('debug'))
        if self.debug:
            self.logger.debug(f"Debug mode enabled for {self.__class__.__name__}")

    @property
    def session_manager(self) -> SessionManager:
        """Get or create the session manager for the configured database."""
        if self._session_manager is None:
            if self.debug:
                self.logger.debug(f"Creating new engine for {self.config.database_url}")
            self._session_manager = SessionManager(self.config.database_url)
        return self._session_manager

    @abstractmethod
    def execute(self) -> None:
        """Execute the command. Must be implemented by subclasses."""
        pass

    def validate(self) -> bool:
        """Validate command configuration and requirements.

        Returns:
            bool: True if validation passes, False otherwise
        """
        if self.debug:
            self.logger.debug("Validating command configuration")
        try:
            return self.config.validate()
        except ValueError as e:
            self.logger.error(f"Invalid configuration: {e}")
            return False

    def emit(self, payload: Dict[str, Any], output_file: Optional[Path] = None) -> None:
        """Write a JSON result to ``output_file`` or, in json output mode, to stdout."""
        if output_file:
            with open(output_file, 'w') as f:
                json.dump(payload, f, indent=2, default=str)
            click.echo(f"\nDetailed results saved to {output_file}")
        elif self.config.output_format == 'json':
            click.echo(json.dumps(payload, indent=2, default=str))

class FileInputCommand(BaseCommand):
    """Base class for commands that process input files."""

    def __init__(self, config: Config, input_file: Path, output_file: Optional[Path] = None):
        super().__init__(config)
        self.input_file = input_file
        self.output_file = output_file

    def validate(self) -> bool:
        """Validate input file exists and is readable."""
        if not super().validate():
            return False

        if not self.input_file.exists():
            self.logger.error(f"Input file not found: {self.input_file}")
            return False

        if not self.input_file.is_file():
            self.logger.error(f"Input path is not a file: {self.input_file}")
            return False

        return True

def command_error_handler(f):
    """Decorator to handle command execution errors consistently.

    Any failure is recorded, logged and reported to the user as a single
    error line with a non-zero exit code.
    """
    @functools.wraps(f)
    def wrapper(self, *args, **kwargs):
        start = time.time()
        try:
            if self.debug:
                self.logger.debug(f"Starting command execution: {f.__name__}")

            result = f(self, *args, **kwargs)

            if self.debug:
                self.logger.debug(f"Command completed in {time.time() - start:.3f}s")

            return result

        except click.ClickException:
            raise
        except Exception as e:
            self.error_tracker.add_error(
                'COMMAND_EXECUTION_ERROR',
                f"Command failed: {str(e)}",
                {
                    'command': self.__class__.__name__,
                    'error': type(e).__name__
                }
            )
            if self.debug:
                self.logger.debug(f"Command failed with error: {str(e)}", exc_info=True)
            raise click.ClickException(str(e)) from e
    return wrapper
