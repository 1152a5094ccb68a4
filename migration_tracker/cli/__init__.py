"""
CLI module for the migration tracker package.
Provides command-line interface functionality and utilities.

The click group itself lives in ``migration_tracker.cli.main``.
"""

from .base import BaseCommand
from .config import Config
from .logging import setup_logging, get_logger

__all__ = ['BaseCommand', 'Config', 'setup_logging', 'get_logger']
