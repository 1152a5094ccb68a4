"""
Command implementations for the migration tracker CLI.
Each submodule provides specific command functionality.
"""

from .customers import ListCustomersCommand, ResolveCustomersCommand, EnsureUnknownCommand
from .imports import ImportEntityCommand, ExportEntityCommand
from .utils import TestConnectionCommand, InitDatabaseCommand

__all__ = [
    'ListCustomersCommand',
    'ResolveCustomersCommand',
    'EnsureUnknownCommand',
    'ImportEntityCommand',
    'ExportEntityCommand',
    'TestConnectionCommand',
    'InitDatabaseCommand'
]
