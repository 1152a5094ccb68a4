"""
Core CLI implementation for the migration tracker package.
"""

import click
from pathlib import Path

from .config import Config
from .logging import setup_logging, get_logger
from ..commands.customers import ListCustomersCommand, ResolveCustomersCommand, EnsureUnknownCommand
from ..commands.imports import ImportEntityCommand, ExportEntityCommand
from ..commands.utils import TestConnectionCommand, InitDatabaseCommand

@click.group()
@click.option('--debug', is_flag=True, help='Enable detailed debug output')
@click.option('--env-file', type=click.Path(exists=True, dir_okay=False, path_type=Path), help='Load settings from this .env file')
@click.pass_context
def cli(ctx, debug: bool, env_file: Path | None):
    """Data-center migration tracker"""
    # Store debug flag in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj['debug'] = debug

    # Initialize config and store in context
    try:
        config = Config.from_env(env_file)
        config.validate()
    except ValueError as e:
        click.secho(f"Error initializing configuration: {str(e)}", fg='red', err=True)
        ctx.exit(1)
    ctx.obj['config'] = config

    setup_logging(debug=debug, log_level=config.log_level, log_file=config.log_file)

    logger = get_logger('cli')
    if debug:
        logger.debug("Debug mode enabled")
        logger.debug(f"Using database: {config.database_url}")

@cli.command('init-db')
@click.pass_obj
def init_db(obj):
    """Create the database tables"""
    InitDatabaseCommand(obj['config']).execute()

@cli.command('test-connection')
@click.pass_obj
def test_connection(obj):
    """Test database connectivity"""
    TestConnectionCommand(obj['config']).execute()

# Customer Commands Group
@cli.group()
def customers():
    """Customer management commands"""
    pass

@customers.command('list')
@click.option('--limit', type=int, default=10, help='Number of most recent customers to show')
@click.pass_obj
def list_customers(obj, limit: int):
    """List most recent customers in the database."""
    ListCustomersCommand(obj['config'], limit).execute()

@customers.command('resolve')
@click.argument('names', nargs=-1, required=True)
@click.option('--dry-run', is_flag=True, help='Show what would happen without creating customers')
@click.pass_obj
def resolve_customers(obj, names, dry_run: bool):
    """Resolve customer NAMES to ids as an import would."""
    ResolveCustomersCommand(obj['config'], list(names), dry_run).execute()

@customers.command('ensure-unknown')
@click.pass_obj
def ensure_unknown(obj):
    """Create the customer that blank names are assigned to."""
    EnsureUnknownCommand(obj['config']).execute()

# Import Commands Group
@cli.group('import')
def import_group():
    """Import inventory CSV files"""
    pass

def _register_import(entity: str, help_text: str):
    @import_group.command(entity, help=help_text)
    @click.argument('file', type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path))
    @click.option('--output', type=click.Path(file_okay=True, dir_okay=False, path_type=Path), help='Save import results to file')
    @click.pass_obj
    def command(obj, file: Path, output: Path | None):
        ImportEntityCommand(obj['config'], entity, file, output).execute()
    return command

import_servers = _register_import('servers', 'Import servers from a CSV FILE.')
import_voice_systems = _register_import('voice-systems', 'Import voice systems from a CSV FILE.')
import_colo_customers = _register_import('colo-customers', 'Import colocation customers from a CSV FILE.')

# Export Commands Group
@cli.group('export')
def export_group():
    """Export saved inventory to CSV"""
    pass

def _register_export(entity: str, help_text: str):
    @export_group.command(entity, help=help_text)
    @click.option('--output', type=click.Path(file_okay=True, dir_okay=False, path_type=Path), help='Write the CSV to this file instead of stdout')
    @click.pass_obj
    def command(obj, output: Path | None):
        ExportEntityCommand(obj['config'], entity, output).execute()
    return command

export_servers = _register_export('servers', 'Export servers as CSV.')
export_voice_systems = _register_export('voice-systems', 'Export voice systems as CSV.')
export_colo_customers = _register_export('colo-customers', 'Export colocation customers as CSV.')
