"""
Entity import and export commands for the migration tracker CLI.
Reads a CSV file and imports it with customer resolution, or writes the
saved rows back out in the same column layout.
"""

from pathlib import Path
from typing import Optional

import click
import pandas as pd

from ...cli.base import BaseCommand, FileInputCommand, command_error_handler
from ...cli.config import Config
from ...processors import IMPORT_PROCESSORS

def _check_entity(entity: str) -> None:
    if entity not in IMPORT_PROCESSORS:
        raise ValueError(f"Unknown import type '{entity}', expected one of: {', '.join(IMPORT_PROCESSORS)}")

class ImportEntityCommand(FileInputCommand):
    """Command to import one CSV file of servers, voice systems or colo customers."""

    def __init__(self, config: Config, entity: str, input_file: Path, output_file: Optional[Path] = None):
        super().__init__(config, input_file, output_file)
        _check_entity(entity)
        self.entity = entity

    @command_error_handler
    def execute(self) -> None:
        """Execute the command."""
        if not self.validate():
            raise click.ClickException(f"Cannot import {self.input_file}")

        self.logger.info(f"Processing {self.input_file} as {self.entity}...")

        # Read everything as strings so names and IDs are kept verbatim.
        # Only empty cells are missing: a customer called "NA" is a name.
        df = pd.read_csv(
            self.input_file,
            encoding=self.config.csv_encoding,
            dtype=str,
            skipinitialspace=True,
            keep_default_na=False,
            na_values=['']
        )

        processor = IMPORT_PROCESSORS[self.entity](
            self.session_manager,
            matcher=self.config.build_matcher(),
            unknown_customer_name=self.config.unknown_customer_name,
            debug=self.debug
        )
        processor.process(df)
        stats = processor.get_stats()

        click.echo("\nImport Summary:")
        click.echo(f"Rows Imported: {stats['rows_imported']}")
        click.echo(f"Distinct Customer Names: {stats['distinct_names']}")
        click.echo(f"Customers Created: {stats['customers_created']}")
        click.echo(f"Exact Matches: {stats['exact_matches']}")
        click.echo(f"Fuzzy Matches: {stats['fuzzy_matches']}")
        click.echo(f"Rows Assigned to '{self.config.unknown_customer_name}': {stats['unknown_rows']}")
        if stats['warnings']:
            click.echo(f"Warnings: {stats['warnings']}")

        self.emit({
            'entity': self.entity,
            'stats': stats,
            'customers': processor.customer_map,
            'problems': processor.error_tracker.get_summary()
        }, self.output_file)

class ExportEntityCommand(BaseCommand):
    """Command to write saved rows of one entity type to CSV."""

    def __init__(self, config: Config, entity: str, output_file: Optional[Path] = None):
        super().__init__(config)
        _check_entity(entity)
        self.entity = entity
        self.output_file = output_file

    @command_error_handler
    def execute(self) -> None:
        """Execute the command."""
        processor = IMPORT_PROCESSORS[self.entity](self.session_manager, debug=self.debug)
        df = processor.export()

        if self.output_file is None:
            click.echo(df.to_csv(index=False), nl=False)
            return

        df.to_csv(self.output_file, index=False, encoding=self.config.csv_encoding)
        click.echo(f"Exported {len(df)} {processor.entity_name} rows to {self.output_file}")

__all__ = ['ImportEntityCommand', 'ExportEntityCommand']
