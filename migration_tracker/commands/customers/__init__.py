"""
Customer-related commands for the migration tracker CLI.
Lists customers and runs names through the resolver by hand.
"""

from typing import List

import click

from ...cli.base import BaseCommand, command_error_handler
from ...cli.config import Config
from ...db.models import Customer
from ...processors.resolver import CustomerResolver
from ...processors.store import SqlCustomerStore
from ...utils.normalization import normalize_customer_name

class ListCustomersCommand(BaseCommand):
    """Command to list the most recently created customers."""

    def __init__(self, config: Config, limit: int = 10):
        super().__init__(config)
        self.limit = limit

    @command_error_handler
    def execute(self) -> None:
        """Execute the command."""
        with self.session_manager as session:
            total_count = session.query(Customer).count()
            customers = (
                session.query(Customer.id, Customer.name, Customer.created_at)
                .order_by(Customer.id.desc())
                .limit(self.limit)
                .all()
            )

        if not customers:
            click.echo("No customers found in database")
            return

        click.echo(f"\nMost recent {len(customers)} of {total_count} customers in database:")
        for customer in customers:
            click.echo(f"  - [{customer.id}] {customer.name}")

        self.emit({
            'total': total_count,
            'customers': [{'id': c.id, 'name': c.name, 'created_at': c.created_at} for c in customers]
        })

class ResolveCustomersCommand(BaseCommand):
    """Command to resolve customer names the same way an import would.

    With ``dry_run`` the resolution runs inside a transaction that is rolled
    back, so the output shows exactly what an import would do without
    creating anything.
    """

    def __init__(self, config: Config, names: List[str], dry_run: bool = False):
        super().__init__(config)
        self.names = names
        self.dry_run = dry_run

    @command_error_handler
    def execute(self) -> None:
        """Execute the command."""
        session = self.session_manager.get_session()
        try:
            resolver = CustomerResolver(
                SqlCustomerStore(session),
                matcher=self.config.build_matcher(),
                unknown_customer_name=self.config.unknown_customer_name,
                debug=self.debug
            )
            customer_map = resolver.process_batch(self.names)
            if self.dry_run:
                session.rollback()
            else:
                session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

        results = []
        for raw_name, customer_id in customer_map.items():
            match = resolver.last_results.get(raw_name)
            if not normalize_customer_name(raw_name):
                outcome = 'unknown'
            elif match is not None and match.matched:
                outcome = match.method
            else:
                outcome = 'created'
            results.append({
                'name': raw_name,
                'customer_id': customer_id,
                'outcome': outcome,
                'matched_name': match.matched_name if match is not None and match.matched else None,
                'score': match.score if match is not None else None
            })

        header = "Dry run, nothing saved" if self.dry_run else "Resolved customers"
        click.echo(f"\n{header}:")
        for result in results:
            line = f"  '{result['name']}' -> {result['customer_id']} ({result['outcome']}"
            if result['outcome'] == 'fuzzy':
                line += f" to '{result['matched_name']}', score {result['score']:.3f}"
            click.echo(line + ")")

        self.emit({'dry_run': self.dry_run, 'results': results, 'counts': resolver.get_counts()})

class EnsureUnknownCommand(BaseCommand):
    """Command to create the sentinel customer for blank names ahead of imports."""

    @command_error_handler
    def execute(self) -> None:
        """Execute the command."""
        with self.session_manager as session:
            resolver = CustomerResolver(
                SqlCustomerStore(session),
                unknown_customer_name=self.config.unknown_customer_name
            )
            unknown_id = resolver.ensure_unknown_customer()
        click.echo(f"'{self.config.unknown_customer_name}' customer id: {unknown_id}")

__all__ = ['ListCustomersCommand', 'ResolveCustomersCommand', 'EnsureUnknownCommand']
