"""Shared test fixtures and utilities."""

import csv
from pathlib import Path
from typing import Iterable, List, Optional

import pytest

from ..db.models import Customer
from ..db.session import SessionManager
from ..processors.errors import StorageUnavailable
from ..processors.store import CustomerRef

class InMemoryCustomerStore:
    """CustomerStore keeping customers in a list, counting calls."""

    def __init__(self, names: Iterable[str] = ()):
        self.customers: List[CustomerRef] = [CustomerRef(i, name) for i, name in enumerate(names, 1)]
        self.list_calls = 0
        self.create_calls = 0

    def list_customers(self) -> List[CustomerRef]:
        self.list_calls += 1
        return list(self.customers)

    def find_customer_by_exact_name(self, name: str) -> Optional[int]:
        for customer in self.customers:
            if customer.name.lower() == name.lower():
                return customer.id
        return None

    def create_customer(self, name: str, notes: Optional[str] = None) -> int:
        self.create_calls += 1
        customer = CustomerRef(len(self.customers) + 1, name)
        self.customers.append(customer)
        return customer.id

    def names(self) -> List[str]:
        return [customer.name for customer in self.customers]

class FailingCustomerStore:
    """Wraps another store and fails once ``fail_after`` customers were created."""

    def __init__(self, store, fail_after: int = 0):
        self.store = store
        self.fail_after = fail_after
        self.created = 0

    def list_customers(self):
        return self.store.list_customers()

    def find_customer_by_exact_name(self, name):
        return self.store.find_customer_by_exact_name(name)

    def create_customer(self, name, notes=None):
        if self.created >= self.fail_after:
            raise StorageUnavailable('create', 'connection reset by peer')
        self.created += 1
        return self.store.create_customer(name, notes=notes)

@pytest.fixture
def store():
    """Empty in-memory customer store."""
    return InMemoryCustomerStore()

@pytest.fixture
def session_manager():
    """Session manager over a fresh in-memory SQLite database."""
    manager = SessionManager('sqlite:///:memory:')
    manager.create_schema()
    yield manager
    manager.engine.dispose()

@pytest.fixture
def populated_session_manager(session_manager):
    """Database already holding a few customers."""
    with session_manager as session:
        session.add_all([
            Customer.create('Acme Corporation'),
            Customer.create('Beta LLC'),
            Customer.create('Unknown', notes='Default customer for unassigned items'),
        ])
    return session_manager

def customer_names(session_manager) -> List[str]:
    """Names of all stored customers in id order."""
    with session_manager as session:
        return [c.name for c in session.query(Customer).order_by(Customer.id)]

def create_test_csv(directory: Path, name: str, fieldnames: List[str], rows: List[dict]) -> Path:
    """Write a CSV file with test data."""
    path = directory / name
    with open(path, 'w', newline='') as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)
    return path

TRACKER_ENV_VARS = (
    'DATABASE_URL', 'FUZZY_SEARCH_THRESHOLD', 'FUZZY_ACCEPT_THRESHOLD', 'UNKNOWN_CUSTOMER_NAME',
    'CSV_ENCODING', 'LOG_LEVEL', 'LOG_DIR', 'OUTPUT_FORMAT',
)

@pytest.fixture
def clean_env(monkeypatch):
    """Unset tracker settings; anything a test loads from a .env file is removed afterwards."""
    for name in TRACKER_ENV_VARS:
        # setenv first so teardown deletes the variable even if load_dotenv sets it
        monkeypatch.setenv(name, '')
        monkeypatch.delenv(name)
    return monkeypatch
