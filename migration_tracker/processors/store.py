"""Storage access for customer resolution.

The resolver only needs three operations from storage. They are described
by ``CustomerStore`` so that tests and alternative backends can stand in
for the SQLAlchemy implementation.
"""
import logging
from typing import List, NamedTuple, Optional, Protocol

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..db.models import Customer
from .errors import StorageUnavailable

logger = logging.getLogger(__name__)


class CustomerRef(NamedTuple):
    """Id and name of a stored customer."""
    id: int
    name: str


class CustomerStore(Protocol):
    """Operations the resolver needs from the customer table."""

    def list_customers(self) -> List[CustomerRef]:
        """All customers, ordered by id."""
        ...

    def find_customer_by_exact_name(self, name: str) -> Optional[int]:
        """Id of a customer whose name equals ``name`` ignoring case."""
        ...

    def create_customer(self, name: str, notes: Optional[str] = None) -> int:
        """Insert a customer and return its new id."""
        ...


class SqlCustomerStore:
    """``CustomerStore`` backed by a SQLAlchemy session.

    Created rows are flushed but not committed; the caller owns the
    transaction so an import can be rolled back as a whole.
    """

    def __init__(self, session: Session):
        self.session = session

    def list_customers(self) -> List[CustomerRef]:
        try:
            rows = self.session.query(Customer.id, Customer.name).order_by(Customer.id).all()
        except SQLAlchemyError as e:
            raise StorageUnavailable('read', str(e)) from e
        return [CustomerRef(row.id, row.name) for row in rows]

    def find_customer_by_exact_name(self, name: str) -> Optional[int]:
        try:
            row = (
                self.session.query(Customer.id)
                .filter(func.lower(Customer.name) == name.lower())
                .order_by(Customer.id)
                .first()
            )
        except SQLAlchemyError as e:
            raise StorageUnavailable('read', str(e)) from e
        return row.id if row else None

    def create_customer(self, name: str, notes: Optional[str] = None) -> int:
        customer = Customer.create(name, notes=notes)
        try:
            self.session.add(customer)
            self.session.flush()
        except SQLAlchemyError as e:
            raise StorageUnavailable('create', str(e)) from e
        logger.info(f"Created new customer: {name} (ID: {customer.id})")
        return customer.id
