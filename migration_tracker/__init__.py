"""Data-center migration tracker: customer resolution and inventory imports."""

from .processors import (
    CustomerMatcher,
    CustomerResolver,
    SqlCustomerStore,
    ImportFailed,
    StorageUnavailable,
)
from .db.session import SessionManager

__all__ = [
    'CustomerMatcher',
    'CustomerResolver',
    'SqlCustomerStore',
    'ImportFailed',
    'StorageUnavailable',
    'SessionManager'
]
