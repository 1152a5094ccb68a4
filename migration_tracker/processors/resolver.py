"""Resolution of raw customer names into customer ids.

Every entity import funnels its customer column through
``CustomerResolver.process_batch``. Each distinct raw string in the batch
is resolved once: blank names go to the "Unknown" customer, names matching
an existing customer reuse its id, and anything else creates a customer.

The resolver keeps its own snapshot of the customer table for the length
of a batch and appends every customer it creates, so a name later in the
same file can match a customer created a few lines earlier without going
back to storage.
"""
from collections import defaultdict
import logging
from typing import Dict, Iterable, List, Optional

from ..utils.normalization import normalize_customer_name
from .matcher import CustomerMatcher, MatchResult
from .store import CustomerRef, CustomerStore

UNKNOWN_CUSTOMER_NAME = 'Unknown'
UNKNOWN_CUSTOMER_NOTES = 'Default customer for unassigned items'


class CustomerResolver:
    """Turns raw customer names into durable customer ids."""

    def __init__(
        self,
        store: CustomerStore,
        matcher: Optional[CustomerMatcher] = None,
        unknown_customer_name: str = UNKNOWN_CUSTOMER_NAME,
        debug: bool = False
    ):
        """Initialize the resolver.

        Args:
            store: Customer storage the resolver reads from and creates in
            matcher: Matcher deciding whether a name is already known
            unknown_customer_name: Name of the sentinel customer for blank names
            debug: Enable debug logging
        """
        self.store = store
        self.matcher = matcher or CustomerMatcher()
        self.unknown_customer_name = unknown_customer_name
        self.debug = debug
        self.logger = logging.getLogger(self.__class__.__name__)
        self.counts: Dict[str, int] = defaultdict(int)
        # Keyed by raw name, as process_batch keys its result
        self.last_results: Dict[str, MatchResult] = {}
        self._unknown_id: Optional[int] = None
        self._snapshot: Optional[List[CustomerRef]] = None

    def ensure_unknown_customer(self) -> int:
        """Return the id of the "Unknown" customer, creating it if needed.

        Looked up by exact name only; fuzzy matching never applies here.
        """
        if self._unknown_id is not None:
            return self._unknown_id

        unknown_id = self.store.find_customer_by_exact_name(self.unknown_customer_name)
        if unknown_id is None:
            unknown_id = self.store.create_customer(
                self.unknown_customer_name,
                notes=UNKNOWN_CUSTOMER_NOTES
            )
            self._remember(CustomerRef(unknown_id, self.unknown_customer_name))
            self.counts['created'] += 1
            self.logger.info(f'Created "{self.unknown_customer_name}" customer for unassigned items')

        self._unknown_id = unknown_id
        return unknown_id

    def resolve_one(self, raw_name: Optional[str]) -> int:
        """Resolve a single raw name to a customer id.

        Import adapters go through ``process_batch``; this is the per-name
        step it is built from.
        """
        name = normalize_customer_name(raw_name)
        if not name:
            self.counts['unknown'] += 1
            return self.ensure_unknown_customer()

        customers = self._snapshot if self._snapshot is not None else self.store.list_customers()
        result = self.matcher.match(name, customers)
        self.last_results['' if raw_name is None else raw_name] = result

        if result.matched:
            self.counts[result.method] += 1
            if self.debug:
                self.logger.debug(f"Resolved '{name}' to customer {result.customer_id} ({result.method})")
            return result.customer_id

        self.logger.info(f'No match found for "{name}", creating new customer')
        customer_id = self.store.create_customer(name)
        self._remember(CustomerRef(customer_id, name))
        self.counts['created'] += 1
        return customer_id

    def process_batch(self, raw_names: Iterable[Optional[str]]) -> Dict[str, int]:
        """Resolve every distinct raw name of an import.

        Args:
            raw_names: Customer column of the import, duplicates included.
                None is treated as the empty string.

        Returns:
            Mapping of raw name to customer id, with one entry per distinct
            raw string. Callers look rows up in it rather than resolving
            rows one by one.

        Raises:
            StorageUnavailable: If the store fails; the remaining names are
                not resolved.
        """
        memo: Dict[str, int] = {}
        unique_names = list(dict.fromkeys('' if name is None else name for name in raw_names))
        if self.debug:
            self.logger.debug(f"Resolving {len(unique_names)} distinct customer names")

        self._snapshot = self.store.list_customers()
        try:
            for raw_name in unique_names:
                memo[raw_name] = self.resolve_one(raw_name)
        finally:
            self._snapshot = None

        return memo

    def _remember(self, customer: CustomerRef) -> None:
        """Make a newly created customer visible to the rest of the batch."""
        if self._snapshot is not None:
            self._snapshot.append(customer)

    def get_counts(self) -> Dict[str, int]:
        """Resolution counts by outcome: exact, fuzzy, created, unknown."""
        return {key: self.counts.get(key, 0) for key in ('exact', 'fuzzy', 'created', 'unknown')}
