"""Base processor for entity CSV imports."""
from abc import ABC, abstractmethod
from dataclasses import asdict
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar, Generic
import logging
import time
import pandas as pd
from sqlalchemy.orm import Session

from ..db.session import SessionManager
from ..utils.csv_normalization import (
    normalize_dataframe_columns,
    build_column_map,
    unmapped_columns,
    coerce_int,
    coerce_float,
)
from ..utils.normalization import is_blank_name
from .error_tracker import ErrorTracker
from .errors import ImportFailed
from .matcher import CustomerMatcher
from .resolver import CustomerResolver, UNKNOWN_CUSTOMER_NAME
from .store import CustomerStore, SqlCustomerStore

class ProcessingStats:
    """Statistics for one import."""

    def __init__(self):
        """Initialize stats with default values."""
        self._stats = {
            'rows_processed': 0,
            'rows_imported': 0,
            'distinct_names': 0,
            'customers_created': 0,
            'exact_matches': 0,
            'fuzzy_matches': 0,
            'unknown_rows': 0,
            'warnings': 0,
            'total_errors': 0,
            'processing_time': 0.0,
            'started_at': datetime.utcnow(),
            'completed_at': None
        }

    def __getitem__(self, key: str) -> Any:
        """Get stat value by key."""
        return self._stats[key]

    def __setitem__(self, key: str, value: Any) -> None:
        """Set stat value by key."""
        self._stats[key] = value

    def __getattr__(self, name: str) -> Any:
        """Get stat value by attribute name."""
        try:
            return self._stats[name]
        except KeyError:
            # Create new stat with default value 0
            self._stats[name] = 0
            return 0

    def __setattr__(self, name: str, value: Any) -> None:
        """Set stat value by attribute name."""
        if name == '_stats':
            super().__setattr__(name, value)
        else:
            self._stats[name] = value

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary format."""
        result = {}
        for key, value in self._stats.items():
            if isinstance(value, datetime):
                result[key] = value.isoformat()
            elif isinstance(value, float):
                result[key] = round(value, 3)
            else:
                result[key] = value
        return result

# Typed record produced from one CSV row
R = TypeVar('R')

class EntityImportProcessor(ABC, Generic[R]):
    """Abstract base class for imports whose rows belong to a customer.

    Subclasses declare which CSV headers feed which fields (``COLUMN_ALIASES``),
    how a row becomes a typed record, and how a record becomes a model. The
    base class resolves the customer column through ``CustomerResolver`` and
    saves everything in a single transaction: either every row is imported
    with its customer, or nothing is.
    """

    entity_name = 'record'
    MODEL: Any = None
    CUSTOMER_FIELD = 'customer'
    COLUMN_ALIASES: Dict[str, List[str]] = {}
    # Written by export, skipped without a warning on import
    CUSTOMER_ID_COLUMN = 'Customer ID'

    def __init__(
        self,
        session_manager: SessionManager,
        matcher: Optional[CustomerMatcher] = None,
        unknown_customer_name: str = UNKNOWN_CUSTOMER_NAME,
        store_factory: Callable[[Session], CustomerStore] = SqlCustomerStore,
        debug: bool = False
    ):
        """Initialize processor.

        Args:
            session_manager: Database session manager
            matcher: Customer matcher; the default thresholds are used if omitted
            unknown_customer_name: Customer that rows with a blank name are assigned to
            store_factory: Builds the customer store for the import's session
            debug: Enable debug logging
        """
        self.session_manager = session_manager
        self.matcher = matcher or CustomerMatcher()
        self.unknown_customer_name = unknown_customer_name
        self.store_factory = store_factory
        self.debug = debug
        self.logger = logging.getLogger(self.__class__.__name__)
        self.stats = ProcessingStats()
        self.error_tracker = ErrorTracker()
        self.customer_map: Dict[str, int] = {}

        if self.debug:
            self.logger.debug(f"Initialized {self.__class__.__name__}")

    @abstractmethod
    def build_record(self, values: Dict[str, Any], row_number: int) -> R:
        """Build the typed record for one row.

        Args:
            values: Canonical field name -> raw cell value
            row_number: 1-based data row number, for error reporting
        """
        pass

    @abstractmethod
    def to_model(self, record: R, customer_id: int) -> Any:
        """Build the SQLAlchemy model for a record owned by ``customer_id``."""
        pass

    def validate_data(self, df: pd.DataFrame) -> Tuple[List[str], List[str]]:
        """Validate data before processing.

        Args:
            df: DataFrame with normalized column names

        Returns:
            Tuple of (critical_issues, warnings)
        """
        critical_issues = []
        warnings = []

        column_map = build_column_map(list(df.columns), self.COLUMN_ALIASES)
        if self.CUSTOMER_FIELD not in column_map:
            accepted = ' or '.join(self.COLUMN_ALIASES[self.CUSTOMER_FIELD])
            critical_issues.append(f"Missing required column: {accepted}")
            return critical_issues, warnings

        if df.empty:
            warnings.append("File contains no data rows")
            return critical_issues, warnings

        customer_column = column_map[self.CUSTOMER_FIELD]
        blank = df[df[customer_column].map(is_blank_name)]
        if not blank.empty:
            warnings.append(
                f"Found {len(blank)} rows with missing or empty customer names that will be assigned to "
                f"'{self.unknown_customer_name}'. First few row numbers: "
                f"{', '.join(str(i + 1) for i in blank.index[:3])}"
            )

        unknown = [
            col for col in unmapped_columns(list(df.columns), self.COLUMN_ALIASES)
            if col != self.CUSTOMER_ID_COLUMN
        ]
        if unknown:
            warnings.append(f"Ignoring unrecognized columns: {', '.join(unknown)}")

        return critical_issues, warnings

    def extract_rows(self, df: pd.DataFrame) -> List[Dict[str, Any]]:
        """Turn the DataFrame into dicts keyed by canonical field name."""
        column_map = build_column_map(list(df.columns), self.COLUMN_ALIASES)
        if self.debug:
            self.logger.debug(f"Column mapping: {column_map}")
        rows = []
        for _, row in df.iterrows():
            rows.append({field: row[column] for field, column in column_map.items()})
        return rows

    @staticmethod
    def raw_customer_name(value: Any) -> str:
        """Key a row's customer cell the same way the resolution memo does."""
        if value is None or (not isinstance(value, str) and pd.isna(value)):
            return ''
        return str(value)

    def parse_int(self, values: Dict[str, Any], field: str, row_number: int) -> int:
        """Integer field of a row; unparseable values count as 0 and are reported."""
        return self._parse_number(values, field, row_number, coerce_int, 0)

    def parse_float(self, values: Dict[str, Any], field: str, row_number: int) -> float:
        """Float field of a row; unparseable values count as 0 and are reported."""
        return self._parse_number(values, field, row_number, coerce_float, 0.0)

    def _parse_number(self, values, field, row_number, coerce, default):
        try:
            return coerce(values.get(field), default)
        except (TypeError, ValueError, OverflowError):
            self.error_tracker.add_error(
                'INVALID_NUMBER',
                f"Could not parse {field} value {values.get(field)!r}, using {default}",
                {'row': row_number, 'field': field}
            )
            self.stats.warnings += 1
            return default

    def process(self, data: pd.DataFrame) -> pd.DataFrame:
        """Import every row of ``data``.

        Args:
            data: Rows as read from the CSV file

        Returns:
            DataFrame of the imported records with ``id`` and ``customer_id``

        Raises:
            ImportFailed: If validation finds a critical issue or anything
                fails while resolving customers or saving rows. Nothing is
                saved in that case.
        """
        start_time = time.time()
        # Stats and problems describe the latest run only
        self.stats = ProcessingStats()
        self.error_tracker = ErrorTracker()
        self.customer_map = {}
        data = normalize_dataframe_columns(data)
        if self.debug:
            self.logger.debug(f"Starting {self.entity_name} import of {len(data)} rows")

        critical_issues, warnings = self.validate_data(data)

        if warnings:
            self.logger.warning("Validation warnings:")
            for warning in warnings:
                self.logger.warning(f"  - {warning}")
            self.stats.warnings += len(warnings)

        if critical_issues:
            self.logger.error("Data validation failed:")
            for issue in critical_issues:
                self.logger.error(f"  - {issue}")
            self.stats.total_errors += len(critical_issues)
            raise ImportFailed(self.entity_name, '; '.join(critical_issues), critical_issues)

        rows = self.extract_rows(data)
        records = [self.build_record(values, row_number) for row_number, values in enumerate(rows, 1)]
        raw_names = [self.raw_customer_name(values.get(self.CUSTOMER_FIELD)) for values in rows]
        self.stats.rows_processed = len(rows)

        try:
            with self.session_manager as session:
                resolver = CustomerResolver(
                    self.store_factory(session),
                    matcher=self.matcher,
                    unknown_customer_name=self.unknown_customer_name,
                    debug=self.debug
                )
                self.logger.info(f"Processing customer names for {self.entity_name} import...")
                customer_map = resolver.process_batch(raw_names)

                models = [
                    self.to_model(record, customer_map[raw_name])
                    for record, raw_name in zip(records, raw_names)
                ]
                session.add_all(models)
                session.flush()
                imported_ids = [model.id for model in models]
        except Exception as e:
            self.stats.total_errors += 1
            self.error_tracker.add_error('IMPORT_FAILED', str(e), {'entity': self.entity_name})
            self.logger.error(f"{self.entity_name} import rolled back: {e}")
            raise ImportFailed(self.entity_name, str(e)) from e

        self.customer_map = customer_map
        counts = resolver.get_counts()
        self.stats.distinct_names = len(customer_map)
        self.stats.customers_created = counts['created']
        self.stats.exact_matches = counts['exact']
        self.stats.fuzzy_matches = counts['fuzzy']
        self.stats.unknown_rows = sum(1 for name in raw_names if is_blank_name(name))
        self.stats.rows_imported = len(imported_ids)
        self.stats.processing_time = time.time() - start_time
        self.stats.completed_at = datetime.utcnow()

        self.logger.info(f"Imported {len(imported_ids)} {self.entity_name} rows with matched customers")
        self.error_tracker.log_summary(self.logger)

        result = pd.DataFrame([asdict(record) for record in records])
        if not result.empty:
            result['customer_id'] = [customer_map[name] for name in raw_names]
            result['id'] = imported_ids
        return result

    def export(self) -> pd.DataFrame:
        """Saved rows in the layout the import reads, oldest first.

        Each field is written under the first header its alias table lists,
        so the result can be fed back to ``process``. Booleans are written as
        Yes/No and the id of the resolved customer goes in a trailing
        ``Customer ID`` column.
        """
        headers = {field: aliases[0] for field, aliases in self.COLUMN_ALIASES.items()}
        columns = list(headers.values()) + [self.CUSTOMER_ID_COLUMN]

        with self.session_manager as session:
            rows = session.query(self.MODEL).order_by(self.MODEL.id).all()
            records = []
            for row in rows:
                record = {header: self._export_value(getattr(row, field)) for field, header in headers.items()}
                record[self.CUSTOMER_ID_COLUMN] = row.customer_id
                records.append(record)

        self.logger.info(f"Exported {len(records)} {self.entity_name} rows")
        return pd.DataFrame(records, columns=columns)

    @staticmethod
    def _export_value(value: Any) -> Any:
        if isinstance(value, bool):
            return 'Yes' if value else 'No'
        return value

    def get_stats(self) -> Dict[str, Any]:
        """Get processing statistics."""
        return self.stats.to_dict()
