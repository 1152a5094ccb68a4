"""Processor for colocation customer imports.

Colo sheets name the customer column "Customer Name" rather than
"Customer", and the record keeps it as ``customer_name``.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..db.models import ColoCustomer
from ..utils.csv_normalization import coerce_text, coerce_bool
from .base import EntityImportProcessor

@dataclass
class ColoCustomerRecord:
    customer_name: str
    rack_location: Optional[str] = None
    new_cabinet_number: Optional[str] = None
    equipment_count: int = 0
    power_usage: float = 0.0
    assigned_engineer: Optional[str] = None
    migration_completed: bool = False
    notes: Optional[str] = None

class ColoCustomerImportProcessor(EntityImportProcessor[ColoCustomerRecord]):
    """Imports colocation footprints."""

    entity_name = 'colo customers'
    MODEL = ColoCustomer
    CUSTOMER_FIELD = 'customer_name'

    COLUMN_ALIASES: Dict[str, List[str]] = {
        'customer_name': ['Customer Name', 'customer_name', 'Customer', 'customer'],
        'rack_location': ['Rack Location', 'rack_location'],
        'new_cabinet_number': ['New Cabinet Number', 'new_cabinet_number', 'Cabinet'],
        'equipment_count': ['Equipment Count', 'equipment_count'],
        'power_usage': ['Power Usage', 'power_usage'],
        'assigned_engineer': ['Assigned Engineer', 'assigned_engineer'],
        'migration_completed': ['Migration Completed', 'migration_completed'],
        'notes': ['Notes', 'notes'],
    }

    def build_record(self, values: Dict[str, Any], row_number: int) -> ColoCustomerRecord:
        return ColoCustomerRecord(
            customer_name=self.raw_customer_name(values.get('customer_name')),
            rack_location=coerce_text(values.get('rack_location')),
            new_cabinet_number=coerce_text(values.get('new_cabinet_number')),
            equipment_count=self.parse_int(values, 'equipment_count', row_number),
            power_usage=self.parse_float(values, 'power_usage', row_number),
            assigned_engineer=coerce_text(values.get('assigned_engineer')),
            migration_completed=coerce_bool(values.get('migration_completed')),
            notes=coerce_text(values.get('notes')),
        )

    def to_model(self, record: ColoCustomerRecord, customer_id: int) -> ColoCustomer:
        return ColoCustomer(
            customer_name=record.customer_name,
            customer_id=customer_id,
            rack_location=record.rack_location,
            new_cabinet_number=record.new_cabinet_number,
            equipment_count=record.equipment_count,
            power_usage=record.power_usage,
            assigned_engineer=record.assigned_engineer,
            migration_completed=record.migration_completed,
            notes=record.notes,
        )
