"""Processor for server (virtual machine) inventory imports."""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..db.models import Server
from ..utils.csv_normalization import coerce_text
from .base import EntityImportProcessor

@dataclass
class ServerRecord:
    """One server row after column mapping."""
    customer: str
    vm_name: Optional[str] = None
    host: Optional[str] = None
    ip_addresses: Optional[str] = None
    cores: int = 0
    memory_capacity: Optional[str] = None
    storage_used_gib: float = 0.0
    storage_provisioned_gib: float = 0.0
    assigned_engineer: Optional[str] = None
    notes: Optional[str] = None

class ServerImportProcessor(EntityImportProcessor[ServerRecord]):
    """Imports servers and links each one to its customer."""

    entity_name = 'servers'
    MODEL = Server
    CUSTOMER_FIELD = 'customer'

    # First header found in the file wins
    COLUMN_ALIASES: Dict[str, List[str]] = {
        'customer': ['Customer', 'customer', 'Customer Name', 'customer_name'],
        'vm_name': ['VM Name', 'vm_name'],
        'host': ['Host', 'host'],
        'ip_addresses': ['IP Addresses', 'ip_addresses'],
        'cores': ['Cores', 'cores'],
        'memory_capacity': ['Memory Capacity', 'memory_capacity'],
        'storage_used_gib': ['Storage Used (GiB)', 'storage_used_gib'],
        'storage_provisioned_gib': ['Storage Provisioned (GiB)', 'storage_provisioned_gib'],
        'assigned_engineer': ['Assigned Engineer', 'assigned_engineer'],
        'notes': ['Notes', 'notes'],
    }

    def build_record(self, values: Dict[str, Any], row_number: int) -> ServerRecord:
        return ServerRecord(
            customer=self.raw_customer_name(values.get('customer')),
            vm_name=coerce_text(values.get('vm_name')),
            host=coerce_text(values.get('host')),
            ip_addresses=coerce_text(values.get('ip_addresses')),
            cores=self.parse_int(values, 'cores', row_number),
            memory_capacity=coerce_text(values.get('memory_capacity')),
            storage_used_gib=self.parse_float(values, 'storage_used_gib', row_number),
            storage_provisioned_gib=self.parse_float(values, 'storage_provisioned_gib', row_number),
            assigned_engineer=coerce_text(values.get('assigned_engineer')),
            notes=coerce_text(values.get('notes')),
        )

    def to_model(self, record: ServerRecord, customer_id: int) -> Server:
        return Server(
            customer=record.customer,
            customer_id=customer_id,
            vm_name=record.vm_name,
            host=record.host,
            ip_addresses=record.ip_addresses,
            cores=record.cores,
            memory_capacity=record.memory_capacity,
            storage_used_gib=record.storage_used_gib,
            storage_provisioned_gib=record.storage_provisioned_gib,
            assigned_engineer=record.assigned_engineer,
            notes=record.notes,
        )
