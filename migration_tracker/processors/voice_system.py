"""Processor for voice system imports."""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..db.models import VoiceSystem
from ..utils.csv_normalization import coerce_text, coerce_bool
from .base import EntityImportProcessor

@dataclass
class VoiceSystemRecord:
    customer: str
    vm_name: Optional[str] = None
    system_type: Optional[str] = None
    extension_count: int = 0
    assigned_engineer: Optional[str] = None
    cutover_completed: bool = False
    notes: Optional[str] = None

class VoiceSystemImportProcessor(EntityImportProcessor[VoiceSystemRecord]):
    """Imports hosted voice systems."""

    entity_name = 'voice systems'
    MODEL = VoiceSystem
    CUSTOMER_FIELD = 'customer'

    COLUMN_ALIASES: Dict[str, List[str]] = {
        'customer': ['Customer', 'customer', 'Customer Name', 'customer_name'],
        'vm_name': ['VM Name', 'vm_name'],
        'system_type': ['System Type', 'system_type'],
        'extension_count': ['Extension Count', 'extension_count', 'Extensions'],
        'assigned_engineer': ['Assigned Engineer', 'assigned_engineer'],
        'cutover_completed': ['Cutover Completed', 'cutover_completed'],
        'notes': ['Notes', 'notes'],
    }

    def build_record(self, values: Dict[str, Any], row_number: int) -> VoiceSystemRecord:
        return VoiceSystemRecord(
            customer=self.raw_customer_name(values.get('customer')),
            vm_name=coerce_text(values.get('vm_name')),
            system_type=coerce_text(values.get('system_type')),
            extension_count=self.parse_int(values, 'extension_count', row_number),
            assigned_engineer=coerce_text(values.get('assigned_engineer')),
            cutover_completed=coerce_bool(values.get('cutover_completed')),
            notes=coerce_text(values.get('notes')),
        )

    def to_model(self, record: VoiceSystemRecord, customer_id: int) -> VoiceSystem:
        return VoiceSystem(
            customer=record.customer,
            customer_id=customer_id,
            vm_name=record.vm_name,
            system_type=record.system_type,
            extension_count=record.extension_count,
            assigned_engineer=record.assigned_engineer,
            cutover_completed=record.cutover_completed,
            notes=record.notes,
        )
