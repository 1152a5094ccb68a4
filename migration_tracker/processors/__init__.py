"""
Processors for customer resolution and entity CSV imports.
"""

from .errors import MigrationTrackerError, StorageUnavailable, ImportFailed
from .store import CustomerRef, CustomerStore, SqlCustomerStore
from .matcher import CustomerMatcher, MatchResult, levenshtein_score
from .resolver import CustomerResolver
from .server import ServerImportProcessor
from .voice_system import VoiceSystemImportProcessor
from .colo_customer import ColoCustomerImportProcessor

IMPORT_PROCESSORS = {
    'servers': ServerImportProcessor,
    'voice-systems': VoiceSystemImportProcessor,
    'colo-customers': ColoCustomerImportProcessor,
}

__all__ = [
    'MigrationTrackerError',
    'StorageUnavailable',
    'ImportFailed',
    'CustomerRef',
    'CustomerStore',
    'SqlCustomerStore',
    'CustomerMatcher',
    'MatchResult',
    'levenshtein_score',
    'CustomerResolver',
    'ServerImportProcessor',
    'VoiceSystemImportProcessor',
    'ColoCustomerImportProcessor',
    'IMPORT_PROCESSORS'
]
