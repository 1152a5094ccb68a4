"""SQLAlchemy models for database tables."""

from .base import Base
from .customer import Customer
from .server import Server
from .voice_system import VoiceSystem
from .colo_customer import ColoCustomer

__all__ = [
    'Base',
    'Customer',
    'Server',
    'VoiceSystem',
    'ColoCustomer'
]
