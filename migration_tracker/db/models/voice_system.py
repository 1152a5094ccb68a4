"""Voice system model."""
from datetime import datetime
from sqlalchemy import Column, Integer, String, Boolean, Date, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base

class VoiceSystem(Base):
    """Hosted voice system (PBX) being migrated."""
    
    __tablename__ = 'voice_systems'
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    customer = Column(String)
    customer_id = Column(Integer, ForeignKey('customers.id'), nullable=False)
    vm_name = Column(String)
    system_type = Column(String)
    extension_count = Column(Integer, default=0)
    assigned_engineer = Column(String)
    cutover_completed = Column(Boolean, default=False)
    cutover_date = Column(Date)
    notes = Column(Text)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    owner = relationship("Customer")
    
    def __repr__(self):
        return f"<VoiceSystem(vm_name='{self.vm_name}', system_type='{self.system_type}')>"
