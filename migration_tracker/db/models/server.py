"""Server model for virtual machines being migrated."""
from datetime import datetime
from sqlalchemy import Column, Integer, String, Float, Boolean, Date, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base

class Server(Base):
    """Server model."""
    
    __tablename__ = 'servers'
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    customer = Column(String)  # Name as it appeared in the import
    customer_id = Column(Integer, ForeignKey('customers.id'), nullable=False)
    vm_name = Column(String)
    host = Column(String)
    ip_addresses = Column(String)
    cores = Column(Integer, default=0)
    memory_capacity = Column(String)
    storage_used_gib = Column(Float, default=0)
    storage_provisioned_gib = Column(Float, default=0)
    assigned_engineer = Column(String)
    cutover_scheduled = Column(Boolean, default=False)
    cutover_scheduled_date = Column(Date)
    cutover_completed = Column(Boolean, default=False)
    cutover_completed_date = Column(Date)
    customer_notified_scheduled = Column(Boolean, default=False)
    customer_notified_successful_cutover = Column(Boolean, default=False)
    notes = Column(Text)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    owner = relationship("Customer")
    
    def __repr__(self):
        """String representation."""
        return f"<Server(vm_name='{self.vm_name}', customer_id={self.customer_id})>"
