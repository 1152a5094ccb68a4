"""Colocation customer model."""
from datetime import datetime
from sqlalchemy import Column, Integer, String, Float, Boolean, Date, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base

class ColoCustomer(Base):
    """Colocation footprint (rack and cabinet) belonging to a customer."""
    
    __tablename__ = 'colo_customers'
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    customer_name = Column(String)
    customer_id = Column(Integer, ForeignKey('customers.id'), nullable=False)
    rack_location = Column(String)
    new_cabinet_number = Column(String)
    equipment_count = Column(Integer, default=0)
    power_usage = Column(Float, default=0)
    assigned_engineer = Column(String)
    migration_scheduled = Column(Boolean, default=False)
    migration_date = Column(Date)
    migration_completed = Column(Boolean, default=False)
    notes = Column(Text)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    owner = relationship("Customer")
    
    def __repr__(self):
        return f"<ColoCustomer(customer_name='{self.customer_name}', rack_location='{self.rack_location}')>"
