"""Customer model for storing canonical customer identities."""
from datetime import datetime
from typing import Optional
from sqlalchemy import Column, Integer, String, Text, DateTime
from .base import Base

class Customer(Base):
    """Customer model.
    
    Names are not unique at the storage level; the resolver is what keeps
    imports from creating duplicates.
    """
    
    __tablename__ = 'customers'
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    contact_email = Column(String)
    contact_phone = Column(String)
    account_manager = Column(String)
    notes = Column(Text)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    
    @classmethod
    def create(cls, name: str, notes: Optional[str] = None) -> 'Customer':
        """Create a new customer record.
        
        Args:
            name: Display name, stored with its original casing
            notes: Optional free-text notes
        """
        now = datetime.utcnow()
        return cls(
            name=name,
            notes=notes,
            created_at=now,
            updated_at=now
        )
    
    def __repr__(self):
        """String representation."""
        return f"<Customer(id={self.id}, name='{self.name}')>"
