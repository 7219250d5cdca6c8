import uuid

from sqlalchemy import Column, String, DateTime, Uuid

from inventory.database import Base, utcnow


class Supplier(Base):
    """Company products are bought from. Names are not unique."""
    __tablename__ = "suppliers"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    supplier_name = Column(String(255), nullable=False)
    contact_email = Column(String(255), nullable=False)
    phone_number = Column(String(50), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    def __repr__(self):
        return f"<Supplier(id={self.id}, name='{self.supplier_name}')>"
