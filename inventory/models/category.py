import uuid

from sqlalchemy import Column, String, Text, DateTime, Uuid

from inventory.database import Base, utcnow


class Category(Base):
    """
    Product category.

    Attributes:
        id: Unique identifier for the category
        category_name: Category name (unique)
        description: Free-text description
        created_at: Timestamp when category was created
        updated_at: Timestamp when category was last updated
    """
    __tablename__ = "categories"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    category_name = Column(String(255), unique=True, nullable=False)
    description = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.category_name}')>"
