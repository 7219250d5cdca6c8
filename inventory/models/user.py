import uuid

from sqlalchemy import Column, String, DateTime, Uuid

from inventory.database import Base, utcnow


class User(Base):
    """
    Account allowed to use the inventory API.

    Attributes:
        id: Unique identifier for the user
        username: Login name (unique)
        email: Contact email (unique)
        password_hash: bcrypt hash of the password, never returned by the API
        full_name: Display name
        created_at: Timestamp when the user registered
    """
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    username = Column(String(255), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    full_name = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}')>"
