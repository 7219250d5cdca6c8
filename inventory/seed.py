import logging

from sqlalchemy.orm import Session

from inventory.models.category import Category
from inventory.models.supplier import Supplier
from inventory.models.user import User
from inventory.utils.passwords import hash_password

logger = logging.getLogger(__name__)

DEMO_USER = {
    "username": "demo",
    "email": "demo@example.com",
    "password": "demo123",
    "full_name": "Demo User",
}

SAMPLE_CATEGORIES = [
    ("Electronics", "Electronic devices and components"),
    ("Furniture", "Office and home furniture items"),
    ("Stationery", "Office supplies and writing materials"),
    ("Books", "Educational and reference books"),
    ("Clothing", "Apparel and accessories"),
]

SAMPLE_SUPPLIERS = [
    ("TechWorld Inc", "orders@techworld.com", "+1-555-0101"),
    ("Office Pro Supply", "sales@officepro.com", "+1-555-0102"),
    ("BookMart Publishers", "contact@bookmart.com", "+1-555-0103"),
    ("Furniture Express", "info@furnitureexpress.com", "+1-555-0104"),
    ("Fashion Hub", "support@fashionhub.com", "+1-555-0105"),
]


def seed_demo_data(db: Session) -> None:
    """
    Insert the demo user and sample categories/suppliers.

    Safe to run on every startup: the user is only added when missing and
    the samples only when their table is empty.
    """
    if not db.query(User.id).filter(User.username == DEMO_USER["username"]).first():
        db.add(User(
            username=DEMO_USER["username"],
            email=DEMO_USER["email"],
            password_hash=hash_password(DEMO_USER["password"]),
            full_name=DEMO_USER["full_name"],
        ))
        logger.info("Created demo user")

    if db.query(Category.id).count() == 0:
        db.add_all(Category(category_name=name, description=description)
                   for name, description in SAMPLE_CATEGORIES)
        logger.info(f"Inserted {len(SAMPLE_CATEGORIES)} sample categories")

    if db.query(Supplier.id).count() == 0:
        db.add_all(Supplier(supplier_name=name, contact_email=email, phone_number=phone)
                   for name, email, phone in SAMPLE_SUPPLIERS)
        logger.info(f"Inserted {len(SAMPLE_SUPPLIERS)} sample suppliers")

    db.commit()
