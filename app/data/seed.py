# app/data/seed.py
from decimal import Decimal

from sqlalchemy.orm import Session, sessionmaker

from app.data.models.product import ProductModel
from app.utils.logging import get_logger

logger = get_logger(__name__)

SEED_PRODUCTS = [
    {"id": 100, "name": "Widget A", "description": "Premium widget for testing", "price": Decimal("19.99")},
    {"id": 102, "name": "Gadget B", "description": "Advanced gadget for testing", "price": Decimal("45.50")},
    {"id": 103, "name": "Tool C", "description": "Professional tool for testing", "price": Decimal("99.99")},
]


def seed(session_factory: sessionmaker[Session]) -> int:
    """Insert the fixture products when the table is empty. Returns rows inserted."""
    db = session_factory()
    try:
        # not forcing: only seed if empty
        if db.query(ProductModel).first():
            logger.info("Product table already populated, skipping seed")
            return 0
        db.add_all([ProductModel(**row) for row in SEED_PRODUCTS])
        db.commit()
        logger.info(f"Seeded {len(SEED_PRODUCTS)} products")
        return len(SEED_PRODUCTS)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
