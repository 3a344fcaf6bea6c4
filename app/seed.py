# python -m app.seed
from loguru import logger
from sqlalchemy.orm import Session

from app.customer import models as customer_models  # noqa: F401
from app.database import Base, SessionLocal, engine
from app.menu_item import models as menu_item_models  # noqa: F401
from app.security.passwords import hash_password
from app.vendor.repository import VendorRepository

DEMO_PASSWORD = "password123"

DEMO_VENDORS = [
    {
        "name": "Pizza Palace",
        "email": "pizza@palace.com",
        "address": "123 Main Street, New York, NY 10001",
        "phone": "555-0101",
    },
    {
        "name": "Burger Barn",
        "email": "info@burgerbarn.com",
        "address": "456 Oak Avenue, Los Angeles, CA 90001",
        "phone": "555-0202",
    },
    {
        "name": "Sushi Express",
        "email": "hello@sushiexpress.com",
        "address": "789 Pine Road, San Francisco, CA 94102",
        "phone": "555-0303",
    },
    {
        "name": "Taco Fiesta",
        "email": "contact@tacofiesta.com",
        "address": "321 Elm Street, Austin, TX 78701",
        "phone": "555-0404",
    },
    {
        "name": "Pasta Paradise",
        "email": "info@pastaparadise.com",
        "address": "654 Maple Drive, Chicago, IL 60601",
        "phone": "555-0505",
    },
]


def seed_vendors(db: Session) -> int:
    """Insert the demo vendors unless any vendor already exists. Returns rows added."""
    repository = VendorRepository(db)
    if repository.count() > 0:
        logger.info("Vendors already present, skipping seed")
        return 0

    hashed = hash_password(DEMO_PASSWORD)
    for vendor in DEMO_VENDORS:
        repository.create({**vendor, "password": hashed})
    logger.info(f"Seeded {len(DEMO_VENDORS)} vendors")
    return len(DEMO_VENDORS)


if __name__ == "__main__":
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_vendors(db)
    finally:
        db.close()
